"""Contiguous n-dimensional storage described by a shape."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import prod

import numpy as np

Shape = tuple[int, ...]


def _normalise(shape: Iterable[int]) -> tuple[Shape, int]:
    dims = tuple(int(dimension) for dimension in shape)
    if any(dimension < 0 for dimension in dims):
        raise ValueError(f"negative dimension in shape {dims}")
    return dims, prod(dims)


class Array:
    """A flat block of scalars viewed through a shape.

    ``Array()`` is empty: no dimensions and no elements. ``Array(())`` is a
    scalar-shaped array holding one element.
    """

    dtype = np.float32

    def __init__(self, shape: Iterable[int] | None = None) -> None:
        if shape is None:
            self._shape: Shape = ()
            self._size = 0
        else:
            self._shape, self._size = _normalise(shape)
        self._storage = np.zeros(self._size, dtype=self.dtype)

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def size(self) -> int:
        return self._size

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def data(self) -> np.ndarray:
        """The flat storage; writes through it change the array."""
        return self._storage

    def _resize_storage(self, size: int) -> None:
        if size == len(self._storage):
            return
        resized = np.zeros(size, dtype=self.dtype)
        kept = min(size, len(self._storage))
        resized[:kept] = self._storage[:kept]
        self._storage = resized

    def reshape(self, shape: Iterable[int]) -> None:
        """Give the array a new shape, keeping leading elements and zero-filling the rest."""
        self._shape, self._size = _normalise(shape)
        self._resize_storage(self._size)

    def melt(self) -> None:
        """Flatten the shape to a single dimension."""
        self._shape = (self._size,)

    def collapse(self) -> None:
        """Drop the shape and the size; the storage is left as it is."""
        self._size = 0
        self._shape = ()

    def copy(self, other: Array) -> None:
        """Take the shape and a copy of the elements of ``other``."""
        self.reshape(other.shape)
        self._storage = np.array(other._storage, dtype=self.dtype, copy=True)

    def move(self, other: Array) -> None:
        """Take the shape and the storage of ``other``, leaving it empty."""
        if other is self:
            return
        self.reshape(other.shape)
        other.collapse()
        self._storage = other._storage
        other._storage = np.zeros(0, dtype=other.dtype)

    def clear(self) -> None:
        """Release all elements and the shape."""
        self._storage = np.zeros(0, dtype=self.dtype)
        self.collapse()

    def __iter__(self) -> Iterator:
        return iter(self._storage.tolist())

    def __len__(self) -> int:
        return len(self._storage)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={self._shape}, data={self._storage.tolist()})"