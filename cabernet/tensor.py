"""Tensors that carry gradients, expression nodes and the graph buffer."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .array import Array


class Tensor(Array):
    """A float array that may own or share a gradient.

    Leaf tensors that require a gradient own one of their own shape; non-leaf
    tensors start without one.
    """

    dtype = np.float32

    def __init__(
        self,
        shape: Iterable[int] | None = None,
        requires_gradient: bool = False,
        is_leaf: bool = True,
    ) -> None:
        super().__init__(shape)
        self._is_leaf = bool(is_leaf)
        self._requires_gradient = bool(requires_gradient) if shape is not None else False
        self._gradient: Tensor | None = None
        if self._is_leaf and self._requires_gradient:
            self._gradient = Tensor(self.shape, False, False)

    @property
    def is_leaf(self) -> bool:
        return self._is_leaf

    @property
    def gradient(self) -> Tensor | None:
        return self._gradient

    @property
    def requires_gradient(self) -> bool:
        return self._requires_gradient

    @requires_gradient.setter
    def requires_gradient(self, status: bool) -> None:
        status = bool(status)
        if not self._requires_gradient and status:
            self._requires_gradient = True
            if self._is_leaf:
                self._gradient = Tensor(self.shape, False, False)
        elif self._requires_gradient and not status:
            self._requires_gradient = False
            self._gradient = None

    def copy(self, other: Tensor) -> None:
        """Copy elements, gradient requirement and leaf status from ``other``.

        Between two leaves the gradient is copied; otherwise it is shared.
        """
        self.reshape(other.shape)
        self._storage = np.array(other.data, dtype=self.dtype, copy=True)
        self._requires_gradient = other.requires_gradient

        if self._requires_gradient:
            if other.is_leaf and self._is_leaf:
                source = other.gradient
                if source is None:
                    self._gradient = None
                elif self._gradient is None:
                    duplicate = Tensor(source.shape, False, False)
                    duplicate.copy(source)
                    self._gradient = duplicate
                else:
                    self._gradient.copy(source)
            else:
                self._gradient = other.gradient
        else:
            self._gradient = None

        self._is_leaf = other.is_leaf

    def move(self, other: Tensor) -> None:
        """Take everything from ``other``, leaving it empty and without a gradient."""
        if other is self:
            return
        self.reshape(other.shape)
        self._storage = other._storage
        other.clear()
        self._is_leaf = other.is_leaf
        self._requires_gradient = other.requires_gradient
        self._gradient = other._gradient
        other._gradient = None

    def forward(self) -> Tensor:
        """Evaluate the tensor; a plain tensor is its own value."""
        return self

    def backward(self, gradient: Tensor) -> None:
        """Accumulate ``gradient`` into this tensor's gradient."""
        if self._gradient is None:
            raise RuntimeError("tensor has no gradient to accumulate into")
        self._gradient.add(gradient)

    def _check_same_shape(self, other: Array) -> None:
        if tuple(other.shape) != self.shape:
            raise ValueError(f"shape mismatch: {self.shape} and {tuple(other.shape)}")

    def add(self, other: Array) -> None:
        """Add ``other`` element by element, in place."""
        self._check_same_shape(other)
        np.add(self._storage, np.asarray(other.data, dtype=self.dtype), out=self._storage)

    def multiply(self, other: Array) -> None:
        """Multiply by ``other`` element by element, in place."""
        self._check_same_shape(other)
        np.multiply(self._storage, np.asarray(other.data, dtype=self.dtype), out=self._storage)


class Expression(Tensor):
    """Base for non-leaf nodes of the computational graph."""

    def __init__(self, shape: Iterable[int] | None = None, requires_gradient: bool = False) -> None:
        super().__init__(shape, requires_gradient, False)


class Graph:
    """Process-wide buffer that keeps graph tensors alive until flushed."""

    _buffer: list[Tensor] = []

    @classmethod
    def add(cls, tensor: Tensor) -> None:
        cls._buffer.append(tensor)

    @classmethod
    def flush(cls) -> None:
        cls._buffer.clear()

    @classmethod
    def tensors(cls) -> tuple[Tensor, ...]:
        return tuple(cls._buffer)