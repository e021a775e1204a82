"""Loss functions over batched network outputs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

import numpy as np

from .tensor import Tensor


class Criterion(ABC):
    """A loss over ``output`` of shape ``(batch, ...)`` against integer ``targets``."""

    def __init__(self, output: Tensor, targets: Iterable[int]) -> None:
        self.output = output
        self.targets = targets
        self.gradient = Tensor(output.shape, False)

    @property
    def batch_size(self) -> int:
        shape = self.output.shape
        if not shape:
            raise ValueError("output has no batch dimension")
        return shape[0]

    @property
    def number_of_classes(self) -> int:
        return self.output.size // self.batch_size

    def _target_indices(self) -> np.ndarray:
        batch = self.batch_size
        values = list(self.targets)
        if len(values) < batch:
            raise ValueError(f"expected {batch} targets, got {len(values)}")
        indices = np.asarray(values[:batch]).astype(np.int64)
        classes = self.number_of_classes
        if np.any(indices < 0) or np.any(indices >= classes):
            raise IndexError(f"target outside the range of {classes} classes")
        return indices

    @abstractmethod
    def loss(self) -> float:
        """Evaluate the output and return the loss value."""

    @abstractmethod
    def backward(self) -> None:
        """Send the loss gradient back into the output."""


class NLLLoss(Criterion):
    """Negative log-likelihood of log-probabilities, averaged over the batch."""

    def loss(self) -> float:
        batch, classes = self.batch_size, self.number_of_classes
        indices = self._target_indices()
        values = self.output.forward().data.reshape(batch, classes)
        total = -values[np.arange(batch), indices].sum(dtype=np.float32)
        return float(np.float32(total) / np.float32(batch))

    def backward(self) -> None:
        batch, classes = self.batch_size, self.number_of_classes
        indices = self._target_indices()
        grid = self.gradient.data.reshape(batch, classes)
        grid.fill(0)
        grid[np.arange(batch), indices] = -1
        grid /= np.float32(batch)
        self.output.backward(self.gradient)