"""Feature normalizers that can be fitted, applied and inverted."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

import numpy as np


def _as_vector(features: Iterable[float]) -> np.ndarray:
    return np.asarray(list(features) if not isinstance(features, np.ndarray) else features,
                      dtype=np.float32).ravel()


class Normalizer(ABC):
    """Learns statistics from a feature vector and maps vectors with them."""

    @abstractmethod
    def fit(self, features: Iterable[float]) -> None:
        """Learn the statistics of ``features``."""

    @abstractmethod
    def transform(self, features: Iterable[float]) -> np.ndarray:
        """Map ``features`` with the learned statistics."""

    def fit_transform(self, features: Iterable[float]) -> np.ndarray:
        """Fit on ``features`` and return them transformed."""
        vector = _as_vector(features)
        self.fit(vector)
        return self.transform(vector)

    @abstractmethod
    def inverse_transform(self, features: Iterable[float]) -> np.ndarray:
        """Undo :meth:`transform`."""


class Standard(Normalizer):
    """Standardises to zero mean and unit (population) standard deviation."""

    def __init__(self) -> None:
        self.mean: float | None = None
        self.standard_deviation: float | None = None

    def fit(self, features: Iterable[float]) -> None:
        vector = _as_vector(features)
        if vector.size == 0:
            raise ValueError("cannot fit on an empty feature vector")
        deviation = float(vector.std())
        if deviation == 0.0:
            raise ValueError("features have zero standard deviation")
        self.mean = float(vector.mean())
        self.standard_deviation = deviation

    def _require_fitted(self) -> tuple[np.float32, np.float32]:
        if self.mean is None or self.standard_deviation is None:
            raise RuntimeError("normalizer has not been fitted")
        return np.float32(self.mean), np.float32(self.standard_deviation)

    def transform(self, features: Iterable[float]) -> np.ndarray:
        mean, deviation = self._require_fitted()
        return (_as_vector(features) - mean) / deviation

    def inverse_transform(self, features: Iterable[float]) -> np.ndarray:
        mean, deviation = self._require_fitted()
        return _as_vector(features) * deviation + mean