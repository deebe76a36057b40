"""
Vector representations consumed by the K-means engine.

The engine only relies on the small capability set declared by :class:`Vector`:
norms, Euclidean distance and the in-place arithmetic needed to accumulate a
centroid. Two concrete implementations are provided, a numpy backed
:class:`DenseVector` and a dictionary backed :class:`SparseVector`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Mapping, Tuple, Union

import numpy as np


class Vector(ABC):
    """A real valued vector usable as an example representation.

    ``add`` and ``scale`` modify the vector in place. The engine only ever
    calls them on accumulators obtained from :meth:`zero_like`, so the
    representations stored on examples are never modified.
    """

    # Short tag used when rendering an example as text, e.g. ``|BDV:name|``.
    text_tag: str = ""

    @abstractmethod
    def squared_norm(self) -> float:
        """Return the squared L2 norm."""

    @abstractmethod
    def euclidean_distance(self, other: Vector) -> float:
        """Return the L2 distance between this vector and ``other``."""

    @abstractmethod
    def zero_like(self) -> Vector:
        """Return a new zero vector compatible with this one."""

    @abstractmethod
    def add(self, other: Vector) -> None:
        """Add ``other`` to this vector, element-wise."""

    @abstractmethod
    def scale(self, coefficient: float) -> None:
        """Multiply every element by ``coefficient``."""

    @abstractmethod
    def copy(self) -> Vector:
        """Return an independent copy."""

    @abstractmethod
    def to_text(self) -> str:
        """Return a stable textual rendering of the values."""

    def __str__(self) -> str:
        return self.to_text()


class DenseVector(Vector):
    """Dense vector stored as a one dimensional float64 numpy array.

    Args:
        values: Anything ``np.asarray`` accepts as a 1-D sequence of numbers.
    """

    text_tag = "DV"

    def __init__(self, values: Union[np.ndarray, Iterable[float]]) -> None:
        self.values = np.array(values, dtype=np.float64).reshape(-1)

    def __len__(self) -> int:
        return self.values.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseVector):
            return False
        return np.array_equal(self.values, other.values)

    def __repr__(self) -> str:
        return f"DenseVector({self.values.tolist()})"

    def _check(self, other: Vector) -> DenseVector:
        if not isinstance(other, DenseVector):
            raise TypeError(
                f"Cannot combine DenseVector with {type(other).__name__}"
            )
        return other

    def squared_norm(self) -> float:
        return float(np.dot(self.values, self.values))

    def euclidean_distance(self, other: Vector) -> float:
        other = self._check(other)
        return float(np.linalg.norm(self.values - other.values))

    def zero_like(self) -> DenseVector:
        return DenseVector(np.zeros_like(self.values))

    def add(self, other: Vector) -> None:
        other = self._check(other)
        self.values += other.values

    def scale(self, coefficient: float) -> None:
        self.values *= coefficient

    def copy(self) -> DenseVector:
        return DenseVector(self.values.copy())

    def to_text(self) -> str:
        return " ".join(repr(float(v)) for v in self.values)


class SparseVector(Vector):
    """Sparse vector mapping feature names to values.

    Features that are absent are zero. Iteration order of the features is the
    insertion order, which keeps the textual rendering stable.

    Args:
        features: Mapping, or iterable of ``(name, value)`` pairs.
    """

    text_tag = "V"

    def __init__(
        self,
        features: Union[Mapping[str, float], Iterable[Tuple[str, float]], None] = None,
    ) -> None:
        self.features: Dict[str, float] = {}
        if features is not None:
            items = features.items() if isinstance(features, Mapping) else features
            for name, value in items:
                self.features[str(name)] = float(value)

    def __len__(self) -> int:
        return len(self.features)

    def __getitem__(self, name: str) -> float:
        return self.features.get(name, 0.0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseVector):
            return False
        names = set(self.features) | set(other.features)
        return all(self[n] == other[n] for n in names)

    def __repr__(self) -> str:
        return f"SparseVector({self.features})"

    def _check(self, other: Vector) -> SparseVector:
        if not isinstance(other, SparseVector):
            raise TypeError(
                f"Cannot combine SparseVector with {type(other).__name__}"
            )
        return other

    def squared_norm(self) -> float:
        return float(sum(v * v for v in self.features.values()))

    def euclidean_distance(self, other: Vector) -> float:
        other = self._check(other)
        total = 0.0
        for name, value in self.features.items():
            diff = value - other[name]
            total += diff * diff
        for name, value in other.features.items():
            if name not in self.features:
                total += value * value
        return math.sqrt(total)

    def zero_like(self) -> SparseVector:
        return SparseVector()

    def add(self, other: Vector) -> None:
        other = self._check(other)
        for name, value in other.features.items():
            self.features[name] = self.features.get(name, 0.0) + value

    def scale(self, coefficient: float) -> None:
        for name in self.features:
            self.features[name] *= coefficient

    def copy(self) -> SparseVector:
        return SparseVector(dict(self.features))

    def to_text(self) -> str:
        return " ".join(f"{name}:{value!r}" for name, value in self.features.items())
