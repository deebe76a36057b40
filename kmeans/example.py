"""
Examples and datasets.

An :class:`Example` is an input datum with a stable integer identifier, a set
of labels and one or more vector representations addressed by name. A
:class:`SimpleDataset` is an ordered collection of examples.
"""

from __future__ import annotations

import itertools
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

import numpy as np

from .exceptions import MissingRepresentation
from .representation import DenseVector, Vector

_id_counter = itertools.count()


def require_representation(example, name: str) -> Vector:
    """Look up a representation through the ``representation(name)`` method
    of any example-like object.

    Raises:
        MissingRepresentation: If the example has no such representation.
    """
    vec = example.representation(name)
    if vec is None:
        raise MissingRepresentation(example.id, name)
    return vec


class Example:
    """An example carrying named vector representations.

    Args:
        representations: Mapping from representation name to vector.
        labels: Labels of the example. Only used for logging and evaluation.
        example_id: Identifier of the example. When omitted, the next value
            of a process-wide counter is used.
    """

    def __init__(
        self,
        representations: Mapping[str, Vector],
        labels: Iterable[str] = (),
        example_id: Optional[int] = None,
    ) -> None:
        self._id = next(_id_counter) if example_id is None else int(example_id)
        self._representations: Dict[str, Vector] = dict(representations)
        self._labels: List[str] = [str(label) for label in labels]

    @property
    def id(self) -> int:
        return self._id

    @property
    def labels(self) -> List[str]:
        return list(self._labels)

    def representation(self, name: str) -> Optional[Vector]:
        """Return the representation called ``name``, or None if absent."""
        return self._representations.get(name)

    def vector(self, name: str) -> Vector:
        """Return the representation called ``name``.

        Raises:
            MissingRepresentation: If the example has no such representation.
        """
        return require_representation(self, name)

    def __str__(self) -> str:
        parts = list(self._labels)
        for name, vec in self._representations.items():
            tag = vec.text_tag
            parts.append(f"|B{tag}:{name}| {vec.to_text()} |E{tag}|")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"Example(id={self._id}, labels={self._labels})"


class SimpleDataset:
    """An ordered collection of examples.

    Iteration always follows insertion order.
    """

    def __init__(self, examples: Optional[Iterable[Example]] = None) -> None:
        self._examples: List[Example] = []
        if examples is not None:
            self.add_examples(examples)

    def add_example(self, example: Example) -> None:
        self._examples.append(example)

    def add_examples(self, examples: Iterable[Example]) -> None:
        for example in examples:
            self.add_example(example)

    @property
    def examples(self) -> List[Example]:
        return list(self._examples)

    def get_number_of_examples(self) -> int:
        return len(self._examples)

    def __len__(self) -> int:
        return len(self._examples)

    def __iter__(self) -> Iterator[Example]:
        return iter(self._examples)

    def __getitem__(self, index: int) -> Example:
        return self._examples[index]

    @classmethod
    def from_array(
        cls,
        X: np.ndarray,
        representation_name: str,
        labels: Optional[Sequence] = None,
    ) -> SimpleDataset:
        """Build a dataset with one dense example per row of ``X``.

        Example ids are the row indices.

        Args:
            X: Array of shape (n_samples, n_features).
            representation_name: Name under which each row is stored.
            labels: Optional per-row label.
        """
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {X.shape}")
        if labels is not None and len(labels) != X.shape[0]:
            raise ValueError(
                f"Got {len(labels)} labels for {X.shape[0]} rows"
            )
        dataset = cls()
        for i, row in enumerate(X):
            row_labels = () if labels is None else (labels[i],)
            dataset.add_example(
                Example({representation_name: DenseVector(row)}, row_labels, example_id=i)
            )
        return dataset
