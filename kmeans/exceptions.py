"""
Errors raised by the K-means engine.
"""


class ClusteringError(Exception):
    """Base class for all clustering failures."""


class InvalidConfiguration(ClusteringError, ValueError):
    """The engine was invoked with a non-positive ``k`` or ``max_iterations``."""


class InsufficientExamples(ClusteringError, ValueError):
    """The dataset holds fewer examples than the requested number of clusters.

    Args:
        n_examples: Number of examples observed in the dataset.
        k: The configured number of clusters.
    """

    def __init__(self, n_examples: int, k: int) -> None:
        self.n_examples = n_examples
        self.k = k
        super().__init__(
            f"The number of examples ({n_examples}) must be greater than "
            f"or equal to k ({k})"
        )


class MissingRepresentation(ClusteringError, LookupError):
    """An example does not carry the representation the engine works on."""

    def __init__(self, example_id: int, representation_name: str) -> None:
        self.example_id = example_id
        self.representation_name = representation_name
        super().__init__(
            f"Example {example_id} has no representation named "
            f"'{representation_name}'"
        )
