"""
K-means clustering algorithm working on an explicit vector space.

At each iteration the centroid of every cluster is computed explicitly from
the vectors of its members, so the cost is O(I * k * n) where I is the number
of iterations, k the number of clusters and n the number of examples.
"""

import logging
import numbers
from typing import Dict, Iterable, List, Optional, Tuple

from sklearn.base import BaseEstimator
from sklearn.utils import check_scalar

from .cluster import Cluster, LinearKMeansMember
from .example import Example, require_representation
from .exceptions import InsufficientExamples, InvalidConfiguration
from .serialization import register_type

logger = logging.getLogger(__name__)


@register_type("kmeans")
class LinearKMeansEngine(BaseEstimator):
    """
    K-means clustering over a named vector representation of each example.

    Features:
    - Deterministic seeding: the first ``k`` examples are the initial centroids
    - Ties between clusters go to the lowest cluster index
    - Stops when an iteration after the first moves no example
    - Empty clusters are kept; their distance falls back to the squared norm

    Examples:

        .. code-block:: python

            from kmeans import DenseVector, Example, LinearKMeansEngine

            data = [Example({"v": DenseVector(p)}) for p in [(0, 0), (0, 1), (10, 10)]]
            engine = LinearKMeansEngine(representation_name="v", k=2)
            for cluster in engine.cluster(data):
                print(cluster)
    """

    def __init__(
        self,
        representation_name: str,
        k: int,
        max_iterations: int = 100,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the engine.

        Args:
            representation_name: Name of the representation holding the vector
                used by the algorithm
            k: Number of expected clusters
            max_iterations: Maximum number of assignment rounds
            logger: Logger receiving progress messages (module logger if None)
        """
        self.representation_name = representation_name
        self.k = k
        self.max_iterations = max_iterations
        self.logger = logger

    @property
    def _log(self) -> logging.Logger:
        return self.logger if self.logger is not None else logger

    def _check_config(self) -> None:
        try:
            check_scalar(self.k, "k", numbers.Integral, min_val=1)
            check_scalar(
                self.max_iterations, "max_iterations", numbers.Integral, min_val=1
            )
        except (TypeError, ValueError) as exc:
            raise InvalidConfiguration(str(exc)) from exc

    def _select_seeds(self, examples: List[Example]) -> List[Example]:
        """Use the first k examples as seeds."""
        seeds = examples[: self.k]
        for i, seed in enumerate(seeds):
            self._log.debug("Seed %d: %s", i, seed.labels)
        return seeds

    def _calculate_distance(self, example: Example, cluster: Cluster) -> float:
        """Euclidean distance between an example and a cluster centroid."""
        vector = require_representation(example, self.representation_name)

        if cluster.centroid is None:
            self._log.warning("Centroid is null")
            return vector.squared_norm()

        return cluster.centroid.euclidean_distance(vector)

    def _assign_clusters(
        self, examples: List[Example], clusters: List[Cluster]
    ) -> Tuple[List[int], List[float]]:
        """Find the nearest cluster of every example.

        Returns:
            Per example position, the index of the nearest cluster and the
            distance to it.
        """
        assignment = []
        min_distances = []
        for example in examples:
            target_cluster = -1
            min_value = 0.0
            for cluster_index, cluster in enumerate(clusters):
                d = self._calculate_distance(example, cluster)
                self._log.debug(
                    "Distance of %s from cluster %d:\t%s", example.id, cluster_index, d
                )
                # Strict comparison: on ties the lowest index wins.
                if target_cluster < 0 or d < min_value:
                    min_value = d
                    target_cluster = cluster_index
            assignment.append(target_cluster)
            min_distances.append(min_value)
        return assignment, min_distances

    @staticmethod
    def _count_reassignments(previous: Dict[int, int], assignment: List[int]) -> int:
        """Count examples whose cluster differs from the previous round.

        Only examples that were members of a cluster are compared, so at the
        first round only the seeds are taken into account.
        """
        return sum(1 for pos in sorted(previous) if previous[pos] != assignment[pos])

    def _rebuild_clusters(
        self,
        examples: List[Example],
        clusters: List[Cluster],
        assignment: List[int],
        min_distances: List[float],
    ) -> None:
        for cluster in clusters:
            cluster.clear()

        for pos, example in enumerate(examples):
            self._log.debug("Re-assigning %s to %d", example.id, assignment[pos])
            clusters[assignment[pos]].add(
                LinearKMeansMember(example, min_distances[pos])
            )

        for cluster in clusters:
            cluster.update_centroid(self.representation_name)

    def cluster(self, dataset: Iterable[Example]) -> List[Cluster]:
        """
        Cluster the examples of a dataset.

        Args:
            dataset: Ordered collection of examples supporting ``len()`` and
                iteration, e.g. a :class:`~kmeans.example.SimpleDataset` or a
                list of examples.

        Returns:
            The ``k`` clusters in index order, members sorted by ascending
            distance to their centroid.

        Raises:
            InvalidConfiguration: If ``k`` or ``max_iterations`` is not a
                positive integer.
            InsufficientExamples: If the dataset has fewer than ``k`` examples.
            MissingRepresentation: If an example lacks the representation.
        """
        self._check_config()

        examples = list(dataset)
        if len(examples) < self.k:
            raise InsufficientExamples(len(examples), self.k)

        clusters = [Cluster(f"cluster_{i}") for i in range(self.k)]

        # Previous round assignment, keyed by position in the dataset.
        previous: Dict[int, int] = {}
        for i, seed in enumerate(self._select_seeds(examples)):
            clusters[i].add(LinearKMeansMember(seed, 0.0))
            clusters[i].update_centroid(self.representation_name)
            previous[i] = i

        reassignments = []
        n_iter = 0
        for t in range(self.max_iterations):
            self._log.debug("ITERATION:\t%d", t + 1)

            assignment, min_distances = self._assign_clusters(examples, clusters)

            reassignment = self._count_reassignments(previous, assignment)
            self._log.info("Reassignments:\t%d", reassignment)

            self._rebuild_clusters(examples, clusters, assignment, min_distances)

            previous = dict(enumerate(assignment))
            reassignments.append(reassignment)
            n_iter = t + 1

            if t > 0 and reassignment == 0:
                self._log.debug("Converged after %d iterations", n_iter)
                break

        for c in clusters:
            c.sort_ascending()

        self.clusters_ = clusters
        self.n_iter_ = n_iter
        self.reassignments_ = reassignments
        return clusters

    def fit(self, dataset: Iterable[Example], y=None) -> "LinearKMeansEngine":
        """
        Run :meth:`cluster` and keep the result in ``clusters_``.

        Returns:
            self
        """
        self.cluster(dataset)
        return self


KMeansEngine = LinearKMeansEngine
