"""
Clusters and cluster members produced by the K-means engines.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Iterator, List, Optional, Tuple

from .example import Example, require_representation
from .representation import Vector
from .serialization import register_type


@total_ordering
class ClusterMember:
    """An example paired with its distance to the owning cluster's centroid.

    Members are ordered by ascending distance; equal distances are ordered
    by the string form of the example, so sorting a cluster is
    deterministic.

    Args:
        example: The clustered example. It is shared, never modified.
        distance: Distance to the centroid at the time of assignment.
    """

    type_name: str = ""

    def __init__(self, example: Example, distance: float) -> None:
        self.example = example
        self.distance = distance

    def sort_key(self) -> Tuple[float, str]:
        return (self.distance, str(self.example))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ClusterMember):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClusterMember):
            return NotImplemented
        return self.sort_key() == other.sort_key()

    def __hash__(self) -> int:
        return hash(self.sort_key())

    def __str__(self) -> str:
        return f"{self.distance}\t{self.example}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(example={self.example!r}, distance={self.distance})"


@register_type("kernelbasedkmeansexample")
class KernelBasedKMeansMember(ClusterMember):
    """Cluster member produced by the kernel-space K-means variant."""


@register_type("linearkmeansexample")
class LinearKMeansMember(ClusterMember):
    """Cluster member produced by :class:`~kmeans.kmeans.LinearKMeansEngine`."""


class Cluster:
    """A named group of cluster members with an explicit centroid.

    The centroid is only refreshed by :meth:`update_centroid`; it is None when
    the cluster had no members at the last refresh.

    Args:
        cluster_id: Human readable name, e.g. ``cluster_0``.
    """

    def __init__(self, cluster_id: str) -> None:
        self._id = cluster_id
        self._members: List[ClusterMember] = []
        self._centroid: Optional[Vector] = None

    @property
    def id(self) -> str:
        return self._id

    @property
    def members(self) -> List[ClusterMember]:
        return self._members

    @property
    def centroid(self) -> Optional[Vector]:
        return self._centroid

    def add(self, member: ClusterMember) -> None:
        self._members.append(member)

    def clear(self) -> None:
        """Remove all members. The centroid is left as it is."""
        self._members = []

    def update_centroid(self, representation_name: str) -> None:
        """Recompute the centroid as the mean of the members' vectors.

        Vectors with different dimensionality are not detected here.

        Args:
            representation_name: Representation of each example to average.

        Raises:
            MissingRepresentation: If a member lacks the representation.
        """
        if not self._members:
            self._centroid = None
            return

        first = require_representation(self._members[0].example, representation_name)
        centroid = first.zero_like()
        for member in self._members:
            centroid.add(require_representation(member.example, representation_name))
        centroid.scale(1.0 / len(self._members))
        self._centroid = centroid

    def sort_ascending(self) -> None:
        """Sort members by ascending distance to the centroid."""
        self._members.sort()

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[ClusterMember]:
        return iter(self._members)

    def __str__(self) -> str:
        lines = [f"{self._id}:"]
        lines.extend(str(member) for member in self._members)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Cluster(id={self._id!r}, size={len(self._members)})"
