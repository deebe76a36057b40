"""
K-means clustering of examples carrying named vector representations.
"""

from .version import __version__
from .exceptions import (
    ClusteringError,
    InsufficientExamples,
    InvalidConfiguration,
    MissingRepresentation,
)
from .representation import DenseVector, SparseVector, Vector
from .example import Example, SimpleDataset
from .cluster import Cluster, ClusterMember, KernelBasedKMeansMember, LinearKMeansMember
from .kmeans import KMeansEngine, LinearKMeansEngine
from .utils import clusters_to_arrays, create_sample_dataset, evaluate_clustering

__all__ = [
    "__version__",
    "ClusteringError",
    "InsufficientExamples",
    "InvalidConfiguration",
    "MissingRepresentation",
    "Vector",
    "DenseVector",
    "SparseVector",
    "Example",
    "SimpleDataset",
    "Cluster",
    "ClusterMember",
    "KernelBasedKMeansMember",
    "LinearKMeansMember",
    "KMeansEngine",
    "LinearKMeansEngine",
    "create_sample_dataset",
    "clusters_to_arrays",
    "evaluate_clustering",
]
