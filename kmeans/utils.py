"""
Helpers to build sample datasets and evaluate clustering results.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from sklearn.datasets import make_blobs
from sklearn.metrics import silhouette_score

from .cluster import Cluster
from .example import SimpleDataset, require_representation
from .representation import DenseVector


def create_sample_dataset(
    n_samples: int = 1000,
    n_features: int = 2,
    centers: Union[int, np.ndarray] = 3,
    cluster_std: float = 1.0,
    random_state: Optional[int] = 42,
    representation_name: str = "vector",
) -> SimpleDataset:
    """
    Create a dataset of Gaussian blobs.

    Each example is labelled with the index of the blob that generated it.

    Args:
        n_samples: Total number of examples
        n_features: Vector dimensionality
        centers: Number of blobs, or their explicit centers
        cluster_std: Standard deviation of each blob
        random_state: Random seed for reproducibility
        representation_name: Name of the dense representation of each example

    Returns:
        SimpleDataset with example ids 0..n_samples-1
    """
    X, y = make_blobs(
        n_samples=n_samples,
        n_features=n_features,
        centers=centers,
        cluster_std=cluster_std,
        random_state=random_state,
    )
    return SimpleDataset.from_array(X, representation_name, labels=[str(b) for b in y])


def clusters_to_arrays(
    clusters: Sequence[Cluster], representation_name: str
) -> Tuple[np.ndarray, np.ndarray]:
    """Stack the dense member vectors of all clusters.

    Returns:
        ``(X, labels)`` where ``labels[i]`` is the index of the cluster owning
        row ``i`` of ``X``.
    """
    rows: List[np.ndarray] = []
    labels: List[int] = []
    for cluster_index, cluster in enumerate(clusters):
        for member in cluster.members:
            vector = require_representation(member.example, representation_name)
            if not isinstance(vector, DenseVector):
                raise TypeError(
                    f"Expected dense vectors, got {type(vector).__name__}"
                )
            rows.append(vector.values)
            labels.append(cluster_index)
    if not rows:
        return np.empty((0, 0)), np.empty(0, dtype=int)
    return np.vstack(rows), np.asarray(labels, dtype=int)


def evaluate_clustering(
    clusters: Sequence[Cluster], representation_name: str
) -> Dict[str, Any]:
    """
    Compute quality statistics of a clustering.

    Args:
        clusters: Clusters returned by the engine
        representation_name: Representation the clustering was computed on

    Returns:
        Dictionary with inertia (sum of squared distances to the centroids),
        cluster sizes and silhouette score. The silhouette is None when it is
        undefined, i.e. with fewer than two non-empty clusters or when every
        example is alone in its cluster.
    """
    if not clusters:
        return {
            'n_clusters': 0,
            'inertia': 0.0,
            'cluster_sizes': {},
            'avg_cluster_size': 0.0,
            'min_cluster_size': 0,
            'max_cluster_size': 0,
            'silhouette': None,
        }

    inertia = 0.0
    for cluster in clusters:
        if cluster.centroid is None:
            continue
        for member in cluster.members:
            vector = require_representation(member.example, representation_name)
            inertia += cluster.centroid.euclidean_distance(vector) ** 2

    cluster_sizes = {cluster.id: len(cluster) for cluster in clusters}
    sizes = np.array(list(cluster_sizes.values()))

    silhouette = None
    X, labels = clusters_to_arrays(clusters, representation_name)
    n_labels = len(np.unique(labels))
    if 2 <= n_labels <= len(labels) - 1:
        silhouette = float(silhouette_score(X, labels))

    return {
        'n_clusters': len(clusters),
        'inertia': inertia,
        'cluster_sizes': cluster_sizes,
        'avg_cluster_size': float(np.mean(sizes)),
        'min_cluster_size': int(np.min(sizes)),
        'max_cluster_size': int(np.max(sizes)),
        'silhouette': silhouette,
    }
