import numpy as np
import pytest

from kmeans import (
    Cluster,
    DenseVector,
    Example,
    LinearKMeansEngine,
    LinearKMeansMember,
    SimpleDataset,
    SparseVector,
    clusters_to_arrays,
    create_sample_dataset,
    evaluate_clustering,
)


def test_create_sample_dataset():
    dataset = create_sample_dataset(n_samples=50, n_features=4, centers=2, random_state=1)
    assert len(dataset) == 50
    assert [e.id for e in dataset] == list(range(50))
    assert dataset[0].vector("vector").values.shape == (4,)
    assert {e.labels[0] for e in dataset} == {"0", "1"}


def test_evaluate_separated_blobs():
    rng = np.random.default_rng(0)
    X = np.empty((200, 2))
    # Interleaved, so the two seeds come from different blobs.
    X[0::2] = rng.normal(loc=0.0, scale=0.5, size=(100, 2))
    X[1::2] = rng.normal(loc=20.0, scale=0.5, size=(100, 2))
    dataset = SimpleDataset.from_array(X, "v")
    clusters = LinearKMeansEngine(representation_name="v", k=2).cluster(dataset)
    info = evaluate_clustering(clusters, "v")

    assert info["n_clusters"] == 2
    assert sum(info["cluster_sizes"].values()) == 200
    assert info["min_cluster_size"] == 100
    assert info["max_cluster_size"] == 100
    assert info["avg_cluster_size"] == pytest.approx(100.0)
    assert info["silhouette"] > 0.9

    expected = sum(m.distance ** 2 for c in clusters for m in c)
    assert info["inertia"] == pytest.approx(expected)


def test_clusters_to_arrays():
    a = Cluster("cluster_0")
    b = Cluster("cluster_1")
    a.add(LinearKMeansMember(Example({"v": DenseVector([1, 2])}), 0.0))
    b.add(LinearKMeansMember(Example({"v": DenseVector([3, 4])}), 0.0))
    b.add(LinearKMeansMember(Example({"v": DenseVector([5, 6])}), 0.0))
    X, labels = clusters_to_arrays([a, b], "v")
    assert np.array_equal(X, [[1, 2], [3, 4], [5, 6]])
    assert labels.tolist() == [0, 1, 1]


def test_silhouette_undefined_for_singletons():
    clusters = []
    for i, p in enumerate([(0, 0), (1, 0)]):
        c = Cluster(f"cluster_{i}")
        c.add(LinearKMeansMember(Example({"v": DenseVector(p)}), 0.0))
        c.update_centroid("v")
        clusters.append(c)
    info = evaluate_clustering(clusters, "v")
    assert info["silhouette"] is None
    assert info["inertia"] == 0.0


def test_sparse_vectors_rejected_by_array_export():
    c = Cluster("cluster_0")
    c.add(LinearKMeansMember(Example({"s": SparseVector({"a": 1.0})}), 0.0))
    with pytest.raises(TypeError):
        clusters_to_arrays([c], "s")


def test_evaluate_no_clusters():
    info = evaluate_clustering([], "v")
    assert info["n_clusters"] == 0
    assert info["cluster_sizes"] == {}
    assert info["min_cluster_size"] == 0
    assert info["silhouette"] is None
