import numpy as np
import pytest

from kmeans.cluster import (
    Cluster,
    ClusterMember,
    KernelBasedKMeansMember,
    LinearKMeansMember,
)
from kmeans.example import Example
from kmeans.exceptions import MissingRepresentation
from kmeans.representation import DenseVector


def make_example(point, example_id, name="v"):
    return Example({name: DenseVector(point)}, example_id=example_id)


def test_member_order_by_distance():
    a = LinearKMeansMember(make_example([5.0], 0), 0.5)
    b = LinearKMeansMember(make_example([0.0], 1), 1.5)
    assert a < b
    assert sorted([b, a]) == [a, b]


def test_member_tie_broken_by_example_string():
    a = LinearKMeansMember(make_example([1.0], 0), 2.0)
    b = LinearKMeansMember(make_example([0.0], 1), 2.0)
    # "0.0" sorts before "1.0"
    assert b < a
    assert sorted([a, b]) == [b, a]


def test_member_string():
    e = make_example([1.0, 2.0], 0)
    m = LinearKMeansMember(e, 0.25)
    assert str(m) == f"0.25\t{e}"


def test_member_variants_are_tagged_siblings():
    assert LinearKMeansMember.type_name == "linearkmeansexample"
    assert KernelBasedKMeansMember.type_name == "kernelbasedkmeansexample"
    assert not issubclass(LinearKMeansMember, KernelBasedKMeansMember)
    assert issubclass(LinearKMeansMember, ClusterMember)
    e = make_example([0.0], 0)
    assert LinearKMeansMember(e, 1.0) == KernelBasedKMeansMember(e, 1.0)


def test_update_centroid_is_mean():
    cluster = Cluster("cluster_0")
    for i, point in enumerate([(0.0, 0.0), (2.0, 4.0), (4.0, 2.0)]):
        cluster.add(LinearKMeansMember(make_example(point, i), 0.0))
    cluster.update_centroid("v")
    assert np.allclose(cluster.centroid.values, [2.0, 2.0])
    assert len(cluster) == 3


def test_update_centroid_does_not_modify_members():
    e = make_example([1.0, 1.0], 0)
    cluster = Cluster("cluster_0")
    cluster.add(LinearKMeansMember(e, 0.0))
    cluster.update_centroid("v")
    cluster.centroid.scale(10.0)
    assert np.allclose(e.vector("v").values, [1.0, 1.0])


def test_empty_cluster_has_null_centroid():
    cluster = Cluster("cluster_1")
    cluster.add(LinearKMeansMember(make_example([3.0], 0), 0.0))
    cluster.update_centroid("v")
    assert cluster.centroid is not None

    cluster.clear()
    # clear() leaves the centroid until the next refresh
    assert len(cluster) == 0
    assert cluster.centroid is not None

    cluster.update_centroid("v")
    assert cluster.centroid is None


def test_update_centroid_missing_representation():
    cluster = Cluster("cluster_0")
    cluster.add(LinearKMeansMember(make_example([1.0], 0, name="other"), 0.0))
    with pytest.raises(MissingRepresentation):
        cluster.update_centroid("v")


def test_sort_ascending():
    cluster = Cluster("cluster_0")
    distances = [3.0, 1.0, 2.0, 1.0]
    for i, d in enumerate(distances):
        cluster.add(LinearKMeansMember(make_example([float(i)], i), d))
    cluster.sort_ascending()
    assert [m.distance for m in cluster] == [1.0, 1.0, 2.0, 3.0]
    assert [m.example.id for m in cluster.members] == [1, 3, 2, 0]
    assert cluster.id == "cluster_0"
