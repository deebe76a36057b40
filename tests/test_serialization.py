import json
import logging

import pytest

from kmeans import KernelBasedKMeansMember, LinearKMeansEngine, LinearKMeansMember
from kmeans.serialization import (
    dumps,
    from_dict,
    get_type,
    loads,
    register_type,
    registered_types,
    to_dict,
)


def test_type_names():
    assert LinearKMeansEngine.type_name == "kmeans"
    assert get_type("kmeans") is LinearKMeansEngine
    assert get_type("linearkmeansexample") is LinearKMeansMember
    assert get_type("kernelbasedkmeansexample") is KernelBasedKMeansMember
    assert set(registered_types()) >= {
        "kmeans",
        "linearkmeansexample",
        "kernelbasedkmeansexample",
    }


def test_engine_round_trip():
    engine = LinearKMeansEngine(
        representation_name="bow", k=5, max_iterations=20, logger=logging.getLogger("x")
    )
    data = to_dict(engine)
    assert data == {
        "type": "kmeans",
        "k": 5,
        "max_iterations": 20,
        "representation_name": "bow",
    }

    rebuilt = from_dict(data)
    assert isinstance(rebuilt, LinearKMeansEngine)
    assert rebuilt.k == 5
    assert rebuilt.max_iterations == 20
    assert rebuilt.representation_name == "bow"
    assert rebuilt.logger is None


def test_json_round_trip():
    text = dumps(LinearKMeansEngine(representation_name="v", k=2))
    assert json.loads(text)["type"] == "kmeans"
    assert loads(text).get_params() == LinearKMeansEngine("v", 2).get_params()


def test_unknown_or_missing_type():
    with pytest.raises(ValueError):
        from_dict({"type": "nope"})
    with pytest.raises(ValueError):
        from_dict({"k": 2})


def test_members_are_not_configurations():
    with pytest.raises(TypeError):
        from_dict({"type": "linearkmeansexample"})
    with pytest.raises(TypeError):
        to_dict(object())


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError):

        @register_type("kmeans")
        class Other:
            pass
