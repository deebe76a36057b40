"""
Stable type names for persisting engine configurations.

Every persisted class is registered under a short name with
:func:`register_type`. Configurations are written as plain dictionaries
carrying that name under ``"type"``, e.g.::

    {"type": "kmeans", "k": 3, "max_iterations": 100, "representation_name": "v"}
"""

import json
from typing import Any, Callable, Dict, Type

_REGISTRY: Dict[str, type] = {}

# Parameters that describe the runtime environment, never the configuration.
_TRANSIENT_PARAMS = ("logger",)


def register_type(name: str) -> Callable[[Type], Type]:
    """Class decorator registering ``cls`` under ``name``."""

    def decorator(cls: Type) -> Type:
        existing = _REGISTRY.get(name)
        if existing is not None and existing is not cls:
            raise ValueError(
                f"Type name '{name}' already registered for {existing.__name__}"
            )
        cls.type_name = name
        _REGISTRY[name] = cls
        return cls

    return decorator


def get_type(name: str) -> type:
    """Return the class registered under ``name``."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise ValueError(f"Unknown type name: '{name}'") from None


def registered_types() -> Dict[str, type]:
    return dict(_REGISTRY)


def to_dict(obj: Any) -> Dict[str, Any]:
    """Serialize a registered estimator's configuration to a dictionary."""
    name = getattr(type(obj), "type_name", None)
    if not name or _REGISTRY.get(name) is not type(obj):
        raise TypeError(f"{type(obj).__name__} is not a registered type")
    if not hasattr(obj, "get_params"):
        raise TypeError(f"{type(obj).__name__} has no configuration to serialize")

    data: Dict[str, Any] = {"type": name}
    for key, value in sorted(obj.get_params(deep=False).items()):
        if key not in _TRANSIENT_PARAMS:
            data[key] = value
    return data


def from_dict(data: Dict[str, Any]) -> Any:
    """Rebuild an estimator from a dictionary written by :func:`to_dict`."""
    if "type" not in data:
        raise ValueError("Missing 'type' field")
    params = dict(data)
    cls = get_type(params.pop("type"))
    if not hasattr(cls, "get_params"):
        raise TypeError(f"{cls.__name__} cannot be built from a configuration")
    return cls(**params)


def dumps(obj: Any, **kwargs) -> str:
    return json.dumps(to_dict(obj), **kwargs)


def loads(text: str) -> Any:
    return from_dict(json.loads(text))
