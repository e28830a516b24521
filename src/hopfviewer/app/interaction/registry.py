from __future__ import annotations
from hopfviewer.app.interaction.base import InputAdapterBase, ViewControl

_REGISTRY: dict[str, type[InputAdapterBase]] = {}

def register_adapter(cls: type[InputAdapterBase]) -> type[InputAdapterBase]:
    """Class decorator to register an input adapter by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key or key == InputAdapterBase.KEY:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls

def create_adapter(key: str, view: ViewControl) -> InputAdapterBase:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No input adapter registered for key '{key}'")
    return cls(view)

def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
