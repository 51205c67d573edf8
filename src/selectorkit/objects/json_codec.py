"""JSON helpers: serialise any object, restore it as an instance of a class."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, fields, is_dataclass
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["from_json", "to_json"]


def _plain(obj: Any) -> Any:
    """Convert *obj* to JSON-ready values; non-finite floats become ``None``."""
    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None
    if isinstance(obj, dict):
        return {key: _plain(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_plain(item) for item in obj]
    if is_dataclass(obj) and not isinstance(obj, type):
        return _plain(asdict(obj))
    if not isinstance(obj, (str, int, type(None))) and hasattr(obj, "__dict__"):
        return _plain(vars(obj))
    return obj


def _default(obj: Any) -> Any:
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, indent: int | None = None) -> str:
    """Return the JSON representation of *obj*.

    Output is compact (``[1,2,3]``) unless *indent* is given.  Dataclass
    instances and plain objects serialise as their field mapping.  NaN and
    infinities are written as ``null``.
    """
    data = _plain(obj)
    if indent is None:
        return json.dumps(data, separators=(",", ":"), allow_nan=False, default=_default)
    return json.dumps(data, indent=indent, allow_nan=False, default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Parse *text* and return an instance of *cls* holding the parsed fields.

    Dataclasses are built through ``__init__`` (unknown keys are dropped) and
    ``dict`` subclasses from the parsed mapping.  Any other class gets an
    instance created without ``__init__`` whose attributes are the parsed
    keys; ``TypeError`` is raised if its instances cannot take them.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    if is_dataclass(cls):
        names = {f.name for f in fields(cls) if f.init}
        return cls(**{k: v for k, v in data.items() if k in names})
    if issubclass(cls, dict):
        return cls(data)
    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            setattr(obj, key, value)
        except (AttributeError, TypeError) as exc:
            raise TypeError(
                f"Cannot set field {key!r} on {cls.__name__} instances"
            ) from exc
    return obj
