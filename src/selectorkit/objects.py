"""Small object helpers: a rectangle factory and JSON (de)serialization."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, is_dataclass
from typing import Any, TypeVar

from selectorkit.config import SelectorkitConfig

__all__ = ["Rectangle", "make_rectangle", "serialize", "deserialize"]

T = TypeVar("T")


@dataclass
class Rectangle:
    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def make_rectangle(width: float, height: float) -> Rectangle:
    return Rectangle(width=width, height=height)


def _default(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def serialize(value: Any, config: SelectorkitConfig | None = None) -> str:
    """Encode *value* as JSON.

    Dataclass instances are written as their field mapping and objects with a
    ``to_dict()`` method (selectors) as its result.
    """
    config = config or SelectorkitConfig()
    return json.dumps(
        value,
        default=_default,
        indent=config.json_indent,
        sort_keys=config.json_sort_keys,
    )


def deserialize(proto: type[T], text: str) -> T | Any:
    """Decode *text* and bind the result to the class *proto*.

    A JSON object becomes an instance of *proto*: dataclasses are constructed
    from their fields, other classes get their ``__dict__`` filled without
    running ``__init__``.  An instance passed as *proto* stands for its class.
    Non-object payloads are returned decoded as is.

    Raises:
        json.JSONDecodeError: *text* is not valid JSON.
        TypeError: a required dataclass field is missing from the payload.
            Also raised when *proto* instances cannot hold attributes.
    """
    if not isinstance(proto, type):
        proto = type(proto)

    data = json.loads(text)
    if not isinstance(data, dict):
        return data

    if is_dataclass(proto):
        names = {f.name for f in fields(proto) if f.init}
        instance = proto(**{k: v for k, v in data.items() if k in names})
        for key, value in data.items():
            if key not in names:
                object.__setattr__(instance, key, value)
        return instance

    if issubclass(proto, dict):
        return proto(data)

    instance = proto.__new__(proto)
    if not hasattr(instance, "__dict__"):
        raise TypeError(f"Cannot attach attributes to {proto.__name__} instances")
    instance.__dict__.update(data)
    return instance
