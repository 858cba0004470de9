"""JSON helpers for plain objects."""

import json
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, Type, TypeVar

from ..utils.errors import SerializationError

T = TypeVar("T")


def _encode_object(obj: Any) -> Dict[str, Any]:
    """Fallback encoder: serialize objects through their attributes."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "__dict__"):
        return dict(vars(obj))
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of ``obj``.

    Examples:
        [1, 2, 3] -> '[1,2,3]'
        Rectangle(10, 20) -> '{"width":10,"height":20}'
    """
    try:
        return json.dumps(obj, default=_encode_object, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode object: {e}")


def from_json(cls: Type[T], text: str) -> T:
    """
    Create an instance of ``cls`` from a JSON object.

    The instance is allocated without calling ``cls.__init__``; every key of
    the JSON object becomes an attribute, so methods defined on ``cls`` work
    on the result.

    Raises:
        SerializationError: If ``text`` is not valid JSON or not an object
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}")

    if not isinstance(data, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    obj = cls.__new__(cls)
    for key, value in data.items():
        try:
            setattr(obj, key, value)
        except AttributeError as e:
            # __slots__ classes reject unknown keys
            raise SerializationError(f"Cannot set '{key}' on {cls.__name__}: {e}")
    return obj
