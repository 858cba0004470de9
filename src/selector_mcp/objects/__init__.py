"""Object construction and JSON round-tripping helpers."""

from .rectangle import Rectangle
from .serialization import get_json, from_json

__all__ = ["Rectangle", "get_json", "from_json"]
