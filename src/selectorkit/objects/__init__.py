"""Small object helpers: a rectangle value object and JSON round-tripping."""

from selectorkit.objects.json_codec import from_json, to_json
from selectorkit.objects.rectangle import Rectangle

__all__ = ["Rectangle", "from_json", "to_json"]
