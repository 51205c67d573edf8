"""Build selectors from plain mappings (parsed JSON selector documents).

Document shapes::

    {"element": "a", "attr": ["href$=\\".png\\""], "pseudoClass": "focus"}
    {"combine": [{"element": "ul"}, ">", {"element": "li"}]}

Keys of a compound document are applied in document order, so misordered or
repeated parts fail exactly as they would through the fluent API.
"""

from __future__ import annotations

from typing import Any, Callable

from selectorkit.selector.builder import CompoundSelector
from selectorkit.selector.combinator import combine
from selectorkit.selector.errors import SelectorDocumentError
from selectorkit.selector.model import Renderable

__all__ = ["PART_METHODS", "selector_from_document"]

# Document key -> CompoundSelector method.
PART_METHODS: dict[str, Callable[[CompoundSelector, str], CompoundSelector]] = {
    "element": CompoundSelector.element,
    "id": CompoundSelector.id,
    "class": CompoundSelector.class_,
    "attr": CompoundSelector.attr,
    "pseudoClass": CompoundSelector.pseudo_class,
    "pseudo_class": CompoundSelector.pseudo_class,
    "pseudo-class": CompoundSelector.pseudo_class,
    "pseudoElement": CompoundSelector.pseudo_element,
    "pseudo_element": CompoundSelector.pseudo_element,
    "pseudo-element": CompoundSelector.pseudo_element,
}


def _compound_from_document(data: dict[str, Any]) -> CompoundSelector:
    selector = CompoundSelector()
    for key, raw in data.items():
        method = PART_METHODS.get(key)
        if method is None:
            raise SelectorDocumentError(f"Unknown selector part {key!r}")
        values = raw if isinstance(raw, list) else [raw]
        if not values:
            raise SelectorDocumentError(f"Selector part {key!r} has no values")
        for value in values:
            if not isinstance(value, str):
                raise SelectorDocumentError(
                    f"Selector part {key!r} must be a string, got {type(value).__name__}"
                )
            method(selector, value)
    return selector


def selector_from_document(data: Any) -> Renderable:
    """Build a compound or combined selector from *data*.

    Raises :class:`SelectorDocumentError` for malformed documents and lets
    ordering and duplicate errors from the builder propagate.
    """
    if not isinstance(data, dict) or not data:
        raise SelectorDocumentError("A selector document must be a non-empty object")

    if "combine" in data:
        operands = data["combine"]
        if len(data) != 1 or not isinstance(operands, list) or len(operands) != 3:
            raise SelectorDocumentError(
                "'combine' must be the only key and hold [left, combinator, right]"
            )
        left, token, right = operands
        if not isinstance(token, str):
            raise SelectorDocumentError("Combinator must be a string")
        return combine(selector_from_document(left), token, selector_from_document(right))

    return _compound_from_document(data)
