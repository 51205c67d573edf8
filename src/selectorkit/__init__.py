"""selectorkit: fluent CSS selector builder plus small object helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.config import SelectorkitConfig  # noqa: E402
from selectorkit.objects import Rectangle, from_json, to_json  # noqa: E402
from selectorkit.selector import (  # noqa: E402
    CombinedSelector,
    Combinator,
    CompoundSelector,
    DuplicateSelectorPartError,
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
    Renderable,
    SelectorBuilder,
    SelectorDocumentError,
    SelectorError,
    builder,
    combine,
    selector_from_document,
)

__all__ = [
    "__version__",
    "SelectorkitConfig",
    "Rectangle",
    "from_json",
    "to_json",
    "CombinedSelector",
    "Combinator",
    "CompoundSelector",
    "DuplicateSelectorPartError",
    "DuplicateSingletonError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "Renderable",
    "SelectorBuilder",
    "SelectorDocumentError",
    "SelectorError",
    "builder",
    "combine",
    "selector_from_document",
]
