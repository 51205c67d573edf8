from selectorkit.selector.builder import CompoundSelector, SelectorBuilder, builder
from selectorkit.selector.combinator import CombinedSelector, Combinator, combine
from selectorkit.selector.document import selector_from_document
from selectorkit.selector.errors import (
    DuplicateSelectorPartError,
    DuplicateSingletonError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorDocumentError,
    SelectorError,
)
from selectorkit.selector.model import Renderable, SelectorFragment, Stage

__all__ = [
    # builder
    "CompoundSelector",
    "SelectorBuilder",
    "builder",
    # combinator
    "Combinator",
    "CombinedSelector",
    "combine",
    # document
    "selector_from_document",
    # model
    "Renderable",
    "SelectorFragment",
    "Stage",
    # errors
    "SelectorError",
    "DuplicateSingletonError",
    "DuplicateSelectorPartError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "SelectorDocumentError",
]
