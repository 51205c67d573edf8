"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Stage

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base class for selector usage errors."""


class DuplicateSingletonError(SelectorError):
    """Raised when element, id or pseudo-element is set twice on one chain."""

    def __init__(self, stage: Stage) -> None:
        self.stage = stage
        super().__init__(DUPLICATE_MESSAGE)


# Both names are part of the public surface.
DuplicateSelectorPartError = DuplicateSingletonError


class OrderViolationError(SelectorError):
    """Raised when a part follows a part of a strictly later category."""

    def __init__(self, stage: Stage, last_stage: Stage) -> None:
        self.stage = stage
        self.last_stage = last_stage
        super().__init__(ORDER_MESSAGE)


class InvalidCombinatorError(SelectorError, ValueError):
    """Raised when ``combine`` receives an unknown combinator token."""

    def __init__(self, token: object) -> None:
        self.token = token
        super().__init__(
            f"Invalid combinator {token!r}; expected one of ' ', '+', '~', '>'"
        )


class SelectorDocumentError(SelectorError):
    """Raised when a selector document cannot be turned into a selector."""
