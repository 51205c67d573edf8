"""Fluent builder for CSS compound selectors.

Each compound selector has the shape::

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class parts may occur several times; element, id
and pseudo-element at most once.  Parts must be added in that order, although
repeatable parts may be added again while their category is the latest one.
"""

from __future__ import annotations

import logging

from selectorkit.selector.combinator import CombinedSelector, Combinator, combine
from selectorkit.selector.errors import DuplicateSingletonError, OrderViolationError
from selectorkit.selector.model import Renderable, SelectorFragment, Stage

__all__ = ["CompoundSelector", "SelectorBuilder", "builder"]

logger = logging.getLogger(__name__)


class CompoundSelector:
    """A single selector chain built by successive method calls.

    Every method validates before mutating and returns ``self``, so calls
    compose left to right::

        CompoundSelector().element("a").class_("btn").pseudo_class("focus")
    """

    def __init__(self, fragment: SelectorFragment | None = None) -> None:
        self.fragment = fragment if fragment is not None else SelectorFragment()

    # --- guards ---------------------------------------------------------------

    def _advance(self, stage: Stage, value: str) -> None:
        fragment = self.fragment
        if stage.is_singleton and fragment.has(stage):
            logger.debug("Rejected duplicate %s part %r", stage.name.lower(), value)
            raise DuplicateSingletonError(stage)
        if fragment.last_stage is not None and fragment.last_stage > stage:
            logger.debug(
                "Rejected %s part %r after %s",
                stage.name.lower(),
                value,
                fragment.last_stage.name.lower(),
            )
            raise OrderViolationError(stage, fragment.last_stage)
        fragment.last_stage = stage

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> CompoundSelector:
        """Set the element type."""
        self._advance(Stage.ELEMENT, value)
        self.fragment.tag = value
        return self

    def id(self, value: str) -> CompoundSelector:
        """Set the ``#id`` part."""
        self._advance(Stage.ID, value)
        self.fragment.id = value
        return self

    def class_(self, value: str) -> CompoundSelector:
        """Append a ``.class`` part."""
        self._advance(Stage.CLASS, value)
        self.fragment.classes.append(value)
        return self

    def attr(self, value: str) -> CompoundSelector:
        """Append an ``[attr]`` part; *value* is the raw bracket interior."""
        self._advance(Stage.ATTRIBUTE, value)
        self.fragment.attributes.append(value)
        return self

    def pseudo_class(self, value: str) -> CompoundSelector:
        """Append a ``:pseudo-class`` part."""
        self._advance(Stage.PSEUDO_CLASS, value)
        self.fragment.pseudo_classes.append(value)
        return self

    def pseudo_element(self, value: str) -> CompoundSelector:
        """Set the ``::pseudo-element`` part."""
        self._advance(Stage.PSEUDO_ELEMENT, value)
        self.fragment.pseudo_element = value
        return self

    # --- output ---------------------------------------------------------------

    def render(self) -> str:
        """Render the parts in canonical category order."""
        return self.fragment.to_css()

    stringify = render

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"CompoundSelector({self.render()!r})"


class SelectorBuilder:
    """Facade whose methods each start a new :class:`CompoundSelector`."""

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: Combinator | str, right: Renderable
    ) -> CombinedSelector:
        return combine(left, combinator, right)


builder = SelectorBuilder()
