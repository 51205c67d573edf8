"""Combinators joining two renderable selectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from selectorkit.selector.errors import InvalidCombinatorError
from selectorkit.selector.model import Renderable

__all__ = ["Combinator", "CombinedSelector", "combine"]


class Combinator(Enum):
    """Combinator tokens understood by :func:`combine`."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def coerce(cls, token: Combinator | str) -> Combinator:
        """Return the member for *token*, raising on unknown tokens."""
        if isinstance(token, cls):
            return token
        try:
            return cls(token)
        except ValueError:
            raise InvalidCombinatorError(token) from None


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator.

    The operands are held by reference and rendered lazily.  A space is always
    written on both sides of the token, so the descendant combinator renders
    as three spaces.
    """

    left: Renderable
    combinator: Combinator
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator.value} {self.right.render()}"

    stringify = render

    def __str__(self) -> str:
        return self.render()


def combine(
    left: Renderable, combinator: Combinator | str, right: Renderable
) -> CombinedSelector:
    """Join *left* and *right* with *combinator* (``' '``, ``'+'``, ``'~'``, ``'>'``)."""
    for operand in (left, right):
        if not isinstance(operand, Renderable):
            raise TypeError(
                f"combine() operands must have a render() method, got {type(operand).__name__}"
            )
    return CombinedSelector(left=left, combinator=Combinator.coerce(combinator), right=right)
