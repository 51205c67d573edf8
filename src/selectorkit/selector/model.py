"""Selector model: Stage ordering, SelectorFragment state, Renderable protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol, runtime_checkable


class Stage(IntEnum):
    """Category of a selector part, in the order parts must be written.

    Ordinals:
        0 = element
        1 = id
        2 = class
        3 = attribute
        4 = pseudo-class
        5 = pseudo-element
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETONS


_SINGLETONS = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})


@runtime_checkable
class Renderable(Protocol):
    """Anything that can be rendered to a CSS selector string."""

    def render(self) -> str: ...


@dataclass
class SelectorFragment:
    """Accumulated parts of a single compound selector.

    Attributes:
        tag: Element type, set at most once.
        id: Element id, set at most once.
        classes: Class names in insertion order.
        attributes: Raw attribute selector bodies (without brackets).
        pseudo_classes: Pseudo-class names in insertion order.
        pseudo_element: Pseudo-element name, set at most once.
        last_stage: Highest category recorded so far, ``None`` when empty.
    """

    tag: str | None = None
    id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element: str | None = None
    last_stage: Stage | None = None

    def has(self, stage: Stage) -> bool:
        """True if the singleton part for *stage* is already set."""
        if stage is Stage.ELEMENT:
            return self.tag is not None
        if stage is Stage.ID:
            return self.id is not None
        if stage is Stage.PSEUDO_ELEMENT:
            return self.pseudo_element is not None
        return False

    def to_css(self) -> str:
        parts = [self.tag or ""]
        if self.id is not None:
            parts.append(f"#{self.id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{attr}]" for attr in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element is not None:
            parts.append(f"::{self.pseudo_element}")
        return "".join(parts)
