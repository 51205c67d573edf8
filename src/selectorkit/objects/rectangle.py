"""Rectangle value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rectangle:
    """A width/height pair with a computed area."""

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height
