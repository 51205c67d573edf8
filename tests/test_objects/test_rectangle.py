"""Tests for the Rectangle value object."""

import dataclasses

import pytest

from selectorkit.objects import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area() == 200

    def test_fractional_area(self):
        assert Rectangle(1.5, 2).area() == pytest.approx(3.0)

    def test_zero_area(self):
        assert Rectangle(0, 5).area() == 0

    def test_frozen(self):
        r = Rectangle(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            r.width = 3  # type: ignore[misc]

    def test_equality(self):
        assert Rectangle(2, 3) == Rectangle(2, 3)
