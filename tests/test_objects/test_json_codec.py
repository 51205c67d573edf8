"""Tests for the JSON helpers."""

import json

import pytest

from selectorkit.objects import Rectangle, from_json, to_json


class Circle:
    def __init__(self, radius):
        raise AssertionError("from_json must not call __init__")

    def get_circumference(self):
        return 2 * 3.14 * self.radius


# ---------------------------------------------------------------------------
# to_json
# ---------------------------------------------------------------------------


class TestToJson:
    def test_list_is_compact(self):
        assert to_json([1, 2, 3]) == "[1,2,3]"

    def test_dict_keeps_insertion_order(self):
        assert to_json({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_dataclass(self):
        assert to_json(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object(self):
        class Point:
            def __init__(self):
                self.x = 1
                self.y = 2

        assert to_json(Point()) == '{"x":1,"y":2}'

    def test_indent(self):
        text = to_json({"a": 1}, indent=2)
        assert text == '{\n  "a": 1\n}'

    def test_scalars(self):
        assert to_json("s") == '"s"'
        assert to_json(None) == "null"

    def test_unserializable(self):
        with pytest.raises(TypeError):
            to_json({1, 2})


# ---------------------------------------------------------------------------
# from_json
# ---------------------------------------------------------------------------


class TestFromJson:
    def test_plain_class_skips_init(self):
        c = from_json(Circle, '{"radius":10}')
        assert isinstance(c, Circle)
        assert c.radius == 10
        assert c.get_circumference() == pytest.approx(62.8)

    def test_dataclass_built_through_init(self):
        r = from_json(Rectangle, '{"width":10,"height":20}')
        assert r == Rectangle(10, 20)
        assert r.area() == 200

    def test_dataclass_drops_unknown_keys(self):
        r = from_json(Rectangle, '{"width":1,"height":2,"area":2}')
        assert r == Rectangle(1, 2)

    def test_roundtrip_through_to_json(self):
        r = Rectangle(3, 4)
        assert from_json(Rectangle, to_json(r)) == r

    def test_non_object_rejected(self):
        with pytest.raises(TypeError):
            from_json(Circle, "[1,2,3]")

    def test_invalid_json(self):
        with pytest.raises(json.JSONDecodeError):
            from_json(Circle, "{not json")

    def test_dict_class(self):
        data = from_json(dict, '{"a":1,"b":[2]}')
        assert type(data) is dict
        assert data == {"a": 1, "b": [2]}

    def test_dict_subclass(self):
        class Attrs(dict):
            pass

        data = from_json(Attrs, '{"a":1}')
        assert isinstance(data, Attrs)
        assert data["a"] == 1

    def test_slots_class(self):
        class Slotted:
            __slots__ = ("x", "y")

        s = from_json(Slotted, '{"x":1,"y":2}')
        assert isinstance(s, Slotted)
        assert (s.x, s.y) == (1, 2)

    def test_slots_class_unknown_field(self):
        class Slotted:
            __slots__ = ("x",)

        with pytest.raises(TypeError, match="'z'"):
            from_json(Slotted, '{"x":1,"z":2}')

    def test_builtin_without_attributes(self):
        with pytest.raises(TypeError):
            from_json(int, '{"a":1}')


# ---------------------------------------------------------------------------
# Non-finite numbers
# ---------------------------------------------------------------------------


def _strict_loads(text):
    def reject(token):
        raise ValueError(token)

    return json.loads(text, parse_constant=reject)


class TestNonFiniteFloats:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_scalar_written_as_null(self, value):
        assert to_json(value) == "null"

    def test_nested_values(self):
        text = to_json({"a": [1.5, float("nan")], "b": (float("inf"),)})
        assert text == '{"a":[1.5,null],"b":[null]}'
        assert _strict_loads(text) == {"a": [1.5, None], "b": [None]}

    def test_dataclass_field(self):
        assert to_json(Rectangle(float("nan"), 2.0)) == '{"width":null,"height":2.0}'

    def test_indented_output_is_strict_json(self):
        text = to_json({"x": float("-inf")}, indent=2)
        assert _strict_loads(text) == {"x": None}
