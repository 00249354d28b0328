"""
Unit Tests for Property Resolution and Target Adapters

Run with: pytest tests/test_properties.py -v
"""

import pytest

from tweenkit.adapters import (
    GenericTargetAdapter,
    StyleElement,
    TransformChannel,
    VisualTargetAdapter,
    adapt_target,
    format_number,
)
from tweenkit.core.color import Color
from tweenkit.core.exceptions import PropertyFormatError
from tweenkit.core.properties import PropertyResolver, parse_leading_float


@pytest.fixture
def resolver():
    return PropertyResolver()


class TestResolve:
    """Tests for building PropertySpecs."""

    def test_plain_target_value(self, resolver):
        [spec] = resolver.resolve({"opacity": 0.5})
        assert spec.name == "opacity"
        assert spec.from_value is None
        assert spec.to_value == 0.5
        assert not spec.is_transform

    def test_from_to_pair(self, resolver):
        [spec] = resolver.resolve({"opacity": [0, 1]})
        assert (spec.from_value, spec.to_value) == (0, 1)

    def test_transform_alias(self, resolver):
        specs = resolver.resolve({"x": 100, "rotate": 45, "scale": 2})
        assert [(s.name, s.unit, s.is_transform) for s in specs] == [
            ("translateX", "px", True),
            ("rotate", "deg", True),
            ("scale", "", True),
        ]

    def test_aliases_not_expanded_for_generic_targets(self, resolver):
        [spec] = resolver.resolve({"x": 5}, visual=False)
        assert spec.name == "x"
        assert not spec.is_transform

    def test_none_values_skipped(self, resolver):
        specs = resolver.resolve({"opacity": None, "width": 10})
        assert [s.name for s in specs] == ["width"]

    def test_pairs_input_keeps_order(self, resolver):
        specs = resolver.resolve([("width", 10), ("height", 20)])
        assert [s.name for s in specs] == ["width", "height"]

    def test_bad_pair_length(self, resolver):
        with pytest.raises(PropertyFormatError) as exc_info:
            resolver.resolve({"opacity": [0, 0.5, 1]})
        assert exc_info.value.details["property"] == "opacity"

    def test_bad_entry(self, resolver):
        with pytest.raises(PropertyFormatError):
            resolver.resolve(["opacity"])

    def test_none_properties(self, resolver):
        assert resolver.resolve(None) == []


class TestResolveValue:
    """Tests for single value normalization."""

    def test_numbers_pass_through(self, resolver):
        assert resolver.resolve_value("width", 12) == 12

    def test_units_stripped(self, resolver):
        assert resolver.resolve_value("width", "10px") == 10.0
        assert resolver.resolve_value("width", "-2.5em") == -2.5

    def test_unparsable_becomes_zero(self, resolver):
        assert resolver.resolve_value("width", "auto") == 0

    def test_hex_string_is_color(self, resolver):
        assert resolver.resolve_value("width", "#fff") == Color(255, 255, 255)

    def test_named_color_on_color_property(self, resolver):
        assert resolver.resolve_value("background-color", "red") == Color(255, 0, 0)

    def test_rgb_string_on_other_property(self, resolver):
        assert resolver.resolve_value("shadow", "rgb(1, 2, 3)") == Color(1, 2, 3)

    def test_color_cloned(self, resolver):
        original = Color("red")
        resolved = resolver.resolve_value("color", original)
        assert resolved == original
        assert resolved is not original

    def test_leading_float(self):
        assert parse_leading_float("  3.5deg") == 3.5
        assert parse_leading_float("1e2px") == 100.0
        assert parse_leading_float("px") is None


class TestInitialValue:
    """Tests for reading "from" values off targets."""

    def test_transform_defaults(self, resolver, element):
        adapter = adapt_target(element)
        assert resolver.get_initial_value(adapter, "translateX", True) == 0
        assert resolver.get_initial_value(adapter, "scale", True) == 1
        assert resolver.get_initial_value(adapter, "scaleY", True) == 1

    def test_cached_transform(self, resolver, element):
        element.transforms["translateY"] = TransformChannel(42.0, "px")
        adapter = adapt_target(element)
        assert resolver.get_initial_value(adapter, "translateY", True) == 42.0

    def test_empty_opacity_is_one(self, resolver, element):
        assert resolver.get_initial_value(adapt_target(element), "opacity", False) == 1

    def test_empty_color_is_transparent(self, resolver, element):
        value = resolver.get_initial_value(adapt_target(element), "color", False)
        assert value == Color(0, 0, 0, 0)

    def test_computed_value(self, resolver):
        element = StyleElement(computed={"opacity": "0.25", "width": "80px"})
        adapter = adapt_target(element)
        assert resolver.get_initial_value(adapter, "opacity", False) == 0.25
        assert resolver.get_initial_value(adapter, "width", False) == 80.0

    def test_generic_attribute(self, resolver):
        class Box:
            width = 7

        adapter = adapt_target(Box())
        assert resolver.get_initial_value(adapter, "width", False) == 7


class TestAdapters:
    """Tests for adapter selection and writes."""

    def test_adapter_selection(self, element):
        assert isinstance(adapt_target(element), VisualTargetAdapter)
        assert isinstance(adapt_target({"a": 1}), GenericTargetAdapter)
        adapter = GenericTargetAdapter(object())
        assert adapt_target(adapter) is adapter

    def test_visual_style_write_stringifies_colors(self, element):
        adapter = adapt_target(element)
        adapter.set("color", Color("red"))
        adapter.set("opacity", 0.5)
        assert element.style["color"] == "rgba(255, 0, 0, 1)"
        assert element.style["opacity"] == 0.5

    def test_transform_string(self, element):
        adapter = adapt_target(element)
        adapter.set_transform_channel("translateX", 10.0, "px")
        adapter.set_transform_channel("rotate", 45.5, "deg")
        adapter.write_transform()
        assert element.style["transform"] == "translateX(10px) rotate(45.5deg)"

    def test_detach(self, element):
        parent = element.parent
        adapter = adapt_target(element)
        assert adapter.attached
        adapter.detach()
        assert not adapter.attached
        assert element not in parent.children

    def test_generic_mapping(self):
        state = {"volume": 0}
        adapter = adapt_target(state)
        adapter.set("volume", 0.5)
        assert state["volume"] == 0.5
        assert adapter.get("volume") == 0.5

    def test_generic_accessor(self):
        class Knob:
            def __init__(self):
                self._level = 3

            def level(self, value=None):
                if value is None:
                    return self._level
                self._level = value

        knob = Knob()
        adapter = adapt_target(knob)
        assert adapter.get("level") == 3
        adapter.set("level", 9)
        assert knob._level == 9

    def test_format_number(self):
        assert format_number(100.0) == "100"
        assert format_number(0.5) == "0.5"
        assert format_number(-0.0000001) == "0"
        assert format_number(3) == "3"
