"""
Property resolution - turns caller property maps into typed PropertySpecs.

Handles transform shorthand aliases, unit inference, color detection and the
lazy "from" lookup performed on an animation's first tick.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from .color import Color
from .exceptions import PropertyFormatError
from .interpolation import is_number

logger = logging.getLogger(__name__)

# Properties where we expect color values
COLOR_PROPERTIES = frozenset({
    "color",
    "background",
    "background-color",
    "border-color",
    "border-top-color",
    "border-right-color",
    "border-bottom-color",
    "border-left-color",
    "outline-color",
    "fill",
    "stroke",
})

# Shorthand -> (transform function, default unit)
TRANSFORM_ALIASES = {
    "x": ("translateX", "px"),
    "y": ("translateY", "px"),
    "z": ("translateZ", "px"),
    "rotate": ("rotate", "deg"),
    "rotateX": ("rotateX", "deg"),
    "rotateY": ("rotateY", "deg"),
    "scale": ("scale", ""),
    "scaleX": ("scaleX", ""),
    "scaleY": ("scaleY", ""),
    "skewX": ("skewX", "deg"),
    "skewY": ("skewY", "deg"),
}

_LEADING_FLOAT = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

PropertyInput = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


@dataclass
class PropertySpec:
    """
    One animated property of a record.

    Attributes:
        name: Canonical property name (aliases already expanded)
        from_value: Start value, or None to read it from the target lazily
        to_value: End value
        is_transform: Written as a transform channel instead of a style value
        unit: Unit appended to transform channels ("px", "deg" or "")
        buffer: Reused output Color for color interpolation
        resolved: True once the start value is known; a lazy start value is
            read from the target exactly once
    """
    name: str
    from_value: Any
    to_value: Any
    is_transform: bool = False
    unit: str = ""
    buffer: Optional[Color] = field(default=None, repr=False, compare=False)
    resolved: bool = field(default=False, repr=False, compare=False)


def parse_leading_float(text: str) -> Optional[float]:
    """Parse the leading number of a string ("10px" -> 10.0), or None."""
    match = _LEADING_FLOAT.match(text.strip())
    if not match:
        return None
    return float(match.group(0))


class PropertyResolver:
    """
    Normalize property maps into PropertySpecs.

    Usage:
        resolver = PropertyResolver()
        specs = resolver.resolve({"opacity": [0, 1], "x": 100})
        # [PropertySpec("opacity", 0, 1), PropertySpec("translateX", None, 100, True, "px")]
    """

    def resolve(self, properties: Optional[PropertyInput], visual: bool = True) -> List[PropertySpec]:
        """
        Build specs from a mapping or a sequence of (name, value) entries.

        Args:
            properties: {name: to} / {name: [from, to]} or [(name, value), ...]
            visual: Expand transform aliases (only meaningful for visual targets)

        Returns:
            Specs in input order; keys whose value is None are skipped

        Raises:
            PropertyFormatError: If an entry or [from, to] pair is malformed
        """
        if properties is None:
            return []

        entries = properties.items() if isinstance(properties, Mapping) else properties
        specs = []
        for entry in entries:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise PropertyFormatError("Property entries must be (name, value) pairs", value=entry)

            name, value = entry
            if value is None:
                continue

            is_transform = False
            unit = ""
            if visual and name in TRANSFORM_ALIASES:
                name, unit = TRANSFORM_ALIASES[name]
                is_transform = True

            if isinstance(value, (list, tuple)):
                if len(value) != 2:
                    raise PropertyFormatError(
                        f'Invalid property format for "{name}". Expected [from, to].',
                        property_name=name,
                        value=value,
                    )
                from_raw, to_raw = value
            else:
                from_raw, to_raw = None, value

            specs.append(PropertySpec(
                name=name,
                from_value=self.resolve_value(name, from_raw),
                to_value=self.resolve_value(name, to_raw),
                is_transform=is_transform,
                unit=unit,
            ))
        return specs

    def resolve_value(self, name: str, value: Any) -> Any:
        """
        Resolve one raw value to a number or Color.

        Unparsable strings become 0 unless they look like rgb()/hsl() colors.
        Values of any other type are returned unchanged.
        """
        if value is None:
            return None

        if isinstance(value, Color):
            return value.clone()

        if is_number(value):
            return value

        if not isinstance(value, str):
            return value

        if name in COLOR_PROPERTIES:
            try:
                return Color(value)
            except ValueError:
                pass

        text = value.strip()
        if text.startswith("#"):
            return Color.from_hex(text)

        parsed = parse_leading_float(text)
        if parsed is None:
            if text.startswith("rgb") or text.startswith("hsl"):
                return Color(text)
            logger.debug(f"Unparsable value {value!r} for '{name}', falling back to 0")
            return 0
        return parsed

    def get_initial_value(self, adapter, property: str, is_transform: bool) -> Any:
        """
        Read the current value of a property from its target.

        Visual targets read cached transform channels (0, or 1 for the scale
        family, when unset) or computed style (opacity defaults to 1, color
        properties to transparent). Generic targets read the field, calling
        it when it is an accessor.
        """
        if adapter.is_visual:
            if is_transform:
                channel = adapter.get_transform_channel(property)
                if channel is not None:
                    return channel.value
                return 1 if property.startswith("scale") else 0

            value = adapter.get_computed_value(property)
            if value is None or (isinstance(value, str) and value == ""):
                if property in COLOR_PROPERTIES:
                    return Color(0, 0, 0, 0)
                if property == "opacity":
                    return 1
            return self.resolve_value(property, value)

        return self.resolve_value(property, adapter.get(property))


__all__ = [
    "COLOR_PROPERTIES",
    "TRANSFORM_ALIASES",
    "PropertySpec",
    "PropertyInput",
    "PropertyResolver",
    "parse_leading_float",
]
