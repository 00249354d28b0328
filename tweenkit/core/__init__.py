"""
Core building blocks: easing curves, colors, interpolation, property
resolution and animation records.
"""

from .easing import (
    EASINGS,
    BEZIER_PRESETS,
    cubic_bezier_point,
    bezier_easing,
    parse_cubic_bezier,
    make_bezier,
    resolve_easing,
    apply_easing,
    sample_easing,
    list_easings,
)
from .color import (
    Color,
    NAMED_COLORS,
    parse_hex,
    parse_color_string,
)
from .interpolation import (
    lerp,
    clamp,
    is_number,
    compute_progress,
    interpolate_value,
    sample_progress,
)
from .properties import (
    COLOR_PROPERTIES,
    TRANSFORM_ALIASES,
    PropertySpec,
    PropertyResolver,
    parse_leading_float,
)
from .record import (
    DEFAULT_DURATION,
    DEFAULT_EASING,
    INFINITE,
    AnimationState,
    SignalState,
    CompletionSignal,
    AnimationOptions,
    AnimationRecord,
)
from .exceptions import (
    TweenException,
    PropertyFormatError,
    ColorParseError,
    EasingError,
    OptionsError,
)

__all__ = [
    # Easing
    "EASINGS",
    "BEZIER_PRESETS",
    "cubic_bezier_point",
    "bezier_easing",
    "parse_cubic_bezier",
    "make_bezier",
    "resolve_easing",
    "apply_easing",
    "sample_easing",
    "list_easings",
    # Color
    "Color",
    "NAMED_COLORS",
    "parse_hex",
    "parse_color_string",
    # Interpolation
    "lerp",
    "clamp",
    "is_number",
    "compute_progress",
    "interpolate_value",
    "sample_progress",
    # Properties
    "COLOR_PROPERTIES",
    "TRANSFORM_ALIASES",
    "PropertySpec",
    "PropertyResolver",
    "parse_leading_float",
    # Records
    "DEFAULT_DURATION",
    "DEFAULT_EASING",
    "INFINITE",
    "AnimationState",
    "SignalState",
    "CompletionSignal",
    "AnimationOptions",
    "AnimationRecord",
    # Exceptions
    "TweenException",
    "PropertyFormatError",
    "ColorParseError",
    "EasingError",
    "OptionsError",
]
