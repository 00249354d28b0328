"""
Easing curves for tweens.

Named curves follow the CSS keyword style (``ease-in-out-cubic``), bezier
presets use CSS ``cubic-bezier`` control points, and arbitrary
``cubic-bezier(x1, y1, x2, y2)`` strings are accepted as well.
"""

import functools
import math
import re
from typing import Callable, Dict, Optional, Tuple, Union

import numpy as np

from .exceptions import EasingError

EasingFunction = Callable[[float], float]
EasingSpec = Union[str, EasingFunction, None]


def cubic_bezier_point(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """Calculate point on cubic bezier curve at parameter t."""
    mt = 1 - t
    return mt*mt*mt*p0 + 3*mt*mt*t*p1 + 3*mt*t*t*p2 + t*t*t*p3


def bezier_easing(x1: float, y1: float, x2: float, y2: float, t: float) -> float:
    """
    CSS-style cubic bezier easing.

    Control points: (0,0), (x1,y1), (x2,y2), (1,1)

    Args:
        x1, y1: First control point
        x2, y2: Second control point
        t: Input value 0-1 (normalized progress)

    Returns:
        Eased value (may leave 0-1 for overshooting curves)
    """
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0

    # Binary search for the curve parameter whose x equals t
    low, high = 0.0, 1.0
    for _ in range(30):
        mid = (low + high) / 2
        x = cubic_bezier_point(mid, 0, x1, x2, 1)
        if x < t:
            low = mid
        else:
            high = mid

    param = (low + high) / 2
    return cubic_bezier_point(param, 0, y1, y2, 1)


# ============================================================================
# NAMED CURVES
# ============================================================================

def linear(t: float) -> float:
    return t


def ease_in_quad(t: float) -> float:
    """Quadratic ease in."""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease out."""
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    """Quadratic ease in-out. Passes through exactly 0.5 at t=0.5."""
    return 2 * t * t if t < 0.5 else -1 + (4 - 2 * t) * t


def ease_in_sine(t: float) -> float:
    return 1 - math.cos((t * math.pi) / 2)


def ease_out_sine(t: float) -> float:
    return math.sin((t * math.pi) / 2)


def ease_in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def ease_in_cubic(t: float) -> float:
    """Cubic ease in."""
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease out."""
    return 1 - pow(1 - t, 3)


def ease_in_out_cubic(t: float) -> float:
    """Cubic ease in-out."""
    return 4 * t * t * t if t < 0.5 else 1 - pow(-2 * t + 2, 3) / 2


def ease_in_quart(t: float) -> float:
    return t * t * t * t


def ease_out_quart(t: float) -> float:
    return 1 - pow(1 - t, 4)


def ease_in_out_quart(t: float) -> float:
    return 8 * pow(t, 4) if t < 0.5 else 1 - pow(-2 * t + 2, 4) / 2


def ease_in_quint(t: float) -> float:
    return t * t * t * t * t


def ease_out_quint(t: float) -> float:
    return 1 - pow(1 - t, 5)


def ease_in_out_quint(t: float) -> float:
    return 16 * pow(t, 5) if t < 0.5 else 1 - pow(-2 * t + 2, 5) / 2


def ease_in_expo(t: float) -> float:
    """Exponential ease in."""
    return 0 if t == 0 else pow(2, 10 * t - 10)


def ease_out_expo(t: float) -> float:
    """Exponential ease out."""
    return 1 if t == 1 else 1 - pow(2, -10 * t)


def ease_in_out_expo(t: float) -> float:
    """Exponential ease in-out."""
    if t == 0:
        return 0
    if t == 1:
        return 1
    if t < 0.5:
        return pow(2, 20 * t - 10) / 2
    return (2 - pow(2, -20 * t + 10)) / 2


def ease_in_circ(t: float) -> float:
    return 1 - math.sqrt(1 - t * t)


def ease_out_circ(t: float) -> float:
    return math.sqrt(1 - pow(t - 1, 2))


def ease_in_out_circ(t: float) -> float:
    if t < 0.5:
        return (1 - math.sqrt(1 - pow(2 * t, 2))) / 2
    return (math.sqrt(1 - pow(-2 * t + 2, 2)) + 1) / 2


_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1


def ease_in_back(t: float) -> float:
    return _BACK_C3 * t * t * t - _BACK_C1 * t * t


def ease_out_back(t: float) -> float:
    return 1 + _BACK_C3 * pow(t - 1, 3) + _BACK_C1 * pow(t - 1, 2)


def ease_in_out_back(t: float) -> float:
    if t < 0.5:
        return (pow(2 * t, 2) * ((_BACK_C2 + 1) * 2 * t - _BACK_C2)) / 2
    return (pow(2 * t - 2, 2) * ((_BACK_C2 + 1) * (t * 2 - 2) + _BACK_C2) + 2) / 2


def ease_out_bounce(t: float) -> float:
    n1, d1 = 7.5625, 2.75
    if t < 1 / d1:
        return n1 * t * t
    if t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    if t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


def ease_in_bounce(t: float) -> float:
    return 1 - ease_out_bounce(1 - t)


def ease_in_out_bounce(t: float) -> float:
    if t < 0.5:
        return (1 - ease_out_bounce(1 - 2 * t)) / 2
    return (1 + ease_out_bounce(2 * t - 1)) / 2


# "ease" is the symmetric quadratic curve, so ease(0.5) == 0.5 exactly.
EASINGS: Dict[str, EasingFunction] = {
    "linear": linear,
    "ease": ease_in_out_quad,
    "ease-in": ease_in_quad,
    "ease-out": ease_out_quad,
    "ease-in-out": ease_in_out_quad,
    "ease-in-sine": ease_in_sine,
    "ease-out-sine": ease_out_sine,
    "ease-in-out-sine": ease_in_out_sine,
    "ease-in-cubic": ease_in_cubic,
    "ease-out-cubic": ease_out_cubic,
    "ease-in-out-cubic": ease_in_out_cubic,
    "ease-in-quart": ease_in_quart,
    "ease-out-quart": ease_out_quart,
    "ease-in-out-quart": ease_in_out_quart,
    "ease-in-quint": ease_in_quint,
    "ease-out-quint": ease_out_quint,
    "ease-in-out-quint": ease_in_out_quint,
    "ease-in-expo": ease_in_expo,
    "ease-out-expo": ease_out_expo,
    "ease-in-out-expo": ease_in_out_expo,
    "ease-in-circ": ease_in_circ,
    "ease-out-circ": ease_out_circ,
    "ease-in-out-circ": ease_in_out_circ,
    "ease-in-back": ease_in_back,
    "ease-out-back": ease_out_back,
    "ease-in-out-back": ease_in_out_back,
    "ease-in-bounce": ease_in_bounce,
    "ease-out-bounce": ease_out_bounce,
    "ease-in-out-bounce": ease_in_out_bounce,
}


# ============================================================================
# BEZIER PRESETS (CSS control points)
# Format: (x1, y1, x2, y2)
# ============================================================================

BEZIER_PRESETS: Dict[str, Tuple[float, float, float, float]] = {
    # CSS keyword curves, under their own names to keep "ease" symmetric
    "css-ease": (0.25, 0.1, 0.25, 1.0),
    "css-ease-in": (0.42, 0.0, 1.0, 1.0),
    "css-ease-out": (0.0, 0.0, 0.58, 1.0),
    "css-ease-in-out": (0.42, 0.0, 0.58, 1.0),

    # Long, soft deceleration
    "smooth-out": (0.33, 1.0, 0.68, 1.0),

    "snap": (0.0, 1.0, 0.0, 1.0),          # Instant snap
    "anticipate": (0.38, -0.4, 0.88, 1.0), # Pull back then forward
    "overshoot": (0.25, 0.0, 0.0, 1.4),    # Go past then settle
    "soft-bounce": (0.34, 1.2, 0.64, 1.0), # Slight bounce at end
}

_CUBIC_BEZIER_RE = re.compile(
    r"^cubic-bezier\(\s*"
    r"(-?[0-9]*\.?[0-9]+)\s*,\s*(-?[0-9]*\.?[0-9]+)\s*,\s*"
    r"(-?[0-9]*\.?[0-9]+)\s*,\s*(-?[0-9]*\.?[0-9]+)\s*\)$"
)


def parse_cubic_bezier(value: str) -> Tuple[float, float, float, float]:
    """
    Parse a CSS ``cubic-bezier(x1, y1, x2, y2)`` string.

    Raises:
        EasingError: If the string is malformed or x values leave [0, 1]
    """
    match = _CUBIC_BEZIER_RE.match(value.strip().lower())
    if not match:
        raise EasingError("Malformed cubic-bezier definition", easing=value)

    x1, y1, x2, y2 = (float(v) for v in match.groups())
    if not (0.0 <= x1 <= 1.0 and 0.0 <= x2 <= 1.0):
        raise EasingError("cubic-bezier x values must lie in [0, 1]", easing=value)
    return x1, y1, x2, y2


def make_bezier(x1: float, y1: float, x2: float, y2: float) -> EasingFunction:
    """Build a one-argument easing function from bezier control points."""
    return functools.partial(bezier_easing, x1, y1, x2, y2)


def resolve_easing(easing: EasingSpec) -> Optional[EasingFunction]:
    """
    Turn an ``easing`` option into a callable.

    ``None`` and ``"linear"`` resolve to ``None``, which the scheduler treats
    as identity and skips entirely.

    Raises:
        EasingError: For unknown names or malformed bezier strings
    """
    if easing is None:
        return None
    if callable(easing):
        return easing
    if not isinstance(easing, str):
        raise EasingError("Easing must be a name or a callable", easing=easing)

    name = easing.strip()
    if name == "linear":
        return None
    if name in EASINGS:
        return EASINGS[name]
    if name in BEZIER_PRESETS:
        return make_bezier(*BEZIER_PRESETS[name])
    if name.lower().startswith("cubic-bezier"):
        return make_bezier(*parse_cubic_bezier(name))

    raise EasingError(f"Unknown easing '{easing}'", easing=easing)


def apply_easing(t: float, easing: EasingSpec) -> float:
    """
    Apply an easing to a progress value clamped to [0, 1].

    Args:
        t: Input progress
        easing: Easing name, callable or None

    Returns:
        Eased value
    """
    t = min(max(t, 0.0), 1.0)
    func = resolve_easing(easing)
    return t if func is None else func(t)


def sample_easing(easing: EasingSpec, num_points: int = 11) -> np.ndarray:
    """
    Sample an easing over evenly spaced progress values in [0, 1].

    Returns:
        Array of shape (num_points,) with the eased values
    """
    if num_points < 2:
        raise EasingError("num_points must be at least 2", easing=easing)

    func = resolve_easing(easing)
    xs = np.linspace(0.0, 1.0, num_points)
    if func is None:
        return xs
    return np.fromiter((func(float(x)) for x in xs), dtype=float, count=num_points)


def list_easings() -> list:
    """Get list of available easing names (named curves and bezier presets)."""
    return sorted(set(EASINGS) | set(BEZIER_PRESETS))


__all__ = [
    "EasingFunction",
    "EasingSpec",
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
]
