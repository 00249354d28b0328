"""
Interpolation helpers shared by the scheduler and the easing tools.
"""

import numbers
from typing import Any, Callable, Optional

import numpy as np

from .color import Color


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between two values."""
    return a + (b - a) * t


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def compute_progress(
    time: float,
    duration: float,
    reversed_: bool = False,
    easing: Optional[Callable[[float], float]] = None,
) -> float:
    """
    Map a local time to eased progress.

    Args:
        time: Time into the current pass (ms)
        duration: Pass length (ms); zero means "already finished"
        reversed_: Play the pass backwards
        easing: Easing callable, or None for identity

    Returns:
        Eased progress; the easing input is always clamped to [0, 1]
    """
    effective = duration - time if reversed_ else time
    progress = 1.0 if duration == 0 else effective / duration
    progress = clamp(progress)
    if easing is not None:
        progress = easing(progress)
    return progress


def interpolate_value(from_value: Any, to_value: Any, progress: float,
                      out: Optional[Color] = None) -> Any:
    """
    Interpolate numbers linearly and colors component-wise.

    Args:
        from_value: Start value (number or Color)
        to_value: End value (number or Color-like)
        progress: Eased progress
        out: Optional Color buffer to write color results into

    Returns:
        The interpolated value, or None when the pair cannot be
        interpolated (the caller leaves the target unmodified)
    """
    if isinstance(from_value, Color):
        if out is None:
            out = from_value.clone()
        else:
            out.copy_from(from_value)
        try:
            return out.lerp(to_value, progress)
        except ValueError:
            return None

    if is_number(from_value) and is_number(to_value):
        return lerp(from_value, to_value, progress)

    return None


def sample_progress(
    duration: float,
    step: float,
    easing: Optional[Callable[[float], float]] = None,
    reversed_: bool = False,
) -> np.ndarray:
    """
    Progress values a tween would produce when ticked every ``step`` ms.

    Returns:
        Array of progress values from time 0 through ``duration``
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    times = np.arange(0.0, duration + step / 2, step)
    if duration > 0:
        times = np.clip(times, 0.0, duration)
    return np.array([compute_progress(float(t), duration, reversed_, easing) for t in times])


__all__ = [
    "lerp",
    "clamp",
    "is_number",
    "compute_progress",
    "interpolate_value",
    "sample_progress",
]
