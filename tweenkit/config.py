"""
Runtime configuration for the animation facade.
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Hashable, Mapping, Optional

from .core.exceptions import OptionsError
from .core.record import DEFAULT_DURATION, DEFAULT_EASING

ENV_PREFIX = "TWEENKIT_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class TweenConfig:
    """
    Defaults applied by Animation.

    Attributes:
        default_duration: Duration (ms) when an animation gives none
        default_easing: Easing when an animation gives none
        fade_cut_group: Cut group shared by fade_in/fade_out
        fps_limit: Optional frame rate cap handed to the frame driver
        speed: Playback speed multiplier handed to the frame driver
        log_level: Level applied by configure_logging()
        reduced_motion: Run every animation with zero duration and delay
    """
    default_duration: float = DEFAULT_DURATION
    default_easing: str = DEFAULT_EASING
    fade_cut_group: Hashable = 1
    fps_limit: Optional[float] = None
    speed: float = 1.0
    log_level: str = "WARNING"
    reduced_motion: bool = False

    def __post_init__(self):
        if self.default_duration < 0:
            raise OptionsError("default_duration must be >= 0", option="default_duration")
        if self.speed < 0:
            raise OptionsError("speed must be >= 0", option="speed")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TweenConfig":
        """
        Build a config from TWEENKIT_* environment variables.

        Example: TWEENKIT_DEFAULT_DURATION=500 TWEENKIT_REDUCED_MOTION=1
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            values[f.name] = _coerce(f.name, raw)
        return cls(**values)

    def configure_logging(self, log_file: Optional[str] = None):
        from .core.logging_config import setup_logging
        return setup_logging(level=self.log_level, log_file=log_file)


def _coerce(name: str, raw: str) -> Any:
    raw = raw.strip()
    try:
        if name in ("default_duration", "speed"):
            return float(raw)
        if name == "fps_limit":
            return float(raw) if raw else None
        if name == "reduced_motion":
            lowered = raw.lower()
            if lowered in _TRUE:
                return True
            if lowered in _FALSE:
                return False
            raise ValueError(raw)
        if name == "fade_cut_group":
            return int(raw) if raw.lstrip("-").isdigit() else raw
    except ValueError:
        raise OptionsError(f"Invalid value for {ENV_PREFIX}{name.upper()}", option=name, value=raw) from None
    return raw


__all__ = ["ENV_PREFIX", "TweenConfig"]
