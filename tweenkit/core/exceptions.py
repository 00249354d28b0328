"""
Exception hierarchy for tweenkit.

Every error raised by the package derives from TweenException, which carries
a free-form ``details`` dict alongside the message.
"""

from typing import Any, Dict, Optional


class TweenException(Exception):
    """Base exception for all tweenkit errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({extra})"


class PropertyFormatError(TweenException):
    """A property value could not be normalized to a (from, to) pair."""

    def __init__(self, message: str, property_name=None, value=None, **kwargs):
        details = kwargs.copy()
        if property_name is not None:
            details["property"] = property_name
        if value is not None:
            details["value"] = value
        super().__init__(message, details)


class ColorParseError(TweenException, ValueError):
    """A color string or component set could not be parsed."""

    def __init__(self, message: str, value=None, **kwargs):
        details = kwargs.copy()
        if value is not None:
            details["value"] = value
        super().__init__(message, details)


class EasingError(TweenException, ValueError):
    """Unknown easing name or malformed cubic-bezier definition."""

    def __init__(self, message: str, easing=None, **kwargs):
        details = kwargs.copy()
        if easing is not None:
            details["easing"] = easing
        super().__init__(message, details)


class OptionsError(TweenException, ValueError):
    """Invalid animation options (negative duration, bad repeat, unknown key)."""

    def __init__(self, message: str, option=None, **kwargs):
        details = kwargs.copy()
        if option is not None:
            details["option"] = option
        super().__init__(message, details)


__all__ = [
    "TweenException",
    "PropertyFormatError",
    "ColorParseError",
    "EasingError",
    "OptionsError",
]
