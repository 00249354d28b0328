"""
Target adapter protocol - how the scheduler reads and writes animated values.

An adapter is chosen once per animation, when the record is created, so the
tick loop never re-inspects target types. Visual targets (style-bearing
elements) get style and aggregated transform writes; everything else goes
through the generic getter/setter adapter.
"""

from dataclasses import dataclass
from typing import Any, Dict, MutableMapping, Optional, Protocol, runtime_checkable


@dataclass
class TransformChannel:
    """One transform function value, e.g. translateX(10px)."""
    value: float
    unit: str = ""

    def to_css(self, name: str) -> str:
        return f"{name}({format_number(self.value)}{self.unit})"


def format_number(value: float) -> str:
    """Format a number without trailing zeros ("100", "0.5", "-12.25")."""
    if isinstance(value, int):
        return str(value)
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@runtime_checkable
class VisualTarget(Protocol):
    """
    Structural type of a style-bearing element.

    ``transforms`` caches the per-target transform channels so several
    animations can own different channels of the same element.
    """

    style: MutableMapping[str, Any]
    transforms: Dict[str, TransformChannel]
    parent: Optional[Any]

    def get_computed_style(self, property: str) -> Any:
        ...

    def remove_child(self, child: Any) -> None:
        ...


@runtime_checkable
class TargetAdapter(Protocol):
    """
    Protocol for scheduler target adapters.

    Usage:
        adapter = adapt_target(element)
        adapter.set_style_value("opacity", 0.5)
    """

    @property
    def target(self) -> Any:
        ...

    @property
    def is_visual(self) -> bool:
        ...

    @property
    def attached(self) -> bool:
        ...

    def get(self, property: str) -> Any:
        ...

    def set(self, property: str, value: Any) -> None:
        ...

    def get_transform_channel(self, property: str) -> Optional[TransformChannel]:
        ...

    def set_transform_channel(self, property: str, value: float, unit: str = "") -> None:
        ...

    def write_transform(self) -> None:
        ...

    def detach(self) -> None:
        ...


class BaseTargetAdapter:
    """
    Base class for target adapters with no-op visual operations.

    Subclass this and implement get/set.
    """

    is_visual = False

    def __init__(self, target: Any):
        self._target = target

    @property
    def target(self) -> Any:
        return self._target

    @property
    def attached(self) -> bool:
        return False

    def get(self, property: str) -> Any:
        raise NotImplementedError

    def set(self, property: str, value: Any) -> None:
        raise NotImplementedError

    def get_transform_channel(self, property: str) -> Optional[TransformChannel]:
        return None

    def set_transform_channel(self, property: str, value: float, unit: str = "") -> None:
        self.set(property, value)

    def write_transform(self) -> None:
        pass

    def detach(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


class GenericTargetAdapter(BaseTargetAdapter):
    """
    Adapter for plain objects and mappings.

    A callable slot is treated as an accessor: it is called with no
    arguments to read and with the new value to write.
    """

    def _slot(self, property: str) -> Any:
        target = self._target
        if isinstance(target, MutableMapping):
            return target.get(property)
        return getattr(target, property, None)

    def get(self, property: str) -> Any:
        slot = self._slot(property)
        if callable(slot):
            return slot()
        return slot

    def set(self, property: str, value: Any) -> None:
        slot = self._slot(property)
        if callable(slot):
            slot(value)
        elif isinstance(self._target, MutableMapping):
            self._target[property] = value
        else:
            setattr(self._target, property, value)


class VisualTargetAdapter(BaseTargetAdapter):
    """Adapter for VisualTarget elements: style writes plus aggregated transforms."""

    is_visual = True

    @property
    def attached(self) -> bool:
        return self._target.parent is not None

    def get(self, property: str) -> Any:
        return self.get_computed_value(property)

    def set(self, property: str, value: Any) -> None:
        self.set_style_value(property, value)

    def get_computed_value(self, property: str) -> Any:
        return self._target.get_computed_style(property)

    def set_style_value(self, property: str, value: Any) -> None:
        if not isinstance(value, (int, float, str)):
            value = str(value)
        self._target.style[property] = value

    def get_transform_channel(self, property: str) -> Optional[TransformChannel]:
        return self._target.transforms.get(property)

    def set_transform_channel(self, property: str, value: float, unit: str = "") -> None:
        channel = self._target.transforms.get(property)
        if channel is None:
            self._target.transforms[property] = TransformChannel(value, unit)
        else:
            channel.value = value
            channel.unit = unit

    def transform_string(self) -> str:
        return " ".join(
            channel.to_css(name) for name, channel in self._target.transforms.items()
        )

    def write_transform(self) -> None:
        """Write every cached channel as one transform value."""
        self._target.style["transform"] = self.transform_string()

    def detach(self) -> None:
        parent = self._target.parent
        if parent is not None:
            parent.remove_child(self._target)


def adapt_target(target: Any) -> BaseTargetAdapter:
    """
    Pick the adapter for a target.

    Existing adapters are returned unchanged, VisualTarget elements get a
    VisualTargetAdapter, and anything else a GenericTargetAdapter.
    """
    if isinstance(target, BaseTargetAdapter):
        return target
    if isinstance(target, VisualTarget):
        return VisualTargetAdapter(target)
    return GenericTargetAdapter(target)


__all__ = [
    "TransformChannel",
    "format_number",
    "VisualTarget",
    "TargetAdapter",
    "BaseTargetAdapter",
    "GenericTargetAdapter",
    "VisualTargetAdapter",
    "adapt_target",
]
