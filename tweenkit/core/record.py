"""
Animation record, options and completion signal.

AnimationRecord is the mutable per-animation state the scheduler advances
every tick. AnimationOptions is the validated form of the caller's options
dict. CompletionSignal is the explicit completion channel handed out through
handles.
"""

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional, Union

from .easing import EasingFunction, EasingSpec
from .exceptions import OptionsError
from .properties import PropertySpec

logger = logging.getLogger(__name__)

DEFAULT_DURATION = 300.0
DEFAULT_EASING = "ease"
INFINITE = -1


class AnimationState(Enum):
    """Lifecycle state of a record."""
    DELAYED = "delayed"       # elapsed < 0
    RUNNING = "running"       # first pass
    LOOPING = "looping"       # pass > 0 of a repeating animation
    PAUSED = "paused"
    COMPLETED = "completed"   # terminal, signal resolved
    STOPPED = "stopped"       # terminal, signal abandoned


class SignalState(Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    ABANDONED = "abandoned"


class CompletionSignal:
    """
    Single-shot completion channel.

    Continuations attached with ``then`` run once when the signal is
    resolved. An abandoned signal (stop, restart, cut-group eviction) is
    never settled, so its continuations never run.
    """

    def __init__(self):
        self._state = SignalState.PENDING
        self._callbacks: List[Callable[[], Any]] = []

    @property
    def state(self) -> SignalState:
        return self._state

    @property
    def resolved(self) -> bool:
        return self._state is SignalState.RESOLVED

    @property
    def abandoned(self) -> bool:
        return self._state is SignalState.ABANDONED

    @property
    def pending(self) -> bool:
        return self._state is SignalState.PENDING

    def then(self, callback: Callable[[], Any]) -> "CompletionSignal":
        """Run ``callback`` on resolution (immediately if already resolved)."""
        if self._state is SignalState.RESOLVED:
            _invoke(callback)
        elif self._state is SignalState.PENDING:
            self._callbacks.append(callback)
        return self

    def resolve(self) -> bool:
        """Settle the signal. Returns False if it was not pending."""
        if self._state is not SignalState.PENDING:
            return False
        self._state = SignalState.RESOLVED
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            _invoke(callback)
        return True

    def abandon(self) -> bool:
        """Drop the signal without settling it. Returns False if not pending."""
        if self._state is not SignalState.PENDING:
            return False
        self._state = SignalState.ABANDONED
        self._callbacks = []
        return True

    def __repr__(self) -> str:
        return f"CompletionSignal({self._state.value}, callbacks={len(self._callbacks)})"


def _invoke(callback: Callable[[], Any]) -> None:
    try:
        callback()
    except Exception:
        logger.exception(f"Completion callback {callback!r} raised")


# camelCase spellings accepted from option dicts
_OPTION_ALIASES = {
    "removeOnComplete": "remove_on_complete",
    "onComplete": "on_complete",
    "cutGroup": "cut_group",
}


@dataclass
class AnimationOptions:
    """
    Validated animation options.

    Attributes:
        duration: Pass length in ms (>= 0)
        easing: Easing name, cubic-bezier string, callable, or "linear"
        delay: Start delay in ms
        repeat: Extra passes; -1 (or True) repeats forever
        yoyo: Alternate direction on every loop
        remove_on_complete: Detach visual targets from their parent on completion
        on_complete: Called once when the animation completes
        cut_group: Animations sharing a cut group cancel each other
    """
    duration: float = DEFAULT_DURATION
    easing: EasingSpec = DEFAULT_EASING
    delay: float = 0.0
    repeat: Union[int, bool] = 0
    yoyo: bool = False
    remove_on_complete: bool = False
    on_complete: Optional[Callable[[], Any]] = None
    cut_group: Optional[Hashable] = None

    def __post_init__(self):
        if self.duration is None:
            self.duration = DEFAULT_DURATION
        if self.delay is None:
            self.delay = 0.0
        if self.repeat is None or self.repeat is False:
            self.repeat = 0
        elif self.repeat is True:
            self.repeat = INFINITE

        if self.duration < 0:
            raise OptionsError("duration must be >= 0", option="duration", value=self.duration)
        if not isinstance(self.repeat, int) or self.repeat < INFINITE:
            raise OptionsError("repeat must be True, -1 or a non-negative integer",
                               option="repeat", value=self.repeat)
        if self.on_complete is not None and not callable(self.on_complete):
            raise OptionsError("on_complete must be callable", option="on_complete")

        self.yoyo = bool(self.yoyo)
        self.remove_on_complete = bool(self.remove_on_complete)

    @classmethod
    def from_value(
        cls,
        value: Union["AnimationOptions", Mapping[str, Any], None] = None,
        defaults: Optional[Mapping[str, Any]] = None,
        **overrides,
    ) -> "AnimationOptions":
        """
        Build options from a dict, an existing AnimationOptions, or None.

        Precedence: overrides > value > defaults > dataclass defaults.

        Raises:
            OptionsError: On unknown keys or invalid values
        """
        merged: Dict[str, Any] = {}
        for source in (defaults, _as_dict(value), overrides):
            if not source:
                continue
            for key, item in source.items():
                merged[_OPTION_ALIASES.get(key, key)] = item

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise OptionsError(f"Unknown animation option(s): {', '.join(unknown)}", option=unknown[0])

        return cls(**merged)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _as_dict(value) -> Optional[Mapping[str, Any]]:
    if value is None:
        return None
    if isinstance(value, AnimationOptions):
        return value.to_dict()
    if isinstance(value, Mapping):
        return value
    raise OptionsError("Options must be a mapping or AnimationOptions", value=value)


@dataclass(eq=False)
class AnimationRecord:
    """
    Mutable per-animation state.

    ``elapsed`` starts at ``-delay``; negative elapsed time is the delay
    still to run. ``generation`` is assigned by the scheduler on every
    registration and lets handles detect stale slots. Records created by
    one multi-target call share a ``scope`` token and never evict each other
    through their cut group.
    """
    target: Any
    adapter: Any
    properties: List[PropertySpec]
    duration: float = DEFAULT_DURATION
    easing: Optional[EasingFunction] = None
    delay: float = 0.0
    repeat: int = 0
    yoyo: bool = False
    remove_on_complete: bool = False
    cut_group: Optional[Hashable] = None
    on_complete: Optional[Callable[[], Any]] = None

    elapsed: float = field(init=False)
    paused: bool = False
    base_reversed: bool = False
    loop_count: int = 0
    signal: CompletionSignal = field(default_factory=CompletionSignal, repr=False)

    generation: int = -1
    handle: Optional[Any] = field(default=None, repr=False)
    scope: Optional[Any] = field(default=None, repr=False)
    registered: bool = False
    completed: bool = False
    stopped: bool = False
    last_tick: int = field(default=-1, repr=False)

    def __post_init__(self):
        if self.duration < 0:
            raise OptionsError("duration must be >= 0", option="duration", value=self.duration)
        self.elapsed = -self.delay

    @classmethod
    def from_options(cls, target: Any, adapter: Any, properties: List[PropertySpec],
                     options: AnimationOptions, easing: Optional[EasingFunction]) -> "AnimationRecord":
        return cls(
            target=target,
            adapter=adapter,
            properties=properties,
            duration=options.duration,
            easing=easing,
            delay=options.delay,
            repeat=options.repeat,
            yoyo=options.yoyo,
            remove_on_complete=options.remove_on_complete,
            cut_group=options.cut_group,
            on_complete=options.on_complete,
        )

    @property
    def is_visual(self) -> bool:
        return self.adapter.is_visual

    @property
    def infinite(self) -> bool:
        return self.repeat == INFINITE

    @property
    def reversed(self) -> bool:
        """Effective direction of the current pass."""
        return self.base_reversed != (self.yoyo and self.loop_count % 2 == 1)

    @property
    def state(self) -> AnimationState:
        if self.completed:
            return AnimationState.COMPLETED
        if self.stopped:
            return AnimationState.STOPPED
        if self.paused:
            return AnimationState.PAUSED
        if self.elapsed < 0:
            return AnimationState.DELAYED
        if self.loop_count > 0:
            return AnimationState.LOOPING
        return AnimationState.RUNNING

    def reset(self) -> CompletionSignal:
        """
        Rewind to the start of the delay with a fresh completion signal.

        The previous signal is abandoned, never settled.
        """
        self.elapsed = -self.delay
        self.loop_count = 0
        self.completed = False
        self.stopped = False
        self.signal.abandon()
        self.signal = CompletionSignal()
        return self.signal


__all__ = [
    "DEFAULT_DURATION",
    "DEFAULT_EASING",
    "INFINITE",
    "AnimationState",
    "SignalState",
    "CompletionSignal",
    "AnimationOptions",
    "AnimationRecord",
]
