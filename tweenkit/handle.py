"""
Caller-facing controllers: AnimationHandle for one record, Timeline for the
handles produced by a multi-target animate() call.
"""

import logging
from typing import Any, Callable, Iterator, List, Optional, Union

from .core.interpolation import clamp
from .core.record import AnimationRecord, CompletionSignal

logger = logging.getLogger(__name__)


class AnimationHandle:
    """
    Controls one animation record.

    The handle tracks the record's slot index and registration generation.
    The index becomes None when the record is deregistered (completed or
    stopped); pause/resume/stop on a deregistered or stale handle do nothing.
    Every control method returns the handle for chaining.

    Usage:
        handle = animation.animate(element, {"opacity": [0, 1]}, duration=500)
        handle.then(lambda: print("done"))
        handle.pause().seek(250).resume()
    """

    def __init__(self, scheduler, record: AnimationRecord):
        self._scheduler = scheduler
        self._record: Optional[AnimationRecord] = record
        self._index: Optional[int] = None
        self._generation: Optional[int] = None
        record.handle = self

    # Called by the scheduler -------------------------------------------------

    def _attach(self, index: int, generation: int) -> None:
        self._index = index
        self._generation = generation

    def _move(self, index: int) -> None:
        self._index = index

    def _release(self) -> None:
        self._index = None

    # State --------------------------------------------------------------------

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def generation(self) -> Optional[int]:
        return self._generation

    @property
    def record(self) -> Optional[AnimationRecord]:
        return self._record

    @property
    def signal(self) -> Optional[CompletionSignal]:
        return self._record.signal if self._record is not None else None

    @property
    def active(self) -> bool:
        return self._slot() is not None

    @property
    def done(self) -> bool:
        """True once the animation completed naturally."""
        return self._record is not None and self._record.signal.resolved

    @property
    def destroyed(self) -> bool:
        return self._record is None

    def _slot(self) -> Optional[int]:
        """Live slot index, clearing the index if it went stale."""
        if self._index is None or self._scheduler is None:
            return None
        if self._scheduler.get(self._index, self._generation) is not self._record:
            logger.debug(f"Handle for slot {self._index} is stale; detaching")
            self._index = None
            return None
        return self._index

    # Control ----------------------------------------------------------------

    def pause(self) -> "AnimationHandle":
        index = self._slot()
        if index is not None:
            self._scheduler.pause(index)
        return self

    def resume(self) -> "AnimationHandle":
        index = self._slot()
        if index is not None:
            self._scheduler.resume(index)
        return self

    def play(self) -> "AnimationHandle":
        """Unpause, or re-run the animation from where it stopped if it was deregistered."""
        if self._record is None:
            return self
        index = self._slot()
        if index is not None:
            self._scheduler.resume(index)
        else:
            self._run()
        return self

    def stop(self) -> "AnimationHandle":
        """Deregister without resolving the completion signal."""
        index = self._slot()
        if index is not None:
            self._scheduler.stop(index)
        self._index = None
        return self

    def reverse(self) -> "AnimationHandle":
        """Flip direction; takes effect on the next tick without a time reset."""
        if self._record is not None:
            self._record.base_reversed = not self._record.base_reversed
        return self

    def restart(self) -> "AnimationHandle":
        """
        Rewind to the start of the delay with a fresh completion signal.

        Continuations attached to the previous signal never run.
        """
        if self._record is None:
            return self
        self._record.reset()
        index = self._slot()
        if index is not None:
            self._scheduler.resume(index)
        else:
            self._run()
        return self

    def replay(self) -> "AnimationHandle":
        return self.restart()

    def seek(self, time: float) -> "AnimationHandle":
        """Set elapsed time (ms); clamped only when the next tick computes progress."""
        if self._record is not None:
            self._record.elapsed = time
        return self

    def progress(self, progress: float) -> "AnimationHandle":
        """Jump to a fraction of the duration."""
        if self._record is not None:
            self._record.elapsed = clamp(progress) * self._record.duration
        return self

    def then(self, on_done: Callable[[], Any]) -> "AnimationHandle":
        """Run ``on_done`` once, after a tick completes the animation."""
        if self._record is not None:
            self._record.signal.then(on_done)
        return self

    def destroy(self) -> None:
        """Detach permanently; later control calls are no-ops."""
        if self._record is not None and self._record.handle is self:
            self._record.handle = None
        self._record = None
        self._index = None
        self._scheduler = None

    def _run(self) -> None:
        record = self._record
        if record.signal.abandoned:
            record.signal = CompletionSignal()
        record.paused = False
        record.completed = False
        self._scheduler.register(record)

    def __repr__(self) -> str:
        if self._record is None:
            return "AnimationHandle(destroyed)"
        return (
            f"AnimationHandle(index={self._index}, state={self._record.state.value}, "
            f"elapsed={self._record.elapsed:g}, loop={self._record.loop_count})"
        )


class Timeline:
    """
    Ordered group of handles from one multi-target animation.

    Control calls are broadcast to every handle. ``then`` fires once every
    member has completed; an empty timeline completes immediately.
    """

    def __init__(self, factory: Optional[Callable[..., Any]] = None):
        self._factory = factory
        self._handles: List[AnimationHandle] = []

    @property
    def handles(self) -> List[AnimationHandle]:
        return list(self._handles)

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[AnimationHandle]:
        return iter(list(self._handles))

    def add(self, target, properties=None, options=None, offset: float = 0, **kwargs) -> "Timeline":
        """
        Animate ``target`` through the owning animation and keep the result.

        ``offset`` (ms) is added to the track's delay. Timelines returned by
        the factory are flattened into this one.
        """
        if self._factory is None:
            raise RuntimeError("Timeline has no animation factory; use append() instead")
        result = self._factory(target, properties, options, **kwargs)
        if offset:
            added = result.handles if isinstance(result, Timeline) else [result]
            for handle in added:
                record = handle.record
                record.delay += offset
                record.elapsed -= offset
        return self.append(result)

    def append(self, item: Union[AnimationHandle, "Timeline", None]) -> "Timeline":
        if isinstance(item, Timeline):
            self._handles.extend(item._handles)
        elif item is not None:
            self._handles.append(item)
        return self

    @property
    def done(self) -> bool:
        return all(handle.done for handle in self._handles)

    @property
    def active(self) -> bool:
        return any(handle.active for handle in self._handles)

    def play(self) -> "Timeline":
        for handle in self._handles:
            handle.play()
        return self

    def pause(self) -> "Timeline":
        for handle in self._handles:
            handle.pause()
        return self

    def resume(self) -> "Timeline":
        for handle in self._handles:
            handle.resume()
        return self

    def stop(self) -> "Timeline":
        for handle in self._handles:
            handle.stop()
        return self

    def restart(self) -> "Timeline":
        for handle in self._handles:
            handle.restart()
        return self

    def reverse(self) -> "Timeline":
        for handle in self._handles:
            handle.reverse()
        return self

    def then(self, on_done: Callable[[], Any]) -> "Timeline":
        """Run ``on_done`` once all current member signals have resolved."""
        signals = [h.signal for h in self._handles if h.signal is not None]
        aggregate = CompletionSignal()
        aggregate.then(on_done)

        remaining = [len(signals)]

        def member_done():
            remaining[0] -= 1
            if remaining[0] == 0:
                aggregate.resolve()

        if not signals:
            aggregate.resolve()
        for signal in signals:
            signal.then(member_done)
        return self

    def __repr__(self) -> str:
        return f"Timeline({len(self._handles)} handles)"


__all__ = ["AnimationHandle", "Timeline"]
