"""
Scheduler - advances every active animation once per frame.

Active records live in one dense list. Removal is swap-with-last then pop,
so registration and removal are O(1) and removal is safe in the middle of a
tick. Handles address records by slot index plus a generation number; the
scheduler keeps the index of a moved record's handle up to date.

Each animated property of a target is owned by at most one record; a new
record animating the same property of the same target stops the older one.
"""

import logging
from typing import Dict, Hashable, Iterator, List, Optional, Sequence

from .core.interpolation import compute_progress, interpolate_value, is_number
from .core.logging_config import log_performance
from .core.properties import PropertyResolver
from .core.color import Color
from .core.record import AnimationRecord
from .driver import FrameDriver, ManualFrameDriver

logger = logging.getLogger(__name__)


class Scheduler:
    """
    Owns the active records and the frame driver.

    Usage:
        scheduler = Scheduler(ManualFrameDriver())
        index = scheduler.register(record)
        scheduler.tick(16)  # or driver.advance(16)
    """

    def __init__(self, driver: Optional[FrameDriver] = None,
                 resolver: Optional[PropertyResolver] = None):
        self._records: List[AnimationRecord] = []
        self._generation = 0
        self._tick_id = 0
        self._cursor = 0
        self._ticking = False
        self._warned_types = set()
        # id(target) -> {property name -> owning record}
        self._active_props: Dict[int, Dict[str, AnimationRecord]] = {}
        self.resolver = resolver or PropertyResolver()
        self.driver = driver or ManualFrameDriver()
        self.driver.bind(self.tick)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AnimationRecord]:
        return iter(list(self._records))

    @property
    def records(self) -> Sequence[AnimationRecord]:
        """Read-only snapshot of the active records in slot order."""
        return tuple(self._records)

    @property
    def ticking(self) -> bool:
        return self._ticking

    def get(self, index: Optional[int], generation: Optional[int] = None) -> Optional[AnimationRecord]:
        """
        Record at ``index``, or None if the slot is empty or, when a
        generation is given, holds a different registration.
        """
        if index is None or index < 0 or index >= len(self._records):
            return None
        record = self._records[index]
        if generation is not None and record.generation != generation:
            return None
        return record

    def find(self, target=None, cut_group: Optional[Hashable] = None) -> List[AnimationRecord]:
        """Active records matching a target (by identity) and/or cut group."""
        result = []
        for record in self._records:
            if target is not None and record.target is not target:
                continue
            if cut_group is not None and record.cut_group != cut_group:
                continue
            result.append(record)
        return result

    def is_active(self, handle) -> bool:
        """True if ``handle`` still owns a live slot in this scheduler."""
        if handle is None or handle.index is None:
            return False
        return self.get(handle.index, handle.generation) is handle.record

    # ------------------------------------------------------------------
    # Registration / removal
    # ------------------------------------------------------------------

    def register(self, record: AnimationRecord) -> int:
        """
        Append a record and return its slot index.

        Any active record in the same cut group (outside the record's own
        scope) is stopped first, as is any record still animating one of the
        same properties on the same target. The frame driver is started if
        idle. Records registered during a tick start advancing on the next
        tick.
        """
        if record.registered:
            return self.index_of(record)

        if record.cut_group is not None:
            self._evict_cut_group(record)
        self._stop_conflicting(record)

        self._generation += 1
        record.generation = self._generation
        record.registered = True
        record.stopped = False
        if self.ticking:
            record.last_tick = self._tick_id

        self._records.append(record)
        index = len(self._records) - 1
        self._register_props(record)
        if record.handle is not None:
            record.handle._attach(index, record.generation)

        logger.debug(f"Registered animation #{record.generation} in slot {index}")

        if not self.driver.running:
            self.driver.start()
        return index

    def index_of(self, record: AnimationRecord) -> int:
        handle = record.handle
        if handle is not None and self.get(handle.index, record.generation) is record:
            return handle.index
        return self._records.index(record)

    def remove(self, index: int) -> AnimationRecord:
        """
        Remove the record at ``index`` by moving the last record into its
        slot. Does not touch the record's completion signal.
        """
        records = self._records
        record = records[index]
        last = len(records) - 1
        if index != last:
            moved = records[last]
            records[index] = moved
            if moved.handle is not None:
                moved.handle._move(index)
        records.pop()
        self._cleanup_props(record)

        record.registered = False
        if record.handle is not None:
            record.handle._release()

        # The slot now holds a record that may not have run this tick yet;
        # rewind the cursor so the tick revisits it. Records already
        # advanced this tick are skipped by their last_tick stamp.
        if self.ticking and index <= self._cursor:
            self._cursor = index - 1
        return record

    def stop(self, index: int) -> Optional[AnimationRecord]:
        """Deregister silently; the completion signal is abandoned."""
        record = self.get(index)
        if record is None:
            return None
        self.remove(index)
        record.stopped = True
        record.signal.abandon()
        logger.debug(f"Stopped animation #{record.generation}")
        return record

    def pause(self, index: int) -> None:
        record = self.get(index)
        if record is not None:
            record.paused = True

    def resume(self, index: int) -> None:
        record = self.get(index)
        if record is not None:
            record.paused = False

    def clear(self) -> None:
        """Stop every active record and the driver."""
        while self._records:
            self.stop(len(self._records) - 1)
        self.driver.stop()

    def _evict_cut_group(self, record: AnimationRecord) -> None:
        cut_group = record.cut_group
        for i in range(len(self._records) - 1, -1, -1):
            if i >= len(self._records):
                continue
            other = self._records[i]
            if other.cut_group != cut_group:
                continue
            if record.scope is not None and other.scope is record.scope:
                continue
            logger.debug(f"Cut group {cut_group!r} evicts animation #{other.generation}")
            self.stop(i)

    # ------------------------------------------------------------------
    # Property ownership
    # ------------------------------------------------------------------

    def _stop_conflicting(self, record: AnimationRecord) -> None:
        props = self._active_props.get(id(record.target))
        if not props:
            return
        for spec in record.properties:
            existing = props.get(spec.name)
            if existing is None or existing is record or not existing.registered:
                continue
            logger.debug(
                f"Animation of '{spec.name}' replaces animation #{existing.generation} on the same target"
            )
            self.stop(self.index_of(existing))

    def _register_props(self, record: AnimationRecord) -> None:
        props = self._active_props.setdefault(id(record.target), {})
        for spec in record.properties:
            props[spec.name] = record

    def _cleanup_props(self, record: AnimationRecord) -> None:
        key = id(record.target)
        props = self._active_props.get(key)
        if props is None:
            return
        for spec in record.properties:
            if props.get(spec.name) is record:
                del props[spec.name]
        if not props:
            del self._active_props[key]

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    @log_performance
    def tick(self, delta_time: float) -> None:
        """Advance every active, unpaused record by ``delta_time`` ms."""
        if self.ticking:
            logger.warning("Scheduler.tick called re-entrantly; ignoring nested tick")
            return

        self._tick_id += 1
        tick_id = self._tick_id
        records = self._records
        self._ticking = True
        try:
            i = 0
            while i < len(records):
                record = records[i]
                if record.last_tick == tick_id:
                    i += 1
                    continue
                record.last_tick = tick_id
                self._cursor = i
                self._advance(record, delta_time)
                i = self._cursor + 1
        finally:
            self._ticking = False
            self._cursor = 0

        if not records:
            self.driver.stop()

    def _advance(self, record: AnimationRecord, delta_time: float) -> None:
        if record.paused:
            return

        record.elapsed += delta_time
        if record.elapsed < 0:
            return

        duration = record.duration
        time = record.elapsed
        complete = False

        if time >= duration:
            if record.repeat == -1 or record.loop_count < record.repeat:
                record.elapsed -= duration
                time = record.elapsed
                record.loop_count += 1
            else:
                time = duration
                complete = True

        progress = compute_progress(time, duration, record.reversed, record.easing)
        self._apply(record, progress)

        # A setter may have stopped this record while values were applied
        if complete and record.registered:
            self.remove(self.index_of(record))
            self._complete(record)

    def _apply(self, record: AnimationRecord, progress: float) -> None:
        adapter = record.adapter
        has_transform = False

        for spec in record.properties:
            if not spec.resolved:
                self._resolve_from(adapter, spec)

            from_value = spec.from_value
            if isinstance(from_value, Color) and spec.buffer is None:
                spec.buffer = from_value.clone()

            value = interpolate_value(from_value, spec.to_value, progress, spec.buffer)
            if value is None:
                self._warn_unsupported(spec)
                continue

            if spec.is_transform and adapter.is_visual:
                adapter.set_transform_channel(spec.name, value, spec.unit)
                has_transform = True
            elif isinstance(value, Color) and not adapter.is_visual:
                adapter.set(spec.name, value.clone())
            else:
                adapter.set(spec.name, value)

        if has_transform:
            adapter.write_transform()

    def _resolve_from(self, adapter, spec) -> None:
        if spec.from_value is None:
            value = self.resolver.get_initial_value(adapter, spec.name, spec.is_transform)
            if value is None and is_number(spec.to_value):
                # Missing numeric fields start from zero
                value = 0
            spec.from_value = value
        spec.resolved = True

    def _complete(self, record: AnimationRecord) -> None:
        record.completed = True
        logger.debug(f"Animation #{record.generation} completed after {record.loop_count} loop(s)")

        if record.on_complete is not None:
            try:
                record.on_complete()
            except Exception:
                logger.exception(f"on_complete callback of animation #{record.generation} raised")

        record.signal.resolve()

        adapter = record.adapter
        if record.remove_on_complete and adapter.is_visual and adapter.attached:
            adapter.detach()

    def _warn_unsupported(self, spec) -> None:
        key = (spec.name, type(spec.from_value).__name__, type(spec.to_value).__name__)
        if key not in self._warned_types:
            self._warned_types.add(key)
            logger.debug(
                f"Cannot interpolate '{spec.name}' from {key[1]} to {key[2]}; leaving it unmodified"
            )


__all__ = ["Scheduler"]
