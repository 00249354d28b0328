"""
Frame drivers - call the scheduler once per frame with the elapsed delta.

ManualFrameDriver lets the caller advance time explicitly (tests, offline
rendering, host event loops). RealtimeFrameDriver runs a blocking wall-clock
loop on the calling thread until it is stopped.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)

FrameCallback = Callable[[float], None]


class FrameDriver:
    """
    Base frame driver.

    The bound callback receives the frame delta in milliseconds, already
    multiplied by ``speed``. The scheduler starts the driver on its first
    registration and stops it when it runs out of work.
    """

    def __init__(self, callback: Optional[FrameCallback] = None,
                 fps_limit: Optional[float] = None, speed: float = 1.0):
        self.callback = callback
        self.speed = speed
        self.limiter: Optional[float] = None
        self.frame_count = 0
        self._running = False
        if fps_limit:
            self.limit_fps(fps_limit)

    @property
    def running(self) -> bool:
        return self._running

    def bind(self, callback: FrameCallback) -> "FrameDriver":
        self.callback = callback
        return self

    def start(self) -> None:
        if self._running:
            return
        self._running = True
        logger.debug(f"{type(self).__name__} started")

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        logger.debug(f"{type(self).__name__} stopped after {self.frame_count} frames")

    def limit_fps(self, fps: float) -> None:
        """Minimum interval between frames; 0 or None removes the limit."""
        self.limiter = 1000.0 / fps if fps and fps > 0 else None

    def remove_limiter(self) -> None:
        self.limiter = None

    def set_speed(self, multiplier: float) -> None:
        self.speed = multiplier

    def _emit(self, delta: float) -> None:
        self.frame_count += 1
        if self.callback is not None:
            self.callback(delta * self.speed)


class ManualFrameDriver(FrameDriver):
    """
    Driver advanced by the caller.

    Usage:
        driver = ManualFrameDriver()
        scheduler = Scheduler(driver)
        ...
        driver.advance(16)          # one 16ms frame
        driver.advance_frames(60)   # up to 60 frames, stops early when idle
    """

    def __init__(self, callback: Optional[FrameCallback] = None,
                 fps_limit: Optional[float] = None, speed: float = 1.0,
                 frame_time: float = 1000.0 / 60):
        super().__init__(callback, fps_limit, speed)
        self.frame_time = frame_time
        self._pending = 0.0

    def advance(self, delta: Optional[float] = None) -> bool:
        """
        Emit one frame of ``delta`` ms (default ``frame_time``).

        With a limiter set, deltas shorter than the limit accumulate until
        a full interval has passed. Returns True if a frame was emitted.
        """
        if not self._running:
            return False

        delta = self.frame_time if delta is None else delta
        if self.limiter:
            self._pending += delta
            if self._pending < self.limiter:
                return False
            delta, self._pending = self._pending, 0.0

        self._emit(delta)
        return True

    def advance_frames(self, count: int, delta: Optional[float] = None) -> int:
        """Emit up to ``count`` frames; returns how many were emitted."""
        emitted = 0
        for _ in range(count):
            if not self._running:
                break
            if self.advance(delta):
                emitted += 1
        return emitted

    def stop(self) -> None:
        super().stop()
        self._pending = 0.0


class RealtimeFrameDriver(FrameDriver):
    """
    Blocking wall-clock driver.

    ``run`` loops on the calling thread, measuring deltas with
    ``time.perf_counter`` and sleeping to honour ``target_fps`` (and the
    limiter, if tighter). The first frame has a zero delta.
    """

    def __init__(self, callback: Optional[FrameCallback] = None,
                 fps_limit: Optional[float] = None, speed: float = 1.0,
                 target_fps: float = 60.0,
                 clock: Callable[[], float] = time.perf_counter,
                 sleep: Callable[[float], None] = time.sleep):
        super().__init__(callback, fps_limit, speed)
        self.target_fps = target_fps
        self._clock = clock
        self._sleep = sleep

    def run(self, max_frames: Optional[int] = None) -> int:
        """
        Run frames until the driver is stopped or ``max_frames`` is reached.

        Returns:
            Number of frames emitted by this call
        """
        self.start()
        interval = 1000.0 / self.target_fps if self.target_fps > 0 else 0.0
        if self.limiter:
            interval = max(interval, self.limiter)

        emitted = 0
        previous = None
        while self._running:
            now = self._clock() * 1000.0
            delta = 0.0 if previous is None else now - previous
            previous = now

            self._emit(delta)
            emitted += 1
            if max_frames is not None and emitted >= max_frames:
                break

            spent = self._clock() * 1000.0 - now
            if interval > spent:
                self._sleep((interval - spent) / 1000.0)

        return emitted


__all__ = [
    "FrameCallback",
    "FrameDriver",
    "ManualFrameDriver",
    "RealtimeFrameDriver",
]
