"""
Unit Tests for Frame Drivers

Run with: pytest tests/test_driver.py -v
"""

import pytest

from tweenkit import Animation, ManualFrameDriver, RealtimeFrameDriver, Scheduler


class FakeClock:
    """Clock advanced only by sleep()."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class TestManualFrameDriver:
    """Tests for the caller-driven driver."""

    def test_idle_driver_emits_nothing(self):
        deltas = []
        driver = ManualFrameDriver(deltas.append)
        assert driver.advance(16) is False
        assert deltas == []

    def test_default_frame_time(self):
        deltas = []
        driver = ManualFrameDriver(deltas.append, frame_time=20)
        driver.start()
        driver.advance()
        assert deltas == [20]
        assert driver.frame_count == 1

    def test_speed_multiplier(self):
        deltas = []
        driver = ManualFrameDriver(deltas.append, speed=2.0)
        driver.start()
        driver.advance(16)
        driver.set_speed(0.5)
        driver.advance(16)
        assert deltas == [32, 8]

    def test_fps_limit_accumulates(self):
        deltas = []
        driver = ManualFrameDriver(deltas.append, fps_limit=25)  # 40ms
        driver.start()
        emitted = [driver.advance(16) for _ in range(3)]
        assert emitted == [False, False, True]
        assert deltas == [pytest.approx(48)]

    def test_remove_limiter(self):
        deltas = []
        driver = ManualFrameDriver(deltas.append, fps_limit=10)
        driver.remove_limiter()
        driver.start()
        driver.advance(5)
        assert deltas == [5]

    def test_advance_frames_stops_when_idle(self):
        scheduler = Scheduler(ManualFrameDriver(frame_time=10))
        animation = Animation(scheduler=scheduler)
        animation.animate({"v": 0}, {"v": 1}, duration=30)
        emitted = scheduler.driver.advance_frames(100)
        assert emitted == 3
        assert not scheduler.driver.running

    def test_speed_from_config(self):
        from tweenkit import TweenConfig

        state = {"v": 0}
        animation = Animation(config=TweenConfig(speed=2.0))
        animation.animate(state, {"v": [0, 100]}, duration=100, easing="linear")
        animation.driver.advance(25)
        assert state["v"] == pytest.approx(50)


class TestRealtimeFrameDriver:
    """Tests for the wall-clock driver with an injected clock."""

    def test_paces_frames(self):
        clock = FakeClock()
        deltas = []
        driver = RealtimeFrameDriver(deltas.append, target_fps=50, clock=clock, sleep=clock.sleep)
        emitted = driver.run(max_frames=3)
        assert emitted == 3
        assert deltas == [0.0, pytest.approx(20), pytest.approx(20)]
        assert clock.sleeps == [pytest.approx(0.02), pytest.approx(0.02)]

    def test_limiter_widens_interval(self):
        clock = FakeClock()
        driver = RealtimeFrameDriver(lambda d: None, fps_limit=10, target_fps=60,
                                     clock=clock, sleep=clock.sleep)
        driver.run(max_frames=2)
        assert clock.sleeps == [pytest.approx(0.1)]

    def test_runs_until_scheduler_idle(self):
        clock = FakeClock()
        driver = RealtimeFrameDriver(target_fps=8, clock=clock, sleep=clock.sleep)
        scheduler = Scheduler(driver)
        state = {"v": 0}
        Animation(scheduler=scheduler).animate(state, {"v": [0, 10]}, duration=375, easing="linear")

        emitted = driver.run()
        assert state["v"] == 10
        assert emitted == 4  # 0, 125, 250, 375ms
        assert not driver.running
