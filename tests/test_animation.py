"""
Unit Tests for the Animation Facade

Run with: pytest tests/test_animation.py -v
"""

import pytest

import tweenkit
from tweenkit import (
    Animation,
    AnimationOptions,
    EasingError,
    OptionsError,
    PropertyFormatError,
    StyleElement,
    TweenConfig,
)
from tweenkit.animation import FADE_DIRECTIONS


class TestOptions:
    """Tests for option handling."""

    def test_camel_case_aliases(self, animation):
        handle = animation.animate(
            StyleElement(),
            {"opacity": 0},
            {"removeOnComplete": True, "cutGroup": "menu", "onComplete": print},
        )
        record = handle.record
        assert record.remove_on_complete
        assert record.cut_group == "menu"
        assert record.on_complete is print

    def test_kwargs_override_options(self, animation):
        handle = animation.animate(StyleElement(), {"opacity": 0}, {"duration": 100}, duration=250)
        assert handle.record.duration == 250

    def test_options_object(self, animation):
        options = AnimationOptions(duration=80, easing="linear", delay=20)
        handle = animation.animate(StyleElement(), {"opacity": 0}, options)
        assert handle.record.duration == 80
        assert handle.record.easing is None
        assert handle.record.elapsed == -20

    def test_unknown_option(self, animation, scheduler):
        with pytest.raises(OptionsError) as exc_info:
            animation.animate(StyleElement(), {"opacity": 0}, {"bogus": 1})
        assert exc_info.value.details["option"] == "bogus"
        assert len(scheduler) == 0

    def test_negative_duration(self, animation):
        with pytest.raises(OptionsError):
            animation.animate(StyleElement(), {"opacity": 0}, duration=-1)

    def test_bad_repeat(self, animation):
        with pytest.raises(OptionsError):
            animation.animate(StyleElement(), {"opacity": 0}, repeat=-3)

    def test_unknown_easing(self, animation, scheduler):
        with pytest.raises(EasingError):
            animation.animate(StyleElement(), {"opacity": 0}, easing="wobble")
        assert len(scheduler) == 0

    def test_malformed_property_registers_nothing(self, animation, scheduler):
        with pytest.raises(PropertyFormatError):
            animation.animate(StyleElement(), {"opacity": [1]})
        assert len(scheduler) == 0

    def test_config_defaults(self, scheduler):
        animation = Animation(scheduler=scheduler, config=TweenConfig(default_duration=50, default_easing="linear"))
        handle = animation.animate(StyleElement(), {"opacity": 0})
        assert handle.record.duration == 50
        assert handle.record.easing is None

    def test_options_to_dict_round_trip(self):
        options = AnimationOptions.from_value({"cutGroup": 2}, repeat=True)
        assert options.to_dict()["cut_group"] == 2
        assert options.to_dict()["repeat"] == -1


class TestTargets:
    """Tests for generic targets."""

    def test_dict_target(self, animation, scheduler):
        state = {"volume": 0.0}
        animation.animate(state, {"volume": 1.0}, duration=100, easing="linear")
        scheduler.tick(50)
        assert state["volume"] == pytest.approx(0.5)

    def test_accessor_target(self, animation, scheduler):
        class Mixer:
            def __init__(self):
                self._gain = 10.0

            def gain(self, value=None):
                if value is None:
                    return self._gain
                self._gain = value

        mixer = Mixer()
        animation.animate(mixer, {"gain": 20.0}, duration=100, easing="linear")
        scheduler.tick(50)
        assert mixer._gain == pytest.approx(15.0)

    def test_generic_x_is_plain_field(self, animation, scheduler):
        class Point:
            x = 0

        point = Point()
        animation.animate(point, {"x": 8}, duration=100, easing="linear")
        scheduler.tick(100)
        assert point.x == 8


class TestFades:
    """Tests for fade_in / fade_out helpers."""

    def test_fade_in(self, animation, scheduler, element):
        animation.fade_in(element, 200)
        scheduler.tick(200)
        assert element.style["opacity"] == 1

    def test_fades_share_cut_group(self, animation, scheduler, element):
        calls = []
        animation.fade_in(element, 200).then(lambda: calls.append("in"))
        animation.fade_out(element, 200)
        assert len(scheduler) == 1
        scheduler.tick(200)
        assert element.style["opacity"] == 0
        assert calls == []

    def test_fade_cancels_generic_animation_in_group(self, animation, scheduler, element):
        animation.animate(element, {"x": 10}, cut_group=1)
        animation.fade_out(element)
        assert len(scheduler) == 1

    def test_duration_may_be_options(self, animation, element):
        handle = animation.fade_out(element, {"duration": 120, "direction": "left"})
        record = handle.record
        assert record.duration == 120
        assert [s.name for s in record.properties] == ["opacity", "translateX"]

    @pytest.mark.parametrize("direction", sorted(FADE_DIRECTIONS))
    def test_fade_in_directions_settle_at_rest(self, animation, scheduler, element, direction):
        animation.fade_in(element, 100, direction=direction)
        scheduler.tick(100)
        name, _ = FADE_DIRECTIONS[direction]
        channel = element.transforms[{"x": "translateX", "y": "translateY"}.get(name, name)]
        assert channel.value == pytest.approx(1 if name == "scale" else 0)

    def test_fade_out_direction_offset(self, animation, scheduler, element):
        animation.fade_out(element, 100, direction="up")
        scheduler.tick(100)
        assert element.style["transform"] == "translateY(10px)"
        assert element.style["opacity"] == 0

    def test_unknown_direction(self, animation, element):
        with pytest.raises(OptionsError):
            animation.fade_in(element, 100, direction="sideways")

    def test_fade_options_override_defaults(self, animation, element):
        handle = animation.fade_in(element, 100, options={"cut_group": "overlay", "easing": "linear"})
        assert handle.record.cut_group == "overlay"
        assert handle.record.easing is None

    def test_fade_out_many_targets(self, animation, scheduler):
        items = [StyleElement("li") for _ in range(3)]
        calls = []
        timeline = animation.fade_out(items, 100)
        timeline.then(lambda: calls.append("done"))
        assert len(scheduler) == 3

        scheduler.tick(100)
        assert [item.style["opacity"] for item in items] == [0, 0, 0]
        assert calls == ["done"]

    def test_later_fade_replaces_earlier_group(self, animation, scheduler):
        items = [StyleElement("li") for _ in range(2)]
        hiding = animation.fade_out(items, 100)
        showing = animation.fade_in(items, 100)
        assert not hiding.active
        assert all(handle.active for handle in showing)
        assert len(scheduler) == 2


class TestReducedMotion:
    """Tests for the reduced motion switch."""

    def test_jumps_to_end(self, scheduler, element):
        animation = Animation(scheduler=scheduler, config=TweenConfig(reduced_motion=True))
        handle = animation.animate(element, {"opacity": [0, 1]}, duration=500, delay=100)
        assert handle.record.duration == 0
        scheduler.tick(16)
        assert element.style["opacity"] == 1
        assert handle.done


class TestContext:
    """Tests for AnimationContext."""

    def test_context_stops_on_exit(self, animation, scheduler):
        with animation.context() as ctx:
            ctx.animate(StyleElement(), {"opacity": 0})
            ctx.animate([StyleElement(), StyleElement()], {"opacity": 0})
            assert len(ctx.handles) == 3
            assert len(scheduler) == 3
        assert len(scheduler) == 0

    def test_context_stop_single(self, animation, scheduler):
        ctx = animation.context()
        handle = ctx.fade_in(StyleElement())
        ctx.pause(handle)
        assert handle.record.paused
        ctx.resume(handle)
        ctx.stop(handle)
        assert ctx.handles == []
        assert len(scheduler) == 0


class TestModuleLevel:
    """Tests for the shared default instance."""

    @pytest.fixture
    def default(self, animation):
        tweenkit.set_default_animation(animation)
        yield animation
        tweenkit.set_default_animation(None)

    def test_shortcuts_use_default(self, default, scheduler, element):
        assert tweenkit.get_default_animation() is default
        tweenkit.animate(element, {"opacity": 0}, duration=100)
        tweenkit.fade_in(StyleElement())
        tweenkit.fade_out(StyleElement())
        assert len(scheduler) == 2

    def test_default_created_from_env(self, monkeypatch):
        tweenkit.set_default_animation(None)
        monkeypatch.setenv("TWEENKIT_DEFAULT_DURATION", "42")
        try:
            animation = tweenkit.get_default_animation()
            assert animation.config.default_duration == 42
        finally:
            tweenkit.set_default_animation(None)

    def test_destroy(self, animation, scheduler):
        animation.animate(StyleElement(), {"opacity": 0})
        animation.destroy()
        assert len(scheduler) == 0
