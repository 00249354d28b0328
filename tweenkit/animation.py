"""
Animation facade - the public entry point.

Animation ties a Scheduler, a PropertyResolver and a TweenConfig together
and turns animate() calls into registered records with handles. A lazily
created module-level instance backs the ``animate``/``fade_in``/``fade_out``
shortcuts.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .adapters import adapt_target
from .config import TweenConfig
from .core.easing import resolve_easing
from .core.exceptions import OptionsError
from .core.properties import PropertyInput
from .core.record import AnimationOptions, AnimationRecord
from .driver import FrameDriver, ManualFrameDriver
from .handle import AnimationHandle, Timeline
from .scheduler import Scheduler

logger = logging.getLogger(__name__)

OptionsInput = Union[AnimationOptions, Mapping[str, Any], None]
AnimateResult = Union[AnimationHandle, Timeline]

# direction -> (property, offset applied while hidden)
FADE_DIRECTIONS = {
    "up": ("y", 10),
    "down": ("y", -10),
    "left": ("x", 10),
    "right": ("x", -10),
    "forward": ("scale", 1.1),
    "backward": ("scale", 0.9),
}

_MULTI_TARGET_TYPES = (list, tuple, set, frozenset)


class Animation:
    """
    Creates and runs tweens.

    Usage:
        animation = Animation()
        element = StyleElement()
        handle = animation.animate(element, {"opacity": [0, 1], "x": 100}, duration=400)
        animation.driver.advance(16)

        # Multiple targets produce a Timeline
        timeline = animation.animate([a, b, c], {"opacity": 0})
        timeline.then(lambda: print("all hidden"))
    """

    def __init__(self, scheduler: Optional[Scheduler] = None,
                 config: Optional[TweenConfig] = None,
                 driver: Optional[FrameDriver] = None):
        self.config = config or TweenConfig()
        if scheduler is None:
            if driver is None:
                driver = ManualFrameDriver(fps_limit=self.config.fps_limit, speed=self.config.speed)
            scheduler = Scheduler(driver)
        self.scheduler = scheduler

    @property
    def driver(self) -> FrameDriver:
        return self.scheduler.driver

    @property
    def resolver(self):
        return self.scheduler.resolver

    def build_options(self, options: OptionsInput = None, **kwargs) -> AnimationOptions:
        """Merge config defaults, ``options`` and keyword overrides."""
        opts = AnimationOptions.from_value(
            options,
            defaults={
                "duration": self.config.default_duration,
                "easing": self.config.default_easing,
            },
            **kwargs,
        )
        if self.config.reduced_motion:
            logger.debug("Reduced motion: forcing zero duration and delay")
            opts.duration = 0.0
            opts.delay = 0.0
        return opts

    def create_animation(self, target: Any, properties: Optional[PropertyInput] = None,
                         options: OptionsInput = None, **kwargs) -> AnimationHandle:
        """
        Build a record and its handle without registering it.

        Raises:
            PropertyFormatError: Malformed property value
            OptionsError: Invalid options
            EasingError: Unknown easing
        """
        opts = self.build_options(options, **kwargs)
        adapter = adapt_target(target)
        specs = self.resolver.resolve(properties, visual=adapter.is_visual)
        easing = resolve_easing(opts.easing)
        record = AnimationRecord.from_options(adapter.target, adapter, specs, opts, easing)
        return AnimationHandle(self.scheduler, record)

    def animate(self, target: Any, properties: Optional[PropertyInput] = None,
                options: OptionsInput = None, **kwargs) -> AnimateResult:
        """
        Animate one target (returns a handle) or several (returns a Timeline).

        Args:
            target: Visual element, plain object/dict, adapter, or a
                list/tuple/set of those
            properties: {name: to} / {name: [from, to]} or (name, value) pairs
            options: Option dict or AnimationOptions; keyword arguments
                override individual options

        Returns:
            AnimationHandle, or Timeline for multiple targets
        """
        if isinstance(target, _MULTI_TARGET_TYPES):
            return self._animate_many(target, properties, options, object(), **kwargs)
        return self._animate_one(target, properties, options, None, **kwargs)

    def _animate_one(self, target, properties, options, scope, **kwargs) -> AnimationHandle:
        handle = self.create_animation(target, properties, options, **kwargs)
        handle.record.scope = scope
        self.scheduler.register(handle.record)
        return handle

    def _animate_many(self, targets, properties, options, scope, **kwargs) -> Timeline:
        # Members share one scope; a common cut group never evicts a sibling
        def factory(item, properties=None, options=None, **kwargs):
            if isinstance(item, _MULTI_TARGET_TYPES):
                return self._animate_many(item, properties, options, scope, **kwargs)
            return self._animate_one(item, properties, options, scope, **kwargs)

        timeline = Timeline(factory)
        for item in targets:
            timeline.add(item, properties, options, **kwargs)
        return timeline

    def fade_out(self, target: Any, duration: Union[float, OptionsInput] = None,
                 direction: Optional[str] = None, options: OptionsInput = None) -> AnimateResult:
        """
        Fade opacity to 0, optionally sliding in ``direction``.

        ``duration`` may be an options dict instead of a number. Fades share
        a cut group, so a fade_out cancels a pending fade_in and vice versa.
        """
        return self._fade(target, 0, duration, direction, options, fading_out=True)

    def fade_in(self, target: Any, duration: Union[float, OptionsInput] = None,
                direction: Optional[str] = None, options: OptionsInput = None) -> AnimateResult:
        """Fade opacity to 1, optionally sliding back from ``direction``."""
        return self._fade(target, 1, duration, direction, options, fading_out=False)

    def _fade(self, target, opacity, duration, direction, options, fading_out):
        if isinstance(duration, (Mapping, AnimationOptions)):
            options, duration = duration, None

        if isinstance(options, AnimationOptions):
            options = options.to_dict()
        options = dict(options or {})
        direction = options.pop("direction", direction)

        properties = {"opacity": opacity}
        if direction:
            if direction not in FADE_DIRECTIONS:
                raise OptionsError(f"Unknown fade direction '{direction}'", option="direction",
                                   choices=sorted(FADE_DIRECTIONS))
            name, offset = FADE_DIRECTIONS[direction]
            rest = 1 if name == "scale" else 0
            properties[name] = [rest, offset] if fading_out else [offset, rest]

        defaults = {
            "duration": self.config.default_duration if duration is None else duration,
            "easing": "ease",
            "cut_group": self.config.fade_cut_group,
        }
        defaults.update(options)
        return self.animate(target, properties, defaults)

    def context(self) -> "AnimationContext":
        return AnimationContext(self)

    def destroy(self) -> None:
        """Stop every animation and the frame driver."""
        self.scheduler.clear()


class AnimationContext:
    """
    Scope that remembers the animations it started.

    Usage:
        with animation.context() as ctx:
            ctx.animate(panel, {"opacity": 1})
            ...
        # everything started through ctx is stopped here
    """

    def __init__(self, animation: Animation):
        self.animation = animation
        self._handles: List[AnimationHandle] = []

    @property
    def handles(self) -> List[AnimationHandle]:
        return list(self._handles)

    def animate(self, target, properties=None, options=None, **kwargs) -> AnimateResult:
        result = self.animation.animate(target, properties, options, **kwargs)
        self._track(result)
        return result

    def fade_in(self, target, duration=None, direction=None, options=None) -> AnimateResult:
        result = self.animation.fade_in(target, duration, direction, options)
        self._track(result)
        return result

    def fade_out(self, target, duration=None, direction=None, options=None) -> AnimateResult:
        result = self.animation.fade_out(target, duration, direction, options)
        self._track(result)
        return result

    def _track(self, result: AnimateResult) -> None:
        handles: Iterable[AnimationHandle] = result if isinstance(result, Timeline) else [result]
        self._handles.extend(handles)

    def stop(self, handle: AnimationHandle) -> None:
        handle.stop()
        if handle in self._handles:
            self._handles.remove(handle)

    def pause(self, handle: AnimationHandle) -> None:
        handle.pause()

    def resume(self, handle: AnimationHandle) -> None:
        handle.resume()

    def stop_all(self) -> None:
        for handle in self._handles:
            handle.stop()

    def destroy(self) -> None:
        self.stop_all()
        self._handles.clear()

    def __enter__(self) -> "AnimationContext":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.destroy()
        return False


# ----------------------------------------------------------------------------
# Module-level default instance
# ----------------------------------------------------------------------------

_default: Optional[Animation] = None


def get_default_animation() -> Animation:
    """Shared Animation configured from TWEENKIT_* environment variables."""
    global _default
    if _default is None:
        _default = Animation(config=TweenConfig.from_env())
    return _default


def set_default_animation(animation: Optional[Animation]) -> None:
    global _default
    if _default is not None and _default is not animation:
        _default.destroy()
    _default = animation


def animate(target, properties=None, options=None, **kwargs) -> AnimateResult:
    return get_default_animation().animate(target, properties, options, **kwargs)


def fade_in(target, duration=None, direction=None, options=None) -> AnimateResult:
    return get_default_animation().fade_in(target, duration, direction, options)


def fade_out(target, duration=None, direction=None, options=None) -> AnimateResult:
    return get_default_animation().fade_out(target, duration, direction, options)


__all__ = [
    "FADE_DIRECTIONS",
    "Animation",
    "AnimationContext",
    "get_default_animation",
    "set_default_animation",
    "animate",
    "fade_in",
    "fade_out",
]
