"""
Tweenkit - frame-driven property tweening.

Animates numeric, color and transform properties of styled elements or
plain Python objects from a single shared scheduler.

Usage:
    from tweenkit import Animation, StyleElement

    animation = Animation()
    box = StyleElement()

    handle = animation.animate(box, {"opacity": [0, 1], "x": 120}, duration=400, easing="ease-out")
    handle.then(lambda: print("shown"))

    # Drive frames (tests, offline rendering or a host loop)
    animation.driver.advance(16)

    # Plain objects and dicts work too
    state = {"volume": 0.0}
    animation.animate(state, {"volume": 1.0}, duration=250)

    # Fades share a cut group, so fade_out cancels a running fade_in
    animation.fade_in(box, 200, direction="up")
    animation.fade_out(box, {"duration": 150, "remove_on_complete": True})
"""

from .core import (
    # Easing
    EASINGS,
    BEZIER_PRESETS,
    bezier_easing,
    resolve_easing,
    apply_easing,
    sample_easing,
    list_easings,
    # Color
    Color,
    # Properties
    PropertyResolver,
    # Records
    INFINITE,
    AnimationState,
    CompletionSignal,
    AnimationOptions,
    AnimationRecord,
    # Exceptions
    TweenException,
    PropertyFormatError,
    ColorParseError,
    EasingError,
    OptionsError,
)
from .adapters import (
    StyleElement,
    GenericTargetAdapter,
    VisualTargetAdapter,
    adapt_target,
)
from .driver import FrameDriver, ManualFrameDriver, RealtimeFrameDriver
from .scheduler import Scheduler
from .handle import AnimationHandle, Timeline
from .config import TweenConfig
from .animation import (
    Animation,
    AnimationContext,
    get_default_animation,
    set_default_animation,
    animate,
    fade_in,
    fade_out,
)

__version__ = "0.1.0"

__all__ = [
    # Easing
    "EASINGS",
    "BEZIER_PRESETS",
    "bezier_easing",
    "resolve_easing",
    "apply_easing",
    "sample_easing",
    "list_easings",
    # Color
    "Color",
    # Properties
    "PropertyResolver",
    # Records
    "INFINITE",
    "AnimationState",
    "CompletionSignal",
    "AnimationOptions",
    "AnimationRecord",
    # Exceptions
    "TweenException",
    "PropertyFormatError",
    "ColorParseError",
    "EasingError",
    "OptionsError",
    # Adapters
    "StyleElement",
    "GenericTargetAdapter",
    "VisualTargetAdapter",
    "adapt_target",
    # Driving
    "FrameDriver",
    "ManualFrameDriver",
    "RealtimeFrameDriver",
    "Scheduler",
    # Control
    "AnimationHandle",
    "Timeline",
    # Facade
    "TweenConfig",
    "Animation",
    "AnimationContext",
    "get_default_animation",
    "set_default_animation",
    "animate",
    "fade_in",
    "fade_out",
]
