#!/usr/bin/env python3
"""
Command-line interface for inspecting easings and previewing tweens.

Usage
-----
::

    # List easing names
    python -m tweenkit --list-easings

    # Sample an easing curve
    python -m tweenkit --sample ease-out-back --points 21

    # Run a tween on an in-memory element and print every frame
    python -m tweenkit --demo --easing ease-in-out-cubic --duration 500

    # Same, without waiting on the wall clock
    python -m tweenkit --demo --offline --fps 30
"""

import argparse
import sys


def main(args=None):
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="tweenkit",
        description="Inspect easing curves and preview tweens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Easing table
  python -m tweenkit --list-easings

  # Curve samples
  python -m tweenkit --sample cubic-bezier(0.33,1,0.68,1) --points 11

  # Frame-by-frame preview
  python -m tweenkit --demo --duration 300 --to-color "#3366ff"
"""
    )

    parser.add_argument(
        "--list-easings",
        action="store_true",
        help="List available easing names and exit"
    )

    parser.add_argument(
        "--sample",
        metavar="EASING",
        help="Print samples of an easing curve and exit"
    )

    parser.add_argument(
        "--points",
        type=int,
        default=11,
        help="Number of samples for --sample (default: 11)"
    )

    parser.add_argument(
        "--demo",
        action="store_true",
        help="Animate an in-memory element and print each frame"
    )

    parser.add_argument(
        "--duration",
        type=float,
        default=300.0,
        help="Demo duration in ms (default: 300)"
    )

    parser.add_argument(
        "--easing",
        default="ease",
        help="Demo easing (default: ease)"
    )

    parser.add_argument(
        "--fps",
        type=float,
        default=60.0,
        help="Demo frame rate (default: 60)"
    )

    parser.add_argument(
        "--to-color",
        default="#ff0000",
        help="Demo target background color (default: #ff0000)"
    )

    parser.add_argument(
        "--offline",
        action="store_true",
        help="Advance demo frames immediately instead of in real time"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit"
    )

    parsed = parser.parse_args(args)

    if parsed.verbose:
        from .core.logging_config import setup_logging
        setup_logging("DEBUG")

    if parsed.version:
        from . import __version__
        print(f"tweenkit {__version__}")
        return 0

    if parsed.list_easings:
        return cmd_list_easings()

    if parsed.sample:
        return cmd_sample(parsed.sample, parsed.points)

    if parsed.demo:
        return cmd_demo(parsed)

    parser.print_help()
    return 0


def cmd_list_easings():
    """List easing names with their bezier control points where defined."""
    from .core.easing import BEZIER_PRESETS, list_easings

    print("\nAvailable Easings")
    print("=" * 50)
    for name in list_easings():
        points = BEZIER_PRESETS.get(name)
        if points is not None:
            print(f"  {name:24s} cubic-bezier{points}")
        else:
            print(f"  {name}")
    return 0


def cmd_sample(easing: str, points: int):
    """Print evenly spaced samples of one easing."""
    from .core.easing import sample_easing
    from .core.exceptions import EasingError

    try:
        values = sample_easing(easing, points)
    except EasingError as e:
        print(f"Error: {e}")
        return 1

    step = 1.0 / (points - 1)
    for i, value in enumerate(values):
        print(f"{i * step:6.3f}  {value:8.4f}")
    return 0


def cmd_demo(args):
    """Animate opacity, x and background-color of a StyleElement."""
    from .adapters import StyleElement
    from .animation import Animation
    from .core.exceptions import TweenException
    from .driver import ManualFrameDriver, RealtimeFrameDriver
    from .scheduler import Scheduler

    frame_time = 1000.0 / args.fps if args.fps > 0 else 1000.0 / 60
    if args.offline:
        driver = ManualFrameDriver(frame_time=frame_time)
    else:
        driver = RealtimeFrameDriver(target_fps=args.fps)

    scheduler = Scheduler(driver)
    animation = Animation(scheduler=scheduler)
    element = StyleElement("demo", computed={"opacity": 0, "background-color": "#000000"})

    try:
        handle = animation.animate(
            element,
            {"opacity": 1, "x": 100, "background-color": args.to_color},
            duration=args.duration,
            easing=args.easing,
        )
    except TweenException as e:
        print(f"Error: {e}")
        return 1

    elapsed = [0.0]

    def on_frame(delta):
        elapsed[0] += delta
        scheduler.tick(delta)
        style = element.style
        print(
            f"{elapsed[0]:8.1f}ms  opacity={style.get('opacity', '')!s:<10.10} "
            f"transform={style.get('transform', '')!s:<22} "
            f"background-color={style.get('background-color', '')}"
        )

    driver.bind(on_frame)
    handle.then(lambda: print(f"\nCompleted after {driver.frame_count} frames"))

    if args.offline:
        # Duration 0 completes on the first frame
        while driver.running:
            driver.advance()
    else:
        driver.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
