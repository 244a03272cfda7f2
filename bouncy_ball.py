#!/usr/bin/env python3
"""
Bouncy Ball application entry point.

What this module does
- Loads a preset (ballsim/presets/*.json) into a SimulationConfig and applies
  command-line overrides.
- Runs the Animation either in a pygame window or headless for a fixed number
  of frames.

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python bouncy_ball.py [--preset trail] [--no-trail]`
   or list presets with `python bouncy_ball.py --list-presets`.

Exit status is 0 when the window is closed normally and 1 when the window
reported an error.
"""
import argparse
import logging
import sys

from ballsim.animation import Animation
from ballsim.events import ScriptedEventSource
from ballsim.presets_loader import DEFAULT_PRESET, list_presets, load_preset

logger = logging.getLogger("bouncy_ball")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="A ball bouncing in a window, with an optional fading trail.")
    parser.add_argument("--preset", default=DEFAULT_PRESET, help="preset file name (default: %(default)s)")
    parser.add_argument("--list-presets", action="store_true", help="print available presets and exit")
    parser.add_argument("--no-trail", action="store_true", help="disable the trail")
    parser.add_argument("--fps", type=int, default=None, help="frame rate cap")
    parser.add_argument("--headless", action="store_true", help="run without a window")
    parser.add_argument("--frames", type=int, default=600, help="frames to simulate with --headless (default: %(default)s)")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def run_headless(animation: Animation, frames: int):
    config = animation.config
    source = ScriptedEventSource(frames, config.window_width, config.window_height, keep=1)
    error = animation.run(source)
    s = animation.body.state
    logger.info(
        "After %d frames: position=(%d, %d) velocity=(%.3f, %.3f) acceleration=(%.4f, %.4f) trail=%d",
        animation.frame_count, s.x, s.y, s.vx, s.vy, s.ax, s.ay, len(animation.trail),
    )
    return error


def run_window(animation: Animation):
    # pygame is only needed for the windowed mode
    from ballsim.renderer import PygameEventSource

    with PygameEventSource(animation.config) as source:
        return animation.run(source)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.list_presets:
        for file_name, display in list_presets():
            print(f"{file_name}\t{display}")
        return 0

    try:
        config, display_name = load_preset(args.preset)
        overrides = {}
        if args.no_trail:
            overrides["trail_enabled"] = False
        if args.fps is not None:
            overrides["fps"] = args.fps
        if overrides:
            config = config.replace(**overrides)
    except ValueError as exc:
        parser.error(str(exc))
    if args.headless and args.frames < 0:
        parser.error("--frames must not be negative")

    logger.info("Using preset %s", display_name)
    animation = Animation(config)
    error = run_headless(animation, args.frames) if args.headless else run_window(animation)
    if error is not None:
        logger.error("Window closed with error: %s", error)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
