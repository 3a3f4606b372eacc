"""Command-line entry point for the warp animation.

Run with: `python -m warpfield`

Pass ``--help`` to list the options.  ``--frames`` bounds the run, which
together with ``--seed`` gives a reproducible recording.
"""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Optional, Sequence

from .composer import FrameComposer
from .perf import PerformanceTracker, format_summary
from .prng import Generator
from .settings import DEFAULT_SEED, FPS, NUM_OBJECTS, GlyphSet, WarpSettings
from .terminal import Runner, detect_size


LOGGER = logging.getLogger("warpfield")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="warpfield",
        description="Animated ASCII starfield with a centred logo and floating icons.",
    )
    parser.add_argument(
        "--seed", type=int, default=DEFAULT_SEED, help="Seed for deterministic playback."
    )
    parser.add_argument("--width", type=int, default=None, help="Grid width (default: terminal width).")
    parser.add_argument("--height", type=int, default=None, help="Grid height (default: terminal height).")
    parser.add_argument(
        "-u",
        "--unicode",
        action="store_true",
        help="Use unicode glyphs for the nearest stars.",
    )
    parser.add_argument("--fps", type=int, default=FPS, help="Ticks per second.")
    parser.add_argument(
        "--objects", type=int, default=NUM_OBJECTS, help="Number of floating icons."
    )
    parser.add_argument(
        "--frames",
        type=int,
        default=None,
        help="Stop after this many frames (default: run until interrupted).",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Log a per-section timing summary when the run ends.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (e.g. DEBUG, INFO, WARNING; default: INFO with --profile, else WARNING).",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> WarpSettings:
    """Translate parsed arguments into validated settings.

    Raises:
        ValueError: If the resulting configuration is unusable.
    """

    width, height = detect_size(args.width, args.height)
    return WarpSettings(
        seed=args.seed,
        width=width,
        height=height,
        glyph_set=GlyphSet.UNICODE if args.unicode else GlyphSet.ASCII,
        fps=args.fps,
        num_objects=args.objects,
    ).validate()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    level_name = args.log_level or ("INFO" if args.profile else "WARNING")
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(message)s",
        stream=sys.stderr,
    )

    try:
        settings = build_settings(args)
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    tracker = PerformanceTracker(enabled=args.profile)
    composer = FrameComposer(settings, Generator(settings.seed), profiler=tracker)
    runner = Runner(composer)
    previous = runner.install_signal_handlers()
    try:
        runner.start(max_frames=args.frames)
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

    if args.profile:
        LOGGER.info("Performance: %s", format_summary(tracker.summary(sort_by="total")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
