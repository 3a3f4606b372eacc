"""Profile headless frame composition using :mod:`warpfield.perf`.

Run with::

    PYTHONPATH=src python examples/profile_frames.py

No terminal output is produced for the frames themselves; only timings are
reported.  Pass ``--help`` to see options for grid size and run length.
"""

from __future__ import annotations

import argparse
import logging

from warpfield.composer import FrameComposer
from warpfield.perf import PerformanceTracker, format_summary
from warpfield.prng import Generator
from warpfield.settings import DEFAULT_SEED, WarpSettings


LOGGER = logging.getLogger(__name__)


def run_frames(settings: WarpSettings, frames: int, tracker: PerformanceTracker) -> str:
    composer = FrameComposer(settings, Generator(settings.seed), profiler=tracker)
    frame = ""
    for frame in composer.frames(frames):
        pass
    return frame


def print_summary(tracker: PerformanceTracker, limit: int = 10) -> None:
    summary = tracker.summary(sort_by="total")
    if not summary:
        print("No timings recorded.")
        return
    width = max(len(row["name"]) for row in summary[:limit])
    header = f"{'Section':<{width}}  Total (ms)  Self (ms)  Count  Avg (ms)"
    print(header)
    print("-" * len(header))
    for row in summary[:limit]:
        print(
            f"{row['name']:<{width}}  {row['total'] * 1000.0:10.3f}  {row['self'] * 1000.0:8.3f}"
            f"  {int(row['count']):5d}  {row['average'] * 1000.0:8.3f}"
        )


def log_summary(tracker: PerformanceTracker, *, limit: int, index: int) -> list[dict]:
    summary = tracker.summary(sort_by="total")
    limited = summary[: max(0, limit)]
    LOGGER.info("Run %d performance: %s", index, format_summary(limited, limit=limit))
    return limited


def profile_runs(
    settings: WarpSettings, frames: int, runs: int, tracker: PerformanceTracker, *, limit: int
) -> list[dict]:
    """Time ``runs`` independent runs, logging each one on its own.

    The tracker is reset after every logged run except the last, which is left
    in place for the final table.
    """

    last: list[dict] = []
    for run in range(1, runs + 1):
        run_frames(settings, frames, tracker)
        last = log_summary(tracker, limit=limit, index=run)
        if run != runs:
            tracker.reset()
    return last


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--frames", type=int, default=300, help="Frames per run.")
    parser.add_argument("--runs", type=int, default=1, help="How many independent runs.")
    parser.add_argument("--width", type=int, default=120)
    parser.add_argument("--height", type=int, default=40)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument(
        "--summary-limit",
        type=int,
        default=10,
        help="Maximum number of sections to include in summaries.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    settings = WarpSettings(seed=args.seed, width=args.width, height=args.height).validate()
    tracker = PerformanceTracker()
    profile_runs(settings, args.frames, args.runs, tracker, limit=args.summary_limit)
    print_summary(tracker, limit=args.summary_limit)


if __name__ == "__main__":
    main()
