"""Terminal front-end for the warp animation.

The :class:`Runner` drives a :class:`~warpfield.composer.FrameComposer` at a
fixed tick rate and writes each frame to a text stream, using ANSI sequences
to home the cursor between frames.  It owns terminal state (cursor visibility,
screen clearing) and always restores it on the way out.
"""

from __future__ import annotations

import logging
import shutil
import signal
import sys
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, TextIO, Tuple

from .composer import FrameComposer
from .settings import DEFAULT_HEIGHT, DEFAULT_WIDTH


LOGGER = logging.getLogger(__name__)

ESC = "\x1b"
HIDE_CURSOR = f"{ESC}[?25l"
SHOW_CURSOR = f"{ESC}[?25h"
CLEAR_SCREEN = f"{ESC}[2J"
CURSOR_HOME = f"{ESC}[H"
RESET = f"{ESC}[0m"


def detect_size(
    width: Optional[int] = None, height: Optional[int] = None
) -> Tuple[int, int]:
    """Fill in whichever of ``width``/``height`` was not given explicitly.

    Missing values come from the attached terminal, falling back to 80x24 when
    the output is not a terminal.
    """

    if width is not None and height is not None:
        return width, height
    size = shutil.get_terminal_size((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    return (
        width if width is not None else size.columns,
        height if height is not None else size.lines,
    )


@dataclass
class Runner:
    composer: FrameComposer
    stream: TextIO = field(default_factory=lambda: sys.stdout)
    clock: Callable[[], float] = time.monotonic
    sleep: Callable[[float], None] = time.sleep
    running: bool = False
    frames_written: int = 0

    @property
    def interval(self) -> float:
        return 1 / self.composer.settings.fps

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _tick(self) -> None:
        frame = self.composer.step()
        self._write(CURSOR_HOME + frame)
        self.frames_written += 1

    def install_signal_handlers(self) -> Dict[int, object]:
        """Stop the loop cleanly on SIGINT/SIGTERM.

        Returns the previously installed handlers so the caller can restore them.
        """

        def _handler(signum, _frame) -> None:
            LOGGER.info("Received signal %d, stopping", signum)
            self.stop()

        previous = {}
        for signum in (signal.SIGINT, signal.SIGTERM):
            previous[signum] = signal.signal(signum, _handler)
        return previous

    def start(self, max_frames: Optional[int] = None) -> int:
        """Run the animation until stopped or ``max_frames`` have been written.

        Returns the number of frames written during this call.
        """

        if self.running:
            LOGGER.warning("Runner already running")
            return 0
        self.running = True
        start_count = self.frames_written
        self._write(HIDE_CURSOR + CLEAR_SCREEN)
        LOGGER.info("Animation started at %d fps", self.composer.settings.fps)
        try:
            next_tick = self.clock()
            while self.running:
                if max_frames is not None and self.frames_written - start_count >= max_frames:
                    break
                try:
                    self._tick()
                except Exception:
                    LOGGER.exception("Frame %d failed", self.composer.ticks)
                    raise
                next_tick += self.interval
                delay = next_tick - self.clock()
                if delay > 0:
                    self.sleep(delay)
                else:
                    # Fell behind; resynchronise rather than bursting frames.
                    next_tick = self.clock()
        except KeyboardInterrupt:
            LOGGER.info("Interrupted")
        finally:
            self.running = False
            self._write(SHOW_CURSOR + RESET + "\n")
            LOGGER.info("Animation stopped after %d frame(s)", self.frames_written - start_count)
        return self.frames_written - start_count

    def stop(self) -> None:
        if not self.running:
            LOGGER.debug("Stop ignored: not running")
            return
        self.running = False


__all__ = [
    "CLEAR_SCREEN",
    "CURSOR_HOME",
    "HIDE_CURSOR",
    "RESET",
    "Runner",
    "SHOW_CURSOR",
    "detect_size",
]
