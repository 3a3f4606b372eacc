import io
import os

import pytest

from warpfield import terminal
from warpfield.composer import FrameComposer
from warpfield.settings import WarpSettings
from warpfield.terminal import (
    CLEAR_SCREEN,
    CURSOR_HOME,
    HIDE_CURSOR,
    RESET,
    SHOW_CURSOR,
    Runner,
    detect_size,
)


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0
        self.sleeps: list[float] = []

    def sleep(self, delta: float) -> None:
        self.sleeps.append(delta)
        self.current += delta

    def __call__(self) -> float:
        return self.current


def _runner(stream: io.StringIO, clock: FakeClock) -> Runner:
    composer = FrameComposer(WarpSettings(seed=1, width=12, height=4, fps=10), logo=())
    return Runner(composer, stream=stream, clock=clock, sleep=clock.sleep)


def test_runner_writes_bounded_number_of_frames():
    stream = io.StringIO()
    clock = FakeClock()
    runner = _runner(stream, clock)
    assert runner.start(max_frames=3) == 3
    output = stream.getvalue()
    assert output.startswith(HIDE_CURSOR + CLEAR_SCREEN)
    assert output.count(CURSOR_HOME) == 3
    assert output.endswith(SHOW_CURSOR + RESET + "\n")
    assert runner.running is False
    assert clock.sleeps == pytest.approx([0.1, 0.1, 0.1])


def test_stop_ends_the_loop():
    stream = io.StringIO()
    clock = FakeClock()
    runner = _runner(stream, clock)

    def sleep_then_stop(delta: float) -> None:
        clock.sleep(delta)
        runner.stop()

    runner.sleep = sleep_then_stop
    assert runner.start() == 1
    assert stream.getvalue().endswith(SHOW_CURSOR + RESET + "\n")


def test_tick_error_restores_terminal_and_propagates(caplog):
    stream = io.StringIO()
    runner = _runner(stream, FakeClock())

    def boom():
        raise RuntimeError("boom")

    runner.composer.step = boom
    with pytest.raises(RuntimeError):
        runner.start(max_frames=5)
    assert stream.getvalue().endswith(SHOW_CURSOR + RESET + "\n")
    assert runner.running is False
    assert "failed" in caplog.text


def test_keyboard_interrupt_is_a_clean_exit():
    stream = io.StringIO()
    clock = FakeClock()
    runner = _runner(stream, clock)

    def interrupt(_delta: float) -> None:
        raise KeyboardInterrupt

    runner.sleep = interrupt
    assert runner.start() == 1
    assert stream.getvalue().endswith(SHOW_CURSOR + RESET + "\n")


def test_slow_frames_do_not_sleep():
    stream = io.StringIO()
    clock = FakeClock()
    runner = _runner(stream, clock)
    original = runner.composer.step

    def slow_step():
        clock.current += 1.0
        return original()

    runner.composer.step = slow_step
    runner.start(max_frames=2)
    assert clock.sleeps == []


def test_stop_when_idle_is_ignored():
    runner = _runner(io.StringIO(), FakeClock())
    runner.stop()
    assert runner.running is False


def test_detect_size_prefers_explicit_values(monkeypatch):
    monkeypatch.setattr(
        terminal.shutil, "get_terminal_size", lambda *_args, **_kwargs: os.terminal_size((100, 30))
    )
    assert detect_size(50, 10) == (50, 10)
    assert detect_size(None, 10) == (100, 10)
    assert detect_size(50, None) == (50, 30)
    assert detect_size() == (100, 30)
