import pytest

from warpfield.composer import LOGO_DEPTH, FrameComposer
from warpfield.logo import LOGO_LINES
from warpfield.perf import PerformanceTracker
from warpfield.prng import Generator
from warpfield.settings import GlyphSet, WarpSettings
from warpfield.sprites import SpriteKind, SpriteObject
from warpfield.stars import Star


class FakeClock:
    def __init__(self) -> None:
        self.current = 0.0

    def advance(self, delta: float) -> None:
        self.current += delta

    def __call__(self) -> float:
        self.current += 0.001
        return self.current


def _lines(frame: str) -> list[str]:
    return frame.split("\n")


def test_reference_run_initial_stars_and_logo():
    composer = FrameComposer(WarpSettings(seed=12345, width=80, height=24), Generator(12345))
    stars = composer.stars.stars
    assert len(stars) == 106
    assert (stars[0].sx, stars[0].sy) == (0.6551513671875, 0.3048095703125)
    assert stars[0].z == pytest.approx(0.853730773926)
    assert (stars[1].sx, stars[1].sy) == (-0.89324951171875, 0.516571044921875)
    assert stars[1].z == pytest.approx(0.320344543457)
    assert (stars[2].sx, stars[2].sy) == (0.602447509765625, 0.36993408203125)
    assert stars[2].z == pytest.approx(0.215493774414)
    assert len(composer.sprites) == 14

    # The 94x48 logo is centred on (40, 12) so it covers the whole 80x24 grid.
    expected = [LOGO_LINES[row + 12][7:87] for row in range(24)]
    assert _lines(composer.compose()) == expected


def test_frames_have_exact_dimensions():
    composer = FrameComposer(WarpSettings(seed=3, width=37, height=11))
    for frame in composer.frames(5):
        lines = _lines(frame)
        assert len(lines) == 11
        assert all(len(line) == 37 for line in lines)
        assert "\x1b" not in frame


def test_identical_seeds_give_identical_frames():
    settings = WarpSettings(seed=2024, width=60, height=20, glyph_set=GlyphSet.UNICODE)
    first = FrameComposer(settings, Generator(2024), logo=("[]",))
    second = FrameComposer(settings, Generator(2024), logo=("[]",))
    assert list(first.frames(60)) == list(second.frames(60))


def test_different_seeds_give_different_frames():
    a = FrameComposer(WarpSettings(seed=1, width=60, height=20), logo=())
    b = FrameComposer(WarpSettings(seed=2, width=60, height=20), logo=())
    assert list(a.frames(3)) != list(b.frames(3))


def test_step_advances_time_and_tick_count():
    composer = FrameComposer(WarpSettings(width=30, height=10, fps=20), logo=())
    composer.step()
    composer.step()
    assert composer.ticks == 2
    assert composer.t == pytest.approx(0.1)
    composer.step(dt=0.5)
    assert composer.t == pytest.approx(0.6)


def test_logo_occludes_everything_beneath_it():
    settings = WarpSettings(seed=77, width=30, height=12)
    composer = FrameComposer(settings, logo=())
    # A star and an icon both parked on the grid centre (15, 6).
    composer.stars.stars = [Star(0.0, 0.0, 0.5)]
    composer.sprites.objects = [
        SpriteObject(
            kind=SpriteKind.CODE,
            position=(composer.center_x, composer.center_y),
            velocity=(0.0, 0.0),
            z=0.7,
        )
    ]
    lines = _lines(composer.compose())
    assert lines[5][14:17] == "</>"
    assert lines[6][15] == "+"

    # logo is 3x2 centred on (15, 6) -> columns 14..16, rows 5..6
    composer.logo = ("@@@", "@ @")
    lines = _lines(composer.compose())
    assert lines[5][14:17] == "@@@"
    assert lines[6][14:17] == "@ @"
    for row in (5, 6):
        for col in (14, 15, 16):
            assert composer.grid.get_depth(col, row) == LOGO_DEPTH


def test_compose_is_repeatable_without_update():
    composer = FrameComposer(WarpSettings(seed=5, width=50, height=16), logo=())
    composer.step()
    assert composer.compose() == composer.compose()


def test_stars_and_sprites_are_visible_outside_logo():
    composer = FrameComposer(WarpSettings(seed=12, width=100, height=40), logo=())
    frame = composer.step()
    assert frame.strip()
    assert any(glyph in frame for glyph in ".*+#")


def test_composer_rejects_degenerate_grid():
    with pytest.raises(ValueError):
        FrameComposer(WarpSettings(width=0, height=10))


def test_profiler_records_pipeline_sections():
    tracker = PerformanceTracker(clock=FakeClock())
    composer = FrameComposer(WarpSettings(width=20, height=8), profiler=tracker)
    composer.step()
    composer.step()
    names = {row["name"] for row in tracker.summary()}
    assert names == {
        "tick",
        "update.stars",
        "update.sprites",
        "draw.stars",
        "draw.sprites",
        "draw.logo",
        "serialize",
    }
    assert tracker.stat("tick").count == 2
    tick = tracker.stat("tick")
    assert tick.self_time < tick.total
