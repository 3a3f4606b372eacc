import pytest

from warpfield.settings import MAX_STARS, GlyphSet, WarpSettings


def test_defaults_match_reference_run():
    settings = WarpSettings()
    assert (settings.seed, settings.width, settings.height) == (12345, 80, 24)
    assert settings.glyph_set is GlyphSet.ASCII
    assert settings.num_objects == 14
    assert settings.dt == pytest.approx(1 / 30)


def test_derived_geometry():
    settings = WarpSettings(width=80, height=24)
    assert settings.center == (40.0, 12.0)
    assert settings.scale == pytest.approx((28.0, 13.2))


def test_star_count_scales_with_area_and_is_capped():
    assert WarpSettings(width=80, height=24).star_count == 106
    assert WarpSettings(width=3, height=5).star_count == 0
    assert WarpSettings(width=400, height=100).star_count == MAX_STARS


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 0},
        {"height": -3},
        {"fps": 0},
        {"num_objects": -1},
        {"seed": -1},
        {"seed": 2**32},
    ],
)
def test_validate_rejects_bad_configuration(kwargs):
    with pytest.raises(ValueError):
        WarpSettings(**kwargs).validate()


def test_validate_returns_settings():
    settings = WarpSettings(width=1, height=1, num_objects=0)
    assert settings.validate() is settings


def test_glyph_set_accepts_plain_strings():
    assert GlyphSet("unicode") is GlyphSet.UNICODE


def test_spawn_radius_follows_the_smaller_side():
    assert WarpSettings(width=80, height=24).spawn_radius == pytest.approx(8.4)
    assert WarpSettings(width=10, height=50).spawn_radius == pytest.approx(3.5)
