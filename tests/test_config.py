from types import SimpleNamespace

import pytest

from pathtracer.config import QUALITY_LEVELS, RenderSettings, settings_for


@pytest.fixture
def scene():
    return SimpleNamespace(image_width=400, aspect_ratio=2.0, samples_per_pixel=100, max_depth=50)


def test_scene_defaults(scene):
    settings = settings_for(scene)
    assert (settings.width, settings.height) == (400, 200)
    assert settings.samples_per_pixel == 100
    assert settings.max_depth == 50


def test_preview_quality_scales_down(scene):
    settings = settings_for(scene, quality="preview")
    assert (settings.width, settings.height) == (100, 50)
    assert settings.samples_per_pixel == 4
    assert settings.max_depth == 8


def test_high_quality_keeps_scene_values(scene):
    settings = settings_for(scene, quality="high_quality")
    assert (settings.width, settings.samples_per_pixel, settings.max_depth) == (400, 100, 50)


def test_explicit_values_beat_quality(scene):
    settings = settings_for(scene, quality="balanced", width=64, samples_per_pixel=3,
                            max_depth=2, workers=4, seed=7, output="x.png")
    assert (settings.width, settings.height) == (64, 32)
    assert (settings.samples_per_pixel, settings.max_depth) == (3, 2)
    assert (settings.workers, settings.seed, settings.output) == (4, 7, "x.png")


def test_height_never_drops_to_zero():
    wide = SimpleNamespace(image_width=3, aspect_ratio=16.0, samples_per_pixel=1, max_depth=1)
    assert settings_for(wide).height == 1


def test_unknown_quality_is_rejected(scene):
    with pytest.raises(ValueError, match="quality"):
        settings_for(scene, quality="ultra")
    assert "ultra" not in QUALITY_LEVELS


@pytest.mark.parametrize("field, value", [
    ("width", 0), ("height", -2), ("samples_per_pixel", 0), ("max_depth", 0), ("workers", 0),
])
def test_validate_rejects_non_positive(field, value):
    settings = RenderSettings(**{field: value})
    with pytest.raises(ValueError, match=field):
        settings.validate()


def test_validate_returns_settings():
    settings = RenderSettings()
    assert settings.validate() is settings
