from __future__ import annotations

import pytest

from hopfviewer.config import Hemisphere, ProjectionMode, ViewerSettings


def test_defaults():
    s = ViewerSettings().validate()
    assert s.projection == ProjectionMode.STEREOGRAPHIC
    assert s.alpha == 4.0
    assert (s.lat_rings, s.longitudes, s.segments, s.line_width) == (7, 12, 200, 1)
    assert s.show_tetra and s.show_grid and s.show_custom
    assert s.hemisphere == Hemisphere.NORTH


@pytest.mark.parametrize("changes", [
    {"segments": 1},
    {"segments": 2001},
    {"lat_rings": 41},
    {"longitudes": 65},
    {"line_width": 9},
    {"alpha": 50.5},
    {"alpha": -1.0},
    {"alpha": float("nan")},
    {"alpha": float("inf")},
    {"lat_rings": 0},
    {"longitudes": 0},
    {"line_width": 0},
    {"projection": "stereo"},
    {"hemisphere": "east"},
])
def test_replace_rejects_invalid(changes):
    with pytest.raises(ValueError):
        ViewerSettings().replace(**changes)


def test_replace_returns_new_instance():
    base = ViewerSettings()
    changed = base.replace(alpha=10.0, projection=ProjectionMode.SOFTMAX)
    assert changed.alpha == 10.0
    assert base.alpha == 4.0
    assert changed.projection is ProjectionMode.SOFTMAX


def test_mapping_round_trip_with_strings():
    saved = ViewerSettings(
        projection=ProjectionMode.SOFTMAX, alpha=2.5, lat_rings=3, longitudes=5,
        segments=64, line_width=2, show_tetra=False, hemisphere=Hemisphere.SOUTH,
    )
    as_strings = {k: str(v).lower() if isinstance(v, bool) else str(v) for k, v in saved.to_mapping().items()}
    assert as_strings["projection"] == "softmax"
    assert as_strings["show_tetra"] == "false"
    assert ViewerSettings.from_mapping(as_strings) == saved


def test_from_mapping_fills_defaults_and_ignores_unknown():
    s = ViewerSettings.from_mapping({"segments": "7.0", "colour": "red", "alpha": None})
    assert s.segments == 7
    assert s.alpha == 4.0
    assert s.lat_rings == 7


@pytest.mark.parametrize("mapping", [
    {"segments": "1"},
    {"projection": "hyperbolic"},
    {"show_grid": "maybe"},
    {"alpha": "lots"},
])
def test_from_mapping_rejects_bad_values(mapping):
    with pytest.raises(ValueError):
        ViewerSettings.from_mapping(mapping)


def test_limits_are_inclusive():
    s = ViewerSettings().replace(alpha=50.0, lat_rings=40, longitudes=64, segments=2000, line_width=8)
    assert (s.alpha, s.lat_rings, s.segments) == (50.0, 40, 2000)
    assert ViewerSettings().replace(alpha=0.0, segments=2).segments == 2


def test_hand_edited_out_of_range_values_are_rejected():
    with pytest.raises(ValueError):
        ViewerSettings.from_mapping({"alpha": "1000", "lat_rings": "500"})
