"""Tests for the presentation snapshot built from (experience, curve_id)."""

import pytest

from progression.errors import InvalidCurveIdentifier
from progression.models.growth import GrowthCurveId
from progression.models.nature import Nature
from progression.services.snapshot_service import build_snapshot


def test_fresh_creature():
    snap = build_snapshot(0, GrowthCurveId.MEDIUM_FAST)
    assert snap.curve == "medium_fast"
    assert snap.level == 1
    assert snap.experience_required == 0
    assert snap.experience_next == 10
    assert snap.experience_to_next_level == 10
    assert snap.progress_fraction == 0.0
    assert snap.nature is Nature.HARDY
    assert not snap.is_max_level


def test_mid_band_snapshot():
    snap = build_snapshot(110193, 5)
    assert snap.level == 44
    assert snap.experience_required == 106480
    assert snap.experience_next == 113906
    assert snap.experience_to_next_level == 7426
    assert snap.progress_fraction == pytest.approx(0.5)
    assert snap.nature is Nature.BASHFUL


def test_capped_snapshot():
    snap = build_snapshot(1250000 + 99, GrowthCurveId.SLOW)
    assert snap.level == 100
    assert snap.is_max_level
    assert snap.experience_required == 1250000
    assert snap.experience_next == 1250000
    assert snap.experience_to_next_level == 0
    assert snap.progress_fraction == 0


def test_snapshot_accepts_table(scenario_table):
    snap = build_snapshot(103240, scenario_table)
    assert snap.curve == "scenario"
    assert snap.level == 50
    assert snap.experience_to_next_level == 6480
    assert snap.progress_fraction == pytest.approx(0.5)


def test_snapshot_clamps_negative_experience():
    snap = build_snapshot(-40, 0)
    assert snap.experience == 0
    assert snap.level == 1


def test_as_dict_shape():
    data = build_snapshot(110193, 5).as_dict()
    assert set(data) == {
        "curve",
        "experience",
        "level",
        "experience_required",
        "experience_next",
        "experience_to_next_level",
        "progress_fraction",
        "nature",
        "max_level",
    }
    assert data["nature"] == "bashful"
    assert data["max_level"] is False


def test_invalid_curve_identifier():
    with pytest.raises(InvalidCurveIdentifier):
        build_snapshot(100, 255)
