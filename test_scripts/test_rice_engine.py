# Tests for the RICE engine and rounding helpers
from __future__ import annotations

import pytest

from ideascore.errors import InvalidScoreInputs
from pydantic import ValidationError

from ideascore.services.scoring import RiceScoringEngine, ScoreInputs, compute_rice_score
from ideascore.services.scoring.utils import percentage, round_half_up


def test_concrete_scores():
    assert compute_rice_score(reach=1000, impact=3, confidence=80, effort=2) == 1200
    assert compute_rice_score(reach=500, impact=4, confidence=50, effort=3) == 333


def test_half_rounds_up():
    # 1 * 1 * 50 / 100 == 0.5
    assert compute_rice_score(1, 1, 50, 1) == 1
    # 3 * 1 * 50 / 100 == 1.5 ; 5 * 1 * 50 / 100 == 2.5
    assert compute_rice_score(3, 1, 50, 1) == 2
    assert compute_rice_score(5, 1, 50, 1) == 3
    # 1 * 1 * 49 / 100 == 0.49
    assert compute_rice_score(1, 1, 49, 1) == 0


def test_zero_effort_is_unscoreable():
    for reach, impact, confidence in [(0, 0, 0), (1000, 5, 100), (123456, 3, 80)]:
        assert compute_rice_score(reach, impact, confidence, 0) == 0


def test_zero_reach_or_confidence_scores_zero():
    assert compute_rice_score(0, 5, 100, 1) == 0
    assert compute_rice_score(10_000, 5, 0, 1) == 0


def test_deterministic():
    args = (777, 4, 65, 3)
    assert compute_rice_score(*args) == compute_rice_score(*args)


@pytest.mark.parametrize(
    "reach, impact, confidence, effort, field",
    [
        (-1, 3, 80, 2, "reach"),
        (100, -1, 80, 2, "impact"),
        (100, 6, 80, 2, "impact"),
        (100, 3, -5, 2, "confidence"),
        (100, 3, 101, 2, "confidence"),
        (100, 3, 80, -1, "effort"),
        (100, 3, 80, 6, "effort"),
        (100.5, 3, 80, 2, "reach"),
        (100, True, 80, 2, "impact"),
    ],
)
def test_out_of_range_inputs_rejected(reach, impact, confidence, effort, field):
    with pytest.raises(InvalidScoreInputs) as exc:
        compute_rice_score(reach, impact, confidence, effort)
    assert exc.value.field == field


def test_invalid_inputs_is_a_value_error():
    with pytest.raises(ValueError):
        compute_rice_score(-10, 3, 80, 2)


def test_engine_result_components_and_warning():
    engine = RiceScoringEngine()
    res = engine.compute(ScoreInputs(reach=1000, impact=3, confidence=80, effort=2))
    assert res.overall_score == 1200
    assert res.value_score == 2400.0
    assert res.effort_score == 2.0
    assert res.warnings == []
    assert res.components["reach"] == 1000

    res = engine.compute(ScoreInputs(reach=1000, impact=3, confidence=80, effort=0))
    assert res.overall_score == 0
    assert any("unscoreable" in w for w in res.warnings)


def test_engine_does_not_clamp():
    engine = RiceScoringEngine()
    with pytest.raises(InvalidScoreInputs):
        engine.compute(ScoreInputs(reach=1000, impact=9, confidence=80, effort=2))


def test_round_half_up_and_percentage():
    assert round_half_up(5, 10) == 1
    assert round_half_up(4, 10) == 0
    assert round_half_up(15, 10) == 2
    assert percentage(3, 4) == 75
    assert percentage(1, 3) == 33
    assert percentage(2, 3) == 67
    assert percentage(1, 8) == 13  # 12.5 -> 13
    assert percentage(0, 0) == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"reach": 1000, "impact": True, "confidence": 80, "effort": 2},
        {"reach": "1000", "impact": 3, "confidence": 80, "effort": 2},
        {"reach": 1000, "impact": 3.0, "confidence": 80, "effort": 2},
    ],
)
def test_score_inputs_refuse_coercion(payload):
    with pytest.raises(ValidationError):
        ScoreInputs(**payload)
