# ideascore_project/ideascore/services/scoring/engines/rice.py

from __future__ import annotations

from ideascore.services.scoring.interfaces import ScoreInputs, ScoreResult
from ideascore.services.scoring.utils import require_int_in_range, round_half_up

MAX_IMPACT = 5
MAX_EFFORT = 5
MAX_CONFIDENCE = 100


def compute_rice_score(reach: int, impact: int, confidence: int, effort: int) -> int:
    """Integer RICE score: round_half_up(reach * impact * confidence / (effort * 100)).

    Confidence is a percentage, hence the factor 100. Effort 0 marks an idea
    as unscoreable and yields 0. Inputs outside their ranges raise
    InvalidScoreInputs; nothing is clamped.
    """
    reach = require_int_in_range("reach", reach, 0)
    impact = require_int_in_range("impact", impact, 0, MAX_IMPACT)
    confidence = require_int_in_range("confidence", confidence, 0, MAX_CONFIDENCE)
    effort = require_int_in_range("effort", effort, 0, MAX_EFFORT)

    if effort == 0:
        return 0
    return round_half_up(reach * impact * confidence, effort * 100)


class RiceScoringEngine:
    """RICE scoring engine.

    RICE formula: (Reach * Impact * Confidence%) / Effort
    - Reach: integer (>=0)
    - Impact: integer in [0, 5]
    - Confidence: integer percentage in [0, 100]
    - Effort: integer in [0, 5]; 0 means unscoreable and scores 0
    """

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        overall = compute_rice_score(inputs.reach, inputs.impact, inputs.confidence, inputs.effort)

        value = inputs.reach * inputs.impact * inputs.confidence / 100
        warnings = []
        if inputs.effort == 0:
            warnings.append("RICE: effort is 0; idea is unscoreable")

        return ScoreResult(
            value_score=value,
            effort_score=float(inputs.effort),
            overall_score=overall,
            components={
                "reach": inputs.reach,
                "impact": inputs.impact,
                "confidence": inputs.confidence,
                "effort": inputs.effort,
                "value_raw": value,
            },
            warnings=warnings,
        )


__all__ = ["RiceScoringEngine", "compute_rice_score"]
