# ideascore_project/ideascore/services/scoring/labels.py

from __future__ import annotations

from typing import Dict, List, Tuple

from ideascore.errors import InvalidScoreInputs

IMPACT_LABELS: Dict[int, str] = {
    1: "Minimal",
    2: "Low",
    3: "Medium",
    4: "High",
    5: "Massive",
}

EFFORT_LABELS: Dict[int, str] = {
    1: "Minimal (< 1 week)",
    2: "Low (1-2 weeks)",
    3: "Medium (1 month)",
    4: "High (1 quarter)",
    5: "Massive (> 1 quarter)",
}

# (lower bound, label), checked top-down
RICE_PRIORITY_BANDS: List[Tuple[int, str]] = [
    (100, "Very High Priority"),
    (50, "High Priority"),
    (25, "Medium Priority"),
    (10, "Low Priority"),
]
RICE_LOWEST_BAND = "Very Low Priority"


def impact_label(score: int) -> str:
    try:
        return IMPACT_LABELS[score]
    except KeyError:
        raise InvalidScoreInputs("impact", score, "integer in [1, 5]") from None


def effort_label(score: int) -> str:
    try:
        return EFFORT_LABELS[score]
    except KeyError:
        raise InvalidScoreInputs("effort", score, "integer in [1, 5]") from None


def rice_priority_label(score: int) -> str:
    """Priority band for a RICE score."""
    for lower_bound, label in RICE_PRIORITY_BANDS:
        if score >= lower_bound:
            return label
    return RICE_LOWEST_BAND


__all__ = [
    "IMPACT_LABELS",
    "EFFORT_LABELS",
    "RICE_PRIORITY_BANDS",
    "impact_label",
    "effort_label",
    "rice_priority_label",
]
