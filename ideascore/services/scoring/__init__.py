from .interfaces import (
    ScoreInputs,
    ScoreResult,
)
from .engines import RiceScoringEngine, compute_rice_score
from .labels import impact_label, effort_label, rice_priority_label

__all__ = [
    "ScoreInputs",
    "ScoreResult",
    "RiceScoringEngine",
    "compute_rice_score",
    "impact_label",
    "effort_label",
    "rice_priority_label",
]
