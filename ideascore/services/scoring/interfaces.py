# ideascore_project/ideascore/services/scoring/interfaces.py

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScoreInputs(BaseModel):
    """Integer RICE inputs for one idea.

    All four are required here; filling in missing values from configured
    defaults happens in ScoringService before the engine ever sees them.
    Fields are strict so bools, floats and numeric strings are refused
    instead of coerced. Ranges are checked by the engine so violations
    surface as InvalidScoreInputs rather than schema errors.
    """
    model_config = ConfigDict(strict=True)

    reach: int  # users reached per period, >= 0
    impact: int  # 1-5
    confidence: int  # 0-100 (%)
    effort: int  # 1-5, 0 = unscoreable sentinel


class ScoreResult(BaseModel):
    """Result returned by the RICE engine.

    value_score: reach * impact * confidence%, before dividing by effort
    effort_score: the effort input
    overall_score: the integer RICE score (sortable)
    components: raw components used to derive scores (for audit / transparency)
    warnings: non-fatal computation notes (e.g., zero effort)
    """
    value_score: Optional[float] = None
    effort_score: Optional[float] = None
    overall_score: int = 0

    components: Dict[str, Any] = Field(default_factory=dict)
    warnings: List[str] = Field(default_factory=list)


__all__ = [
    "ScoreInputs",
    "ScoreResult",
]
