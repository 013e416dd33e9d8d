# ideascore_project/ideascore/schemas/idea.py

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class IdeaStatus(str, Enum):
    """Lifecycle status of an idea as stored by the tracker."""
    NEW = "New"
    IN_DISCOVERY = "In Discovery"
    VALIDATED = "Validated"
    REJECTED = "Rejected"
    PRIORITIZED = "Prioritized"
    IN_PLANNING = "In Planning"


class IdeaRecord(BaseModel):
    """Read-only snapshot of an idea, limited to the fields scoring needs.

    Score fields stay optional: partially scored ideas (impact set, effort
    missing) are a normal state. rice_score is derived and only ever written
    from the output of the RICE engine.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    title: str = ""
    status: IdeaStatus = IdeaStatus.NEW

    reach_estimate: Optional[int] = None  # users reached per period
    impact_score: Optional[int] = None  # 1-5
    effort_score: Optional[int] = None  # 1-5, 0 = unscoreable
    confidence_score: Optional[int] = None  # 0-100 (%)
    rice_score: Optional[int] = None


class IdeaScoreUpdate(BaseModel):
    """Score fields written back to the store after an explicit save."""
    reach_estimate: int = Field(..., ge=0)
    impact_score: int
    effort_score: int
    confidence_score: int
    rice_score: int


__all__ = ["IdeaStatus", "IdeaRecord", "IdeaScoreUpdate"]
