# ideascore_project/ideascore/api/schemas/scoring.py

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ideascore.schemas.idea import IdeaRecord, IdeaStatus
from ideascore.services.prioritization import RankBy


class RiceScoreResponse(BaseModel):
    rice_score: int
    priority_label: str
    impact_label: Optional[str] = None
    effort_label: Optional[str] = None
    value_score: Optional[float] = None
    warnings: List[str] = Field(default_factory=list)


class MatrixRequest(BaseModel):
    ideas: List[IdeaRecord] = Field(default_factory=list)


class BucketResponse(BaseModel):
    quadrant: str
    title: str
    description: str
    priority: int
    count: int
    ideas: List[IdeaRecord] = Field(default_factory=list)


class MatrixResponse(BaseModel):
    quick_wins: BucketResponse
    major_projects: BucketResponse
    fill_ins: BucketResponse
    money_pit: BucketResponse
    unscored: List[IdeaRecord] = Field(default_factory=list)


class RankRequest(BaseModel):
    ideas: List[IdeaRecord] = Field(default_factory=list)
    sort_by: RankBy = RankBy.RICE_SCORE
    descending: bool = True
    status: Optional[IdeaStatus] = None


class RankResponse(BaseModel):
    ideas: List[IdeaRecord]


class HypothesisIn(BaseModel):
    # status stays a raw string so unknown values reach the aggregator's own check
    id: int
    idea_id: int
    status: str
    statement: str = ""
    results: Optional[str] = None


class ValidationRequest(BaseModel):
    hypotheses: List[HypothesisIn] = Field(default_factory=list)
    ideas: Optional[List[IdeaRecord]] = None


class ProgressCounts(BaseModel):
    total: int
    validated: int
    invalidated: int
    partially_validated: int
    unvalidated: int
    validation_rate: int
    success_rate: int


class IdeaProgressResponse(ProgressCounts):
    idea_id: Any
    title: Optional[str] = None
    health: str


class ValidationProgressResponse(BaseModel):
    per_idea: List[IdeaProgressResponse]
    overall: ProgressCounts
