# ideascore_project/ideascore/services/prioritization/quadrants.py

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field, computed_field

HIGH_IMPACT_MIN = 4  # impact >= 4 is high impact
LOW_EFFORT_MAX = 2  # effort <= 2 is low effort


class Quadrant(str, Enum):
    """Cells of the impact / effort priority matrix."""
    QUICK_WINS = "quick-wins"
    MAJOR_PROJECTS = "major-projects"
    FILL_INS = "fill-ins"
    MONEY_PIT = "money-pit"


@dataclass(frozen=True)
class QuadrantInfo:
    quadrant: Quadrant
    title: str
    description: str
    priority: int  # 1 = do first


QUADRANTS: Dict[Quadrant, QuadrantInfo] = {
    Quadrant.QUICK_WINS: QuadrantInfo(Quadrant.QUICK_WINS, "Quick Wins", "High Impact, Low Effort", 1),
    Quadrant.MAJOR_PROJECTS: QuadrantInfo(Quadrant.MAJOR_PROJECTS, "Major Projects", "High Impact, High Effort", 2),
    Quadrant.FILL_INS: QuadrantInfo(Quadrant.FILL_INS, "Fill-ins", "Low Impact, Low Effort", 3),
    Quadrant.MONEY_PIT: QuadrantInfo(Quadrant.MONEY_PIT, "Money Pit", "Low Impact, High Effort", 4),
}


class Bucket(BaseModel):
    quadrant: Quadrant
    title: str
    description: str
    priority: int
    ideas: List[Any] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        return len(self.ideas)

    def sorted_by_rice(self) -> List[Any]:
        """Ideas by RICE score, highest first; a missing score counts as 0."""
        return sorted(self.ideas, key=lambda idea: getattr(idea, "rice_score", None) or 0, reverse=True)


class PriorityMatrix(BaseModel):
    """Scoreable ideas grouped into the four quadrants, plus the ones left out."""
    quick_wins: Bucket
    major_projects: Bucket
    fill_ins: Bucket
    money_pit: Bucket
    unscored: List[Any] = Field(default_factory=list)

    def buckets(self) -> List[Bucket]:
        """All four buckets in priority order."""
        return [self.quick_wins, self.major_projects, self.fill_ins, self.money_pit]

    def bucket(self, quadrant: Quadrant) -> Bucket:
        return {b.quadrant: b for b in self.buckets()}[quadrant]

    def as_mapping(self) -> Dict[str, List[Any]]:
        """Bucket title -> ideas."""
        return {b.title: b.ideas for b in self.buckets()}

    def counts(self) -> Dict[str, int]:
        return {b.title: b.count for b in self.buckets()}

    @property
    def scored_count(self) -> int:
        return sum(b.count for b in self.buckets())


def classify_quadrant(impact: int, effort: int) -> Quadrant:
    high_impact = impact >= HIGH_IMPACT_MIN
    low_effort = effort <= LOW_EFFORT_MAX

    if high_impact and low_effort:
        return Quadrant.QUICK_WINS
    if high_impact:
        return Quadrant.MAJOR_PROJECTS
    if low_effort:
        return Quadrant.FILL_INS
    return Quadrant.MONEY_PIT


def is_scoreable(idea: Any) -> bool:
    """An idea enters the matrix only when both impact and effort are set.

    0 counts as unset: it is outside the impact range and is the effort
    sentinel for unscoreable ideas.
    """
    impact: Optional[int] = getattr(idea, "impact_score", None)
    effort: Optional[int] = getattr(idea, "effort_score", None)
    return bool(impact) and bool(effort)


def _empty_bucket(quadrant: Quadrant) -> Bucket:
    info = QUADRANTS[quadrant]
    return Bucket(quadrant=quadrant, title=info.title, description=info.description, priority=info.priority)


def classify_ideas(ideas: Iterable[Any]) -> PriorityMatrix:
    """Partition ideas into the priority matrix.

    Each scoreable idea lands in exactly one bucket; within a bucket ideas
    keep their input order. Ideas missing impact or effort go to `unscored`.
    """
    grouped: Dict[Quadrant, Bucket] = {q: _empty_bucket(q) for q in Quadrant}
    unscored: List[Any] = []

    for idea in ideas:
        if not is_scoreable(idea):
            unscored.append(idea)
            continue
        quadrant = classify_quadrant(idea.impact_score, idea.effort_score)
        grouped[quadrant].ideas.append(idea)

    return PriorityMatrix(
        quick_wins=grouped[Quadrant.QUICK_WINS],
        major_projects=grouped[Quadrant.MAJOR_PROJECTS],
        fill_ins=grouped[Quadrant.FILL_INS],
        money_pit=grouped[Quadrant.MONEY_PIT],
        unscored=unscored,
    )


__all__ = [
    "HIGH_IMPACT_MIN",
    "LOW_EFFORT_MAX",
    "Quadrant",
    "QuadrantInfo",
    "QUADRANTS",
    "Bucket",
    "PriorityMatrix",
    "classify_quadrant",
    "is_scoreable",
    "classify_ideas",
]
