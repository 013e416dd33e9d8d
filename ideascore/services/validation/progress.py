# ideascore_project/ideascore/services/validation/progress.py

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, computed_field

from ideascore.schemas.hypothesis import HypothesisStatus
from ideascore.services.scoring.utils import percentage


class ValidationHealth(str, Enum):
    """Rollup label for an idea's validation progress (not a hypothesis status)."""
    NO_HYPOTHESES = "No Hypotheses"
    WELL_VALIDATED = "Well Validated"
    PARTIALLY_VALIDATED = "Partially Validated"
    IN_PROGRESS = "In Progress"
    NEEDS_VALIDATION = "Needs Validation"


class StatusCounts(BaseModel):
    """Per-status tallies and the two rates derived from them.

    Per-idea and overall rollups both extend this model, so they share one
    definition of the rates: resolved (validated + invalidated) over total,
    and validated over total, each as a half-up rounded percentage that is 0
    when there are no hypotheses.
    """
    model_config = ConfigDict(frozen=True)

    validated: int = 0
    invalidated: int = 0
    partially_validated: int = 0  # shown as "In Progress"
    unvalidated: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.validated + self.invalidated + self.partially_validated + self.unvalidated

    @computed_field  # type: ignore[prop-decorator]
    @property
    def validation_rate(self) -> int:
        return percentage(self.validated + self.invalidated, self.total)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def success_rate(self) -> int:
        return percentage(self.validated, self.total)


class IdeaProgress(StatusCounts):
    idea_id: Any
    idea: Optional[Any] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def health(self) -> ValidationHealth:
        return validation_health(self.total, self.validation_rate)


class OverallProgress(StatusCounts):
    pass


class ValidationProgress(BaseModel):
    per_idea: List[IdeaProgress]
    overall: OverallProgress


def validation_health(total: int, validation_rate: int) -> ValidationHealth:
    if total == 0:
        return ValidationHealth.NO_HYPOTHESES
    if validation_rate >= 80:
        return ValidationHealth.WELL_VALIDATED
    if validation_rate >= 60:
        return ValidationHealth.PARTIALLY_VALIDATED
    if validation_rate >= 40:
        return ValidationHealth.IN_PROGRESS
    return ValidationHealth.NEEDS_VALIDATION


def _tally(hypotheses: Iterable[Any]) -> Dict[str, int]:
    tally = {status: 0 for status in HypothesisStatus}
    for hyp in hypotheses:
        status = HypothesisStatus.parse(getattr(hyp, "status", None), hypothesis_id=getattr(hyp, "id", None))
        tally[status] += 1
    return {
        "validated": tally[HypothesisStatus.VALIDATED],
        "invalidated": tally[HypothesisStatus.INVALIDATED],
        "partially_validated": tally[HypothesisStatus.PARTIALLY_VALIDATED],
        "unvalidated": tally[HypothesisStatus.UNVALIDATED],
    }


def count_statuses(hypotheses: Iterable[Any]) -> StatusCounts:
    """Tally hypotheses by status. Raises InvalidHypothesisStatus on unknown values."""
    return StatusCounts(**_tally(hypotheses))


def compute_idea_progress(idea_id: Any, hypotheses: Iterable[Any], idea: Optional[Any] = None) -> IdeaProgress:
    """Rollup for one idea; hypotheses belonging to other ideas are ignored."""
    own = [h for h in hypotheses if getattr(h, "idea_id", None) == idea_id]
    return IdeaProgress(idea_id=idea_id, idea=idea, **_tally(own))


def compute_overall_progress(hypotheses: Iterable[Any]) -> OverallProgress:
    return OverallProgress(**_tally(hypotheses))


def group_by_idea(hypotheses: Iterable[Any]) -> Dict[Any, List[Any]]:
    """Partition hypotheses by idea_id, keeping first-seen idea order."""
    groups: Dict[Any, List[Any]] = {}
    for hyp in hypotheses:
        groups.setdefault(getattr(hyp, "idea_id", None), []).append(hyp)
    return groups


def compute_validation_progress(
    hypotheses: Iterable[Any],
    ideas: Optional[Sequence[Any]] = None,
) -> ValidationProgress:
    """Per-idea and overall validation rollups.

    With `ideas`, there is one rollup per idea (zeroed when it has no
    hypotheses); without, one per distinct idea_id seen. The overall rollup
    always covers the full collection, including hypotheses whose idea is not
    listed. per_idea is sorted by validation_rate, highest first; the sort is
    stable so ties keep input order.
    """
    hypotheses = list(hypotheses)

    # Validates every status up front so a bad record fails before any rollup is built
    overall = compute_overall_progress(hypotheses)
    groups = group_by_idea(hypotheses)

    if ideas is None:
        targets = [(idea_id, None) for idea_id in groups]
    else:
        targets = [(idea.id, idea) for idea in ideas]

    per_idea = [
        IdeaProgress(idea_id=idea_id, idea=idea, **_tally(groups.get(idea_id, [])))
        for idea_id, idea in targets
    ]
    per_idea.sort(key=lambda p: p.validation_rate, reverse=True)

    return ValidationProgress(per_idea=per_idea, overall=overall)


__all__ = [
    "ValidationHealth",
    "StatusCounts",
    "IdeaProgress",
    "OverallProgress",
    "ValidationProgress",
    "validation_health",
    "count_statuses",
    "compute_idea_progress",
    "compute_overall_progress",
    "group_by_idea",
    "compute_validation_progress",
]
