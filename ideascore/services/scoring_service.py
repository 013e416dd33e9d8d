# ideascore_project/ideascore/services/scoring_service.py

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from ideascore.config import settings
from ideascore.errors import InvalidScoreInputs
from ideascore.schemas.idea import IdeaRecord, IdeaScoreUpdate, IdeaStatus
from ideascore.services.prioritization import PriorityMatrix, RankBy, classify_ideas, rank_ideas
from ideascore.services.scoring import RiceScoringEngine, ScoreInputs, ScoreResult
from ideascore.services.store import IdeaNotFound, IdeaStore
from ideascore.services.validation import ValidationProgress, compute_validation_progress

logger = logging.getLogger("ideascore.services.scoring")

_engine = RiceScoringEngine()


def _invalid_inputs(exc: ValidationError) -> InvalidScoreInputs:
    """Report the first field pydantic rejected as an engine input error."""
    err = exc.errors()[0]
    field = ".".join(str(part) for part in err["loc"]) or "inputs"
    return InvalidScoreInputs(field, err.get("input"), err["msg"])


class DraftScore(BaseModel):
    """Unsaved RICE edits for one idea.

    A draft never touches the idea it was started from; it is merged into a
    new record only when committed through ScoringService.commit_draft.
    Unset fields fall back to the idea's stored value, then to defaults.
    """
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    reach: Optional[int] = None
    impact: Optional[int] = None
    confidence: Optional[int] = None
    effort: Optional[int] = None

    @classmethod
    def from_idea(cls, idea: IdeaRecord) -> "DraftScore":
        """Seed a draft with the values an editor would show for this idea."""
        inputs = build_score_inputs(idea)
        return cls(reach=inputs.reach, impact=inputs.impact, confidence=inputs.confidence, effort=inputs.effort)

    def edit(self, **changes: int) -> "DraftScore":
        """Return a new draft with changes applied; the original is untouched."""
        try:
            return self.model_validate({**self.model_dump(), **changes})
        except ValidationError as e:
            raise _invalid_inputs(e) from e


def _pick(draft_value: Optional[int], stored_value: Optional[int], default: int) -> int:
    if draft_value is not None:
        return draft_value
    if stored_value is not None:
        return stored_value
    return default


def build_score_inputs(idea: IdeaRecord, draft: Optional[DraftScore] = None) -> ScoreInputs:
    """Map an idea (plus optional draft) to engine inputs, filling gaps from settings."""
    draft = draft or DraftScore()
    try:
        return ScoreInputs(
            reach=_pick(draft.reach, idea.reach_estimate, settings.SCORING_DEFAULT_RICE_REACH),
            impact=_pick(draft.impact, idea.impact_score, settings.SCORING_DEFAULT_RICE_IMPACT),
            confidence=_pick(draft.confidence, idea.confidence_score, settings.SCORING_DEFAULT_RICE_CONFIDENCE),
            effort=_pick(draft.effort, idea.effort_score, settings.SCORING_DEFAULT_RICE_EFFORT),
        )
    except ValidationError as e:
        raise _invalid_inputs(e) from e


class ScoringService:
    """Boundary between the tracker's records and the pure scoring engine.

    Responsibilities:
    - Map Idea fields (and score drafts) -> ScoreInputs, applying defaults
    - Delegate to the RICE engine
    - Return new IdeaRecord snapshots; persist only on commit_draft
    - Build the priority matrix and validation rollups from the store
    """

    def __init__(self, store: Optional[IdeaStore] = None):
        self.store = store

    def _require_store(self) -> IdeaStore:
        if self.store is None:
            raise RuntimeError("ScoringService was created without an IdeaStore")
        return self.store

    def compute(self, idea: IdeaRecord, draft: Optional[DraftScore] = None) -> ScoreResult:
        inputs = build_score_inputs(idea, draft)
        result = _engine.compute(inputs)

        for warn in result.warnings:
            logger.warning(
                "scoring.warning",
                extra={
                    "idea_id": idea.id,
                    "warning": warn,
                },
            )
        return result

    def score_idea(self, idea: IdeaRecord, draft: Optional[DraftScore] = None) -> IdeaRecord:
        """Return a copy of idea carrying the scored inputs and recomputed rice_score.

        Args:
            idea: snapshot from the store; left unchanged
            draft: unsaved edits layered over the stored values

        Raises:
            InvalidScoreInputs: when a stored or drafted value is out of range
        """
        result = self.compute(idea, draft)
        components = result.components

        scored = idea.model_copy(
            update={
                "reach_estimate": components["reach"],
                "impact_score": components["impact"],
                "confidence_score": components["confidence"],
                "effort_score": components["effort"],
                "rice_score": result.overall_score,
            }
        )

        logger.debug(
            "scoring.computed",
            extra={
                "idea_id": idea.id,
                "rice_score": result.overall_score,
            },
        )
        return scored

    def score_ideas(self, ideas: Iterable[IdeaRecord]) -> List[IdeaRecord]:
        """Score a batch of ideas. Any invalid idea aborts the batch."""
        ideas = list(ideas)
        logger.info("scoring.batch_start", extra={"total": len(ideas)})

        scored: List[IdeaRecord] = []
        for idx, idea in enumerate(ideas, start=1):
            scored.append(self.score_idea(idea))
            if idx % settings.SCORING_BATCH_LOG_EVERY == 0:
                logger.info("scoring.batch_progress", extra={"processed": idx, "total": len(ideas)})

        logger.info("scoring.batch_done", extra={"scored": len(scored)})
        return scored

    def commit_draft(self, idea_id: int, draft: DraftScore) -> IdeaRecord:
        """Score idea_id with draft and write the result through the store."""
        store = self._require_store()
        idea = store.get_idea(idea_id)
        if idea is None:
            raise IdeaNotFound(f"Idea {idea_id} not found")

        scored = self.score_idea(idea, draft)
        update = IdeaScoreUpdate(
            reach_estimate=scored.reach_estimate,
            impact_score=scored.impact_score,
            effort_score=scored.effort_score,
            confidence_score=scored.confidence_score,
            rice_score=scored.rice_score,
        )
        saved = store.update_idea_scores(idea_id, update)

        logger.info("scoring.commit_draft", extra={"idea_id": idea_id, "rice_score": update.rice_score})
        return saved

    def priority_matrix(self) -> PriorityMatrix:
        matrix = classify_ideas(self._require_store().list_ideas())
        logger.info(
            "prioritization.matrix",
            extra={"scored": matrix.scored_count, "count": len(matrix.unscored)},
        )
        return matrix

    def ranked_ideas(
        self,
        sort_by: RankBy = RankBy.RICE_SCORE,
        descending: bool = True,
        status: Optional[IdeaStatus] = None,
    ) -> List[IdeaRecord]:
        """The store's ideas, optionally filtered by status, in board order."""
        return rank_ideas(self._require_store().list_ideas(), sort_by=sort_by, descending=descending, status=status)

    def validation_progress(self) -> ValidationProgress:
        store = self._require_store()
        progress = compute_validation_progress(store.list_hypotheses(), ideas=store.list_ideas())
        logger.info(
            "validation.progress",
            extra={
                "total": progress.overall.total,
                "validation_rate": progress.overall.validation_rate,
                "success_rate": progress.overall.success_rate,
            },
        )
        return progress


__all__ = ["DraftScore", "ScoringService", "build_score_inputs"]
