# ideascore_project/ideascore/api/routes/scoring.py

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ideascore.api.schemas.scoring import (
    BucketResponse,
    IdeaProgressResponse,
    MatrixRequest,
    MatrixResponse,
    RankRequest,
    RankResponse,
    ProgressCounts,
    RiceScoreResponse,
    ValidationProgressResponse,
    ValidationRequest,
)
from ideascore.errors import ScoringEngineError
from ideascore.services.prioritization import Bucket, classify_ideas, rank_ideas
from ideascore.services.scoring import (
    RiceScoringEngine,
    ScoreInputs,
    effort_label,
    impact_label,
    rice_priority_label,
)
from ideascore.services.validation import compute_validation_progress


router = APIRouter(tags=["scoring"])

_engine = RiceScoringEngine()


def _bucket_response(bucket: Bucket) -> BucketResponse:
    return BucketResponse(
        quadrant=bucket.quadrant.value,
        title=bucket.title,
        description=bucket.description,
        priority=bucket.priority,
        count=bucket.count,
        ideas=bucket.ideas,
    )


@router.post("/scoring/rice", response_model=RiceScoreResponse)
def score_rice(req: ScoreInputs) -> RiceScoreResponse:
    """
    Compute the RICE score for one set of inputs.
    """
    try:
        result = _engine.compute(req)
    except ScoringEngineError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return RiceScoreResponse(
        rice_score=result.overall_score,
        priority_label=rice_priority_label(result.overall_score),
        value_score=result.value_score,
        # 0 is in range for the engine but has no label
        impact_label=impact_label(req.impact) if req.impact else None,
        effort_label=effort_label(req.effort) if req.effort else None,
        warnings=result.warnings,
    )


@router.post("/prioritization/matrix", response_model=MatrixResponse)
def priority_matrix(req: MatrixRequest) -> MatrixResponse:
    """
    Group ideas into the impact / effort matrix. Ideas missing a score come back as unscored.
    """
    matrix = classify_ideas(req.ideas)
    return MatrixResponse(
        quick_wins=_bucket_response(matrix.quick_wins),
        major_projects=_bucket_response(matrix.major_projects),
        fill_ins=_bucket_response(matrix.fill_ins),
        money_pit=_bucket_response(matrix.money_pit),
        unscored=matrix.unscored,
    )


@router.post("/validation/progress", response_model=ValidationProgressResponse)
def validation_progress(req: ValidationRequest) -> ValidationProgressResponse:
    """
    Per-idea and overall hypothesis validation rollups.
    """
    try:
        progress = compute_validation_progress(req.hypotheses, ideas=req.ideas)
    except ScoringEngineError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    counts = ProgressCounts.model_fields.keys()
    return ValidationProgressResponse(
        per_idea=[
            IdeaProgressResponse(
                idea_id=p.idea_id,
                title=getattr(p.idea, "title", None),
                health=p.health.value,
                **{k: getattr(p, k) for k in counts},
            )
            for p in progress.per_idea
        ],
        overall=ProgressCounts(**{k: getattr(progress.overall, k) for k in counts}),
    )


@router.post("/prioritization/ranking", response_model=RankResponse)
def ranking(req: RankRequest) -> RankResponse:
    """
    Filter ideas by status and sort them by RICE score, impact, effort or title.
    """
    return RankResponse(ideas=rank_ideas(req.ideas, sort_by=req.sort_by, descending=req.descending, status=req.status))
