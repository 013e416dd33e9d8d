# ideascore_project/ideascore/services/prioritization/ranking.py

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Optional

from ideascore.schemas.idea import IdeaStatus


class RankBy(str, Enum):
    """Sort keys offered on the prioritization board."""
    RICE_SCORE = "rice_score"
    IMPACT_SCORE = "impact_score"
    EFFORT_SCORE = "effort_score"
    TITLE = "title"


def rank_ideas(
    ideas: Iterable[Any],
    sort_by: RankBy = RankBy.RICE_SCORE,
    descending: bool = True,
    status: Optional[IdeaStatus] = None,
) -> List[Any]:
    """Filter ideas by status (None keeps all) and sort them by one key.

    Missing numeric scores sort as 0. Titles compare case-insensitively.
    The sort is stable, so equal keys keep their input order in either
    direction.
    """
    sort_by = RankBy(sort_by)
    if status is not None:
        status = IdeaStatus(status)
        ideas = [idea for idea in ideas if getattr(idea, "status", None) == status]

    if sort_by is RankBy.TITLE:
        def key(idea: Any) -> Any:
            return (getattr(idea, "title", "") or "").casefold()
    else:
        def key(idea: Any) -> Any:
            return getattr(idea, sort_by.value, None) or 0

    return sorted(ideas, key=key, reverse=descending)


__all__ = ["RankBy", "rank_ideas"]
