# ideascore_project/ideascore/services/store.py

from __future__ import annotations

from typing import List, Optional, Protocol

from ideascore.schemas.hypothesis import HypothesisRecord
from ideascore.schemas.idea import IdeaRecord, IdeaScoreUpdate


class IdeaNotFound(LookupError):
    """Raised when the store has no idea with the requested id."""


class IdeaStore(Protocol):
    """Data-access interface supplied by the surrounding tracker.

    The engine only reads snapshots through it; the single write is
    update_idea_scores, issued when a score draft is committed.
    """

    def list_ideas(self) -> List[IdeaRecord]:  # pragma: no cover - interface only
        ...

    def get_idea(self, idea_id: int) -> Optional[IdeaRecord]:  # pragma: no cover - interface only
        ...

    def list_hypotheses(self, idea_id: Optional[int] = None) -> List[HypothesisRecord]:  # pragma: no cover - interface only
        ...

    def update_idea_scores(self, idea_id: int, update: IdeaScoreUpdate) -> IdeaRecord:  # pragma: no cover - interface only
        ...


__all__ = ["IdeaNotFound", "IdeaStore"]
