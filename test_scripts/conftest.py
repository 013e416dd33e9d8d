# Shared fixtures: sample ideas / hypotheses and an in-memory IdeaStore
from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pytest

from ideascore.schemas.hypothesis import HypothesisRecord, HypothesisStatus
from ideascore.schemas.idea import IdeaRecord, IdeaScoreUpdate


class InMemoryIdeaStore:
    """IdeaStore backed by dicts; records are replaced, never mutated."""

    def __init__(self, ideas: List[IdeaRecord], hypotheses: List[HypothesisRecord]):
        self.ideas: Dict[int, IdeaRecord] = {i.id: i for i in ideas}
        self.hypotheses = list(hypotheses)
        self.updates: List[tuple] = []

    def list_ideas(self) -> List[IdeaRecord]:
        return list(self.ideas.values())

    def get_idea(self, idea_id: int) -> Optional[IdeaRecord]:
        return self.ideas.get(idea_id)

    def list_hypotheses(self, idea_id: Optional[int] = None) -> List[HypothesisRecord]:
        if idea_id is None:
            return list(self.hypotheses)
        return [h for h in self.hypotheses if h.idea_id == idea_id]

    def update_idea_scores(self, idea_id: int, update: IdeaScoreUpdate) -> IdeaRecord:
        self.updates.append((idea_id, update))
        saved = self.ideas[idea_id].model_copy(update=update.model_dump())
        self.ideas[idea_id] = saved
        return saved


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_json_logging so caplog sees ideascore records."""
    logger = logging.getLogger("ideascore")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    yield


@pytest.fixture
def sample_ideas() -> List[IdeaRecord]:
    return [
        IdeaRecord(id=1, title="One-click checkout", impact_score=5, effort_score=1,
                   reach_estimate=1000, confidence_score=80, rice_score=4000),
        IdeaRecord(id=2, title="Rewrite billing", impact_score=5, effort_score=4,
                   reach_estimate=5000, confidence_score=50, rice_score=3125),
        IdeaRecord(id=3, title="Dark mode", impact_score=2, effort_score=2,
                   reach_estimate=300, confidence_score=90, rice_score=270),
        IdeaRecord(id=4, title="Blockchain loyalty", impact_score=1, effort_score=5,
                   reach_estimate=50, confidence_score=10, rice_score=1),
        IdeaRecord(id=5, title="Onboarding tour", impact_score=4),
    ]


@pytest.fixture
def sample_hypotheses() -> List[HypothesisRecord]:
    return [
        HypothesisRecord(id=10, idea_id=1, status=HypothesisStatus.VALIDATED),
        HypothesisRecord(id=11, idea_id=1, status=HypothesisStatus.VALIDATED),
        HypothesisRecord(id=12, idea_id=1, status=HypothesisStatus.INVALIDATED),
        HypothesisRecord(id=13, idea_id=1, status=HypothesisStatus.UNVALIDATED),
        HypothesisRecord(id=20, idea_id=2, status=HypothesisStatus.PARTIALLY_VALIDATED),
        HypothesisRecord(id=21, idea_id=2, status=HypothesisStatus.UNVALIDATED),
        HypothesisRecord(id=30, idea_id=3, status=HypothesisStatus.VALIDATED),
    ]


@pytest.fixture
def store(sample_ideas, sample_hypotheses) -> InMemoryIdeaStore:
    return InMemoryIdeaStore(sample_ideas, sample_hypotheses)
