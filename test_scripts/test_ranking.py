# Tests for the prioritization board ordering
from __future__ import annotations

from ideascore.schemas.idea import IdeaRecord, IdeaStatus
from ideascore.services.prioritization import RankBy, rank_ideas


def _ideas():
    return [
        IdeaRecord(id=1, title="beta", status=IdeaStatus.NEW, rice_score=50, impact_score=2, effort_score=5),
        IdeaRecord(id=2, title="Alpha", status=IdeaStatus.PRIORITIZED, rice_score=900, impact_score=5, effort_score=1),
        IdeaRecord(id=3, title="gamma", status=IdeaStatus.NEW),
        IdeaRecord(id=4, title="delta", status=IdeaStatus.NEW, rice_score=50, impact_score=4, effort_score=3),
    ]


def test_default_is_rice_descending_with_missing_as_zero():
    assert [i.id for i in rank_ideas(_ideas())] == [2, 1, 4, 3]


def test_ascending_and_other_keys():
    assert [i.id for i in rank_ideas(_ideas(), RankBy.RICE_SCORE, descending=False)] == [3, 1, 4, 2]
    assert [i.id for i in rank_ideas(_ideas(), RankBy.IMPACT_SCORE)] == [2, 4, 1, 3]
    assert [i.id for i in rank_ideas(_ideas(), RankBy.EFFORT_SCORE, descending=False)] == [3, 2, 4, 1]


def test_title_sort_ignores_case():
    assert [i.title for i in rank_ideas(_ideas(), RankBy.TITLE, descending=False)] == ["Alpha", "beta", "delta", "gamma"]
    assert [i.title for i in rank_ideas(_ideas(), "title")] == ["gamma", "delta", "beta", "Alpha"]


def test_status_filter():
    ranked = rank_ideas(_ideas(), status=IdeaStatus.NEW)
    assert [i.id for i in ranked] == [1, 4, 3]
    assert rank_ideas(_ideas(), status=IdeaStatus.REJECTED) == []


def test_input_not_reordered():
    ideas = _ideas()
    rank_ideas(ideas, RankBy.TITLE)
    assert [i.id for i in ideas] == [1, 2, 3, 4]
