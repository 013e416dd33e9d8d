from .quadrants import (
    Quadrant,
    QUADRANTS,
    Bucket,
    PriorityMatrix,
    classify_quadrant,
    classify_ideas,
)
from .ranking import RankBy, rank_ideas

__all__ = [
    "Quadrant",
    "QUADRANTS",
    "Bucket",
    "PriorityMatrix",
    "classify_quadrant",
    "classify_ideas",
    "RankBy",
    "rank_ideas",
]
