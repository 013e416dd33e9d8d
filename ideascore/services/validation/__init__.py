from .progress import (
    ValidationHealth,
    StatusCounts,
    IdeaProgress,
    OverallProgress,
    ValidationProgress,
    count_statuses,
    compute_idea_progress,
    compute_overall_progress,
    compute_validation_progress,
)

__all__ = [
    "ValidationHealth",
    "StatusCounts",
    "IdeaProgress",
    "OverallProgress",
    "ValidationProgress",
    "count_statuses",
    "compute_idea_progress",
    "compute_overall_progress",
    "compute_validation_progress",
]
