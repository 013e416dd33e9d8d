# ideascore_project/ideascore/services/scoring/engines/__init__.py

from .rice import RiceScoringEngine, compute_rice_score

__all__ = ["RiceScoringEngine", "compute_rice_score"]
