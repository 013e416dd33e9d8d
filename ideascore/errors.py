# ideascore_project/ideascore/errors.py

from __future__ import annotations

from typing import Any, Optional


class ScoringEngineError(ValueError):
    """Base class for contract violations detected by the scoring engine."""


class InvalidScoreInputs(ScoringEngineError):
    """Raised when a RICE input is missing, not an integer, or outside its range."""

    def __init__(self, field: str, value: Any, allowed: str):
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(f"Invalid RICE input {field}={value!r}; expected {allowed}")


class InvalidHypothesisStatus(ScoringEngineError):
    """Raised when a hypothesis carries a status outside HypothesisStatus."""

    def __init__(self, value: Any, hypothesis_id: Optional[Any] = None):
        self.value = value
        self.hypothesis_id = hypothesis_id
        where = f" on hypothesis {hypothesis_id}" if hypothesis_id is not None else ""
        super().__init__(f"Unrecognized hypothesis status {value!r}{where}")


__all__ = [
    "ScoringEngineError",
    "InvalidScoreInputs",
    "InvalidHypothesisStatus",
]
