# ideascore_project/ideascore/schemas/hypothesis.py

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ideascore.errors import InvalidHypothesisStatus


class HypothesisStatus(str, Enum):
    """Validation outcome of a hypothesis. Values are the stored strings."""
    UNVALIDATED = "Unvalidated"
    PARTIALLY_VALIDATED = "Partially Validated"
    VALIDATED = "Validated"
    INVALIDATED = "Invalidated"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]

    @classmethod
    def parse(cls, value: Any, hypothesis_id: Optional[Any] = None) -> "HypothesisStatus":
        """Coerce a stored value into a HypothesisStatus.

        Accepts members, stored values ("Partially Validated") and the exact
        member names in CamelCase ("PartiallyValidated") or UPPER_SNAKE
        ("PARTIALLY_VALIDATED"). Matching is case-sensitive; display labels
        such as "In Progress" are output only and are rejected.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value in _ALIASES:
            return _ALIASES[value]
        raise InvalidHypothesisStatus(value, hypothesis_id=hypothesis_id)


STATUS_LABELS = {
    HypothesisStatus.UNVALIDATED: "Unvalidated",
    HypothesisStatus.PARTIALLY_VALIDATED: "In Progress",
    HypothesisStatus.VALIDATED: "Validated",
    HypothesisStatus.INVALIDATED: "Invalidated",
}

_ALIASES = {}
for _member in HypothesisStatus:
    _ALIASES[_member.value] = _member
    _ALIASES[_member.name] = _member
    _ALIASES["".join(part.capitalize() for part in _member.name.split("_"))] = _member


class HypothesisRecord(BaseModel):
    """Read-only snapshot of a hypothesis attached to an idea."""
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    idea_id: int
    status: HypothesisStatus = HypothesisStatus.UNVALIDATED
    statement: str = ""
    results: Optional[str] = None


__all__ = ["HypothesisStatus", "HypothesisRecord", "STATUS_LABELS"]
