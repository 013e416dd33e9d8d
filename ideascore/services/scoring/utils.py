# ideascore_project/ideascore/services/scoring/utils.py

from __future__ import annotations

from typing import Any

from ideascore.errors import InvalidScoreInputs


def round_half_up(numerator: int, denominator: int) -> int:
    """Round numerator / denominator to the nearest integer, ties upward.

    Works on exact integers so x.5 boundaries are never blurred by float
    error. Both operands must be non-negative and denominator > 0; for
    non-negative values half-up is the same as ties-away-from-zero.
    """
    if denominator <= 0:
        raise ZeroDivisionError("round_half_up requires a positive denominator")
    return (2 * numerator + denominator) // (2 * denominator)


def percentage(part: int, total: int) -> int:
    """Integer percentage of part / total; 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(100 * part, total)


def require_int_in_range(field: str, value: Any, min_value: int, max_value: int | None = None) -> int:
    """Return value if it is an int within [min_value, max_value], else raise.

    bool is rejected even though it subclasses int. max_value=None means no
    upper bound.
    """
    allowed = f"integer >= {min_value}" if max_value is None else f"integer in [{min_value}, {max_value}]"
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidScoreInputs(field, value, allowed)
    if value < min_value or (max_value is not None and value > max_value):
        raise InvalidScoreInputs(field, value, allowed)
    return value


__all__ = ["round_half_up", "percentage", "require_int_in_range"]
