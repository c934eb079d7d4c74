# utils/models.py
"""
Typed submission record.

Rows coming back from the database (or the hosted API) are loosely shaped:
ids may arrive as strings, timestamps as ISO strings with or without an
offset, team ids as ints. `Submission.from_row` coerces a row into one shape
and raises ValueError for anything it cannot repair.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

import pandas as pd

from config import LEVEL_COUNT, RATING_MIN, RATING_MAX


def parse_timestamp(value: Any) -> datetime:
    """Return `value` as a timezone-aware UTC datetime."""
    if value is None or value == "":
        raise ValueError("missing timestamp")
    ts = pd.Timestamp(value)
    if pd.isna(ts):
        raise ValueError(f"invalid timestamp: {value!r}")
    dt = ts.to_pydatetime()
    if dt.tzinfo is None:
        # Naive values are stored as UTC
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _int_in_range(name: str, value: Any, low: int, high: int) -> int:
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        number = int(value)
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        number = int(value.strip())
    else:
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if not low <= number <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {number}")
    return number


@dataclass(frozen=True)
class Submission:
    id: int
    team_id: str
    level: int
    password: str
    difficulty_rating: int
    created_at: datetime

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Submission":
        team_id = row.get("team_id")
        if team_id is None or str(team_id).strip() == "":
            raise ValueError("team_id is missing")
        try:
            sub_id = int(row.get("id"))
        except (TypeError, ValueError):
            raise ValueError(f"invalid id: {row.get('id')!r}") from None
        return cls(
            id=sub_id,
            team_id=str(team_id).strip(),
            level=_int_in_range("level", row.get("level"), 1, LEVEL_COUNT),
            password=str(row.get("password") or ""),
            difficulty_rating=_int_in_range(
                "difficulty_rating", row.get("difficulty_rating"), RATING_MIN, RATING_MAX
            ),
            created_at=parse_timestamp(row.get("created_at")),
        )


def validate_level(level: Any) -> int:
    return _int_in_range("level", level, 1, LEVEL_COUNT)


def validate_rating(rating: Any) -> int:
    return _int_in_range("difficulty_rating", rating, RATING_MIN, RATING_MAX)
