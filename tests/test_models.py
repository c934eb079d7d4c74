from datetime import datetime, timezone

import pytest

from utils.models import Submission, parse_timestamp


def row(**overrides):
    base = {
        "id": 7,
        "team_id": "101",
        "level": 3,
        "password": "secret",
        "difficulty_rating": 4,
        "created_at": "2025-08-05T10:00:00+00:00",
    }
    base.update(overrides)
    return base


def test_from_row_coerces_loose_types():
    sub = Submission.from_row(row(id="7", team_id=101, level="3", difficulty_rating=4.0))
    assert sub.id == 7
    assert sub.team_id == "101"
    assert sub.level == 3
    assert sub.difficulty_rating == 4
    assert sub.created_at == datetime(2025, 8, 5, 10, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize("overrides", [
    {"level": 11},
    {"level": 0},
    {"level": "three"},
    {"level": True},
    {"difficulty_rating": 6},
    {"difficulty_rating": None},
    {"team_id": ""},
    {"team_id": None},
    {"id": None},
    {"created_at": None},
    {"created_at": "not a date"},
])
def test_from_row_rejects_malformed(overrides):
    with pytest.raises(ValueError):
        Submission.from_row(row(**overrides))


def test_parse_timestamp_variants():
    expected = datetime(2025, 8, 5, 10, 0, tzinfo=timezone.utc)
    assert parse_timestamp("2025-08-05T10:00:00Z") == expected
    assert parse_timestamp("2025-08-05 10:00:00") == expected
    assert parse_timestamp("2025-08-05T15:30:00+05:30") == expected
    assert parse_timestamp(datetime(2025, 8, 5, 10, 0)) == expected
