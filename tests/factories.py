from datetime import datetime, timedelta, timezone

from utils.models import Submission

T0 = datetime(2025, 8, 5, 10, 0, tzinfo=timezone.utc)


def make_sub(id, team_id, level, rating=3, minutes=0, password="x"):
    return Submission(
        id=id,
        team_id=team_id,
        level=level,
        password=password,
        difficulty_rating=rating,
        created_at=T0 + timedelta(minutes=minutes),
    )
