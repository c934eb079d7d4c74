# utils/submissions.py
import logging
from typing import Iterable, Optional

from config import RATING_MAX, RATING_MIN
from utils.errors import ConstraintViolation, ValidationError
from utils.levels import resolve_level
from utils.models import Submission, validate_rating

logger = logging.getLogger(__name__)


def submit_solution(store, team_id: str, password: str, difficulty_rating: int) -> Submission:
    """
    Record that `team_id` found the secret for a level.

    The level comes from the secret, never from the form. An unknown secret
    raises ValidationError and nothing is written.
    """
    team_id = (team_id or "").strip()
    if not team_id or not password or not difficulty_rating:
        raise ValidationError("missing field", user_message="Please fill in all fields.")

    try:
        difficulty_rating = validate_rating(difficulty_rating)
    except ValueError as exc:
        raise ConstraintViolation(
            str(exc),
            user_message=f"Difficulty rating must be between {RATING_MIN} and {RATING_MAX}.",
        ) from None

    level = resolve_level(password)
    if level is None:
        logger.info("Rejected submission from team %s: password matches no level", team_id)
        raise ValidationError("password matches no level")

    saved = store.insert(team_id=team_id, level=level, password=password, difficulty_rating=difficulty_rating)
    logger.info("Team %s completed level %d (submission %d)", team_id, level, saved.id)
    return saved


def newest_submission_since(submissions: Iterable[Submission], last_seen_id: int) -> Optional[Submission]:
    """The newest submission with an id above `last_seen_id`, if any."""
    newer = [s for s in submissions if s.id > last_seen_id]
    return max(newer, key=lambda s: s.id, default=None)


def latest_id(submissions: Iterable[Submission]) -> int:
    return max((s.id for s in submissions), default=0)
