# utils/scoring.py
"""
Team statistics and leaderboard ordering.

Everything here is a pure function over one fetched snapshot of submissions.
Nothing is cached between calls, so re-running on the same snapshot always
gives the same result.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence

import pandas as pd

from config import LEVEL_COUNT, PODIUM_SIZE, TEST_TEAM_ID
from utils.levels import team_name
from utils.models import Submission
from utils.teams import CATEGORY_ORDER, all_branches, branch_category, team_branch, team_members

NOT_AVAILABLE = "N/A"


@dataclass
class TeamStats:
    team_id: str
    max_level: int
    submission_count: int
    average_rating: float
    first_submission_time: datetime
    last_submission_time: datetime
    # Earliest submission at max_level; used to break leaderboard ties.
    max_level_reached_at: datetime

    @property
    def team_name(self) -> str:
        return team_name(self.team_id)

    @property
    def branch(self) -> str:
        return team_branch(self.team_id)

    @property
    def branch_category(self) -> str:
        return branch_category(self.branch)

    @property
    def members(self) -> List[str]:
        return team_members(self.team_id)

    @property
    def time_to_complete_minutes(self) -> float:
        delta = self.last_submission_time - self.first_submission_time
        return abs(delta.total_seconds()) / 60.0


# ----------------------------
# Numeric guards
# ----------------------------

def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or `default` when the result would not be finite."""
    if not denominator:
        return default
    value = numerator / denominator
    return value if math.isfinite(value) else default


def format_number(value: Optional[float], digits: int = 1, suffix: str = "") -> str:
    """Format for display; None, NaN and infinities render as N/A."""
    if value is None:
        return NOT_AVAILABLE
    try:
        number = float(value)
    except (TypeError, ValueError):
        return NOT_AVAILABLE
    if not math.isfinite(number):
        return NOT_AVAILABLE
    return f"{number:.{digits}f}{suffix}"


# ----------------------------
# Aggregation
# ----------------------------

def exclude_test_submissions(submissions: Iterable[Submission]) -> List[Submission]:
    return [s for s in submissions if s.team_id != TEST_TEAM_ID]


def aggregate_team_stats(submissions: Iterable[Submission]) -> List[TeamStats]:
    """
    Fold submissions into one TeamStats per team, in first-seen order.

    Every submission counts toward submission_count and the rating average,
    including repeats of levels the team already passed.
    last_submission_time is taken from the last record processed, so feed the
    snapshot in the order you want "last" to mean.
    """
    teams: Dict[str, TeamStats] = {}
    for sub in exclude_test_submissions(submissions):
        current = teams.get(sub.team_id)
        if current is None:
            teams[sub.team_id] = TeamStats(
                team_id=sub.team_id,
                max_level=sub.level,
                submission_count=1,
                average_rating=float(sub.difficulty_rating),
                first_submission_time=sub.created_at,
                last_submission_time=sub.created_at,
                max_level_reached_at=sub.created_at,
            )
            continue

        old_count = current.submission_count
        current.average_rating = (current.average_rating * old_count + sub.difficulty_rating) / (old_count + 1)
        current.submission_count = old_count + 1
        current.last_submission_time = sub.created_at
        if sub.level > current.max_level:
            current.max_level = sub.level
            current.max_level_reached_at = sub.created_at
        elif sub.level == current.max_level and sub.created_at < current.max_level_reached_at:
            current.max_level_reached_at = sub.created_at

    return list(teams.values())


def rank_teams(stats: Iterable[TeamStats]) -> List[TeamStats]:
    """
    Leaderboard order: highest level first; on equal level the team that
    reached it first; then team id so the order is total.
    """
    return sorted(stats, key=lambda t: (-t.max_level, t.max_level_reached_at, t.team_id))


def leaderboard(submissions: Iterable[Submission]) -> List[TeamStats]:
    return rank_teams(aggregate_team_stats(submissions))


def podium(ranked: Sequence[TeamStats], size: int = PODIUM_SIZE) -> List[TeamStats]:
    return list(ranked[:size])


# ----------------------------
# Level analytics
# ----------------------------

def _zero_levels() -> Dict[int, int]:
    return {level: 0 for level in range(1, LEVEL_COUNT + 1)}


def level_reached_counts(stats: Iterable[TeamStats]) -> Dict[int, int]:
    """Level -> number of teams whose max level is at least that level."""
    counts = _zero_levels()
    for team in stats:
        for level in range(1, min(team.max_level, LEVEL_COUNT) + 1):
            counts[level] += 1
    return counts


def level_submission_histogram(submissions: Iterable[Submission]) -> Dict[int, int]:
    """Level -> number of submissions at exactly that level."""
    counts = _zero_levels()
    for sub in exclude_test_submissions(submissions):
        if sub.level in counts:
            counts[sub.level] += 1
    return counts


def level_completion_rates(stats: Sequence[TeamStats]) -> Dict[int, float]:
    """Level -> percent of participating teams that reached it (0.0 with no teams)."""
    reached = level_reached_counts(stats)
    total = len(stats)
    return {level: safe_ratio(count * 100.0, total) for level, count in reached.items()}


def level_distribution(stats: Sequence[TeamStats]) -> List[Dict]:
    """Per level: teams that reached it and how many of those per branch."""
    rows = []
    for level in range(1, LEVEL_COUNT + 1):
        branches: Dict[str, int] = {}
        teams = 0
        for team in stats:
            if team.max_level >= level:
                teams += 1
                branches[team.branch] = branches.get(team.branch, 0) + 1
        rows.append({"level": level, "teams": teams, "branches": branches})
    return rows


# ----------------------------
# Branch analytics
# ----------------------------

def branch_stats(stats: Iterable[TeamStats]) -> List[Dict]:
    """Per branch: team count, mean max level, total submissions, category."""
    grouped: Dict[str, List[TeamStats]] = {}
    for team in stats:
        grouped.setdefault(team.branch, []).append(team)

    rows = []
    for branch, teams in grouped.items():
        rows.append({
            "branch": branch,
            "teams": len(teams),
            "avg_level": safe_ratio(sum(t.max_level for t in teams), len(teams)),
            "total_submissions": sum(t.submission_count for t in teams),
            "category": branch_category(branch),
        })
    rows.sort(key=lambda r: (-r["avg_level"], r["branch"]))
    return rows


def category_counts(stats: Iterable[TeamStats]) -> Dict[str, int]:
    counts = {category: 0 for category in CATEGORY_ORDER}
    for team in stats:
        counts[team.branch_category] = counts.get(team.branch_category, 0) + 1
    return counts


# ----------------------------
# Overview & drill-down
# ----------------------------

def event_overview(submissions: Sequence[Submission]) -> Dict:
    subs = exclude_test_submissions(submissions)
    stats = aggregate_team_stats(subs)
    return {
        "total_teams": len(stats),
        "total_submissions": len(subs),
        "highest_level": max((t.max_level for t in stats), default=0),
        "branches": len({t.branch for t in stats}),
        "registered_branches": len(all_branches()),
        "average_rating": safe_ratio(sum(s.difficulty_rating for s in subs), len(subs)),
    }


def team_detail(submissions: Iterable[Submission], team_id: str) -> Dict:
    """All submissions of one team, highest level first, with totals."""
    subs = [s for s in exclude_test_submissions(submissions) if s.team_id == team_id]
    subs.sort(key=lambda s: (-s.level, s.created_at))
    return {
        "team_id": team_id,
        "team_name": team_name(team_id),
        "branch": team_branch(team_id),
        "total_submissions": len(subs),
        "max_level": max((s.level for s in subs), default=0),
        "average_rating": safe_ratio(sum(s.difficulty_rating for s in subs), len(subs)),
        "submissions": subs,
    }


# ----------------------------
# DataFrames for display
# ----------------------------

LEADERBOARD_COLUMNS = [
    "rank", "team_id", "team_name", "branch", "max_level",
    "submissions", "avg_rating", "reached_max_at", "last_submission",
]


def leaderboard_frame(ranked: Sequence[TeamStats]) -> pd.DataFrame:
    """Ranked stats as a DataFrame; ranks are 1-based positions in `ranked`."""
    if not ranked:
        return pd.DataFrame(columns=LEADERBOARD_COLUMNS)
    lb = pd.DataFrame([
        {
            "rank": i,
            "team_id": t.team_id,
            "team_name": t.team_name,
            "branch": t.branch,
            "max_level": t.max_level,
            "submissions": t.submission_count,
            "avg_rating": round(t.average_rating, 1),
            "reached_max_at": t.max_level_reached_at,
            "last_submission": t.last_submission_time,
        }
        for i, t in enumerate(ranked, start=1)
    ])
    return lb[LEADERBOARD_COLUMNS]


def level_frame(submissions: Sequence[Submission]) -> pd.DataFrame:
    """Per-level table: submissions at the level, teams reached, completion %."""
    subs = exclude_test_submissions(submissions)
    stats = aggregate_team_stats(subs)
    histogram = level_submission_histogram(subs)
    reached = level_reached_counts(stats)
    rates = level_completion_rates(stats)
    df = pd.DataFrame({
        "level": list(histogram.keys()),
        "submissions": list(histogram.values()),
        "teams_reached": [reached[lvl] for lvl in histogram],
        "completion_rate": [rates[lvl] for lvl in histogram],
    })
    return df
