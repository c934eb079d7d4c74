# utils/report.py
"""
Downloadable HTML event-summary report.

Tables are rendered with pandas (values are HTML-escaped). Every average and
percentage goes through format_number, so an empty event prints N/A or 0.0
instead of nan/inf.
"""

from datetime import date, datetime, timezone
from html import escape
from typing import Optional, Sequence

import pandas as pd

from config import APP_TITLE, ORGANIZER, REPORT_TOP_N
from utils.models import Submission
from utils.scoring import (
    branch_stats,
    event_overview,
    exclude_test_submissions,
    format_number,
    leaderboard,
    level_distribution,
    level_completion_rates,
)

_STYLE = """
body { font-family: 'Courier New', monospace; margin: 20px; background: #0a0a0a; color: #00ff00; }
.header { text-align: center; border-bottom: 2px solid #00ff00; padding-bottom: 20px; margin-bottom: 30px; }
.section { margin-bottom: 30px; }
.stats-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 20px; }
.stat-card { border: 1px solid #00ff00; padding: 15px; text-align: center; }
table { width: 100%; border-collapse: collapse; margin-top: 10px; }
th, td { border: 1px solid #00ff00; padding: 8px; text-align: left; }
th { background-color: #003300; }
@media print { body { background: #fff; color: #000; } th, td, .stat-card { border-color: #000; } th { background: #eee; } }
"""


def report_filename(day: Optional[date] = None) -> str:
    day = day or datetime.now(timezone.utc).date()
    return f"treasure-in-shell-event-summary-{day.isoformat()}.html"


def _table(df: pd.DataFrame) -> str:
    if df.empty:
        return "<p><em>No data yet.</em></p>"
    return df.to_html(index=False, escape=True, border=0)


def top_performers_frame(submissions: Sequence[Submission], top_n: int = REPORT_TOP_N) -> pd.DataFrame:
    rows = [
        {
            "Rank": i,
            "Team": f"{t.team_id} - {t.team_name}",
            "Branch": t.branch,
            "Max Level": t.max_level,
            "Submissions": t.submission_count,
            "Avg Rating": format_number(t.average_rating, 1, "/5"),
        }
        for i, t in enumerate(leaderboard(submissions)[:top_n], start=1)
    ]
    return pd.DataFrame(rows)


def branch_frame(submissions: Sequence[Submission]) -> pd.DataFrame:
    rows = [
        {
            "Branch": b["branch"],
            "Teams": b["teams"],
            "Avg Level": format_number(b["avg_level"]),
            "Total Submissions": b["total_submissions"],
            "Category": b["category"],
        }
        for b in branch_stats(leaderboard(submissions))
    ]
    return pd.DataFrame(rows)


def progression_frame(submissions: Sequence[Submission]) -> pd.DataFrame:
    stats = leaderboard(submissions)
    rates = level_completion_rates(stats)
    rows = [
        {
            "Level": f"Level {row['level']}",
            "Teams Reached": row["teams"],
            "Completion Rate": format_number(rates[row["level"]], 1, "%") if stats else "N/A",
        }
        for row in level_distribution(stats)
    ]
    return pd.DataFrame(rows)


def conclusion_html(overview: dict) -> str:
    """Closing summary and highlights, from event_overview() figures."""
    if not overview["total_teams"]:
        return "<p>No submissions were recorded for this event.</p>"

    teams = overview["total_teams"]
    highlights = [
        f"{teams} team{'s' if teams != 1 else ''} from {overview['branches']} of "
        f"{overview['registered_branches']} registered branches took part",
        f"{overview['total_submissions']} submissions in total",
        f"Teams reached up to Level {overview['highest_level']}",
        f"Average difficulty rating {format_number(overview['average_rating'], 1, '/5')}",
    ]
    items = "\n".join(f"    <li>{escape(h)}</li>" for h in highlights)
    return (
        f"<p>{escape(APP_TITLE)} brought together {teams} team{'s' if teams != 1 else ''} "
        "working through the terminal puzzle.</p>\n"
        f"  <h3>Key Highlights:</h3>\n  <ul>\n{items}\n  </ul>"
    )


def build_html_report(submissions: Sequence[Submission], generated_at: Optional[datetime] = None) -> str:
    subs = exclude_test_submissions(submissions)
    generated_at = generated_at or datetime.now(timezone.utc)
    overview = event_overview(subs)

    cards = [
        (overview["total_teams"], "Total Teams Participated"),
        (overview["total_submissions"], "Total Submissions"),
        (overview["highest_level"], "Highest Level Reached"),
        (overview["branches"], "Different Branches"),
    ]
    cards_html = "\n".join(
        f'<div class="stat-card"><h3>{value}</h3><p>{escape(label)}</p></div>' for value, label in cards
    )

    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(APP_TITLE)} - Event Summary Report</title>
<style>{_STYLE}</style>
</head>
<body>
<div class="header">
  <h1>{escape(APP_TITLE.upper())}</h1>
  <h2>Event Summary Report</h2>
  <p>{escape(ORGANIZER)}</p>
  <p>Generated on: {generated_at.strftime("%Y-%m-%d %H:%M:%S %Z")}</p>
</div>

<div class="section">
  <h2>Event Overview</h2>
  <div class="stats-grid">
{cards_html}
  </div>
  <p>Average difficulty rating: {format_number(overview["average_rating"], 1, "/5") if subs else "N/A"}</p>
</div>

<div class="section">
  <h2>Top {REPORT_TOP_N} Performers</h2>
  {_table(top_performers_frame(subs))}
</div>

<div class="section">
  <h2>Branch-wise Performance</h2>
  {_table(branch_frame(subs))}
</div>

<div class="section">
  <h2>Level Progression</h2>
  {_table(progression_frame(subs))}
</div>

<div class="section">
  <h2>Event Conclusion</h2>
  {conclusion_html(overview)}
</div>

<footer style="text-align: center; margin-top: 50px; padding-top: 20px; border-top: 1px solid #00ff00;">
  <p>Generated by the {escape(APP_TITLE)} event system</p>
</footer>
</body>
</html>
"""
