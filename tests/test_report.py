from datetime import date, datetime, timezone

from tests.factories import make_sub
from utils.report import build_html_report, progression_frame, report_filename, top_performers_frame

GENERATED = datetime(2025, 8, 5, 18, 0, tzinfo=timezone.utc)


def test_report_filename():
    assert report_filename(date(2025, 8, 5)) == "treasure-in-shell-event-summary-2025-08-05.html"


def test_empty_report_has_no_nan():
    html = build_html_report([], generated_at=GENERATED)
    assert "<!DOCTYPE html>" in html
    assert "nan" not in html.lower()
    assert "Average difficulty rating: N/A" in html
    assert "No data yet." in html


def test_report_contents():
    subs = [
        make_sub(1, "101", 2, rating=4),
        make_sub(2, "102", 7, rating=2, minutes=5),
        make_sub(3, "999", 10),
    ]
    html = build_html_report(subs, generated_at=GENERATED)
    assert "101 - Sparkle" in html
    assert "102 - Brogrammers" in html
    assert "999" not in html
    assert "2025-08-05 18:00:00" in html
    assert "nan" not in html.lower()


def test_top_performers_ranked():
    subs = [make_sub(1, "101", 2, rating=4), make_sub(2, "102", 7, rating=2)]
    df = top_performers_frame(subs)
    assert list(df["Rank"]) == [1, 2]
    assert df.loc[0, "Team"] == "102 - Brogrammers"
    assert df.loc[1, "Avg Rating"] == "4.0/5"


def test_progression_frame_rates():
    df = progression_frame([make_sub(1, "101", 2), make_sub(2, "102", 1)])
    assert df.loc[0, "Completion Rate"] == "100.0%"
    assert df.loc[1, "Completion Rate"] == "50.0%"
    assert list(progression_frame([])["Completion Rate"].unique()) == ["N/A"]


def test_report_conclusion_highlights():
    subs = [
        make_sub(1, "101", 2, rating=4),
        make_sub(2, "102", 7, rating=2, minutes=5),
        make_sub(3, "999", 10),
    ]
    html = build_html_report(subs, generated_at=GENERATED)
    conclusion = html[html.index("Event Conclusion"):]
    assert "Key Highlights:" in conclusion
    assert "2 teams from" in conclusion
    assert "2 submissions in total" in conclusion
    assert "Teams reached up to Level 7" in conclusion
    assert "Average difficulty rating 3.0/5" in conclusion


def test_empty_report_conclusion():
    html = build_html_report([], generated_at=GENERATED)
    assert "No submissions were recorded for this event." in html
    assert "Key Highlights:" not in html
