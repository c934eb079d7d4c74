# pages/1_Dashboard.py
from datetime import datetime
import pandas as pd
import streamlit as st
from config import POLL_INTERVAL_S
from utils.levels import team_name
from utils.scoring import (
    format_number,
    leaderboard,
    leaderboard_frame,
    level_submission_histogram,
    team_detail,
)
from utils.submissions import latest_id, newest_submission_since
from utils.ui import load_submissions, require_admin, setup_logging

st.set_page_config(page_title="Dashboard", page_icon="📊", layout="wide")


def announce_new(submissions):
    last_seen = st.session_state.get("last_submission_id")
    if last_seen is not None:
        new = newest_submission_since(submissions, last_seen)
        if new is not None:
            st.toast(f"🎉 New submission from Team {new.team_id} - Level {new.level}!")
    st.session_state["last_submission_id"] = latest_id(submissions)


def team_drilldown(submissions, ranked):
    st.subheader("Team Details")
    options = [t.team_id for t in ranked]
    if not options:
        return
    selected = st.selectbox(
        "Team", options, format_func=lambda tid: f"{tid} - {team_name(tid)}", key="drilldown_team"
    )
    detail = team_detail(submissions, selected)
    c1, c2, c3 = st.columns(3)
    c1.metric("Max Level", detail["max_level"])
    c2.metric("Submissions", detail["total_submissions"])
    c3.metric("Avg Rating", format_number(detail["average_rating"], 1, "/5"))
    st.dataframe(
        pd.DataFrame([
            {"level": s.level, "rating": s.difficulty_rating, "time": s.created_at, "password": s.password}
            for s in detail["submissions"]
        ]),
        use_container_width=True,
        hide_index=True,
    )


@st.fragment(run_every=POLL_INTERVAL_S)
def live_board():
    submissions = load_submissions(ascending=False)
    if submissions is None:
        return
    announce_new(submissions)

    ranked = leaderboard(submissions)
    st.caption(f"Last update: {datetime.now().strftime('%H:%M:%S')} · refreshes every {POLL_INTERVAL_S}s")

    if not ranked:
        st.info("No submissions yet. Teams will appear here as they complete levels.")
        return

    c1, c2, c3 = st.columns(3)
    c1.metric("Teams", len(ranked))
    c2.metric("Submissions", sum(t.submission_count for t in ranked))
    c3.metric("Highest Level", ranked[0].max_level)

    lb = leaderboard_frame(ranked)
    st.subheader("Leaderboard")
    st.dataframe(lb, use_container_width=True, hide_index=True)

    st.subheader("Submissions per Level")
    hist = level_submission_histogram(submissions)
    st.bar_chart(pd.DataFrame({"submissions": list(hist.values())}, index=list(hist.keys())))

    team_drilldown(submissions, ranked)

    csv = lb.to_csv(index=False).encode("utf-8")
    st.download_button("Download Leaderboard (CSV)", csv, "leaderboard.csv", "text/csv")


def main():
    setup_logging()
    st.title("📊 Live Dashboard")

    if not require_admin():
        st.stop()

    live_board()


if __name__ == "__main__":
    main()
