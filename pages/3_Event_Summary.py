# pages/3_Event_Summary.py
import pandas as pd
import streamlit as st
from utils.report import build_html_report, branch_frame, report_filename, top_performers_frame
from utils.scoring import (
    category_counts,
    event_overview,
    format_number,
    leaderboard,
    level_frame,
)
from utils.ui import load_submissions, setup_logging

st.set_page_config(page_title="Event Summary", page_icon="📈", layout="wide")


def main():
    setup_logging()
    st.title("📈 Event Summary Analytics")

    submissions = load_submissions(ascending=True)
    if submissions is None:
        st.stop()

    overview = event_overview(submissions)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Total Teams", overview["total_teams"])
    c2.metric("Total Submissions", overview["total_submissions"])
    c3.metric("Highest Level", overview["highest_level"])
    c4.metric("Avg Rating", format_number(overview["average_rating"], 1, "/5") if submissions else "N/A")

    st.caption(f"Branches represented: {overview['branches']} of {overview['registered_branches']} registered")

    if not overview["total_teams"]:
        st.info("No submissions yet. Charts will appear once teams start submitting.")
        return

    stats = leaderboard(submissions)

    st.subheader("Level Progression")
    levels = level_frame(submissions).set_index("level")
    st.bar_chart(levels[["teams_reached", "submissions"]])
    st.line_chart(levels[["completion_rate"]])

    left, right = st.columns(2)
    with left:
        st.subheader("Branch-wise Performance")
        st.dataframe(branch_frame(submissions), use_container_width=True, hide_index=True)
    with right:
        st.subheader("Teams by Category")
        cats = category_counts(stats)
        st.bar_chart(pd.DataFrame({"teams": list(cats.values())}, index=list(cats.keys())))

    st.subheader("Top Performers")
    st.dataframe(top_performers_frame(submissions), use_container_width=True, hide_index=True)

    st.download_button(
        "📄 Download Report",
        build_html_report(submissions).encode("utf-8"),
        report_filename(),
        "text/html",
        type="primary",
    )
    st.caption("Open the downloaded report in a browser and print it to get a PDF.")


if __name__ == "__main__":
    main()
