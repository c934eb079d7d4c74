# pages/2_Victory.py
import streamlit as st
from config import PODIUM_SIZE
from utils.scoring import format_number, leaderboard, podium
from utils.ui import load_submissions, require_admin, setup_logging

st.set_page_config(page_title="Victory", page_icon="🏆", layout="wide")

MEDALS = ["🥇", "🥈", "🥉"]


def ceremony(top):
    cols = st.columns(len(top))
    for i, (col, team) in enumerate(zip(cols, top)):
        with col:
            st.markdown(f"## {MEDALS[i] if i < len(MEDALS) else f'#{i + 1}'}")
            st.markdown(f"### {team.team_name}")
            st.caption(f"Team {team.team_id} · {team.branch}")
            if team.members:
                st.write(", ".join(team.members))
            st.metric("Level", team.max_level)
            st.write(f"Reached at {team.max_level_reached_at.strftime('%H:%M:%S')}")
            st.write(f"{team.submission_count} submissions · avg rating {format_number(team.average_rating, 1, '/5')}")


def main():
    setup_logging()
    st.title("🏆 Victory Ceremony")

    if not require_admin("victory_login"):
        st.stop()

    submissions = load_submissions(ascending=False)
    if submissions is None:
        st.stop()

    ranked = leaderboard(submissions)
    if not ranked:
        st.info("No submissions found. Teams need to complete challenges first.")
        return

    if st.button("🎉 Start Celebration", type="primary", use_container_width=True):
        st.balloons()
        st.session_state["celebrating"] = True

    if st.session_state.get("celebrating"):
        ceremony(podium(ranked, PODIUM_SIZE))


if __name__ == "__main__":
    main()
