# app.py
from datetime import datetime
import streamlit as st
from config import APP_TITLE, EVENT_SUBTITLE, RATING_MAX, RATING_MIN
from utils.db_pg import get_store
from utils.errors import TreasureError
from utils.levels import team_name, team_options
from utils.submissions import submit_solution
from utils.ui import setup_logging, show_error

st.set_page_config(page_title=APP_TITLE, page_icon="🐚", layout="centered")


def submission_form():
    with st.form("submission", clear_on_submit=True):
        team_id = st.selectbox(
            "Team",
            options=[""] + team_options(),
            format_func=lambda tid: "Select your team" if not tid else f"{tid} - {team_name(tid)}",
        )
        password = st.text_input("Level password", type="password")
        rating = st.select_slider(
            "How difficult was this level?",
            options=list(range(RATING_MIN, RATING_MAX + 1)),
            value=RATING_MIN,
            format_func=lambda n: "★" * n,
        )
        submitted = st.form_submit_button("Submit", type="primary", use_container_width=True)

    if submitted:
        try:
            saved = submit_solution(get_store(), team_id, password, rating)
        except TreasureError as err:
            show_error(err)
            return
        st.success(f"✅ Level {saved.level} completed successfully! 🎉")
        st.balloons()
        st.session_state["last_submission"] = {"level": saved.level, "time": datetime.now().strftime("%H:%M:%S")}

    last = st.session_state.get("last_submission")
    if last:
        st.info(f"Last accepted: Level {last['level']} at {last['time']}")


def main():
    setup_logging()
    try:
        get_store().init_db()
    except TreasureError as err:
        show_error(err)

    st.title(f"🐚 {APP_TITLE}")
    st.caption(EVENT_SUBTITLE)

    submission_form()

    st.divider()
    st.subheader("Tips")
    st.write(
        "- Each level of the shell puzzle reveals a password. Submit it here with your team number.\n"
        "- Passwords are case-sensitive. Copy them exactly.\n"
        "- The organisers' dashboard and summary pages are in the left sidebar."
    )


if __name__ == "__main__":
    main()
