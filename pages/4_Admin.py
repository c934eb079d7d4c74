# pages/4_Admin.py
import streamlit as st
from config import TEST_TEAM_ID
from utils.db_pg import get_store
from utils.errors import TreasureError
from utils.levels import LEVEL_PASSWORDS
from utils.submissions import submit_solution
from utils.ui import require_admin, reset_service, setup_logging, show_error

st.set_page_config(page_title="Admin", page_icon="🛠️", layout="wide")


def setup_ui():
    st.subheader("Database Setup")
    try:
        store = get_store()
    except TreasureError as err:
        show_error(err)
        return
    c1, c2, c3 = st.columns(3)
    if c1.button("Create Table"):
        try:
            store.init_db()
            st.success("Table is ready.")
        except TreasureError as err:
            show_error(err)
    if c2.button("Test Connection"):
        try:
            st.success(f"Connected. {store.check_connection()} submissions in the table.")
        except TreasureError as err:
            show_error(err)
    if c3.button("Test Insert"):
        try:
            saved = submit_solution(store, TEST_TEAM_ID, LEVEL_PASSWORDS[1], 1)
            st.success(f"Inserted test submission #{saved.id} for team {TEST_TEAM_ID} (hidden from stats).")
        except TreasureError as err:
            show_error(err)


def reset_ui():
    st.subheader("Reset Event")
    try:
        service = reset_service()
        st.write(f"Submissions in database: **{service.submission_count()}**")
    except TreasureError as err:
        show_error(err)
        return

    with st.form("reset"):
        st.warning("This deletes every submission. It cannot be undone.")
        password = st.text_input("Admin password", type="password")
        confirmed = st.checkbox("I understand all submissions will be deleted")
        submitted = st.form_submit_button("🗑️ Delete All Submissions", type="primary")

    if submitted:
        if not confirmed:
            st.error("Please confirm the reset.")
            return
        with st.spinner("Deleting submissions..."):
            try:
                result = service.perform_reset(password)
            except TreasureError as err:
                show_error(err)
                return
        st.success(f"✅ {result.message}")


def main():
    setup_logging()
    st.title("🛠️ Admin")

    if not require_admin():
        st.stop()

    tabs = st.tabs(["Setup", "Reset"])
    with tabs[0]:
        setup_ui()
    with tabs[1]:
        reset_ui()


if __name__ == "__main__":
    main()
