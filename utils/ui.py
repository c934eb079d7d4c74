# utils/ui.py
# Streamlit helpers shared by the pages.
import logging
import os

import streamlit as st

from config import admin_code
from utils.db_pg import get_store
from utils.errors import TreasureError
from utils.reset import ResetService

logger = logging.getLogger(__name__)


def setup_logging():
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def require_admin(form_key: str = "admin_login") -> bool:
    """Shared-code gate for admin screens. Hides them; does not secure them."""
    if st.session_state.get("is_admin"):
        return True
    with st.form(form_key):
        code = st.text_input("Enter Admin Code", type="password")
        submitted = st.form_submit_button("Unlock")
        if submitted:
            expected = admin_code()
            if not expected:
                st.error("Admin code not configured. Set ENV var ADMIN_CODE or config.ADMIN_CODE.")
                return False
            if code == expected:
                st.session_state["is_admin"] = True
                st.success("Admin unlocked.")
                return True
            st.error("Incorrect admin code.")
            return False
    return False


def show_error(err: TreasureError):
    logger.warning("%s: %s", type(err).__name__, err)
    st.error(f"❌ {err.user_message}")


def load_submissions(ascending: bool):
    """Fetch all submissions, or show the error and return None."""
    try:
        return get_store().list_all(ascending=ascending)
    except TreasureError as err:
        show_error(err)
        return None


def reset_service() -> ResetService:
    return ResetService(get_store(), admin_code())
