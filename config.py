# config.py
import os

# --- IMPORTANT: EDIT THESE FOR YOUR EVENT ---
APP_TITLE = "Treasure in the Shell"
EVENT_SUBTITLE = "A GDG EVENT"
ORGANIZER = "Google Developer Groups • IET DAVV"

# Puzzle shape
LEVEL_COUNT = 10
RATING_MIN = 1
RATING_MAX = 5

# Registered team ids are numeric strings in this range
TEAM_ID_MIN = 101
TEAM_ID_MAX = 200

# Reserved team id used by the setup checker's test inserts. Never shown in stats.
TEST_TEAM_ID = "999"

# Dashboard refresh cadence (seconds). The app polls; there is no push channel.
POLL_INTERVAL_S = 3

PODIUM_SIZE = 3
REPORT_TOP_N = 10

SUBMISSIONS_TABLE = "submissions"

# Used when DB_URL is not configured (local development)
LOCAL_DB_URL = "sqlite:///treasure.db"

# Shared admin code. Prefer to set via environment/Secrets. Fallback can be set here (string).
# This only hides admin screens from casual visitors; it is not authentication.
ADMIN_CODE = None


def get_secret(key: str, default=None):
    """Look a value up in Streamlit secrets, then the environment."""
    try:
        import streamlit as st
        return st.secrets.get(key, os.getenv(key, default))
    except Exception:
        # st.secrets raises when no secrets.toml exists
        return os.getenv(key, default)


def admin_code():
    """Return the configured admin code, or None when none is set."""
    return get_secret("ADMIN_CODE") or ADMIN_CODE
