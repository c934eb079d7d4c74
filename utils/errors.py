# utils/errors.py
"""
Error types raised by the submission store, the submit flow and the reset.

Every error carries a `user_message` that pages can show as-is with st.error().
"""

from __future__ import annotations

from typing import Optional


class TreasureError(Exception):
    user_message = "Something went wrong."

    def __init__(self, detail: str = "", user_message: Optional[str] = None):
        super().__init__(detail or user_message or self.user_message)
        self.detail = detail
        if user_message is not None:
            self.user_message = user_message


class ValidationError(TreasureError):
    """The submitted secret (or form input) is not acceptable. Nothing was stored."""
    user_message = "Invalid password! Make sure you entered the correct password."


class StoreUnavailable(TreasureError):
    """Table missing, database unreachable or credentials rejected."""
    user_message = (
        "Database not set up or unreachable. "
        "Run the setup on the Admin page or check DB_URL."
    )


class PermissionDenied(TreasureError):
    user_message = "Database permissions issue. Check the database role / RLS policies."


class ConstraintViolation(TreasureError):
    user_message = "Invalid data format. Please check your inputs."


class ResetIncomplete(TreasureError):
    user_message = "Reset did not finish: some submissions are still in the database."

    def __init__(self, remaining: int, detail: str = ""):
        super().__init__(detail or f"{remaining} submissions remain after reset")
        self.remaining = remaining
        self.user_message = f"Reset failed: {remaining} submissions still remain. Check database permissions."
