# utils/reset.py
"""
Administrative reset: delete every submission.

The hosted database may reject some predicate forms (row-level policies,
missing privileges), so several delete strategies are tried in order. No
single call's success is trusted: the row count is checked afterwards, and a
non-zero count is reported as ResetIncomplete.

The admin code is a shared string compared in-process. It keeps casual
visitors away from the button; it is not an access control boundary.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from utils.errors import ResetIncomplete, TreasureError, ValidationError

logger = logging.getLogger(__name__)

IMPOSSIBLE_ID = -999999
BATCH_SIZE = 100


@dataclass
class ResetResult:
    deleted_count: int
    strategy: Optional[str]
    duration_s: float

    @property
    def message(self) -> str:
        if self.deleted_count == 0 and self.strategy is None:
            return "Database is already empty."
        return f"Successfully deleted {self.deleted_count} submissions."


def _delete_gte(store) -> None:
    store.delete_where("id", "gte", 0)


def _delete_neq(store) -> None:
    store.delete_where("id", "neq", IMPOSSIBLE_ID)


def _truncate(store) -> None:
    store.truncate()


def _delete_in_batches(store) -> None:
    ids = store.list_ids()
    for start in range(0, len(ids), BATCH_SIZE):
        store.delete_where("id", "in", ids[start:start + BATCH_SIZE])


DEFAULT_STRATEGIES: List[Tuple[str, Callable]] = [
    ("id >= 0", _delete_gte),
    ("id != impossible", _delete_neq),
    ("truncate", _truncate),
    ("batched id in (...)", _delete_in_batches),
]


class ResetService:
    def __init__(self, store, admin_code: Optional[str], strategies=None):
        self.store = store
        self.admin_code = admin_code
        self.strategies = list(strategies or DEFAULT_STRATEGIES)

    def verify_password(self, password: str) -> bool:
        return bool(self.admin_code) and password == self.admin_code

    def submission_count(self) -> int:
        return self.store.count()

    def delete_all_submissions(self) -> ResetResult:
        """Delete every row or raise ResetIncomplete with the number left."""
        started = time.monotonic()
        initial = self.store.count()
        logger.info("Starting reset, %d submissions to delete", initial)
        if initial == 0:
            return ResetResult(deleted_count=0, strategy=None, duration_s=0.0)

        used = None
        for name, strategy in self.strategies:
            logger.info("Trying delete strategy: %s", name)
            try:
                strategy(self.store)
            except TreasureError as exc:
                logger.warning("Delete strategy %s failed: %s", name, exc)
                continue
            remaining = self.store.count()
            if remaining == 0:
                used = name
                break
            logger.warning("Delete strategy %s left %d submissions", name, remaining)

        remaining = self.store.count()
        if remaining != 0:
            logger.error("Reset incomplete: %d of %d submissions remain", remaining, initial)
            raise ResetIncomplete(remaining)

        duration = time.monotonic() - started
        logger.info("Reset completed in %.2fs using %s", duration, used)
        return ResetResult(deleted_count=initial, strategy=used, duration_s=duration)

    def perform_reset(self, password: str) -> ResetResult:
        if not self.verify_password(password):
            raise ValidationError("wrong admin code", user_message="Incorrect admin password!")
        return self.delete_all_submissions()
