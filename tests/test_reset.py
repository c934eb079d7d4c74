import pytest

from utils.errors import ResetIncomplete, StoreUnavailable, ValidationError
from utils.reset import DEFAULT_STRATEGIES, ResetService


class FakeStore:
    """In-memory store; `keep_every` makes deletes leave some rows behind."""

    def __init__(self, n=0, keep_every=None, failing_ops=()):
        self.ids = list(range(1, n + 1))
        self.keep_every = keep_every
        self.failing_ops = set(failing_ops)
        self.calls = []

    def count(self):
        return len(self.ids)

    def list_ids(self):
        return list(self.ids)

    def _remove(self, matched):
        doomed = [i for i in matched if not (self.keep_every and i % self.keep_every == 0)]
        self.ids = [i for i in self.ids if i not in doomed]
        return len(doomed)

    def delete_where(self, column, op, value):
        self.calls.append(op)
        if op in self.failing_ops:
            raise StoreUnavailable(f"{op} rejected")
        if op == "gte":
            return self._remove([i for i in self.ids if i >= value])
        if op == "neq":
            return self._remove([i for i in self.ids if i != value])
        return self._remove([i for i in self.ids if i in set(value)])

    def truncate(self):
        self.calls.append("truncate")
        raise StoreUnavailable("truncate rejected")


def test_first_strategy_succeeds():
    store = FakeStore(5)
    result = ResetService(store, "code").delete_all_submissions()
    assert result.deleted_count == 5
    assert result.strategy == DEFAULT_STRATEGIES[0][0]
    assert store.calls == ["gte"]


def test_falls_through_failing_strategies():
    store = FakeStore(250, failing_ops={"gte", "neq"})
    result = ResetService(store, "code").delete_all_submissions()
    assert store.count() == 0
    assert result.strategy == DEFAULT_STRATEGIES[3][0]
    assert store.calls[:3] == ["gte", "neq", "truncate"]
    assert store.calls[3:] == ["in", "in", "in"]


def test_partial_delete_is_reported_incomplete():
    store = FakeStore(10, keep_every=3)
    with pytest.raises(ResetIncomplete) as info:
        ResetService(store, "code").delete_all_submissions()
    assert info.value.remaining == 3


def test_all_strategies_failing_is_incomplete():
    store = FakeStore(4, failing_ops={"gte", "neq", "in"})
    with pytest.raises(ResetIncomplete) as info:
        ResetService(store, "code").delete_all_submissions()
    assert info.value.remaining == 4


def test_empty_table_is_success():
    store = FakeStore(0)
    result = ResetService(store, "code").perform_reset("code")
    assert result.deleted_count == 0
    assert result.message == "Database is already empty."
    assert store.calls == []


def test_wrong_password_deletes_nothing():
    store = FakeStore(3)
    with pytest.raises(ValidationError):
        ResetService(store, "code").perform_reset("Code")
    assert store.count() == 3


def test_unconfigured_code_never_verifies():
    service = ResetService(FakeStore(1), None)
    assert not service.verify_password("")
    assert not service.verify_password(None)


def test_reset_against_sqlite_store(store):
    for level in (1, 2, 3):
        store.insert(team_id="101", level=level, password="p", difficulty_rating=2)
    result = ResetService(store, "code").perform_reset("code")
    assert result.deleted_count == 3
    assert store.count() == 0
