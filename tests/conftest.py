import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from utils.db_pg import SubmissionStore


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    yield eng
    eng.dispose()


@pytest.fixture
def store(engine):
    s = SubmissionStore(engine)
    s.init_db()
    return s
