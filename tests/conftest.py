# tests/conftest.py
import os
import tempfile

# must be set before winway.core.database builds its engine
_db_dir = tempfile.mkdtemp(prefix="winway-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_db_dir, 'winway.db')}"
os.environ.setdefault("TIMEZONE", "UTC")

import pytest
from sqlalchemy.exc import SQLAlchemyError

from winway.core.database import SessionLocal, init_db
from winway.storage.models import StorageEntry
from winway.storage.services import RecordStore

init_db()


@pytest.fixture(autouse=True)
def clean_storage():
    db = SessionLocal()
    try:
        db.query(StorageEntry).delete()
        db.commit()
    finally:
        db.close()
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return RecordStore(db)


class BrokenSession:
    """Session stand-in whose every query fails, as with a locked or unreadable database."""

    def __init__(self):
        self.rollbacks = 0

    def get(self, *args, **kwargs):
        raise SQLAlchemyError("disk I/O error")

    def rollback(self):
        self.rollbacks += 1


@pytest.fixture
def broken_session():
    return BrokenSession()


@pytest.fixture
def broken_store(broken_session):
    return RecordStore(broken_session)
