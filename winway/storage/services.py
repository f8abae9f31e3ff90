# winway/storage/services.py
"""Local key/value persistence for record collections and single objects.

Every key holds one JSON blob. Reads fail soft (missing, corrupt or
wrongly-shaped data comes back empty) and writes report success as a bool
instead of raising, so a caller can proceed optimistically or react to the
failure signal.
"""
import json
import logging
from typing import Any, Iterable, TypeVar

from fastapi import Depends
from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from winway.core.config import USER_PROFILE_KEY
from winway.core.database import get_db
from winway.profile.schemas import Profile
from winway.storage.models import StorageEntry

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class RecordStore:
    """Whole-collection read-modify-write store keyed by name.

    There is no locking: two overlapping appends to the same key race and the
    later save wins.
    """

    def __init__(self, db: Session):
        self.db = db

    # -------- raw values --------

    def read(self, key: str, allow_text: bool = False) -> Any | None:
        """Decoded value under ``key``; with ``allow_text`` a non-JSON blob comes back as the raw string."""
        try:
            entry = self.db.get(StorageEntry, key)
        except SQLAlchemyError as exc:
            logger.warning("Failed to read %s: %s", key, exc)
            self.db.rollback()
            return None
        if entry is None:
            return None
        try:
            return json.loads(entry.value)
        except (TypeError, ValueError) as exc:
            if allow_text and isinstance(entry.value, str):
                return entry.value
            logger.warning("Corrupt blob under %s ignored: %s", key, exc)
            return None

    def write(self, key: str, value: Any) -> bool:
        try:
            blob = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            logger.error("Value for %s is not JSON serializable: %s", key, exc)
            return False
        try:
            entry = self.db.get(StorageEntry, key)
            if entry is None:
                self.db.add(StorageEntry(key=key, value=blob))
            else:
                entry.value = blob
            self.db.commit()
        except SQLAlchemyError:
            logger.exception("Failed to save %s", key)
            self.db.rollback()
            return False
        return True

    def remove(self, key: str) -> bool:
        try:
            entry = self.db.get(StorageEntry, key)
            if entry is not None:
                self.db.delete(entry)
                self.db.commit()
        except SQLAlchemyError:
            logger.exception("Failed to clear %s", key)
            self.db.rollback()
            return False
        return True

    # -------- collections --------

    def load(self, key: str) -> list:
        data = self.read(key)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning("Blob under %s is %s, not a list; treating as empty", key, type(data).__name__)
            return []
        return data

    def save(self, key: str, records: Iterable) -> bool:
        return self.write(key, list(records))

    def clear(self, key: str) -> bool:
        return self.remove(key)

    def append(self, key: str, record: dict) -> bool:
        records = self.load(key)
        records.append(record)
        return self.save(key, records)


def parse_records(raw: Iterable[Any], model: type[M]) -> list[M]:
    """Validate stored items, skipping the ones that don't fit ``model``."""
    parsed: list[M] = []
    for item in raw:
        if not isinstance(item, dict):
            continue
        try:
            parsed.append(model.model_validate(item))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid %s record %r (%d validation errors)",
                model.__name__,
                item.get("id"),
                exc.error_count(),
            )
    return parsed


def dump_records(records: Iterable[BaseModel]) -> list[dict]:
    return [r.model_dump(mode="json", by_alias=True) for r in records]


class ProfileStore:
    """Single-object variant: the stored profile is replaced on every save."""

    def __init__(self, store: RecordStore, key: str = USER_PROFILE_KEY):
        self.store = store
        self.key = key

    def load(self) -> Profile | None:
        data = self.store.read(self.key)
        if not isinstance(data, dict):
            return None
        try:
            return Profile.model_validate(data)
        except ValidationError as exc:
            logger.warning("Stored profile is invalid (%d validation errors)", exc.error_count())
            return None

    def save(self, profile: Profile) -> bool:
        return self.store.write(self.key, profile.model_dump(mode="json", by_alias=True))


def get_store(db: Session = Depends(get_db)) -> RecordStore:
    return RecordStore(db)
