# winway/storage/models.py
from sqlalchemy import Column, String, Text
from winway.core.database import Base

class StorageEntry(Base):
    """One JSON blob per storage key; the whole value is rewritten on save."""

    __tablename__ = "storage_entries"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
