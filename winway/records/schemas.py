# winway/records/schemas.py
from abc import abstractmethod
from datetime import date, datetime, timezone
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Stored and transferred with camelCase keys (createdAt, staffKey, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordStatus(str, Enum):
    SENT = "Sent"
    IN_PROGRESS = "In progress"
    CLOSED = "Closed"


class Record(CamelModel):
    id: int
    created_at: datetime
    status: RecordStatus = RecordStatus.SENT

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return value or RecordStatus.SENT

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    # pydantic's model metaclass is an ABCMeta, so Record itself can't be instantiated
    @property
    @abstractmethod
    def kind(self) -> str:
        """Value matched by the ``kind`` history filter (staff key, ticket type)."""

    def search_fields(self) -> list[str | None]:
        return []


class HistoryFilters(BaseModel):
    search: str | None = None
    kind: str | None = None
    category: str | None = None
    status: RecordStatus | None = None
    date_from: date | None = None
    date_to: date | None = None


R = TypeVar("R", bound=Record)


class HistoryPage(BaseModel, Generic[R]):
    items: list[R]
    matched: int
    # size of the unfiltered collection; 0 means nothing was ever submitted
    total: int


class SubmitResult(BaseModel, Generic[R]):
    record: R
    persisted: bool
    message: str = Field(..., min_length=1)
