# winway/service_request/schemas.py
from enum import Enum

from pydantic import Field, field_validator

from winway.catalog.data import STAFF_LABELS
from winway.records.schemas import CamelModel, Record


class StaffKey(str, Enum):
    WAITER = "waiter"
    TECHNICIAN = "technician"
    CLEANER = "cleaner"
    SECURITY = "security"
    HOST = "host"

    @property
    def label(self) -> str:
        return STAFF_LABELS.get(self.value, "Staff")


class ServiceRequestCreate(CamelModel):
    staff_key: StaffKey
    table: str = Field(..., min_length=1)
    reason: str | None = None
    comment: str | None = None

    @field_validator("table")
    @classmethod
    def table_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("table must not be blank")
        return value

    @field_validator("reason", "comment")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class ServiceRequest(Record):
    staff_key: StaffKey
    table: str
    reason: str | None = None
    comment: str | None = None
    internal_id: str | None = None

    @property
    def kind(self) -> str:
        return self.staff_key.value

    def search_fields(self) -> list[str | None]:
        return [self.table, self.reason, self.comment, self.staff_key.label, self.internal_id]
