# winway/desk_ticket/schemas.py
from enum import Enum

from pydantic import Field, field_validator

from winway.catalog.data import TICKET_TYPE_LABELS
from winway.records.schemas import CamelModel, Record


class TicketType(str, Enum):
    COMPLAINT = "complaint"
    SUGGESTION = "suggestion"
    COMPLIMENT = "compliment"

    @property
    def label(self) -> str:
        return TICKET_TYPE_LABELS[self.value]


class TicketCategory(str, Enum):
    STAFF_SERVICE = "Staff / Service"
    CLEANLINESS = "Cleanliness"
    MUSIC_SOUND = "Music / Sound"
    GAMES_SLOTS = "Games / Slots"
    FOOD_DRINKS = "Food & Drinks"
    OTHER = "Other"


class DeskTicketCreate(CamelModel):
    type: TicketType = TicketType.COMPLAINT
    category: TicketCategory = TicketCategory.STAFF_SERVICE
    title: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

    @field_validator("title", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class DeskTicket(Record):
    type: TicketType
    category: TicketCategory
    title: str
    message: str

    @property
    def kind(self) -> str:
        return self.type.value

    def search_fields(self) -> list[str | None]:
        return [self.title, self.message, self.category.value, self.type.label]
