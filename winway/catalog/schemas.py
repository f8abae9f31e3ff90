# winway/catalog/schemas.py
from pydantic import BaseModel


class DressCode(BaseModel):
    key: str
    title: str
    short_label: str
    subtitle: str
    hours: str
    description: str
    allowed: list[str]
    not_allowed: list[str]
    tips: list[str]


class WeekDay(BaseModel):
    id: str
    label: str
    full: str
    code_key: str


class TodayDressCode(BaseModel):
    day: WeekDay
    dress_code: DressCode


class Entertainment(BaseModel):
    id: str
    title: str
    type: str
    type_label: str
    tag: str
    time: str
    min_bet: str | None = None
    is_new: bool = False
    is_tonight: bool = False
    description: str
    tips: list[str] = []


class StaffMember(BaseModel):
    id: int
    name: str
    years: int
    role: str
    rating: int
    schedule: list[bool]
    specialties: list[str]
    languages: list[str]
    shift: str


class Option(BaseModel):
    key: str
    label: str
    desc: str | None = None


class ServiceOptions(BaseModel):
    staff_types: list[Option]
    reasons: list[str]
    tables: list[str]


class DeskOptions(BaseModel):
    types: list[Option]
    categories: list[str]
