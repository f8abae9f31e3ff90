# winway/catalog/services.py
from datetime import date

from winway.catalog import data
from winway.catalog.schemas import (
    DeskOptions,
    DressCode,
    Entertainment,
    Option,
    ServiceOptions,
    StaffMember,
    TodayDressCode,
    WeekDay,
)


def get_dress_codes() -> list[DressCode]:
    return [DressCode(**d) for d in data.DRESS_CODES.values()]

def get_dress_code(key: str) -> DressCode | None:
    raw = data.DRESS_CODES.get(key)
    return DressCode(**raw) if raw else None

def get_week() -> list[WeekDay]:
    return [WeekDay(**d) for d in data.WEEK]

def get_dress_code_for(day: date) -> TodayDressCode:
    # WEEK starts on Sunday, date.weekday() on Monday
    week_day = WeekDay(**data.WEEK[(day.weekday() + 1) % 7])
    return TodayDressCode(day=week_day, dress_code=get_dress_code(week_day.code_key))

def get_entertainments(kind: str | None = None) -> list[Entertainment]:
    items = data.ENTERTAINMENTS
    if kind and kind != "all":
        items = [e for e in items if e["type"] == kind]
    return [Entertainment(**e) for e in items]

def get_entertainment(entertainment_id: str) -> Entertainment | None:
    for e in data.ENTERTAINMENTS:
        if e["id"] == entertainment_id:
            return Entertainment(**e)
    return None

def get_staff(role: str | None = None, q: str | None = None) -> list[StaffMember]:
    members = data.STAFF_MEMBERS
    if role and role != "all":
        members = [m for m in members if m["role"] == role]
    needle = (q or "").strip().lower()
    if needle:
        members = [m for m in members if needle in m["name"].lower()]
    return [StaffMember(**m) for m in members]

def get_service_options() -> ServiceOptions:
    return ServiceOptions(
        staff_types=[Option(**s) for s in data.STAFF_TYPES],
        reasons=list(data.QUICK_REASONS),
        tables=list(data.TABLE_PRESETS),
    )

def get_desk_options() -> DeskOptions:
    return DeskOptions(
        types=[Option(key=t["key"], label=t["label"], desc=t["caption"]) for t in data.TICKET_TYPES],
        categories=list(data.TICKET_CATEGORIES),
    )
