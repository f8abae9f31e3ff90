# winway/my_night/schemas.py
from enum import Enum

from pydantic import BaseModel


class Mood(str, Enum):
    RELAXED = "relaxed"
    SOCIAL = "social"
    HIGH_ENERGY = "high_energy"


class Reminder(str, Enum):
    BREAKS = "breaks"
    WATER = "water"
    BUDGET = "budget"


class MyNightState(BaseModel):
    mood: Mood = Mood.RELAXED
    table: str = ""
    plan: list[str] = []
    reminders: list[Reminder] = []


class MyNightUpdate(BaseModel):
    mood: Mood | None = None
    table: str | None = None
    plan: list[str] | None = None
    reminders: list[Reminder] | None = None
