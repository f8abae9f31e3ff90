# winway/my_night/services.py
"""Evening planner preferences.

Each preference lives under its own storage key; there is no relationship
between the keys, and a failed save of one does not roll back the others.
"""
import logging

from winway.catalog.data import MY_NIGHT_PICKS
from winway.core.config import MYNIGHT_KEYS
from winway.my_night.schemas import Mood, MyNightState, MyNightUpdate, Reminder
from winway.storage.services import RecordStore

logger = logging.getLogger(__name__)


def _unique(values):
    return list(dict.fromkeys(values))


def load_state(store: RecordStore) -> MyNightState:
    state = MyNightState()

    # mood and table may also be stored as bare strings
    mood = store.read(MYNIGHT_KEYS["mood"], allow_text=True)
    if isinstance(mood, str) and mood in {m.value for m in Mood}:
        state.mood = Mood(mood)

    table = store.read(MYNIGHT_KEYS["table"], allow_text=True)
    if isinstance(table, str):
        state.table = table

    plan = store.read(MYNIGHT_KEYS["plan"])
    if isinstance(plan, list):
        state.plan = _unique(p for p in plan if p in MY_NIGHT_PICKS)
        if len(state.plan) != len(plan):
            logger.warning("Ignoring unknown plan items in %r", plan)

    reminders = store.read(MYNIGHT_KEYS["reminders"])
    if isinstance(reminders, list):
        known = {r.value for r in Reminder}
        state.reminders = _unique(Reminder(r) for r in reminders if isinstance(r, str) and r in known)
        if len(state.reminders) != len(reminders):
            logger.warning("Ignoring unknown reminder keys in %r", reminders)
    return state


def update_state(store: RecordStore, payload: MyNightUpdate) -> tuple[MyNightState, bool]:
    """Save every supplied preference.

    Returns the merged state and whether all saves succeeded; the state
    reflects the request even when a save failed.
    """
    if payload.plan is not None:
        unknown = [p for p in payload.plan if p not in MY_NIGHT_PICKS]
        if unknown:
            raise ValueError(f"Unknown plan items: {', '.join(unknown)}")

    merged = load_state(store).model_dump(mode="json")
    ok = True
    changes = payload.model_dump(mode="json", exclude_none=True)
    for name, value in changes.items():
        if isinstance(value, list):
            value = _unique(value)
        ok = store.write(MYNIGHT_KEYS[name], value) and ok
        merged[name] = value
    return MyNightState.model_validate(merged), ok


def toggle_plan(store: RecordStore, entertainment_id: str) -> tuple[MyNightState, bool]:
    if entertainment_id not in MY_NIGHT_PICKS:
        raise KeyError(entertainment_id)
    plan = load_state(store).plan
    if entertainment_id in plan:
        plan = [p for p in plan if p != entertainment_id]
    else:
        plan = plan + [entertainment_id]
    return update_state(store, MyNightUpdate(plan=plan))


def toggle_reminder(store: RecordStore, reminder: Reminder) -> tuple[MyNightState, bool]:
    reminders = load_state(store).reminders
    if reminder in reminders:
        reminders = [r for r in reminders if r != reminder]
    else:
        reminders = reminders + [reminder]
    return update_state(store, MyNightUpdate(reminders=reminders))
