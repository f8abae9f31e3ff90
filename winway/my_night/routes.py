# winway/my_night/routes.py
from fastapi import APIRouter, Depends, HTTPException, Response

from winway.my_night import services as my_night_service
from winway.my_night.schemas import MyNightState, MyNightUpdate, Reminder
from winway.storage.services import RecordStore, get_store

router = APIRouter(prefix="/my-night", tags=["My night"])


def _persisted(response: Response, ok: bool) -> None:
    response.headers["X-Persisted"] = "true" if ok else "false"


@router.get("/", response_model=MyNightState)
def get(store: RecordStore = Depends(get_store)):
    return my_night_service.load_state(store)


@router.put("/", response_model=MyNightState)
def update(payload: MyNightUpdate, response: Response, store: RecordStore = Depends(get_store)):
    try:
        state, ok = my_night_service.update_state(store, payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc))
    _persisted(response, ok)
    return state


@router.post("/plan/{entertainment_id}", response_model=MyNightState)
def toggle_plan(entertainment_id: str, response: Response, store: RecordStore = Depends(get_store)):
    try:
        state, ok = my_night_service.toggle_plan(store, entertainment_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="Entertainment not found")
    _persisted(response, ok)
    return state


@router.post("/reminders/{reminder}", response_model=MyNightState)
def toggle_reminder(reminder: Reminder, response: Response, store: RecordStore = Depends(get_store)):
    state, ok = my_night_service.toggle_reminder(store, reminder)
    _persisted(response, ok)
    return state
