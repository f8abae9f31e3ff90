# winway/service_request/routes.py
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from winway.core.config import Settings, get_settings
from winway.records.schemas import HistoryFilters, HistoryPage, RecordStatus, SubmitResult
from winway.service_request import services as request_service
from winway.service_request.schemas import ServiceRequest, ServiceRequestCreate, StaffKey
from winway.storage.services import RecordStore, get_store

router = APIRouter(prefix="/service-requests", tags=["Service requests"])


@router.post("/", response_model=SubmitResult[ServiceRequest], status_code=201)
def create(payload: ServiceRequestCreate, store: RecordStore = Depends(get_store)):
    return request_service.submit_request(store, payload)


@router.get("/", response_model=HistoryPage[ServiceRequest])
def history(
    q: str | None = Query(default=None, description="Search table, reason, comment, staff and request id"),
    staff_key: StaffKey | None = Query(default=None),
    status: RecordStatus | None = Query(default=None, description="Sent, In progress or Closed"),
    date_from: date | None = Query(default=None, description="Inclusive, calendar day"),
    date_to: date | None = Query(default=None, description="Inclusive, calendar day"),
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    filters = HistoryFilters(
        search=q,
        kind=staff_key.value if staff_key else None,
        status=status,
        date_from=date_from,
        date_to=date_to,
    )
    items, total = request_service.query_requests(store, filters, settings.tz)
    return HistoryPage[ServiceRequest](items=items, matched=len(items), total=total)


@router.get("/{request_id}", response_model=ServiceRequest)
def get(request_id: int, store: RecordStore = Depends(get_store)):
    req = request_service.get_request(store, request_id)
    if not req:
        raise HTTPException(status_code=404, detail="Service request not found")
    return req


@router.delete("/", status_code=204)
def clear(store: RecordStore = Depends(get_store)):
    if not request_service.clear_requests(store):
        raise HTTPException(status_code=503, detail="History could not be cleared")
