# winway/service_request/services.py
import logging
from datetime import datetime, timezone

from winway.core.config import SERVICE_REQUESTS_KEY
from winway.records.schemas import HistoryFilters, SubmitResult
from winway.records import query as history
from winway.service_request.schemas import ServiceRequest, ServiceRequestCreate
from winway.storage.services import RecordStore, dump_records, parse_records

logger = logging.getLogger(__name__)


def get_all_requests(store: RecordStore) -> list[ServiceRequest]:
    return parse_records(store.load(SERVICE_REQUESTS_KEY), ServiceRequest)

def get_request(store: RecordStore, request_id: int) -> ServiceRequest | None:
    for req in get_all_requests(store):
        if req.id == request_id:
            return req
    return None

def query_requests(store: RecordStore, filters: HistoryFilters, tz=timezone.utc) -> tuple[list[ServiceRequest], int]:
    requests = get_all_requests(store)
    return history.query(requests, filters, tz), len(requests)

def build_request(payload: ServiceRequestCreate, now: datetime | None = None) -> ServiceRequest:
    now = now or datetime.now(timezone.utc)
    request_id = int(now.timestamp() * 1000)
    return ServiceRequest(
        id=request_id,
        created_at=now,
        staff_key=payload.staff_key,
        table=payload.table,
        reason=payload.reason,
        comment=payload.comment,
        internal_id=f"SR-{str(request_id)[-6:]}",
    )

def confirmation_message(req: ServiceRequest) -> str:
    message = f'Request sent to {req.staff_key.label} for table "{req.table}"'
    if req.reason:
        message += f" ({req.reason})"
    return message + "."

def submit_request(store: RecordStore, payload: ServiceRequestCreate, now: datetime | None = None) -> SubmitResult[ServiceRequest]:
    req = build_request(payload, now)
    persisted = store.append(SERVICE_REQUESTS_KEY, dump_records([req])[0])
    if persisted:
        logger.info("Service request %s for %s at table %s saved", req.internal_id, req.staff_key.value, req.table)
        message = confirmation_message(req)
    else:
        message = "Something went wrong. Please try again."
    return SubmitResult[ServiceRequest](record=req, persisted=persisted, message=message)

def clear_requests(store: RecordStore) -> bool:
    return store.clear(SERVICE_REQUESTS_KEY)
