# winway/desk_ticket/services.py
import logging
from datetime import datetime, timezone

from winway.core.config import DESK_TICKETS_KEY
from winway.desk_ticket.schemas import DeskTicket, DeskTicketCreate
from winway.records import query as history
from winway.records.schemas import HistoryFilters, SubmitResult
from winway.storage.services import RecordStore, dump_records, parse_records

logger = logging.getLogger(__name__)


def get_all_tickets(store: RecordStore) -> list[DeskTicket]:
    return parse_records(store.load(DESK_TICKETS_KEY), DeskTicket)

def get_ticket(store: RecordStore, ticket_id: int) -> DeskTicket | None:
    return next((t for t in get_all_tickets(store) if t.id == ticket_id), None)

def query_tickets(store: RecordStore, filters: HistoryFilters, tz=timezone.utc) -> tuple[list[DeskTicket], int]:
    tickets = get_all_tickets(store)
    return history.query(tickets, filters, tz), len(tickets)

def submit_ticket(store: RecordStore, payload: DeskTicketCreate, now: datetime | None = None) -> SubmitResult[DeskTicket]:
    now = now or datetime.now(timezone.utc)
    ticket = DeskTicket(id=int(now.timestamp() * 1000), created_at=now, **payload.model_dump())
    persisted = store.append(DESK_TICKETS_KEY, dump_records([ticket])[0])
    if persisted:
        logger.info("Desk ticket %s (%s, %s) saved", ticket.id, ticket.type.value, ticket.category.value)
        message = "Your ticket has been sent to the venue team."
    else:
        message = "Something went wrong. Please try again."
    return SubmitResult[DeskTicket](record=ticket, persisted=persisted, message=message)

def clear_tickets(store: RecordStore) -> bool:
    return store.clear(DESK_TICKETS_KEY)
