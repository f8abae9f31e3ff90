# winway/desk_ticket/routes.py
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from winway.core.config import Settings, get_settings
from winway.desk_ticket import services as ticket_service
from winway.desk_ticket.schemas import DeskTicket, DeskTicketCreate, TicketCategory, TicketType
from winway.records.schemas import HistoryFilters, HistoryPage, RecordStatus, SubmitResult
from winway.storage.services import RecordStore, get_store

router = APIRouter(prefix="/desk-tickets", tags=["Service desk"])


@router.post("/", response_model=SubmitResult[DeskTicket], status_code=201)
def create(ticket: DeskTicketCreate, store: RecordStore = Depends(get_store)):
    return ticket_service.submit_ticket(store, ticket)


@router.get("/", response_model=HistoryPage[DeskTicket])
def list_all(
    q: str | None = Query(default=None, description="Search title, message, category and type"),
    type: TicketType | None = Query(default=None),
    category: TicketCategory | None = Query(default=None),
    status: RecordStatus | None = Query(default=None),
    date_from: date | None = Query(default=None),
    date_to: date | None = Query(default=None),
    store: RecordStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    filters = HistoryFilters(
        search=q,
        kind=type.value if type else None,
        category=category.value if category else None,
        status=status,
        date_from=date_from,
        date_to=date_to,
    )
    items, total = ticket_service.query_tickets(store, filters, settings.tz)
    return HistoryPage[DeskTicket](items=items, matched=len(items), total=total)


@router.get("/{ticket_id}", response_model=DeskTicket)
def get(ticket_id: int, store: RecordStore = Depends(get_store)):
    ticket = ticket_service.get_ticket(store, ticket_id)
    if not ticket:
        raise HTTPException(status_code=404, detail="Ticket not found")
    return ticket


@router.delete("/", status_code=204)
def clear(store: RecordStore = Depends(get_store)):
    if not ticket_service.clear_tickets(store):
        raise HTTPException(status_code=503, detail="Tickets could not be cleared")
