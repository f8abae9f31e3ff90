from datetime import date
from zoneinfo import ZoneInfo

import pytest

from winway.desk_ticket.schemas import DeskTicket
from winway.records.query import query
from winway.records.schemas import HistoryFilters, Record, RecordStatus
from winway.service_request.schemas import ServiceRequest


def make_request(id, created_at, staff="waiter", table="A1", status="Sent", reason=None, comment=None):
    return ServiceRequest.model_validate(
        {
            "id": id,
            "createdAt": created_at,
            "staffKey": staff,
            "table": table,
            "status": status,
            "reason": reason,
            "comment": comment,
            "internalId": f"SR-{id:06d}",
        }
    )


REQUESTS = [
    make_request(1, "2026-10-17T21:00:00Z", "waiter", "A12", reason="Need menu / drinks"),
    make_request(2, "2026-10-18T22:30:00Z", "technician", "B3", "In progress", comment="Screen is flickering"),
    make_request(3, "2026-10-18T23:59:00Z", "cleaner", "VIP 1", "Closed"),
    make_request(4, "2026-10-19T00:15:00Z", "waiter", "Bar 1"),
]


def ids(records):
    return [r.id for r in records]


def test_no_filters_returns_everything_newest_first():
    assert ids(query(REQUESTS)) == [4, 3, 2, 1]


def test_output_is_sorted_descending_by_created_at():
    out = query(list(reversed(REQUESTS)), HistoryFilters(kind="waiter"))
    assert all(a.created_at >= b.created_at for a, b in zip(out, out[1:]))


def test_query_is_pure_and_idempotent():
    records = list(REQUESTS)
    filters = HistoryFilters(search="a")
    first = query(records, filters)
    second = query(records, filters)
    assert first == second
    assert records == REQUESTS


def test_search_is_case_insensitive_substring():
    assert ids(query(REQUESTS, HistoryFilters(search="SCREEN"))) == [2]
    assert ids(query(REQUESTS, HistoryFilters(search="menu"))) == [1]


def test_search_covers_staff_label_and_internal_id():
    assert ids(query(REQUESTS, HistoryFilters(search="Waiter"))) == [4, 1]
    assert ids(query(REQUESTS, HistoryFilters(search="sr-000003"))) == [3]


def test_blank_search_matches_everything():
    assert ids(query(REQUESTS, HistoryFilters(search="   "))) == [4, 3, 2, 1]


def test_kind_and_status_filters():
    assert ids(query(REQUESTS, HistoryFilters(kind="waiter"))) == [4, 1]
    assert ids(query(REQUESTS, HistoryFilters(status=RecordStatus.IN_PROGRESS))) == [2]


def test_status_without_matches_is_empty_but_collection_is_not():
    only_sent = [r for r in REQUESTS if r.status == RecordStatus.SENT]
    assert only_sent
    assert query(only_sent, HistoryFilters(status=RecordStatus.CLOSED)) == []


def test_empty_collection_yields_empty_output():
    assert query([], HistoryFilters(search="anything")) == []


def test_date_range_is_inclusive_calendar_days():
    one_day = HistoryFilters(date_from=date(2026, 10, 18), date_to=date(2026, 10, 18))
    assert ids(query(REQUESTS, one_day)) == [3, 2]
    assert ids(query(REQUESTS, HistoryFilters(date_from=date(2026, 10, 18)))) == [4, 3, 2]
    assert ids(query(REQUESTS, HistoryFilters(date_to=date(2026, 10, 17)))) == [1]


def test_date_range_uses_the_given_timezone():
    # 00:15 UTC on the 19th is still the evening of the 18th in New York
    one_day = HistoryFilters(date_from=date(2026, 10, 18), date_to=date(2026, 10, 18))
    assert ids(query(REQUESTS, one_day, ZoneInfo("America/New_York"))) == [4, 3, 2]


def test_filters_are_a_conjunction():
    filters = HistoryFilters(search="a", kind="waiter", status=RecordStatus.SENT, date_from=date(2026, 10, 18))
    expected = [
        r
        for r in REQUESTS
        if any("a" in (f or "").lower() for f in r.search_fields())
        and r.staff_key.value == "waiter"
        and r.status == RecordStatus.SENT
        and r.created_at.date() >= date(2026, 10, 18)
    ]
    assert ids(query(REQUESTS, filters)) == ids(sorted(expected, key=lambda r: r.created_at, reverse=True))
    assert ids(query(REQUESTS, filters)) == [4]


def test_ties_keep_stored_order():
    same = [make_request(10, "2026-10-19T20:00:00Z"), make_request(11, "2026-10-19T20:00:00Z")]
    assert ids(query(same)) == [10, 11]


def test_ticket_category_and_type_filters():
    tickets = [
        DeskTicket.model_validate(
            {"id": 1, "createdAt": "2026-10-18T20:00:00Z", "type": "complaint",
             "category": "Cleanliness", "title": "Sticky table", "message": "Table B2"}
        ),
        DeskTicket.model_validate(
            {"id": 2, "createdAt": "2026-10-18T21:00:00Z", "type": "compliment",
             "category": "Food & Drinks", "title": "Great cocktails", "message": "Thanks to the bar"}
        ),
    ]
    assert ids(query(tickets, HistoryFilters(category="Food & Drinks"))) == [2]
    assert ids(query(tickets, HistoryFilters(kind="complaint"))) == [1]
    assert ids(query(tickets, HistoryFilters(search="compliment"))) == [2]


def test_base_record_must_define_kind():
    with pytest.raises(TypeError):
        Record(id=1, created_at="2026-10-19T20:00:00Z")
