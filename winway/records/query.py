# winway/records/query.py
"""Client-side history filtering.

All supplied filters must match (logical AND). The result is a new list sorted
newest first; the input sequence is never modified.
"""
from datetime import datetime, tzinfo, timezone
from typing import Sequence

from winway.records.schemas import HistoryFilters, R, Record


def newest_first(records: Sequence[R]) -> list[R]:
    # sorted() is stable, ties keep their stored order
    return sorted(records, key=lambda r: r.created_at, reverse=True)


def local_day(moment: datetime, tz: tzinfo = timezone.utc):
    return moment.astimezone(tz).date()


def matches(record: Record, filters: HistoryFilters, tz: tzinfo = timezone.utc) -> bool:
    needle = (filters.search or "").strip().lower()
    if needle:
        haystack = [(field or "").lower() for field in record.search_fields()]
        if not any(needle in field for field in haystack):
            return False

    if filters.kind and record.kind != filters.kind:
        return False

    if filters.category and getattr(record, "category", None) != filters.category:
        return False

    if filters.status and record.status != filters.status:
        return False

    if filters.date_from or filters.date_to:
        day = local_day(record.created_at, tz)
        if filters.date_from and day < filters.date_from:
            return False
        if filters.date_to and day > filters.date_to:
            return False

    return True


def query(records: Sequence[R], filters: HistoryFilters | None = None, tz: tzinfo = timezone.utc) -> list[R]:
    filters = filters or HistoryFilters()
    return newest_first([r for r in records if matches(r, filters, tz)])
