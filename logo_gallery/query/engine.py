"""Search and filter evaluation over the parsed catalog."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..catalog.parse import parse_leading_int
from ..io.models import LogoRecord, Query

logger = logging.getLogger(__name__)


def is_in_decade(year: int, search_year: int) -> bool:
    """Return ``True`` when *year* falls in the decade containing *search_year*."""
    decade_start = (search_year // 10) * 10
    return decade_start <= year <= decade_start + 9


def _matches_text(record: LogoRecord, search_term: str, search_year: int | None) -> bool:
    if search_term.lower() in record.name.lower():
        return True
    if search_year is None:
        return False
    return is_in_decade(record.year, search_year)


def _matches(record: LogoRecord, query: Query, search_year: int | None) -> bool:
    if not _matches_text(record, query.search_term or "", search_year):
        return False
    if query.color and record.color != query.color.lower():
        return False
    if query.type and record.type != query.type.lower():
        return False
    return True


def matches(record: LogoRecord, query: Query) -> bool:
    """Return ``True`` when *record* satisfies every predicate of *query*."""
    return _matches(record, query, parse_leading_int(query.search_term or ""))


def filter_records(records: Iterable[LogoRecord], query: Query) -> list[LogoRecord]:
    """Return the records matching *query*, preserving their input order.

    A record whose evaluation raises is logged and left out; the call itself
    only raises ``TypeError`` when given something other than a sequence of
    records and a :class:`Query`.
    """
    if isinstance(records, (str, bytes, Mapping)) or not isinstance(records, Iterable):
        raise TypeError(f"records must be a sequence of LogoRecord, got {type(records).__name__}")
    if not isinstance(query, Query):
        raise TypeError(f"query must be a Query, got {type(query).__name__}")

    search_year = parse_leading_int(query.search_term or "")
    visible: list[LogoRecord] = []
    for record in records:
        try:
            if _matches(record, query, search_year):
                visible.append(record)
        except Exception:  # noqa: BLE001 - one bad record must not hide the rest
            logger.exception("Failed to evaluate record %r", record)
    return visible
