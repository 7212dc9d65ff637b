"""Interactive query state bound to one parsed catalog."""

from __future__ import annotations

import logging
from dataclasses import replace
from threading import Lock
from typing import Sequence

from ..io.models import DEBOUNCE_SECONDS, LogoRecord, Query
from .debounce import Debouncer
from .engine import filter_records
from .selection import clear_filters, select_color, select_type

logger = logging.getLogger(__name__)


class GallerySession:
    """Hold the current :class:`Query` for a fixed record collection.

    Free-text input goes through :meth:`search`, which is debounced; the
    structured filters apply immediately. After :meth:`close` pending and
    late updates are dropped.
    """

    def __init__(
        self,
        records: Sequence[LogoRecord],
        query: Query | None = None,
        wait: float = DEBOUNCE_SECONDS,
    ) -> None:
        self._records = tuple(records)
        self._query = query or Query()
        self._lock = Lock()
        self._closed = False
        self._debounced_search = Debouncer(self.set_search_term, wait=wait)

    def __enter__(self) -> "GallerySession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def records(self) -> tuple[LogoRecord, ...]:
        return self._records

    @property
    def query(self) -> Query:
        with self._lock:
            return self._query

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    @property
    def visible(self) -> list[LogoRecord]:
        """Records matching the current query snapshot."""
        return filter_records(self._records, self.query)

    def search(self, term: str) -> None:
        """Schedule *term* as the search term once typing settles."""
        if self.closed:
            logger.debug("Ignoring search %r on closed session", term)
            return
        self._debounced_search(term)

    def flush(self) -> None:
        """Apply a pending search term immediately."""
        self._debounced_search.flush()

    def set_search_term(self, term: str) -> None:
        self._update(lambda query: replace(query, search_term=term or ""))

    def select_color(self, color: str) -> None:
        self._update(lambda query: select_color(query, color))

    def select_type(self, type_: str) -> None:
        self._update(lambda query: select_type(query, type_))

    def clear_filters(self) -> None:
        self._update(clear_filters)

    def close(self) -> None:
        """Cancel any pending search update and stop accepting new ones."""
        with self._lock:
            self._closed = True
        self._debounced_search.cancel()

    def _update(self, change) -> None:
        with self._lock:
            if self._closed:
                logger.debug("Dropping query update on closed session")
                return
            self._query = change(self._query)
