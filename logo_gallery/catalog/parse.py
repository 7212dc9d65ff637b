"""Turn encoded logo filenames into structured catalog records."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from tqdm import tqdm

from ..io.models import (
    DEFAULT_BASE_PATH,
    DEFAULT_YEAR,
    LogoRecord,
    fallback_record,
)

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
FIELD_COUNT = 5

_UPPERCASE = re.compile(r"([A-Z])")
_TYPE_SEPARATORS = re.compile(r"[\s_\-]+")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

_TYPE_ALIASES = {
    "serif": "serif",
    "sansserif": "sans-serif",
}


def strip_extension(raw: str) -> str:
    """Drop a trailing ``.ext`` from *raw*, leaving dotted field values intact."""
    stem, dot, extension = raw.rpartition(".")
    if not dot or FIELD_SEPARATOR in extension:
        return raw
    return stem


def split_camel_case(value: str) -> str:
    """Insert a space before every upper-case letter and trim the result."""
    return _UPPERCASE.sub(r" \1", value).strip()


def parse_leading_int(value: str | None) -> int | None:
    """Return the integer prefix of *value*, or ``None`` when there is none."""
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Digit runs past the interpreter's int conversion limit.
        return None


def parse_year(value: str) -> int:
    """Parse a year field, defaulting to ``DEFAULT_YEAR`` for soft input."""
    year = parse_leading_int(value)
    return year or DEFAULT_YEAR


def absolutize_source(source: str) -> str:
    """Prefix bare ``www`` hosts with ``https://``."""
    if source.startswith("www"):
        return f"https://{source}"
    return source


def normalize_type(value: str) -> str:
    """Map a raw typeface field onto the ``serif``/``sans-serif`` vocabulary.

    Spellings of serif and sans-serif such as ``SansSerif``, ``Sans-Serif``
    and ``sans serif`` read as the filter value. Anything else is only
    lower-cased.
    """
    compact = _TYPE_SEPARATORS.sub("", value).lower()
    alias = _TYPE_ALIASES.get(compact)
    if alias:
        return alias
    return value.lower()


def parse_identifier(
    raw: str | None, position: int, base_path: str = DEFAULT_BASE_PATH
) -> LogoRecord:
    """Parse ``Name|Color|Source|Type|Year.ext`` into a :class:`LogoRecord`.

    Malformed input never raises: the fallback record is returned with
    ``id=position`` and a warning is logged.
    """
    if not raw or not isinstance(raw, str):
        logger.warning("Invalid filename format: %r", raw)
        return fallback_record(position, base_path)

    parts = strip_extension(raw).split(FIELD_SEPARATOR)
    if len(parts) != FIELD_COUNT or not all(parts):
        logger.warning("Invalid filename format: %s", raw)
        return fallback_record(position, base_path)

    name, color, source, type_, year = parts
    return LogoRecord(
        id=position,
        name=split_camel_case(name),
        year=parse_year(year),
        color=color.lower(),
        type=normalize_type(type_),
        image_url=f"{base_path.rstrip('/')}/{raw}",
        source=absolutize_source(source),
    )


def parse_catalog(
    raw_identifiers: Iterable[str],
    base_path: str = DEFAULT_BASE_PATH,
    progress: bool = False,
) -> list[LogoRecord]:
    """Parse every identifier, assigning 1-based ids by position."""
    records: list[LogoRecord] = []
    iterator = tqdm(
        raw_identifiers, desc="Parsing catalog", unit="logo", leave=False, disable=not progress
    )
    for position, raw in enumerate(iterator, start=1):
        records.append(parse_identifier(raw, position, base_path))
    return records


def is_fallback(record: LogoRecord, base_path: str = DEFAULT_BASE_PATH) -> bool:
    """Return ``True`` when *record* is the sentinel for a malformed identifier."""
    return record == fallback_record(record.id, base_path)
