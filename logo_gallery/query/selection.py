"""Toggle-single-select handling for the color and typeface filters."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..io.models import KNOWN_COLORS, KNOWN_TYPES, Query


def toggle(current: str | None, value: str) -> str | None:
    """Clear the filter when *value* is already selected, otherwise select it."""
    if current == value:
        return None
    return value


def _normalise_choice(value: str, vocabulary: Sequence[str], label: str) -> str:
    choice = value.strip().lower()
    if choice not in vocabulary:
        allowed = ", ".join(vocabulary)
        raise ValueError(f"Unknown {label} {value!r}; expected one of: {allowed}")
    return choice


def select_color(query: Query, color: str) -> Query:
    """Return *query* with the color filter toggled to *color*."""
    choice = _normalise_choice(color, KNOWN_COLORS, "color")
    return replace(query, color=toggle(query.color or None, choice))


def select_type(query: Query, type_: str) -> Query:
    """Return *query* with the typeface filter toggled to *type_*."""
    choice = _normalise_choice(type_, KNOWN_TYPES, "type")
    return replace(query, type=toggle(query.type or None, choice))


def clear_filters(query: Query) -> Query:
    return replace(query, color=None, type=None)
