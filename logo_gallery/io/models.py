"""Data models shared across the logo gallery."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

DEFAULT_BASE_PATH = "/logos"
DEFAULT_YEAR = 2000
DEFAULT_SOURCE = "https://example.com"
KNOWN_COLORS = ("blue", "red", "black", "white")
KNOWN_TYPES = ("serif", "sans-serif")
DEBOUNCE_SECONDS = 0.3

FALLBACK_NAME = "Invalid Logo"
FALLBACK_COLOR = "black"
FALLBACK_TYPE = "serif"


@dataclass(frozen=True, slots=True)
class LogoRecord:
    """Structured view of one catalog entry."""

    id: int
    name: str
    year: int
    color: str
    type: str
    image_url: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the payload handed to the presentation layer."""
        return {
            "id": self.id,
            "name": self.name,
            "year": self.year,
            "color": self.color,
            "type": self.type,
            "imageUrl": self.image_url,
            "source": self.source,
        }


@dataclass(frozen=True, slots=True)
class Query:
    """Free-text term plus the structured filter selections."""

    search_term: str = ""
    color: str | None = None
    type: str | None = None


@dataclass(slots=True)
class GalleryReport:
    """Summary of one query evaluation over the catalog."""

    total: int
    visible: int
    invalid: int
    query: Dict[str, Any] = field(default_factory=dict)
    by_color: Dict[str, int] = field(default_factory=dict)
    by_type: Dict[str, int] = field(default_factory=dict)
    by_decade: Dict[str, int] = field(default_factory=dict)
    missing_assets: List[int] = field(default_factory=list)


def fallback_record(record_id: int, base_path: str = DEFAULT_BASE_PATH) -> LogoRecord:
    """Return the sentinel record substituted for an unparseable identifier."""
    return LogoRecord(
        id=record_id,
        name=FALLBACK_NAME,
        year=DEFAULT_YEAR,
        color=FALLBACK_COLOR,
        type=FALLBACK_TYPE,
        image_url=f"{base_path.rstrip('/')}/default.png",
        source=DEFAULT_SOURCE,
    )
