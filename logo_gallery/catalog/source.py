"""Catalog sources feeding raw identifiers into the parser."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CATALOG: tuple[str, ...] = (
    "BarcelonaArchives|Blue|www.arxiu.barcelona|Serif|1922.png",
    "CatalunyaRadio|Red|www.ccma.cat|SansSerif|1983.png",
)


def read_catalog(path: Path) -> list[str]:
    """Read newline separated identifiers from *path* and return non-empty lines."""
    if not path.exists():
        raise FileNotFoundError(f"Catalog file does not exist: {path}")
    lines = [line.strip() for line in path.read_text(encoding="utf-8-sig").splitlines()]
    return [line for line in lines if line]
