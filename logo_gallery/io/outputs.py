"""Output helpers for persisting gallery results."""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import pandas as pd

from ..catalog.parse import is_fallback
from .models import DEFAULT_BASE_PATH, GalleryReport, LogoRecord, Query


def write_records(path: Path, records: Sequence[LogoRecord]) -> Path:
    """Write *records* to *path* as JSON and return the path."""
    serialised = [record.to_dict() for record in records]
    path.write_text(json.dumps(serialised, indent=2), encoding="utf-8")
    return path


def write_report(path: Path, report: GalleryReport) -> Path:
    """Write a gallery report to *path* as JSON and return the path."""
    path.write_text(json.dumps(asdict(report), indent=2), encoding="utf-8")
    return path


def write_record_table(
    records: Sequence[LogoRecord],
    visible_ids: Iterable[int],
    out_dir: Path,
    assets: Mapping[int, bool] | None = None,
) -> Path | None:
    """Write the catalog as ``records.parquet`` with a ``visible`` flag column."""
    if not records:
        print("[records] no rows to write")
        return None

    visible = set(visible_ids)
    df = pd.DataFrame([record.to_dict() for record in records])
    df["visible"] = df["id"].isin(visible)
    if assets is not None:
        df["asset_ok"] = df["id"].map(lambda record_id: assets.get(record_id, False))

    table_path = out_dir / "records.parquet"
    table_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_parquet(table_path, index=False, engine="pyarrow")
    print(f"[records] wrote {len(df)} rows to {table_path}")
    return table_path


def _decade_label(year: int) -> str:
    return f"{(year // 10) * 10}s"


def build_report(
    records: Sequence[LogoRecord],
    visible: Sequence[LogoRecord],
    query: Query,
    assets: Mapping[int, bool] | None = None,
    base_path: str = DEFAULT_BASE_PATH,
) -> GalleryReport:
    """Summarize the visible subset of *records* for *query*."""
    invalid = sum(1 for record in records if is_fallback(record, base_path))
    decades = Counter(_decade_label(record.year) for record in visible)
    missing = sorted(record_id for record_id, ok in (assets or {}).items() if not ok)
    return GalleryReport(
        total=len(records),
        visible=len(visible),
        invalid=invalid,
        query=asdict(query),
        by_color=dict(Counter(record.color for record in visible)),
        by_type=dict(Counter(record.type for record in visible)),
        by_decade=dict(sorted(decades.items())),
        missing_assets=missing,
    )
