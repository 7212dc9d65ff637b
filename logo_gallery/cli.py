"""Command-line interface for the logo_gallery project."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable

from .catalog.parse import parse_catalog
from .catalog.source import DEFAULT_CATALOG, read_catalog
from .io.assets import probe_assets
from .io.models import DEFAULT_BASE_PATH, KNOWN_COLORS, KNOWN_TYPES, LogoRecord, Query
from .io.outputs import build_report, write_record_table, write_records, write_report
from .query.engine import filter_records

DEFAULT_OUT_DIR = Path("out") / "gallery"


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the gallery query."""
    parser = argparse.ArgumentParser(
        description="Parse a logo catalog and report the entries matching a query."
    )
    parser.add_argument(
        "--input",
        required=False,
        default=None,
        help="Path to a text file with one encoded logo filename per line "
        "(defaults to the built-in sample catalog).",
    )
    parser.add_argument(
        "--out",
        required=False,
        default=str(DEFAULT_OUT_DIR),
        help="Directory path where JSON and parquet outputs will be written.",
    )
    parser.add_argument(
        "--search",
        default="",
        help="Free-text term matched against names, or a year matched by decade.",
    )
    parser.add_argument(
        "--color",
        choices=KNOWN_COLORS,
        default=None,
        help="Only show logos of this color.",
    )
    parser.add_argument(
        "--type",
        choices=KNOWN_TYPES,
        default=None,
        help="Only show logos with this typeface.",
    )
    parser.add_argument(
        "--base-path",
        default=DEFAULT_BASE_PATH,
        help="URL path prefix used to build each logo's image URL.",
    )
    parser.add_argument(
        "--assets",
        required=False,
        default=None,
        help="Directory holding the logo images; each one is checked for loading.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar while parsing the catalog.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _print_visible(visible: list[LogoRecord]) -> None:
    if not visible:
        print("[results] no logos match the current filters")
        return
    for record in visible:
        print(f"  {record.id}. {record.name} ({record.year}, {record.color}, {record.type})")


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the CLI."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.input:
        entries = read_catalog(Path(args.input))
    else:
        entries = list(DEFAULT_CATALOG)
    print(f"[catalog] {len(entries)} entries")

    records = parse_catalog(entries, base_path=args.base_path, progress=args.progress)
    query = Query(search_term=args.search, color=args.color, type=args.type)
    visible = filter_records(records, query)
    print(f"[results] {len(visible)} of {len(records)} logos visible")
    _print_visible(visible)

    assets = None
    if args.assets:
        assets = probe_assets(records, Path(args.assets), base_path=args.base_path)
        for record_id, ok in assets.items():
            if not ok:
                print(f"[assets] logo {record_id}: image unavailable, showing placeholder")

    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    write_records(out_dir / "records.json", records)
    write_records(out_dir / "visible.json", visible)
    report = build_report(records, visible, query, assets=assets, base_path=args.base_path)
    write_report(out_dir / "report.json", report)
    write_record_table(records, (record.id for record in visible), out_dir, assets=assets)
    if report.invalid:
        print(f"[catalog] {report.invalid} malformed entries replaced by the fallback logo")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
