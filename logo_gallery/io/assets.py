"""Local checks for the image files referenced by catalog records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable

from PIL import Image

from .models import DEFAULT_BASE_PATH, LogoRecord

logger = logging.getLogger(__name__)


def asset_path(
    record: LogoRecord, asset_dir: Path, base_path: str = DEFAULT_BASE_PATH
) -> Path | None:
    """Return where *record*'s image lives under *asset_dir*.

    Returns ``None`` when the image URL would resolve outside *asset_dir*.
    """
    prefix = f"{base_path.rstrip('/')}/"
    relative = record.image_url
    if relative.startswith(prefix):
        relative = relative[len(prefix):]
    root = asset_dir.resolve()
    path = (root / relative.lstrip("/")).resolve()
    if not path.is_relative_to(root):
        logger.warning("Image path for logo %s escapes %s", record.id, asset_dir)
        return None
    return path


def probe_image(path: Path | None) -> bool:
    """Return ``True`` when *path* opens as an image."""
    if path is None:
        return False
    try:
        with Image.open(path) as image:
            image.verify()
    except Exception as exc:
        logger.info("Image %s failed to load (%s)", path, exc)
        return False
    return True


def probe_assets(
    records: Iterable[LogoRecord],
    asset_dir: Path,
    base_path: str = DEFAULT_BASE_PATH,
) -> Dict[int, bool]:
    """Map record ids to whether their image can be displayed.

    A failure only affects that record; callers show a placeholder for it.
    """
    return {
        record.id: probe_image(asset_path(record, asset_dir, base_path))
        for record in records
    }
