"""Skeleton copy helpers."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from porter_cli.errors import SkeletonCopyError

logger = logging.getLogger(__name__)


def copy_file(source: Path, dest: Path) -> None:
    """Copy one file, creating ``dest``'s parent and overwriting ``dest``."""
    source = Path(source)
    dest = Path(dest)
    if not source.is_file():
        raise SkeletonCopyError(f"Source file not found: {source}", source)
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, dest)
    except OSError as exc:
        raise SkeletonCopyError(f"Could not copy {source} to {dest}: {exc}", dest) from exc
    logger.debug("Copied %s -> %s", source, dest)


def mirror(source_dir: Path, dest_dir: Path) -> int:
    """Recursively copy ``source_dir`` into ``dest_dir``.

    Files already present in ``dest_dir`` are overwritten when the source has
    a file at the same relative path and left alone otherwise. A failure
    partway through leaves whatever was already copied in place.

    Returns:
        Number of files copied.
    """
    source_dir = Path(source_dir)
    dest_dir = Path(dest_dir)
    if not source_dir.is_dir():
        raise SkeletonCopyError(f"Skeleton directory not found: {source_dir}", source_dir)

    try:
        dest_dir.mkdir(parents=True, exist_ok=True)
        children = sorted(source_dir.iterdir())
    except OSError as exc:
        raise SkeletonCopyError(f"Could not mirror {source_dir} to {dest_dir}: {exc}", dest_dir) from exc

    copied = 0
    for child in children:
        target = dest_dir / child.name
        if child.is_dir():
            copied += mirror(child, target)
        else:
            copy_file(child, target)
            copied += 1
    return copied


__all__ = ["copy_file", "mirror"]
