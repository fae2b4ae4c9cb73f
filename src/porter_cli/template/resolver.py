"""Source and target path resolution for skeleton assets.

Asset root resolution order:
1. explicit override (``--template-root``)
2. ``PORTER_TEMPLATE_ROOT`` environment variable
3. the ``templates/`` directory bundled with the package

Source paths are pure path arithmetic. A skeleton that does not exist is
reported by the copier, not here.
"""

from __future__ import annotations

import importlib.resources
import logging
import os
from pathlib import Path

from porter_cli.core.constants import (
    ASSETS_DIR,
    MODULE_NAME_DELIMITER,
    TEMPLATE_ROOT_ENV,
    TEMPLATES_PACKAGE_DIR,
)
from porter_cli.generation.models import FrameworkVersion, SkeletonKind

logger = logging.getLogger(__name__)


def get_bundled_asset_root() -> Path:
    """Return the ``templates/`` directory shipped inside the package."""
    try:
        pkg_root = importlib.resources.files("porter_cli")
        bundled = Path(str(pkg_root)) / TEMPLATES_PACKAGE_DIR
        if bundled.is_dir():
            return bundled
    except (TypeError, ModuleNotFoundError):
        pass

    return Path(__file__).resolve().parent.parent / TEMPLATES_PACKAGE_DIR


def get_asset_root(override: str | Path | None = None) -> Path:
    """Return the directory holding ``assets/`` and ``options/``.

    Args:
        override: Optional path from the ``--template-root`` flag.

    An override or environment value pointing at a missing directory is
    ignored with a warning and resolution falls through to the next tier.
    """
    if override:
        root = Path(override).expanduser().resolve()
        if root.is_dir():
            return root
        logger.warning("--template-root set to %s, but it does not exist. Ignoring.", root)

    if env_root := os.environ.get(TEMPLATE_ROOT_ENV):
        root = Path(env_root).expanduser().resolve()
        if root.is_dir():
            return root
        logger.warning("%s set to %s, but it does not exist. Ignoring.", TEMPLATE_ROOT_ENV, root)

    return get_bundled_asset_root()


def skeleton_folder_name(kind: SkeletonKind, framework_version: FrameworkVersion) -> str:
    return f"{framework_version.value}-{kind.value}"


def resolve_source_path(
    kind: SkeletonKind,
    framework_version: FrameworkVersion,
    sub_dir: str = ASSETS_DIR,
    asset_root: Path | None = None,
) -> Path:
    """Return ``<asset_root>/<sub_dir>/<version>-<kind>`` without touching disk."""
    root = asset_root if asset_root is not None else get_asset_root()
    return root / sub_dir / skeleton_folder_name(kind, framework_version)


def resolve_target_path(name: str, base_path: Path) -> Path:
    """Join the part of ``name`` after the owner onto ``base_path``.

    ``vendor/blog`` under ``/srv`` becomes ``/srv/blog``. Extra delimiters after
    the owner are dropped so the result always stays under ``base_path``.
    """
    _, _, leaf = name.partition(MODULE_NAME_DELIMITER)
    leaf = leaf.lstrip(MODULE_NAME_DELIMITER)
    return Path(base_path) / leaf


__all__ = [
    "get_asset_root",
    "get_bundled_asset_root",
    "resolve_source_path",
    "resolve_target_path",
    "skeleton_folder_name",
]
