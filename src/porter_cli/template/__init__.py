"""Skeleton resolution, copying and manifest rewriting."""

from .manager import copy_file, mirror
from .manifest import apply_substitutions, rewrite_manifest
from .options import apply_options, options_for, validate_flags
from .resolver import (
    get_asset_root,
    get_bundled_asset_root,
    resolve_source_path,
    resolve_target_path,
)

__all__ = [
    "apply_options",
    "apply_substitutions",
    "copy_file",
    "get_asset_root",
    "get_bundled_asset_root",
    "mirror",
    "options_for",
    "resolve_source_path",
    "resolve_target_path",
    "rewrite_manifest",
    "validate_flags",
]
