"""Core constants and validation helpers."""

from .constants import (
    ASSETS_DIR,
    MANIFEST_FILENAME,
    OPTIONS_DIR,
    TEMPLATE_ROOT_ENV,
)
from .validation import validate_module_name, validate_namespace

__all__ = [
    "ASSETS_DIR",
    "MANIFEST_FILENAME",
    "OPTIONS_DIR",
    "TEMPLATE_ROOT_ENV",
    "validate_module_name",
    "validate_namespace",
]
