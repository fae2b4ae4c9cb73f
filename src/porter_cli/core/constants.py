"""Shared names for porter's bundled asset layout and manifest tokens."""

from __future__ import annotations

ASSETS_DIR = "assets"
OPTIONS_DIR = "options"
TEMPLATES_PACKAGE_DIR = "templates"
MANIFEST_FILENAME = "composer.json"
TEMPLATE_ROOT_ENV = "PORTER_TEMPLATE_ROOT"

MODULE_NAME_DELIMITER = "/"
NAMESPACE_DELIMITER = "\\"

MODULE_NAME_TOKEN = "$moduleName"
MODULE_TYPE_TOKEN = "$moduleType"
NAMESPACE_TOKEN = "$namespace"

__all__ = [
    "ASSETS_DIR",
    "MANIFEST_FILENAME",
    "MODULE_NAME_DELIMITER",
    "MODULE_NAME_TOKEN",
    "MODULE_TYPE_TOKEN",
    "NAMESPACE_DELIMITER",
    "NAMESPACE_TOKEN",
    "OPTIONS_DIR",
    "TEMPLATES_PACKAGE_DIR",
    "TEMPLATE_ROOT_ENV",
]
