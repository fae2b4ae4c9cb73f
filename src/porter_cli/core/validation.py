"""Input validation for module names and namespaces."""

from __future__ import annotations

from porter_cli.core.constants import MODULE_NAME_DELIMITER, NAMESPACE_DELIMITER
from porter_cli.errors import InvalidModuleNameError, InvalidNamespaceError

# Namespaces with this many backslashes or fewer are rejected.
MAX_REJECTED_NAMESPACE_DELIMITERS = 1


def validate_module_name(name: str) -> None:
    """Ensure ``name`` has an owner and a leaf, e.g. ``vendor/my-module``."""
    if MODULE_NAME_DELIMITER not in name:
        raise InvalidModuleNameError("Invalid module name given. Use the format module/name")


def validate_namespace(namespace: str) -> None:
    """Ensure ``namespace`` has at least two backslash delimiters.

    Namespaces are written into ``composer.json`` verbatim, so callers pass
    them with doubled backslashes (``Vendor\\\\Module``) to keep the JSON valid.
    """
    if namespace.count(NAMESPACE_DELIMITER) <= MAX_REJECTED_NAMESPACE_DELIMITERS:
        raise InvalidNamespaceError(
            "It seems your namespace is formed incorrectly.\n"
            "Possible examples are NameSpace\\\\ or NameSpace\\\\Folder\\\\\n"
            "[Double backslashes]"
        )


__all__ = ["validate_module_name", "validate_namespace"]
