"""Exception hierarchy for porter.

Validation errors are raised before the filesystem is touched. I/O errors
are raised ``from`` the underlying :class:`OSError` so the original cause
stays attached.
"""

from __future__ import annotations

from pathlib import Path


class PorterError(Exception):
    """Base class for every error surfaced to the user by porter."""


class InvalidModuleNameError(PorterError, ValueError):
    """Module name is not in ``owner/name`` form."""


class InvalidNamespaceError(PorterError, ValueError):
    """Namespace does not have enough backslash-delimited segments."""


class UnknownOptionError(PorterError, ValueError):
    """An option flag is not defined for the requested skeleton kind."""


class ScaffoldIOError(PorterError, OSError):
    """A copy, read or write against the filesystem failed."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class SkeletonCopyError(ScaffoldIOError):
    """Copying a skeleton or optional asset failed."""


class ManifestError(ScaffoldIOError):
    """Reading or writing the manifest file failed."""


__all__ = [
    "InvalidModuleNameError",
    "InvalidNamespaceError",
    "ManifestError",
    "PorterError",
    "ScaffoldIOError",
    "SkeletonCopyError",
    "UnknownOptionError",
]
