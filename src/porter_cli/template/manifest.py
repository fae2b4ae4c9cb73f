"""Placeholder substitution for the skeleton's ``composer.json``."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import AnyStr

from porter_cli.errors import ManifestError

logger = logging.getLogger(__name__)


def apply_substitutions(text: AnyStr, substitutions: Iterable[tuple[AnyStr, AnyStr]]) -> tuple[AnyStr, int]:
    """Replace every token case-insensitively, one pair at a time, in order.

    Works on ``str`` or ``bytes``. Tokens are matched literally and
    replacement values are inserted as-is, so backslashes in namespaces
    survive untouched.

    Returns:
        The rewritten text and the total number of replacements.
    """
    total = 0
    for token, value in substitutions:
        pattern = re.compile(re.escape(token), re.IGNORECASE)
        text, count = pattern.subn(lambda _match, value=value: value, text)
        total += count
    return text, total


def rewrite_manifest(path: Path, substitutions: Iterable[tuple[str, str]]) -> int:
    """Apply ``substitutions`` to the file at ``path`` and write it back.

    The file is handled as raw bytes, so its encoding and line endings are
    kept as they were. Values are written as UTF-8. The whole file is
    rewritten in memory before anything is written.

    Returns:
        Number of replacements made. Zero when the tokens are already gone.
    """
    path = Path(path)
    try:
        contents = path.read_bytes()
    except OSError as exc:
        raise ManifestError(f"Could not read manifest {path}: {exc}", path) from exc

    encoded = [(token.encode("utf-8"), value.encode("utf-8")) for token, value in substitutions]
    rewritten, count = apply_substitutions(contents, encoded)
    if count == 0:
        logger.debug("No placeholder tokens left in %s", path)
        return 0

    try:
        path.write_bytes(rewritten)
    except OSError as exc:
        raise ManifestError(f"Could not write manifest {path}: {exc}", path) from exc
    logger.debug("Replaced %d placeholder(s) in %s", count, path)
    return count


__all__ = ["apply_substitutions", "rewrite_manifest"]
