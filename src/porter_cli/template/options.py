"""Optional add-on assets layered on top of a copied skeleton.

Each skeleton kind has a table mapping a CLI flag to a file or directory
under ``options/<version>-<kind>/``. Flags are independent: every enabled
flag copies exactly its own asset to the same relative path in the target.
"""

from __future__ import annotations

import logging
from pathlib import Path

from porter_cli.core.constants import OPTIONS_DIR
from porter_cli.errors import UnknownOptionError
from porter_cli.generation.models import GenerationRequest, OptionalAsset, SkeletonKind
from porter_cli.template.manager import copy_file, mirror
from porter_cli.template.resolver import resolve_source_path

logger = logging.getLogger(__name__)

MODULE_OPTIONS: tuple[OptionalAsset, ...] = (
    OptionalAsset("withTravisCI", ".travis.yml", help="Add a Travis CI configuration"),
    OptionalAsset("withCircleCI", ".circleci", is_directory=True, help="Add a CircleCI configuration"),
)

DATA_OBJECT_OPTIONS: tuple[OptionalAsset, ...] = (
    OptionalAsset("withHasOne", "src/Relations/HasOneRelation.php", help="Add a has_one relation class"),
    OptionalAsset("withHasMany", "src/Relations/HasManyRelation.php", help="Add a has_many relation class"),
    OptionalAsset(
        "withManyMany",
        "src/Relations/ManyMany",
        is_directory=True,
        help="Add a many_many relation with its join object",
    ),
    OptionalAsset(
        "withTraditionalArray",
        "phpcs.xml.dist",
        help="Add a code style ruleset enforcing array() syntax",
    ),
)

OPTION_TABLES: dict[SkeletonKind, tuple[OptionalAsset, ...]] = {
    SkeletonKind.MODULE: MODULE_OPTIONS,
    SkeletonKind.DATA_OBJECT: DATA_OBJECT_OPTIONS,
}


def options_for(kind: SkeletonKind) -> tuple[OptionalAsset, ...]:
    return OPTION_TABLES[kind]


def validate_flags(kind: SkeletonKind, flags: frozenset[str] | set[str]) -> None:
    """Reject flags that have no optional asset for ``kind``."""
    known = {asset.flag for asset in options_for(kind)}
    unknown = sorted(set(flags) - known)
    if unknown:
        raise UnknownOptionError(
            f"Unknown option(s) for {kind.label}: {', '.join(unknown)}. "
            f"Available: {', '.join(sorted(known))}"
        )


def apply_options(request: GenerationRequest, target_path: Path) -> list[OptionalAsset]:
    """Copy every optional asset whose flag is enabled on ``request``.

    Returns:
        The assets that were copied, in table order.
    """
    source_root = resolve_source_path(
        request.kind,
        request.framework_version,
        sub_dir=OPTIONS_DIR,
        asset_root=request.asset_root,
    )
    applied: list[OptionalAsset] = []
    for asset in options_for(request.kind):
        if asset.flag not in request.flags:
            continue
        source = source_root / asset.source
        dest = target_path / asset.source
        if asset.is_directory:
            mirror(source, dest)
        else:
            copy_file(source, dest)
        logger.info("Applied option %s (%s)", asset.flag, asset.source)
        applied.append(asset)
    return applied


__all__ = [
    "DATA_OBJECT_OPTIONS",
    "MODULE_OPTIONS",
    "OPTION_TABLES",
    "apply_options",
    "options_for",
    "validate_flags",
]
