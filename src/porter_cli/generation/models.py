"""Value objects describing a single scaffold generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from porter_cli.core.constants import MODULE_NAME_TOKEN, MODULE_TYPE_TOKEN, NAMESPACE_TOKEN


class SkeletonKind(str, Enum):
    """Skeleton flavours; the value is the asset folder slug."""

    MODULE = "skeleton"
    DATA_OBJECT = "dataobject"

    @property
    def label(self) -> str:
        return "module" if self is SkeletonKind.MODULE else "DataObject"


class FrameworkVersion(str, Enum):
    LEGACY = "ss3"
    CURRENT = "ss4"


class PackageType(str, Enum):
    VENDOR_MODULE = "silverstripe-vendormodule"
    MODULE = "silverstripe-module"


@dataclass(frozen=True)
class OptionalAsset:
    """An add-on copied from the options directory when ``flag`` is set."""

    flag: str
    source: str
    is_directory: bool = False
    help: str = ""


ManifestPatch = tuple[tuple[str, str], ...]


@dataclass(frozen=True)
class GenerationRequest:
    """Everything needed to generate one skeleton.

    ``base_path`` is the directory the skeleton folder is created in; the
    folder itself is named after the part of ``name`` following the owner.
    """

    kind: SkeletonKind
    name: str
    namespace: str
    base_path: Path
    framework_version: FrameworkVersion = FrameworkVersion.CURRENT
    package_type: PackageType = PackageType.VENDOR_MODULE
    flags: frozenset[str] = field(default_factory=frozenset)
    asset_root: Path | None = None

    @property
    def manifest_patch(self) -> ManifestPatch:
        return (
            (MODULE_NAME_TOKEN, self.name),
            (MODULE_TYPE_TOKEN, self.package_type.value),
            (NAMESPACE_TOKEN, self.namespace),
        )


__all__ = [
    "FrameworkVersion",
    "GenerationRequest",
    "ManifestPatch",
    "OptionalAsset",
    "PackageType",
    "SkeletonKind",
]
