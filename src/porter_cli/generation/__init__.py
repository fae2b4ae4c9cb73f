"""Generation requests and the scaffold pipeline."""

from .models import (
    FrameworkVersion,
    GenerationRequest,
    OptionalAsset,
    PackageType,
    SkeletonKind,
)

__all__ = [
    "FrameworkVersion",
    "GenerationRequest",
    "OptionalAsset",
    "PackageType",
    "SkeletonKind",
]
