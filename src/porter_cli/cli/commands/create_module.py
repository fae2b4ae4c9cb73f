"""``porter create-module`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from porter_cli.cli.helpers import parse_flags, resolve_template_root, run_generation
from porter_cli.generation.models import (
    FrameworkVersion,
    GenerationRequest,
    PackageType,
    SkeletonKind,
)


def create_module(
    module_name: str = typer.Argument(..., metavar="MODULE-NAME", help="Module name in owner/name form"),
    module_namespace: str = typer.Argument(
        ...,
        metavar="MODULE-NAMESPACE",
        help="PHP namespace with doubled backslashes, e.g. Vendor\\\\Module\\\\",
    ),
    non_vendor: bool = typer.Option(False, "--nonVendor", help="Install as silverstripe-module instead of a vendor module"),
    ss3: bool = typer.Option(False, "--ss3", help="Use the SilverStripe 3 skeleton"),
    with_travis_ci: bool = typer.Option(False, "--withTravisCI", help="Add a Travis CI configuration"),
    with_circle_ci: bool = typer.Option(False, "--withCircleCI", help="Add a CircleCI configuration"),
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        help="Directory to create the module in (defaults to the current directory)",
    ),
    template_root: Optional[Path] = typer.Option(
        None,
        "--template-root",
        help="Directory containing assets/ and options/ to use instead of the bundled skeletons",
    ),
) -> None:
    """Sets up a new SilverStripe module skeleton at a path you specify (defaults to the current directory)."""
    request = GenerationRequest(
        kind=SkeletonKind.MODULE,
        name=module_name,
        namespace=module_namespace,
        base_path=path if path is not None else Path.cwd(),
        framework_version=FrameworkVersion.LEGACY if ss3 else FrameworkVersion.CURRENT,
        package_type=PackageType.MODULE if non_vendor else PackageType.VENDOR_MODULE,
        flags=parse_flags(withTravisCI=with_travis_ci, withCircleCI=with_circle_ci),
        asset_root=resolve_template_root(template_root),
    )
    run_generation(request)


__all__ = ["create_module"]
