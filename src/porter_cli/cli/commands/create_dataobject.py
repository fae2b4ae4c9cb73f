"""``porter create-dataobject`` command."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from porter_cli.cli.helpers import parse_flags, resolve_template_root, run_generation
from porter_cli.generation.models import GenerationRequest, SkeletonKind


def create_dataobject(
    name: str = typer.Argument(..., help="DataObject package name in owner/name form"),
    path: Path = typer.Argument(..., help="Directory to create the DataObject in"),
    namespace: str = typer.Argument(..., help="PHP namespace with doubled backslashes"),
    with_has_one: bool = typer.Option(False, "--withHasOne", help="Add a has_one relation class"),
    with_has_many: bool = typer.Option(False, "--withHasMany", help="Add a has_many relation class"),
    with_many_many: bool = typer.Option(False, "--withManyMany", help="Add a many_many relation with a join object"),
    with_traditional_array: bool = typer.Option(
        False,
        "--withTraditionalArray",
        help="Add a code style ruleset enforcing array() syntax",
    ),
    template_root: Optional[Path] = typer.Option(
        None,
        "--template-root",
        help="Directory containing assets/ and options/ to use instead of the bundled skeletons",
    ),
) -> None:
    """Sets up a new SilverStripe dataobject skeleton at the given path."""
    request = GenerationRequest(
        kind=SkeletonKind.DATA_OBJECT,
        name=name,
        namespace=namespace,
        base_path=path,
        flags=parse_flags(
            withHasOne=with_has_one,
            withHasMany=with_has_many,
            withManyMany=with_many_many,
            withTraditionalArray=with_traditional_array,
        ),
        asset_root=resolve_template_root(template_root),
    )
    run_generation(request)


__all__ = ["create_dataobject"]
