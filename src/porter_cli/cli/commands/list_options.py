"""``porter list-options`` command."""

from __future__ import annotations

from rich.table import Table

from porter_cli.cli.helpers import console
from porter_cli.generation.models import SkeletonKind
from porter_cli.template.options import options_for

COMMAND_NAMES = {
    SkeletonKind.MODULE: "create-module",
    SkeletonKind.DATA_OBJECT: "create-dataobject",
}


def list_options() -> None:
    """List the optional assets each create command can add."""
    for kind in SkeletonKind:
        table = Table(title=f"porter {COMMAND_NAMES[kind]}", title_justify="left")
        table.add_column("Flag", style="bold cyan", no_wrap=True)
        table.add_column("Copies")
        table.add_column("Description", style="dim")

        for asset in options_for(kind):
            copies = f"{asset.source}/" if asset.is_directory else asset.source
            table.add_row(f"--{asset.flag}", copies, asset.help)

        console.print(table)


__all__ = ["list_options"]
