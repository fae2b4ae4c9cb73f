"""
Porter CLI - scaffolding for SilverStripe modules and DataObjects.

Usage:
    porter create-module vendor/my-module "Vendor\\\\MyModule\\\\"
    porter create-dataobject vendor/my-object ./app "Vendor\\\\Objects\\\\"
    porter list-options
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from porter_cli.cli.commands import register_commands

__version__ = "0.1.0"

TAGLINE = "Porter - SilverStripe module and DataObject scaffolding"

console = Console()

app = typer.Typer(
    name="porter",
    help="Scaffold SilverStripe modules and DataObjects from bundled skeletons",
    add_completion=False,
    invoke_without_command=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"porter {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every copy and rewrite"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the porter version and exit",
    ),
) -> None:
    """Show the tagline when no subcommand is provided."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None and "--help" not in sys.argv and "-h" not in sys.argv:
        console.print(Text(TAGLINE, style="italic bright_yellow"))
        console.print("[dim]Run 'porter --help' for usage information[/dim]")


register_commands(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
