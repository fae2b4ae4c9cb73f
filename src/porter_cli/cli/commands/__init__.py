"""CLI command modules for porter."""

from __future__ import annotations

import typer

from . import create_dataobject, create_module, list_options


def register_commands(app: typer.Typer) -> None:
    """Attach every porter command to ``app``."""
    app.command(name="create-module")(create_module.create_module)
    app.command(name="create-dataobject")(create_dataobject.create_dataobject)
    app.command(name="list-options")(list_options.list_options)


__all__ = ["register_commands"]
