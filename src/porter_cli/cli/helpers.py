"""Shared console and error reporting for porter commands."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from porter_cli.errors import PorterError
from porter_cli.generation.models import GenerationRequest
from porter_cli.generation.pipeline import ScaffoldPipeline
from porter_cli.template.resolver import get_asset_root

console = Console()


def report_progress(line: str) -> None:
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def run_generation(request: GenerationRequest) -> Path:
    """Run ``request`` and exit with status 1 on the first porter error."""
    pipeline = ScaffoldPipeline(request, reporter=report_progress)
    try:
        return pipeline.run()
    except PorterError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


def resolve_template_root(template_root: Path | None) -> Path | None:
    """Resolve a --template-root value, falling back like the environment tiers."""
    if template_root is None:
        return None
    return get_asset_root(template_root)


def parse_flags(**enabled: bool) -> frozenset[str]:
    """Collect the names of the flags that were switched on."""
    return frozenset(name for name, value in enabled.items() if value)


__all__ = ["console", "parse_flags", "report_progress", "resolve_template_root", "run_generation"]
