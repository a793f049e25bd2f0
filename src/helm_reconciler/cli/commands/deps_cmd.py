"""hrec deps <path> - Update dependencies of a local chart."""

from __future__ import annotations

import typer
from rich.console import Console

from helm_reconciler.cli.options import exit_on_error
from helm_reconciler.core.chart_info import ChartInfoResolver
from helm_reconciler.core.helm_command import HelmCommandRunner

console = Console()


def deps(
    chart_path: str = typer.Argument(help="Path to a local chart"),
) -> None:
    """Run helm dependency update for a local chart."""
    with exit_on_error():
        with console.status(f"[bold cyan]Updating dependencies of {chart_path}…"):
            ChartInfoResolver(HelmCommandRunner()).update_dependencies(chart_path)
    console.print(f"[green]Dependencies updated for {chart_path}[/green]")
