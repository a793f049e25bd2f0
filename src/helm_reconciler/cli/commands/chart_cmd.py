"""hrec chart <chart> - Show chart metadata."""

from __future__ import annotations

import typer

from helm_reconciler.cli.options import OutputOption, exit_on_error
from helm_reconciler.core.chart_info import ChartInfoResolver
from helm_reconciler.core.helm_command import HelmCommandRunner
from helm_reconciler.output.formatters import output_chart_info


def chart(
    chart_ref: str = typer.Argument(help="Chart path or repo/chart name"),
    version: str = typer.Option("*", "--version", help="Chart version constraint"),
    output: str = OutputOption,
) -> None:
    """Show metadata of the newest chart matching a version constraint."""
    with exit_on_error():
        info = ChartInfoResolver(HelmCommandRunner()).resolve(chart_ref, version)
    output_chart_info(info, output)
