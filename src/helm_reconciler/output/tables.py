"""Rich table builders for each command."""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from helm_reconciler.models.chart import ChartInfo
from helm_reconciler.models.repo import ReconcileResult


def chart_info_panel(info: ChartInfo) -> Panel:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")

    table.add_row("Chart", f"{info.name}-{info.version}")
    table.add_row("App Version", info.app_version or "-")
    table.add_row("API Version", info.api_version or "-")
    table.add_row("Type", info.chart_type or "application")
    table.add_row("Description", escape(info.description or "-"))

    if info.home:
        table.add_row("Home", info.home)
    if info.sources:
        table.add_row("Sources", ", ".join(info.sources))
    if info.maintainers:
        maintainers = ", ".join(
            m.name + (f" <{m.email}>" if m.email else "") for m in info.maintainers
        )
        table.add_row("Maintainers", maintainers)
    if info.dependencies:
        deps = ", ".join(f"{d.name}@{d.version}" for d in info.dependencies)
        table.add_row("Dependencies", deps)

    return Panel(table, title=f"[bold]Chart: {info.name}[/bold]", border_style="blue")


def problems_table(problems: list[str]) -> Table:
    table = Table(title="Chart Validation", expand=True)
    table.add_column("", width=3, no_wrap=True)
    table.add_column("Problem")
    for p in problems:
        table.add_row("[red bold]X[/red bold]", escape(p))
    return table


def reconcile_table(result: ReconcileResult) -> Table:
    table = Table(title="Helm Repositories", expand=False)
    table.add_column("Repository", style="bold white", no_wrap=True)
    table.add_column("Action", no_wrap=True)
    for name in result.added:
        table.add_row(name, "[green]added[/green]")
    for name in result.skipped:
        table.add_row(name, "[dim]unchanged[/dim]")
    return table
