"""hrec validate <file> - Check that every app's chart can be found."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from helm_reconciler.cli.options import OutputOption, StateFileArgument, exit_on_error
from helm_reconciler.config.state_file import load_state
from helm_reconciler.core.chart_validator import ChartValidator, validate_charts
from helm_reconciler.core.helm_command import HelmCommandRunner
from helm_reconciler.output.formatters import output_problems

console = Console()


def validate(
    state_file: Path = StateFileArgument,
    output: str = OutputOption,
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, help="Concurrent helm invocations"),
) -> None:
    """Validate chart availability and versions for all declared apps."""
    with exit_on_error():
        state = load_state(state_file)
        requests = state.chart_requests()
        if not requests:
            console.print("[dim]No apps declared.[/dim]")
            return

        with console.status("[bold cyan]Validating charts…") as status:

            def on_progress(i: int, total: int, chart: str) -> None:
                status.update(f"[bold cyan]Validating charts… [dim]({i}/{total})[/dim] {chart}")

            validator = ChartValidator(HelmCommandRunner())
            problems = validate_charts(validator, requests, max_workers=workers, on_progress=on_progress)

    output_problems(problems, output)
    if problems:
        raise typer.Exit(code=1)
