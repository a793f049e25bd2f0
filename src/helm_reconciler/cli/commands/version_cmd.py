"""hrec helm-version - Show helm version and evaluate a constraint."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from helm_reconciler.cli.options import exit_on_error
from helm_reconciler.config.settings import settings
from helm_reconciler.core.helm_command import HelmCommandRunner
from helm_reconciler.core.version_gate import VersionGate
from helm_reconciler.utils.version_compare import extract_helm_version

console = Console()


def helm_version(
    constraint: Optional[str] = typer.Option(
        None, "--constraint", "-c", help="Version range to check, e.g. '>=3.3.2'",
    ),
) -> None:
    """Print the helm client version and whether it satisfies a constraint."""
    constraint = constraint or settings.force_update_constraint
    with exit_on_error():
        gate = VersionGate(HelmCommandRunner())
        version = extract_helm_version(gate.helm_version())
        ok = gate.satisfies(constraint)

    console.print(f"Helm version: [bold]{version}[/bold]")
    if ok:
        console.print(f"[green]satisfies {constraint}[/green]")
    else:
        console.print(f"[yellow]does not satisfy {constraint}[/yellow]")
        raise typer.Exit(code=1)
