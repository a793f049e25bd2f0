"""hrec repos <file> - Reconcile helm repositories."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from helm_reconciler.cli.options import OutputOption, StateFileArgument, exit_on_error
from helm_reconciler.config.state_file import load_state
from helm_reconciler.core.helm_command import HelmCommandRunner
from helm_reconciler.core.repo_reconciler import RepoReconciler
from helm_reconciler.output.formatters import output_reconcile

console = Console()


def repos(
    state_file: Path = StateFileArgument,
    output: str = OutputOption,
) -> None:
    """Add missing helm repositories and refresh the index."""
    with exit_on_error():
        state = load_state(state_file)
        if not state.helm_repos:
            console.print("[dim]No helm repositories declared.[/dim]")
            return
        with console.status("[bold cyan]Reconciling helm repositories…"):
            result = RepoReconciler(HelmCommandRunner()).reconcile(state.helm_repos)

    output_reconcile(result, output)
