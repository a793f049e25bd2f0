"""Shared CLI options and helpers."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import typer

from helm_reconciler.core.errors import HelmReconcilerError

OutputOption = typer.Option("table", "--output", "-o", help="Output format: table, json, yaml")
StateFileArgument = typer.Argument(help="Desired state YAML file", exists=True, dir_okay=False)


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn reconciler errors into a message on stderr and exit code 1."""
    try:
        yield
    except HelmReconcilerError as e:
        typer.secho(str(e), err=True, fg=typer.colors.RED)
        raise typer.Exit(code=1) from e
