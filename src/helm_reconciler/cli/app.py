"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="hrec",
    help="Helm Reconciler - Keep helm repositories in sync and validate charts before deploying.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every helm invocation"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _register_commands() -> None:
    from helm_reconciler.cli.commands.repos_cmd import repos
    from helm_reconciler.cli.commands.validate_cmd import validate
    from helm_reconciler.cli.commands.chart_cmd import chart
    from helm_reconciler.cli.commands.deps_cmd import deps
    from helm_reconciler.cli.commands.version_cmd import helm_version

    app.command(name="repos", help="Reconcile helm repositories")(repos)
    app.command(name="validate", help="Validate chart availability")(validate)
    app.command(name="chart", help="Show chart metadata")(chart)
    app.command(name="deps", help="Update local chart dependencies")(deps)
    app.command(name="helm-version", help="Show helm version and check a constraint")(helm_version)


_register_commands()


def main() -> None:
    app()
