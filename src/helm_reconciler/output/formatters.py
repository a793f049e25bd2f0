"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

import yaml
from rich.console import Console

from helm_reconciler.models.chart import ChartInfo
from helm_reconciler.models.repo import ReconcileResult

console = Console()


def _print_yaml(data: Any) -> None:
    # Messages carry bracketed labels such as "apps [web]" that are not markup
    console.print(yaml.dump(data, default_flow_style=False), markup=False, highlight=False, soft_wrap=True)


def _chart_info_to_dict(info: ChartInfo) -> dict[str, Any]:
    data = asdict(info)
    extra = data.pop("extra")
    data.update(extra)
    return data


def output_chart_info(info: ChartInfo, fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps(_chart_info_to_dict(info), indent=2, default=str))
    elif fmt == "yaml":
        _print_yaml(_chart_info_to_dict(info))
    else:
        from helm_reconciler.output.tables import chart_info_panel
        console.print(chart_info_panel(info))


def output_problems(problems: list[str], fmt: str) -> None:
    if fmt == "json":
        console.print_json(json.dumps({"problems": problems}, indent=2))
    elif fmt == "yaml":
        _print_yaml({"problems": problems})
    elif problems:
        from helm_reconciler.output.tables import problems_table
        console.print(problems_table(problems))
        console.print(f"\n[red]{len(problems)} problem(s) found[/red]")
    else:
        console.print("[green]All charts are available[/green]")


def output_reconcile(result: ReconcileResult, fmt: str) -> None:
    if fmt in ("json", "yaml"):
        data = asdict(result)
        if fmt == "json":
            console.print_json(json.dumps(data, indent=2))
        else:
            _print_yaml(data)
        return

    from helm_reconciler.output.tables import reconcile_table
    console.print(reconcile_table(result))
    if result.changed:
        console.print(f"\n[yellow]{len(result.added)} repository(ies) added[/yellow]")
    else:
        console.print("\n[green]Repositories already up to date[/green]")
