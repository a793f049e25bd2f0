"""Load the desired state file used by the CLI.

Expected shape::

    helmRepos:
      bitnami: https://charts.bitnami.com/bitnami
    apps:
      web:
        chart: bitnami/nginx
        version: 15.0.0
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from helm_reconciler.core.errors import StateFileError
from helm_reconciler.models.chart import ChartRequest


@dataclass
class DesiredState:
    helm_repos: dict[str, str] = field(default_factory=dict)
    apps: dict[str, dict] = field(default_factory=dict)

    def chart_requests(self) -> list[ChartRequest]:
        """One request per distinct (chart, version), naming every app that uses it."""
        grouped: dict[tuple[str, str], list[str]] = {}
        for label, app in self.apps.items():
            key = (app["chart"], app["version"])
            grouped.setdefault(key, []).append(label)
        return [
            ChartRequest(app_label=", ".join(labels), chart=chart, version=version)
            for (chart, version), labels in grouped.items()
        ]


def load_state(path: Path) -> DesiredState:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise StateFileError(f"cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise StateFileError(f"invalid YAML in {path}: {e}") from e

    if data is None:
        return DesiredState()
    if not isinstance(data, dict):
        raise StateFileError(f"{path}: top level must be a mapping")

    repos = data.get("helmRepos") or {}
    if not isinstance(repos, dict):
        raise StateFileError(f"{path}: helmRepos must map repository names to URLs")

    raw_apps = data.get("apps") or {}
    if not isinstance(raw_apps, dict):
        raise StateFileError(f"{path}: apps must map app names to chart settings")

    apps: dict[str, dict] = {}
    for label, app in raw_apps.items():
        if not isinstance(app, dict) or not app.get("chart"):
            raise StateFileError(f"{path}: app '{label}' has no chart")
        # Unquoted versions such as 1.10 load as floats
        version = app.get("version")
        apps[str(label)] = {
            "chart": str(app["chart"]),
            "version": "" if version is None else str(version),
        }

    return DesiredState(
        helm_repos={str(k): str(v) for k, v in repos.items()},
        apps=apps,
    )
