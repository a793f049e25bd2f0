"""Chart models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from helm_reconciler.models import ChartKind

_KNOWN_KEYS = frozenset({
    "name",
    "version",
    "appVersion",
    "description",
    "apiVersion",
    "type",
    "home",
    "icon",
    "keywords",
    "sources",
    "maintainers",
    "dependencies",
    "annotations",
})


@dataclass
class Maintainer:
    name: str = ""
    email: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> Maintainer:
        return cls(
            name=d.get("name", ""),
            email=d.get("email", ""),
            url=d.get("url", ""),
        )


@dataclass
class ChartDependency:
    name: str = ""
    version: str = ""
    repository: str = ""
    condition: str = ""
    alias: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> ChartDependency:
        return cls(
            name=d.get("name", ""),
            version=str(d.get("version", "")),
            repository=d.get("repository", ""),
            condition=d.get("condition", ""),
            alias=d.get("alias", ""),
        )


@dataclass
class ChartInfo:
    """Chart metadata as printed by ``helm show chart``."""

    name: str = ""
    version: str = ""
    app_version: str = ""
    description: str = ""
    api_version: str = ""
    chart_type: str = ""
    home: str = ""
    icon: str = ""
    keywords: list[str] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    maintainers: list[Maintainer] = field(default_factory=list)
    dependencies: list[ChartDependency] = field(default_factory=list)
    annotations: dict[str, str] = field(default_factory=dict)
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict) -> ChartInfo:
        if not d:
            return cls()
        # YAML turns unquoted versions like 1.10 into floats
        return cls(
            name=str(d.get("name", "")),
            version=str(d.get("version", "")),
            app_version=str(d.get("appVersion", "")),
            description=d.get("description", ""),
            api_version=d.get("apiVersion", ""),
            chart_type=d.get("type", ""),
            home=d.get("home", ""),
            icon=d.get("icon", ""),
            keywords=d.get("keywords") or [],
            sources=d.get("sources") or [],
            maintainers=[Maintainer.from_dict(m) for m in d.get("maintainers") or []],
            dependencies=[ChartDependency.from_dict(dep) for dep in d.get("dependencies") or []],
            annotations=d.get("annotations") or {},
            extra={k: v for k, v in d.items() if k not in _KNOWN_KEYS},
        )


@dataclass(frozen=True)
class ChartReference:
    """A chart reference classified as a local path or a ``repo/chart`` name."""

    ref: str
    kind: ChartKind

    @property
    def is_local(self) -> bool:
        return self.kind is ChartKind.LOCAL


@dataclass(frozen=True)
class ChartRequest:
    """One chart to validate on behalf of the apps that use it."""

    app_label: str
    chart: str
    version: str = ""
