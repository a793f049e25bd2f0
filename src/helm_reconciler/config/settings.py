"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _default_helm_bin() -> str:
    return os.environ.get("HELM_BIN", "") or "helm"


def _default_max_workers() -> int:
    raw = os.environ.get("HREC_MAX_WORKERS", "")
    if raw.isdigit() and int(raw) > 0:
        return int(raw)
    return 8


def _default_command_timeout() -> float | None:
    """Return the per-invocation timeout in seconds.

    Helm invocations are not time-limited unless HREC_COMMAND_TIMEOUT is set
    to a positive number.
    """
    raw = os.environ.get("HREC_COMMAND_TIMEOUT", "")
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


@dataclass
class Settings:
    helm_bin: str = field(default_factory=_default_helm_bin)
    max_workers: int = field(default_factory=_default_max_workers)
    command_timeout: float | None = field(default_factory=_default_command_timeout)
    force_update_constraint: str = ">=3.3.2"
    gcs_plugin_name: str = "gcs"
    gcs_scheme: str = "gs://"
    default_output: str = "table"  # "table", "json" or "yaml"


# Global singleton
settings = Settings()
