"""Data models for helm-reconciler."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class ChartKind(enum.Enum):
    LOCAL = "local"
    REMOTE = "remote"


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
