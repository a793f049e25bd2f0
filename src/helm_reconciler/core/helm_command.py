"""Synchronous execution of helm CLI invocations."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from typing import Sequence

from helm_reconciler.config.settings import settings
from helm_reconciler.core.errors import HelmFatalError
from helm_reconciler.models import CommandResult

logger = logging.getLogger(__name__)

_SECRET_FLAGS = frozenset({"--username", "--password"})


def redact_args(args: Sequence[str]) -> list[str]:
    """Mask the value following any credential flag."""
    redacted: list[str] = []
    hide_next = False
    for arg in args:
        redacted.append("***" if hide_next else arg)
        hide_next = arg in _SECRET_FLAGS
    return redacted


class HelmCommandRunner:
    """Runs the helm binary and hands back exit code and captured output.

    A non-zero exit code is returned to the caller, never raised.
    """

    def __init__(self, helm_bin: str | None = None, timeout: float | None = None):
        self.helm_bin = helm_bin or settings.helm_bin
        self.timeout = timeout if timeout is not None else settings.command_timeout

    def execute(self, args: Sequence[str], purpose: str = "") -> CommandResult:
        command = [self.helm_bin, *args]
        if purpose:
            logger.debug("%s", purpose)
        logger.debug("Running %s", " ".join(redact_args(command)))
        try:
            completed = subprocess.run(
                command,
                check=False,
                text=True,
                capture_output=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise HelmFatalError(f"Helm executable '{self.helm_bin}' was not found in PATH") from e
        except subprocess.TimeoutExpired as e:
            raise HelmFatalError(
                f"Helm command timed out after {self.timeout}s: {' '.join(redact_args(command))}"
            ) from e
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


@dataclass
class HelmCommand:
    """Description of one helm invocation and why it is made."""

    args: list[str] = field(default_factory=list)
    description: str = ""

    def exec(self, runner: HelmCommandRunner) -> CommandResult:
        return runner.execute(self.args, self.description)


def helm_cmd(args: Sequence[str], description: str) -> HelmCommand:
    return HelmCommand(args=list(args), description=description)
