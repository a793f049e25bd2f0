"""
Pytest configuration and fixtures for helm-reconciler tests.

The core talks to helm only through HelmCommandRunner.execute, so tests
replace it with a scripted fake that records every argument list and answers
by subcommand prefix.
"""
import threading
from typing import Dict, List, Sequence, Tuple

import pytest

from helm_reconciler.core.helm_command import HelmCommandRunner
from helm_reconciler.models import CommandResult


class FakeHelmRunner(HelmCommandRunner):
    """Answers helm invocations from a table of argument prefixes."""

    def __init__(self):
        super().__init__(helm_bin="helm")
        self.responses: Dict[Tuple[str, ...], CommandResult] = {}
        self.calls: List[List[str]] = []
        self.purposes: List[str] = []
        self._lock = threading.Lock()

    def respond(self, prefix: Sequence[str], exit_code: int = 0, stdout: str = "", stderr: str = ""):
        self.responses[tuple(prefix)] = CommandResult(exit_code=exit_code, stdout=stdout, stderr=stderr)
        return self

    def execute(self, args, purpose=""):
        args = list(args)
        with self._lock:
            self.calls.append(args)
            self.purposes.append(purpose)
        best = None
        for prefix, result in self.responses.items():
            if tuple(args[:len(prefix)]) == prefix and (best is None or len(prefix) > len(best[0])):
                best = (prefix, result)
        if best is None:
            return CommandResult(exit_code=0)
        return best[1]

    def calls_to(self, *prefix: str) -> List[List[str]]:
        return [c for c in self.calls if tuple(c[:len(prefix)]) == prefix]


@pytest.fixture
def runner() -> FakeHelmRunner:
    return FakeHelmRunner()


@pytest.fixture
def helm3(runner: FakeHelmRunner) -> FakeHelmRunner:
    """A runner that reports a helm version new enough for --force-update."""
    runner.respond(["version"], stdout="v3.4.0+g7090a89\n")
    runner.respond(["repo", "list"], stdout="[]")
    return runner


@pytest.fixture
def chart_dir(tmp_path):
    """A local chart directory on disk."""
    path = tmp_path / "charts" / "myapp"
    path.mkdir(parents=True)
    (path / "Chart.yaml").write_text("apiVersion: v2\nname: myapp\nversion: 1.2.3\n")
    return path
