"""
Unit tests for the helm command runner
"""
import subprocess

import pytest

from helm_reconciler.config.settings import settings
from helm_reconciler.core.errors import HelmFatalError
from helm_reconciler.core.helm_command import HelmCommandRunner, helm_cmd, redact_args


class TestHelmCommandRunner:
    """Tests for subprocess handling"""

    def test_returns_result_without_raising(self, monkeypatch):
        seen = {}

        def fake_run(command, **kwargs):
            seen["command"] = command
            seen["kwargs"] = kwargs
            return subprocess.CompletedProcess(command, 1, stdout="out", stderr="err")

        monkeypatch.setattr(subprocess, "run", fake_run)
        result = HelmCommandRunner(helm_bin="/usr/local/bin/helm").execute(["repo", "list"], "Listing")
        assert result.exit_code == 1
        assert result.stdout == "out"
        assert result.stderr == "err"
        assert not result.ok
        assert seen["command"] == ["/usr/local/bin/helm", "repo", "list"]
        assert seen["kwargs"]["check"] is False

    def test_no_timeout_by_default(self, monkeypatch):
        seen = {}

        def fake_run(command, **kwargs):
            seen.update(kwargs)
            return subprocess.CompletedProcess(command, 0, stdout=None, stderr=None)

        monkeypatch.setattr(subprocess, "run", fake_run)
        monkeypatch.setattr(settings, "command_timeout", None)
        result = HelmCommandRunner().execute(["version"])
        assert seen["timeout"] is None
        assert result.stdout == ""

    def test_missing_binary_is_fatal(self, monkeypatch):
        def fake_run(command, **kwargs):
            raise FileNotFoundError(command[0])

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(HelmFatalError, match="not found in PATH"):
            HelmCommandRunner(helm_bin="nohelm").execute(["version"])

    def test_timeout_is_fatal(self, monkeypatch):
        def fake_run(command, **kwargs):
            raise subprocess.TimeoutExpired(command, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(HelmFatalError, match="timed out"):
            HelmCommandRunner(timeout=0.5).execute(["repo", "update"])


class TestHelmCmd:
    def test_exec_passes_description(self, runner):
        helm_cmd(["plugin", "list"], "Checking plugins").exec(runner)
        assert runner.calls == [["plugin", "list"]]
        assert runner.purposes == ["Checking plugins"]


class TestRedactArgs:
    def test_masks_credential_values(self):
        args = ["helm", "repo", "add", "p", "https://h", "--username", "user", "--password", "pw"]
        assert redact_args(args) == ["helm", "repo", "add", "p", "https://h", "--username", "***", "--password", "***"]

    def test_timeout_message_hides_password(self, monkeypatch):
        def fake_run(command, **kwargs):
            raise subprocess.TimeoutExpired(command, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)
        with pytest.raises(HelmFatalError) as excinfo:
            HelmCommandRunner(timeout=1).execute(["repo", "add", "p", "https://h", "--password", "pw"])
        assert "pw" not in str(excinfo.value).split()
