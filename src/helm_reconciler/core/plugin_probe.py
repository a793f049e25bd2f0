"""Detect installed helm plugins."""

from __future__ import annotations

import logging

from helm_reconciler.core.helm_command import HelmCommandRunner, helm_cmd

logger = logging.getLogger(__name__)


class PluginProbe:
    def __init__(self, runner: HelmCommandRunner):
        self.runner = runner

    def exists(self, plugin: str) -> bool:
        """Return True if ``plugin`` shows up in ``helm plugin list``.

        Matching is by substring, so ``diff`` also matches ``diff-extra``.
        """
        cmd = helm_cmd(["plugin", "list"], f"Validating that [ {plugin} ] is installed")
        result = cmd.exec(self.runner)
        if not result.ok:
            logger.debug("helm plugin list failed: %s", result.stderr.strip())
            return False
        return plugin in result.stdout
