"""Gate optional helm flags on the installed helm version."""

from __future__ import annotations

import logging

from helm_reconciler.core.errors import HelmFatalError
from helm_reconciler.core.helm_command import HelmCommandRunner, helm_cmd
from helm_reconciler.utils.version_compare import extract_helm_version, satisfies

logger = logging.getLogger(__name__)


class VersionGate:
    def __init__(self, runner: HelmCommandRunner):
        self.runner = runner

    def helm_version(self) -> str:
        """Return the raw client version reported by helm.

        A helm binary that cannot report its own version is unusable, so a
        failure here is fatal.
        """
        result = helm_cmd(["version", "--short", "-c"], "Checking Helm version").exec(self.runner)
        if not result.ok:
            raise HelmFatalError("While checking helm version: " + result.stderr.strip())
        return result.stdout

    def satisfies(self, constraint: str) -> bool:
        version = extract_helm_version(self.helm_version())
        ok = satisfies(version, constraint)
        logger.debug("Helm version %s against %s: %s", version, constraint, ok)
        return ok
