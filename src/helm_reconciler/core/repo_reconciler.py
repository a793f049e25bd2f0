"""Bring helm's registered repositories in line with a desired set."""

from __future__ import annotations

import json
import logging
from typing import Callable, Mapping

from helm_reconciler.config.settings import settings
from helm_reconciler.core import gcs_auth
from helm_reconciler.core.errors import HelmFatalError, RepoError
from helm_reconciler.core.helm_command import HelmCommandRunner, helm_cmd
from helm_reconciler.core.plugin_probe import PluginProbe
from helm_reconciler.core.version_gate import VersionGate
from helm_reconciler.models.repo import DesiredRepository, ReconcileResult, RepositoryRecord

logger = logging.getLogger(__name__)

Authenticator = Callable[[], tuple[str, Exception | None]]

_EMPTY_LIST_MARKER = "no repositories to show"


class RepoReconciler:
    """Adds missing or changed repositories, then refreshes the index once.

    Helm treats ``repo add`` for an existing name as an update, so only
    repositories whose URL differs from what helm already has are added.
    A failure midway leaves earlier additions in place.
    """

    def __init__(
        self,
        runner: HelmCommandRunner,
        version_gate: VersionGate | None = None,
        plugin_probe: PluginProbe | None = None,
        authenticate: Authenticator | None = None,
    ):
        self.runner = runner
        self.version_gate = version_gate or VersionGate(runner)
        self.plugin_probe = plugin_probe or PluginProbe(runner)
        self.authenticate = authenticate or gcs_auth.authenticate

    def plan(self, desired: Mapping[str, str]) -> list[DesiredRepository]:
        """Parse every desired repository, failing before any helm call is made."""
        return [DesiredRepository.parse(name, url) for name, url in desired.items()]

    def list_repositories(self) -> dict[str, str]:
        """Return the repositories helm knows about as {name: url}."""
        cmd = helm_cmd(["repo", "list", "--output", "json"], "Listing helm repositories")
        result = cmd.exec(self.runner)
        if not result.ok:
            if _EMPTY_LIST_MARKER in result.stderr:
                return {}
            raise RepoError(f"while listing helm repositories: {result.stderr.strip()}")

        try:
            data = json.loads(result.stdout or "[]")
        except json.JSONDecodeError as e:
            raise HelmFatalError(f"failed to unmarshal Helm CLI output: {e}") from e
        records = [RepositoryRecord.from_dict(r) for r in data or [] if isinstance(r, dict)]
        return {r.name: r.url for r in records}

    def reconcile(self, desired: Mapping[str, str]) -> ReconcileResult:
        repos = self.plan(desired)
        existing = self.list_repositories()

        add_flags: list[str] = []
        if self.version_gate.satisfies(settings.force_update_constraint):
            add_flags.append("--force-update")

        outcome = ReconcileResult()
        for repo in repos:
            if repo.is_gcs:
                self._authenticate_gcs(repo)

            if existing.get(repo.name) == repo.url:
                logger.debug("Repository %s already registered at %s", repo.name, repo.url)
                outcome.skipped.append(repo.name)
                continue

            cmd = helm_cmd(
                ["repo", "add", *add_flags, repo.name, repo.url, *repo.credential_args()],
                f"Adding helm repository [ {repo.name} ]",
            )
            result = cmd.exec(self.runner)
            if not result.ok:
                raise RepoError(
                    f"While adding helm repository [{repo.name}]: {result.stderr.strip()}"
                )
            logger.info("Added helm repository %s", repo.name)
            outcome.added.append(repo.name)

        if repos:
            result = helm_cmd(["repo", "update"], "Updating helm repositories").exec(self.runner)
            if not result.ok:
                raise RepoError("While updating helm repos : " + result.stderr.strip())
            outcome.refreshed = True
        return outcome

    def _authenticate_gcs(self, repo: DesiredRepository) -> None:
        if not self.plugin_probe.exists(settings.gcs_plugin_name):
            raise HelmFatalError(
                f"repository {repo.url} can't be used: helm-gcs plugin is missing"
            )
        msg, err = self.authenticate()
        if err is not None:
            raise HelmFatalError(msg)
        logger.debug("GCS auth for %s: %s", repo.name, msg)
