"""Resolve chart metadata and maintain local chart dependencies."""

from __future__ import annotations

import logging

import yaml

from helm_reconciler.core.chart_ref import classify_chart
from helm_reconciler.core.errors import ChartNotFoundError, HelmCommandError, HelmFatalError
from helm_reconciler.core.helm_command import HelmCommandRunner, helm_cmd
from helm_reconciler.models.chart import ChartInfo

logger = logging.getLogger(__name__)


class ChartInfoResolver:
    def __init__(self, runner: HelmCommandRunner):
        self.runner = runner

    def resolve(self, chart: str, version: str) -> ChartInfo:
        """Fetch metadata of the newest chart matching ``version``.

        Raises ChartNotFoundError when helm has no such chart. Helm output
        that cannot be decoded after a successful run is treated as a broken
        environment and raises HelmFatalError.
        """
        if classify_chart(chart).is_local:
            logger.info("Chart [ %s ] with version [ %s ] was found locally.", chart, version)

        cmd = helm_cmd(
            ["show", "chart", chart, "--version", version],
            f"Getting latest non-local chart's version {chart}-{version}",
        )
        result = cmd.exec(self.runner)
        if not result.ok:
            raise ChartNotFoundError(
                f"Chart [ {chart} ] with version [ {version} ] is specified "
                "but not found in the helm repositories"
            )

        try:
            data = yaml.safe_load(result.stdout)
        except yaml.YAMLError as e:
            raise HelmFatalError(f"failed to decode chart metadata for {chart}: {e}") from e
        if data is not None and not isinstance(data, dict):
            raise HelmFatalError(
                f"failed to decode chart metadata for {chart}: expected a mapping, "
                f"got {type(data).__name__}"
            )
        return ChartInfo.from_dict(data or {})

    def update_dependencies(self, chart_path: str) -> None:
        cmd = helm_cmd(
            ["dependency", "update", chart_path],
            f"Updating dependency for local chart [ {chart_path} ]",
        )
        result = cmd.exec(self.runner)
        if not result.ok:
            raise HelmCommandError(result.stderr.strip())
        logger.info("Updated dependencies of %s", chart_path)
