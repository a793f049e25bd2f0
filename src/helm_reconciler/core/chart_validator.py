"""Check that requested charts exist before a deployment runs.

Problems are reported as human-readable messages on a shared queue rather
than raised, so many charts can be validated concurrently and their outcomes
collected in any order.
"""

from __future__ import annotations

import logging
import queue
import re
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Callable, Iterable

from helm_reconciler.config.settings import settings
from helm_reconciler.core.chart_ref import classify_chart, suggested_repo_name
from helm_reconciler.core.helm_command import HelmCommandRunner, helm_cmd
from helm_reconciler.models.chart import ChartRequest

logger = logging.getLogger(__name__)

_VERSION_LINE = re.compile(r"\nversion:\s?(.*)")
_QUOTES = "'\""
_NO_RESULTS = "No results found"

ProgressCallback = Callable[[int, int, str], None]


class ChartValidator:
    def __init__(self, runner: HelmCommandRunner):
        self.runner = runner

    def validate(self, apps: str, chart: str, version: str, report: queue.Queue) -> None:
        """Put one message on ``report`` for every problem found with ``chart``.

        Chart problems are never raised. A broken helm environment, such as a
        missing helm binary, still raises HelmFatalError from the runner.
        """
        ref = classify_chart(chart)
        if ref.is_local:
            self._validate_local(apps, chart, version, report)
        else:
            self._validate_remote(apps, chart, version, report)

    def _validate_local(self, apps: str, chart: str, version: str, report: queue.Queue) -> None:
        cmd = helm_cmd(["inspect", "chart", chart], f"Validating [ {chart} ] chart's availability")
        result = cmd.exec(self.runner)
        if not result.ok:
            maybe_repo = suggested_repo_name(chart)
            report.put(
                f"Chart [ {chart} ] for apps [{apps}] can't be found. "
                f"Inspection returned error: \"{result.stderr.strip()}\" -- "
                f"If this is not a local chart, add the repo [ {maybe_repo} ] in your helmRepos stanza."
            )
            return

        match = _VERSION_LINE.search(result.stdout)
        if match is None:
            return
        found = match.group(1).strip().strip(_QUOTES)
        if version.strip(_QUOTES) != found:
            report.put(
                f"Chart [ {chart} ] with version [ {version} ] is specified for apps [{apps}] "
                f"but the chart found at that path has version [ {found} ] which does not match."
            )

    def _validate_remote(self, apps: str, chart: str, version: str, report: queue.Queue) -> None:
        cmd = helm_cmd(
            ["search", "repo", chart, "--version", version or "*", "-l"],
            f"Validating [ {chart} ] chart's version [ {version} ] availability",
        )
        result = cmd.exec(self.runner)
        if not result.ok or _NO_RESULTS in result.stdout:
            report.put(
                f"Chart [ {chart} ] with version [ {version} ] is specified for apps [{apps}] "
                "but was not found. If this is not a local chart, define its helm repo "
                "in the helmRepos stanza in your desired state file."
            )


def validate_charts(
    validator: ChartValidator,
    requests: Iterable[ChartRequest],
    max_workers: int | None = None,
    cancel: threading.Event | None = None,
    on_progress: ProgressCallback | None = None,
) -> list[str]:
    """Validate every request concurrently and return all reported problems.

    Waits for exactly one completion per request before draining the queue.
    Message order follows completion order, not request order. Requests that
    have not started when ``cancel`` is set are skipped.
    """
    jobs = list(requests)
    total = len(jobs)
    report: queue.Queue[str] = queue.Queue()
    done_count = 0
    lock = threading.Lock()

    def run(job: ChartRequest) -> None:
        nonlocal done_count
        if cancel is not None and cancel.is_set():
            logger.debug("Skipping validation of %s: cancelled", job.chart)
            return
        try:
            validator.validate(job.app_label, job.chart, job.version, report)
        finally:
            with lock:
                done_count += 1
                finished = done_count
            if on_progress:
                on_progress(finished, total, job.chart)

    if not jobs:
        return []

    with ThreadPoolExecutor(max_workers=max_workers or settings.max_workers) as pool:
        futures = [pool.submit(run, job) for job in jobs]
        wait(futures)

    for future in futures:
        # Surface environmental failures such as a missing helm binary
        future.result()

    problems: list[str] = []
    while True:
        try:
            problems.append(report.get_nowait())
        except queue.Empty:
            break
    return problems
