"""Classify chart references as local paths or repository-qualified names."""

from __future__ import annotations

import os

from helm_reconciler.models import ChartKind
from helm_reconciler.models.chart import ChartReference

_PATH_PREFIXES = ("/", "./", "../", "~", ".\\", "..\\")


def classify_chart(ref: str) -> ChartReference:
    """Decide once whether ``ref`` points at a chart on disk or in a repository.

    Rules, in order:

    - anything with a URL scheme (``oci://``, ``https://``) is remote;
    - an existing file or directory is local, so ``charts/app`` is local
      when that directory exists even though it looks like ``repo/chart``;
    - absolute, relative (``./``, ``../``) and home (``~``) paths are local;
    - more than one separator (``charts/infra/app``) is local;
    - everything else, including ``repo/chart`` and bare names, is remote.
    """
    if "://" in ref:
        return ChartReference(ref=ref, kind=ChartKind.REMOTE)
    if os.path.exists(os.path.expanduser(ref)):
        return ChartReference(ref=ref, kind=ChartKind.LOCAL)
    if ref in (".", "..") or ref.startswith(_PATH_PREFIXES):
        return ChartReference(ref=ref, kind=ChartKind.LOCAL)
    normalized = ref.replace("\\", "/").strip("/")
    if normalized.count("/") > 1:
        return ChartReference(ref=ref, kind=ChartKind.LOCAL)
    return ChartReference(ref=ref, kind=ChartKind.REMOTE)


def is_local_chart(ref: str) -> bool:
    return classify_chart(ref).is_local


def suggested_repo_name(ref: str) -> str:
    """Guess the repository a path-like reference was meant to come from."""
    return os.path.basename(os.path.dirname(ref.rstrip("/\\")))
