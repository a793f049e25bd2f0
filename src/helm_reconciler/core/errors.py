"""Error definitions raised by the reconciliation core."""

from __future__ import annotations


class HelmReconcilerError(RuntimeError):
    """Base class for every error raised by helm-reconciler."""


class HelmFatalError(HelmReconcilerError):
    """Raised when the helm environment is broken and no caller can recover."""


class InvalidRepositoryError(HelmFatalError):
    """Raised when a desired repository URL is malformed or has partial credentials."""


class RepoError(HelmReconcilerError):
    """Raised when listing, adding or refreshing helm repositories fails."""


class ChartNotFoundError(HelmReconcilerError):
    """Raised when no chart matches the requested name and version."""


class HelmCommandError(HelmReconcilerError):
    """Raised when a helm command exits non-zero and the caller treats it as failure."""


class StateFileError(HelmReconcilerError):
    """Raised when the desired state file cannot be read or has the wrong shape."""
