"""Repository models."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import unquote, urlsplit, urlunsplit

from helm_reconciler.config.settings import settings
from helm_reconciler.core.errors import InvalidRepositoryError


@dataclass
class RepositoryRecord:
    """A repository as reported by ``helm repo list``."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, d: dict) -> RepositoryRecord:
        return cls(
            name=d.get("name", ""),
            url=d.get("url", ""),
        )


@dataclass
class DesiredRepository:
    """A repository the caller wants registered.

    ``url`` never carries user-info; credentials embedded in the declared URL
    are moved into ``username`` and ``password``.
    """

    name: str
    url: str
    username: str = ""
    password: str = ""

    @classmethod
    def parse(cls, name: str, raw_url: str) -> DesiredRepository:
        try:
            parts = urlsplit(raw_url)
            parts.port  # raises ValueError on a non-numeric port
        except ValueError as e:
            raise InvalidRepositoryError(f"failed to add helm repo [ {name} ]: {e}") from e

        if not parts.scheme or (not parts.netloc and parts.scheme != "file"):
            raise InvalidRepositoryError(
                f"failed to add helm repo [ {name} ]: malformed URL '{raw_url}'"
            )

        if "@" not in parts.netloc:
            return cls(name=name, url=raw_url)

        userinfo, _, host = parts.netloc.rpartition("@")
        username, sep, password = userinfo.partition(":")
        if not sep:
            raise InvalidRepositoryError(
                f"helm repo {name} has incomplete basic auth info. Missing the password!"
            )
        stripped = urlunsplit((parts.scheme, host, parts.path, parts.query, parts.fragment))
        return cls(
            name=name,
            url=stripped,
            username=unquote(username),
            password=unquote(password),
        )

    @property
    def has_credentials(self) -> bool:
        return bool(self.username or self.password)

    @property
    def is_gcs(self) -> bool:
        return self.url.startswith(settings.gcs_scheme)

    def credential_args(self) -> list[str]:
        if not self.has_credentials:
            return []
        return ["--username", self.username, "--password", self.password]


@dataclass
class ReconcileResult:
    added: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    refreshed: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.added)
