"""Semver parsing and constraint utilities."""

from __future__ import annotations

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version


def parse_version(v: str) -> Version | None:
    """Parse a version string, returning None on failure."""
    try:
        return Version(v.strip())
    except InvalidVersion:
        # Try stripping leading 'v'
        if v.startswith("v"):
            try:
                return Version(v[1:])
            except InvalidVersion:
                pass
    return None


def parse_constraint(constraint: str) -> SpecifierSet | None:
    """Parse a range such as ``>=3.3.2`` or ``>= 3.0, < 4``, returning None on failure."""
    try:
        return SpecifierSet(constraint.strip())
    except InvalidSpecifier:
        return None


def satisfies(version: str, constraint: str) -> bool:
    """Return True if version falls inside constraint. Unparseable input never matches."""
    v = parse_version(version)
    spec = parse_constraint(constraint)
    if v is None or spec is None:
        return False
    # Pre-releases only match when the constraint itself names one
    return spec.contains(v)


def extract_helm_version(raw: str) -> str:
    """Pull the version token out of ``helm version --short`` output.

    Helm 3 prints ``v3.4.0+g7090a89``; Helm 2 prints ``Client: v2.16.1+gbbdfe5e``.
    """
    text = raw.strip()
    if text.startswith("v"):
        return text
    fields = text.split(":")
    if len(fields) < 2:
        return text
    return fields[1].strip()
