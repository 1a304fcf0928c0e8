"""References to a distribution before its source has been classified."""

from __future__ import annotations

from dataclasses import dataclass

from ..url import Url


@dataclass(frozen=True)
class RegistryFile:
    """A downloadable file listed by a package index."""

    filename: str
    url: str
    requires_python: str | None = None


@dataclass(frozen=True)
class RegistryDistribution:
    """A distribution picked from a package index."""

    name: str
    version: str
    file: RegistryFile


@dataclass(frozen=True)
class UrlDistribution:
    """A distribution the user pointed at directly with a URL."""

    name: str
    url: Url


DistributionReference = RegistryDistribution | UrlDistribution
