"""Classify where a distribution's artifact lives, and convert back to URLs and provenance records."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import assert_never

from ..git import GitUrl
from ..url import Url
from .direct_url import ArchiveInfo, ArchiveUrl, DirectUrl, VcsInfo, VcsKind, VcsUrl
from .reference import DistributionReference, RegistryDistribution, UrlDistribution

logger = logging.getLogger(__name__)

GIT_PREFIX = "git+"
SUBDIRECTORY_KEY = "subdirectory"


class NotDirectError(ValueError):
    """Raised when provenance is requested for a registry distribution."""


@dataclass(frozen=True)
class RegistryUrl:
    """The distribution is a file hosted by a package index, like PyPI."""

    url: Url


@dataclass(frozen=True)
class RemoteUrl:
    """The distribution is an arbitrary remote file, like a GitHub release archive.

    ``subdirectory`` is the project root inside the archive, kept exactly as
    written in the URL fragment.
    """

    url: Url
    subdirectory: str | None = None


@dataclass(frozen=True)
class Git:
    """The distribution is a checkout of a remote Git repository."""

    git: GitUrl
    subdirectory: str | None = None


Source = RegistryUrl | RemoteUrl | Git


def subdirectory_of(url: Url) -> str | None:
    """Return the ``subdirectory=`` value from the fragment of ``url``.

    Tokens are ``&``-separated and the first ``subdirectory`` token wins.
    Other tokens such as ``egg=name`` are ignored.
    """
    if url.fragment is None:
        return None
    for token in url.fragment.split("&"):
        key, sep, value = token.partition("=")
        if sep and key == SUBDIRECTORY_KEY:
            return value
    return None


def classify(reference: DistributionReference) -> Source:
    """Classify a distribution picked from an index or given as a direct URL.

    Raises:
        UrlParseError: If a registry file URL or a ``git+`` URL is malformed.
        VcsLocatorError: If a ``git+`` URL is not a usable repository locator.
    """
    match reference:
        case RegistryDistribution(file=file):
            return RegistryUrl(Url.parse(file.url))
        case UrlDistribution(url=url):
            return classify_url(url)
        case _:
            assert_never(reference)


def classify_url(url: Url | str) -> Source:
    """Classify a direct URL as a Git repository or a plain remote file.

    ``git+https://example.com/repo.git@v1.0#subdirectory=pkg`` becomes a
    `Git` source; anything else becomes a `RemoteUrl` holding the URL as given.

    Raises:
        UrlParseError: If ``url`` is a string that does not parse, or if the
            remainder after ``git+`` does not parse.
        VcsLocatorError: If the ``git+`` remainder is not a usable repository locator.
    """
    if isinstance(url, str):
        url = Url.parse(url)

    subdirectory = subdirectory_of(url)

    text = str(url)
    if text.startswith(GIT_PREFIX):
        git = GitUrl.from_url(Url.parse(text[len(GIT_PREFIX) :]))
        logger.debug("Classified %s as Git repository %s", text, git.repository)
        return Git(git, subdirectory)

    logger.debug("Classified %s as remote file", text)
    return RemoteUrl(url, subdirectory)


def _subdirectory_fragment(subdirectory: str) -> str:
    return f"{SUBDIRECTORY_KEY}={subdirectory}"


def to_url(source: Source) -> Url:
    """Convert a source back into a URL.

    Whenever a subdirectory is written out it replaces the whole fragment,
    so other fragment tokens (``egg=...``) do not survive. Without a
    subdirectory a remote URL keeps its original fragment.
    """
    match source:
        case RegistryUrl(url=url):
            return url
        case RemoteUrl(url=url, subdirectory=subdirectory):
            if subdirectory is None:
                return url
            return url.with_fragment(_subdirectory_fragment(subdirectory))
        case Git(git=git, subdirectory=subdirectory):
            locator = git.to_url()
            fragment = _subdirectory_fragment(subdirectory) if subdirectory is not None else None
            return Url(
                scheme=GIT_PREFIX + locator.scheme,
                netloc=locator.netloc,
                path=locator.path,
                query=locator.query,
                fragment=fragment,
            )
        case _:
            assert_never(source)


def to_direct_url(source: Source) -> DirectUrl:
    """Describe how a source would be recorded in ``direct_url.json``.

    Archive hashes are left empty.

    Raises:
        NotDirectError: For registry sources, which have no direct URL.
    """
    match source:
        case RegistryUrl():
            raise NotDirectError("Registry dependencies have no direct URL")
        case RemoteUrl(url=url, subdirectory=subdirectory):
            return ArchiveUrl(url=str(url), archive_info=ArchiveInfo(), subdirectory=subdirectory)
        case Git(git=git, subdirectory=subdirectory):
            # TODO: resolve unpinned references to a commit before recording, so
            # synced environments always carry commit_id.
            return VcsUrl(
                url=str(git.repository),
                vcs_info=VcsInfo(
                    vcs=VcsKind.GIT,
                    commit_id=git.precise,
                    requested_revision=git.reference,
                ),
                subdirectory=subdirectory,
            )
        case _:
            assert_never(source)
