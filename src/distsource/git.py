"""Git repository locators parsed from ``git+`` URLs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Self

from .url import Url

logger = logging.getLogger(__name__)

GIT_SCHEMES = frozenset({"https", "http", "ssh", "git", "file"})

_COMMIT_RE = re.compile(r"[0-9a-fA-F]{40}")


class VcsLocatorError(ValueError):
    """Raised when a URL cannot be used as a Git repository locator."""


def is_commit(rev: str) -> bool:
    """Return True if ``rev`` is a full 40 hex digit commit id."""
    return _COMMIT_RE.fullmatch(rev) is not None


@dataclass(frozen=True)
class GitUrl:
    """A Git repository, the reference requested for it and, once known, the exact commit.

    Attributes:
        repository: Repository URL without revision or fragment
        reference: Branch, tag or revision requested by the user, if any
        precise: Resolved commit id, if any
    """

    repository: Url
    reference: str | None = None
    precise: str | None = None

    @classmethod
    def from_url(cls, url: Url) -> Self:
        """Build a locator from a URL with the ``git+`` prefix already removed.

        A revision may follow the path after ``@``, as in
        ``https://example.com/repo.git@v1.0``. Full commit ids are taken as
        already resolved.

        Raises:
            VcsLocatorError: If the transport scheme is unsupported or the
                revision is empty.
        """
        if url.scheme not in GIT_SCHEMES:
            raise VcsLocatorError(f"Unsupported Git URL scheme: {url.scheme!r} in {str(url)!r}")

        reference = None
        path = url.path
        if "@" in path:
            path, reference = path.rsplit("@", 1)
            if not reference:
                raise VcsLocatorError(f"Empty Git revision in URL: {str(url)!r}")

        repository = url.with_path(path).with_fragment(None)
        precise = reference if reference is not None and is_commit(reference) else None
        logger.debug("Parsed Git locator %s (reference=%s, precise=%s)", repository, reference, precise)
        return cls(repository, reference, precise)

    def with_precise(self, commit: str) -> Self:
        """Return a copy pinned to the resolved ``commit``.

        Raises:
            VcsLocatorError: If ``commit`` is not a full commit id.
        """
        if not is_commit(commit):
            raise VcsLocatorError(f"Not a full Git commit id: {commit!r}")
        return replace(self, precise=commit)

    def to_url(self) -> Url:
        """Render the locator as a URL, pinned to the precise commit when known."""
        rev = self.precise or self.reference
        if rev is None:
            return self.repository
        return self.repository.with_path(f"{self.repository.path}@{rev}")

    def __str__(self) -> str:
        return str(self.to_url())
