"""Type definitions for ``direct_url.json`` documents."""

from __future__ import annotations

from typing import NotRequired, TypedDict


class ArchiveInfoDict(TypedDict):
    """Archive metadata. Hashes are filled in by whoever downloaded the file."""

    hash: NotRequired[str]
    hashes: NotRequired[dict[str, str]]


class VcsInfoDict(TypedDict):
    """Version control metadata.

    Fields:
        vcs: VCS name ("git", "hg", "bzr" or "svn")
        commit_id: Exact revision that was installed
        requested_revision: Branch, tag or revision the user asked for
    """

    vcs: str
    commit_id: NotRequired[str]
    requested_revision: NotRequired[str]


class DirInfoDict(TypedDict):
    editable: NotRequired[bool]


class DirectUrlDict(TypedDict):
    """A ``direct_url.json`` document.

    Exactly one of ``archive_info``, ``vcs_info`` and ``dir_info`` is present.
    """

    url: str
    subdirectory: NotRequired[str]
    archive_info: NotRequired[ArchiveInfoDict]
    vcs_info: NotRequired[VcsInfoDict]
    dir_info: NotRequired[DirInfoDict]
