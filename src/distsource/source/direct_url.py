"""Direct-URL provenance records (the ``direct_url.json`` of an installed distribution)."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Self, assert_never

from ..core import BaseHandle
from ..file import File
from .types import ArchiveInfoDict, DirectUrlDict, DirInfoDict, VcsInfoDict

logger = logging.getLogger(__name__)

DIRECT_URL_FILENAME = "direct_url.json"


class InvalidDirectUrlError(ValueError):
    """Raised when a ``direct_url.json`` document is malformed."""


class VcsKind(Enum):
    GIT = "git"
    HG = "hg"
    BZR = "bzr"
    SVN = "svn"


@dataclass(frozen=True)
class ArchiveInfo:
    """Integrity information for an archive.

    Left empty when a record is derived from a source; the downloader fills
    it in once the file has been hashed.
    """

    hash: str | None = None
    hashes: dict[str, str] | None = field(default=None, hash=False)


@dataclass(frozen=True)
class VcsInfo:
    vcs: VcsKind
    commit_id: str | None = None
    requested_revision: str | None = None


@dataclass(frozen=True)
class DirInfo:
    editable: bool | None = None


@dataclass(frozen=True)
class ArchiveUrl:
    """Installed from an archive (sdist, wheel or plain tarball) at ``url``."""

    url: str
    archive_info: ArchiveInfo = field(default_factory=ArchiveInfo)
    subdirectory: str | None = None


@dataclass(frozen=True)
class VcsUrl:
    """Installed from a version control checkout of the repository at ``url``."""

    url: str
    vcs_info: VcsInfo
    subdirectory: str | None = None


@dataclass(frozen=True)
class LocalDirectory:
    """Installed from a local directory."""

    url: str
    dir_info: DirInfo = field(default_factory=DirInfo)
    subdirectory: str | None = None


DirectUrl = ArchiveUrl | VcsUrl | LocalDirectory


def to_dict(record: DirectUrl) -> DirectUrlDict:
    """Convert a record to its ``direct_url.json`` shape, omitting absent fields."""
    data: DirectUrlDict = {"url": record.url}

    match record:
        case ArchiveUrl(archive_info=archive_info):
            archive: ArchiveInfoDict = {}
            if archive_info.hash is not None:
                archive["hash"] = archive_info.hash
            if archive_info.hashes is not None:
                archive["hashes"] = dict(archive_info.hashes)
            data["archive_info"] = archive
        case VcsUrl(vcs_info=vcs_info):
            vcs: VcsInfoDict = {"vcs": vcs_info.vcs.value}
            if vcs_info.commit_id is not None:
                vcs["commit_id"] = vcs_info.commit_id
            if vcs_info.requested_revision is not None:
                vcs["requested_revision"] = vcs_info.requested_revision
            data["vcs_info"] = vcs
        case LocalDirectory(dir_info=dir_info):
            directory: DirInfoDict = {}
            if dir_info.editable is not None:
                directory["editable"] = dir_info.editable
            data["dir_info"] = directory
        case _:
            assert_never(record)

    if record.subdirectory is not None:
        data["subdirectory"] = record.subdirectory
    return data


def _optional(data: dict[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise InvalidDirectUrlError(f"{key!r} must be a {kind.__name__}, got {type(value).__name__}")
    return value


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    value = data[key]
    if not isinstance(value, dict):
        raise InvalidDirectUrlError(f"{key!r} must be a table, got {type(value).__name__}")
    return value


def from_dict(data: Any) -> DirectUrl:
    """Build a record from a parsed ``direct_url.json`` document.

    Raises:
        InvalidDirectUrlError: If required fields are missing or have the wrong type,
            or if the document does not name exactly one kind of source.
    """
    if not isinstance(data, dict):
        raise InvalidDirectUrlError(f"Expected a JSON object, got {type(data).__name__}")

    url = data.get("url")
    if not isinstance(url, str):
        raise InvalidDirectUrlError("Missing or invalid 'url'")
    subdirectory = _optional(data, "subdirectory", str)

    kinds = [key for key in ("archive_info", "vcs_info", "dir_info") if key in data]
    if len(kinds) != 1:
        raise InvalidDirectUrlError(
            f"Expected exactly one of archive_info, vcs_info, dir_info; found {kinds or 'none'}"
        )

    match kinds[0]:
        case "archive_info":
            info = _table(data, "archive_info")
            hashes = _optional(info, "hashes", dict)
            return ArchiveUrl(
                url=url,
                archive_info=ArchiveInfo(hash=_optional(info, "hash", str), hashes=hashes),
                subdirectory=subdirectory,
            )
        case "vcs_info":
            info = _table(data, "vcs_info")
            try:
                vcs = VcsKind(info.get("vcs"))
            except ValueError as e:
                raise InvalidDirectUrlError(f"Unknown VCS: {info.get('vcs')!r}") from e
            return VcsUrl(
                url=url,
                vcs_info=VcsInfo(
                    vcs=vcs,
                    commit_id=_optional(info, "commit_id", str),
                    requested_revision=_optional(info, "requested_revision", str),
                ),
                subdirectory=subdirectory,
            )
        case _:
            info = _table(data, "dir_info")
            return LocalDirectory(
                url=url,
                dir_info=DirInfo(editable=_optional(info, "editable", bool)),
                subdirectory=subdirectory,
            )


def to_json(record: DirectUrl) -> str:
    return json.dumps(to_dict(record), indent=2, ensure_ascii=False) + "\n"


def from_json(text: str) -> DirectUrl:
    """Parse a ``direct_url.json`` document.

    Raises:
        InvalidDirectUrlError: If the text is not JSON or not a valid record.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDirectUrlError(f"Invalid JSON: {e}") from e
    return from_dict(data)


class DirectUrlHandle(BaseHandle):
    """Handle for the ``direct_url.json`` file inside a ``.dist-info`` directory.

    The directory may be local or any URL understood by universal-pathlib.
    """

    def __init__(self, dist_info: str | Path | File):
        directory = dist_info if isinstance(dist_info, File) else File(dist_info)
        super().__init__(File(directory.path / DIRECT_URL_FILENAME))
        self.record: DirectUrl | None = None

    def _parse(self, content: str):
        self.record = from_json(content) if content.strip() else None

    def _dump(self) -> str:
        if self.record is None:
            raise ValueError(f"No direct URL record to write to {self.path}")
        return to_json(self.record)

    def read(self) -> DirectUrl | None:
        """Return the record, or None if the file does not exist."""
        self._ensure_loaded()
        return self.record

    def replace(self, record: DirectUrl) -> Self:
        self.record = record
        self._loaded = True
        return self

    def save(self, path: str | Path | None = None) -> None:
        super().save(path)
        logger.debug("Wrote %s", path or self.path)
