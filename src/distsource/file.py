"""File helpers for local and remote paths."""

from __future__ import annotations

from pathlib import Path

from upath import UPath


class File:
    """Unified file wrapper over UPath for local and remote locations."""

    def __init__(self, path: str | Path | UPath):
        if isinstance(path, (str, Path, UPath)):
            self.path = path if isinstance(path, UPath) else UPath(path)
        else:
            raise TypeError(f"File expects a path or URL, got {type(path).__name__}")

    @property
    def is_remote(self) -> bool:
        protocol = getattr(self.path, "protocol", None) or "file"
        return protocol not in ("", "file", "local")

    # Delegate to self.path
    def __getattr__(self, name):
        return getattr(self.path, name)

    def __str__(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"File({self.path!r})"
