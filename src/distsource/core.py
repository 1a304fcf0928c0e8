"""Base handle shared by file-backed documents."""

from pathlib import Path

from .file import File


class BaseHandle:
    """Base class for handles that load a document from a file and write it back."""

    def __init__(self, path: str | Path | File):
        # Accept File instance or path
        self.file = path if isinstance(path, File) else File(path)
        self.path = self.file.path
        self._loaded = False

    def _parse(self, content: str):
        """Parse content into document. Format-specific implementation."""
        raise NotImplementedError

    def _dump(self) -> str:
        """Dump document to string. Format-specific implementation."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        """Ensure underlying state is loaded exactly once."""
        if not self._loaded:
            self.load()

    def load(self):
        """Load from file if it exists, otherwise parse empty content.

        Subclasses MUST implement `_parse`; an empty string stands for a
        missing file.
        """
        if self.file.exists():
            content = self.file.read_text(encoding="utf-8")
            self._parse(content)
        else:
            self._parse("")
        self._loaded = True
        return self

    def save(self, path: str | Path | None = None) -> None:
        """Write the current state to the original file, or to ``path``."""
        self._ensure_loaded()

        target_file = File(str(path)) if path else self.file
        # Only create parents for local paths
        if not target_file.is_remote:
            target_file.path.parent.mkdir(parents=True, exist_ok=True)
        target_file.write_text(self._dump(), encoding="utf-8")
