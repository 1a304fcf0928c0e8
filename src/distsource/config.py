"""Project settings read from the ``[tool.distsource]`` table of ``pyproject.toml``."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

from .core import BaseHandle
from .file import File
from .specifiers import PackageNameSpecifiers, collapse, parse_argument

logger = logging.getLogger(__name__)

PYPROJECT = "pyproject.toml"
TOOL_TABLE = "distsource"


class ConfigError(ValueError):
    """Raised when project settings are malformed."""


@dataclass(frozen=True)
class Settings:
    """Raw selection tokens from the project file, in file order."""

    no_binary: tuple[str, ...] = ()
    only_binary: tuple[str, ...] = ()


class TOMLHandle(BaseHandle):
    """Handle for TOML documents."""

    def __init__(self, path: str | Path | File):
        super().__init__(path)
        self.document = tomlkit.document()

    def _parse(self, content: str):
        try:
            self.document = tomlkit.parse(content)
        except TOMLKitError as e:
            raise ConfigError(f"Invalid TOML in {self.path}: {e}") from e

    def _dump(self) -> str:
        return tomlkit.dumps(self.document)

    def read(self) -> dict:
        """Return the document as plain Python data."""
        self._ensure_loaded()
        return self.document.unwrap()


class SettingsHandle(TOMLHandle):
    """Reads the ``[tool.distsource]`` table of a ``pyproject.toml``."""

    def _tokens(self, table: dict, key: str) -> tuple[str, ...]:
        value = table.get(key, [])
        if isinstance(value, str):
            return (value,)
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ConfigError(f"tool.{TOOL_TABLE}.{key} in {self.path} must be a string or a list of strings")
        return tuple(value)

    def settings(self) -> Settings:
        """Return the settings, or empty settings when the file or table is missing.

        Raises:
            ConfigError: If the table or one of its keys has the wrong type.
        """
        tool = self.read().get("tool", {})
        if not isinstance(tool, dict):
            raise ConfigError(f"tool in {self.path} must be a table")
        table = tool.get(TOOL_TABLE, {})
        if not isinstance(table, dict):
            raise ConfigError(f"tool.{TOOL_TABLE} in {self.path} must be a table")
        return Settings(
            no_binary=self._tokens(table, "no-binary"),
            only_binary=self._tokens(table, "only-binary"),
        )


def load_settings(root: Path | None = None) -> Settings:
    """Load settings from ``pyproject.toml`` in ``root`` (default: current directory)."""
    path = (root or Path.cwd()) / PYPROJECT
    settings = SettingsHandle(path).settings()
    logger.debug("Loaded settings from %s: %s", path, settings)
    return settings


def resolve_selection(config_tokens: Iterable[str], cli_tokens: Iterable[str]) -> PackageNameSpecifiers:
    """Collapse project settings followed by command-line values.

    Command-line values come last so a ``:none:`` on the command line resets
    whatever the project file selected.

    Raises:
        InvalidNameError: If any token is not a valid package name.
    """
    specifiers = []
    for value in [*config_tokens, *cli_tokens]:
        specifiers.extend(parse_argument(value))
    return collapse(specifiers)
