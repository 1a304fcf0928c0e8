"""Tests for project settings."""

import pytest

from distsource import ConfigError, Directive, InvalidNameError, Packages, Settings, SettingsHandle
from distsource.config import load_settings, resolve_selection


def write_pyproject(root, content):
    path = root / "pyproject.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_settings(workspace):
    """Test reading selection tokens from pyproject.toml."""
    write_pyproject(
        workspace,
        """
[project]
name = "demo"

[tool.distsource]
no-binary = [":all:"]
only-binary = ["numpy", "scipy,pandas"]  # comma-separated is allowed
""",
    )
    assert load_settings(workspace) == Settings(no_binary=(":all:",), only_binary=("numpy", "scipy,pandas"))


def test_single_string_value(workspace):
    """Test that a single string works like a one-item list."""
    write_pyproject(workspace, '[tool.distsource]\nno-binary = ":none:"\n')
    assert load_settings(workspace).no_binary == (":none:",)


def test_missing_file(workspace):
    """Test that a project without pyproject.toml has empty settings."""
    assert load_settings(workspace) == Settings()


def test_missing_table(workspace):
    """Test that a pyproject.toml without our table has empty settings."""
    write_pyproject(workspace, '[project]\nname = "demo"\n')
    assert load_settings(workspace) == Settings()


def test_invalid_value_type(workspace):
    """Test that non-string entries are rejected with the key name."""
    path = write_pyproject(workspace, "[tool.distsource]\nonly-binary = [1, 2]\n")
    with pytest.raises(ConfigError, match="tool.distsource.only-binary"):
        SettingsHandle(path).settings()


def test_invalid_table_type(workspace):
    """Test that tool.distsource must be a table."""
    write_pyproject(workspace, '[tool]\ndistsource = "yes"\n')
    with pytest.raises(ConfigError, match="must be a table"):
        load_settings(workspace)


def test_invalid_tool_type(workspace):
    """Test that a non-table tool key is rejected."""
    write_pyproject(workspace, 'tool = "x"\n')
    with pytest.raises(ConfigError, match="tool in .* must be a table"):
        load_settings(workspace)


def test_invalid_toml(workspace):
    """Test that TOML syntax errors become ConfigError."""
    write_pyproject(workspace, "[tool.distsource\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_settings(workspace)


class TestResolveSelection:
    """Test combining project settings with command-line values."""

    def test_config_only(self):
        assert resolve_selection([":all:"], []) is Directive.ALL

    def test_cli_after_config(self):
        assert resolve_selection(["numpy"], ["scipy"]) == Packages(("numpy", "scipy"))

    def test_cli_none_resets_config(self):
        assert resolve_selection([":all:"], [":none:", "numpy"]) == Packages(("numpy",))

    def test_config_all_with_cli_names(self):
        assert resolve_selection([":all:"], ["numpy"]) is Directive.ALL

    def test_comma_separated(self):
        assert resolve_selection(["scipy,pandas"], []) == Packages(("scipy", "pandas"))

    def test_invalid_name(self):
        with pytest.raises(InvalidNameError):
            resolve_selection([], ["not valid"])
