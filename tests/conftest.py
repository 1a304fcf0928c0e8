"""Pytest configuration and fixtures"""

import shutil
import tempfile
from pathlib import Path

import pytest

from distsource import GitUrl, Url

COMMIT = "a1b2c3d4e5f60718293a4b5c6d7e8f9012345678"


@pytest.fixture
def workspace():
    """Create a temporary workspace directory"""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def commit():
    """A full Git commit id"""
    return COMMIT


@pytest.fixture
def pip_repo():
    """Locator for a repository pinned to a tag, not yet resolved"""
    return GitUrl.from_url(Url.parse("https://github.com/pypa/pip.git@v24.0"))


@pytest.fixture
def dist_info(tmp_path):
    """An empty .dist-info directory"""
    path = tmp_path / "site-packages" / "sampleproject-4.0.0.dist-info"
    path.mkdir(parents=True)
    return path
