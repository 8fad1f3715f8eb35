"""Test configuration and fixtures for ephemeral."""

import pytest

# Make the plugin fixtures available even when the package is not installed as a plugin
from ephemeral.pytest_plugin import ephemeral_project, ephemeral_root  # noqa: F401


@pytest.fixture
def in_tmp_path(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory, for relative project paths."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
