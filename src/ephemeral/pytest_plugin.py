"""pytest fixtures for creating projects that are cleared automatically.

The plugin is registered through the ``pytest11`` entry point, so the fixtures are
available in any test session once ephemeral is installed.

Example:
    def test_reads_config(ephemeral_project):
        project = ephemeral_project().add_file("config.toml", b"debug = true\\n").build()
        assert (project.path / "config.toml").exists()
"""

from pathlib import Path
from typing import Callable, Iterator, List, Optional

import pytest

from ephemeral.exceptions import EphemeralError
from ephemeral.project import Project
from ephemeral.types import PathType


@pytest.fixture
def ephemeral_root(tmp_path: Path) -> Path:
    """A not yet existing directory path under pytest's tmp_path."""
    return tmp_path / "ephemeral"


@pytest.fixture
def ephemeral_project(ephemeral_root: Path) -> Iterator[Callable[..., Project]]:
    """Factory for projects that are cleared at test teardown.

    Calling the factory without a path roots the project at ephemeral_root. Every project
    handed out is cleared after the test, most recent first, whether or not it was built.
    A failing clear does not stop the others; the first failure is raised afterwards.
    """
    projects: List[Project] = []

    def make(path: Optional[PathType] = None) -> Project:
        project = Project(path if path is not None else ephemeral_root)
        projects.append(project)
        return project

    yield make

    errors: List[EphemeralError] = []
    for project in reversed(projects):
        try:
            project.clear()
        except EphemeralError as e:
            errors.append(e)
    if errors:
        raise errors[0]
