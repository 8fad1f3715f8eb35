"""Project: a root directory layout that can be written to disk and removed again."""

import logging
import os
import types
from pathlib import Path
from typing import Optional, Type

from ephemeral.io.filesystem import make_dirs, remove_tree, write_file
from ephemeral.tree.directory import Directory
from ephemeral.types import ContentType, PathType

logger = logging.getLogger(__name__)


class Project:
    """A project created on the filesystem at a user-defined location.

    A Project owns a root Directory. Directories and files are added to it with the
    fluent add_dir()/add_file() calls, build() writes the whole layout to disk and clear()
    removes it again. Nothing is cleaned up implicitly: either call clear() or use the
    project as a context manager, which builds on entry and clears on exit.

    Build walks the layout in pre-order. For each directory it creates the directory
    (and any missing ancestors), writes the directory's files in insertion order, then
    descends into the subdirectories in insertion order. The first filesystem failure
    aborts the walk and propagates, possibly leaving a partially built tree behind.

    Attributes:
        root (Directory): The root directory of the layout.
        path (Path): The root path of the project.

    Example:
        >>> project = Project("tmp").add_dir(Directory("tmp/foo").add_file("bar", bytes([101])))
        >>> project.build()  # doctest: +SKIP
        Project(path='tmp')
        >>> Path("tmp/foo/bar").read_bytes()  # doctest: +SKIP
        b'e'
        >>> project.clear()  # doctest: +SKIP
    """

    def __init__(self, path: PathType) -> None:
        """Initialize a Project rooted at path. No filesystem access takes place.

        Args:
            path: Root path of the project. Can be any path-like object.

        Raises:
            ValueError: If path is empty.
        """
        self.root = Directory(path)

    @classmethod
    def new(cls, path: PathType) -> "Project":
        return cls(path)

    @property
    def path(self) -> Path:
        return self.root.path

    def add_dir(self, directory: Directory) -> "Project":
        """Add a directory under the project root and return the project."""
        self.root.add_dir(directory)
        return self

    def add_file(self, name: PathType, content: ContentType) -> "Project":
        """Add a file to the project root and return the project."""
        self.root.add_file(name, content)
        return self

    def build(self) -> "Project":
        """Materialize the layout on disk.

        Returns:
            The project itself, to be used for clear() later.

        Raises:
            PathConflictError: If an entry of the wrong kind is in the way.
            PermissionDeniedError: If a directory or file cannot be created for lack of rights.
            IOFailureError: On any other filesystem failure.
        """
        logger.info("Building project at %s", self.path)
        for directory in self.root.iter_dirs():
            make_dirs(directory.path)
            for file in directory.files:
                write_file(directory.path / file.name, file.content)
        return self

    def clear(self) -> None:
        """Delete the project root and everything beneath it.

        Clearing a project that does not exist on disk, or clearing twice, is not an error.

        Raises:
            PathConflictError: If the root path is not a directory.
            PermissionDeniedError: If an entry cannot be removed for lack of rights.
            IOFailureError: On any other filesystem failure.
        """
        if remove_tree(self.path):
            logger.info("Cleared project at %s", self.path)

    def exists(self) -> bool:
        """Return True if anything exists on disk at the project root."""
        return os.path.lexists(self.path)

    def render(self) -> str:
        """Render the project layout as a text tree."""
        return self.root.render()

    def __enter__(self) -> "Project":
        try:
            return self.build()
        except BaseException:
            # __exit__ is not called when __enter__ raises
            self.clear()
            raise

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"Project(path={str(self.path)!r})"
