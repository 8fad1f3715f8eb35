"""Directory descriptor for a project layout."""

import os
from pathlib import Path
from typing import Iterator, Optional, Tuple

from anytree import PreOrderIter, RenderTree

from ephemeral.tree.file import File
from ephemeral.tree.tree_node import TreeNode
from ephemeral.types import ContentType, NodeKind, PathType


class Directory(TreeNode):
    """A directory to be created on disk, together with its files and subdirectories.

    The path of a directory is fixed when it is constructed and is never recomputed from
    its parent. A nested directory therefore carries its full path, e.g.
    ``Directory("tmp/foo")`` added to ``Directory("tmp")``. Keeping nested paths
    consistent is up to the caller, as is avoiding duplicate names: neither is checked.

    Children of both kinds are kept by anytree in insertion order, which is also the
    order in which they are created on disk.

    Attributes:
        name (str): The name of the directory, by default the last component of path.
        path (Path): Where the directory will be created.
        dirs (tuple[Directory]): Child directories, in insertion order.
        files (tuple[File]): Files of this directory, in insertion order.

    Example:
        >>> foo = Directory("tmp/foo").add_file("bar", b"e")
        >>> root = Directory("tmp").add_dir(foo)
        >>> [d.name for d in root.dirs]
        ['foo']
        >>> [f.name for f in foo.files]
        ['bar']
        >>> print(root.render())
        tmp/
        └── foo/
            └── bar
    """

    kind = NodeKind.DIRECTORY

    def __init__(self, path: PathType, name: Optional[str] = None) -> None:
        """Initialize a Directory. No filesystem access takes place.

        Args:
            path: Where the directory will be created. Can be any path-like object.
            name: Display name. Defaults to the last component of path.

        Raises:
            ValueError: If path is empty.
        """
        path_str = os.fspath(path)
        if not path_str:
            raise ValueError("Directory path must not be empty")
        # NodeMixin.path is the node tuple from the root; the path property below shadows it
        self._fs_path = Path(path_str)
        super().__init__(name if name is not None else (self._fs_path.name or path_str))

    @classmethod
    def new(cls, path: PathType) -> "Directory":
        return cls(path)

    @property
    def path(self) -> Path:
        return self._fs_path

    @property
    def dirs(self) -> Tuple["Directory", ...]:
        return tuple(child for child in self.children if isinstance(child, Directory))

    @property
    def files(self) -> Tuple[File, ...]:
        return tuple(child for child in self.children if isinstance(child, File))

    def add_dir(self, directory: "Directory") -> "Directory":
        """Append a child directory.

        Args:
            directory: The directory to nest under this one.

        Returns:
            This directory, to allow chaining.

        Raises:
            TypeError: If directory is not a Directory.
            ValueError: If directory already belongs to another directory.
            anytree.LoopError: If directory is this directory or one of its ancestors.
        """
        if not isinstance(directory, Directory):
            raise TypeError(f"Expected Directory, got {type(directory).__name__}")
        if directory.parent is not None:
            raise ValueError(f"Directory {directory.path} is already part of another tree")
        directory.parent = self
        return self

    def add_file(self, name: PathType, content: ContentType) -> "Directory":
        """Append a file with the given content.

        Args:
            name: Name of the file, joined to this directory's path when written.
            content: Raw file content.

        Returns:
            This directory, to allow chaining.
        """
        File(name, content).parent = self
        return self

    def iter_dirs(self) -> Iterator["Directory"]:
        """Iterate over this directory and all nested directories in pre-order.

        This is the order in which directories are created: a directory always comes
        before its subdirectories, and siblings follow insertion order.
        """
        for node in PreOrderIter(self, filter_=lambda n: isinstance(n, Directory)):
            yield node

    def iter_files(self) -> Iterator[Tuple[Path, File]]:
        """Iterate over every file of the tree together with the path it is written to.

        Files are yielded in write order: a directory's own files before the contents of
        its subdirectories.
        """
        for directory in self.iter_dirs():
            for file in directory.files:
                yield directory.path / file.name, file

    def render(self) -> str:
        """Render the layout as an indented text tree, directories suffixed with '/'."""
        lines = []
        for prefix, _, node in RenderTree(self):
            suffix = "/" if node.is_dir else ""
            lines.append(f"{prefix}{node.name}{suffix}")
        return "\n".join(lines)
