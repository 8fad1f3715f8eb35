"""File descriptor for a project layout."""

import os
from pathlib import Path

from ephemeral.tree.tree_node import TreeNode
from ephemeral.types import ContentType, NodeKind, PathType


class File(TreeNode):
    """A file to be written into its parent directory.

    The content is opaque bytes: it is written verbatim and no encoding or decoding is
    ever applied. The name is not validated, so a name containing path separators or an
    absolute path is joined to the directory path exactly as pathlib joins it.

    Attributes:
        name (str): File name, joined to the parent directory's path when written.
        content (bytes): The exact bytes written to disk.

    Example:
        >>> f = File("bar", bytes([101]))
        >>> f.name
        'bar'
        >>> f.content
        b'e'
        >>> f.size
        1
    """

    kind = NodeKind.FILE

    def __init__(self, name: PathType, content: ContentType) -> None:
        """Initialize a File.

        Args:
            name: The name of the file. Can be any path-like object.
            content: Raw content as bytes, bytearray or memoryview.

        Raises:
            TypeError: If content is text or any other non-bytes object.
        """
        if isinstance(content, str):
            raise TypeError("File content must be bytes, not str; encode it first")
        if not isinstance(content, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes-like content, got {type(content).__name__}")
        super().__init__(os.fspath(name))
        self._content = bytes(content)

    @classmethod
    def new(cls, name: PathType, content: ContentType) -> "File":
        return cls(name, content)

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def size(self) -> int:
        return len(self._content)

    @property
    def target_path(self) -> Path:
        """Path the file is written to: the parent directory's path joined with the name.

        A file that has not been added to a directory resolves relative to the current
        working directory.
        """
        if self.parent is None:
            return Path(self.name)
        return self.parent.path / self.name
