from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Raw file content accepted by the tree nodes; stored as immutable bytes
ContentType = Union[bytes, bytearray, memoryview]


class NodeKind(Enum):
    """Enumeration of the node kinds that make up a project layout.

    Attributes:
        FILE: Regular file with byte content
        DIRECTORY: Directory holding files and further directories
    """

    FILE = "file"
    DIRECTORY = "directory"
