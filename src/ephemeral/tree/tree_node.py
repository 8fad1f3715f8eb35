"""Common base for the nodes of a project layout."""

from typing import Optional

from anytree import NodeMixin

from ephemeral.types import NodeKind


class TreeNode(NodeMixin):  # type: ignore
    """Base class for directory and file descriptors.

    Extends anytree.NodeMixin so that every node can be attached to exactly one parent.
    anytree keeps the children of a node in insertion order and refuses to create cycles,
    which gives the layout its strict hierarchy.

    Attributes:
        name (str): The name of the node (a directory's basename or a file's name).
        kind (NodeKind): Whether the node describes a file or a directory.
        parent (Optional[TreeNode]): The directory this node was added to, if any.
        children (tuple[TreeNode]): Child nodes of both kinds (inherited from anytree).
    """

    kind: NodeKind

    def __init__(self, name: str, parent: Optional["TreeNode"] = None) -> None:
        super().__init__()
        self.name = name
        self.parent = parent

    @property
    def is_dir(self) -> bool:
        """True if this node describes a directory."""
        return self.kind is NodeKind.DIRECTORY

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
