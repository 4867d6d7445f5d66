"""Node representation for file system elements in the tree."""

from typing import Any, Optional

from anytree import Node


class FileSystemNode(Node):  # type: ignore
    """Node class representing a file or directory in the filesystem tree.

    Extends anytree.Node with a flag telling directories from files. Inherits tree
    traversal and manipulation capabilities from anytree.Node; a node is owned by its
    parent and children keep the order in which they were attached.

    Attributes:
        name (str): The name of the file or directory (just the basename).
        parent (Optional[FileSystemNode]): The parent node in the tree.
        is_dir (bool): True if this node represents a directory, False for files.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).

    Example:
        >>> root = FileSystemNode("root", is_dir=True)
        >>> child = FileSystemNode("file.txt", parent=root)
        >>> root.name
        'root'
        >>> child.is_dir
        False
        >>> child.relative_path
        'file.txt'
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        is_dir: bool = False,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The name of the file or directory.
            parent: The parent node. Defaults to None.
            is_dir: Whether this node represents a directory. Defaults to False.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.is_dir = is_dir

    @property
    def relative_path(self) -> str:
        """Path of this node relative to the tree root, joined with forward slashes.

        The root itself has an empty relative path.
        """
        return "/".join(node.name for node in self.path[1:])
