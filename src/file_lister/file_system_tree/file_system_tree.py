"""File system tree representation with glob-based exclusion.

This module provides the main FileSystemTree class for building and rendering
tree representations of directory structures, with support for excluding files
and directories based on specified rules.
"""

import os
import stat
from pathlib import Path
from typing import Iterator, Optional, Tuple

from file_lister.exclusion_rules.base_rules import BaseExclusionRules
from file_lister.file_system_tree.file_system_node import FileSystemNode
from file_lister.types import PathType


class FileSystemTree:
    """A tree representation of a directory structure with support for exclusion rules.

    This class builds and maintains a tree of file and directory names, omitting every
    entry whose path matches the provided exclusion rules. Excluded directories are
    pruned as a whole: nothing below them is visited.

    The tree is built lazily on first access and can be refreshed to reflect filesystem
    changes. Both full tree access and iterative file listing are supported.

    Ordering:
        Directory entries are sorted lexicographically by name, so output is identical
        across platforms and runs.

    Error Handling:
        Building is fail-fast. Any error reading metadata or listing a directory is
        propagated immediately and no partial tree is kept.

    Symbolic Links:
        Metadata is read through symbolic links, so a link to a directory is walked like
        the directory itself. Link cycles are not detected.
        Excluded entries are never stat'ed, so an excluded dangling link is harmless.

    Attributes:
        root_path (Path): The root directory, exactly as given by the caller.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for excluding files/directories.

    Example:
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> print(tree.get_tree_representation())  # doctest: +SKIP
        src
        ├── main.py
        └── utils
            └── helpers.py
    """

    def __init__(self, root_path: PathType, exclusion_rules: Optional[BaseExclusionRules] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory to represent. Can be any path-like object.
            exclusion_rules: Rules for excluding files and directories. Defaults to None.
        """
        self.root_path = Path(root_path)
        self.exclusion_rules = exclusion_rules
        self._tree: Optional[FileSystemNode] = None
        self._file_count: int = 0
        self._directory_count: int = 0

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the filesystem tree, building it on first access.

        Returns:
            The root node of the tree.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If metadata or a directory listing cannot be read anywhere in the tree.
        """
        if self._tree is None:
            self._build_tree()
        assert self._tree is not None
        return self._tree

    def _build_tree(self) -> None:
        """Build the filesystem tree from the root path and count its entries.

        Raises:
            FileNotFoundError: If the root path doesn't exist.
            NotADirectoryError: If the root path isn't a directory.
            OSError: If metadata or a directory listing cannot be read.
        """
        try:
            root_stat = os.stat(self.root_path)
        except FileNotFoundError:
            raise FileNotFoundError(f"Root path does not exist: {self.root_path}")
        if not stat.S_ISDIR(root_stat.st_mode):
            raise NotADirectoryError(f"Root path is not a directory: {self.root_path}")

        root = FileSystemNode(self.root_path.resolve().name or str(self.root_path), is_dir=True)
        self._add_children(root, self.root_path, "")

        self._tree = root
        self._count_files_and_directories()

    def _add_children(self, node: FileSystemNode, path: Path, relative_path: str) -> None:
        """Recursively attach the non-excluded entries of a directory to its node."""
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)

        for entry in entries:
            child_path = path / entry.name
            child_relative_path = f"{relative_path}{entry.name}"

            # Directories are matched with a trailing slash, as in .gitignore files.
            # entry.is_dir() is False for a dangling link, so excluded links are never stat'ed.
            match_path = child_relative_path + "/" if entry.is_dir() else child_relative_path
            if self.exclusion_rules and self.exclusion_rules.exclude(match_path):
                continue

            is_dir = stat.S_ISDIR(os.stat(child_path).st_mode)
            child = FileSystemNode(entry.name, parent=node, is_dir=is_dir)
            if is_dir:
                self._add_children(child, child_path, child_relative_path + "/")

    def _count_files_and_directories(self) -> None:
        """Count the files and directories in the tree, excluding the root directory."""
        self._file_count = 0
        self._directory_count = 0

        if self._tree is None:
            return

        for node in self._tree.descendants:
            if node.is_dir:
                self._directory_count += 1
            else:
                self._file_count += 1

    def get_file_count(self) -> int:
        """Get the total number of files in the tree.

        Returns:
            Number of files (excluding those filtered by exclusion rules).
        """
        if self._tree is None:
            self._build_tree()
        return self._file_count

    def get_directory_count(self) -> int:
        """Get the total number of directories in the tree (excluding root).

        Returns:
            Number of directories (excluding root and those filtered by exclusion rules).
        """
        if self._tree is None:
            self._build_tree()
        return self._directory_count

    def iterate_files(self) -> Iterator[Tuple[str, str]]:
        """Iterate over all files in the tree in depth-first pre-order.

        The order is the same in which files appear in the tree representation.

        Yields:
            Pairs of (display_path, relative_path) for each file, where display_path
            is the root path as given joined with the relative path.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for display_path, rel_path in tree.iterate_files():  # doctest: +SKIP
            ...     print(display_path)
            src/main.py
            src/utils/helpers.py
        """
        for node in self.get_tree().descendants:
            if not node.is_dir:
                relative_path = node.relative_path
                yield str(self.root_path / relative_path), relative_path

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a tree representation of the filesystem one line at a time.

        The first line is the root path as given by the caller. Every other line shows
        one entry, prefixed with box-drawing connectors: ``├── `` for all but the last
        sibling and ``└── `` for the last one. Nested prefixes accumulate ``│   `` below
        non-last ancestors and four spaces below last ancestors.

        Yields:
            Lines of the tree representation, without trailing newlines.

        Example:
            >>> tree = FileSystemTree("src")  # doctest: +SKIP
            >>> for line in tree.stream_tree_representation():  # doctest: +SKIP
            ...     print(line)
            src
            ├── main.py
            └── utils
                └── helpers.py
        """
        tree = self.get_tree()

        def write_node(node: FileSystemNode, prefix: str, is_last: bool) -> Iterator[str]:
            connector = "└── " if is_last else "├── "
            yield f"{prefix}{connector}{node.name}"

            child_prefix = prefix + ("    " if is_last else "│   ")
            yield from write_children(node, child_prefix)

        def write_children(node: FileSystemNode, prefix: str) -> Iterator[str]:
            children = node.children
            for i, child in enumerate(children):
                yield from write_node(child, prefix, i == len(children) - 1)

        yield str(self.root_path)
        yield from write_children(tree, "")

    def get_tree_representation(self) -> str:
        """Get a complete string representation of the filesystem tree.

        Returns:
            The complete tree representation as a string.
        """
        return "\n".join(self.stream_tree_representation())

    def refresh(self) -> None:
        """Refresh the tree to reflect current filesystem state.

        Clears the cached tree and counts and rebuilds immediately. Use this method if
        the filesystem has changed and you need up-to-date information.
        """
        self._tree = None
        self._file_count = 0
        self._directory_count = 0
        self._build_tree()
