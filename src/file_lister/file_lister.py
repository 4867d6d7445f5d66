"""Directory listing with streaming support.

This module provides classes that turn a directory into LLM prompt text: a file
tree, the fenced contents of its plain-text files, and an optional trailing prompt.
It includes both streaming and complete processing implementations.
"""

from pathlib import Path
from typing import Callable, Iterator, Optional

from file_lister.exceptions import NotPlainTextError
from file_lister.exclusion_rules.base_rules import BaseExclusionRules
from file_lister.file_content_printer import FileContentPrinter
from file_lister.file_system_tree.file_system_tree import FileSystemTree
from file_lister.types import PathType

# Receives the relative path of a skipped file and the reason it was skipped
ErrorCallback = Callable[[str, Exception], None]

TREE_HEADING = "### File Tree:"
FILES_HEADING = "### Files:"
PROMPT_HEADING = "### Prompt:"


def _raise_error(relative_path: str, error: Exception) -> None:
    raise error


class StreamingFileLister:
    """Streaming directory lister that writes output section by section.

    The tree is built eagerly during construction, so problems with the root directory
    or with reading metadata anywhere below it surface immediately, before anything is
    written. File contents are then produced one file at a time; a file that cannot be
    printed is handed to an error callback and skipped, and processing continues.

    Streaming properties:
    - Each streaming operation (tree, contents, prompt) can only be performed once
    - Content counters are updated as files are processed

    Attributes:
        directory (Path): Directory being processed.
        prompt (Optional[str]): Text appended after the file contents, if any.

    Example:
        >>> lister = StreamingFileLister("src", prompt="Explain this code.")  # doctest: +SKIP
        >>> for line in lister.stream_tree():  # doctest: +SKIP
        ...     print(line, end='')
        ### File Tree:
        src
        ├── main.py
        └── utils
            └── helpers.py

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        NotADirectoryError: If the directory path is not a directory.
        OSError: If metadata cannot be read while building the tree.
    """

    def __init__(
        self,
        directory: PathType,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        prompt: Optional[str] = None,
    ):
        """Initialize streaming directory listing.

        Args:
            directory: Directory to process. Can be any path-like object.
            exclusion_rules: Optional exclusion rules object to filter files and directories.
                If None, no files will be excluded.
            prompt: Optional prompt text written after all other output.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the directory path is not a directory.
            OSError: If metadata cannot be read while building the tree.
        """
        self.directory = Path(directory)
        self.prompt = prompt

        self._fs_tree = FileSystemTree(self.directory, exclusion_rules)
        self._content_printer = FileContentPrinter(self._fs_tree)

        # Build the tree now so that tree errors are fatal before any output
        self._directory_count = self._fs_tree.get_directory_count()
        self._file_count = self._fs_tree.get_file_count()

        self._emitted_file_count = 0
        self._skipped_file_count = 0

        # Track streaming state
        self._tree_complete = False
        self._contents_complete = False
        self._prompt_complete = False

    @property
    def directory_count(self) -> int:
        """Number of directories in the tree, excluding the root."""
        return self._directory_count

    @property
    def file_count(self) -> int:
        """Number of files in the tree, whether or not they hold plain text."""
        return self._file_count

    @property
    def emitted_file_count(self) -> int:
        """Number of files whose contents have been written so far."""
        return self._emitted_file_count

    @property
    def skipped_file_count(self) -> int:
        """Number of files skipped so far as non-text or unreadable."""
        return self._skipped_file_count

    def stream_tree(self) -> Iterator[str]:
        """Stream the tree heading and the directory tree line by line.

        Returns:
            Iterator yielding lines, each including a trailing newline.

        Raises:
            RuntimeError: If tree has already been streamed.
        """
        if self._tree_complete:
            raise RuntimeError("Tree has already been streamed")

        yield TREE_HEADING + "\n"
        for line in self._fs_tree.stream_tree_representation():
            yield line + "\n"

        self._tree_complete = True

    def stream_contents(self, on_error: Optional[ErrorCallback] = None) -> Iterator[str]:
        """Stream the files heading and the formatted contents of every plain-text file.

        Args:
            on_error: Called with the relative path and the exception for each file that
                is skipped (NotPlainTextError, OSError or ValueError). If None, the first
                such exception is raised.

        Returns:
            Iterator yielding chunks of formatted file contents.

        Raises:
            RuntimeError: If contents have already been streamed.
        """
        if self._contents_complete:
            raise RuntimeError("Contents have already been streamed")

        handle_error = on_error or _raise_error

        yield "\n\n" + FILES_HEADING + "\n"
        for file_path, relative_path, content_iter in self._content_printer.yield_file_contents():
            try:
                chunks = list(content_iter)
            except (NotPlainTextError, OSError, ValueError) as e:
                self._skipped_file_count += 1
                handle_error(relative_path, e)
                continue

            self._emitted_file_count += 1
            yield from chunks

        self._contents_complete = True

    def stream_prompt(self) -> Iterator[str]:
        """Stream the prompt heading and prompt text, if a prompt was given.

        Raises:
            RuntimeError: If the prompt has already been streamed.
        """
        if self._prompt_complete:
            raise RuntimeError("Prompt has already been streamed")

        if self.prompt is not None:
            yield "\n\n" + PROMPT_HEADING + "\n"
            yield self.prompt + "\n"

        self._prompt_complete = True


class FileLister(StreamingFileLister):
    """Complete directory lister that processes everything immediately.

    This class extends StreamingFileLister but renders all output during initialization,
    storing the results for immediate access. Skipped files are recorded in
    ``skipped_files`` instead of being reported.

    Memory Usage Note:
        The complete output, including every file's contents, is held in memory.

    Example:
        >>> lister = FileLister("src")  # doctest: +SKIP
        >>> print(lister.tree_string)  # doctest: +SKIP
        ### File Tree:
        src
        ├── file1.txt
        └── file2.txt
    """

    def __init__(
        self,
        directory: PathType,
        *,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        prompt: Optional[str] = None,
    ):
        """Initialize and immediately process the entire directory.

        Args:
            directory: Directory to process. Can be any path-like object.
            exclusion_rules: Optional exclusion rules object to filter files and directories.
            prompt: Optional prompt text written after all other output.

        Raises:
            FileNotFoundError: If the directory doesn't exist.
            NotADirectoryError: If the directory path is not a directory.
            OSError: If metadata cannot be read while building the tree.
        """
        super().__init__(directory, exclusion_rules=exclusion_rules, prompt=prompt)

        self.skipped_files: list = []

        self._tree_string = "".join(self.stream_tree())
        self._content_string = "".join(self.stream_contents(self._record_skipped))
        self._prompt_string = "".join(self.stream_prompt())

    def _record_skipped(self, relative_path: str, error: Exception) -> None:
        self.skipped_files.append((relative_path, error))

    @property
    def tree_string(self) -> str:
        """Tree heading and complete tree representation."""
        return self._tree_string

    @property
    def content_string(self) -> str:
        """Files heading and complete file contents."""
        return self._content_string

    @property
    def prompt_string(self) -> str:
        """Prompt heading and prompt text, or an empty string if no prompt was given."""
        return self._prompt_string

    @property
    def output_string(self) -> str:
        """The complete output, exactly as the CLI writes it."""
        return self._tree_string + self._content_string + self._prompt_string
