"""File content printer for plain-text files of a filesystem tree.

This module walks the files of a built FileSystemTree and formats the content of
each plain-text file with an output strategy. Each file is read completely before
any of its output is produced, so a file that cannot be read contributes nothing
to the output.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Tuple, Union

from .exceptions import NotPlainTextError
from .file_system_tree.file_system_tree import FileSystemTree
from .file_system_tree.text_classifier import is_plain_text_file, language_tag
from .output_strategies.base_strategy import OutputStrategy
from .output_strategies.markdown_strategy import MarkdownOutputStrategy


@dataclass(frozen=True)
class FileInfo:
    """Metadata about a file including plain-text classification results.

    Attributes:
        path: Path to the file as it is displayed (root as given joined with relative path).
        relative_path: Path relative to the tree root.
        is_plain_text: True if the file is classified as plain text.
        language: Code fence language identifier, empty if unknown.
    """

    path: Path
    relative_path: str
    is_plain_text: bool
    language: str


class FileContentPrinter:
    """Yields formatted file content for every file of a filesystem tree.

    This class coordinates between the filesystem tree and an output formatting strategy.
    Files are visited in the same depth-first order in which they appear in the tree
    representation, so the exclusion rules applied when building the tree also decide
    which files are printed.

    Errors are scoped to a single file: they are raised while consuming that file's
    content iterator, leaving the caller free to report them and continue with the
    next file.

    Attributes:
        fs_tree (FileSystemTree): The filesystem tree to process.
        output_strategy (OutputStrategy): Strategy for formatting the output.
        encoding (str): The encoding to use when reading files.

    Example:
        >>> from file_lister.file_system_tree.file_system_tree import FileSystemTree
        >>> tree = FileSystemTree("src")  # doctest: +SKIP
        >>> printer = FileContentPrinter(tree)  # doctest: +SKIP
        >>> for path, rel_path, content in printer.yield_file_contents():  # doctest: +SKIP
        ...     print("".join(content), end='')
    """

    def __init__(
        self,
        fs_tree: FileSystemTree,
        output_format: Union[str, OutputStrategy] = "markdown",
        encoding: str = "utf-8",
    ) -> None:
        """Initialize the FileContentPrinter.

        Args:
            fs_tree: The filesystem tree to process.
            output_format: Either the string "markdown" or an OutputStrategy instance.
                Defaults to "markdown".
            encoding: The encoding to use when reading files. Defaults to "utf-8".

        Raises:
            ValueError: If output_format string is not "markdown".
            TypeError: If output_format is neither a string nor an OutputStrategy.
            LookupError: If the specified encoding is not available.
        """
        # Validate encoding early to fail fast
        try:
            "test".encode(encoding).decode(encoding)
        except LookupError as e:
            raise LookupError(f"Encoding '{encoding}' is not available") from e

        self.fs_tree = fs_tree
        self.encoding = encoding

        if isinstance(output_format, str):
            if output_format.lower() != "markdown":
                raise ValueError(f"Unsupported output format: {output_format}. Must be: markdown")
            self.output_strategy: OutputStrategy = MarkdownOutputStrategy()
        elif isinstance(output_format, OutputStrategy):
            self.output_strategy = output_format
        else:
            raise TypeError("output_format must be either the string 'markdown' or an OutputStrategy instance")

    def _create_file_info(self, file_path: str, relative_path: str) -> FileInfo:
        """Classify a file once and collect what is needed to print it."""
        path_obj = Path(file_path)
        return FileInfo(
            path=path_obj,
            relative_path=relative_path,
            is_plain_text=is_plain_text_file(path_obj),
            language=language_tag(path_obj),
        )

    def _read_content(self, file_info: FileInfo) -> str:
        """Read a whole file without translating line endings.

        Raises:
            OSError: If the file cannot be opened or read.
            ValueError: If the file cannot be decoded using the configured encoding.
        """
        try:
            with open(file_info.path, "r", encoding=self.encoding, newline="") as file:
                return file.read()
        except UnicodeError as e:
            raise ValueError(
                f"Failed to decode '{file_info.relative_path}' with {self.encoding} encoding: {str(e)}"
            ) from e
        except OSError as e:
            # Add context to OS-level errors
            raise OSError(f"Failed to read '{file_info.relative_path}': {str(e)}") from e

    def _yield_wrapped_content(self, file_info: FileInfo) -> Iterator[str]:
        """Yield a single file's formatted content.

        Raises:
            NotPlainTextError: If the file is not classified as plain text.
            OSError: If the file cannot be opened or read.
            ValueError: If the file cannot be decoded using the configured encoding.
        """
        if not file_info.is_plain_text:
            raise NotPlainTextError(str(file_info.path))

        content = self._read_content(file_info)

        yield self.output_strategy.format_start(str(file_info.path), file_info.language)
        yield self.output_strategy.format_content(content)
        yield self.output_strategy.format_end()

    def yield_file_contents(self) -> Iterator[Tuple[str, str, Iterator[str]]]:
        """Yield every file of the tree with an iterator over its formatted content.

        Yields:
            Tuples of (display_path, relative_path, content_iterator). Consuming the
            content iterator raises NotPlainTextError, OSError or ValueError for a file
            that is skipped; no output has been produced for that file at that point.
        """
        for file_path, relative_path in self.fs_tree.iterate_files():
            file_info = self._create_file_info(file_path, relative_path)
            yield file_path, relative_path, self._yield_wrapped_content(file_info)
