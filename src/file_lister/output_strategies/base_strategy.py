"""Output strategy base class defining the interface for file content formatting.

This module provides the abstract base class that defines how file content should be
formatted for output. It establishes the contract that concrete strategies must follow
for wrapping each file's content.
"""

from abc import ABC, abstractmethod


class OutputStrategy(ABC):
    """Abstract base class defining the interface for file content output formatting strategies.

    This class implements the Strategy pattern for formatting file content output. Each
    concrete strategy implements methods to wrap file content with appropriate markers.

    The output process for a file is divided into three phases:
    1. Start - outputs the opening wrapper with file metadata
    2. Content - formats the actual file content
    3. End - outputs the closing wrapper

    Example:
        >>> class CustomStrategy(OutputStrategy):
        ...     def format_start(self, path: str, language: str = "") -> str:
        ...         return f"<file path='{path}' language='{language}'>\\n"
        ...
        ...     def format_content(self, content: str) -> str:
        ...         return content
        ...
        ...     def format_end(self) -> str:
        ...         return "</file>\\n"
        >>> CustomStrategy().format_start("a.py", "python")
        "<file path='a.py' language='python'>\\n"
    """

    @abstractmethod
    def format_start(self, path: str, language: str = "") -> str:
        """Format the opening wrapper for a file's content.

        Args:
            path: The path of the file being formatted, as it should be displayed.
            language: Language identifier of the content, or an empty string if unknown.

        Returns:
            The formatted opening wrapper string.
        """
        pass

    @abstractmethod
    def format_content(self, content: str) -> str:
        """Format the content of a file.

        Args:
            content: The file content to format.

        Returns:
            The formatted content string.
        """
        pass

    @abstractmethod
    def format_end(self) -> str:
        """Format the closing wrapper for a file's content.

        Returns:
            The formatted closing wrapper string.
        """
        pass
