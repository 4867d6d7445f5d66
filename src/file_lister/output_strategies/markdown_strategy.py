"""Markdown output strategy using fenced code blocks."""

from .base_strategy import OutputStrategy


class MarkdownOutputStrategy(OutputStrategy):
    """Formats each file as a list item followed by a fenced, language-tagged code block.

    Content is passed through unchanged. A newline is written between the content and
    the closing fence, and a blank line separates consecutive files.

    Example:
        >>> strategy = MarkdownOutputStrategy()
        >>> print(
        ...     strategy.format_start("src/main.py", "python")
        ...     + strategy.format_content("print('hi')")
        ...     + strategy.format_end(),
        ...     end="",
        ... )
        - src/main.py:
        ```python
        print('hi')
        ```
        <BLANKLINE>
    """

    FENCE = "```"

    def format_start(self, path: str, language: str = "") -> str:
        return f"- {path}:\n{self.FENCE}{language}\n"

    def format_content(self, content: str) -> str:
        return content

    def format_end(self) -> str:
        return f"\n{self.FENCE}\n\n"
