"""Output strategies for formatting file contents."""

from .base_strategy import OutputStrategy
from .markdown_strategy import MarkdownOutputStrategy

__all__ = [
    "OutputStrategy",
    "MarkdownOutputStrategy",
]
