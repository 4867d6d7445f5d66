"""Directory listing utilities for LLM prompts.

This package renders a directory tree and the contents of its plain-text files
as fenced, language-tagged blocks suitable for pasting into a Large Language
Model prompt.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("file-lister")
except PackageNotFoundError:
    __version__ = "unknown"
