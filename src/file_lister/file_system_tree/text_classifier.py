"""Plain-text file classification and language tagging."""

import mimetypes
from pathlib import Path
from typing import Dict

from file_lister.types import PathType

# Extensions always treated as plain text, checked before any MIME guess
PLAIN_TEXT_EXTENSIONS = frozenset(
    {
        # Web development
        ".ts",
        ".tsx",
        ".js",
        ".jsx",
        ".json",
        ".html",
        ".htm",
        ".css",
        ".scss",
        ".sass",
        # Templates
        ".twig",
        ".ejs",
        ".hbs",
        ".vue",
        ".svelte",
        # Config
        ".yml",
        ".yaml",
        ".toml",
        ".ini",
        ".env",
        # Documentation
        ".md",
        ".markdown",
        ".txt",
        ".rst",
        # Other programming languages
        ".py",
        ".rb",
        ".php",
        ".java",
        ".go",
        ".rs",
        ".c",
        ".cpp",
        ".h",
        ".hpp",
        ".sh",
        ".bash",
    }
)

# Fence language identifiers; extensions missing here get an empty tag
LANGUAGE_TAGS: Dict[str, str] = {
    # Web development
    ".ts": "typescript",
    ".tsx": "typescript",
    ".js": "javascript",
    ".jsx": "javascript",
    ".json": "json",
    ".html": "html",
    ".htm": "html",
    ".css": "css",
    ".scss": "scss",
    ".sass": "scss",
    # Templates
    ".twig": "twig",
    ".ejs": "ejs",
    ".hbs": "handlebars",
    ".vue": "vue",
    ".svelte": "svelte",
    # Config
    ".yml": "yaml",
    ".yaml": "yaml",
    ".toml": "toml",
    ".ini": "ini",
    ".env": "dotenv",
    # Documentation
    ".md": "markdown",
    ".markdown": "markdown",
    ".txt": "",
    ".rst": "restructuredtext",
    # Other programming languages
    ".py": "python",
    ".rb": "ruby",
    ".php": "php",
    ".java": "java",
    ".go": "go",
    ".rs": "rust",
    ".c": "c",
    ".cpp": "cpp",
    ".h": "cpp",
    ".hpp": "cpp",
    ".sh": "bash",
    ".bash": "bash",
}


def is_plain_text_file(file_path: PathType) -> bool:
    """Decide whether a file should be treated as plain text.

    This is a name-based heuristic; file contents are never inspected, so a binary
    file carrying a text-like extension is classified as text.

    1. Extensions in PLAIN_TEXT_EXTENSIONS (case-insensitive) are text.
    2. Otherwise the MIME type is guessed from the file name. The file is text if the
       guessed top-level type is ``text`` or the type is ``application/json``. Files
       without a guess are not text.

    Args:
        file_path: Path to classify. Can be any path-like object; it need not exist.

    Returns:
        True if the file should be treated as plain text.

    Example:
        >>> is_plain_text_file("config.b.json")
        True
        >>> is_plain_text_file("notes.csv")
        True
        >>> is_plain_text_file("logo.png")
        False
        >>> is_plain_text_file("LICENSE")
        False
    """
    path_obj = Path(file_path)

    if path_obj.suffix.lower() in PLAIN_TEXT_EXTENSIONS:
        return True

    mime_type, _ = mimetypes.guess_type(path_obj.name)
    if mime_type is None:
        return False

    main_type, _, sub_type = mime_type.partition("/")
    return main_type == "text" or (main_type == "application" and sub_type == "json")


def language_tag(file_path: PathType) -> str:
    """Return the code fence language identifier for a file.

    Args:
        file_path: Path whose extension selects the tag.

    Returns:
        The language identifier, or an empty string for unknown extensions.

    Example:
        >>> language_tag("src/App.TSX")
        'typescript'
        >>> language_tag("README")
        ''
    """
    return LANGUAGE_TAGS.get(Path(file_path).suffix.lower(), "")
