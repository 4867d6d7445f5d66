"""Command-line argument parsing for file-lister.

This module defines the command-line interface for file-lister,
handling argument parsing and exclusion pattern collection.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from file_lister import __version__
from file_lister.exclusion_rules.glob_rules import GlobExclusionRules


def create_exclusion_action(exclusion_rules: GlobExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion patterns.

    This factory function creates an action class that will update the provided
    exclusion rules object as arguments are processed. Patterns that fail to compile
    are reported on standard error and dropped; they never abort parsing.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to add comma-separated glob patterns to the exclusion rules."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is not None:
                for pattern, error in exclusion_rules.add_rules(str(values)):
                    print(f"Warning: Invalid glob pattern '{pattern}': {error}", file=sys.stderr)

            # Also keep the raw arguments on the namespace
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: GlobExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with file-lister's options.
    """
    description = """
    file-lister: Creates LLM friendly text from plaintext files in a directory with an optional prompt.

    The output starts with a tree of the directory, followed by the contents of every
    plain-text file in a fenced code block tagged with the file's language, and ends
    with the optional prompt. Files that are not plain text are skipped with a warning.
    """

    epilog = """
    Examples:
      # List a project
      file-lister -d /path/to/project

      # Skip logs and build output
      file-lister -d . -e "*.log, target, node_modules"

      # Only skip Python files below src/
      file-lister -d . -e "src/**/*.py"

      # Append a prompt and write to a file
      file-lister -d . -p "Find the bug in the parser." -o prompt.md
    """

    parser = argparse.ArgumentParser(
        prog="file-lister",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"file-lister {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        required=True,
        help="Directory to process.",
    )
    parser.add_argument(
        "-p",
        "--prompt",
        metavar="TEXT",
        help="Prompt text appended after the file contents.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="PATTERNS",
        action=ExclusionAction,
        help=(
            "Comma-separated list of directories/patterns to exclude (supports glob patterns). "
            "Patterns are matched against paths relative to the directory given with -d, "
            "so use 'build' rather than 'proj/build'. Patterns without a slash match entry names "
            "at any depth. Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )

    return parser
