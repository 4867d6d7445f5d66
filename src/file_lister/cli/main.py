"""Command-line interface for file-lister.

This module provides the command-line entry point. It parses arguments, builds the
directory tree, and writes the tree, the fenced file contents and the optional
prompt to the output, reporting skipped files on standard error.

Signal Handling Notes:
    - SIGPIPE: Handled when the output pipe is closed (e.g., when piping to `head`) on Unix-like systems
    - SIGINT: Handled for clean exit on Ctrl+C

Exit Codes:
    0: Successful completion, including runs where individual files were skipped
    1: Fatal error (missing root, unreadable metadata while building the tree, unwritable output)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    $ file-lister -d ./src -e "*.log,dist" -p "Review this code."
"""

import sys

from file_lister.cli.argparser import create_parser
from file_lister.cli.safe_writer import SafeWriter
from file_lister.cli.signal_handler import setup_signal_handling, signal_handler
from file_lister.exceptions import NotPlainTextError
from file_lister.exclusion_rules.glob_rules import GlobExclusionRules
from file_lister.file_lister import StreamingFileLister


def report_skipped_file(relative_path: str, error: Exception) -> None:
    """Report a file that was left out of the output on standard error.

    Non-text files are warnings; unreadable or undecodable files are errors. Neither
    stops processing.

    Args:
        relative_path: Path of the file relative to the processed directory.
        error: The reason the file was skipped.
    """
    if isinstance(error, NotPlainTextError):
        print(f"Warning: {str(error)}", file=sys.stderr)
    else:
        print(f"Error: {str(error)}", file=sys.stderr)


def main() -> None:
    """Main entry point for the file-lister command-line interface.

    Exit codes:
        0: Successful completion
        1: Fatal error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated by the -e/--exclude action during parsing
        exclusion_rules = GlobExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()

        # Build the tree before writing anything; tree errors are fatal
        lister = StreamingFileLister(
            args.directory,
            exclusion_rules=exclusion_rules,
            prompt=args.prompt,
        )

        with SafeWriter(args.output) as safe_writer:
            try:
                safe_writer.write_all(lister.stream_tree())
                safe_writer.write_all(lister.stream_contents(report_skipped_file))
                safe_writer.write_all(lister.stream_prompt())
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
