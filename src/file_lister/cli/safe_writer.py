"""Signal-aware output writing for the file-lister CLI."""

import errno
import os
import sys
import types
from pathlib import Path
from typing import Iterable, Optional, Type

from file_lister.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes UTF-8 text to standard output or a file, stopping cleanly on interruption.

    Text is encoded and written with ``os.write`` so file contents reach the output
    byte for byte, with no newline translation. A closed pipe or a received signal
    is turned into BrokenPipeError, which the CLI treats as a normal stop.

    Attributes:
        output: The output file path, or None for standard output.
        fd: The file descriptor being written to.

    Example:
        >>> with SafeWriter() as writer:  # doctest: +SKIP
        ...     writer.write("### File Tree:\\n")
    """

    def __init__(self, output: Optional[Path] = None):
        """Open the output.

        Args:
            output: Path of the file to write. Standard output is used when None.

        Raises:
            OSError: If the output file cannot be opened.
        """
        self.output = output
        self._closed = False

        if output is None:
            self.fd = sys.stdout.fileno()
            self._owns_fd = False
        else:
            self.fd = os.open(output, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
            self._owns_fd = True

    def write(self, data: str) -> None:
        """Write all of ``data``.

        Raises:
            BrokenPipeError: If a signal was received or the reading end of the pipe is closed.
            ValueError: If the writer has been closed.
            OSError: If any other I/O error occurs.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        view = memoryview(data.encode("utf-8"))
        while view:
            if signal_handler.interrupted:
                raise BrokenPipeError()
            try:
                written = os.write(self.fd, view)
            except OSError as e:
                if e.errno == errno.EPIPE:
                    signal_handler.sigpipe_received.set()
                    raise BrokenPipeError()
                raise
            view = view[written:]

    def write_all(self, chunks: Iterable[str]) -> None:
        """Write every chunk of an iterable in order."""
        for chunk in chunks:
            self.write(chunk)

    def close(self) -> None:
        """Close the file descriptor if this writer opened it. Safe to call twice."""
        if self._closed:
            return
        self._closed = True

        if self._owns_fd:
            os.close(self.fd)

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # Prefer the exception raised inside the with block
            if exc_type is None:
                raise
