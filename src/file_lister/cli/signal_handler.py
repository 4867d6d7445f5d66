"""Signal handling utilities for the file-lister CLI.

This module tracks interruptions (a closed output pipe or Ctrl+C) so that output
stops cleanly and the process exits with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

# SIGPIPE does not exist on Windows
SIGPIPE: Optional[int] = getattr(signal, "SIGPIPE", None)

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so that writers can stop and the CLI can exit properly.

    Each handler restores the original disposition after firing once, so a second
    signal of the same kind falls back to the default behaviour.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: Dict[int, Any] = {signal.SIGINT: signal.getsignal(signal.SIGINT)}
        if SIGPIPE is not None:
            self._original_handlers[SIGPIPE] = signal.getsignal(SIGPIPE)

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record a received signal and restore its original handler.

        Args:
            signum: The signal number.
            frame: The current stack frame.
        """
        if signum == signal.SIGINT:
            self.sigint_received.set()
        elif signum == SIGPIPE:
            self.sigpipe_received.set()
        signal.signal(signum, self._original_handlers[signum])

    @property
    def interrupted(self) -> bool:
        """Whether output should stop because of a received signal."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the received signals, or None if none was received."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the handler for SIGINT and, where available, SIGPIPE."""
    signal.signal(signal.SIGINT, signal_handler.handle)
    if SIGPIPE is not None:
        signal.signal(SIGPIPE, signal_handler.handle)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit to keep the interpreter from reporting errors while
    flushing a stdout whose reader has gone away.
    """
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
