"""Interrupt handling for the interactive loop."""

from __future__ import annotations

import signal
import sys
from types import FrameType
from typing import Any


def _on_sigint(signum: int, frame: FrameType | None) -> None:
    sys.stdout.write("\n")
    sys.stdout.flush()


def install_sigint_handler() -> Any:
    """Make Ctrl-C print a newline instead of ending the shell.

    Returns the handler that was installed before. Raises ValueError or
    OSError when the handler cannot be installed.
    """
    previous = signal.signal(signal.SIGINT, _on_sigint)
    if hasattr(signal, "siginterrupt"):
        signal.siginterrupt(signal.SIGINT, False)
    return previous