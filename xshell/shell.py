"""The interactive loop: prompt, read a line, remember it, run it."""

from __future__ import annotations

import argparse
import os
import signal
import sys
from collections.abc import Sequence

from xshell.compound import run_line
from xshell.execute import Status
from xshell.history import History
from xshell.signals import install_sigint_handler

HOSTNAME = "x_shell"
MAX_INPUT = 1024


def prompt(user: str, hostname: str) -> str:
    """Return the prompt shown before each line."""
    return f"{user}@{hostname}> "


def handle_input(line: str, hostname: str, history: History) -> Status:
    """Record and run one line of input; 'history' lists what was entered."""
    line = line.split("\n", 1)[0]
    if not line:
        return Status.OK
    history.add(line)
    if line == "history":
        sys.stdout.write(history.render())
        sys.stdout.flush()
        return Status.OK
    return run_line(line, hostname)


def _loop(user: str) -> None:
    history = History()
    shell_prompt = prompt(user, HOSTNAME)
    while True:
        sys.stdout.write(shell_prompt)
        sys.stdout.flush()
        try:
            line = sys.stdin.readline(MAX_INPUT - 1)
        except OSError as error:
            print(f"Error reading input: {error}", file=sys.stderr)
            continue
        if not line:
            sys.stdout.write("\n")
            sys.stdout.flush()
            return
        if handle_input(line, HOSTNAME, history) == Status.EXIT:
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell until 'exit' or end of input."""
    parser = argparse.ArgumentParser(prog="xshell", description="A small shell.")
    parser.parse_args(argv)

    try:
        previous = install_sigint_handler()
    except (ValueError, OSError) as error:
        print(f"Error setting up signal handler: {error}", file=sys.stderr)
        return 1
    try:
        user = os.environ.get("USER")
        if user is None:
            print("Error getting username", file=sys.stderr)
            return 1
        _loop(user)
    finally:
        if previous is not None:
            signal.signal(signal.SIGINT, previous)
    return 0


if __name__ == "__main__":
    sys.exit(main())