"""Running a single command: built-ins or an external program."""

from __future__ import annotations

import enum
import io
import os
import subprocess
import sys
from collections.abc import Sequence
from typing import IO, Any

from xshell.redirect import RedirectError, open_redirects, split_redirects


class Status(enum.IntEnum):
    """Outcome of a command."""

    OK = 0
    EXIT = 1
    ERROR = -1


def _write(stdout: Any, text: str) -> None:
    if stdout is None:
        sys.stdout.write(text)
        sys.stdout.flush()
    elif isinstance(stdout, int):
        os.write(stdout, text.encode())
    elif isinstance(stdout, io.TextIOBase):
        stdout.write(text)
        stdout.flush()
    else:
        stdout.write(text.encode())
        stdout.flush()


def _error(message: str) -> Status:
    print(message, file=sys.stderr)
    return Status.ERROR


def _change_directory(args: Sequence[str]) -> Status:
    target = args[1] if len(args) > 1 and args[1] != "~" else os.environ.get("HOME")
    if not target:
        return _error("cd: HOME not set")
    try:
        os.chdir(target)
    except OSError as error:
        return _error(f"cd failed: {error.strerror}")
    return Status.OK


def _run_external(args: Sequence[str], stdin: Any, stdout: Any) -> Status:
    try:
        redirects = split_redirects(args)
        with open_redirects(redirects) as (redirected_in, redirected_out):
            if not redirects.args:
                return _error("Command execution failed: no command given")
            sys.stdout.flush()
            completed = subprocess.run(
                redirects.args,
                stdin=redirected_in if redirected_in is not None else stdin,
                stdout=redirected_out if redirected_out is not None else stdout,
                check=False,
            )
    except RedirectError as error:
        return _error(str(error))
    except OSError as error:
        return _error(f"Command execution failed: {error.strerror}")
    return Status.OK if completed.returncode == 0 else Status.ERROR


def run_command(
    args: Sequence[str],
    hostname: str,
    stdin: IO[Any] | int | None = None,
    stdout: IO[Any] | int | None = None,
) -> Status:
    """Run one tokenized command and report how it went.

    The built-ins ``hostname``, ``exit`` and ``cd`` run in this process;
    anything else is started as a program, honouring '<', '>' and '>>'.
    """
    if not args:
        return Status.OK
    command = args[0]
    if command == "hostname":
        _write(stdout, f"{hostname}\n")
        return Status.OK
    if command == "exit":
        _write(stdout, "Goodbye!\n")
        return Status.EXIT
    if command == "cd":
        return _change_directory(args)
    return _run_external(args, stdin, stdout)