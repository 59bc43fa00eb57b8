"""Lines holding several commands: pipelines, '&&' chains and ';' lists."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Iterable, Sequence

from xshell.execute import Status, run_command
from xshell.redirect import RedirectError, open_redirects, split_redirects

MAX_COMMANDS = 64
MAX_TOKENS = 64
MAX_PIPES = 10

_BUILTINS = frozenset({"hostname", "exit", "cd"})
_WHITESPACE = re.compile(r"[ \t]+")


def _error(message: str) -> Status:
    print(message, file=sys.stderr)
    return Status.ERROR


def tokenize(text: str) -> list[str]:
    """Split a command on spaces and tabs, keeping at most 63 words."""
    return [word for word in _WHITESPACE.split(text) if word][: MAX_TOKENS - 1]


def _split(line: str, delimiter: str) -> list[str]:
    return [piece for piece in line.split(delimiter) if piece][:MAX_COMMANDS]


def _run_builtin_stage(
    tokens: Sequence[str], hostname: str, stdin: int | None, stdout: int | None
) -> Status:
    # A pipeline stage runs apart from the shell, so 'cd' must not move the shell.
    try:
        saved = os.getcwd()
    except OSError:
        saved = None
    try:
        return run_command(tokens, hostname, stdin, stdout)
    finally:
        if saved is not None:
            try:
                os.chdir(saved)
            except OSError:
                pass


def _start_stage(
    tokens: Sequence[str], hostname: str, stdin: int | None, stdout: int | None
) -> Status | subprocess.Popen[bytes]:
    if not tokens:
        return Status.ERROR
    if tokens[0] in _BUILTINS:
        return _run_builtin_stage(tokens, hostname, stdin, stdout)
    try:
        redirects = split_redirects(tokens)
        with open_redirects(redirects) as (redirected_in, redirected_out):
            if not redirects.args:
                return _error("Command execution failed: no command given")
            return subprocess.Popen(
                redirects.args,
                stdin=redirected_in if redirected_in is not None else stdin,
                stdout=redirected_out if redirected_out is not None else stdout,
            )
    except RedirectError as error:
        return _error(str(error))
    except OSError as error:
        return _error(f"Command execution failed: {error.strerror}")


def run_pipeline(commands: Iterable[str], hostname: str) -> Status:
    """Run commands connected stdout to stdin; OK only if every stage succeeds."""
    commands = list(commands)
    if len(commands) > MAX_PIPES + 1:
        return _error("Too many piped commands")
    sys.stdout.flush()

    children: list[subprocess.Popen[bytes]] = []
    failed = False
    upstream: int | None = None
    for position, text in enumerate(commands):
        next_read: int | None = None
        next_write: int | None = None
        if position < len(commands) - 1:
            next_read, next_write = os.pipe()
        try:
            outcome = _start_stage(tokenize(text), hostname, upstream, next_write)
        finally:
            for descriptor in (upstream, next_write):
                if descriptor is not None:
                    os.close(descriptor)
        upstream = next_read
        if isinstance(outcome, subprocess.Popen):
            children.append(outcome)
        elif outcome != Status.OK:
            failed = True

    for child in children:
        if child.wait() != 0:
            failed = True
    return Status.ERROR if failed else Status.OK


def run_sequence(commands: Iterable[str], hostname: str) -> Status:
    """Run commands in order, stopping at the first that does not succeed."""
    result = Status.OK
    for text in commands:
        tokens = tokenize(text)
        if not tokens:
            continue
        result = run_command(tokens, hostname)
        if result != Status.OK:
            return result
    return result


def run_separate(commands: Iterable[str], hostname: str) -> Status:
    """Run every command in order; stop only when one asks the shell to exit."""
    result = Status.OK
    for text in commands:
        tokens = tokenize(text)
        if not tokens:
            continue
        result = run_command(tokens, hostname)
        if result == Status.EXIT:
            return Status.EXIT
    return result


def run_line(line: str, hostname: str) -> Status:
    """Run one input line, choosing '|', then '&&', then ';' as its structure."""
    if "|" in line:
        return run_pipeline(_split(line, "|"), hostname)
    if "&&" in line:
        return run_sequence(_split(line, "&"), hostname)
    if ";" in line:
        return run_separate(_split(line, ";"), hostname)
    return run_command(tokenize(line), hostname)