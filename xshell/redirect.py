"""Parsing and opening of '<', '>' and '>>' redirections."""

from __future__ import annotations

import os
from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import BinaryIO


class RedirectError(Exception):
    """A redirection is malformed or its file cannot be opened."""


@dataclass
class Redirects:
    """Arguments with redirections removed, and the redirection targets."""

    args: list[str] = field(default_factory=list)
    stdin: str | None = None
    stdout: str | None = None
    append_to: str | None = None


def _take(args: list[str], operator: str, missing: str) -> str | None:
    try:
        position = args.index(operator)
    except ValueError:
        return None
    if position + 1 >= len(args):
        raise RedirectError(missing)
    target = args[position + 1]
    del args[position : position + 2]
    return target


def split_redirects(args: Sequence[str]) -> Redirects:
    """Remove the first '<', '>' and '>>' with their file names from args."""
    remaining = list(args)
    stdin = _take(remaining, "<", "Input file is missing after '<'")
    stdout = _take(remaining, ">", "Output file is missing after '>'")
    append_to = _take(remaining, ">>", "Output file is missing after '>>'")
    return Redirects(remaining, stdin, stdout, append_to)


def _open_output(path: str, append: bool) -> BinaryIO:
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        descriptor = os.open(path, flags, 0o644)
    except OSError as error:
        raise RedirectError(f"Failed to open output file: {error.strerror}") from error
    return os.fdopen(descriptor, "ab" if append else "wb")


@contextmanager
def open_redirects(
    redirects: Redirects,
) -> Iterator[tuple[BinaryIO | None, BinaryIO | None]]:
    """Open the redirection files, yielding (stdin, stdout); None where absent.

    When both '>' and '>>' are given, the '>' file is still created and
    truncated, but output goes to the '>>' file.
    """
    with ExitStack() as stack:
        stdin: BinaryIO | None = None
        stdout: BinaryIO | None = None
        if redirects.stdin is not None:
            try:
                stdin = stack.enter_context(open(redirects.stdin, "rb"))
            except OSError as error:
                raise RedirectError(
                    f"Failed to open input file: {error.strerror}"
                ) from error
        if redirects.stdout is not None:
            stdout = stack.enter_context(_open_output(redirects.stdout, append=False))
        if redirects.append_to is not None:
            stdout = stack.enter_context(_open_output(redirects.append_to, append=True))
        yield stdin, stdout