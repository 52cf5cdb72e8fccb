"""Reading one command line from the shell's input."""

from __future__ import annotations

import os
import sys
from typing import TextIO

DEFAULT_PROMPT = "$ "


class EndOfInput(Exception):
    """Raised when the input stream has no more lines."""


def _isatty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def read_command(
    stream: TextIO | None = None,
    prompt: str = DEFAULT_PROMPT,
    out: TextIO | None = None,
    interactive: bool | None = None,
    err: TextIO | None = None,
) -> str | None:
    """Read one line of input and return it without comment or newline.

    The prompt is shown only in interactive mode. Everything from the
    first '#' on is dropped. A line holding '$$' makes the shell's
    process id go to *err* and yields None. At end of input a newline is
    written in interactive mode and EndOfInput is raised.
    """
    source = sys.stdin if stream is None else stream
    dest = sys.stdout if out is None else out
    errors = sys.stderr if err is None else err
    if interactive is None:
        interactive = _isatty(source)

    if interactive:
        dest.write(prompt)
        dest.flush()

    line = source.readline()
    if not line:
        if interactive:
            dest.write("\n")
            dest.flush()
        raise EndOfInput

    line = line.split("#", 1)[0]
    if "$$" in line:
        errors.write(f"{os.getpid()}\n")
        errors.flush()
        return None

    if line.endswith("\n"):
        line = line[:-1]
    return line