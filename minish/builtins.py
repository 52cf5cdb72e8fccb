"""The shell's built-in commands: exit and env."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

BUILTINS = ("exit", "env")

_LEADING_INT_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class ShellExit(Exception):
    """Raised by the exit built-in; carries the requested exit status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _leading_int(text: str) -> int:
    match = _LEADING_INT_RE.match(text)
    return int(match.group(1)) if match else 0


def is_builtin(args: Sequence[str]) -> bool:
    """Return True if the command names a built-in."""
    return bool(args) and args[0] in BUILTINS


def print_env(environ: Mapping[str, str] | None = None, out: TextIO | None = None) -> None:
    """Write each environment entry as 'NAME=value' on its own line."""
    env = os.environ if environ is None else environ
    dest = sys.stdout if out is None else out
    for name, value in env.items():
        dest.write(f"{name}={value}\n")
    dest.flush()


def handle_builtin(
    args: Sequence[str],
    status: int = 0,
    environ: Mapping[str, str] | None = None,
    out: TextIO | None = None,
) -> bool:
    """Run a built-in command; return False if *args* names none.

    'exit' raises ShellExit with its numeric argument (leading digits, 0
    if none) or with *status* when given no argument.
    """
    if not args:
        return False
    name = args[0]
    if name == "exit":
        if len(args) > 1:
            raise ShellExit(_leading_int(args[1]))
        raise ShellExit(status)
    if name == "env":
        print_env(environ, out)
        return True
    return False