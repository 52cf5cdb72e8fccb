"""Error reports in the '<shell>: <position>: <command><message>' shape."""

from __future__ import annotations

import sys
from typing import TextIO


def format_error(shell_name: str, command: str, position: int, message: str) -> str:
    """Build an error line; *message* is appended directly after *command*."""
    return f"{shell_name}: {position}: {command}{message}"


def report_error(
    shell_name: str,
    command: str,
    position: int,
    message: str,
    stream: TextIO | None = None,
) -> None:
    """Write the formatted error to *stream* (standard error by default)."""
    out = sys.stderr if stream is None else stream
    out.write(format_error(shell_name, command, position, message))
    out.flush()