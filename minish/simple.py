"""A minimal shell: read a line, split it, run a built-in or a program."""

from __future__ import annotations

import os
import re
import subprocess
import sys
from collections.abc import Iterator, Mapping, Sequence
from typing import TextIO

PROMPT = "#cisfun$ "
SEPARATORS = " \t\n\r\a"
DEFAULT_SEARCH_PATH = "/bin:/usr/bin"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
NOT_FOUND_MESSAGE = "./shell: No such file or directory\n"

_SPLIT_RE = re.compile("[" + re.escape(SEPARATORS) + "]+")
_ATOI_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class ExitRequested(Exception):
    """Raised by the exit command; carries the status to exit with."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def _isatty(stream: TextIO) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def split_line(line: str) -> list[str]:
    """Split *line* on spaces, tabs, carriage returns, newlines and bells."""
    return [word for word in _SPLIT_RE.split(line) if word]


def read_line(stream: TextIO | None = None) -> str | None:
    """Read one line without its trailing newline; None at end of input."""
    source = sys.stdin if stream is None else stream
    line = source.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def iter_lines(stream: TextIO | None = None) -> Iterator[str]:
    """Yield newline-terminated lines without the newline.

    A final line with no newline before end of input is dropped.
    """
    source = sys.stdin if stream is None else stream
    for line in iter(source.readline, ""):
        if not line.endswith("\n"):
            return
        yield line[:-1]


def is_exit_command(args: Sequence[str]) -> bool:
    """Return True if the command is 'exit'."""
    return bool(args) and args[0] == "exit"


def is_env_command(args: Sequence[str]) -> bool:
    """Return True if the command is 'env'."""
    return bool(args) and args[0] == "env"


def exit_status(args: Sequence[str], out: TextIO | None = None) -> int:
    """Work out the status for an exit command.

    A non-numeric argument is reported on *out* and gives failure.
    """
    dest = sys.stdout if out is None else out
    if len(args) < 2:
        return EXIT_SUCCESS
    argument = args[1]
    status = _atoi(argument)
    if status == 0 and not argument.startswith("0"):
        dest.write(f"Error: exit: {argument}: numeric argument required\n")
        dest.flush()
        return EXIT_FAILURE
    return status


def print_environment(
    environ: Mapping[str, str] | None = None, out: TextIO | None = None
) -> None:
    """Write every environment entry as 'NAME=value' on its own line."""
    env = os.environ if environ is None else environ
    dest = sys.stdout if out is None else out
    for name, value in env.items():
        dest.write(f"{name}={value}\n")
    dest.flush()


def _spawn(args: Sequence[str], path: str) -> int:
    completed = subprocess.run(list(args), executable=path, env={}, check=False)
    return completed.returncode


def run_external(
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
    out: TextIO | None = None,
) -> int:
    """Run a program with an empty environment and return its exit code.

    Absolute names are run directly; others are searched for in PATH
    (or /bin:/usr/bin when PATH is unset).
    """
    if not args:
        return EXIT_SUCCESS
    dest = sys.stdout if out is None else out
    env = os.environ if environ is None else environ
    name = args[0]
    dest.flush()

    if name.startswith("/"):
        try:
            return _spawn(args, name)
        except OSError as exc:
            sys.stderr.write(f"execve error: {exc.strerror}\n")
            sys.stderr.flush()
            return EXIT_FAILURE

    search_path = env.get("PATH")
    if search_path is None:
        search_path = DEFAULT_SEARCH_PATH
    for directory in filter(None, search_path.split(":")):
        try:
            return _spawn(args, f"{directory}/{name}")
        except OSError:
            continue
    dest.write(NOT_FOUND_MESSAGE)
    dest.flush()
    return EXIT_FAILURE


def execute(
    args: Sequence[str],
    environ: Mapping[str, str] | None = None,
    out: TextIO | None = None,
) -> bool:
    """Run one command; return True if the shell should keep going.

    Raises ExitRequested for the exit command.
    """
    if is_exit_command(args):
        raise ExitRequested(exit_status(args, out))
    if is_env_command(args):
        print_environment(environ, out)
        return True
    if args:
        run_external(args, environ, out)
    return True


def main(argv: list[str] | None = None) -> int:
    """Run commands given as arguments, or else read them from standard input."""
    arguments = sys.argv if argv is None else argv
    try:
        if len(arguments) > 1:
            for line in arguments[1:]:
                execute(split_line(line))
            return EXIT_SUCCESS
        interactive = _isatty(sys.stdin)
        while True:
            if interactive:
                sys.stdout.write(PROMPT)
                sys.stdout.flush()
            line = read_line(sys.stdin)
            if line is None:
                return EXIT_SUCCESS
            if not execute(split_line(line)):
                return EXIT_SUCCESS
    except ExitRequested as request:
        return request.status & 0xFF


if __name__ == "__main__":
    sys.exit(main())