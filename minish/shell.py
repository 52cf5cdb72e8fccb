"""The interactive shell loop and its command-line entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from minish.builtins import ShellExit, handle_builtin, is_builtin
from minish.executor import execute_command
from minish.reader import DEFAULT_PROMPT, EndOfInput, read_command
from minish.text import is_blank, tokenize
from minish.variables import replace_variables


class Shell:
    """Reads commands line by line and runs built-ins or programs."""

    def __init__(
        self,
        name: str = "minish",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
        interactive: bool | None = None,
        pid: int | None = None,
    ) -> None:
        self.name = name
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self.stderr = sys.stderr if stderr is None else stderr
        self.environ = os.environ if environ is None else environ
        if interactive is None:
            try:
                interactive = bool(self.stdin.isatty())
            except (AttributeError, ValueError):
                interactive = False
        self.interactive = interactive
        self.pid = os.getpid() if pid is None else pid
        self.counter = 0
        self.last_result = True

    def step(self) -> None:
        """Read and run one command.

        Raises EndOfInput when input is exhausted and ShellExit when the
        exit built-in runs.
        """
        self.counter += 1
        line = read_command(
            self.stdin, DEFAULT_PROMPT, self.stdout, self.interactive, self.stderr
        )
        if line is None or is_blank(line):
            return
        args = tokenize(line)
        if not args:
            return

        builtin = is_builtin(args)
        args = replace_variables(args, 0, self.environ, self.pid)
        if builtin:
            handle_builtin(args, 0, self.environ, self.stdout)
        else:
            self.stdout.flush()
            self.last_result = execute_command(
                args, self.name, self.counter, self.environ, self.stderr
            )

    def run(self) -> int:
        """Run commands until input ends or exit is called; return the status."""
        while True:
            try:
                self.step()
            except EndOfInput:
                return 0
            except ShellExit as request:
                return request.status


def main(argv: list[str] | None = None) -> int:
    """Start a shell on standard input; return its exit status."""
    args = sys.argv if argv is None else argv
    name = args[0] if args else "minish"
    return Shell(name).run() & 0xFF


if __name__ == "__main__":
    sys.exit(main())