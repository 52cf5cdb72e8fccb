"""Running external commands found through PATH."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import TextIO

from minish.messages import report_error
from minish.paths import find_command

NOT_FOUND = ": Not found\n"


def execute_command(
    args: Sequence[str],
    shell_name: str,
    counter: int,
    environ: Mapping[str, str] | None = None,
    err: TextIO | None = None,
) -> bool:
    """Run *args* as an external program and wait for it.

    Returns True when the program exits with status 0, False when it
    fails. A command that cannot be found or started is reported on
    *err* and also yields True.
    """
    if not args:
        raise ValueError("empty command")
    errors = sys.stderr if err is None else err

    path = find_command(args[0], environ)
    if path is None:
        report_error(shell_name, args[0], counter, NOT_FOUND, errors)
        return True

    env = None if environ is None else dict(environ)
    try:
        completed = subprocess.run(list(args), executable=path, env=env, check=False)
    except OSError as exc:
        errors.write(f"Err! Couldn't fork: {exc.strerror}\n")
        errors.flush()
        return True
    return completed.returncode == 0