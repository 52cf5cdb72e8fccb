"""Expansion of '$?', '$$' and '$NAME' words in a command."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence


def replace_variables(
    args: Sequence[str],
    exit_status: int = 0,
    environ: Mapping[str, str] | None = None,
    pid: int | None = None,
) -> list[str]:
    """Return a copy of *args* with variable words replaced.

    '$?' becomes *exit_status*, '$$' the process id, and '$NAME' the value
    of NAME when it is set; unset names are left as written.
    """
    env = os.environ if environ is None else environ
    process_id = os.getpid() if pid is None else pid

    def expand(word: str) -> str:
        if not word.startswith("$"):
            return word
        if word == "$?":
            return str(exit_status)
        if word == "$$":
            return str(process_id)
        name = word[1:]
        if not name:
            return word
        value = env.get(name)
        return word if value is None else value

    return [expand(word) for word in args]