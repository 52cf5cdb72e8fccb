"""Environment lookup and resolution of command names to executable paths."""

from __future__ import annotations

import os
from collections.abc import Mapping

from minish.text import has_slash, join_path


def get_env(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Return the value of *name* in *environ*, or None if unset or empty.

    Only the first line of the value is returned.
    """
    env = os.environ if environ is None else environ
    value = env.get(name)
    if value is None:
        return None
    first_line = value.lstrip("\n").split("\n", 1)[0]
    return first_line or None


def is_valid_path(path: str) -> bool:
    """Return True if *path* names an existing file system entry."""
    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


def find_command(name: str, environ: Mapping[str, str] | None = None) -> str | None:
    """Resolve *name* to a path using PATH, or return None.

    Names containing a slash are checked as given; without a PATH
    variable nothing is found.
    """
    search_path = get_env("PATH", environ)
    if search_path is None:
        return None

    if has_slash(name):
        return name if is_valid_path(name) else None

    for directory in filter(None, search_path.split(":")):
        candidate = join_path(directory, name)
        if is_valid_path(candidate):
            return candidate
    return None