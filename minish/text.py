"""String helpers used by the shell: blank detection, tokenizing and path joins."""

from __future__ import annotations

import re

DELIMITERS = " \n\t"

_SPLIT_RE = re.compile("[" + re.escape(DELIMITERS) + "]+")


def is_blank(text: str) -> bool:
    """Return True if *text* holds nothing but spaces and newlines."""
    return all(char in (" ", "\n") for char in text)


def tokenize(line: str) -> list[str]:
    """Split *line* on spaces, tabs and newlines, dropping empty pieces."""
    return [token for token in _SPLIT_RE.split(line) if token]


def has_slash(text: str) -> bool:
    """Return True if *text* contains a forward slash."""
    return "/" in text


def join_path(directory: str, name: str) -> str:
    """Join *directory* and *name* with a single forward slash between them."""
    return f"{directory}/{name}"