"""Path normalisation for user-supplied directory arguments.

Every path stored in a workspace goes through ``resolve_path`` first, so
lookups by directory can compare plain strings.
"""

from __future__ import annotations

import os
from pathlib import Path

HOME_MARKER = "~"


def resolve_path(value: str | None) -> str:
    """Return the canonical absolute form of ``value``.

    - empty or ``None``: the current working directory
    - ``~`` or ``~/rest``: the home directory joined with the remainder
    - anything else: resolved against the current working directory
    """
    if not value:
        return os.getcwd()
    if value.startswith(HOME_MARKER):
        remainder = value[len(HOME_MARKER) :].lstrip("/\\")
        return os.path.normpath(os.path.join(str(Path.home()), remainder))
    return os.path.abspath(value)


def exists(path: str) -> bool:
    """True if anything (file or directory) exists at ``path``."""
    return os.path.exists(path)
