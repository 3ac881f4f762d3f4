"""Locating executables through the PATH variable."""

from __future__ import annotations

import os
import sys
from typing import Iterable

from minishell.output import put_endl
from minishell.strings import split


def find_cmd_path(cmd: str | None, directories: Iterable[str]) -> str | None:
    """Return ``dir/cmd`` for the first directory where it is executable."""
    if not cmd:
        return None
    for directory in directories:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def get_path(cmd: str, envp: Iterable[str]) -> str | None:
    """Search the PATH entry of ``envp`` for ``cmd``.

    The last ``PATH=`` entry wins. Without one, a message goes to standard
    error and None is returned.
    """
    path_value = None
    for entry in envp:
        if entry.startswith("PATH="):
            path_value = entry[5:]
    if path_value is None:
        put_endl(f"Command not found: {cmd}", sys.stderr)
        return None
    return find_cmd_path(cmd, split(path_value, ":"))