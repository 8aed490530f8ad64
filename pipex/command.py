"""Locating executables through the directories of a PATH-style variable."""

from __future__ import annotations

import os
from typing import Iterable, Mapping

from pipex.strings import split

_EXECUTABLE = os.F_OK | os.X_OK


def search_paths(environ: Mapping[str, str]) -> list[str]:
    """Directories listed in the first variable whose name begins with PATH.

    The value is taken from after the first five characters of "NAME=VALUE"
    and split on colons, dropping empty entries. Without such a variable the
    list is empty.
    """
    for name, value in environ.items():
        if name.startswith("PATH"):
            return split(f"{name}={value}"[5:], ":")
    return []


def is_valid_cmd(cmd: str, paths: Iterable[str]) -> str | None:
    """First "dir/cmd" among paths that exists and is executable, or None."""
    for directory in paths:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, _EXECUTABLE):
            return candidate
    return None


def find_path(cmd: str, paths: Iterable[str]) -> str | None:
    """Resolve cmd: itself if executable as given, else the first match in paths."""
    if os.access(cmd, _EXECUTABLE):
        return cmd
    return is_valid_cmd(cmd, paths)