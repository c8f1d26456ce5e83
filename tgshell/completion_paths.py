"""File-system helpers used by completion."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path


def filepaths(
    directory: str | os.PathLike[str],
    predicate: Callable[[os.DirEntry[str]], bool] | None = None,
) -> list[Path]:
    """Paths of the entries in ``directory`` that satisfy ``predicate``."""
    with os.scandir(directory) as entries:
        return [
            Path(entry.path)
            for entry in entries
            if predicate is None or predicate(entry)
        ]


def find_executables_in_path(path_str: str) -> list[str]:
    """Names of executable files in each directory of a ``:``-separated path."""
    execs = []
    for directory in path_str.split(":"):
        try:
            entries = list(os.scandir(directory))
        except OSError:
            continue
        for entry in entries:
            if entry.stat(follow_symlinks=False).st_mode & 0o111:
                execs.append(entry.name)
    return execs


def drop_path_end(path: str) -> str:
    """Drop everything after the last ``/``."""
    return path[: path.rfind("/") + 1]


def to_absolute(path_str: str, home_dir: str | os.PathLike[str]) -> Path:
    """Turn a path as typed by the user into an absolute path."""
    path = Path(path_str)
    if path.root:
        return path
    if path.parts and path.parts[0] == "~":
        return Path(home_dir).joinpath(*path.parts[1:])
    return Path.cwd() / path