"""Find the versioned interpreters installed side by side in one directory."""

from __future__ import annotations

import logging
import os
from operator import itemgetter
from typing import TYPE_CHECKING

from ._spec import parse_version

if TYPE_CHECKING:
    from ._spec import InterpreterVersion


def scan_directory(path: str) -> list[str]:
    """
    List the versioned interpreters within a directory.

    :param path: the directory to list
    :return: the matching names from the oldest to the newest version, empty if the directory cannot be listed

    """
    try:
        names = os.listdir(path)
    except OSError as exception:
        logging.debug("cannot list %s: %r", path, exception)
        return []
    # 2.9 < 2.10 < 9.10 < 10.1, a string sort would get these wrong
    found: list[tuple[InterpreterVersion, str]] = []
    for name in names:
        version = parse_version(name)
        if version is not None:
            found.append((version, name))
    found.sort(key=itemgetter(0))
    return [name for _, name in found]


def find_latest(path: str) -> str | None:
    candidates = scan_directory(path)
    return candidates[-1] if candidates else None


__all__ = [
    "find_latest",
    "scan_directory",
]
