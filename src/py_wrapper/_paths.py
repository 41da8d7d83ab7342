from __future__ import annotations

import logging
import os
from typing import Mapping

from ._config import DEFAULT_PATH, ENV_DEBUG
from ._spec import parse_version


def get_paths(env: Mapping[str, str]) -> list[str]:
    path = env.get("PATH", None)
    if path is None:
        path = DEFAULT_PATH
    # an empty element of PATH ("::") is the current directory
    return [p or os.curdir for p in path.split(os.pathsep)]


def check_path(candidate: str, path: str) -> bool:
    candidate = os.path.join(path, candidate)  # noqa: PTH118
    return os.path.isfile(candidate) or os.path.islink(candidate)  # noqa: PTH113, PTH114


def find_path(invoked: str, env: Mapping[str, str] | None = None) -> str | None:
    """
    Find the directory the launcher was started from.

    :param invoked: the name the launcher was invoked as (``argv[0]``)
    :param env: the environment to take ``PATH`` from, defaults to :data:`os.environ`
    :return: the text before the last separator if ``invoked`` has one (not checked against the file system),
             otherwise the first ``PATH`` entry holding a file or symlink called ``invoked``, or ``None``

    """
    if os.sep in invoked:
        return invoked.rpartition(os.sep)[0]
    env = os.environ if env is None else env
    for pos, path in enumerate(get_paths(env)):
        logging.debug(LazyPathDump(pos, path, env))
        if check_path(invoked, path):
            return path
    return None


class LazyPathDump:
    def __init__(self, pos: int, path: str, env: Mapping[str, str]) -> None:
        self.pos = pos
        self.path = path
        self.env = env

    def __repr__(self) -> str:
        content = f"discover PATH[{self.pos}]={self.path}"
        if self.env.get(ENV_DEBUG):
            content += " with =>"
            try:
                names = sorted(os.listdir(self.path))
            except OSError:
                names = []
            for file_name in names:
                if parse_version(file_name) is not None:
                    content += " "
                    content += file_name
        return content


__all__ = [
    "LazyPathDump",
    "check_path",
    "find_path",
    "get_paths",
]
