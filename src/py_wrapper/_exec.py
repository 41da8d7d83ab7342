"""Replace the launcher process with the selected interpreter."""

from __future__ import annotations

import logging
import os
from typing import Mapping, Sequence

from ._config import EXIT_ERROR
from ._paths import find_path


def exec_interpreter(target: str, argv: Sequence[str], env: Mapping[str, str] | None = None) -> int:
    """
    Execute the interpreter, passing the arguments through untouched (``argv[0]`` included).

    A target with a separator is executed as is. A bare target is executed from the directory the launcher was
    started from, or looked up on ``PATH`` when that directory is unknown.

    :param target: the interpreter to launch
    :param argv: the launcher's own argument vector
    :param env: the environment of the interpreter, also the one to take ``PATH`` from, defaults to
                :data:`os.environ`
    :return: only on failure, :data:`EXIT_ERROR`

    """
    env = os.environ if env is None else env
    invoked = argv[0] if argv else ""
    try:
        if os.sep in target:
            logging.debug("exec %s", target)
            os.execve(target, argv, env)  # noqa: S606
        path = find_path(invoked, env)
        if path:
            exe = os.path.join(path, target)  # noqa: PTH118
            logging.debug("exec %s", exe)
            os.execve(exe, argv, env)  # noqa: S606
        logging.debug("exec %s via PATH", target)
        os.execvpe(target, argv, env)  # noqa: S606
    except (OSError, ValueError) as exception:
        logging.debug("failed to exec %s: %r", target, exception)
    return EXIT_ERROR


__all__ = [
    "exec_interpreter",
]
