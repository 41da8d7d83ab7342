"""Fixed locations and the persisted default interpreter."""

from __future__ import annotations

import logging
import os

#: environment variable naming the interpreter to use, wins over everything else
ENV_OVERRIDE = "EPYTHON"
#: environment variable enabling debug logging from the console entry point
ENV_DEBUG = "PY_WRAPPER_DEBUG"
#: file holding the system default interpreter on its first line
CONFIG_FILE = "/etc/env.d/python/config"
#: search path used when ``PATH`` is unset, per execvp(3)
DEFAULT_PATH = f"{os.pathsep}/bin{os.pathsep}/usr/bin"
#: directory scanned when the launcher's own directory cannot be determined
DEFAULT_DIRECTORY = "/usr/bin"
#: 127 is the shell's "command not found"
EXIT_ERROR = 127


def read_config(path: str = CONFIG_FILE) -> str | None:
    """
    Read the persisted default interpreter.

    :param path: the configuration file
    :return: the first line without its line terminator, ``None`` if the file is missing, unreadable or empty

    """
    try:
        with open(path, "rb") as file_handler:  # noqa: PTH123
            line = file_handler.readline()
    except OSError as exception:
        logging.debug("cannot read %s: %r", path, exception)
        return None
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    value = os.fsdecode(line)
    return value or None


__all__ = [
    "CONFIG_FILE",
    "DEFAULT_DIRECTORY",
    "DEFAULT_PATH",
    "ENV_DEBUG",
    "ENV_OVERRIDE",
    "EXIT_ERROR",
    "read_config",
]
