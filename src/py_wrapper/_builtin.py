from __future__ import annotations

import logging
import os
from typing import Iterator, Mapping

from ._config import CONFIG_FILE, DEFAULT_DIRECTORY, ENV_OVERRIDE, read_config
from ._discover import Discover
from ._paths import find_path
from ._scan import find_latest
from ._spec import is_valid_interpreter


class EnvOverride(Discover):
    """The interpreter named by the ``EPYTHON`` environment variable."""

    def run(self) -> str | None:
        value = self._env.get(ENV_OVERRIDE)
        return value if is_valid_interpreter(value) else None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} discover of {ENV_OVERRIDE}={self._env.get(ENV_OVERRIDE)!r}"


class ConfigDefault(Discover):
    """The system default interpreter persisted in the configuration file."""

    def __init__(self, env: Mapping[str, str] | None = None, config_file: str = CONFIG_FILE) -> None:
        super().__init__(env)
        self.config_file = config_file

    def run(self) -> str | None:
        value = read_config(self.config_file)
        return value if is_valid_interpreter(value) else None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} discover of config_file={self.config_file!r}"


class LatestInDirectory(Discover):
    """The newest versioned interpreter next to the launcher."""

    def __init__(self, invoked: str, env: Mapping[str, str] | None = None) -> None:
        super().__init__(env)
        self.invoked = invoked

    def run(self) -> str | None:
        path = find_path(self.invoked, self._env) or DEFAULT_DIRECTORY
        logging.debug("look for versioned interpreters within %s", path)
        return find_latest(path)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__} discover of invoked={self.invoked!r}"


def get_interpreter(
    invoked: str,
    env: Mapping[str, str] | None = None,
    config_file: str | None = None,
) -> str | None:
    """
    Select the interpreter to launch in place of the generic launcher.

    :param invoked: the name the launcher was invoked as (``argv[0]``)
    :param env: the environment to consult, defaults to :data:`os.environ`
    :param config_file: the file holding the persisted default interpreter, defaults to :data:`CONFIG_FILE`
    :return: the first valid of: the ``EPYTHON`` override, the persisted default, the newest versioned interpreter
             in the launcher's directory; ``None`` if none is available

    """
    logging.info("find interpreter for %r", invoked)
    env = os.environ if env is None else env
    config_file = CONFIG_FILE if config_file is None else config_file
    for discover in propose_sources(invoked, env, config_file):
        interpreter = discover.interpreter
        if interpreter is not None:
            logging.info("accepted %s via %r", interpreter, discover)
            return interpreter
        logging.debug("nothing from %r", discover)
    return None


def propose_sources(invoked: str, env: Mapping[str, str], config_file: str) -> Iterator[Discover]:
    # the order is the precedence, later sources are not created once one produced a name
    yield EnvOverride(env)
    yield ConfigDefault(env, config_file)
    yield LatestInDirectory(invoked, env)


__all__ = [
    "ConfigDefault",
    "EnvOverride",
    "LatestInDirectory",
    "get_interpreter",
    "propose_sources",
]
