from __future__ import annotations

import os
from abc import ABCMeta, abstractmethod
from typing import Mapping


class Discover(metaclass=ABCMeta):
    """One source of the interpreter to launch."""

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """
        Create a new discovery mechanism.

        :param env: the environment to consult, defaults to :data:`os.environ`

        """
        self._has_run = False
        self._interpreter: str | None = None
        self._env = os.environ if env is None else env

    @abstractmethod
    def run(self) -> str | None:
        """
        Discovers an interpreter.

        :return: the interpreter name (bare or a path) to launch, ``None`` if this source has no opinion

        """
        raise NotImplementedError

    @property
    def interpreter(self) -> str | None:
        """:return: the interpreter as returned by the :meth:`run`, cached"""
        if self._has_run is False:
            self._interpreter = self.run()
            self._has_run = True
        return self._interpreter


__all__ = [
    "Discover",
]
