from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Sequence

from ._builtin import get_interpreter
from ._config import ENV_DEBUG, EXIT_ERROR
from ._exec import exec_interpreter


def main(argv: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    """
    Launch the selected interpreter in place of this process.

    :param argv: the full argument vector to forward, defaults to :data:`sys.argv`
    :param env: the environment to consult, defaults to :data:`os.environ`
    :return: :data:`EXIT_ERROR` when no interpreter was found or it could not be executed, on success never returns

    """
    argv = sys.argv if argv is None else argv
    env = os.environ if env is None else env
    target = get_interpreter(argv[0] if argv else "", env)
    if target is None:
        return EXIT_ERROR
    return exec_interpreter(target, argv, env)


def run() -> None:
    if os.environ.get(ENV_DEBUG):
        logging.basicConfig(level=logging.DEBUG)
    raise SystemExit(main())


if __name__ == "__main__":
    run()
