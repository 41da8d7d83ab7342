"""Launch the preferred versioned Python interpreter in place of the generic ``python`` command."""

from __future__ import annotations

from importlib.metadata import version

from ._builtin import ConfigDefault, EnvOverride, LatestInDirectory, get_interpreter
from ._config import CONFIG_FILE, EXIT_ERROR, read_config
from ._discover import Discover
from ._exec import exec_interpreter
from ._paths import find_path
from ._scan import find_latest, scan_directory
from ._spec import PREFIX, InterpreterVersion, is_valid_interpreter, parse_version

__version__ = version("py-wrapper")  #: version of the package

__all__ = [
    "CONFIG_FILE",
    "EXIT_ERROR",
    "PREFIX",
    "ConfigDefault",
    "Discover",
    "EnvOverride",
    "InterpreterVersion",
    "LatestInDirectory",
    "__version__",
    "exec_interpreter",
    "find_latest",
    "find_path",
    "get_interpreter",
    "is_valid_interpreter",
    "parse_version",
    "read_config",
    "scan_directory",
]
