from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Mapping, Sequence

import pytest

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture(scope="session")
def _fs_supports_symlink() -> None:
    if not hasattr(os, "symlink") or sys.platform == "win32":  # pragma: no cover
        pytest.skip("No symlink support")


class Replaced(Exception):  # noqa: N818
    """Stands in for a successful exec, which would never return."""


class ExecRecorder:
    Replaced = Replaced

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, list[str]]] = []
        self.envs: list[Mapping[str, str]] = []
        self.existing: set[str] = set()

    def _run(self, kind: str, path: str, args: Sequence[str], env: Mapping[str, str]) -> None:
        self.calls.append((kind, path, list(args)))
        self.envs.append(env)
        if path in self.existing:
            raise Replaced(path)
        raise FileNotFoundError(path)

    def execve(self, path: str, args: Sequence[str], env: Mapping[str, str]) -> None:
        self._run("execve", path, args, env)

    def execvpe(self, file: str, args: Sequence[str], env: Mapping[str, str]) -> None:
        self._run("execvpe", file, args, env)


@pytest.fixture
def exec_recorder(mocker: MockerFixture) -> ExecRecorder:
    recorder = ExecRecorder()
    mocker.patch("os.execve", side_effect=recorder.execve)
    mocker.patch("os.execvpe", side_effect=recorder.execvpe)
    return recorder


@pytest.fixture
def config_file(tmp_path_factory: pytest.TempPathFactory) -> str:
    return str(tmp_path_factory.mktemp("env.d") / "config")
