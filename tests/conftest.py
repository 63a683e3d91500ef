"""Shared fixtures for the publisher tests."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import pytest

from core.config import PublishSettings


@dataclass
class FakeRunner:
    """Recording `CommandRunner`.

    Commands are keyed by their first argument (`clean`, `doc`, `init`,
    `add`, `commit`, `remote`, `push`). `init` creates `.git` in its cwd the
    way the real tool would.
    """

    returncodes: dict[str, int] = field(default_factory=dict)
    interrupt_on: str | None = None
    calls: list[tuple[list[str], Path]] = field(default_factory=list)
    git_seen: list[bool] = field(default_factory=list)

    def run(self, argv: Sequence[str], *, cwd: Path) -> int:
        key = argv[1] if len(argv) > 1 else argv[0]
        self.calls.append((list(argv), cwd))
        self.git_seen.append((cwd / ".git").exists())
        if key == self.interrupt_on:
            raise KeyboardInterrupt
        code = self.returncodes.get(key, 0)
        if key == "init" and code == 0:
            (cwd / ".git").mkdir(parents=True, exist_ok=True)
        return code

    @property
    def keys(self) -> list[str]:
        return [argv[1] for argv, _ in self.calls]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "xyz"
    root.mkdir()
    return root


@pytest.fixture
def settings(project_dir: Path) -> PublishSettings:
    return PublishSettings(base_dir=project_dir)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any XYZ_DOCS_* variables from the developer's shell."""

    for key in list(os.environ):
        if key.upper().startswith("XYZ_DOCS_"):
            monkeypatch.delenv(key, raising=False)
