"""Domain models (Pydantic v2).

These records describe *what* a publish run did, not *how* the commands ran.
They are never persisted; the CLI renders them and then they are dropped.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class StepName(str, Enum):
    """Steps of a publish run, in execution order."""

    CLEAN = "clean"
    BUILD = "build"
    INIT = "init"
    ADD = "add"
    COMMIT = "commit"
    REMOTE = "remote"
    PUSH = "push"


class StepRecord(BaseModel):
    """One external command that was executed."""

    name: StepName = Field(..., description="Which publish step this command implements.")
    argv: list[str] = Field(..., min_length=1, description="Command line, executable first.")
    cwd: Path = Field(..., description="Working directory the command ran in.")
    returncode: int = Field(..., description="Exit status reported by the command.")

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class PublishResult(BaseModel):
    """Outcome of a successful run: every step, in execution order."""

    base_dir: Path
    output_dir: Path
    steps: list[StepRecord] = Field(default_factory=list)
