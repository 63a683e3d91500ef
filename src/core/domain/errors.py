"""Publisher exceptions.

There is a single failure kind: a step whose command exited non-zero.
"""

from __future__ import annotations

from typing import Sequence

from core.domain.models import StepName

# Shell conventions: a failed `cd`, "not executable", "command not found".
MISSING_CWD = 1
COMMAND_NOT_EXECUTABLE = 126
COMMAND_NOT_FOUND = 127


class PublishError(Exception):
    """Base class for publisher errors."""


class StepFailedError(PublishError):
    """Raised when an external command of a publish step exits non-zero."""

    def __init__(self, step: StepName, argv: Sequence[str], returncode: int) -> None:
        self.step = step
        self.argv = list(argv)
        self.returncode = returncode
        super().__init__(f"step '{step.value}' failed with exit status {returncode}: {' '.join(self.argv)}")
