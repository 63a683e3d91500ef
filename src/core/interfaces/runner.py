"""Command runner contract.

Why a Protocol:
- The publisher only needs "run this argv in that directory, give me the
  exit status"; any object with a matching `run` satisfies it.
- Tests swap in a recording fake without patching `subprocess`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    """Minimal contract for executing an external tool.

    Rules:
    - `run` blocks until the command exits and returns its exit status.
    - A missing executable is reported as a status, not raised.
    """

    def run(self, argv: Sequence[str], *, cwd: Path) -> int:
        """Run `argv` with `cwd` as working directory and return the exit status."""

        ...
