"""`subprocess` implementation of `CommandRunner`.

Commands inherit stdout/stderr, so whatever the external tool prints is the
diagnostic the user sees.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from core.domain.errors import COMMAND_NOT_EXECUTABLE, COMMAND_NOT_FOUND, MISSING_CWD
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


class SubprocessRunner(CommandRunner):
    """Runs commands synchronously and reports their exit status."""

    def run(self, argv: Sequence[str], *, cwd: Path) -> int:
        logger.debug("$ %s", " ".join(argv))
        logger.debug("  (cwd: %s)", cwd)
        if not cwd.is_dir():
            logger.error("working directory does not exist: %s", cwd)
            return MISSING_CWD
        try:
            completed = subprocess.run(list(argv), cwd=str(cwd), check=False)
        except FileNotFoundError:
            logger.error("command not found: %s", argv[0])
            return COMMAND_NOT_FOUND
        except PermissionError:
            logger.error("command not executable: %s", argv[0])
            return COMMAND_NOT_EXECUTABLE
        return completed.returncode
