"""Throwaway git repository rooted in the output directory."""

from __future__ import annotations

import logging
import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

logger = logging.getLogger(__name__)

METADATA_DIRNAME = ".git"


def metadata_dir(root: Path) -> Path:
    return root / METADATA_DIRNAME


def remove_metadata(root: Path) -> None:
    """Delete `root/.git` recursively if present."""

    target = metadata_dir(root)
    if target.is_symlink() or target.is_file():
        target.unlink()
    elif target.exists():
        shutil.rmtree(target)
    else:
        return
    logger.debug("removed scoped repository metadata at %s", target)


@contextmanager
def scoped_repository(root: Path) -> Iterator[Path]:
    """Yield `root` and remove its `.git` on every exit path.

    The body is expected to `git init` inside `root`; whatever it leaves
    behind under `.git` is deleted on success, on a failed step and on
    `KeyboardInterrupt` alike.
    """

    try:
        yield root
    finally:
        remove_metadata(root)
