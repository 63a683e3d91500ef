"""Documentation publishing pipeline.

The publisher is a fixed, fail-fast chain of external commands:

    clean -> build -> init -> add -> commit -> remote -> push

Every command runs in an explicit working directory; the first non-zero exit
raises `StepFailedError` and nothing after it starts. The scoped repository's
`.git` is removed whenever `publish` exits, including on failure.

UI concerns (progress lines, tables) stay out of this module; callers that
want them pass `PublishHooks`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from adapters.scoped_repository import scoped_repository
from core.config import PublishSettings
from core.domain.errors import StepFailedError
from core.domain.models import PublishResult, StepName, StepRecord
from core.interfaces.runner import CommandRunner
from core.paths import resolve_base_dir

logger = logging.getLogger(__name__)


@dataclass
class PublishHooks:
    """Optional callbacks for UI layers."""

    step_start: Callable[[StepName, Sequence[str]], None] | None = None
    step_done: Callable[[StepRecord], None] | None = None


@dataclass
class Publisher:
    """Cleans, rebuilds and force-publishes the generated documentation."""

    runner: CommandRunner
    settings: PublishSettings = field(default_factory=PublishSettings)
    hooks: PublishHooks = field(default_factory=PublishHooks)
    anchor: Path | None = None
    steps: list[StepRecord] = field(default_factory=list, init=False)

    def resolve_base_dir(self) -> Path:
        return resolve_base_dir(self.settings.base_dir, anchor=self.anchor)

    def output_dir(self, base_dir: Path) -> Path:
        return base_dir / self.settings.output_subdir

    def clean_and_build(self, base_dir: Path) -> None:
        """Remove previous build output, then regenerate the documentation."""

        self._step(StepName.CLEAN, self.settings.clean_command(), cwd=base_dir)
        self._step(StepName.BUILD, self.settings.build_command(), cwd=base_dir)

    def publish(self, output_dir: Path) -> None:
        """Commit `output_dir` into a throwaway repository and force-push it."""

        s = self.settings
        git = s.git_executable
        with scoped_repository(output_dir) as repo:
            self._step(StepName.INIT, [git, "init"], cwd=repo)
            self._step(StepName.ADD, [git, "add", "."], cwd=repo)
            self._step(StepName.COMMIT, [git, "commit", "-m", s.commit_message], cwd=repo)
            self._step(StepName.REMOTE, [git, "remote", "add", s.remote_name, s.remote_url], cwd=repo)
            self._step(
                StepName.PUSH,
                [git, "push", "--force", s.remote_name, f"{s.local_ref}:{s.remote_branch}"],
                cwd=repo,
            )
        logger.info("published %s to %s (%s)", output_dir, s.remote_url, s.remote_branch)

    def run(self) -> PublishResult:
        """Execute the whole chain and return what ran.

        Raises `StepFailedError` at the first failing step; `self.steps` still
        holds the records up to and including that step.
        """

        self.steps = []
        base_dir = self.resolve_base_dir()
        output_dir = self.output_dir(base_dir)
        logger.debug("base directory: %s", base_dir)

        self.clean_and_build(base_dir)
        self.publish(output_dir)
        return PublishResult(base_dir=base_dir, output_dir=output_dir, steps=list(self.steps))

    def _step(self, name: StepName, argv: Sequence[str], *, cwd: Path) -> StepRecord:
        if self.hooks.step_start:
            self.hooks.step_start(name, argv)

        returncode = self.runner.run(argv, cwd=cwd)
        record = StepRecord(name=name, argv=list(argv), cwd=cwd, returncode=returncode)
        self.steps.append(record)

        if self.hooks.step_done:
            self.hooks.step_done(record)
        if returncode != 0:
            raise StepFailedError(name, argv, returncode)
        return record
