"""Publisher configuration.

Why here:
- Centralizes the fixed publish contract (remote, branch, commit message) in a
  single pydantic-settings model shared by the CLI and the services.
- Without any environment the defaults *are* the contract; the `XYZ_DOCS_`
  prefix exists so CI and tests can point the publisher elsewhere.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_COMMIT_MESSAGE = "Update documentation"
DEFAULT_REMOTE_NAME = "upstream"
DEFAULT_REMOTE_URL = "git@github.com:lfairy/rust-xyz.git"
DEFAULT_REMOTE_BRANCH = "gh-pages"


class PublishSettings(BaseSettings):
    """Effective configuration of one publish run."""

    model_config = SettingsConfigDict(
        env_prefix="XYZ_DOCS_",
        extra="ignore",
        case_sensitive=False,
    )

    base_dir: Path | None = Field(
        default=None,
        description="Project root. When unset it is derived from the tool's own location.",
    )
    output_subdir: Path = Field(
        default=Path("target") / "doc",
        description="Generated documentation directory, relative to the project root.",
    )

    doc_tool: str = Field(default="cargo", min_length=1, description="Documentation generator executable.")
    clean_args: list[str] = Field(default_factory=lambda: ["clean"])
    build_args: list[str] = Field(default_factory=lambda: ["doc"])

    git_executable: str = Field(default="git", min_length=1)
    commit_message: str = Field(default=DEFAULT_COMMIT_MESSAGE, min_length=1)
    remote_name: str = Field(default=DEFAULT_REMOTE_NAME, min_length=1)
    remote_url: str = Field(default=DEFAULT_REMOTE_URL, min_length=1)
    remote_branch: str = Field(
        default=DEFAULT_REMOTE_BRANCH,
        min_length=1,
        description="Remote branch that is force-overwritten on every run.",
    )
    local_ref: str = Field(
        default="HEAD",
        min_length=1,
        description="Local ref pushed to `remote_branch` (HEAD works whatever `git init` names the branch).",
    )

    log_level: str = Field(default="INFO", min_length=1)

    @field_validator("output_subdir")
    @classmethod
    def _relative_output(cls, value: Path) -> Path:
        if value.is_absolute():
            raise ValueError("output_subdir must be relative to the project root")
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper()

    def clean_command(self) -> list[str]:
        return [self.doc_tool, *self.clean_args]

    def build_command(self) -> list[str]:
        return [self.doc_tool, *self.build_args]
