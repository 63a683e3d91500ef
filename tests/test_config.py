"""Tests for PublishSettings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import PublishSettings


class TestDefaults:
    def test_fixed_contract(self):
        settings = PublishSettings()

        assert settings.commit_message == "Update documentation"
        assert settings.remote_name == "upstream"
        assert settings.remote_url == "git@github.com:lfairy/rust-xyz.git"
        assert settings.remote_branch == "gh-pages"
        assert settings.local_ref == "HEAD"
        assert settings.output_subdir == Path("target") / "doc"
        assert settings.base_dir is None

    def test_doc_commands(self):
        settings = PublishSettings()

        assert settings.clean_command() == ["cargo", "clean"]
        assert settings.build_command() == ["cargo", "doc"]


class TestEnvironment:
    def test_prefixed_override(self, monkeypatch):
        monkeypatch.setenv("XYZ_DOCS_REMOTE_BRANCH", "docs")
        monkeypatch.setenv("XYZ_DOCS_BUILD_ARGS", '["doc", "--no-deps"]')
        monkeypatch.setenv("XYZ_DOCS_LOG_LEVEL", "debug")

        settings = PublishSettings()

        assert settings.remote_branch == "docs"
        assert settings.build_command() == ["cargo", "doc", "--no-deps"]
        assert settings.log_level == "DEBUG"

    def test_unprefixed_ignored(self, monkeypatch):
        monkeypatch.setenv("REMOTE_BRANCH", "other")

        assert PublishSettings().remote_branch == "gh-pages"


class TestValidation:
    def test_absolute_output_rejected(self, tmp_path):
        with pytest.raises(ValidationError, match="relative"):
            PublishSettings(output_subdir=tmp_path)

    def test_empty_commit_message_rejected(self):
        with pytest.raises(ValidationError):
            PublishSettings(commit_message="")
