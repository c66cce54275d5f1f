"""Shared test fixtures."""

from __future__ import annotations

import io
import os
import shutil
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from release_gen.config.models import ReleaseGenConfig
from release_gen.project import VersionRecordStore
from release_gen.publish import GitHubReleaser
from release_gen.vcs.git import GitRepository

GIT_ENV = {
    "GIT_AUTHOR_NAME": "Test",
    "GIT_AUTHOR_EMAIL": "test@test.com",
    "GIT_COMMITTER_NAME": "Test",
    "GIT_COMMITTER_EMAIL": "test@test.com",
    "GIT_CONFIG_NOSYSTEM": "1",
}


def git(path: Path, *args: str) -> str:
    """Run git in ``path`` with a fixed identity."""
    result = subprocess.run(
        ["git", *args],
        cwd=path,
        capture_output=True,
        text=True,
        check=True,
        env={**os.environ, **GIT_ENV},
    )
    return result.stdout.strip()


def commit(path: Path, message: str) -> None:
    git(path, "-c", "commit.gpgsign=false", "commit", "--allow-empty", "-q", "-m", message)


@pytest.fixture
def make_commit():
    """Return a function that adds an empty commit to a repository."""
    return commit


@pytest.fixture
def run_git():
    return git


@pytest.fixture
def sample_subjects() -> list[str]:
    """Commit subjects of every category, newest first."""
    return [
        "chore: update dependencies",
        "fix(core): handle empty input",
        "feat!: redesign the API",
        "docs: describe configuration",
        "feat(api): add user authentication",
        "Merge branch 'main'",
    ]


@pytest.fixture
def temp_git_repo(tmp_path: Path) -> Path:
    """A git repository with a single commit."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    git(tmp_path, "init", "-q")
    commit(tmp_path, "chore: initial commit")
    return tmp_path


@pytest.fixture
def temp_git_repo_with_pyproject(temp_git_repo: Path) -> Path:
    """A git repository with a release-gen configuration."""
    (temp_git_repo / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.release-gen]
initial_version = "1.0.0.0"

[tool.release-gen.record]
path = "system_version.json"
archive_dir = "version_histories"
"""
    )
    return temp_git_repo


@pytest.fixture
def mock_repo(tmp_path: Path) -> MagicMock:
    """A mock GitRepository rooted at tmp_path."""
    repo = MagicMock(spec=GitRepository)
    repo.path = tmp_path
    return repo


@pytest.fixture
def mock_releaser() -> MagicMock:
    return MagicMock(spec=GitHubReleaser)


@pytest.fixture
def store(tmp_path: Path) -> VersionRecordStore:
    return VersionRecordStore(
        record_path=tmp_path / "system_version.json",
        archive_dir=tmp_path / "version_histories",
    )


@pytest.fixture
def config() -> ReleaseGenConfig:
    return ReleaseGenConfig()


@pytest.fixture
def console() -> Console:
    """A console that records output instead of printing it."""
    return Console(record=True, width=120, file=io.StringIO())


@pytest.fixture
def err_console() -> Console:
    return Console(record=True, width=120, file=io.StringIO())
