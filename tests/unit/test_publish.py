"""Tests for tag and GitHub release publishing."""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from release_gen.config.models import GitConfig, GitHubConfig, ReleaseGenConfig
from release_gen.exceptions import ReleaseCreationError, TagCreationError, TagPushError
from release_gen.publish.github import GitHubReleaser


class TestCreateTag:
    """Tests for GitHubReleaser.create_tag()."""

    def test_creates_and_pushes(self, mock_repo: MagicMock, config: ReleaseGenConfig):
        releaser = GitHubReleaser(mock_repo, config)

        tag = releaser.create_tag("1.2.3.4")

        assert tag == "1.2.3.4"
        mock_repo.create_tag.assert_called_once_with("1.2.3.4")
        mock_repo.push_tag.assert_called_once_with("1.2.3.4", "origin")

    def test_prefix_and_remote(self, mock_repo: MagicMock):
        config = ReleaseGenConfig(tag_prefix="v", git=GitConfig(remote="upstream"))
        releaser = GitHubReleaser(mock_repo, config)

        assert releaser.create_tag("1.0.0.0") == "v1.0.0.0"
        mock_repo.push_tag.assert_called_once_with("v1.0.0.0", "upstream")

    def test_push_skipped_when_creation_fails(
        self, mock_repo: MagicMock, config: ReleaseGenConfig
    ):
        mock_repo.create_tag.side_effect = TagCreationError("Failed to create tag")
        releaser = GitHubReleaser(mock_repo, config)

        with pytest.raises(TagCreationError):
            releaser.create_tag("1.0.0.0")

        mock_repo.push_tag.assert_not_called()

    def test_push_failure_propagates(self, mock_repo: MagicMock, config: ReleaseGenConfig):
        mock_repo.push_tag.side_effect = TagPushError("Failed to push tag")
        releaser = GitHubReleaser(mock_repo, config)

        with pytest.raises(TagPushError):
            releaser.create_tag("1.0.0.0")

        mock_repo.create_tag.assert_called_once()


class TestCreateRelease:
    """Tests for GitHubReleaser.create_release()."""

    def test_gh_arguments(self, mock_repo: MagicMock, config: ReleaseGenConfig):
        releaser = GitHubReleaser(mock_repo, config)

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", returncode=0)
            releaser.create_release("1.2.3.4", "feat!: a\nfix: b")

            assert mock_run.call_args[0][0] == [
                "gh",
                "release",
                "create",
                "1.2.3.4",
                "--title",
                "Release 1.2.3.4",
                "--notes",
                "feat!: a\nfix: b",
            ]
            assert mock_run.call_args[1]["cwd"] == mock_repo.path

    def test_custom_title(self, mock_repo: MagicMock):
        config = ReleaseGenConfig(github=GitHubConfig(release_title="v{version} is out"))
        releaser = GitHubReleaser(mock_repo, config)

        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="", returncode=0)
            releaser.create_release("2.0.0.0", "notes")

            assert "v2.0.0.0 is out" in mock_run.call_args[0][0]

    def test_gh_failure(self, mock_repo: MagicMock, config: ReleaseGenConfig):
        releaser = GitHubReleaser(mock_repo, config)

        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                1, "gh", stderr="HTTP 401: Bad credentials"
            )

            with pytest.raises(ReleaseCreationError, match="Bad credentials"):
                releaser.create_release("1.0.0.0", "notes")

    def test_gh_not_installed(self, mock_repo: MagicMock, config: ReleaseGenConfig):
        releaser = GitHubReleaser(mock_repo, config)

        with patch("subprocess.run", side_effect=FileNotFoundError("gh")):
            with pytest.raises(ReleaseCreationError, match="gh not found"):
                releaser.create_release("1.0.0.0", "notes")
