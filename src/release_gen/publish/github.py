"""Tag and GitHub release publishing.

Hosted releases are created with the GitHub CLI (``gh``), which must be
installed and authenticated.
"""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING

from release_gen.exceptions import ReleaseCreationError

if TYPE_CHECKING:
    from release_gen.config.models import ReleaseGenConfig
    from release_gen.vcs.git import GitRepository

logger = logging.getLogger(__name__)


class GitHubReleaser:
    """Creates release tags and GitHub releases for a repository."""

    def __init__(self, repo: GitRepository, config: ReleaseGenConfig) -> None:
        self.repo = repo
        self.config = config

    def create_tag(self, version: str) -> str:
        """Create a tag for ``version`` at HEAD and push it.

        The push is not attempted if creating the tag fails. A failed push
        leaves the local tag in place.

        Args:
            version: Version being released

        Returns:
            The tag name

        Raises:
            TagCreationError: If the tag cannot be created
            TagPushError: If the tag cannot be pushed
        """
        tag = self.config.tag_name(version)
        self.repo.create_tag(tag)
        logger.info("Created tag %s", tag)
        self.repo.push_tag(tag, self.config.git.remote)
        logger.info("Pushed tag %s to %s", tag, self.config.git.remote)
        return tag

    def create_release(self, version: str, notes: str) -> None:
        """Create a GitHub release for ``version``.

        Args:
            version: Version being released
            notes: Release body

        Raises:
            ReleaseCreationError: If gh is missing or the release fails
        """
        tag = self.config.tag_name(version)
        title = self.config.github.release_title.format(version=version)
        args = [
            "gh",
            "release",
            "create",
            tag,
            "--title",
            title,
            "--notes",
            notes,
        ]
        logger.debug("Running gh release create %s --title %r", tag, title)

        try:
            subprocess.run(
                args,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.repo.path,
            )
        except FileNotFoundError as e:
            raise ReleaseCreationError(
                "gh not found. Install the GitHub CLI: https://cli.github.com"
            ) from e
        except subprocess.CalledProcessError as e:
            raise ReleaseCreationError(
                f"gh release create failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
