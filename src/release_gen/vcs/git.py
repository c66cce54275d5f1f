"""Git operations via the git command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from release_gen.exceptions import GitError, TagCreationError, TagPushError

logger = logging.getLogger(__name__)


class GitRepository:
    """A git working tree.

    Every operation shells out to ``git`` with the repository as cwd.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).resolve()
        try:
            self._run("rev-parse", "--is-inside-work-tree")
        except GitError as e:
            raise GitError(f"Not a git repository: {self.path}") from e

    def __repr__(self) -> str:
        return f"GitRepository({str(self.path)!r})"

    def _run(self, *args: str) -> str:
        """Run a git command and return its stripped stdout.

        Raises:
            GitError: If git is missing or the command fails
        """
        cmd = ["git", *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                cwd=self.path,
            )
        except FileNotFoundError as e:
            raise GitError("git not found. Is it installed and on PATH?") from e
        except subprocess.CalledProcessError as e:
            raise GitError(
                f"git {args[0]} failed with exit code {e.returncode}",
                stderr=e.stderr,
            ) from e
        return result.stdout.strip()

    def get_latest_tag(self) -> str | None:
        """Return the most recent tag reachable from HEAD.

        Returns:
            Tag name, or None if there is no tag or the lookup fails
        """
        try:
            tag = self._run("describe", "--tags", "--abbrev=0")
        except GitError as e:
            logger.debug("No tag found: %s", e)
            return None
        return tag or None

    def get_commits_since_tag(self, tag: str | None) -> list[str]:
        """Return commit subjects between ``tag`` and HEAD, newest first.

        Args:
            tag: Lower bound (exclusive). None means the whole history.

        Returns:
            Non-empty commit subject lines; empty if there are none or
            the log cannot be read
        """
        rev_range = f"{tag}..HEAD" if tag else "HEAD"
        try:
            output = self._run("log", rev_range, "--pretty=%s")
        except GitError as e:
            logger.warning("Could not read commits for %s: %s", rev_range, e)
            return []
        return [line for line in output.splitlines() if line.strip()]

    def create_tag(self, name: str) -> None:
        """Create a lightweight tag at HEAD.

        Raises:
            TagCreationError: If the tag cannot be created
        """
        try:
            self._run("tag", name)
        except GitError as e:
            raise TagCreationError(f"Failed to create tag {name}", stderr=e.stderr) from e

    def push_tag(self, name: str, remote: str = "origin") -> None:
        """Push a tag to ``remote``.

        Raises:
            TagPushError: If the push fails
        """
        try:
            self._run("push", remote, name)
        except GitError as e:
            raise TagPushError(f"Failed to push tag {name} to {remote}", stderr=e.stderr) from e
