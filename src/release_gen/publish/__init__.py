"""Release publishing."""

from __future__ import annotations

from release_gen.publish.github import GitHubReleaser

__all__ = ["GitHubReleaser"]
