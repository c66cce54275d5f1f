"""Exception hierarchy for release-gen.

All errors raised by release-gen derive from ReleaseGenError so the
command line layer can report them uniformly.
"""

from __future__ import annotations


class ReleaseGenError(Exception):
    """Base class for all release-gen errors."""


# =============================================================================
# Configuration
# =============================================================================


class ConfigError(ReleaseGenError):
    """Configuration could not be loaded."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml was found."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid."""


# =============================================================================
# Versions
# =============================================================================


class VersionError(ReleaseGenError):
    """Version handling failed."""


class MalformedVersionError(VersionError):
    """A version string does not have four integer components."""

    def __init__(self, version: str, reason: str | None = None) -> None:
        self.version = version
        message = f"Malformed version {version!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# =============================================================================
# External commands
# =============================================================================


class CommandError(ReleaseGenError):
    """An external command failed."""

    def __init__(self, message: str, stderr: str | None = None) -> None:
        self.stderr = stderr
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class GitError(CommandError):
    """A git command failed."""


class TagCreationError(GitError):
    """Creating the release tag failed."""


class TagPushError(GitError):
    """Pushing the release tag to the remote failed."""


class ReleaseCreationError(CommandError):
    """Creating the hosted release failed."""


# =============================================================================
# Persistence
# =============================================================================


class PersistenceError(ReleaseGenError):
    """Reading or writing the version record failed."""


class ArchiveMoveError(PersistenceError):
    """The previous version record could not be archived."""


class RecordWriteError(PersistenceError):
    """The new version record could not be written."""
