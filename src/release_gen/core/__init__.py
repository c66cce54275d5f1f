"""Core business logic for release-gen.

This module contains the fundamental building blocks:
- Four-component version parsing and bumping
- Commit classification and next-version calculation
- Release notes and version record shaping
"""

from __future__ import annotations

from release_gen.core.changelog import (
    ChangeLogEntry,
    VersionRecord,
    build_version_record,
    render_release_notes,
)
from release_gen.core.commits import (
    ChangeLog,
    calculate_next_version,
    classify_commit,
    flatten_changelog,
)
from release_gen.core.version import ChangeCategory, Version, parse_version

__all__ = [
    # Version
    "ChangeCategory",
    # Commits
    "ChangeLog",
    # Changelog
    "ChangeLogEntry",
    "Version",
    "VersionRecord",
    "build_version_record",
    "calculate_next_version",
    "classify_commit",
    "flatten_changelog",
    "parse_version",
    "render_release_notes",
]
