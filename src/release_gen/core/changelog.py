"""Release notes and version record shaping.

The changelog produced by the version calculation is rendered two ways:

- as plain release notes (one commit subject per line), used as the body
  of the hosted release
- as a VersionRecord, the JSON document kept in the project root
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from release_gen.core.commits import ChangeLog
    from release_gen.core.version import Version

DEFAULT_RELEASE_TYPE = "stable"


class ChangeLogEntry(BaseModel):
    """One line of a persisted changelog."""

    model_config = ConfigDict(frozen=True)

    text: str


class VersionRecord(BaseModel):
    """Persisted description of a generated release.

    Field order is the key order of the JSON document.
    """

    model_config = ConfigDict(frozen=True)

    version: str
    type: str = DEFAULT_RELEASE_TYPE
    change_log: list[ChangeLogEntry] = []


def render_release_notes(changelog: ChangeLog) -> str:
    """Render release notes, breaking changes first.

    Args:
        changelog: Categorized commits

    Returns:
        Newline-joined commit subjects in priority order
    """
    return "\n".join(changelog.flatten())


def build_version_record(
    version: Version,
    changelog: ChangeLog,
    release_type: str = DEFAULT_RELEASE_TYPE,
) -> VersionRecord:
    """Build the record persisted for a new release.

    Args:
        version: The newly calculated version
        changelog: Categorized commits
        release_type: Value of the record's ``type`` field

    Returns:
        VersionRecord whose change_log follows the priority order
    """
    return VersionRecord(
        version=str(version),
        type=release_type,
        change_log=[ChangeLogEntry(text=subject) for subject in changelog.flatten()],
    )
