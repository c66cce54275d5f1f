"""Project file handling."""

from __future__ import annotations

from release_gen.project.record import VersionRecordStore, archive_key

__all__ = ["VersionRecordStore", "archive_key"]
