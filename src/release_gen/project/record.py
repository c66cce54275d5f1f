"""Version record persistence.

The current release is described by a JSON file in the project root
(``system_version.json`` by default). When a new record is saved, the
previous one is first moved into the archive directory under a name
derived from its own version, e.g. ``version_histories/1_2_3_4.json``.
"""

from __future__ import annotations

import json
import logging
import re
import shutil
from pathlib import Path

from pydantic import ValidationError

from release_gen.core.changelog import VersionRecord
from release_gen.exceptions import ArchiveMoveError, PersistenceError, RecordWriteError

logger = logging.getLogger(__name__)

_LEADING_NON_DIGITS = re.compile(r"^\D+")
_PATH_SEPARATORS = ("/", "\\")

JSON_INDENT = 4


def archive_key(version: str) -> str:
    """Derive the archive file stem for a record version.

    Leading non-digit characters (such as a ``v`` prefix) are dropped and
    dots become underscores: ``"v1.2.3.4"`` -> ``"1_2_3_4"``.

    Raises:
        ArchiveMoveError: If no key remains or it contains a path separator
    """
    key = _LEADING_NON_DIGITS.sub("", version).replace(".", "_")
    if not key or any(sep in key for sep in _PATH_SEPARATORS):
        raise ArchiveMoveError(f"Cannot derive an archive file name from version {version!r}")
    return key


class VersionRecordStore:
    """Reads, writes and archives the version record."""

    def __init__(self, record_path: Path, archive_dir: Path) -> None:
        self.record_path = Path(record_path)
        self.archive_dir = Path(archive_dir)

    def __repr__(self) -> str:
        return f"VersionRecordStore({str(self.record_path)!r}, {str(self.archive_dir)!r})"

    def exists(self) -> bool:
        return self.record_path.is_file()

    def load(self) -> VersionRecord | None:
        """Load the current record.

        Returns:
            The record, or None if no record file exists

        Raises:
            PersistenceError: If the file exists but cannot be read or parsed
        """
        if not self.exists():
            return None

        try:
            content = self.record_path.read_text(encoding="utf-8")
            return VersionRecord.model_validate_json(content)
        except (OSError, ValidationError) as e:
            raise PersistenceError(
                f"Cannot read existing version record {self.record_path}: {e}"
            ) from e

    def archive_path_for(self, version: str) -> Path:
        return self.archive_dir / f"{archive_key(version)}.json"

    def _previous_version(self) -> str | None:
        # Only the version is needed to archive, so older layouts of the
        # change_log are accepted here.
        if not self.exists():
            return None

        try:
            data = json.loads(self.record_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise ArchiveMoveError(
                f"Cannot read existing version record {self.record_path}: {e}"
            ) from e

        version = data.get("version") if isinstance(data, dict) else None
        if not isinstance(version, str) or not version:
            raise ArchiveMoveError(f"Existing version record {self.record_path} has no version")
        return version

    def archive(self) -> Path | None:
        """Move the current record into the archive directory.

        Returns:
            Path of the archived file, or None if there was nothing to archive

        Raises:
            ArchiveMoveError: If the record cannot be read or moved
        """
        previous = self._previous_version()
        if previous is None:
            return None

        target = self.archive_path_for(previous)
        if target.exists():
            logger.warning("Overwriting existing archived record %s", target)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(self.record_path, target)
        except OSError as e:
            raise ArchiveMoveError(
                f"Cannot move {self.record_path} to {target}: {e}"
            ) from e

        logger.info("Archived version record %s to %s", previous, target)
        return target

    def write(self, record: VersionRecord) -> Path:
        """Write ``record`` to the record path, replacing any existing file.

        Raises:
            RecordWriteError: If the file cannot be written
        """
        content = record.model_dump_json(indent=JSON_INDENT)
        try:
            self.record_path.parent.mkdir(parents=True, exist_ok=True)
            self.record_path.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            raise RecordWriteError(f"Cannot write version record {self.record_path}: {e}") from e

        logger.info("Wrote version record %s to %s", record.version, self.record_path)
        return self.record_path

    def save(self, record: VersionRecord) -> Path | None:
        """Archive the previous record, then write ``record``.

        The new record is only written once the previous one has been
        archived.

        Returns:
            Path of the archived previous record, or None if there was none

        Raises:
            ArchiveMoveError: If archiving fails; nothing is written
            RecordWriteError: If writing the new record fails
        """
        archived = self.archive()
        self.write(record)
        return archived
