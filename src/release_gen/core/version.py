"""Four-component version handling.

Versions extend semantic versioning with a fourth counter for
miscellaneous commits: ``major.minor.patch.sub_patch``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from release_gen.exceptions import MalformedVersionError

_COMPONENT_RE = re.compile(r"^\d+$")


class ChangeCategory(StrEnum):
    """Category a commit is classified into.

    Declaration order is the priority order used when flattening a changelog.
    """

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    SUB_PATCH = "sub_patch"


@dataclass(frozen=True, slots=True)
class Version:
    """Immutable four-component version."""

    major: int
    minor: int
    patch: int
    sub_patch: int

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch", "sub_patch"):
            if getattr(self, name) < 0:
                raise MalformedVersionError(str(self), f"{name} must not be negative")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}.{self.sub_patch}"

    @classmethod
    def parse(cls, version: str) -> Version:
        """Parse a ``major.minor.patch.sub_patch`` string.

        Args:
            version: Version string, e.g. "1.2.3.4"

        Returns:
            Parsed Version

        Raises:
            MalformedVersionError: Unless the string has exactly four
                dot-separated, digit-only components
        """
        parts = version.strip().split(".")
        if len(parts) != 4:
            raise MalformedVersionError(version, f"expected 4 components, got {len(parts)}")

        for part in parts:
            if not _COMPONENT_RE.match(part):
                raise MalformedVersionError(version, f"component {part!r} is not an integer")

        major, minor, patch, sub_patch = (int(part) for part in parts)
        return cls(major, minor, patch, sub_patch)

    def bump(self, category: ChangeCategory) -> Version:
        """Return the version after applying one commit of ``category``.

        A major bump resets minor and patch but leaves sub_patch alone.
        A minor bump resets patch.
        """
        if category == ChangeCategory.MAJOR:
            return Version(self.major + 1, 0, 0, self.sub_patch)
        if category == ChangeCategory.MINOR:
            return Version(self.major, self.minor + 1, 0, self.sub_patch)
        if category == ChangeCategory.PATCH:
            return Version(self.major, self.minor, self.patch + 1, self.sub_patch)
        return Version(self.major, self.minor, self.patch, self.sub_patch + 1)


def parse_version(version: str | Version) -> Version:
    """Parse a version string, passing Version instances through."""
    if isinstance(version, Version):
        return version
    return Version.parse(version)
