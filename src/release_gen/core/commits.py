"""Commit classification and next-version calculation.

Commit subjects are matched against a small, ordered rule table:

1. ``feat!`` or ``BREAKING CHANGE`` anywhere in the subject -> major
2. subject starts with ``feat`` -> minor
3. subject starts with ``fix`` -> patch
4. anything else -> sub_patch

The first matching rule wins, so every commit lands in exactly one category.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field

from release_gen.core.version import ChangeCategory, Version, parse_version

logger = logging.getLogger(__name__)

BREAKING_MARKERS = ("feat!", "BREAKING CHANGE")
FEATURE_PREFIX = "feat"
FIX_PREFIX = "fix"

CLASSIFICATION_RULES: tuple[tuple[ChangeCategory, Callable[[str], bool]], ...] = (
    (ChangeCategory.MAJOR, lambda subject: any(m in subject for m in BREAKING_MARKERS)),
    (ChangeCategory.MINOR, lambda subject: subject.startswith(FEATURE_PREFIX)),
    (ChangeCategory.PATCH, lambda subject: subject.startswith(FIX_PREFIX)),
)


def classify_commit(subject: str) -> ChangeCategory:
    """Classify a commit subject.

    Args:
        subject: Single-line commit subject

    Returns:
        The category of the first matching rule, SUB_PATCH if none match
    """
    for category, matches in CLASSIFICATION_RULES:
        if matches(subject):
            return category
    return ChangeCategory.SUB_PATCH


@dataclass
class ChangeLog:
    """Commit subjects grouped by category, in encounter order."""

    buckets: dict[ChangeCategory, list[str]] = field(default_factory=dict)

    def add(self, category: ChangeCategory, subject: str) -> None:
        self.buckets.setdefault(category, []).append(subject)

    def get(self, category: ChangeCategory) -> list[str]:
        """Commits in ``category``; an absent bucket is empty."""
        return list(self.buckets.get(category, []))

    def flatten(self) -> list[str]:
        """All commits, major first, then minor, patch and sub_patch."""
        return [subject for category in ChangeCategory for subject in self.get(category)]

    def counts(self) -> dict[ChangeCategory, int]:
        return {category: len(self.buckets.get(category, [])) for category in ChangeCategory}

    def __len__(self) -> int:
        return sum(len(subjects) for subjects in self.buckets.values())

    def __iter__(self) -> Iterator[str]:
        return iter(self.flatten())

    def __bool__(self) -> bool:
        return len(self) > 0


def flatten_changelog(changelog: ChangeLog) -> list[str]:
    """Concatenate changelog buckets in priority order."""
    return changelog.flatten()


def calculate_next_version(
    current_version: str | Version,
    commits: Iterable[str],
) -> tuple[Version, ChangeLog]:
    """Compute the next version and changelog from commit subjects.

    Commits are applied one by one in the given order, so a reset caused by
    an earlier commit is visible to later ones.

    Args:
        current_version: Version to start from
        commits: Commit subjects, newest first

    Returns:
        Tuple of (next version, changelog)

    Raises:
        MalformedVersionError: If current_version is not a four-component version
    """
    version = parse_version(current_version)
    changelog = ChangeLog()

    for subject in commits:
        category = classify_commit(subject)
        version = version.bump(category)
        changelog.add(category, subject)
        logger.debug("Classified %r as %s -> %s", subject, category, version)

    return version, changelog
