"""Configuration management for release-gen."""

from __future__ import annotations

from release_gen.config.loader import load_config
from release_gen.config.models import (
    GitConfig,
    GitHubConfig,
    RecordConfig,
    ReleaseGenConfig,
)

__all__ = [
    "GitConfig",
    "GitHubConfig",
    "RecordConfig",
    "ReleaseGenConfig",
    "load_config",
]
