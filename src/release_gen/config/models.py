"""Configuration models for release-gen.

Configuration is read from ``[tool.release-gen]`` in pyproject.toml.
Every field has a default, so an empty or missing section is valid.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_gen.core.version import Version
from release_gen.exceptions import MalformedVersionError


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid")


class RecordConfig(_StrictModel):
    """Where the version record and its archive live."""

    path: Path = Path("system_version.json")
    archive_dir: Path = Path("version_histories")
    release_type: str = "stable"


class GitConfig(_StrictModel):
    """Git settings."""

    remote: str = "origin"


class GitHubConfig(_StrictModel):
    """Hosted release settings."""

    release_title: str = "Release {version}"

    @field_validator("release_title")
    @classmethod
    def _check_title_template(cls, value: str) -> str:
        try:
            value.format(version="0.0.0.0")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"release_title may only use the {{version}} field: {e}") from e
        return value


class ReleaseGenConfig(_StrictModel):
    """Root configuration."""

    initial_version: str = "0.0.0.0"
    tag_prefix: str = ""
    record: RecordConfig = Field(default_factory=RecordConfig)
    git: GitConfig = Field(default_factory=GitConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)

    @field_validator("initial_version")
    @classmethod
    def _check_initial_version(cls, value: str) -> str:
        try:
            Version.parse(value)
        except MalformedVersionError as e:
            raise ValueError(str(e)) from e
        return value

    def tag_name(self, version: Version | str) -> str:
        """Tag name for ``version``, including the configured prefix."""
        return f"{self.tag_prefix}{version}"

    def version_from_tag(self, tag: str) -> str:
        """Strip the configured prefix from ``tag``."""
        if self.tag_prefix and tag.startswith(self.tag_prefix):
            return tag[len(self.tag_prefix) :]
        return tag
