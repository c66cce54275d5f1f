"""Command line interface for release-gen."""

from __future__ import annotations

from release_gen.cli.app import app

__all__ = ["app"]
