"""CLI command implementations."""

from __future__ import annotations

from release_gen.cli.commands.generate import GenerateResult, generate_release, run_generate

__all__ = ["GenerateResult", "generate_release", "run_generate"]
