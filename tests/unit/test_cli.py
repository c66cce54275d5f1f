"""Tests for the release-gen command line."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from release_gen import __version__
from release_gen.cli.app import app

runner = CliRunner()


def test_help_command() -> None:
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.output


def test_version_command() -> None:
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_generate_help_mentions_dry_run() -> None:
    result = runner.invoke(app, ["generate", "--help"])

    assert result.exit_code == 0
    assert "--dry-run" in result.output


def test_generate_dry_run(temp_git_repo: Path, make_commit, run_git) -> None:
    run_git(temp_git_repo, "tag", "0.1.0.0")
    make_commit(temp_git_repo, "feat!: new storage format")

    result = runner.invoke(app, ["generate", str(temp_git_repo), "--dry-run"])

    assert result.exit_code == 0
    assert "1.0.0.0" in result.output
    record = json.loads((temp_git_repo / "system_version.json").read_text())
    assert record["version"] == "1.0.0.0"


def test_generate_nothing_to_do(temp_git_repo: Path, run_git) -> None:
    run_git(temp_git_repo, "tag", "0.1.0.0")

    result = runner.invoke(app, ["--verbose", "generate", str(temp_git_repo), "--dry-run"])

    assert result.exit_code == 0
    assert "No new commits" in result.output


def test_generate_invalid_config(temp_git_repo: Path) -> None:
    (temp_git_repo / "pyproject.toml").write_text('[tool.release-gen]\ntag_prefix = 1\n')

    result = runner.invoke(app, ["generate", str(temp_git_repo), "--dry-run"])

    assert result.exit_code == 1


def test_generate_outside_repository(tmp_path: Path) -> None:
    """Running outside a git work tree is not an error."""
    result = runner.invoke(app, ["generate", str(tmp_path)])

    assert result.exit_code == 0
    assert "Nothing to do" in result.output
    assert not (tmp_path / "system_version.json").exists()
