"""Implementation of the 'generate' command.

The generate command calculates the next version from the commits since
the latest tag, writes the version record and, unless this is a dry run,
tags the release and publishes it on GitHub.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from release_gen.config import load_config
from release_gen.core.changelog import build_version_record, render_release_notes
from release_gen.core.commits import calculate_next_version
from release_gen.core.version import ChangeCategory, parse_version
from release_gen.exceptions import (
    ConfigError,
    GitError,
    MalformedVersionError,
    PersistenceError,
    ReleaseCreationError,
    TagCreationError,
    TagPushError,
)
from release_gen.project import VersionRecordStore
from release_gen.publish import GitHubReleaser
from release_gen.vcs import GitRepository

if TYPE_CHECKING:
    from rich.console import Console

    from release_gen.config.models import ReleaseGenConfig
    from release_gen.core.commits import ChangeLog
    from release_gen.core.version import Version


@dataclass
class GenerateResult:
    """Outcome of a release generation run."""

    previous_version: Version
    next_version: Version
    changelog: ChangeLog
    record_path: Path
    archived_path: Path | None = None
    dry_run: bool = False
    tag: str | None = None
    tag_pushed: bool = False
    release_created: bool = False


def run_generate(
    path: str | None,
    dry_run: bool,
    console: Console,
    err_console: Console,
) -> GenerateResult | None:
    """Run the generate command.

    Args:
        path: Optional path to project directory
        dry_run: Skip tagging and publishing
        console: Console for standard output
        err_console: Console for error output

    Returns:
        The result, or None if there was nothing to release
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(project_path)
    except ConfigError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    # Initialize git repository; without one there is nothing to release
    try:
        repo = GitRepository(project_path)
    except GitError as e:
        err_console.print(f"[yellow]Warning:[/] {escape(str(e))}")
        console.print("[yellow]No commits to release. Nothing to do.[/]")
        return None

    store = VersionRecordStore(
        record_path=project_path / config.record.path,
        archive_dir=project_path / config.record.archive_dir,
    )
    releaser = GitHubReleaser(repo, config)

    try:
        return generate_release(
            repo=repo,
            releaser=releaser,
            store=store,
            config=config,
            dry_run=dry_run,
            console=console,
            err_console=err_console,
        )
    except MalformedVersionError as e:
        err_console.print(f"[red]Error getting version:[/] {escape(str(e))}")
        raise SystemExit(1) from e
    except PersistenceError as e:
        err_console.print(f"[red]Error writing version record:[/] {escape(str(e))}")
        raise SystemExit(1) from e


def generate_release(
    repo: GitRepository,
    releaser: GitHubReleaser,
    store: VersionRecordStore,
    config: ReleaseGenConfig,
    *,
    dry_run: bool,
    console: Console,
    err_console: Console,
) -> GenerateResult | None:
    """Generate a release with the given collaborators.

    Tag and release failures are reported and the run carries on; nothing
    already done is rolled back.

    Returns:
        The result, or None if there are no commits since the latest tag

    Raises:
        MalformedVersionError: If the latest tag is not a four-component version
        PersistenceError: If the version record cannot be archived or written
    """
    # Get latest tag
    latest_tag = repo.get_latest_tag()
    if latest_tag is None:
        current = config.initial_version
        console.print(f"No tags found. Starting from [cyan]{current}[/]")
    else:
        current = config.version_from_tag(latest_tag)
        console.print(f"Latest Tag: [cyan]{latest_tag}[/]")

    # Get commits since last tag
    commits = repo.get_commits_since_tag(latest_tag)

    if not commits:
        console.print("[yellow]No new commits since the last tag. Nothing to do.[/]")
        return None

    # Classify commits and calculate the next version
    previous_version = parse_version(current)
    next_version, changelog = calculate_next_version(previous_version, commits)

    mode_str = "[yellow]DRY-RUN[/]" if dry_run else "[green]EXECUTING[/]"
    console.print(
        f"\n{mode_str} - Next Version: [cyan]{previous_version}[/] -> [green]{next_version}[/]\n"
    )
    console.print(_changelog_table(changelog))

    # Write the version history record
    record = build_version_record(next_version, changelog, config.record.release_type)
    archived_path = store.save(record)
    if archived_path is not None:
        console.print(
            f"  [green]✓[/] Archived previous version record to {escape(str(archived_path))}"
        )
    console.print(f"  [green]✓[/] Version history file created: {escape(str(store.record_path))}")

    result = GenerateResult(
        previous_version=previous_version,
        next_version=next_version,
        changelog=changelog,
        record_path=store.record_path,
        archived_path=archived_path,
        dry_run=dry_run,
    )

    if dry_run:
        console.print(
            Panel(
                f"[bold]Calculated version {next_version}.[/]\n\n"
                "No tag or release was created.",
                title="[yellow]Dry Run Complete[/]",
                border_style="yellow",
            )
        )
        return result

    version = str(next_version)

    # Create and push the tag
    tag = config.tag_name(version)
    try:
        releaser.create_tag(version)
    except TagCreationError as e:
        err_console.print(f"[red]Failed to create Git tag:[/] {escape(str(e))}")
    except TagPushError as e:
        result.tag = tag
        console.print(f"  [green]✓[/] Tag {tag} created")
        err_console.print(f"[red]Failed to push Git tag:[/] {escape(str(e))}")
    else:
        result.tag = tag
        result.tag_pushed = True
        console.print(f"  [green]✓[/] Tag {tag} created and pushed to {config.git.remote}")

    # Create the release
    try:
        releaser.create_release(version, render_release_notes(changelog))
    except ReleaseCreationError as e:
        err_console.print(f"[red]Failed to create GitHub release:[/] {escape(str(e))}")
    else:
        result.release_created = True
        console.print(f"  [green]✓[/] Release {version} created")

    return result


def _changelog_table(changelog: ChangeLog) -> Table:
    table = Table(title="Changes", show_header=True, header_style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Commit")

    for category in ChangeCategory:
        for subject in changelog.get(category):
            table.add_row(str(category), Text(subject))

    return table
