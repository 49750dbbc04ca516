"""Bump CLI command.

Runs manifests through the version bump transform and writes them back:

    bumpforge bump minor
    bumpforge bump major -f package.json -f packages/core/package.json
    bumpforge bump --dry-run
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from bumpforge.core.config import TransformOptions, process_bump_argument
from bumpforge.core.logging import configure_logging
from bumpforge.core.pipeline import (
    CommandRunner,
    ManifestFile,
    NullCommandRunner,
    SubprocessCommandRunner,
    bump_transform,
)

console = Console()

LOG_LEVEL_ENV = "BUMPFORGE_LOG_LEVEL"
DEFAULT_MANIFEST = Path("package.json")


def bump_command(
    bump_type: Optional[str] = typer.Argument(
        None,
        help="Bump type: major, minor or patch (default: patch)",
    ),
    files: Optional[List[Path]] = typer.Option(
        None,
        "--file",
        "-f",
        help="Manifest to bump (repeatable, default: package.json)",
        dir_okay=False,
    ),
    num_spaces: Optional[int] = typer.Option(
        None,
        "--num-spaces",
        help="Indentation width (1-8), detected from the file by default",
        min=1,
        max=8,
    ),
    regenerate_lock: bool = typer.Option(
        True,
        "--regenerate-lock/--no-regenerate-lock",
        help="Run npm install after bumping",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show the new versions without writing files or running npm",
    ),
    debug: bool = typer.Option(False, "--debug", help="Verbose logging"),
) -> None:
    """Bump the version field of JSON manifests."""
    _setup_logging(debug)

    options = TransformOptions(
        num_spaces=num_spaces,
        regenerate_lock=regenerate_lock,
        fallback_bump_type=process_bump_argument(),
    )
    runner: CommandRunner = (
        NullCommandRunner() if dry_run else SubprocessCommandRunner()
    )
    transform = bump_transform(bump_type, options, runner=runner)
    if not transform.is_available():
        console.print(
            f"[yellow]Warning:[/yellow] {options.lock_command[0]} not found on PATH, "
            "lock regeneration will fail"
        )

    manifests = [ManifestFile.from_path(path) for path in files or [DEFAULT_MANIFEST]]

    for bumped in transform.pipe(manifests):
        _report(bumped, dry_run)
        if not dry_run:
            bumped.write()


def _setup_logging(debug: bool) -> None:
    """Configure logging from --debug or the BUMPFORGE_LOG_LEVEL variable."""
    level = "DEBUG" if debug else os.environ.get(LOG_LEVEL_ENV, "INFO")
    configure_logging(level=level)


def _report(bumped: ManifestFile, dry_run: bool) -> None:
    """Print one result line."""
    if dry_run:
        console.print(f"[yellow]Dry run:[/yellow] {bumped.path}")
        console.print(bumped.text(), markup=False, highlight=False)
    else:
        console.print(f"[green]✓[/green] {bumped.path}")
