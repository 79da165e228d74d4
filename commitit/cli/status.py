"""CLI command listing the changed files of a repository."""

from pathlib import Path
from typing import Optional

import typer

from commitit.engine import load_changes
from commitit.exceptions import CommitItError
from commitit.session import open_session, resolve_target_dir
from commitit.cli.utils import echo_records


def status_command(
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-C",
        help="Repository directory (defaults to the current directory)",
    ),
) -> None:
    """Show changed files with their staged/modified/untracked state."""
    try:
        session = open_session(resolve_target_dir(directory, Path.cwd()))
        records = load_changes(session)
    except CommitItError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not records:
        typer.echo("No modified files found.")
        return

    typer.echo(f"Changed files in {session.repo_root}:")
    echo_records(records)
    typer.echo("")
    typer.echo(f"Total: {len(records)} file(s)")
