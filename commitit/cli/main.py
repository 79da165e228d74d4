"""Main CLI command: pick files, generate a message, commit."""

from pathlib import Path
from typing import Optional

import typer

from commitit import __version__
from commitit.config import load_config
from commitit.engine import commit, generate_message, load_changes
from commitit.exceptions import CommitItError
from commitit.log import configure_logging
from commitit.session import open_session, resolve_target_dir
from commitit.cli.utils import (
    echo_message,
    echo_records,
    edit_message,
    parse_selection,
    process_instruction_options,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"commitit {__version__}")
        raise typer.Exit(0)


def main_command(
    ctx: typer.Context,
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-C",
        help="Repository directory (defaults to the current directory)",
    ),
    select_all: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Select every changed file without prompting",
    ),
    instructions: Optional[str] = typer.Option(
        None,
        "--instructions",
        "-i",
        help="Instructions used as the message prefix (e.g. 'fix')",
    ),
    instructions_file: Optional[Path] = typer.Option(
        None,
        "--instructions-file",
        help="Load instructions from a file",
    ),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        help="Message source (local, delegate)",
    ),
    edit: bool = typer.Option(
        False,
        "--edit",
        "-e",
        help="Open the generated message in an editor before committing",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Commit without asking for confirmation",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Stage selected files and commit them with a generated message."""
    if verbose:
        configure_logging("DEBUG")

    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    instruction_text = process_instruction_options(instructions, instructions_file)

    try:
        settings = load_config(message_source=source.lower() if source else None)
        if not verbose:
            configure_logging(settings.log_level)

        target_dir = resolve_target_dir(directory, Path.cwd())
        session = open_session(target_dir, settings)

        records = load_changes(session)
        if not records:
            typer.echo("No modified files found.")
            raise typer.Exit(0)

        if select_all:
            selected = [r.path for r in records]
        else:
            typer.echo("Changed files:")
            echo_records(records)
            typer.echo("")
            answer = typer.prompt(
                "Select files to stage and commit (e.g. 1,3-4, 'a' for all)",
                default="",
                show_default=False,
            )
            try:
                selected = [records[i].path for i in parse_selection(answer, len(records))]
            except ValueError as e:
                typer.echo(f"Invalid selection: {e}", err=True)
                raise typer.Exit(1)

        typer.echo("Generating commit message...", err=True)
        result = generate_message(session, selected, instruction_text)
        message = result.message

        if edit:
            message = edit_message(message, settings.editor)

        typer.echo("")
        echo_message(message)

        if not yes:
            typer.echo("")
            confirm = typer.prompt(
                "Commit with this message? [Y/n]",
                default="y",
                show_default=False,
            )
            if confirm.lower() not in ("y", "yes", ""):
                typer.echo("Commit cancelled. Selected files remain staged.", err=True)
                raise typer.Exit(0)

        commit(session, message)
        typer.echo("Changes committed successfully!")

    except CommitItError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
