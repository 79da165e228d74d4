"""Shared utility functions for CLI commands."""

import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Sequence

import typer

from commitit.models import FileChangeRecord, FileState
from commitit.selection import FileSelection

STATE_COLORS = {
    FileState.STAGED: typer.colors.GREEN,
    FileState.MODIFIED: typer.colors.YELLOW,
    FileState.UNTRACKED: typer.colors.RED,
}


def find_editor(preference: Optional[str] = None) -> list[str]:
    """Find an available text editor.

    Preference order:
    1. The configured editor
    2. $EDITOR environment variable
    3. nano as fallback

    Returns:
        List of command parts to run the editor.
    """
    if preference:
        return shlex.split(preference)

    editor = os.environ.get("EDITOR")
    if editor:
        return shlex.split(editor)

    # noinspection PyArgumentList
    if shutil.which("nano"):
        return ["nano"]

    # Last resort: vi
    return ["vi"]


def open_editor(file_path: Path, preference: Optional[str] = None) -> None:
    """Open the file in an editor and wait for it to close.

    Args:
        file_path: Path to the file to edit.
        preference: Configured editor command, if any.
    """
    editor_cmd = find_editor(preference)

    typer.echo(f"Opening editor: {' '.join(editor_cmd)}", err=True)

    try:
        result = subprocess.run(
            editor_cmd + [str(file_path)],
            check=False,
        )

        if result.returncode != 0:
            typer.echo(f"Warning: Editor exited with code {result.returncode}", err=True)

    except FileNotFoundError:
        typer.echo(f"Error: Editor not found: {editor_cmd[0]}", err=True)
        raise typer.Exit(1)


def edit_message(message: str, preference: Optional[str] = None) -> str:
    """Let the user edit message in an editor.

    Returns:
        The edited message with surrounding whitespace stripped.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        message_file = Path(tmpdir) / "COMMIT_EDITMSG"
        message_file.write_text(message + "\n")
        open_editor(message_file, preference)
        return message_file.read_text().strip()


def process_instruction_options(
    instructions: Optional[str], instructions_file: Optional[Path]
) -> Optional[str]:
    """Process --instructions and --instructions-file options.

    Args:
        instructions: Direct text from --instructions.
        instructions_file: Path to a file holding instructions.

    Returns:
        Combined instructions, or None if none were provided.

    Raises:
        typer.Exit: If instructions_file cannot be read.
    """
    parts = []

    if instructions:
        trimmed = instructions.strip()
        if trimmed:
            parts.append(trimmed)

    if instructions_file:
        if not instructions_file.exists():
            typer.echo(f"Error: Instructions file not found: {instructions_file}", err=True)
            raise typer.Exit(1)
        try:
            file_content = instructions_file.read_text().strip()
        except OSError as e:
            typer.echo(f"Error reading instructions file: {e}", err=True)
            raise typer.Exit(1)
        if file_content:
            parts.append(file_content)

    if not parts:
        return None

    # Instructions become the message prefix, so keep them on one line
    return " ".join(" ".join(parts).split())


def parse_selection(text: str, count: int) -> list[int]:
    """Parse a selection like "1,3,5-7" or "a" into zero-based indices.

    Args:
        text: User input. Numbers are 1-based; "a" or "all" selects everything.
        count: Number of selectable entries.

    Returns:
        Sorted, de-duplicated zero-based indices.

    Raises:
        ValueError: If the input contains an invalid token or out-of-range number.
    """
    text = text.strip().lower()
    if text in ("a", "all", "*"):
        return list(range(count))

    indices = set()
    for token in text.replace(" ", ",").split(","):
        if not token:
            continue
        if "-" in token:
            start_str, _, end_str = token.partition("-")
            start, end = int(start_str), int(end_str)
            if start > end:
                start, end = end, start
            numbers = range(start, end + 1)
        else:
            numbers = [int(token)]
        for number in numbers:
            if number < 1 or number > count:
                raise ValueError(f"{number} is out of range (1-{count})")
            indices.add(number - 1)
    return sorted(indices)


def format_record(index: int, record: FileChangeRecord, selected: Optional[bool] = None) -> str:
    """Format a record as a numbered list line.

    Args:
        index: Zero-based position in the list.
        record: The record to format.
        selected: Checkbox state, or None to omit the checkbox.
    """
    state = record.state
    label = typer.style(f"{state.label:<9}", fg=STATE_COLORS[state])
    checkbox = "" if selected is None else ("[x] " if selected else "[ ] ")
    return f"  {index + 1:>3}. {checkbox}{label} {record.path}"


def echo_records(records: Sequence[FileChangeRecord], selection: Optional[FileSelection] = None) -> None:
    """Print records as a numbered list."""
    for i, record in enumerate(records):
        selected = selection.is_selected(record.path) if selection is not None else None
        typer.echo(format_record(i, record, selected))


def echo_message(message: str) -> None:
    """Print a commit message between rules."""
    typer.echo("=" * 60)
    typer.echo(message)
    typer.echo("=" * 60)
