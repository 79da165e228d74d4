"""Persistent panel: an interactive loop over one session.

The panel keeps the file list, selection, instructions and the last
generated message between actions. Every action reports its own errors
and returns to the prompt.
"""

from pathlib import Path
from typing import Optional

import typer

from commitit.config import load_config
from commitit.engine import commit, generate_message, load_changes
from commitit.exceptions import CommitItError, EmptyMessageError
from commitit.session import Session, open_session, resolve_target_dir
from commitit.selection import FileSelection
from commitit.cli.utils import echo_message, echo_records, edit_message, parse_selection

PANEL_HELP = """Actions:
  <numbers>  toggle files (e.g. 1,3-4)
  a          toggle all files
  i          set instructions
  g          generate commit message
  e          edit commit message
  c          commit with the current message
  r          refresh file list
  q          quit"""


class Panel:
    """State and actions of the interactive panel."""

    def __init__(self, session: Session):
        self.session = session
        self.selection = FileSelection()
        self.instructions: Optional[str] = None
        self.message: Optional[str] = None

    def refresh(self) -> None:
        self.selection.replace(load_changes(self.session))

    def toggle(self, text: str) -> None:
        for index in parse_selection(text, len(self.selection)):
            self.selection.toggle(self.selection.records[index].path)

    def toggle_all(self) -> None:
        self.selection.toggle_all()

    def set_instructions(self, text: str) -> None:
        self.instructions = text.strip() or None

    def generate(self) -> str:
        result = generate_message(
            self.session, self.selection.selected_paths(), self.instructions
        )
        self.message = result.message
        return self.message

    def edit(self) -> None:
        if self.message is None:
            raise EmptyMessageError("Generate a commit message first.")
        self.message = edit_message(self.message, self.session.settings.editor)

    def commit(self) -> None:
        commit(self.session, self.message or "")
        self.message = None
        self.selection.clear()
        self.refresh()

    def render(self) -> None:
        typer.echo("")
        typer.echo(f"Repository: {self.session.repo_root}")
        if self.selection.records:
            echo_records(self.selection.records, self.selection)
        else:
            typer.echo("  (no modified files)")
        typer.echo(f"Instructions: {self.instructions or '(none)'}")
        if self.message is not None:
            typer.echo("Message:")
            echo_message(self.message)

    def handle(self, action: str) -> bool:
        """Run one action.

        Returns:
            False when the panel should close.
        """
        action = action.strip()
        key = action.lower()

        if key in ("q", "quit", "exit"):
            return False
        if key in ("", "r"):
            self.refresh()
        elif key == "a":
            self.toggle_all()
        elif key == "i":
            self.set_instructions(typer.prompt("Instructions", default="", show_default=False))
        elif key == "g":
            typer.echo("Generating commit message...", err=True)
            self.generate()
        elif key == "e":
            self.edit()
        elif key == "c":
            self.commit()
            typer.echo("Changes committed successfully!")
        elif key in ("h", "?", "help"):
            typer.echo(PANEL_HELP)
        else:
            self.toggle(action)
        return True


def panel_command(
    directory: Optional[Path] = typer.Option(
        None,
        "--dir",
        "-C",
        help="Repository directory (defaults to the current directory)",
    ),
    source: Optional[str] = typer.Option(
        None,
        "--source",
        help="Message source (local, delegate)",
    ),
) -> None:
    """Open an interactive panel to select files, generate and commit."""
    try:
        settings = load_config(message_source=source.lower() if source else None)
        session = open_session(resolve_target_dir(directory, Path.cwd()), settings)
        panel = Panel(session)
        panel.refresh()
    except CommitItError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(PANEL_HELP)
    running = True
    while running:
        panel.render()
        action = typer.prompt(">", default="r", show_default=False)
        try:
            running = panel.handle(action)
        except CommitItError as e:
            typer.echo(f"Error: {e}", err=True)
        except ValueError as e:
            typer.echo(f"Invalid selection: {e}", err=True)
