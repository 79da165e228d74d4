"""CLI entry point for commitit.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from commitit.cli.config import config_app
from commitit.cli.main import main_command
from commitit.cli.panel import panel_command
from commitit.cli.status import status_command

# Main application
app = typer.Typer(
    name="commitit",
    help="commitit: stage selected changes and commit them with a generated message",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Add individual commands
app.command("status")(status_command)
app.command("panel")(panel_command)

# Set the main callback for default behavior
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
    "panel_command",
    "status_command",
]
