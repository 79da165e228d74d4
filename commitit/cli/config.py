"""CLI commands for global configuration management."""

import typer

from commitit import global_config
from commitit.config import MessageSource, load_config
from commitit.exceptions import ConfigurationError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global commitit configuration in ~/.commitit/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration."""
    try:
        settings = load_config()
    except ConfigurationError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if global_config.is_configured():
        typer.echo(f"Configuration file: {global_config.get_config_file_path()}")
    else:
        typer.echo("No configuration file found, using defaults.")
    typer.echo()
    typer.echo(f"  Message source: {settings.message_source.value}")
    typer.echo(f"  Delegate URL: {settings.delegate_url or 'not set'}")
    typer.echo(f"  Delegate timeout: {settings.delegate_timeout}s")
    typer.echo(f"  Delegate token: {'set' if settings.delegate_token else 'not set'}")
    typer.echo(f"  Git timeout: {settings.git_timeout}s")
    typer.echo(f"  Editor: {settings.editor or 'not set'}")
    typer.echo(f"  Log level: {settings.log_level}")


@config_app.command("set-source")
def config_set_source(
    source: str = typer.Argument(..., help="Message source (local, delegate)"),
) -> None:
    """Choose between local composition and the delegate endpoint."""
    try:
        message_source = MessageSource(source.lower())
    except ValueError:
        typer.echo(f"Invalid source: {source}", err=True)
        typer.echo("Valid sources: local, delegate")
        raise typer.Exit(1)

    try:
        if message_source is MessageSource.DELEGATE and not global_config.get_delegate_url():
            typer.echo("Warning: no delegate URL set. Run 'commitit config set-delegate-url'.", err=True)
        global_config.set_message_source(message_source.value)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Message source set to {message_source.value}")


@config_app.command("set-delegate-url")
def config_set_delegate_url(
    url: str = typer.Argument(..., help="Delegate endpoint URL"),
) -> None:
    """Set the delegate endpoint URL."""
    if not url.startswith(("http://", "https://")):
        typer.echo(f"Invalid URL: {url}", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_delegate_url(url)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Delegate URL set to {url}")


@config_app.command("set-editor")
def config_set_editor(
    editor: str = typer.Argument(..., help="Editor command (e.g., nano, vim, 'code --wait')"),
) -> None:
    """Set the preferred editor for message editing."""
    try:
        global_config.set_editor_preference(editor)
    except ConfigurationError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ Editor set to {editor}")
