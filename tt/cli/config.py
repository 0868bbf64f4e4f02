"""CLI commands for API key and configuration management."""

import typer

from tt import global_config
from tt.cli.utils import redact_api_key
from tt.config import SETTABLE_KEYS
from tt.global_config import GlobalConfigError

MIN_API_KEY_LENGTH = 10

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage tt configuration in ~/.tt/",
    add_completion=False,
)


def key_set_command() -> None:
    """Set the OpenRouter API key."""
    api_key = typer.prompt("OpenRouter API Key", hide_input=True).strip()

    if not api_key:
        typer.echo("API key cannot be empty.", err=True)
        raise typer.Exit(1)
    if len(api_key) < MIN_API_KEY_LENGTH:
        typer.echo("API key seems too short.", err=True)
        raise typer.Exit(1)

    try:
        global_config.set_setting("api_key", api_key)
    except GlobalConfigError as e:
        typer.echo(f"Failed to save API key: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("✓ API key set successfully!")


def key_get_command() -> None:
    """Show the current API key with sensitive parts redacted."""
    try:
        settings = global_config.load_settings()
    except GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    if not settings.api_key:
        typer.echo("No API key set")
        return

    typer.echo(f"Current API Key: {redact_api_key(settings.api_key)}")


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    try:
        settings = global_config.load_settings()
    except GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    config_file = global_config.get_config_file_path()
    if global_config.is_configured():
        typer.echo(f"Current tt configuration ({config_file}):")
    else:
        typer.echo(f"No config file at {config_file}, using defaults:")
    typer.echo()
    typer.echo(f"  Base URL: {settings.base_url}")
    typer.echo(f"  Default Model: {settings.default_model}")
    if settings.api_key:
        typer.echo(f"  API Key: {redact_api_key(settings.api_key)}")
    else:
        typer.echo("  API Key: not set")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help=f"Setting name ({', '.join(SETTABLE_KEYS)})"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a configuration value."""
    if key not in SETTABLE_KEYS:
        typer.echo(f"Invalid setting: {key}", err=True)
        typer.echo(f"Valid settings: {', '.join(SETTABLE_KEYS)}")
        raise typer.Exit(1)

    try:
        global_config.set_setting(key, value)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to: {value}")
