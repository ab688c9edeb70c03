"""Configuration setup utilities for SVG Interpolator."""

import json
from pathlib import Path

import click

from ..core.config import Config, default_config_text, get_search_locations
from ..core.constants import CONFIG_FILENAME
from ..core.error_handling import ConfigurationError


@click.group()
def config():
    """Configuration management commands."""
    pass


@config.command()
@click.option(
    "--scope",
    type=click.Choice(["local", "user"]),
    default="local",
    help="Configuration scope (local=current dir, user=~/.config)",
)
@click.option("--force", is_flag=True, help="Overwrite existing configuration file")
def init(scope: str, force: bool):
    """Write a configuration file with the default values."""
    locations = get_search_locations()
    config_dir = locations[0] if scope == "local" else locations[1]
    config_path = config_dir / CONFIG_FILENAME

    if config_path.exists() and not force:
        click.echo(f"Configuration file already exists: {config_path}")
        click.echo("Use --force to overwrite")
        return

    try:
        config_dir.mkdir(parents=True, exist_ok=True)
        config_path.write_text(default_config_text(), encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Error creating configuration file: {e}")

    click.echo(f"Created configuration file: {config_path}")


@config.command()
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Explicit configuration file",
)
def show(config_file):
    """Show the merged configuration and where it came from."""
    try:
        loaded = Config(config_file)
    except ConfigurationError as e:
        raise click.ClickException(e.message)

    source = loaded.source if loaded.source else "built-in defaults"
    click.echo(f"Configuration source: {source}")
    click.echo(json.dumps(loaded.config, indent=2))


@config.command()
@click.option(
    "--config-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Explicit configuration file",
)
def validate(config_file):
    """Validate the configuration values."""
    try:
        Config(config_file).validate()
    except ConfigurationError as e:
        raise click.ClickException(e.message)

    click.echo("✓ Configuration is valid")


if __name__ == "__main__":
    config()
