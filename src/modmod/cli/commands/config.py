"""Configuration management commands."""

import click


@click.group()
def config():
    """Manage modmod configuration files."""
    pass


@config.command(name="init")
@click.option(
    "--location",
    type=click.Choice(["user", "project"], case_sensitive=False),
    default="user",
    help="Where to create the configuration file.",
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite existing configuration file.",
)
def config_init(location, force):
    """Create an example configuration file.

    By default, this creates a user-level config file at
    ~/.config/modmod/config.toml (or platform equivalent).
    Use --location=project to create .modmod/config.toml in the current
    directory.
    """
    from modmod.infrastructure.config import (
        get_config_file_locations,
        write_example_config,
    )

    locations = get_config_file_locations()
    config_path = locations[location.lower()]

    if config_path.exists() and not force:
        click.echo(f"Configuration file already exists at {config_path}\nUse --force to overwrite.")
        return

    try:
        created_path = write_example_config(location=location.lower())
    except OSError as e:
        raise click.ClickException(f"Error creating configuration file: {e}") from e
    click.echo(f"Created configuration file: {created_path}")


@config.command(name="show")
def config_show():
    """Show current configuration values from all sources."""
    from modmod.infrastructure.config import get_config

    cfg = get_config(reload=True)

    click.echo("Current modmod Configuration:")
    click.echo("=" * 60)

    click.echo("\n[Logging]")
    click.echo(f"  log_level: {cfg.logging.log_level}")
    click.echo(f"  console_logging: {cfg.logging.console_logging}")
    click.echo(f"  file_log_level: {cfg.logging.file_log_level}")
    click.echo(f"  log_file: {cfg.logging.log_file or '(platform log directory)'}")

    click.echo("\n[Build]")
    click.echo(f"  output_dir: {cfg.build.output_dir}")
    click.echo(f"  clear_output: {cfg.build.clear_output}")


@config.command(name="locate")
def config_locate():
    """Show configuration file locations and which of them exist."""
    from modmod.infrastructure.config import find_config_files, get_config_file_locations

    locations = get_config_file_locations()
    existing = find_config_files()

    click.echo("Configuration File Locations:")
    click.echo("=" * 60)
    for kind in ("project", "user"):
        found = existing[kind]
        if found:
            click.echo(f"  {kind}: {found} (found)")
        else:
            click.echo(f"  {kind}: {locations[kind]} (not found)")
