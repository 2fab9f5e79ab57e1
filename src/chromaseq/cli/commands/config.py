"""
Config command group for the settings file.

Commands:
    - config show [--json]          # Display settings
    - config set KEY VALUE          # Update one setting and save
    - config reset [--yes]          # Restore defaults and save
    - config path                   # Print the settings file location
"""

import json

import click

from chromaseq.models import AppConfig

from ..context import CliContext, cli_errors, echo_json, pass_cli_context


@click.group(name="config")
def config():
    """Show and change chromaseq settings."""
    pass


@config.command(name="show")
@click.option('--json', 'as_json', is_flag=True, help='Print settings as JSON')
@pass_cli_context
@cli_errors
def show(obj: CliContext, as_json: bool):
    """Display current settings."""
    values = obj.config_service().get_all()

    if as_json:
        echo_json(values)
        return

    click.echo(f"Settings ({obj.config_path}):\n")
    for key, value in values.items():
        description = AppConfig.model_fields[key].description or ""
        click.echo(f"  {key:<20} {str(value):<12} {description}")


@config.command(name="set")
@click.argument('key', type=click.Choice(list(AppConfig.model_fields)))
@click.argument('value')
@pass_cli_context
@cli_errors
def set_value(obj: CliContext, key: str, value: str):
    """
    Set KEY to VALUE and save.

    \b
    Examples:
      chromaseq config set default_seed 42
      chromaseq config set default_method halton
      chromaseq config set inversion_strategy nearest
    """
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError:
        parsed = value

    service = obj.config_service()
    service.set(key, parsed)
    service.save()
    click.echo(f"{key} = {service.get(key)}")


@config.command(name="reset")
@click.option('--yes', is_flag=True, help='Do not ask for confirmation')
@pass_cli_context
@cli_errors
def reset(obj: CliContext, yes: bool):
    """Restore default settings and save."""
    if not yes:
        click.confirm(f"Reset all settings in {obj.config_path}?", abort=True)

    # Skip loading the current file so a broken one can be replaced
    service = obj.config_service(AppConfig())
    service.reset()
    service.save()
    click.echo("Settings reset to defaults")


@config.command(name="path")
@pass_cli_context
def path(obj: CliContext):
    """Print the settings file location."""
    click.echo(str(obj.config_path))
