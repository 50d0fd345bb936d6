"""Settings CLI commands for netpay.

Manages settings.json - display period, export directory, profile path.
"""

import json
from pathlib import Path

import click

from netpay.sdk import (
    PAY_PERIODS,
    get_export_path,
    get_profile_path,
    get_settings_path,
    load_settings,
    save_settings,
    set_setting,
)

SETTING_KEYS = ("default_period", "export_dir", "profile")


@click.group()
def settings():
    """Manage settings (settings.json).

    \b
    Available settings:
    - default_period: monthly, biweekly or annual
    - export_dir: directory for 'netpay export'
    - profile: path to profile.yaml
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and effective paths."""
    settings_path = get_settings_path()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    click.echo("Current settings:")
    for key, value in load_settings().items():
        click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective paths:")
    click.echo(f"  profile: {get_profile_path()}")
    click.echo(f"  export_dir: {get_export_path()}")


@settings.command("set")
@click.argument("key", type=click.Choice(SETTING_KEYS))
@click.argument("value")
def settings_set(key, value):
    """Set a setting value.

    \b
    Examples:
        netpay settings set default_period biweekly
        netpay settings set export_dir ~/Documents/payslips
    """
    if key == "default_period" and value not in PAY_PERIODS:
        raise click.BadParameter(f"'{value}' is not one of: {', '.join(PAY_PERIODS)}", param_hint="VALUE")

    if key in ("export_dir", "profile"):
        value = str(Path(value).expanduser().resolve())

    settings_file = set_setting(key, value)
    click.echo(f"Set {key} = {value}")
    click.echo(f"Saved to: {settings_file}")


@settings.command("unset")
@click.argument("key", type=click.Choice(SETTING_KEYS))
def settings_unset(key):
    """Remove a setting, reverting to its default."""
    settings_path = get_settings_path()
    if not settings_path.exists():
        click.echo(f"{key} was not set.")
        return

    # load the raw file, not the defaults-merged view
    with open(settings_path, "r") as f:
        current = json.load(f)

    if key not in current:
        click.echo(f"{key} was not set.")
        return

    del current[key]
    save_settings(current)
    click.echo(f"Cleared {key}.")
