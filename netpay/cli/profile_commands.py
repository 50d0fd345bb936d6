"""Profile CLI commands for netpay.

Manages profile.yaml - saved default calculator inputs.
"""

import click
import yaml

from netpay.sdk import (
    SECTORS,
    WORK_SCHEDULES,
    get_profile_path,
    load_profile,
    save_profile,
    set_profile_value,
    ProfileNotFoundError,
    ProfileValidationError,
)
from netpay.sdk.formatting import normalize_amount

# Keys that take a numeric value
_NUMERIC_KEYS = {
    "defaults.salary",
    "defaults.allowance",
    "defaults.overtime_hours",
    "defaults.night_differential_hours",
}


@click.group()
def profile():
    """Manage saved inputs (profile.yaml).

    \b
    Supported keys:
      name                               label on exported summaries
      defaults.salary                    monthly basic salary
      defaults.allowance                 monthly allowance
      defaults.sector                    private | public | self-employed
      defaults.work_schedule             mon-fri | mon-sat | mon-sun
      defaults.overtime_hours            overtime hours per month
      defaults.night_differential_hours  night differential hours per month
    """
    pass


@profile.command("show")
def profile_show():
    """Show profile location and contents."""
    profile_path = get_profile_path()
    click.echo(f"Profile file: {profile_path}")
    click.echo(f"File exists: {profile_path.exists()}")

    try:
        data = load_profile(require_exists=True)
    except ProfileNotFoundError:
        click.echo("\nNo profile yet. Create one with: netpay profile init")
        return
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo()
    click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False).rstrip() or "(empty)")


@profile.command("init")
@click.option("--salary", help="Monthly basic salary.")
@click.option("--sector", type=click.Choice(SECTORS), default="private", help="Employment sector.")
@click.option("--schedule", "work_schedule", type=click.Choice(WORK_SCHEDULES), default="mon-fri",
              help="Work schedule.")
@click.option("--name", help="Name printed on exported summaries.")
@click.option("--force", is_flag=True, help="Overwrite an existing profile.")
def profile_init(salary, sector, work_schedule, name, force):
    """Create profile.yaml with default inputs."""
    profile_path = get_profile_path()
    if profile_path.exists() and not force:
        raise click.ClickException(f"Profile already exists: {profile_path}\nUse --force to overwrite.")

    data = {}
    if name:
        data["name"] = name
    data["defaults"] = {
        "salary": normalize_amount(salary) if salary else 0.0,
        "allowance": 0.0,
        "sector": sector,
        "work_schedule": work_schedule,
    }

    path = save_profile(data, profile_path)
    click.echo(f"Created profile: {path}")


@profile.command("set")
@click.argument("key")
@click.argument("value")
def profile_set(key, value):
    """Set a profile value.

    KEY is a dot-notation path like 'defaults.salary'.

    \b
    Examples:
        netpay profile set defaults.salary 25,000
        netpay profile set defaults.sector public
        netpay profile set name "Juan dela Cruz"
    """
    parsed_value = normalize_amount(value) if key in _NUMERIC_KEYS else value

    try:
        profile_file = set_profile_value(key, parsed_value)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key} = {parsed_value}")
    click.echo(f"Saved to: {profile_file}")
