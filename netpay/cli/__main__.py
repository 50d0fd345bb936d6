"""netpay CLI - Command-line interface for take-home pay estimates."""

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from netpay import __version__
from netpay.sdk import (
    PAY_PERIODS,
    SECTORS,
    WORK_SCHEDULES,
    ExportValidationError,
    ProfileNotFoundError,
    ProfileValidationError,
    compute_tax_summary,
    export_summary,
    get_export_path,
    get_profile_value,
    get_setting,
    load_default_inputs,
    result_to_dict,
)

from .profile_commands import profile as profile_group
from .settings_commands import settings as settings_group
from .renderers.summary_renderer import render_rules, render_summary


def input_options(func):
    """Shared calculator input options for compute and export."""
    options = [
        click.option("--salary", "-s", help="Monthly basic salary (e.g., 25000 or 25,000)."),
        click.option("--allowance", "-a", help="Monthly allowance (first 7,500 is de minimis)."),
        click.option("--sector", type=click.Choice(SECTORS), help="Employment sector."),
        click.option("--schedule", "work_schedule", type=click.Choice(WORK_SCHEDULES),
                     help="Work schedule (22, 26 or 30 working days per month)."),
        click.option("--overtime", "--ot", "overtime_hours", type=float,
                     help="Overtime hours per month."),
        click.option("--night", "--nd", "night_differential_hours", type=float,
                     help="Night differential hours per month."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _resolve_inputs(**overrides):
    """Merge CLI options over profile defaults, mapping errors to click."""
    try:
        return load_default_inputs(**overrides)
    except ProfileValidationError as e:
        raise click.ClickException(str(e))
    except ValidationError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="netpay")
@click.option("--verbose", "-v", is_flag=True, help="Log calculation steps to stderr.")
def cli(verbose):
    """netpay - Philippine take-home pay estimator.

    Computes withholding tax, SSS/GSIS, PhilHealth and Pag-IBIG
    contributions, overtime and night differential pay, and take-home pay
    from a monthly basic salary.

    Inputs not given on the command line are read from profile.yaml
    (see 'netpay profile show'). Configuration is loaded from:

    \b
    1. NETPAY_CONFIG_PATH environment variable
    2. ~/.config/netpay/ (XDG default)
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


cli.add_command(profile_group)
cli.add_command(settings_group)


@cli.command("compute")
@input_options
@click.option("--period", "-p", type=click.Choice(PAY_PERIODS),
              help="Display period (default: settings default_period).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def compute(period, output_format, **overrides):
    """Compute deductions and take-home pay.

    \b
    Examples:
      netpay compute --salary 25000
      netpay compute -s 40,000 --sector public --ot 10 --nd 8
      netpay compute -s 60000 -a 9000 --period annual --format json
    """
    inputs = _resolve_inputs(**overrides)
    period = period or get_setting("default_period", "monthly")
    if period not in PAY_PERIODS:
        raise click.ClickException(f"Invalid default_period '{period}' in settings.json")

    result = compute_tax_summary(inputs)

    if output_format == "json":
        click.echo(json.dumps(result_to_dict(result, period), indent=2))
        return

    if inputs.salary <= 0:
        click.echo("No salary given. Pass --salary or set one with 'netpay profile set defaults.salary 25000'.")
        return

    render_summary(Console(), result, period)


@cli.command("export")
@input_options
@click.option("--output-dir", "-o", type=click.Path(file_okay=False),
              help="Output directory (default: settings export_dir or XDG data dir)")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Document format (default: text)")
def export(output_dir, output_format, **overrides):
    """Export a static tax summary document.

    Writes netpay-YYYY-MM-DD.txt (or .json) with monthly and annual
    figures and an estimated 13th month pay.
    """
    inputs = _resolve_inputs(**overrides)
    result = compute_tax_summary(inputs)
    target_dir = Path(output_dir) if output_dir else get_export_path()

    try:
        path = export_summary(
            result,
            target_dir,
            fmt=output_format,
            prepared_for=get_profile_value("name"),
        )
    except (ExportValidationError, ProfileNotFoundError, ProfileValidationError) as e:
        raise click.ClickException(str(e))

    click.echo(f"Saved summary to {path}")


@cli.command("rules")
def rules():
    """Show the withholding tax table and contribution schedules."""
    render_rules(Console())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
