"""Rich renderer for take-home pay summaries.

Transforms SDK results into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from netpay.sdk.contributions import SSS_MATRIX
from netpay.sdk.formatting import format_amount, format_currency, format_percent
from netpay.sdk.schemas import TaxResult
from netpay.sdk.summary import DE_MINIMIS_MONTHLY_LIMIT, to_period
from netpay.sdk.taxes import TAX_BRACKETS

SECTOR_LABELS = {
    "private": "Private",
    "public": "Government",
    "self-employed": "Self-Employed",
}


def render_summary(console: Console, result: TaxResult, period: str = "monthly") -> None:
    """Render a computed result scaled to a display period.

    Args:
        console: Rich Console instance
        result: Monthly TaxResult from compute_tax_summary()
        period: monthly, biweekly or annual
    """
    view = to_period(result, period)
    inputs = result.inputs

    console.print(Panel(
        f"[bold]{format_currency(view.take_home_pay)}[/bold]",
        title=f"Take Home Pay ({period.title()})",
        border_style="blue",
    ))

    _render_inputs(console, result)

    table = Table(title="Deductions", box=box.SIMPLE_HEAD, title_justify="left")
    table.add_column("Item")
    table.add_column("Amount", justify="right")
    for line in view.deductions:
        table.add_row(line.label, format_currency(line.amount))
    table.add_section()
    table.add_row("[bold]Total Deductions[/bold]", f"[bold]{format_currency(view.total_deductions)}[/bold]")
    table.add_row("Gross Income", format_currency(view.gross_income))
    console.print(table)

    if result.premium_pay.total_premium_pay > 0:
        _render_premium_pay(console, result, view.multiplier)

    if inputs.allowance > 0:
        if result.taxable_allowance > 0:
            console.print(
                f"[yellow]Allowance exceeds the {format_currency(DE_MINIMIS_MONTHLY_LIMIT)} "
                f"monthly de minimis ceiling; {format_currency(result.taxable_allowance)} is taxable.[/yellow]"
            )
        else:
            console.print("[dim]Allowance is within the de minimis ceiling (non-taxable).[/dim]")

    console.print(f"Effective deduction rate: {format_percent(view.effective_rate)}")


def _render_inputs(console: Console, result: TaxResult) -> None:
    """Render the inputs panel."""
    inputs = result.inputs
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value")

    table.add_row("Sector", SECTOR_LABELS.get(inputs.sector, inputs.sector))
    table.add_row("Monthly Salary", format_currency(inputs.salary))
    table.add_row("Allowance", format_currency(inputs.allowance))
    table.add_row("Schedule", inputs.work_schedule)
    if inputs.overtime_hours or inputs.night_differential_hours:
        table.add_row("OT / ND Hours", f"{inputs.overtime_hours:g} / {inputs.night_differential_hours:g}")

    console.print(Panel(table, title="Inputs", border_style="dim"))


def _render_premium_pay(console: Console, result: TaxResult, multiplier: float) -> None:
    """Render the premium pay breakdown."""
    premium = result.premium_pay
    breakdown = premium.breakdown
    rates = breakdown.rates

    table = Table(title="Premium Pay", box=box.SIMPLE_HEAD, title_justify="left")
    table.add_column("Component")
    table.add_column("Hours", justify="right")
    table.add_column("Rate", justify="right")
    table.add_column("Amount", justify="right")

    table.add_row("Overtime", f"{breakdown.regular_overtime_hours:g}", f"{rates.overtime:g}x",
                  format_currency(premium.regular_overtime_pay * multiplier))
    table.add_row("Night Differential", f"{breakdown.regular_night_hours:g}", f"{rates.night_diff:g}x",
                  format_currency(premium.regular_night_pay * multiplier))
    table.add_row("Night Overtime", f"{breakdown.overlap_hours:g}", f"{rates.night_overtime:g}x",
                  format_currency(premium.night_overtime_pay * multiplier))
    table.add_section()
    table.add_row("[bold]Total[/bold]", "", "", f"[bold]{format_currency(premium.total_premium_pay * multiplier)}[/bold]")
    console.print(table)


def render_rules(console: Console) -> None:
    """Render the withholding tax table and contribution schedules."""
    table = Table(title="Withholding Tax (annual)", box=box.SIMPLE_HEAD, title_justify="left")
    table.add_column("Over", justify="right")
    table.add_column("Not Over", justify="right")
    table.add_column("Base Tax", justify="right")
    table.add_column("Rate", justify="right")
    for lower, upper, rate, base in TAX_BRACKETS:
        upper_text = "-" if upper == float("inf") else format_amount(upper, 0)
        table.add_row(format_amount(lower, 0), upper_text, format_amount(base, 0), f"{rate:.0%}")
    console.print(table)

    sss = Table(title="SSS + MPF (employee share)", box=box.SIMPLE_HEAD, title_justify="left")
    sss.add_column("Salary From", justify="right")
    sss.add_column("Salary To", justify="right")
    sss.add_column("SSS", justify="right")
    sss.add_column("MPF", justify="right")
    for lower, upper, amount, mpf in SSS_MATRIX:
        upper_text = "and above" if upper == float("inf") else format_amount(upper)
        sss.add_row(format_amount(lower), upper_text, format_amount(amount), format_amount(mpf))
    console.print(sss)

    console.print(Panel(
        "GSIS: 9% of salary (public sector, replaces SSS)\n"
        "PhilHealth: 5% of salary within 10,000-100,000, half paid by the employee\n"
        "Pag-IBIG: 1% up to 1,500; 2% up to 10,000; 200 above\n"
        f"De minimis allowance: {format_amount(DE_MINIMIS_MONTHLY_LIMIT)} per month is non-taxable",
        title="Other Contributions",
        border_style="dim",
    ))
