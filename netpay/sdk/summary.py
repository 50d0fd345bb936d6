"""Take-home pay summary: premium pay, contributions, withholding tax.

compute_tax_summary() is the single entry point. It is a pure function of
its TaxInputs; every call builds a fresh TaxResult and nothing is cached.
All figures are monthly. Use to_period() to scale a result for display.
"""

import logging
from typing import Dict, List

from .contributions import compute_gsis, compute_pagibig, compute_philhealth, compute_sss
from .premium import compute_hourly_rate, compute_premium_pay
from .schemas import (
    SELF_EMPLOYED,
    DeductionLine,
    Deductions,
    PeriodView,
    TaxInputs,
    TaxResult,
)
from .taxes import MONTHS_PER_YEAR, compute_withholding_tax

logger = logging.getLogger(__name__)

DE_MINIMIS_ANNUAL_LIMIT = 90_000
DE_MINIMIS_MONTHLY_LIMIT = DE_MINIMIS_ANNUAL_LIMIT / MONTHS_PER_YEAR  # 7,500

# Display order of deduction line items
DEDUCTION_LABELS = {
    "withholding_tax": "Withholding Tax",
    "gsis": "GSIS Contribution",
    "sss": "SSS Contribution",
    "philhealth": "PhilHealth Contribution",
    "pagibig": "Pag-IBIG Contribution",
}

PERIOD_MULTIPLIERS = {
    "monthly": 1.0,
    "biweekly": MONTHS_PER_YEAR / 26,
    "annual": float(MONTHS_PER_YEAR),
}


def compute_taxable_allowance(allowance: float) -> float:
    """Portion of a monthly allowance above the de minimis ceiling."""
    return max(0.0, allowance - DE_MINIMIS_MONTHLY_LIMIT)


def filter_deductions(deductions: Deductions, sector: str) -> List[DeductionLine]:
    """Deduction line items that apply to a sector.

    GSIS is dropped for private and self-employed, SSS is dropped for public.
    The dropped program is omitted entirely, not listed at zero.
    """
    hidden = "sss" if sector == "public" else "gsis"
    values = deductions.model_dump()
    return [
        DeductionLine(key=key, label=label, amount=values[key])
        for key, label in DEDUCTION_LABELS.items()
        if key != hidden
    ]


def _zero_result(inputs: TaxInputs) -> TaxResult:
    deductions = Deductions()
    return TaxResult(
        inputs=inputs,
        take_home_pay=0.0,
        # allowance is not wage income but is still disclosed
        gross_income=inputs.allowance,
        taxable_allowance=0.0,
        deductions=deductions,
        visible_deductions=filter_deductions(deductions, inputs.sector),
        total_deductions=0.0,
        premium_pay=compute_premium_pay(0, 0, 0, inputs.sector),
        effective_rate=0.0,
    )


def compute_tax_summary(inputs: TaxInputs) -> TaxResult:
    """Compute monthly deductions and take-home pay.

    Pipeline:
        1. No salary -> zero result
        2. Premium pay; gross pay = salary + premium pay
        3. Taxable allowance = allowance above the de minimis ceiling
        4. Taxable base = gross pay + taxable allowance
        5. Contributions on the taxable base (SSS or GSIS by sector,
           PhilHealth, Pag-IBIG)
        6. Withholding tax on annualized base net of annualized contributions
        7. Take-home = gross pay - deductions + full allowance, floored at 0
        8. Effective rate = deductions / (salary + allowance + premium pay)

    Args:
        inputs: TaxInputs (a dict is accepted and validated)

    Returns:
        TaxResult with monthly figures
    """
    if isinstance(inputs, dict):
        inputs = TaxInputs(**inputs)

    if inputs.salary <= 0:
        return _zero_result(inputs)

    sector = inputs.sector
    is_self_employed = sector == SELF_EMPLOYED

    hourly_rate = compute_hourly_rate(inputs.salary, inputs.work_schedule)
    premium_pay = compute_premium_pay(
        hourly_rate,
        inputs.overtime_hours,
        inputs.night_differential_hours,
        sector,
    )
    gross_pay = inputs.salary + premium_pay.total_premium_pay

    # de minimis: only the excess over the monthly ceiling is taxable
    taxable_allowance = compute_taxable_allowance(inputs.allowance)
    taxable_base = gross_pay + taxable_allowance
    annual_income = taxable_base * MONTHS_PER_YEAR

    sss_contribution = 0.0  # SS + MPF shown as one line
    gsis_contribution = 0.0
    if sector == "public":
        gsis_contribution = compute_gsis(taxable_base)
    else:
        sss_contribution = compute_sss(taxable_base, is_self_employed).total

    philhealth = compute_philhealth(taxable_base, is_self_employed)
    pagibig = compute_pagibig(taxable_base)
    total_contributions = gsis_contribution + sss_contribution + philhealth + pagibig

    taxable_annual_income = annual_income - total_contributions * MONTHS_PER_YEAR
    withholding_tax = compute_withholding_tax(taxable_annual_income)
    logger.debug(
        f"taxable base {taxable_base:.2f}, contributions {total_contributions:.2f}, "
        f"taxable annual {taxable_annual_income:.2f}, withholding {withholding_tax:.2f}"
    )

    total_deductions = total_contributions + withholding_tax
    net_pay = gross_pay - total_deductions
    # the whole allowance is paid out; only its excess was taxed above
    take_home_pay = round(max(net_pay + inputs.allowance, 0.0), 2)

    gross_income = inputs.salary + inputs.allowance + premium_pay.total_premium_pay

    amounts = Deductions(
        withholding_tax=withholding_tax,
        gsis=gsis_contribution,
        sss=sss_contribution,
        philhealth=philhealth,
        pagibig=pagibig,
    )
    visible = filter_deductions(amounts, sector)
    visible_total = sum(line.amount for line in visible)
    deductions = amounts.model_copy(update={"total": visible_total})

    return TaxResult(
        inputs=inputs,
        take_home_pay=take_home_pay,
        gross_income=gross_income,
        taxable_allowance=taxable_allowance,
        deductions=deductions,
        visible_deductions=visible,
        total_deductions=visible_total,
        premium_pay=premium_pay,
        effective_rate=(visible_total / gross_income) * 100 if gross_income > 0 else 0.0,
    )


def to_period(result: TaxResult, period: str = "monthly") -> PeriodView:
    """Scale every displayed figure of a monthly result to a period.

    The effective rate is a ratio and is not scaled.
    """
    if period not in PERIOD_MULTIPLIERS:
        raise ValueError(f"Unknown pay period '{period}'. Use one of: {', '.join(PERIOD_MULTIPLIERS)}")

    multiplier = PERIOD_MULTIPLIERS[period]
    return PeriodView(
        period=period,
        multiplier=multiplier,
        take_home_pay=result.take_home_pay * multiplier,
        gross_income=result.gross_income * multiplier,
        total_deductions=result.total_deductions * multiplier,
        total_premium_pay=result.premium_pay.total_premium_pay * multiplier,
        deductions=[
            line.model_copy(update={"amount": line.amount * multiplier})
            for line in result.visible_deductions
        ],
        effective_rate=result.effective_rate,
    )


def result_to_dict(result: TaxResult, period: str = "monthly") -> Dict:
    """JSON-ready dict of a result, with a scaled view for the period."""
    data = result.model_dump(mode="json")
    data["period"] = to_period(result, period).model_dump(mode="json")
    return data
