"""Withholding tax calculation using the TRAIN graduated rate table.

The table is annual. Callers annualize monthly taxable compensation (x12),
subtract annualized contributions, and get back a monthly withholding figure.
"""

import logging
from typing import Tuple

from ..formatting import normalize_amount

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12

# TRAIN law table effective January 2023 (annual)
# Format: (lower_bound, upper_bound, marginal_rate, base_tax)
# Lower bound is inclusive; brackets are contiguous so the tax is continuous
# at every threshold. base_tax is the tax accumulated in all lower brackets.
TAX_BRACKETS = (
    (0, 250_000, 0.00, 0),
    (250_000, 400_000, 0.15, 0),
    (400_000, 800_000, 0.20, 22_500),
    (800_000, 2_000_000, 0.25, 102_500),
    (2_000_000, 8_000_000, 0.30, 402_500),
    (8_000_000, float("inf"), 0.35, 2_202_500),
)


def find_bracket(annual_income: float) -> Tuple[float, float, float, float]:
    """Find the bracket containing an annual income.

    Income exactly on a threshold belongs to the higher bracket, where the
    excess is zero, so the tax is the same either way.
    """
    annual_income = normalize_amount(annual_income)
    for bracket in TAX_BRACKETS:
        lower, upper, _, _ = bracket
        if lower <= annual_income < upper:
            return bracket
    return TAX_BRACKETS[-1]


def compute_annual_withholding_tax(taxable_annual_income: float) -> float:
    """Annual tax due on a taxable annual income (0 for negative/NaN)."""
    income = normalize_amount(taxable_annual_income)
    lower, _, rate, base = find_bracket(income)
    if rate == 0:
        return 0.0
    return base + (income - lower) * rate


def compute_withholding_tax(taxable_annual_income: float) -> float:
    """Monthly withholding tax for an annualized taxable income.

    Args:
        taxable_annual_income: Annualized compensation net of annualized
            SSS/GSIS, PhilHealth and Pag-IBIG contributions

    Returns:
        Annual tax divided by 12

    Example:
        compute_withholding_tax(275_100)  # (275,100 - 250,000) x 15% / 12 = 313.75
    """
    annual_tax = compute_annual_withholding_tax(taxable_annual_income)
    logger.debug(f"withholding: annual tax {annual_tax:.2f}")
    return annual_tax / MONTHS_PER_YEAR
