"""taxes - Withholding tax on compensation income.

Scope:
- TRAIN law graduated income tax table (effective January 2023)
- Annual tax on an annualized taxable base, returned as a monthly figure

Constraints:
- Pure calculation - no config or file access
- Contributions are subtracted by the caller before annualized income
  reaches this module

Usage:
    from netpay.sdk.taxes import compute_withholding_tax

    monthly_tax = compute_withholding_tax(275_100)  # -> 313.75
"""

from .withholding import (
    TAX_BRACKETS,
    MONTHS_PER_YEAR,
    find_bracket,
    compute_annual_withholding_tax,
    compute_withholding_tax,
)

__all__ = [
    "TAX_BRACKETS",
    "MONTHS_PER_YEAR",
    "find_bracket",
    "compute_annual_withholding_tax",
    "compute_withholding_tax",
]
