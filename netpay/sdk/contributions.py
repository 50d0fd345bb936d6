"""Statutory contribution schedules (employee share, monthly).

- SSS: Social Security System, January 2025 schedule, including the
  Mandatory Provident Fund (MPF) for salary credits above 20,000
- GSIS: Government Service Insurance System, public sector alternative to SSS
- PhilHealth: January 2024 premium schedule
- Pag-IBIG (HDMF): February 2024 schedule

Every function is total over its input: negative, NaN or missing salaries
yield a zero contribution rather than an error.
"""

import bisect
import logging

from .formatting import normalize_amount
from .schemas import SocialSecurityResult

logger = logging.getLogger(__name__)

# --- SSS / MPF ---

SSS_RATE = 0.05
SSS_SELF_EMPLOYED_MULTIPLIER = 3  # worker share + employer share

SSS_FLOOR_SALARY = 5250.0
SSS_FLOOR_MSC = 5000.0
SSS_CEILING_SALARY = 34750.0
SSS_CEILING_MSC = 35000.0
SSS_REGULAR_MSC_CAP = 20000.0  # salary credit above this goes to MPF

# Format: (lower, upper, sss, mpf) - sorted ascending, non-overlapping
SSS_MATRIX = (
    (0, 5249.99, 250.0, 0.0),
    (5250, 5749.99, 275.0, 0.0),
    (5750, 6249.99, 300.0, 0.0),
    (6250, 6749.99, 325.0, 0.0),
    (6750, 7249.99, 350.0, 0.0),
    (7250, 7749.99, 375.0, 0.0),
    (7750, 8249.99, 400.0, 0.0),
    (8250, 8749.99, 425.0, 0.0),
    (8750, 9249.99, 450.0, 0.0),
    (9250, 9749.99, 475.0, 0.0),
    (9750, 10249.99, 500.0, 0.0),
    (10250, 10749.99, 525.0, 0.0),
    (10750, 11249.99, 550.0, 0.0),
    (11250, 11749.99, 575.0, 0.0),
    (11750, 12249.99, 600.0, 0.0),
    (12250, 12749.99, 625.0, 0.0),
    (12750, 13249.99, 650.0, 0.0),
    (13250, 13749.99, 675.0, 0.0),
    (13750, 14249.99, 700.0, 0.0),
    (14250, 14749.99, 725.0, 0.0),
    (14750, 15249.99, 750.0, 0.0),
    (15250, 15749.99, 775.0, 0.0),
    (15750, 16249.99, 800.0, 0.0),
    (16250, 16749.99, 825.0, 0.0),
    (16750, 17249.99, 850.0, 0.0),
    (17250, 17749.99, 875.0, 0.0),
    (17750, 18249.99, 900.0, 0.0),
    (18250, 18749.99, 925.0, 0.0),
    (18750, 19249.99, 950.0, 0.0),
    (19250, 19749.99, 975.0, 0.0),
    (19750, 20249.99, 1000.0, 0.0),
    (20250, 20749.99, 1000.0, 25.0),
    (20750, 21249.99, 1000.0, 50.0),
    (21250, 21749.99, 1000.0, 75.0),
    (21750, 22249.99, 1000.0, 100.0),
    (22250, 22749.99, 1000.0, 125.0),
    (22750, 23249.99, 1000.0, 150.0),
    (23250, 23749.99, 1000.0, 175.0),
    (23750, 24249.99, 1000.0, 200.0),
    (24250, 24749.99, 1000.0, 225.0),
    (24750, 25249.99, 1000.0, 250.0),
    (25250, 25749.99, 1000.0, 275.0),
    (25750, 26249.99, 1000.0, 300.0),
    (26250, 26749.99, 1000.0, 325.0),
    (26750, 27249.99, 1000.0, 350.0),
    (27250, 27749.99, 1000.0, 375.0),
    (27750, 28249.99, 1000.0, 400.0),
    (28250, 28749.99, 1000.0, 425.0),
    (28750, 29249.99, 1000.0, 450.0),
    (29250, 29749.99, 1000.0, 475.0),
    (29750, 30249.99, 1000.0, 500.0),
    (30250, 30749.99, 1000.0, 525.0),
    (30750, 31249.99, 1000.0, 550.0),
    (31250, 31749.99, 1000.0, 575.0),
    (31750, 32249.99, 1000.0, 600.0),
    (32250, 32749.99, 1000.0, 625.0),
    (32750, 33249.99, 1000.0, 650.0),
    (33250, 33749.99, 1000.0, 675.0),
    (33750, 34249.99, 1000.0, 700.0),
    (34250, 34749.99, 1000.0, 725.0),
    (34750, float("inf"), 1000.0, 750.0),
)

_SSS_LOWER_BOUNDS = tuple(row[0] for row in SSS_MATRIX)

# --- GSIS ---

GSIS_RATE = 0.09

# --- PhilHealth ---

PHILHEALTH_RATE = 0.05
PHILHEALTH_FLOOR = 10000.0
PHILHEALTH_CEILING = 100000.0
PHILHEALTH_FLOOR_PREMIUM = 500.0
PHILHEALTH_CEILING_PREMIUM = 5000.0
PHILHEALTH_EMPLOYEE_SHARE = 0.5

# --- Pag-IBIG ---

PAGIBIG_LOW_BRACKET = 1500.0
PAGIBIG_LOW_RATE = 0.01
PAGIBIG_SALARY_CAP = 10000.0
PAGIBIG_RATE = 0.02
PAGIBIG_MAX_CONTRIBUTION = 200.0


def lookup_sss_row(salary: float) -> tuple:
    """Find the SSS matrix row for a salary.

    Rows are matched by lower bound, so centavo fractions that fall between
    one row's upper bound (e.g. 25249.99) and the next row's lower bound
    (25250) stay in the lower row.
    """
    index = bisect.bisect_right(_SSS_LOWER_BOUNDS, salary) - 1
    return SSS_MATRIX[max(index, 0)]


def compute_sss(salary: float, is_self_employed: bool = False) -> SocialSecurityResult:
    """Compute the SSS + MPF contribution for a monthly salary.

    Args:
        salary: Monthly compensation
        is_self_employed: Self-employed members pay both the worker and the
            employer share (3x the employee share)

    Returns:
        SocialSecurityResult with the regular SS and MPF amounts (both 0
        when there is no salary)
    """
    salary = normalize_amount(salary)
    # no salary means no contribution, not the below-minimum floor
    if salary <= 0:
        return SocialSecurityResult()

    multiplier = SSS_SELF_EMPLOYED_MULTIPLIER if is_self_employed else 1

    # below minimum MSC: fixed contribution
    if salary < SSS_FLOOR_SALARY:
        return SocialSecurityResult(sss=SSS_FLOOR_MSC * SSS_RATE * multiplier, mpf=0)

    # above max MSC: SS capped, excess salary credit goes to MPF
    if salary >= SSS_CEILING_SALARY:
        sss = SSS_REGULAR_MSC_CAP * SSS_RATE * multiplier
        mpf = (SSS_CEILING_MSC - SSS_REGULAR_MSC_CAP) * SSS_RATE * multiplier
        return SocialSecurityResult(sss=sss, mpf=round(mpf, 2))

    lower, upper, sss, mpf = lookup_sss_row(salary)
    logger.debug(f"SSS band {lower:.2f}-{upper:.2f} for salary {salary:.2f}")
    return SocialSecurityResult(sss=sss * multiplier, mpf=mpf * multiplier)


def compute_gsis(salary: float) -> float:
    """GSIS personal share: flat 9% of salary."""
    return normalize_amount(salary) * GSIS_RATE


def compute_philhealth(salary: float, is_self_employed: bool = False) -> float:
    """Compute the PhilHealth premium share.

    The 5% premium is computed on the salary clamped to [10,000, 100,000]
    and split equally between employee and employer. Self-employed members
    shoulder the full premium.
    """
    salary = normalize_amount(salary)
    if salary <= 0:
        return 0.0

    multiplier = 2 if is_self_employed else 1
    share = PHILHEALTH_EMPLOYEE_SHARE * multiplier

    if salary <= PHILHEALTH_FLOOR:
        return PHILHEALTH_FLOOR_PREMIUM * share
    if salary < PHILHEALTH_CEILING:
        return salary * PHILHEALTH_RATE * share
    return PHILHEALTH_CEILING_PREMIUM * share


def compute_pagibig(salary: float) -> float:
    """Compute the Pag-IBIG (HDMF) employee contribution."""
    salary = normalize_amount(salary)
    if salary <= PAGIBIG_LOW_BRACKET:
        return salary * PAGIBIG_LOW_RATE
    if salary <= PAGIBIG_SALARY_CAP:
        return salary * PAGIBIG_RATE
    return PAGIBIG_MAX_CONTRIBUTION
