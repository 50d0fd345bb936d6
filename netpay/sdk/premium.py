"""Overtime and night differential premium pay.

Hours that are both overtime and night work are paid once at the combined
night-overtime multiplier; they are never also paid at the separate
overtime and night differential multipliers.
"""

import logging

from .formatting import normalize_amount
from .schemas import (
    SELF_EMPLOYED,
    PremiumPayBreakdown,
    PremiumPayResult,
    PremiumRates,
)

logger = logging.getLogger(__name__)

# Working days per month by schedule
WORKING_DAYS = {
    "mon-fri": 22,
    "mon-sat": 26,
    "mon-sun": 30,
}

HOURS_PER_DAY = 8

OVERTIME_RATE = 1.25
NIGHT_DIFF_RATE_PRIVATE = 1.10
NIGHT_DIFF_RATE_PUBLIC = 1.20
NIGHT_OVERTIME_RATE = 1.375


def get_working_days(work_schedule: str) -> int:
    """Working days per month for a schedule (defaults to mon-fri)."""
    return WORKING_DAYS.get(work_schedule, WORKING_DAYS["mon-fri"])


def compute_hourly_rate(salary: float, work_schedule: str = "mon-fri") -> float:
    """Hourly rate: monthly salary / (working days x 8 hours)."""
    return normalize_amount(salary) / (get_working_days(work_schedule) * HOURS_PER_DAY)


def get_night_diff_rate(sector: str) -> float:
    """Night differential multiplier for a sector (0 for self-employed)."""
    if sector == SELF_EMPLOYED:
        return 0.0
    if sector == "public":
        return NIGHT_DIFF_RATE_PUBLIC
    return NIGHT_DIFF_RATE_PRIVATE


def compute_premium_pay(
    hourly_rate: float,
    overtime_hours: float,
    night_differential_hours: float,
    sector: str,
) -> PremiumPayResult:
    """Split claimed hours into premium pay components.

    Args:
        hourly_rate: Base hourly rate
        overtime_hours: Overtime hours claimed for the month
        night_differential_hours: Night shift hours claimed for the month
        sector: 'private', 'public' or 'self-employed'

    Returns:
        PremiumPayResult. Self-employed always gets an all-zero result.

    Example:
        # 10 OT hours, 4 night hours: 4 overlap, 6 regular OT
        compute_premium_pay(100, 10, 4, "private")
        # night_overtime_pay = 4 x 100 x 1.375 = 550
        # regular_overtime_pay = 6 x 100 x 1.25 = 750
    """
    if sector == SELF_EMPLOYED:
        return PremiumPayResult()

    hourly_rate = normalize_amount(hourly_rate)
    overtime_hours = normalize_amount(overtime_hours)
    night_differential_hours = normalize_amount(night_differential_hours)
    night_diff_rate = get_night_diff_rate(sector)

    overlap_hours = min(overtime_hours, night_differential_hours)
    regular_overtime_hours = overtime_hours - overlap_hours
    regular_night_hours = night_differential_hours - overlap_hours

    regular_overtime_pay = regular_overtime_hours * hourly_rate * OVERTIME_RATE
    regular_night_pay = regular_night_hours * hourly_rate * night_diff_rate
    night_overtime_pay = overlap_hours * hourly_rate * NIGHT_OVERTIME_RATE
    total = regular_overtime_pay + regular_night_pay + night_overtime_pay

    if total:
        logger.debug(
            f"premium pay: ot={regular_overtime_hours}h nd={regular_night_hours}h "
            f"overlap={overlap_hours}h @ {hourly_rate:.2f}/h -> {total:.2f}"
        )

    return PremiumPayResult(
        regular_overtime_pay=regular_overtime_pay,
        regular_night_pay=regular_night_pay,
        night_overtime_pay=night_overtime_pay,
        total_premium_pay=total,
        breakdown=PremiumPayBreakdown(
            regular_overtime_hours=regular_overtime_hours,
            regular_night_hours=regular_night_hours,
            overlap_hours=overlap_hours,
            rates=PremiumRates(
                overtime=OVERTIME_RATE,
                night_diff=night_diff_rate,
                night_overtime=NIGHT_OVERTIME_RATE,
            ),
        ),
    )
