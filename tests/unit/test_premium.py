"""Unit tests for overtime and night differential pay."""

import pytest

from netpay.sdk.premium import (
    NIGHT_OVERTIME_RATE,
    OVERTIME_RATE,
    compute_hourly_rate,
    compute_premium_pay,
    get_working_days,
)


class TestHourlyRate:

    @pytest.mark.parametrize("schedule,days", [
        ("mon-fri", 22),
        ("mon-sat", 26),
        ("mon-sun", 30),
    ])
    def test_working_days(self, schedule, days):
        assert get_working_days(schedule) == days

    def test_hourly_rate_by_schedule(self):
        assert compute_hourly_rate(22000, "mon-fri") == pytest.approx(125)
        assert compute_hourly_rate(20800, "mon-sat") == pytest.approx(100)
        assert compute_hourly_rate(24000, "mon-sun") == pytest.approx(100)

    def test_unknown_schedule_falls_back_to_weekdays(self):
        assert compute_hourly_rate(22000, "four-day") == pytest.approx(125)

    def test_invalid_salary(self):
        assert compute_hourly_rate(-22000) == 0


class TestPremiumPay:

    def test_overtime_only(self):
        result = compute_premium_pay(100, 8, 0, "private")

        assert result.regular_overtime_pay == pytest.approx(8 * 100 * 1.25)
        assert result.regular_night_pay == 0
        assert result.night_overtime_pay == 0
        assert result.total_premium_pay == pytest.approx(1000)

    def test_private_night_differential(self):
        result = compute_premium_pay(100, 0, 5, "private")

        assert result.regular_night_pay == pytest.approx(550)
        assert result.breakdown.rates.night_diff == pytest.approx(1.10)

    def test_public_night_differential(self):
        result = compute_premium_pay(100, 0, 5, "public")

        assert result.regular_night_pay == pytest.approx(600)
        assert result.breakdown.rates.night_diff == pytest.approx(1.20)

    def test_public_sector_gets_overtime(self):
        result = compute_premium_pay(100, 10, 0, "public")

        assert result.regular_overtime_pay == pytest.approx(1250)

    def test_overlap_paid_once_at_night_overtime_rate(self):
        """10 OT hours, 4 night hours: 4 overlap at 1.375, 6 OT at 1.25."""
        result = compute_premium_pay(100, 10, 4, "private")

        assert result.breakdown.overlap_hours == 4
        assert result.breakdown.regular_overtime_hours == 6
        assert result.breakdown.regular_night_hours == 0
        assert result.night_overtime_pay == pytest.approx(550)
        assert result.regular_overtime_pay == pytest.approx(750)
        assert result.total_premium_pay == pytest.approx(1300)

    def test_overlap_not_stacked(self):
        """Overlapping hours cost less than OT + ND paid separately."""
        result = compute_premium_pay(100, 4, 4, "private")
        stacked = 4 * 100 * OVERTIME_RATE + 4 * 100 * 1.10

        assert result.total_premium_pay == pytest.approx(4 * 100 * NIGHT_OVERTIME_RATE)
        assert result.total_premium_pay < stacked

    @pytest.mark.parametrize("ot,nd", [
        (0, 0), (10, 0), (0, 10), (10, 4), (4, 10), (7.5, 7.5), (40, 12.25),
    ])
    def test_hours_are_conserved(self, ot, nd):
        breakdown = compute_premium_pay(150, ot, nd, "private").breakdown

        assert breakdown.overlap_hours == min(ot, nd)
        assert breakdown.regular_overtime_hours + breakdown.overlap_hours == pytest.approx(ot)
        assert breakdown.regular_night_hours + breakdown.overlap_hours == pytest.approx(nd)

    def test_total_is_sum_of_components(self):
        result = compute_premium_pay(137.5, 12, 9, "public")

        assert result.total_premium_pay == pytest.approx(
            result.regular_overtime_pay + result.regular_night_pay + result.night_overtime_pay
        )

    def test_self_employed_gets_nothing(self):
        result = compute_premium_pay(100, 20, 10, "self-employed")

        assert result.total_premium_pay == 0
        assert result.regular_overtime_pay == 0
        assert result.breakdown.overlap_hours == 0
        assert result.breakdown.rates.overtime == 0
        assert result.breakdown.rates.night_diff == 0

    def test_negative_hours_treated_as_zero(self):
        result = compute_premium_pay(100, -5, float("nan"), "private")

        assert result.total_premium_pay == 0
