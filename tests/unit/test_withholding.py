"""Unit tests for the TRAIN withholding tax table."""

import pytest

from netpay.sdk.taxes import (
    TAX_BRACKETS,
    compute_annual_withholding_tax,
    compute_withholding_tax,
    find_bracket,
)

THRESHOLDS = [250_000, 400_000, 800_000, 2_000_000, 8_000_000]


class TestBracketTable:

    def test_brackets_are_contiguous(self):
        for prev, bracket in zip(TAX_BRACKETS, TAX_BRACKETS[1:]):
            assert bracket[0] == prev[1]

    def test_base_tax_accumulates_lower_brackets(self):
        """Each base equals the full tax of every bracket below it."""
        for prev, bracket in zip(TAX_BRACKETS, TAX_BRACKETS[1:]):
            lower, upper, rate, base = prev
            assert bracket[3] == pytest.approx(base + (upper - lower) * rate)

    def test_top_bracket_starts_at_eight_million(self):
        lower, upper, rate, base = find_bracket(8_000_000)

        assert lower == 8_000_000
        assert rate == 0.35
        assert base == 2_202_500

    def test_above_top_bracket(self):
        assert find_bracket(50_000_000)[2] == 0.35


class TestComputeWithholdingTax:

    @pytest.mark.parametrize("annual,expected_monthly", [
        (0, 0),
        (120_000, 0),
        (250_000, 0),
        (275_100, 313.75),                      # (275,100 - 250,000) x 15% / 12
        (400_000, 1_875),                       # 22,500 / 12
        (600_000, (22_500 + 40_000) / 12),
        (800_000, 102_500 / 12),
        (2_000_000, 402_500 / 12),
        (8_000_000, 2_202_500 / 12),
        (10_000_000, (2_202_500 + 700_000) / 12),
    ])
    def test_monthly_tax(self, annual, expected_monthly):
        assert compute_withholding_tax(annual) == pytest.approx(expected_monthly)

    def test_returns_one_twelfth_of_annual(self):
        assert compute_withholding_tax(1_234_567) == pytest.approx(
            compute_annual_withholding_tax(1_234_567) / 12
        )

    @pytest.mark.parametrize("threshold", THRESHOLDS)
    def test_continuous_at_threshold(self, threshold):
        """No jump when income crosses a bracket boundary."""
        below = compute_annual_withholding_tax(threshold - 0.01)
        at = compute_annual_withholding_tax(threshold)
        above = compute_annual_withholding_tax(threshold + 0.01)

        assert at - below == pytest.approx(0, abs=0.01)
        assert above - at == pytest.approx(0, abs=0.01)
        assert below <= at <= above

    def test_non_decreasing(self):
        incomes = [i * 12_500 for i in range(0, 900)]
        taxes = [compute_annual_withholding_tax(i) for i in incomes]

        assert taxes == sorted(taxes)

    @pytest.mark.parametrize("income", [-50_000, float("nan"), None])
    def test_invalid_income_is_zero(self, income):
        assert compute_withholding_tax(income) == 0
