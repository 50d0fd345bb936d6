"""Unit tests for summary document export."""

import json
from datetime import datetime

import pytest

from netpay.sdk.export import (
    ExportValidationError,
    build_summary_document,
    export_summary,
    render_json,
    render_text,
    validate_for_export,
)
from netpay.sdk.schemas import TaxInputs
from netpay.sdk.summary import compute_tax_summary

GENERATED_AT = datetime(2026, 1, 15, 9, 30)


def make_result(**kwargs):
    kwargs.setdefault("salary", 25000)
    return compute_tax_summary(TaxInputs(**kwargs))


def section_rows(document, title):
    section = document.section(title)
    assert section is not None, f"missing section {title}"
    return {row.label: row.amount for row in section.rows}


class TestValidation:

    def test_none(self):
        with pytest.raises(ExportValidationError, match="no result"):
            validate_for_export(None)

    def test_wrong_type(self):
        with pytest.raises(ExportValidationError, match="Expected a TaxResult"):
            validate_for_export({"take_home_pay": 100})

    def test_zero_salary(self):
        with pytest.raises(ExportValidationError, match="monthly basic salary"):
            validate_for_export(make_result(salary=0, allowance=3000))

    def test_unknown_format(self):
        with pytest.raises(ExportValidationError, match="Unknown export format"):
            validate_for_export(make_result(), fmt="pdf")

    def test_valid(self):
        validate_for_export(make_result(), fmt="json")


class TestBuildSummaryDocument:

    def test_basic_sections(self):
        document = build_summary_document(make_result(), generated_at=GENERATED_AT)

        titles = [s.title for s in document.sections]
        assert titles == [
            "Employment Information",
            "Monthly Deductions",
            "Monthly Summary",
            "Annual Summary",
        ]
        assert document.generated_at == GENERATED_AT
        assert document.sector_name == "Private Employee"

    def test_monthly_deductions_match_visible_lines(self):
        result = make_result(sector="public")
        rows = section_rows(build_summary_document(result), "Monthly Deductions")

        assert "GSIS Contribution" in rows
        assert "SSS Contribution" not in rows
        assert rows["GSIS Contribution"] == pytest.approx(2250)

    def test_annual_summary_is_monthly_times_twelve(self):
        result = make_result()
        rows = section_rows(build_summary_document(result), "Annual Summary")

        assert rows["Annual Gross Income"] == pytest.approx(300000)
        assert rows["Annual Total Deductions"] == pytest.approx(2388.75 * 12)
        assert rows["Annual Take Home Pay"] == pytest.approx(22611.25 * 12)

    def test_thirteenth_month_and_effective_rate(self):
        document = build_summary_document(make_result())

        assert document.section("Annual Summary").footnote == "Estimated 13th Month Pay: ₱25,000.00"
        assert document.section("Monthly Summary").footnote.startswith("Effective Deduction Rate: 9.5")

    def test_income_breakdown_with_premium_and_allowance(self):
        result = make_result(salary=22000, overtime_hours=10, night_differential_hours=4, allowance=9000)
        rows = section_rows(build_summary_document(result), "Income Breakdown")

        assert rows["Overtime Pay (10 hrs)"] == pytest.approx(937.5)
        assert rows["Night Differential Pay (4 hrs)"] == pytest.approx(0)
        assert rows["Night Overtime Premium"] == pytest.approx(687.5)
        assert rows["De Minimis Allowance (Taxable)"] == pytest.approx(9000)

    def test_allowance_within_ceiling_is_non_taxable(self):
        rows = section_rows(build_summary_document(make_result(allowance=5000)), "Income Breakdown")

        assert "De Minimis Allowance (Non-Taxable)" in rows

    def test_self_employed_has_no_premium_rows(self):
        result = make_result(sector="self-employed", overtime_hours=10)
        document = build_summary_document(result)

        assert document.section("Income Breakdown") is None
        assert document.sector_name == "Self-Employed"

    def test_prepared_for(self):
        document = build_summary_document(make_result(), prepared_for="Juan dela Cruz")
        assert "Prepared for Juan dela Cruz" in render_text(document)


class TestRender:

    def test_text(self):
        text = render_text(build_summary_document(make_result(), generated_at=GENERATED_AT))

        assert "Income Tax Summary" in text
        assert "Generated on January 15, 2026" in text
        assert "Monthly Take Home Pay" in text
        assert "₱22,611.25" in text
        assert "Actual deductions may vary" in text

    def test_json(self):
        data = json.loads(render_json(build_summary_document(make_result(), generated_at=GENERATED_AT)))

        assert data["sector"] == "private"
        assert data["generated_at"].startswith("2026-01-15T09:30")
        assert data["sections"][0]["rows"][0] == {
            "label": "Monthly Basic Salary", "amount": 25000.0, "note": None,
        }


class TestExportSummary:

    def test_writes_text_file(self, tmp_path):
        path = export_summary(make_result(), tmp_path / "out", generated_at=GENERATED_AT)

        assert path == tmp_path / "out" / "netpay-2026-01-15.txt"
        assert "Income Tax Summary" in path.read_text(encoding="utf-8")

    def test_writes_json_file(self, tmp_path):
        path = export_summary(make_result(), tmp_path, fmt="json", generated_at=GENERATED_AT)

        assert path.name == "netpay-2026-01-15.json"
        assert json.loads(path.read_text(encoding="utf-8"))["title"] == "Income Tax Summary"

    def test_nothing_written_on_validation_error(self, tmp_path):
        with pytest.raises(ExportValidationError):
            export_summary(make_result(salary=0), tmp_path / "out")

        assert not (tmp_path / "out").exists()

    def test_bad_format_fails_before_writing(self, tmp_path):
        with pytest.raises(ExportValidationError):
            export_summary(make_result(), tmp_path / "out", fmt="pdf")

        assert not (tmp_path / "out").exists()
