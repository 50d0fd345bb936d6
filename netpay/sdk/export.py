"""Static tax summary export.

Builds a SummaryDocument from a computed TaxResult and renders it as plain
text (via rich) or JSON. No computation happens here beyond scaling monthly
figures by 12 for the annual section.

Validation runs before anything is built or written: exporting a missing or
incomplete result raises ExportValidationError instead of producing a
partial document.
"""

import io
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from .formatting import format_currency, format_percent
from .schemas import SummaryDocument, SummaryRow, SummarySection, TaxResult
from .summary import DE_MINIMIS_MONTHLY_LIMIT
from .taxes import MONTHS_PER_YEAR

logger = logging.getLogger(__name__)

EXPORT_FORMATS = {
    "text": "txt",
    "json": "json",
}

SECTOR_NAMES = {
    "private": "Private Employee",
    "public": "Government Employee",
    "self-employed": "Self-Employed",
}

DISCLAIMER = (
    "This tax summary is an estimate based on current Philippine tax "
    "regulations. Actual deductions may vary."
)


class ExportValidationError(Exception):
    """Raised when a result cannot be exported."""
    pass


def validate_for_export(result: TaxResult, fmt: str = "text") -> None:
    """Check that a result is complete enough to export.

    Raises:
        ExportValidationError: describing the first problem found
    """
    if result is None:
        raise ExportValidationError("Nothing to export: no result was computed.")
    if not isinstance(result, TaxResult):
        raise ExportValidationError(
            f"Expected a TaxResult, got {type(result).__name__}. "
            f"Compute one with compute_tax_summary() first."
        )
    if result.inputs.salary <= 0:
        raise ExportValidationError(
            "Cannot export a summary without a monthly basic salary. Set a salary greater than 0."
        )
    if not result.visible_deductions:
        raise ExportValidationError("Result has no deduction line items.")
    if fmt not in EXPORT_FORMATS:
        raise ExportValidationError(
            f"Unknown export format '{fmt}'. Use one of: {', '.join(EXPORT_FORMATS)}"
        )


def _income_breakdown(result: TaxResult) -> Optional[SummarySection]:
    """Income beyond basic salary, or None when there is none."""
    inputs = result.inputs
    premium = result.premium_pay
    rows = []

    if inputs.overtime_hours > 0:
        rows.append(SummaryRow(
            label=f"Overtime Pay ({inputs.overtime_hours:g} hrs)",
            amount=premium.regular_overtime_pay,
        ))
    if inputs.night_differential_hours > 0:
        rows.append(SummaryRow(
            label=f"Night Differential Pay ({inputs.night_differential_hours:g} hrs)",
            amount=premium.regular_night_pay,
        ))
    if premium.night_overtime_pay > 0:
        rows.append(SummaryRow(label="Night Overtime Premium", amount=premium.night_overtime_pay))
    if inputs.allowance > 0:
        taxable = inputs.allowance > DE_MINIMIS_MONTHLY_LIMIT
        rows.append(SummaryRow(
            label=f"De Minimis Allowance ({'Taxable' if taxable else 'Non-Taxable'})",
            amount=inputs.allowance,
            note=f"{format_currency(result.taxable_allowance)} taxable" if taxable else None,
        ))

    if not rows:
        return None
    return SummarySection(title="Income Breakdown", rows=rows)


def build_summary_document(
    result: TaxResult,
    generated_at: Optional[datetime] = None,
    prepared_for: Optional[str] = None,
) -> SummaryDocument:
    """Build the exportable summary for a computed result.

    Args:
        result: Monthly TaxResult from compute_tax_summary()
        generated_at: Timestamp printed on the document (default: now)
        prepared_for: Optional name printed under the title

    Raises:
        ExportValidationError: If the result is missing or incomplete
    """
    validate_for_export(result)
    generated_at = generated_at or datetime.now()
    inputs = result.inputs

    sections = [
        SummarySection(
            title="Employment Information",
            rows=[SummaryRow(label="Monthly Basic Salary", amount=inputs.salary)],
        ),
    ]

    breakdown = _income_breakdown(result)
    if breakdown:
        sections.append(breakdown)

    sections.append(SummarySection(
        title="Monthly Deductions",
        rows=[SummaryRow(label=line.label, amount=line.amount) for line in result.visible_deductions],
    ))
    sections.append(SummarySection(
        title="Monthly Summary",
        rows=[
            SummaryRow(label="Gross Monthly Income", amount=result.gross_income),
            SummaryRow(label="Total Monthly Deductions", amount=result.total_deductions),
            SummaryRow(label="Monthly Take Home Pay", amount=result.take_home_pay),
        ],
        footnote=f"Effective Deduction Rate: {format_percent(result.effective_rate)}",
    ))
    sections.append(SummarySection(
        title="Annual Summary",
        rows=[
            SummaryRow(label="Annual Gross Income", amount=result.gross_income * MONTHS_PER_YEAR),
            SummaryRow(label="Annual Total Deductions", amount=result.total_deductions * MONTHS_PER_YEAR),
            SummaryRow(label="Annual Take Home Pay", amount=result.take_home_pay * MONTHS_PER_YEAR),
        ],
        # 13th month pay is based on basic salary only
        footnote=f"Estimated 13th Month Pay: {format_currency(inputs.salary)}",
    ))

    logger.debug(f"summary document: {len(sections)} sections, generated {generated_at.isoformat()}")

    return SummaryDocument(
        generated_at=generated_at,
        prepared_for=prepared_for,
        sector=inputs.sector,
        sector_name=SECTOR_NAMES[inputs.sector],
        sections=sections,
        disclaimer=DISCLAIMER,
    )


def render_text(document: SummaryDocument, width: int = 72) -> str:
    """Render a summary document as plain text."""
    console = Console(record=True, width=width, file=io.StringIO(), color_system=None)

    console.print(document.title, style="bold")
    console.print(f"Generated on {document.generated_at:%B %d, %Y}")
    if document.prepared_for:
        console.print(f"Prepared for {document.prepared_for}")
    console.print(f"Employment Type: {document.sector_name}")

    for section in document.sections:
        table = Table(title=section.title, title_justify="left", box=box.SIMPLE, show_header=False, expand=True)
        table.add_column("label")
        table.add_column("amount", justify="right")
        for row in section.rows:
            label = f"{row.label} - {row.note}" if row.note else row.label
            table.add_row(label, format_currency(row.amount))
        console.print(table)
        if section.footnote:
            console.print(section.footnote, style="italic")

    console.print()
    console.print(document.disclaimer, style="dim")
    return console.export_text()


def render_json(document: SummaryDocument) -> str:
    """Render a summary document as JSON."""
    return json.dumps(document.model_dump(mode="json"), indent=2, ensure_ascii=False)


def get_export_filename(document: SummaryDocument, fmt: str = "text") -> str:
    """File name for an export: netpay-YYYY-MM-DD.<ext>."""
    return f"netpay-{document.generated_at:%Y-%m-%d}.{EXPORT_FORMATS[fmt]}"


def export_summary(
    result: TaxResult,
    output_dir: Path,
    fmt: str = "text",
    generated_at: Optional[datetime] = None,
    prepared_for: Optional[str] = None,
) -> Path:
    """Validate, build, render and write a summary.

    Returns:
        Path to the written file

    Raises:
        ExportValidationError: Before anything is written, if the result
            or format is invalid
    """
    validate_for_export(result, fmt)
    document = build_summary_document(result, generated_at=generated_at, prepared_for=prepared_for)
    content = render_json(document) if fmt == "json" else render_text(document)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / get_export_filename(document, fmt)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.debug(f"wrote {fmt} summary to {output_path}")
    return output_path
