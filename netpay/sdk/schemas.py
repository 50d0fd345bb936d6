"""Pydantic schemas for netpay inputs, results and config files.

Engine inputs are lenient: numeric fields are normalized (NaN, negatives and
garbage become 0) because the calculator is re-evaluated on every edit.
Config and export schemas use extra='forbid' so typos in profile.yaml cause
clear errors rather than silent ignoring.
"""

from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .formatting import normalize_amount

Sector = Literal["private", "public", "self-employed"]
WorkSchedule = Literal["mon-fri", "mon-sat", "mon-sun"]
PayPeriod = Literal["monthly", "biweekly", "annual"]

SECTORS = ("private", "public", "self-employed")
WORK_SCHEDULES = ("mon-fri", "mon-sat", "mon-sun")
PAY_PERIODS = ("monthly", "biweekly", "annual")

SELF_EMPLOYED = "self-employed"

# Spellings accepted for the self-employed sector
_SECTOR_ALIASES = {
    "selfemployed": SELF_EMPLOYED,
    "self_employed": SELF_EMPLOYED,
    "self employed": SELF_EMPLOYED,
    "government": "public",
}

_AMOUNT_FIELDS = ("salary", "allowance", "overtime_hours", "night_differential_hours")


def normalize_sector(value: Any) -> Any:
    """Map accepted sector spellings onto the canonical literal."""
    if not isinstance(value, str):
        return value
    key = value.strip().lower()
    return _SECTOR_ALIASES.get(key, key)


# =============================================================================
# Engine Inputs
# =============================================================================


class TaxInputs(BaseModel):
    """Caller-supplied inputs for one computation. Immutable.

    Self-employed persons get no premium pay, so their overtime and night
    differential hours are forced to zero on construction.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    salary: float = Field(default=0, ge=0, description="Monthly basic pay")
    allowance: float = Field(
        default=0, ge=0,
        description="Monthly non-wage allowance (may exceed the de minimis ceiling)",
    )
    sector: Sector = Field(default="private", description="Employment sector")
    overtime_hours: float = Field(default=0, ge=0, description="Overtime hours claimed per month")
    night_differential_hours: float = Field(
        default=0, ge=0, description="Night differential hours claimed per month"
    )
    work_schedule: WorkSchedule = Field(default="mon-fri", description="Working days per week")

    @model_validator(mode="before")
    @classmethod
    def drop_self_employed_hours(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "sector" in data:
            data["sector"] = normalize_sector(data["sector"])
        if data.get("sector") == SELF_EMPLOYED:
            data["overtime_hours"] = 0
            data["night_differential_hours"] = 0
        return data

    @field_validator(*_AMOUNT_FIELDS, mode="before")
    @classmethod
    def clamp_amount(cls, v: Any) -> float:
        """Normalize NaN, negative and non-numeric values to zero."""
        return normalize_amount(v)

    @property
    def is_self_employed(self) -> bool:
        return self.sector == SELF_EMPLOYED

    def replace(self, **changes: Any) -> "TaxInputs":
        """Return a new, re-validated TaxInputs with the given fields changed."""
        return TaxInputs(**{**self.model_dump(), **changes})


# =============================================================================
# Engine Results
# =============================================================================


class SocialSecurityResult(BaseModel):
    """SSS contribution split into the regular SS base and the MPF share."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sss: float = Field(default=0, ge=0, description="Regular social security contribution")
    mpf: float = Field(default=0, ge=0, description="Mandatory Provident Fund contribution")

    @property
    def total(self) -> float:
        return self.sss + self.mpf


class PremiumRates(BaseModel):
    """Multipliers applied to the hourly rate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    overtime: float = 0
    night_diff: float = 0
    night_overtime: float = 0


class PremiumPayBreakdown(BaseModel):
    """Hours each premium pay component was computed from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    regular_overtime_hours: float = 0
    regular_night_hours: float = 0
    overlap_hours: float = 0
    rates: PremiumRates = Field(default_factory=PremiumRates)


class PremiumPayResult(BaseModel):
    """Overtime and night differential pay, split into non-overlapping parts."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    regular_overtime_pay: float = 0
    regular_night_pay: float = 0
    night_overtime_pay: float = 0
    total_premium_pay: float = 0
    breakdown: PremiumPayBreakdown = Field(default_factory=PremiumPayBreakdown)


class Deductions(BaseModel):
    """Monthly deduction amounts.

    The contribution program that does not apply to the sector (GSIS for
    private and self-employed, SSS for public) is zero and is left out of
    total.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    withholding_tax: float = 0
    gsis: float = 0
    sss: float = 0
    philhealth: float = 0
    pagibig: float = 0
    total: float = 0


class DeductionLine(BaseModel):
    """A single deduction line item shown to the user."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    key: str = Field(..., description="Deduction field name (e.g., 'philhealth')")
    label: str = Field(..., description="Display label")
    amount: float = Field(..., description="Monthly amount")


class TaxResult(BaseModel):
    """Result of compute_tax_summary(). Always monthly figures."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    inputs: TaxInputs
    take_home_pay: float
    gross_income: float = Field(
        ..., description="Salary + full allowance + premium pay (not the taxable base)"
    )
    taxable_allowance: float = Field(default=0, description="Allowance above the de minimis ceiling")
    deductions: Deductions
    visible_deductions: List[DeductionLine]
    total_deductions: float
    premium_pay: PremiumPayResult
    effective_rate: float = Field(..., description="Total deductions as a percent of gross income")


class PeriodView(BaseModel):
    """A TaxResult scaled to a display period."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    period: PayPeriod
    multiplier: float
    take_home_pay: float
    gross_income: float
    total_deductions: float
    total_premium_pay: float
    deductions: List[DeductionLine]
    effective_rate: float


# =============================================================================
# Config Schemas - profile.yaml
# =============================================================================


class ProfileDefaults(BaseModel):
    """Default inputs stored under 'defaults' in profile.yaml."""

    model_config = ConfigDict(extra="forbid")

    salary: Optional[float] = Field(default=None, ge=0)
    allowance: Optional[float] = Field(default=None, ge=0)
    sector: Optional[Sector] = None
    work_schedule: Optional[WorkSchedule] = None
    overtime_hours: Optional[float] = Field(default=None, ge=0)
    night_differential_hours: Optional[float] = Field(default=None, ge=0)

    @field_validator("sector", mode="before")
    @classmethod
    def canonical_sector(cls, v: Any) -> Any:
        return normalize_sector(v)


class Profile(BaseModel):
    """Complete profile.yaml contents."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, description="Label shown on exported summaries")
    defaults: ProfileDefaults = Field(default_factory=ProfileDefaults)


# =============================================================================
# Export Schemas
# =============================================================================


class SummaryRow(BaseModel):
    """A label/value pair in an exported summary section."""

    model_config = ConfigDict(extra="forbid")

    label: str
    amount: float
    note: Optional[str] = None


class SummarySection(BaseModel):
    """A titled group of rows."""

    model_config = ConfigDict(extra="forbid")

    title: str
    rows: List[SummaryRow] = Field(default_factory=list)
    footnote: Optional[str] = None


class SummaryDocument(BaseModel):
    """Static tax summary built from a TaxResult for export."""

    model_config = ConfigDict(extra="forbid")

    title: str = "Income Tax Summary"
    generated_at: datetime
    prepared_for: Optional[str] = None
    sector: Sector
    sector_name: str
    sections: List[SummarySection]
    disclaimer: str

    def section(self, title: str) -> Optional[SummarySection]:
        """Find a section by title."""
        for section in self.sections:
            if section.title == title:
                return section
        return None
