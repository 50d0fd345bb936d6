"""Interactive calculator state.

SalaryCalculator holds the current TaxInputs and replaces it on every
setter call. Reading .results recomputes a fresh TaxResult from whatever
inputs are current, so a result can never reflect a half-applied edit.
"""

from typing import Any, Optional

from .schemas import SELF_EMPLOYED, TaxInputs, TaxResult
from .summary import compute_tax_summary, to_period


class SalaryCalculator:
    """Holds inputs, exposes setters, recomputes on demand.

    Example:
        calc = SalaryCalculator()
        calc.set_salary("25,000")
        calc.set_sector("public")
        calc.results.take_home_pay
    """

    def __init__(self, inputs: Optional[TaxInputs] = None, period: str = "monthly"):
        self.inputs = inputs or TaxInputs()
        self.period = period

    @property
    def results(self) -> TaxResult:
        return compute_tax_summary(self.inputs)

    def view(self, period: Optional[str] = None):
        """Current results scaled to a display period."""
        return to_period(self.results, period or self.period)

    def update(self, **changes: Any) -> TaxResult:
        """Apply several input changes at once and return the new result."""
        self.inputs = self.inputs.replace(**changes)
        return self.results

    def set_salary(self, value: Any) -> None:
        self.inputs = self.inputs.replace(salary=value)

    def set_allowance(self, value: Any) -> None:
        self.inputs = self.inputs.replace(allowance=value)

    def set_sector(self, sector: str) -> None:
        # switching to self-employed clears premium hours
        changes = {"sector": sector}
        if sector == SELF_EMPLOYED:
            changes.update(overtime_hours=0, night_differential_hours=0)
        self.inputs = self.inputs.replace(**changes)

    def set_overtime_hours(self, value: Any) -> None:
        self.inputs = self.inputs.replace(overtime_hours=value)

    def set_night_differential_hours(self, value: Any) -> None:
        self.inputs = self.inputs.replace(night_differential_hours=value)

    def set_work_schedule(self, schedule: str) -> None:
        self.inputs = self.inputs.replace(work_schedule=schedule)

    def set_period(self, period: str) -> None:
        self.period = period
