"""netpay SDK - Core take-home pay computation."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_profile_path,
    load_profile,
    save_profile,
    get_profile_value,
    set_profile_value,
    load_default_inputs,
    get_export_path,
    ProfileNotFoundError,
    ProfileValidationError,
)

from .schemas import (
    TaxInputs,
    TaxResult,
    Deductions,
    DeductionLine,
    PremiumPayResult,
    SocialSecurityResult,
    PeriodView,
    SummaryDocument,
    SECTORS,
    WORK_SCHEDULES,
    PAY_PERIODS,
)

from .contributions import (
    compute_sss,
    compute_gsis,
    compute_philhealth,
    compute_pagibig,
)

from .premium import (
    compute_hourly_rate,
    compute_premium_pay,
    WORKING_DAYS,
)

from .taxes import (
    compute_withholding_tax,
    compute_annual_withholding_tax,
    TAX_BRACKETS,
)

from .summary import (
    compute_tax_summary,
    compute_taxable_allowance,
    filter_deductions,
    to_period,
    result_to_dict,
    DE_MINIMIS_MONTHLY_LIMIT,
)

from .calculator import SalaryCalculator

from .export import (
    build_summary_document,
    export_summary,
    render_text,
    render_json,
    ExportValidationError,
)

from .formatting import (
    parse_amount,
    format_amount,
    format_currency,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "get_profile_value",
    "set_profile_value",
    "load_default_inputs",
    "get_export_path",
    "ProfileNotFoundError",
    "ProfileValidationError",
    # Schemas
    "TaxInputs",
    "TaxResult",
    "Deductions",
    "DeductionLine",
    "PremiumPayResult",
    "SocialSecurityResult",
    "PeriodView",
    "SummaryDocument",
    "SECTORS",
    "WORK_SCHEDULES",
    "PAY_PERIODS",
    # Contributions
    "compute_sss",
    "compute_gsis",
    "compute_philhealth",
    "compute_pagibig",
    # Premium pay
    "compute_hourly_rate",
    "compute_premium_pay",
    "WORKING_DAYS",
    # Withholding tax
    "compute_withholding_tax",
    "compute_annual_withholding_tax",
    "TAX_BRACKETS",
    # Summary
    "compute_tax_summary",
    "compute_taxable_allowance",
    "filter_deductions",
    "to_period",
    "result_to_dict",
    "DE_MINIMIS_MONTHLY_LIMIT",
    "SalaryCalculator",
    # Export
    "build_summary_document",
    "export_summary",
    "render_text",
    "render_json",
    "ExportValidationError",
    # Formatting
    "parse_amount",
    "format_amount",
    "format_currency",
]
