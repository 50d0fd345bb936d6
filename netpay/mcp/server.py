"""netpay MCP Server - FastMCP implementation for take-home pay tools."""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field, ValidationError

from netpay.sdk import PAY_PERIODS, TAX_BRACKETS, TaxInputs, compute_tax_summary, result_to_dict

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("netpay")


# --- Tools ---

@mcp.tool()
async def compute_take_home(
    salary: float = Field(description="Monthly basic salary in pesos"),
    allowance: float = Field(default=0, description="Monthly allowance; the first 7,500 is de minimis (non-taxable)"),
    sector: str = Field(default="private", description="'private', 'public' or 'self-employed'"),
    overtime_hours: float = Field(default=0, description="Overtime hours per month"),
    night_differential_hours: float = Field(default=0, description="Night differential hours per month"),
    work_schedule: str = Field(default="mon-fri", description="'mon-fri', 'mon-sat' or 'mon-sun'"),
    period: str = Field(default="monthly", description="Display period: 'monthly', 'biweekly' or 'annual'"),
) -> dict[str, Any]:
    """Compute withholding tax, SSS/GSIS, PhilHealth, Pag-IBIG, premium pay and take-home pay. Figures are monthly; 'period' adds a scaled view."""
    try:
        if period not in PAY_PERIODS:
            return {"error": f"Unknown period '{period}'. Use one of: {', '.join(PAY_PERIODS)}"}

        inputs = TaxInputs(
            salary=salary,
            allowance=allowance,
            sector=sector,
            overtime_hours=overtime_hours,
            night_differential_hours=night_differential_hours,
            work_schedule=work_schedule,
        )
        return result_to_dict(compute_tax_summary(inputs), period)

    except ValidationError as e:
        return {"error": f"Invalid input: {e}"}
    except Exception as e:
        logger.error(f"Error computing take-home pay: {e}")
        return {"error": str(e)}


@mcp.tool()
async def get_withholding_brackets() -> dict[str, Any]:
    """Get the annual withholding tax brackets (TRAIN law, 2023 onwards)."""
    brackets = []
    for lower, upper, rate, base in TAX_BRACKETS:
        brackets.append({
            "over": lower,
            "not_over": None if upper == float("inf") else upper,
            "rate": rate,
            "base_tax": base,
        })
    return {"brackets": brackets, "basis": "annual"}


# --- Server Entry Point ---

def run_server():
    """Run the MCP server in stdio mode."""
    mcp.run(transport="stdio")


if __name__ == "__main__":
    run_server()
