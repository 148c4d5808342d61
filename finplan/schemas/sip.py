"""Data contracts for systematic investment (SIP) simulations."""

from typing import Tuple

from pydantic import Field

from finplan.schemas.common import CalculationStatus, ParametersModel, ResultModel


class SipParameters(ParametersModel):
    """Inputs required to project a SIP corpus."""

    initial_corpus: float = Field(0.0, ge=0, description="Lump sum invested at month 0.")
    monthly_contribution: float = Field(
        ...,
        ge=500,
        description="Contribution added at the end of each month in the first year.",
    )
    step_up_percentage: float = Field(
        0.0,
        ge=0,
        description="Yearly increase of the monthly contribution, in percent.",
    )
    expected_return: float = Field(..., gt=0, description="Annual return in percent.")
    years: float = Field(
        ...,
        ge=1,
        le=100,
        description="Investment horizon; fractional years are rounded to whole months.",
    )


class SipMonthRecord(ResultModel):
    month: int = Field(..., ge=1)
    contribution: float
    balance: float
    investment: float
    returns: float


class SipYearSummary(ResultModel):
    year: int = Field(..., ge=1)
    balance: float
    investment: float
    returns: float
    # contribution that applies to the following year (post step-up)
    monthly_contribution: float


class SipResult(ResultModel):
    parameters: SipParameters
    final_balance: float
    total_investment: float
    returns_accumulated: float
    monthly: Tuple[SipMonthRecord, ...]
    yearly: Tuple[SipYearSummary, ...]
    status: CalculationStatus
