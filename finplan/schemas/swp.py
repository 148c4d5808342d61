"""Data contracts for systematic withdrawal (SWP) simulations."""

from typing import Optional, Tuple

from pydantic import Field

from finplan.schemas.common import CalculationStatus, ParametersModel, ResultModel


class SwpParameters(ParametersModel):
    """Inputs required to project a withdrawal plan."""

    initial_corpus: float = Field(..., ge=1000, description="Corpus at month 0.")
    monthly_withdrawal: float = Field(
        ...,
        ge=500,
        description="Withdrawal taken at the end of each month in the first year.",
    )
    inflation_percentage: float = Field(
        0.0,
        ge=0,
        description="Yearly increase of the monthly withdrawal, in percent.",
    )
    expected_return: float = Field(..., gt=0, description="Annual return in percent.")
    years: float = Field(
        ...,
        ge=1,
        le=100,
        description="Withdrawal horizon; fractional years are rounded to whole months.",
    )


class SwpMonthRecord(ResultModel):
    month: int = Field(..., ge=1)
    balance: float = Field(..., ge=0)
    withdrawal: float
    total_withdrawal: float
    returns: float
    total_returns: float
    capped: bool = False


class SwpYearSummary(ResultModel):
    year: int = Field(..., ge=1)
    monthly_withdrawal: float
    yearly_withdrawal: float
    yearly_returns: float
    balance: float = Field(..., ge=0)
    partial: bool = False


class SwpResult(ResultModel):
    parameters: SwpParameters
    final_balance: float = Field(..., ge=0)
    total_withdrawal: float
    returns_accumulated: float
    corpus_exhausted: bool
    exhaustion_month: Optional[int] = None
    monthly: Tuple[SwpMonthRecord, ...]
    yearly: Tuple[SwpYearSummary, ...]
    status: CalculationStatus
