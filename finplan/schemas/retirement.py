"""Data contracts for retirement planning."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import Field, ValidationInfo, field_validator

from finplan.schemas.common import (
    CalculationStatus,
    ParametersModel,
    Recommendation,
    ResultModel,
)


class RetirementParameters(ParametersModel):
    """Inputs for the accumulation and sustainability projection.

    Percentages are expressed as numbers (``8`` means 8%). Ages are whole
    years; ``lifestyle_factor`` is the share of today's monthly expenses
    still needed after retiring.
    """

    current_age: int = Field(..., ge=18, le=70)
    retirement_age: int = Field(..., ge=30, le=80)
    current_savings: float = Field(..., ge=0)
    monthly_savings: float = Field(..., ge=500)
    salary_growth: float = Field(..., ge=0)
    expected_return: float = Field(..., gt=0)
    current_expenses: float = Field(..., ge=1000, description="Monthly expenses today.")
    lifestyle_factor: float = Field(..., gt=0)
    inflation_rate: float = Field(..., ge=0)
    # keep last: its check reads retirement_age from the already validated fields
    life_expectancy: int = Field(..., ge=75, le=100)

    @field_validator("retirement_age")
    @classmethod
    def _after_current_age(cls, value: int, info: ValidationInfo) -> int:
        current_age = info.data.get("current_age")
        if current_age is not None and value <= current_age:
            raise ValueError("Retirement age must be greater than current age")
        return value

    @field_validator("life_expectancy")
    @classmethod
    def _after_retirement_age(cls, value: int, info: ValidationInfo) -> int:
        retirement_age = info.data.get("retirement_age")
        if retirement_age is not None and value <= retirement_age:
            raise ValueError("Life expectancy must be greater than retirement age")
        return value


class CorpusGrowthEntry(ResultModel):
    year: int = Field(..., ge=1)
    age: int
    corpus: float
    annual_savings: float
    monthly_savings: float


class SustainabilityEntry(ResultModel):
    year: int = Field(..., ge=1)
    age: int
    corpus: float = Field(..., ge=0)
    monthly_expenses: float
    annual_expenses: float
    corpus_remaining_pct: float
    exhausted: bool = False


class ReadinessBand(ResultModel):
    label: str
    summary: str


class RetirementResult(ResultModel):
    parameters: RetirementParameters
    years_to_retirement: int
    retirement_years: int
    corpus_at_retirement: float
    future_monthly_expenses: float
    sustainable_monthly_income: float
    monthly_surplus_deficit: float
    readiness_score: float = Field(..., ge=0, le=100)
    readiness: ReadinessBand
    corpus_exhausted_at_age: Optional[int] = None
    corpus_growth: Tuple[CorpusGrowthEntry, ...]
    sustainability: Tuple[SustainabilityEntry, ...]
    recommendations: Tuple[Recommendation, ...]
    status: CalculationStatus
