"""Retirement planning: accumulation until retirement, then sustainability."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from finplan.core.recommendations import (
    WITHDRAWAL_RATE,
    PlanFigures,
    band_for,
    generate_recommendations,
    readiness_band,
)
from finplan.domain.validation import validate_parameters
from finplan.schemas.retirement import (
    CorpusGrowthEntry,
    RetirementParameters,
    RetirementResult,
    SustainabilityEntry,
)

logger = logging.getLogger(__name__)


def accumulate(params: RetirementParameters) -> List[CorpusGrowthEntry]:
    """
    Year-by-year corpus growth from current_age to retirement_age.

    Order of operations (per year):
      1) Apply the annual return to the running corpus.
      2) Add twelve months of the current monthly savings (no growth this year).
      3) Record the year keyed by the age reached.
      4) If more years remain, grow monthly savings with salary growth.
    """
    annual_rate = params.expected_return / 100
    years_to_retirement = params.retirement_age - params.current_age

    corpus = float(params.current_savings)
    monthly_savings = float(params.monthly_savings)

    rows: List[CorpusGrowthEntry] = []
    for year in range(1, years_to_retirement + 1):
        corpus *= 1 + annual_rate
        annual_savings = monthly_savings * 12
        corpus += annual_savings

        rows.append(
            CorpusGrowthEntry(
                year=year,
                age=params.current_age + year,
                corpus=corpus,
                annual_savings=annual_savings,
                monthly_savings=monthly_savings,
            )
        )

        if year < years_to_retirement:
            monthly_savings *= 1 + params.salary_growth / 100

    return rows


def sustain(
    params: RetirementParameters,
    corpus_at_retirement: float,
    monthly_expenses: float,
) -> List[SustainabilityEntry]:
    """
    Year-by-year drawdown from retirement_age to life_expectancy.

    Each year earns the annual return first, then pays twelve months of
    expenses (the corpus never goes below zero). Expenses rise with
    inflation every year. Nothing is recorded after the corpus runs out.
    """
    annual_rate = params.expected_return / 100
    retirement_years = params.life_expectancy - params.retirement_age

    corpus = corpus_at_retirement
    rows: List[SustainabilityEntry] = []
    for year in range(1, retirement_years + 1):
        corpus *= 1 + annual_rate
        annual_expenses = monthly_expenses * 12
        corpus = max(0.0, corpus - annual_expenses)

        rows.append(
            SustainabilityEntry(
                year=year,
                age=params.retirement_age + year,
                corpus=corpus,
                monthly_expenses=monthly_expenses,
                annual_expenses=annual_expenses,
                corpus_remaining_pct=(
                    corpus / corpus_at_retirement * 100 if corpus_at_retirement > 0 else 0.0
                ),
                exhausted=corpus <= 0,
            )
        )

        monthly_expenses *= 1 + params.inflation_rate / 100
        if corpus <= 0:
            break

    return rows


def readiness_figures(
    params: RetirementParameters,
    corpus_at_retirement: float,
) -> Tuple[float, float, float]:
    """Return (future monthly expenses, sustainable monthly income, readiness score)."""
    years_to_retirement = params.retirement_age - params.current_age
    future_monthly_expenses = (
        params.current_expenses
        * (1 + params.inflation_rate / 100) ** years_to_retirement
        * (params.lifestyle_factor / 100)
    )
    sustainable_monthly_income = corpus_at_retirement * WITHDRAWAL_RATE / 12

    if future_monthly_expenses <= 0:
        score = 100.0
    else:
        score = min(100.0, max(0.0, sustainable_monthly_income / future_monthly_expenses * 100))
    return future_monthly_expenses, sustainable_monthly_income, score


def plan_retirement(params: Union[RetirementParameters, Mapping[str, Any]]) -> RetirementResult:
    """Project savings to retirement and test how long the corpus lasts.

    Raises InvalidParameter when any input constraint is violated.
    """
    params = validate_parameters(RetirementParameters, params)

    years_to_retirement = params.retirement_age - params.current_age
    retirement_years = params.life_expectancy - params.retirement_age

    corpus_growth = accumulate(params)
    corpus_at_retirement = corpus_growth[-1].corpus

    future_monthly_expenses, sustainable_monthly_income, score = readiness_figures(
        params, corpus_at_retirement
    )
    sustainability = sustain(params, corpus_at_retirement, future_monthly_expenses)

    exhausted_at: Optional[int] = next(
        (row.age for row in sustainability if row.exhausted), None
    )

    recommendations = generate_recommendations(
        PlanFigures(
            parameters=params,
            corpus_at_retirement=corpus_at_retirement,
            future_monthly_expenses=future_monthly_expenses,
            sustainable_monthly_income=sustainable_monthly_income,
            readiness_score=score,
            years_to_retirement=years_to_retirement,
        )
    )

    logger.debug(
        "Retirement planned: corpus %.2f at age %d, readiness %.1f, exhausted at %s",
        corpus_at_retirement,
        params.retirement_age,
        score,
        exhausted_at,
    )

    return RetirementResult(
        parameters=params,
        years_to_retirement=years_to_retirement,
        retirement_years=retirement_years,
        corpus_at_retirement=corpus_at_retirement,
        future_monthly_expenses=future_monthly_expenses,
        sustainable_monthly_income=sustainable_monthly_income,
        monthly_surplus_deficit=sustainable_monthly_income - future_monthly_expenses,
        readiness_score=score,
        readiness=readiness_band(score),
        corpus_exhausted_at_age=exhausted_at,
        corpus_growth=tuple(corpus_growth),
        sustainability=tuple(sustainability),
        recommendations=tuple(recommendations),
        status=band_for(score).status,
    )
