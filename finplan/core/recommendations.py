"""Rule-based retirement advice.

Advice is an ordered table of rules. Each rule pairs a predicate over the
planner's figures with a builder for the recommendation it emits; rules are
evaluated in table order and every matching rule contributes one entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from finplan.core.formatting import group_indian, round_half_up
from finplan.core.periods import monthly_rate
from finplan.schemas.common import CalculationStatus, Recommendation, Tag
from finplan.schemas.retirement import ReadinessBand, RetirementParameters

WITHDRAWAL_RATE = 0.04
EMERGENCY_FUND_MONTHS = 6


@dataclass(frozen=True)
class PlanFigures:
    parameters: RetirementParameters
    corpus_at_retirement: float
    future_monthly_expenses: float
    sustainable_monthly_income: float
    readiness_score: float
    years_to_retirement: int


@dataclass(frozen=True)
class Band:
    threshold: float
    label: str
    summary: str
    advice: Recommendation
    status: CalculationStatus


READINESS_BANDS: Tuple[Band, ...] = (
    Band(
        threshold=90,
        label="excellent",
        summary="Excellent - You're retirement ready!",
        advice=Recommendation(
            kind=Tag.SUCCESS,
            title="Excellent Retirement Preparedness",
            description=(
                "You are well-prepared for retirement. Consider diversifying your "
                "portfolio and exploring tax-efficient investment options."
            ),
        ),
        status=CalculationStatus(
            kind=Tag.SUCCESS,
            message="Retirement planning analysis completed successfully!",
        ),
    ),
    Band(
        threshold=75,
        label="good",
        summary="Good - Minor adjustments needed",
        advice=Recommendation(
            kind=Tag.SUCCESS,
            title="Good Retirement Preparedness",
            description=(
                "You are on track for a comfortable retirement. Consider increasing "
                "your savings slightly to build additional buffer."
            ),
        ),
        status=CalculationStatus(
            kind=Tag.SUCCESS,
            message="Retirement planning analysis completed successfully!",
        ),
    ),
    Band(
        threshold=60,
        label="adequate",
        summary="Adequate - Needs improvement",
        advice=Recommendation(
            kind=Tag.WARNING,
            title="Adequate but Needs Improvement",
            description=(
                "Your retirement planning needs attention. Consider increasing "
                "monthly savings or extending working years."
            ),
        ),
        status=CalculationStatus(
            kind=Tag.WARNING,
            message="Retirement planning completed - improvement needed!",
        ),
    ),
    Band(
        threshold=float("-inf"),
        label="poor",
        summary="Poor - Urgent action required",
        advice=Recommendation(
            kind=Tag.ERROR,
            title="Critical Retirement Gap",
            description=(
                "Urgent action needed. Significantly increase savings, reduce "
                "expenses, or consider working longer."
            ),
        ),
        status=CalculationStatus(
            kind=Tag.ERROR,
            message="Critical retirement gap identified - urgent action required!",
        ),
    ),
)


def band_for(score: float) -> Band:
    for band in READINESS_BANDS:
        if score >= band.threshold:
            return band
    return READINESS_BANDS[-1]


def readiness_band(score: float) -> ReadinessBand:
    band = band_for(score)
    return ReadinessBand(label=band.label, summary=band.summary)


def additional_monthly_savings(additional_corpus: float, years: int, expected_return: float) -> int:
    """Monthly contribution that grows to ``additional_corpus`` in ``years``.

    Solves the future value of an ordinary annuity for the payment,
    ``FV * i / ((1 + i)^n - 1)``, and rounds to whole rupees.
    """
    rate = monthly_rate(expected_return)
    months = years * 12
    if rate == 0:
        return round_half_up(additional_corpus / months)
    return round_half_up(additional_corpus * rate / ((1 + rate) ** months - 1))


def _has_shortfall(figures: PlanFigures) -> bool:
    return figures.sustainable_monthly_income < figures.future_monthly_expenses


def _increase_savings(figures: PlanFigures) -> Recommendation:
    shortfall = figures.future_monthly_expenses - figures.sustainable_monthly_income
    additional_corpus = shortfall * 12 / WITHDRAWAL_RATE
    extra = additional_monthly_savings(
        additional_corpus,
        figures.years_to_retirement,
        figures.parameters.expected_return,
    )
    return Recommendation(
        kind=Tag.WARNING,
        title="Increase Monthly Savings",
        description=f"To bridge the gap, consider increasing monthly savings by ₹{group_indian(extra)}",
    )


def _emergency_fund_target(figures: PlanFigures) -> float:
    return figures.parameters.current_expenses * EMERGENCY_FUND_MONTHS


def _lacks_emergency_fund(figures: PlanFigures) -> bool:
    return figures.parameters.current_savings < _emergency_fund_target(figures)


def _build_emergency_fund(figures: PlanFigures) -> Recommendation:
    target = _emergency_fund_target(figures)
    return Recommendation(
        kind=Tag.WARNING,
        title="Build Emergency Fund",
        description=(
            f"Maintain {EMERGENCY_FUND_MONTHS} months of expenses (₹{group_indian(target)}) "
            "as emergency fund separate from retirement corpus."
        ),
    )


HEALTHCARE = Recommendation(
    kind=Tag.WARNING,
    title="Healthcare Cost Planning",
    description=(
        "Healthcare costs typically inflate at 8-10% annually. Consider health "
        "insurance and dedicated healthcare fund."
    ),
)

TAX_EFFICIENCY = Recommendation(
    kind=Tag.SUCCESS,
    title="Tax-Efficient Investments",
    description=(
        "Maximize tax-saving investments like ELSS, PPF, and NPS to reduce current "
        "tax burden and build retirement corpus."
    ),
)


def _always(figures: PlanFigures) -> bool:
    return True


@dataclass(frozen=True)
class Rule:
    applies: Callable[[PlanFigures], bool]
    build: Callable[[PlanFigures], Recommendation]


RULES: Tuple[Rule, ...] = (
    Rule(applies=_always, build=lambda figures: band_for(figures.readiness_score).advice),
    Rule(applies=_has_shortfall, build=_increase_savings),
    Rule(applies=_lacks_emergency_fund, build=_build_emergency_fund),
    Rule(applies=_always, build=lambda figures: HEALTHCARE),
    Rule(applies=_always, build=lambda figures: TAX_EFFICIENCY),
)


def generate_recommendations(
    figures: PlanFigures,
    rules: Optional[Tuple[Rule, ...]] = None,
) -> List[Recommendation]:
    table = RULES if rules is None else rules
    return [rule.build(figures) for rule in table if rule.applies(figures)]
