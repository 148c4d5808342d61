"""Systematic withdrawal plan (SWP) decumulation simulation."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Optional, Sequence, Union

from finplan.core.periods import horizon_months, monthly_rate
from finplan.domain.validation import validate_parameters
from finplan.schemas.common import CalculationStatus, Tag
from finplan.schemas.swp import (
    SwpMonthRecord,
    SwpParameters,
    SwpResult,
    SwpYearSummary,
)

logger = logging.getLogger(__name__)


def _summarise(
    months: Sequence[SwpMonthRecord],
    year: int,
    monthly_withdrawal: float,
    partial: bool = False,
) -> SwpYearSummary:
    return SwpYearSummary(
        year=year,
        monthly_withdrawal=monthly_withdrawal,
        yearly_withdrawal=sum(m.withdrawal for m in months),
        yearly_returns=sum(m.returns for m in months),
        balance=months[-1].balance,
        partial=partial,
    )


def _status(exhaustion_month: Optional[int]) -> CalculationStatus:
    if exhaustion_month is None:
        return CalculationStatus(kind=Tag.SUCCESS, message="SWP calculation completed successfully!")
    years, months = divmod(exhaustion_month, 12)
    return CalculationStatus(
        kind=Tag.WARNING,
        message=f"Warning: Corpus will be exhausted after {years} years and {months} months",
    )


def simulate_swp(params: Union[SwpParameters, Mapping[str, Any]]) -> SwpResult:
    """
    Project a withdrawal plan month by month.

    Order of operations (per month):
      1) Stop if nothing is left; the previous month is the exhaustion month.
      2) Earn the month's return on the running balance.
      3) Withdraw the current amount, capped at what is left.
      4) On every 12th month before the last, summarise the trailing twelve
         months and raise the withdrawal by inflation.

    A horizon that is not a whole number of years gets a trailing partial
    summary unless the corpus ran out first.

    Raises InvalidParameter when any input constraint is violated.
    """
    params = validate_parameters(SwpParameters, params)

    rate = monthly_rate(params.expected_return)
    total_months = horizon_months(params.years)

    balance = params.initial_corpus
    withdrawal = params.monthly_withdrawal
    total_withdrawal = 0.0
    total_returns = 0.0
    exhaustion_month: Optional[int] = None

    monthly: List[SwpMonthRecord] = []
    yearly: List[SwpYearSummary] = []

    for month in range(1, total_months + 1):
        if balance <= 0:
            exhaustion_month = month - 1
            break

        returns = balance * rate
        balance += returns
        total_returns += returns

        actual = min(withdrawal, balance)
        balance -= actual
        total_withdrawal += actual

        monthly.append(
            SwpMonthRecord(
                month=month,
                balance=max(0.0, balance),
                withdrawal=actual,
                total_withdrawal=total_withdrawal,
                returns=returns,
                total_returns=total_returns,
                capped=actual < withdrawal,
            )
        )

        if month % 12 == 0 and month < total_months:
            yearly.append(_summarise(monthly[-12:], month // 12, withdrawal))
            withdrawal *= 1 + params.inflation_percentage / 100

    remaining = total_months % 12
    if exhaustion_month is None and remaining:
        yearly.append(
            _summarise(
                monthly[-remaining:],
                math.ceil(total_months / 12),
                withdrawal,
                partial=True,
            )
        )

    final_balance = max(0.0, balance)
    logger.debug(
        "SWP simulated over %d months: final balance %.2f, withdrawn %.2f, exhausted at %s",
        total_months,
        final_balance,
        total_withdrawal,
        exhaustion_month,
    )

    return SwpResult(
        parameters=params,
        final_balance=final_balance,
        total_withdrawal=total_withdrawal,
        returns_accumulated=total_returns,
        corpus_exhausted=exhaustion_month is not None,
        exhaustion_month=exhaustion_month,
        monthly=tuple(monthly),
        yearly=tuple(yearly),
        status=_status(exhaustion_month),
    )
