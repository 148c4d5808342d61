"""Systematic investment plan (SIP) accumulation simulation."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Mapping, Union

from finplan.core.periods import horizon_months, monthly_rate
from finplan.domain.validation import validate_parameters
from finplan.schemas.common import CalculationStatus, Tag
from finplan.schemas.sip import (
    SipMonthRecord,
    SipParameters,
    SipResult,
    SipYearSummary,
)

logger = logging.getLogger(__name__)


def simulate_sip(params: Union[SipParameters, Mapping[str, Any]]) -> SipResult:
    """
    Project a SIP corpus month by month.

    Order of operations (per month):
      1) Compound the running balance at annual_rate / 12.
      2) Add the current monthly contribution (it earns nothing this month).
      3) Record the month.
      4) On every 12th month before the last, step the contribution up and
         snapshot the year.

    A closing snapshot is added when the horizon ends on a year boundary or
    when no yearly snapshot was taken at all.

    Raises InvalidParameter when any input constraint is violated.
    """
    params = validate_parameters(SipParameters, params)

    rate = monthly_rate(params.expected_return)
    total_months = horizon_months(params.years)

    balance = params.initial_corpus
    investment = params.initial_corpus
    contribution = params.monthly_contribution

    monthly: List[SipMonthRecord] = []
    yearly: List[SipYearSummary] = []

    for month in range(1, total_months + 1):
        balance *= 1 + rate
        balance += contribution
        investment += contribution

        monthly.append(
            SipMonthRecord(
                month=month,
                contribution=contribution,
                balance=balance,
                investment=investment,
                returns=balance - investment,
            )
        )

        if month % 12 == 0 and month < total_months:
            contribution *= 1 + params.step_up_percentage / 100
            yearly.append(
                SipYearSummary(
                    year=month // 12,
                    balance=balance,
                    investment=investment,
                    returns=balance - investment,
                    monthly_contribution=contribution,
                )
            )

    if total_months % 12 == 0 or not yearly:
        yearly.append(
            SipYearSummary(
                year=math.ceil(total_months / 12),
                balance=balance,
                investment=investment,
                returns=balance - investment,
                monthly_contribution=contribution,
            )
        )

    logger.debug(
        "SIP simulated over %d months: final balance %.2f, invested %.2f",
        total_months,
        balance,
        investment,
    )

    return SipResult(
        parameters=params,
        final_balance=balance,
        total_investment=investment,
        returns_accumulated=balance - investment,
        monthly=tuple(monthly),
        yearly=tuple(yearly),
        status=CalculationStatus(
            kind=Tag.SUCCESS,
            message="SIP calculation completed successfully!",
        ),
    )
