from __future__ import annotations

from math import isclose

import pytest

from finplan.core.swp import simulate_swp
from finplan.domain.validation import InvalidParameter
from finplan.schemas.common import Tag
from finplan.schemas.swp import SwpParameters


def test_oversized_withdrawal_exhausts_corpus_early():
    """
    Withdrawing 50k a month from 100k at 1% a year: two full withdrawals,
    then a capped third one empties the corpus.
    """
    result = simulate_swp(
        SwpParameters(
            initial_corpus=100000,
            monthly_withdrawal=50000,
            inflation_percentage=0,
            expected_return=1,
            years=1,
        )
    )

    assert result.corpus_exhausted
    assert result.exhaustion_month == 3
    assert result.final_balance == 0
    assert len(result.monthly) == 3
    assert [month.capped for month in result.monthly] == [False, False, True]
    assert result.monthly[-1].withdrawal < 50000
    assert result.yearly == ()
    assert isclose(result.total_withdrawal, 100000 + result.returns_accumulated, rel_tol=1e-12)
    assert result.status.kind == Tag.WARNING
    assert result.status.message == "Warning: Corpus will be exhausted after 0 years and 3 months"


def test_exhaustion_message_splits_years_and_months():
    result = simulate_swp(
        SwpParameters(
            initial_corpus=1000000,
            monthly_withdrawal=50000,
            inflation_percentage=10,
            expected_return=6,
            years=5,
        )
    )

    assert result.corpus_exhausted
    years, months = divmod(result.exhaustion_month, 12)
    assert years >= 1
    assert result.status.message == (
        f"Warning: Corpus will be exhausted after {years} years and {months} months"
    )
    assert result.exhaustion_month < 5 * 12


def test_sustainable_plan_summarises_each_completed_year_before_the_last():
    result = simulate_swp(
        SwpParameters(
            initial_corpus=1000000,
            monthly_withdrawal=5000,
            inflation_percentage=6,
            expected_return=10,
            years=3,
        )
    )

    assert not result.corpus_exhausted
    assert result.exhaustion_month is None
    assert len(result.monthly) == 36
    assert result.status.kind == Tag.SUCCESS

    # escalation happens at the end of years 1 and 2, never at the horizon
    assert [summary.year for summary in result.yearly] == [1, 2]
    first, second = result.yearly
    assert isclose(first.monthly_withdrawal, 5000.0)
    assert isclose(first.yearly_withdrawal, 60000.0)
    assert isclose(second.monthly_withdrawal, 5300.0)
    assert isclose(second.yearly_withdrawal, 12 * 5300.0)
    assert not first.partial and not second.partial
    assert isclose(result.monthly[-1].withdrawal, 5000 * 1.06**2)


def test_yearly_summary_sums_trailing_twelve_months():
    result = simulate_swp(
        SwpParameters(
            initial_corpus=2500000,
            monthly_withdrawal=15000,
            inflation_percentage=5,
            expected_return=8,
            years=4,
        )
    )

    for summary in result.yearly:
        window = result.monthly[(summary.year - 1) * 12 : summary.year * 12]
        assert isclose(summary.yearly_withdrawal, sum(m.withdrawal for m in window))
        assert isclose(summary.yearly_returns, sum(m.returns for m in window))
        assert summary.balance == window[-1].balance


def test_partial_final_year_is_flagged():
    result = simulate_swp(
        SwpParameters(
            initial_corpus=1000000,
            monthly_withdrawal=5000,
            inflation_percentage=6,
            expected_return=10,
            years=1.5,
        )
    )

    assert len(result.monthly) == 18
    assert [summary.year for summary in result.yearly] == [1, 2]
    partial = result.yearly[-1]
    assert partial.partial
    assert isclose(partial.monthly_withdrawal, 5300.0)
    assert isclose(partial.yearly_withdrawal, 6 * 5300.0)
    assert partial.balance == result.final_balance


def test_no_partial_summary_after_exhaustion():
    result = simulate_swp(
        SwpParameters(initial_corpus=1000, monthly_withdrawal=500, expected_return=1, years=1.5)
    )

    assert result.corpus_exhausted
    assert result.exhaustion_month == 3
    assert result.yearly == ()


def test_balances_never_go_negative():
    result = simulate_swp(
        SwpParameters(
            initial_corpus=750000,
            monthly_withdrawal=9000,
            inflation_percentage=8,
            expected_return=7,
            years=20,
        )
    )

    assert result.final_balance >= 0
    assert all(month.balance >= 0 for month in result.monthly)
    if result.corpus_exhausted:
        assert result.final_balance == 0
        assert result.exhaustion_month < 20 * 12


def test_zero_inflation_keeps_withdrawal_flat():
    result = simulate_swp(
        {"initialCorpus": 5000000, "monthlyWithdrawal": 20000, "expectedReturn": 8, "years": 5}
    )

    assert all(isclose(month.withdrawal, 20000.0) for month in result.monthly)
    assert isclose(result.total_withdrawal, 60 * 20000.0)


def test_same_inputs_give_identical_results():
    params = SwpParameters(
        initial_corpus=400000,
        monthly_withdrawal=4000,
        inflation_percentage=4,
        expected_return=9,
        years=12,
    )

    assert simulate_swp(params) == simulate_swp(params)


def test_invalid_inputs_are_reported_together():
    with pytest.raises(InvalidParameter) as excinfo:
        simulate_swp(
            {
                "initialCorpus": 999,
                "monthlyWithdrawal": 499,
                "inflationPercentage": -1,
                "expectedReturn": 8,
                "years": 10,
            }
        )

    assert len(excinfo.value.errors) == 3
