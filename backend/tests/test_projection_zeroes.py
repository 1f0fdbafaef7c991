from __future__ import annotations

from math import isclose

from backend.core.projection import SimulationParameters, project, summarize


def test_projection_zeroes_produces_zero_rows():
    """
    Sanity check: with zero starting value, zero contributions, and no interest, all outputs stay at zero.
    """
    params = SimulationParameters(
        initialValue=0.0,
        monthlyValue=0.0,
        interestRate=0.0,
        rateType="annual",
        period=2,
        periodType="years",
    )

    rows = project(params)

    assert len(rows) == 24
    #just check all are zeros, don't need to go line by line
    for row in rows:
        assert isclose(row.interestThisPeriod, 0.0, abs_tol=0.0)
        assert isclose(row.totalContributed, 0.0, abs_tol=0.0)
        assert isclose(row.cumulativeInterest, 0.0, abs_tol=0.0)
        assert isclose(row.grossBalance, 0.0, abs_tol=0.0)
        assert isclose(row.taxableGain, 0.0, abs_tol=0.0)
        assert isclose(row.taxWithheld, 0.0, abs_tol=0.0)
        assert isclose(row.netBalance, 0.0, abs_tol=0.0)

    summary = summarize(rows)
    assert summary.finalNetBalance == 0.0
    assert summary.totalTax == 0.0
