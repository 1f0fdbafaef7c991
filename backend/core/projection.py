from __future__ import annotations

import math
from enum import Enum
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict

from backend.core.tax_brackets import resolve_rate


class RateType(str, Enum):
    MONTHLY = "monthly"
    ANNUAL = "annual"


class PeriodType(str, Enum):
    MONTHS = "months"
    YEARS = "years"


class SimulationParameters(BaseModel):
    """
    One simulation run:
      - initialValue: balance at month 0
      - monthlyValue: contribution made at the end of every month
      - interestRate: percentage, per month or per year depending on rateType
      - period: horizon, in months or years depending on periodType

    Bounds are enforced by the validation layer (models.SimulationForm), not here.
    """

    model_config = ConfigDict(frozen=True)

    initialValue: float = 0.0
    monthlyValue: float = 0.0
    interestRate: float = 0.0
    rateType: RateType = RateType.ANNUAL
    period: float = 0.0
    periodType: PeriodType = PeriodType.YEARS


class PeriodSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    month: int
    interestThisPeriod: float
    totalContributed: float
    cumulativeInterest: float
    grossBalance: float
    taxableGain: float
    taxRate: float  # percentage, e.g. 22.5
    taxWithheld: float
    netBalance: float


class SummaryData(BaseModel):
    model_config = ConfigDict(frozen=True)

    finalGrossBalance: float
    totalContributed: float
    totalInterest: float
    totalTax: float
    finalNetBalance: float


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def total_months(params: SimulationParameters) -> int:
    """Number of monthly periods covered by the simulation."""
    if params.periodType == PeriodType.YEARS:
        return _round_half_up(params.period * 12)
    return _round_half_up(params.period)


def monthly_rate(params: SimulationParameters) -> float:
    """
    Effective per-month rate as a fraction.

    An annual rate is converted to its compound equivalent,
    (1 + i_annual) = (1 + i_monthly)^12, not divided by 12.
    """
    if params.interestRate == 0:
        return 0.0
    if params.rateType == RateType.ANNUAL:
        return (1.0 + params.interestRate / 100.0) ** (1.0 / 12.0) - 1.0
    return params.interestRate / 100.0


def project(params: SimulationParameters) -> List[PeriodSnapshot]:
    """
    Build the month-by-month table for months 1..total_months (inclusive).

    Order of operations (per month):
      1) Interest accrues on the balance carried from the previous month.
      2) The monthly contribution is added after interest (no interest this month).
      3) Withholding is provisioned on the gain over contributed principal,
         at the regressive rate for the months elapsed so far.

    Values keep full precision; rounding is left to whoever displays them.
    A non-positive horizon yields an empty list.
    """
    months = total_months(params)
    rate = monthly_rate(params)

    balance = float(params.initialValue)
    cumulative_interest = 0.0

    rows: List[PeriodSnapshot] = []
    for month in range(1, months + 1):
        # 1) interest on the starting balance only
        interest = balance * rate
        cumulative_interest += interest

        # 2) end-of-month contribution
        balance = balance + interest + params.monthlyValue
        contributed = params.initialValue + month * params.monthlyValue

        # 3) tax provisioned if the whole balance were withdrawn this month
        taxable_gain = max(0.0, balance - contributed)
        tax_rate = resolve_rate(month)
        tax = taxable_gain * tax_rate

        rows.append(
            PeriodSnapshot(
                month=month,
                interestThisPeriod=interest,
                totalContributed=contributed,
                cumulativeInterest=cumulative_interest,
                grossBalance=balance,
                taxableGain=taxable_gain,
                taxRate=tax_rate * 100,
                taxWithheld=tax,
                netBalance=balance - tax,
            )
        )

    return rows


def summarize(snapshots: Sequence[PeriodSnapshot]) -> SummaryData:
    """Totals of a projection, read straight from its final snapshot."""
    if not snapshots:
        raise ValueError("cannot summarize an empty projection")

    last = snapshots[-1]
    return SummaryData(
        finalGrossBalance=last.grossBalance,
        totalContributed=last.totalContributed,
        totalInterest=last.cumulativeInterest,
        totalTax=last.taxWithheld,
        finalNetBalance=last.netBalance,
    )


__all__ = [
    "RateType",
    "PeriodType",
    "SimulationParameters",
    "PeriodSnapshot",
    "SummaryData",
    "total_months",
    "monthly_rate",
    "project",
    "summarize",
]
