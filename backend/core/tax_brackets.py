"""Regressive income-tax withholding schedule for fixed-income investments."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel


class TaxBracket(BaseModel):
    """Withholding rate applied up to (and including) ``upToMonths``.

    The last bracket is open ended (``upToMonths`` is None).
    """

    upToMonths: Optional[int] = None
    rate: float


TAX_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(upToMonths=6, rate=0.225),
    TaxBracket(upToMonths=12, rate=0.20),
    TaxBracket(upToMonths=24, rate=0.175),
    TaxBracket(upToMonths=None, rate=0.15),
)


def resolve_rate(elapsed_months: int) -> float:
    """Return the withholding rate (as a fraction) for a holding period in whole months."""
    for bracket in TAX_BRACKETS:
        if bracket.upToMonths is None or elapsed_months <= bracket.upToMonths:
            return bracket.rate
    return TAX_BRACKETS[-1].rate
