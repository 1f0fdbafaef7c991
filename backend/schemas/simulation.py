"""Response contracts for the simulation API."""

from typing import List

from pydantic import BaseModel, Field

from backend.core.projection import PeriodSnapshot, SimulationParameters, SummaryData
from backend.core.tax_brackets import TaxBracket


class PingResponse(BaseModel):
    message: str


class TaxBracketsResponse(BaseModel):
    brackets: List[TaxBracket]


class SimulationResponse(BaseModel):
    """Full projection table plus totals from its last month."""

    parameters: SimulationParameters
    totalMonths: int = Field(..., ge=1)
    monthlyRate: float = Field(..., ge=0, description="Effective monthly rate as a fraction.")
    rows: List[PeriodSnapshot]
    summary: SummaryData


class ErrorResponse(BaseModel):
    error: List[str]
