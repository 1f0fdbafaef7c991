from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping

from pydantic import ValidationError

from backend.core.projection import (
    PeriodSnapshot,
    SimulationParameters,
    SummaryData,
    monthly_rate,
    project,
    summarize,
    total_months,
)
from backend.models import SimulationForm

logger = logging.getLogger(__name__)


class SimulationValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


@dataclass
class SimulationResult:
    parameters: SimulationParameters
    total_months: int
    monthly_rate: float
    rows: List[PeriodSnapshot]
    summary: SummaryData


def _error_messages(exc: ValidationError) -> List[str]:
    messages: List[str] = []
    for error in exc.errors():
        message = error["msg"]
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        field = ".".join(str(part) for part in error["loc"])
        if field and field not in message:
            message = f"{field}: {message}"
        messages.append(message)
    return messages


def validate_form(payload: Mapping[str, Any]) -> SimulationForm:
    try:
        return SimulationForm.model_validate(payload)
    except ValidationError as exc:
        raise SimulationValidationError(_error_messages(exc)) from exc


def run_simulation(payload: Mapping[str, Any]) -> SimulationResult:
    """Validate a raw form payload, project it and summarize the last month."""
    params = validate_form(payload).to_parameters()

    months = total_months(params)
    rate = monthly_rate(params)
    logger.debug("projecting %d months at monthly rate %.6f", months, rate)

    rows = project(params)
    summary = summarize(rows)

    logger.info(
        "simulation finished: %d months, gross %.2f, net %.2f",
        months,
        summary.finalGrossBalance,
        summary.finalNetBalance,
    )
    return SimulationResult(
        parameters=params,
        total_months=months,
        monthly_rate=rate,
        rows=rows,
        summary=summary,
    )
