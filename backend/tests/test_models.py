from __future__ import annotations

import pytest

from backend.core.projection import PeriodType, RateType
from backend.domain.simulation import SimulationValidationError, run_simulation, validate_form
from backend.models import SimulationForm


def test_defaults_match_reference_scenario():
    form = SimulationForm()
    params = form.to_parameters()

    assert params.initialValue == 5000
    assert params.monthlyValue == 500
    assert params.interestRate == 11.5
    assert params.rateType == RateType.ANNUAL
    assert params.period == 5
    assert params.periodType == PeriodType.YEARS


def test_localized_strings_are_parsed():
    form = validate_form(
        {"initialValue": "1.234,56", "monthlyValue": "100", "interestRate": "0,9", "rateType": "monthly"}
    )
    assert form.initialValue == 1234.56
    assert form.monthlyValue == 100.0
    assert form.interestRate == 0.9


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"initialValue": -1}, "initialValue cannot be negative"),
        ({"initialValue": 1_000_000_001}, "initialValue exceeds the 1 billion limit"),
        ({"monthlyValue": -0.01}, "monthlyValue cannot be negative"),
        ({"monthlyValue": 100_000_001}, "monthlyValue exceeds the 100 million limit"),
        ({"interestRate": -1}, "interestRate cannot be negative"),
        ({"interestRate": 150, "rateType": "monthly"}, "monthly interestRate too high (max 100%)"),
        ({"interestRate": 5001}, "annual interestRate too high (max 5000%)"),
        ({"period": 0}, "period must be greater than zero"),
        ({"period": 101}, "period cannot exceed 100 years (1200 months)"),
        ({"period": 1201, "periodType": "months"}, "period cannot exceed 100 years (1200 months)"),
        ({"period": 0.2, "periodType": "months"}, "period must cover at least one month"),
    ],
)
def test_out_of_range_values_are_rejected(payload, message):
    with pytest.raises(SimulationValidationError) as excinfo:
        validate_form(payload)
    assert message in excinfo.value.errors


def test_rate_ceiling_depends_on_rate_type():
    assert validate_form({"interestRate": 150, "rateType": "annual"}).interestRate == 150


def test_boundary_values_are_valid():
    form = validate_form(
        {"initialValue": 0, "monthlyValue": 0, "interestRate": 0, "period": 1200, "periodType": "months"}
    )
    assert form.period == 1200


def test_multiple_errors_are_reported_together():
    with pytest.raises(SimulationValidationError) as excinfo:
        validate_form({"initialValue": -1, "monthlyValue": -1})
    assert len(excinfo.value.errors) == 2


def test_unknown_fields_are_rejected():
    with pytest.raises(SimulationValidationError) as excinfo:
        validate_form({"currency": "USD"})
    assert any(error.startswith("currency") for error in excinfo.value.errors)


def test_run_simulation_returns_rows_and_summary():
    result = run_simulation({"period": 24, "periodType": "months"})

    assert result.total_months == 24
    assert len(result.rows) == 24
    assert result.summary.finalNetBalance == result.rows[-1].netBalance
    assert result.monthly_rate > 0
