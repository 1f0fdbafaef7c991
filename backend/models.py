from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from backend.core.number_format import parse_input_number
from backend.core.projection import PeriodType, RateType, SimulationParameters

MAX_INITIAL_VALUE = 1_000_000_000
MAX_MONTHLY_VALUE = 100_000_000
MAX_MONTHLY_RATE = 100
MAX_ANNUAL_RATE = 5000
MAX_TOTAL_MONTHS = 1200


class SimulationForm(BaseModel):
    """
    What the user typed into the simulator form.

    Amounts and rates accept plain numbers or pt-BR strings ("1.234,56").
    rateType/periodType are declared before the fields they qualify so the
    rate and period checks can see them.
    """

    model_config = ConfigDict(extra="forbid")

    rateType: RateType = RateType.ANNUAL
    periodType: PeriodType = PeriodType.YEARS

    initialValue: float = Field(default=5000.0, allow_inf_nan=False)
    monthlyValue: float = Field(default=500.0, allow_inf_nan=False)
    interestRate: float = Field(default=11.5, allow_inf_nan=False)
    period: float = Field(default=5.0, allow_inf_nan=False)

    @field_validator("initialValue", "monthlyValue", "interestRate", "period", mode="before")
    @classmethod
    def parse_localized(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_input_number(value)
        return value

    @field_validator("initialValue")
    @classmethod
    def check_initial_value(cls, value: float) -> float:
        if value < 0:
            raise ValueError("initialValue cannot be negative")
        if value > MAX_INITIAL_VALUE:
            raise ValueError("initialValue exceeds the 1 billion limit")
        return value

    @field_validator("monthlyValue")
    @classmethod
    def check_monthly_value(cls, value: float) -> float:
        if value < 0:
            raise ValueError("monthlyValue cannot be negative")
        if value > MAX_MONTHLY_VALUE:
            raise ValueError("monthlyValue exceeds the 100 million limit")
        return value

    @field_validator("interestRate")
    @classmethod
    def check_interest_rate(cls, value: float, info: ValidationInfo) -> float:
        if value < 0:
            raise ValueError("interestRate cannot be negative")
        rate_type = info.data.get("rateType")
        if rate_type == RateType.MONTHLY and value > MAX_MONTHLY_RATE:
            raise ValueError(f"monthly interestRate too high (max {MAX_MONTHLY_RATE}%)")
        if rate_type == RateType.ANNUAL and value > MAX_ANNUAL_RATE:
            raise ValueError(f"annual interestRate too high (max {MAX_ANNUAL_RATE}%)")
        return value

    @field_validator("period")
    @classmethod
    def check_period(cls, value: float, info: ValidationInfo) -> float:
        if value <= 0:
            raise ValueError("period must be greater than zero")
        months = value * 12 if info.data.get("periodType") == PeriodType.YEARS else value
        if months > MAX_TOTAL_MONTHS:
            raise ValueError(f"period cannot exceed 100 years ({MAX_TOTAL_MONTHS} months)")
        if months < 0.5:
            raise ValueError("period must cover at least one month")
        return value

    def to_parameters(self) -> SimulationParameters:
        return SimulationParameters(
            initialValue=self.initialValue,
            monthlyValue=self.monthlyValue,
            interestRate=self.interestRate,
            rateType=self.rateType,
            period=self.period,
            periodType=self.periodType,
        )
