"""Data contracts for step-up SIP calculations."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, model_validator

from stepup_sip.config import Settings, get_settings


class StepUpSipRequest(BaseModel):
    """Calculator inputs, validated before they reach the engine.

    Upper bounds come from :class:`~stepup_sip.config.Settings`; pass
    ``context={"settings": ...}`` to ``model_validate`` to override them.
    """

    model_config = ConfigDict(extra="forbid")

    monthly_investment: float = Field(
        5000.0,
        ge=0,
        allow_inf_nan=False,
        description="Contribution made in the first month.",
    )
    step_up_percentage: float = Field(
        10.0,
        ge=0,
        allow_inf_nan=False,
        description="Percentage added to the monthly contribution every year (e.g. 10 for 10%).",
    )
    expected_return_percent: float = Field(
        12.0,
        ge=0,
        allow_inf_nan=False,
        description="Nominal annual return in percent, compounded monthly.",
    )
    years: int = Field(10, ge=1, description="Number of yearly periods to simulate.")

    @model_validator(mode="after")
    def within_limits(self, info: ValidationInfo) -> "StepUpSipRequest":
        settings: Settings = (info.context or {}).get("settings") or get_settings()
        errors = []
        if self.monthly_investment > settings.max_monthly_investment:
            errors.append(f"monthly_investment must be at most {settings.max_monthly_investment:g}")
        if self.step_up_percentage > settings.max_percentage:
            errors.append(f"step_up_percentage must be at most {settings.max_percentage:g}")
        if self.expected_return_percent > settings.max_percentage:
            errors.append(f"expected_return_percent must be at most {settings.max_percentage:g}")
        if self.years > settings.max_years:
            errors.append(f"years must be at most {settings.max_years}")
        if errors:
            raise ValueError("; ".join(errors))
        return self


class YearRecord(BaseModel):
    """Single row of the yearly breakdown."""

    year: int = Field(..., ge=1)
    monthly_investment_at_start: int
    yearly_investment: int
    cumulative_future_value: int


class SipResult(BaseModel):
    """Aggregate totals plus the per-year breakdown."""

    future_value: int
    total_investment: int
    estimated_returns: int
    yearly_breakdown: List[YearRecord]


class AllocationSlice(BaseModel):
    """One slice of the invested-vs-returns pie chart."""

    name: str
    value: int
    percent: float


class SipCalculationResponse(SipResult):
    allocation: List[AllocationSlice]


class FormattedYear(BaseModel):
    year: int
    monthly_investment: str
    yearly_investment: str
    cumulative_future_value: str


class SipSummary(BaseModel):
    """Display strings for the calculator page."""

    future_value: str
    total_investment: str
    estimated_returns: str
    yearly_breakdown: List[FormattedYear]
