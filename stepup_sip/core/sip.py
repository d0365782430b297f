"""Step-up SIP accumulation logic."""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from stepup_sip.schemas.sip import (
    AllocationSlice,
    SipResult,
    StepUpSipRequest,
    YearRecord,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


def round_currency(value: float) -> int:
    """Round to whole currency units, halves away from zero (7320.5 -> 7321)."""
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def compute_step_up_sip(
    monthly_investment: float,
    step_up_percentage: float,
    expected_return_percent: float,
    years: int,
) -> SipResult:
    """
    Simulate a SIP whose monthly contribution grows once a year.

    Order of operations (per month):
      1) Add the month's contribution to the balance.
      2) Grow the whole balance by ``expected_return_percent / 12``.

    The contribution is stepped up only after all twelve months of a year used
    the previous amount. Totals stay unrounded until they are reported.
    Inputs are trusted; callers validate them (see ``StepUpSipRequest``).
    """
    monthly_rate = expected_return_percent / (MONTHS_PER_YEAR * 100)

    future_value = 0.0
    total_investment = 0.0
    current = float(monthly_investment)

    breakdown: List[YearRecord] = []
    for year in range(1, years + 1):
        year_investment = 0.0
        for _ in range(MONTHS_PER_YEAR):
            future_value = (future_value + current) * (1 + monthly_rate)
            year_investment += current
            total_investment += current

        breakdown.append(
            YearRecord(
                year=year,
                monthly_investment_at_start=round_currency(current),
                yearly_investment=round_currency(year_investment),
                cumulative_future_value=round_currency(future_value),
            )
        )
        current += current * step_up_percentage / 100

    reported_value = round_currency(future_value)
    reported_investment = round_currency(total_investment)
    logger.debug(
        "step-up sip: monthly=%s step_up=%s%% return=%s%% years=%s -> fv=%s invested=%s",
        monthly_investment,
        step_up_percentage,
        expected_return_percent,
        years,
        reported_value,
        reported_investment,
    )

    return SipResult(
        future_value=reported_value,
        total_investment=reported_investment,
        estimated_returns=reported_value - reported_investment,
        yearly_breakdown=breakdown,
    )


def calculate_step_up_sip(request: StepUpSipRequest) -> SipResult:
    """Run the engine on a validated request."""
    return compute_step_up_sip(
        monthly_investment=request.monthly_investment,
        step_up_percentage=request.step_up_percentage,
        expected_return_percent=request.expected_return_percent,
        years=request.years,
    )


def allocation_breakdown(result: SipResult) -> List[AllocationSlice]:
    """Invested vs. returns shares of the future value, for the pie chart."""
    slices = [
        ("Total Investment", result.total_investment),
        ("Estimated Returns", result.estimated_returns),
    ]
    total = result.total_investment + result.estimated_returns
    return [
        AllocationSlice(
            name=name,
            value=value,
            percent=round(value / total * 100, 2) if total else 0.0,
        )
        for name, value in slices
    ]
