from __future__ import annotations

import math
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict

MONTHS_PER_YEAR = 12


# -----------------------------
# Engine inputs / outputs
# -----------------------------


class ProjectionInput(BaseModel):
    """Six already-validated scalars for one projection run."""

    model_config = ConfigDict(frozen=True)

    initial_lump_sum: float
    initial_monthly_contribution: float
    step_up_percentage: float
    step_up_frequency_months: int = MONTHS_PER_YEAR
    tenure_years: int
    annual_return_percentage: float


class YearRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    year: int
    contribution_this_year: float
    cumulative_invested: float
    value_at_year_end: float
    returns_at_year_end: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    initial_lump_sum: float
    total_contributions: float
    lump_sum_future_value: float
    contributions_future_value: float
    lump_sum_returns: float
    contributions_returns: float
    total_invested: float
    final_value: float
    total_returns: float
    # NaN when nothing was invested; callers guard before display.
    return_percentage: float
    yearly_records: List[YearRecord]


# (month number, amount contributed that month), month numbers start at 1
Contribution = Tuple[int, float]


# -----------------------------
# Building blocks
# -----------------------------


def contribution_schedule(inputs: ProjectionInput) -> List[Contribution]:
    """
    Ordered (month, amount) pairs for every month of the tenure.

    The amount is constant within a year and is multiplied by
    (1 + step_up_percentage / 100) at the start of every year after the first
    (month 13, 25, ...). step_up_frequency_months is carried on the input but
    the cadence is always annual.
    """
    total_months = inputs.tenure_years * MONTHS_PER_YEAR
    step_up_factor = 1 + inputs.step_up_percentage / 100

    schedule: List[Contribution] = []
    amount = inputs.initial_monthly_contribution
    for month in range(1, total_months + 1):
        if month > 1 and (month - 1) % MONTHS_PER_YEAR == 0:
            amount = amount * step_up_factor
        schedule.append((month, amount))
    return schedule


def future_value(amount: float, periods: int, rate: float) -> float:
    """Compound ``amount`` for ``periods`` periods at ``rate`` per period.

    Growth too large for a float saturates to +/-inf instead of raising.
    """
    try:
        return amount * (1 + rate) ** periods
    except OverflowError:
        if amount == 0:
            return 0.0
        return math.copysign(math.inf, amount)


def value_at_month(schedule: List[Contribution], target_month: int, monthly_rate: float) -> float:
    """
    Value at the end of ``target_month`` of every contribution made up to and
    including that month.

    A contribution made in month m compounds for (target_month - m + 1)
    months, i.e. it starts earning in the month it is made.
    """
    return sum(
        future_value(amount, target_month - month + 1, monthly_rate)
        for month, amount in schedule
        if month <= target_month
    )


def _invested_through(schedule: List[Contribution], last_month: int) -> float:
    return sum(amount for month, amount in schedule if month <= last_month)


# -----------------------------
# Projection
# -----------------------------


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Project a lump sum plus a step-up SIP over ``tenure_years``.

    Conventions:
      - Lump sum compounds annually at the nominal rate.
      - Contributions compound monthly at rate / 12.
      - Year Y's snapshot values every contribution made in years 1..Y to the
        end of month 12 * Y; contributions after that are ignored.
      - Terminal totals are computed independently at the full tenure and
        match the last year's snapshot.

    No rounding and no validation happens here; inputs are assumed to have
    gone through the input collector.
    """
    annual_rate = inputs.annual_return_percentage / 100
    monthly_rate = annual_rate / MONTHS_PER_YEAR
    total_months = inputs.tenure_years * MONTHS_PER_YEAR
    lump_sum = inputs.initial_lump_sum

    schedule = contribution_schedule(inputs)

    records: List[YearRecord] = []
    for year in range(1, inputs.tenure_years + 1):
        year_end_month = year * MONTHS_PER_YEAR
        first_month = year_end_month - MONTHS_PER_YEAR + 1

        contribution_this_year = sum(
            amount for month, amount in schedule if first_month <= month <= year_end_month
        )
        cumulative_invested = lump_sum + _invested_through(schedule, year_end_month)
        value_at_year_end = future_value(lump_sum, year, annual_rate) + value_at_month(
            schedule, year_end_month, monthly_rate
        )

        records.append(
            YearRecord(
                year=year,
                contribution_this_year=contribution_this_year,
                cumulative_invested=cumulative_invested,
                value_at_year_end=value_at_year_end,
                returns_at_year_end=value_at_year_end - cumulative_invested,
            )
        )

    # ---------- Terminal totals ----------
    total_contributions = _invested_through(schedule, total_months)
    lump_sum_future_value = future_value(lump_sum, inputs.tenure_years, annual_rate)
    contributions_future_value = value_at_month(schedule, total_months, monthly_rate)

    total_invested = lump_sum + total_contributions
    final_value = lump_sum_future_value + contributions_future_value
    total_returns = final_value - total_invested
    return_percentage = total_returns / total_invested * 100 if total_invested else float("nan")

    return ProjectionResult(
        initial_lump_sum=lump_sum,
        total_contributions=total_contributions,
        lump_sum_future_value=lump_sum_future_value,
        contributions_future_value=contributions_future_value,
        lump_sum_returns=lump_sum_future_value - lump_sum,
        contributions_returns=contributions_future_value - total_contributions,
        total_invested=total_invested,
        final_value=final_value,
        total_returns=total_returns,
        return_percentage=return_percentage,
        yearly_records=records,
    )


__all__ = [
    "MONTHS_PER_YEAR",
    "ProjectionInput",
    "YearRecord",
    "ProjectionResult",
    "Contribution",
    "contribution_schedule",
    "future_value",
    "value_at_month",
    "project",
]
