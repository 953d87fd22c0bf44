from __future__ import annotations

from typing import List

from sipcalc.core.projection import ProjectionInput
from sipcalc.schemas.projection import ProjectionRequest

DEFAULT_MAX_TENURE_YEARS = 100


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def input_errors(request: ProjectionRequest, max_tenure_years: int = DEFAULT_MAX_TENURE_YEARS) -> List[str]:
    errors: List[str] = []

    if request.initial_monthly_contribution <= 0 and request.initial_lump_sum <= 0:
        errors.append("Please enter at least one investment amount (SIP or Lump Sum)")
    if request.initial_lump_sum < 0:
        errors.append("initial_lump_sum cannot be negative")
    if request.initial_monthly_contribution < 0:
        errors.append("initial_monthly_contribution cannot be negative")

    if request.tenure_years <= 0:
        errors.append("Investment tenure must be greater than 0")
    elif request.tenure_years > max_tenure_years:
        errors.append(f"Investment tenure cannot exceed {max_tenure_years} years")

    if request.step_up_frequency_months <= 0:
        errors.append("step_up_frequency_months must be greater than 0")

    return errors


def collect_inputs(
    request: ProjectionRequest,
    max_tenure_years: int = DEFAULT_MAX_TENURE_YEARS,
) -> ProjectionInput:
    """Turn a shape-checked request into engine inputs, or raise InvalidInputError."""
    errors = input_errors(request, max_tenure_years)
    if errors:
        raise InvalidInputError(errors)

    return ProjectionInput(
        initial_lump_sum=request.initial_lump_sum,
        initial_monthly_contribution=request.initial_monthly_contribution,
        step_up_percentage=request.step_up_percentage,
        step_up_frequency_months=request.step_up_frequency_months,
        tenure_years=request.tenure_years,
        annual_return_percentage=request.annual_return_percentage,
    )
