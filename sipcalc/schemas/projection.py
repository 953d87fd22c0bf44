"""Data contracts for the projection endpoints."""

import math
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


def _finite_or_none(value: Optional[float]) -> Optional[float]:
    # JSON has no NaN or Infinity
    if value is None or not math.isfinite(value):
        return None
    return value


class ProjectionRequest(BaseModel):
    """Raw calculator inputs as submitted by a client.

    Only shape and type are checked here; domain rules (at least one amount,
    positive tenure, ...) are enforced by ``collect_inputs``.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initial_lump_sum: float = Field(0.0, description="One-time amount invested at month 0.")
    initial_monthly_contribution: float = Field(
        0.0,
        description="Monthly SIP amount for the first step-up period.",
    )
    step_up_percentage: float = Field(
        0.0,
        description="Percentage increase applied to the SIP at each step-up (e.g. 10 for 10%).",
    )
    step_up_frequency_months: int = Field(12, description="Step-up interval in months; step-ups are applied yearly.")
    tenure_years: int = Field(..., description="Investment horizon in years.")
    annual_return_percentage: float = Field(
        0.0,
        description="Expected annual return in percent (e.g. 12 for 12%).",
    )


class YearRecordOut(BaseModel):
    """Single row of the yearly breakdown."""

    year: int = Field(..., ge=1)
    contribution_this_year: float
    cumulative_invested: float
    value_at_year_end: float
    returns_at_year_end: float

    @field_serializer(
        "contribution_this_year",
        "cumulative_invested",
        "value_at_year_end",
        "returns_at_year_end",
    )
    def _non_finite_as_null(self, value: float) -> Optional[float]:
        return _finite_or_none(value)


class ProjectionResponse(BaseModel):
    """Projected summary plus the yearly breakdown."""

    initial_lump_sum: float
    total_contributions: float
    lump_sum_future_value: float
    contributions_future_value: float
    lump_sum_returns: float
    contributions_returns: float
    total_invested: float
    final_value: float
    total_returns: float
    return_percentage: Optional[float]
    yearly_records: List[YearRecordOut]

    @field_serializer(
        "initial_lump_sum",
        "total_contributions",
        "lump_sum_future_value",
        "contributions_future_value",
        "lump_sum_returns",
        "contributions_returns",
        "total_invested",
        "final_value",
        "total_returns",
        "return_percentage",
    )
    def _non_finite_as_null(self, value: Optional[float]) -> Optional[float]:
        return _finite_or_none(value)


class ReportSummary(BaseModel):
    final_value: str
    total_invested: str
    total_returns: str
    return_percentage: str
    lump_sum_invested: str
    sip_invested: str
    lump_sum_returns: str
    sip_returns: str


class ReportRow(BaseModel):
    year: int
    annual_sip: str
    cumulative_investment: str
    investment_value: str
    returns: str


class ChartDataset(BaseModel):
    label: str
    data: List[float]

    @field_serializer("data")
    def _non_finite_as_null(self, data: List[float]) -> List[Optional[float]]:
        return [_finite_or_none(value) for value in data]


class ChartData(BaseModel):
    labels: List[str]
    datasets: List[ChartDataset]


class ReportResponse(BaseModel):
    """Display-ready rendering of a projection in one currency."""

    currency: str
    summary: ReportSummary
    rows: List[ReportRow]
    chart: ChartData

    def as_table(self) -> List[Dict[str, str]]:
        return [
            {
                "Year": str(row.year),
                "Annual SIP": row.annual_sip,
                "Cumulative Investment": row.cumulative_investment,
                "Investment Value": row.investment_value,
                "Returns": row.returns,
            }
            for row in self.rows
        ]
