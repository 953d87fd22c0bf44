"""Presentation of a ProjectionResult: summary cards, yearly table, chart series."""

from __future__ import annotations

from sipcalc.core.formatting import CurrencyFormat, format_currency, format_percentage
from sipcalc.core.projection import ProjectionResult
from sipcalc.schemas.projection import (
    ChartData,
    ChartDataset,
    ReportResponse,
    ReportRow,
    ReportSummary,
)

INVESTED_SERIES_LABEL = "Total Investment"
VALUE_SERIES_LABEL = "Investment Value"


def build_report(result: ProjectionResult, fmt: CurrencyFormat) -> ReportResponse:
    def money(amount: float) -> str:
        return format_currency(amount, fmt)

    summary = ReportSummary(
        final_value=money(result.final_value),
        total_invested=money(result.total_invested),
        total_returns=money(result.total_returns),
        return_percentage=format_percentage(result.return_percentage),
        lump_sum_invested=money(result.initial_lump_sum),
        sip_invested=money(result.total_contributions),
        lump_sum_returns=money(result.lump_sum_returns),
        sip_returns=money(result.contributions_returns),
    )

    rows = [
        ReportRow(
            year=record.year,
            annual_sip=money(record.contribution_this_year),
            cumulative_investment=money(record.cumulative_invested),
            investment_value=money(record.value_at_year_end),
            returns=money(record.returns_at_year_end),
        )
        for record in result.yearly_records
    ]

    # chart keeps raw numbers; the renderer formats axis ticks itself
    chart = ChartData(
        labels=[f"Year {record.year}" for record in result.yearly_records],
        datasets=[
            ChartDataset(
                label=INVESTED_SERIES_LABEL,
                data=[record.cumulative_invested for record in result.yearly_records],
            ),
            ChartDataset(
                label=VALUE_SERIES_LABEL,
                data=[record.value_at_year_end for record in result.yearly_records],
            ),
        ],
    )

    return ReportResponse(currency=fmt.code, summary=summary, rows=rows, chart=chart)
