from __future__ import annotations

from sipcalc.core.formatting import CURRENCY_FORMATS
from sipcalc.core.projection import ProjectionInput, project
from sipcalc.core.report import INVESTED_SERIES_LABEL, VALUE_SERIES_LABEL, build_report


def single_year_result():
    return project(
        ProjectionInput(
            initial_lump_sum=100000.0,
            initial_monthly_contribution=5000.0,
            step_up_percentage=10.0,
            step_up_frequency_months=12,
            tenure_years=1,
            annual_return_percentage=12.0,
        )
    )


def test_summary_is_formatted_in_rupees():
    report = build_report(single_year_result(), CURRENCY_FORMATS["INR"])

    assert report.currency == "INR"
    assert report.summary.final_value == "₹1,76,047"
    assert report.summary.total_invested == "₹1,60,000"
    assert report.summary.total_returns == "₹16,047"
    assert report.summary.return_percentage == "10.03%"
    assert report.summary.lump_sum_invested == "₹1,00,000"
    assert report.summary.sip_invested == "₹60,000"
    assert report.summary.lump_sum_returns == "₹12,000"
    assert report.summary.sip_returns == "₹4,047"


def test_rows_and_table():
    report = build_report(single_year_result(), CURRENCY_FORMATS["USD"])

    assert len(report.rows) == 1
    row = report.rows[0]
    assert row.year == 1
    assert row.annual_sip == "$60,000"
    assert row.cumulative_investment == "$160,000"
    assert row.investment_value == "$176,047"
    assert row.returns == "$16,047"

    assert report.as_table() == [
        {
            "Year": "1",
            "Annual SIP": "$60,000",
            "Cumulative Investment": "$160,000",
            "Investment Value": "$176,047",
            "Returns": "$16,047",
        }
    ]


def test_chart_series_use_raw_numbers():
    result = project(
        ProjectionInput(
            initial_lump_sum=1000.0,
            initial_monthly_contribution=100.0,
            step_up_percentage=0.0,
            tenure_years=3,
            annual_return_percentage=6.0,
        )
    )
    chart = build_report(result, CURRENCY_FORMATS["INR"]).chart

    assert chart.labels == ["Year 1", "Year 2", "Year 3"]
    invested, value = chart.datasets
    assert invested.label == INVESTED_SERIES_LABEL
    assert value.label == VALUE_SERIES_LABEL
    assert invested.data == [r.cumulative_invested for r in result.yearly_records]
    assert value.data == [r.value_at_year_end for r in result.yearly_records]
