from __future__ import annotations

from math import isclose

from sipcalc.core.projection import ProjectionInput, project


def test_zero_growth_accumulates_contributions_only():
    """
    With zero expected return, the final value equals what was put in and no year shows returns.
    """
    inputs = ProjectionInput(
        initial_lump_sum=25000.0,
        initial_monthly_contribution=2000.0,
        step_up_percentage=10.0,
        step_up_frequency_months=12,
        tenure_years=5,
        annual_return_percentage=0.0,
    )

    result = project(inputs)

    assert isclose(result.final_value, result.total_invested, rel_tol=1e-12)
    assert isclose(result.total_returns, 0.0, abs_tol=1e-6)
    assert isclose(result.return_percentage, 0.0, abs_tol=1e-9)
    for record in result.yearly_records:
        assert isclose(record.returns_at_year_end, 0.0, abs_tol=1e-6)
        assert isclose(record.value_at_year_end, record.cumulative_invested, rel_tol=1e-12)
