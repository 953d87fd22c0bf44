"""`flask project` command: run a projection from the terminal."""

from typing import Dict, List

import click
from flask import Flask, current_app
from flask.cli import with_appcontext
from pydantic import ValidationError

from sipcalc.core.formatting import CURRENCY_FORMATS, get_currency_format
from sipcalc.core.projection import project
from sipcalc.core.report import build_report
from sipcalc.domain.inputs import InvalidInputError, collect_inputs
from sipcalc.schemas.projection import ProjectionRequest, ReportResponse

INVALID_INPUT_EXIT_CODE = 2


def _render_table(table: List[Dict[str, str]]) -> List[str]:
    headers = list(table[0])
    widths = {h: max(len(h), *(len(row[h]) for row in table)) for h in headers}
    lines = ["  ".join(h.rjust(widths[h]) for h in headers)]
    lines.append("  ".join("-" * widths[h] for h in headers))
    for row in table:
        lines.append("  ".join(row[h].rjust(widths[h]) for h in headers))
    return lines


def render_report(report: ReportResponse) -> List[str]:
    s = report.summary
    lines = [
        f"Final value:       {s.final_value}",
        f"Total invested:    {s.total_invested}",
        f"Total returns:     {s.total_returns} ({s.return_percentage})",
        f"Lump sum:          {s.lump_sum_invested} -> returns {s.lump_sum_returns}",
        f"SIP contributions: {s.sip_invested} -> returns {s.sip_returns}",
        "",
    ]
    lines.extend(_render_table(report.as_table()))
    return lines


@click.command("project")
@click.option("--lump-sum", "initial_lump_sum", type=float, default=0.0, show_default=True)
@click.option("--monthly", "initial_monthly_contribution", type=float, default=0.0, show_default=True)
@click.option("--step-up", "step_up_percentage", type=float, default=0.0, show_default=True,
              help="Percent increase of the SIP at each step-up.")
@click.option("--frequency", "step_up_frequency_months", type=int, default=12, show_default=True,
              help="Step-up interval in months (the step-up is applied yearly).")
@click.option("--years", "tenure_years", type=int, required=True)
@click.option("--rate", "annual_return_percentage", type=float, default=0.0, show_default=True,
              help="Expected annual return in percent.")
@click.option("--currency", type=click.Choice(sorted(CURRENCY_FORMATS), case_sensitive=False), default=None,
              help="Display currency (defaults to DEFAULT_CURRENCY).")
@with_appcontext
def project_command(currency, **fields) -> None:
    """Project a lump sum plus step-up SIP and print the yearly breakdown."""
    settings = current_app.config["SETTINGS"]
    try:
        inputs = collect_inputs(
            ProjectionRequest(**fields),
            max_tenure_years=settings.max_tenure_years,
        )
    except ValidationError as exc:
        for error in exc.errors(include_url=False):
            click.echo(f"error: {error['loc'][0]}: {error['msg']}", err=True)
        click.get_current_context().exit(INVALID_INPUT_EXIT_CODE)
    except InvalidInputError as exc:
        for message in exc.errors:
            click.echo(f"error: {message}", err=True)
        click.get_current_context().exit(INVALID_INPUT_EXIT_CODE)

    fmt = get_currency_format(currency or settings.default_currency)
    report = build_report(project(inputs), fmt)
    for line in render_report(report):
        click.echo(line)


def register_cli(app: Flask) -> None:
    app.cli.add_command(project_command)
