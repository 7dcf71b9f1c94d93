import logging
from datetime import date
from pathlib import Path

import click

from core.comparison import compare_refinance, is_refinance_worthwhile, refinance_comparison_table
from core.mortgage import calc_mortgage_details
from core.prepayment import calc_mortgage_with_extras
from core.schedule_generator import generate_schedule
from data_manager.data_validator import (
    validate_mortgage_inputs,
    validate_paydown_inputs,
    validate_refinance_inputs,
)
from data_manager.exporter import schedule_to_csv_bytes, schedule_to_excel_bytes
from data_manager.schema import (
    EscrowItems, ExtraPaymentPolicy, LoanParameters, RefinanceCosts, RefinanceInputs,
)
from utils.formatters import fmt_break_even, fmt_currency, fmt_percentage, fmt_time_period
from utils.log import setup_logging

logger = logging.getLogger(__name__)


def _policy(extra_monthly, annual_extra):
    return ExtraPaymentPolicy(
        extra_monthly_amount=extra_monthly,
        annual_lump_sum=annual_extra,
        lump_sum_enabled=annual_extra > 0,
    )


def _fail_on_errors(errors):
    if errors:
        logger.info("CLI inputs rejected: %s", [e.field for e in errors])
        raise click.ClickException("\n".join(str(e) for e in errors))


def _fmt_date(d):
    return d.strftime("%B %Y") if d else "-"


@click.group()
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR']), default=None,
              help='Overrides MORTGAGE_LOG_LEVEL')
def cli(log_level):
    """Fixed-rate mortgage and refinance calculator."""
    if log_level:
        setup_logging(log_level)
    else:
        setup_logging()


@cli.command()
@click.option('--principal', type=float, required=True, help='Loan amount')
@click.option('--rate', type=float, required=True, help='Annual interest rate (%)')
@click.option('--years', type=float, required=True, help='Loan term in years')
@click.option('--property-tax', type=float, default=0.0, help='Annual property tax')
@click.option('--home-insurance', type=float, default=0.0, help='Annual home insurance')
@click.option('--pmi', type=float, default=0.0, help='Annual PMI')
@click.option('--hoa-fees', type=float, default=0.0, help='Annual HOA fees')
def payment(principal, rate, years, property_tax, home_insurance, pmi, hoa_fees):
    """Monthly payment and loan totals."""
    loan = LoanParameters(principal, rate, years)
    escrow = EscrowItems(property_tax, home_insurance, pmi, hoa_fees)
    _fail_on_errors(validate_mortgage_inputs(loan, escrow))

    loan = LoanParameters(principal, rate, int(years))
    summary = calc_mortgage_details(loan, escrow)
    click.echo(f"Interest rate: {fmt_percentage(rate)}")
    click.echo(f"Monthly payment: {fmt_currency(summary.monthly_payment)}")
    click.echo(f"Principal & interest: {fmt_currency(summary.monthly_principal_and_interest)}")
    click.echo(f"Total interest: {fmt_currency(summary.total_interest)}")
    click.echo(f"Total of payments: {fmt_currency(summary.total_payments)}")
    click.echo(f"Payoff date: {_fmt_date(summary.payoff_date)}")


@cli.command()
@click.option('--principal', type=float, required=True, help='Loan amount')
@click.option('--rate', type=float, required=True, help='Annual interest rate (%)')
@click.option('--years', type=float, required=True, help='Loan term in years')
@click.option('--extra-monthly', type=float, default=0.0, help='Extra principal paid every month')
@click.option('--annual-extra', type=float, default=0.0, help='Extra principal paid once a year from payment #13')
@click.option('--start-date', type=click.DateTime(formats=['%Y-%m-%d']), default=None,
              help='Start date (YYYY-MM-DD), defaults to today')
@click.option('--output', type=click.Path(dir_okay=False, path_type=Path), default=None,
              help='Write to a .csv or .xlsx file instead of stdout')
def schedule(principal, rate, years, extra_monthly, annual_extra, start_date, output):
    """Amortization schedule as CSV (or Excel with --output *.xlsx)."""
    loan = LoanParameters(principal, rate, years)
    policy = _policy(extra_monthly, annual_extra)
    _fail_on_errors(validate_paydown_inputs(loan, policy))

    start = start_date.date() if start_date else date.today()
    entries = generate_schedule(principal, rate, int(years), extra_policy=policy, start_date=start)

    if output is None:
        click.echo(schedule_to_csv_bytes(entries).decode("utf-8"), nl=False)
        return
    if output.suffix.lower() == ".xlsx":
        output.write_bytes(schedule_to_excel_bytes(entries))
    else:
        output.write_bytes(schedule_to_csv_bytes(entries))
    click.echo(f"Wrote {len(entries)} payments to {output}")


@cli.command()
@click.option('--principal', type=float, required=True, help='Current loan balance')
@click.option('--rate', type=float, required=True, help='Annual interest rate (%)')
@click.option('--years', type=float, required=True, help='Remaining years')
@click.option('--extra-monthly', type=float, default=0.0, help='Extra principal paid every month')
@click.option('--annual-extra', type=float, default=0.0, help='Extra principal paid once a year from payment #13')
def paydown(principal, rate, years, extra_monthly, annual_extra):
    """Effect of extra payments on an existing loan."""
    loan = LoanParameters(principal, rate, years)
    policy = _policy(extra_monthly, annual_extra)
    _fail_on_errors(validate_paydown_inputs(loan, policy))

    summary = calc_mortgage_with_extras(LoanParameters(principal, rate, int(years)), policy)
    click.echo(f"Monthly payment: {fmt_currency(summary.monthly_payment)}")
    click.echo(f"Time saved: {fmt_time_period(summary.time_saved_months)}")
    click.echo(f"Interest saved: {fmt_currency(summary.interest_saved)}")
    click.echo(f"New payoff date: {_fmt_date(summary.payoff_date)}")


@cli.command()
@click.option('--current-balance', type=float, required=True, help='Current loan balance')
@click.option('--current-rate', type=float, required=True, help='Current annual interest rate (%)')
@click.option('--current-years', type=float, required=True, help='Remaining years on the current loan')
@click.option('--new-amount', type=float, required=True, help='New loan amount (before cash out)')
@click.option('--new-rate', type=float, required=True, help='New annual interest rate (%)')
@click.option('--new-years', type=float, required=True, help='New loan term in years')
@click.option('--closing-costs', type=float, default=0.0, help='Closing costs')
@click.option('--cash-out', type=float, default=0.0, help='Cash taken out, added to the new loan')
@click.option('--extra-monthly', type=float, default=0.0, help='Extra principal paid every month on the new loan')
@click.option('--annual-extra', type=float, default=0.0, help='Extra principal paid once a year on the new loan')
def refinance(current_balance, current_rate, current_years, new_amount, new_rate, new_years,
              closing_costs, cash_out, extra_monthly, annual_extra):
    """Compare the current mortgage with a refinance."""
    inputs = RefinanceInputs(
        current_loan=LoanParameters(current_balance, current_rate, current_years),
        new_loan=LoanParameters(new_amount, new_rate, new_years),
        costs=RefinanceCosts(closing_costs=closing_costs, cash_out=cash_out),
        extra_policy=_policy(extra_monthly, annual_extra),
    )
    _fail_on_errors(validate_refinance_inputs(inputs))

    result = compare_refinance(
        LoanParameters(current_balance, current_rate, int(current_years)),
        LoanParameters(new_amount, new_rate, int(new_years)),
        inputs.costs,
        inputs.extra_policy,
    )
    click.echo("--- Side-by-Side Comparison ---")
    click.echo(refinance_comparison_table(result).to_string(index=False))
    click.echo(f"\nMonthly savings: {fmt_currency(result.monthly_savings)}")
    click.echo(f"Net savings: {fmt_currency(result.total_savings)}")
    click.echo(f"Break-even: {fmt_break_even(result.break_even_months)}")
    verdict = "worthwhile" if is_refinance_worthwhile(result) else "not worthwhile"
    click.echo(f"Refinancing is {verdict}")


if __name__ == "__main__":
    cli()
