"""房贷汇总：月供（含税费）、总利息、总还款"""
import logging
from datetime import date
from typing import Optional

from core.calculator import calc_monthly_payment
from core.schedule_generator import generate_schedule
from data_manager.schema import EscrowItems, LoanParameters, MortgageSummary

logger = logging.getLogger(__name__)


def calc_mortgage_details(
    loan: LoanParameters,
    escrow: Optional[EscrowItems] = None,
    start_date: Optional[date] = None,
) -> MortgageSummary:
    """按合同还款的完整房贷结果

    月供 = 本息 + 年度税费/12；税费不参与摊销，
    所以总还款按名义月供 * 期数计算，而不是从还款计划累加。
    """
    escrow = escrow or EscrowItems()

    monthly_pi = calc_monthly_payment(loan.principal, loan.annual_rate_percent, loan.term_years)
    monthly_payment = monthly_pi + escrow.monthly_total

    schedule = generate_schedule(
        loan.principal, loan.annual_rate_percent, loan.term_years,
        start_date=start_date,
    )
    total_interest = sum(e.interest_paid for e in schedule)
    total_payments = monthly_payment * loan.term_months

    logger.debug(
        "Mortgage %s: P&I=%.2f, monthly=%.2f, total_interest=%.2f",
        loan, monthly_pi, monthly_payment, total_interest,
    )
    return MortgageSummary(
        monthly_payment=monthly_payment,
        monthly_principal_and_interest=monthly_pi,
        total_interest=total_interest,
        total_payments=total_payments,
        schedule=schedule,
    )
