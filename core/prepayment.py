"""提前还款（加速还款）计算"""
import logging
from datetime import date
from typing import Optional

from core.calculator import calc_monthly_payment
from core.mortgage import calc_mortgage_details
from core.schedule_generator import generate_schedule
from data_manager.schema import ExtraPaymentPolicy, ExtraPaymentSummary, LoanParameters

logger = logging.getLogger(__name__)


def calc_mortgage_with_extras(
    loan: LoanParameters,
    extra_policy: ExtraPaymentPolicy,
    start_date: Optional[date] = None,
) -> ExtraPaymentSummary:
    """
    按额外还款策略重新生成还款计划，并与按合同还款对比。

    - 月供 = 原本息月供 + 每月额外还款（不含整笔还款）
    - 总利息、总还款从新计划逐期累加
    - 节省期数、节省利息相对于无额外还款的计划
    """
    if start_date is None:
        start_date = date.today()

    baseline = calc_mortgage_details(loan, start_date=start_date)

    schedule = generate_schedule(
        loan.principal, loan.annual_rate_percent, loan.term_years,
        extra_policy=extra_policy, start_date=start_date,
    )
    total_interest = sum(e.interest_paid for e in schedule)
    total_payments = sum(e.total_paid for e in schedule)

    base_payment = calc_monthly_payment(loan.principal, loan.annual_rate_percent, loan.term_years)
    monthly_payment = base_payment + extra_policy.extra_monthly_amount

    time_saved = len(baseline.schedule) - len(schedule)
    interest_saved = baseline.total_interest - total_interest

    logger.debug(
        "Extra payments %s: %d periods (saved %d), interest saved %.2f",
        extra_policy, len(schedule), time_saved, interest_saved,
    )
    return ExtraPaymentSummary(
        monthly_payment=monthly_payment,
        monthly_principal_and_interest=base_payment,
        total_interest=total_interest,
        total_payments=total_payments,
        schedule=schedule,
        time_saved_months=time_saved,
        interest_saved=interest_saved,
    )
