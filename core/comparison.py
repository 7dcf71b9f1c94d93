"""再融资对比计算"""
import logging
import math
from datetime import date
from typing import Optional

import pandas as pd

from config.settings import BREAK_EVEN_NEVER, WORTHWHILE_BREAK_EVEN_MONTHS
from core.mortgage import calc_mortgage_details
from core.prepayment import calc_mortgage_with_extras
from data_manager.schema import (
    ExtraPaymentPolicy, LoanParameters, RefinanceCosts, RefinanceInputs, RefinanceResult,
)

logger = logging.getLogger(__name__)


def calc_break_even_months(closing_costs: float, monthly_savings: float) -> int:
    """回本期数：月供没有节省时返回 BREAK_EVEN_NEVER"""
    if monthly_savings > 0:
        return math.ceil(closing_costs / monthly_savings)
    return BREAK_EVEN_NEVER


def compare_refinance(
    current_loan: LoanParameters,
    new_loan: LoanParameters,
    costs: RefinanceCosts,
    extra_policy: Optional[ExtraPaymentPolicy] = None,
    start_date: Optional[date] = None,
) -> RefinanceResult:
    """
    当前贷款 vs 再融资后的新贷款。

    new_loan 为新贷款金额（不含套现），套现金额在这里并入本金；
    新贷款的对比口径统一使用带额外还款的结果。
    """
    if start_date is None:
        start_date = date.today()
    extra_policy = extra_policy or ExtraPaymentPolicy()
    inputs = RefinanceInputs(current_loan, new_loan, costs, extra_policy)
    effective_new = inputs.effective_new_loan

    current = calc_mortgage_details(current_loan, start_date=start_date)
    new = calc_mortgage_details(effective_new, start_date=start_date)
    new_with_extras = calc_mortgage_with_extras(effective_new, extra_policy, start_date=start_date)

    monthly_savings = current.monthly_payment - new_with_extras.monthly_payment
    total_interest_savings = current.total_interest - new_with_extras.total_interest
    # 套现已计入新贷款本金，不再单独加回
    total_savings = total_interest_savings - costs.closing_costs
    break_even = calc_break_even_months(costs.closing_costs, monthly_savings)
    payoff_time_saved = len(current.schedule) - len(new_with_extras.schedule)

    logger.debug(
        "Refinance: monthly_savings=%.2f, interest_savings=%.2f, break_even=%d",
        monthly_savings, total_interest_savings, break_even,
    )
    return RefinanceResult(
        current_summary=current,
        new_summary=new,
        new_summary_with_extras=new_with_extras,
        monthly_savings=monthly_savings,
        total_interest_savings=total_interest_savings,
        total_savings=total_savings,
        break_even_months=break_even,
        payoff_time_saved=payoff_time_saved,
    )


def is_refinance_worthwhile(result: RefinanceResult) -> bool:
    """总节省为正且回本期数在阈值内"""
    return result.total_savings > 0 and result.break_even_months < WORTHWHILE_BREAK_EVEN_MONTHS


def compare_refinance_inputs(inputs: RefinanceInputs, start_date: Optional[date] = None) -> RefinanceResult:
    """表单记录版本的 compare_refinance"""
    return compare_refinance(
        inputs.current_loan, inputs.new_loan, inputs.costs,
        inputs.extra_policy, start_date=start_date,
    )


def refinance_comparison_table(result: RefinanceResult) -> pd.DataFrame:
    """当前贷款 vs 新贷款关键指标对比表（数值未格式化）"""
    current = result.current_summary
    new = result.new_summary_with_extras
    rows = [
        {
            "metric": "Monthly Payment",
            "current": round(current.monthly_payment, 2),
            "new": round(new.monthly_payment, 2),
            "difference": round(result.monthly_savings, 2),
        },
        {
            "metric": "Total Interest",
            "current": round(current.total_interest, 2),
            "new": round(new.total_interest, 2),
            "difference": round(result.total_interest_savings, 2),
        },
        {
            "metric": "Total Payments",
            "current": round(current.total_payments, 2),
            "new": round(new.total_payments, 2),
            "difference": round(current.total_payments - new.total_payments, 2),
        },
        {
            "metric": "Payoff (months)",
            "current": len(current.schedule),
            "new": len(new.schedule),
            "difference": result.payoff_time_saved,
        },
    ]
    return pd.DataFrame(rows, columns=["metric", "current", "new", "difference"])
