"""
还款计划生成器

按期迭代摊销：每期利息取决于上一期期末余额，因此只能逐期计算。
支持每月额外还款和每年一次的整笔还款（首个周年，即第 13 期起）。

取整约定：余额在迭代中保留完整精度，只在输出每期记录时取整到分；
累计利息逐期累加已取整的利息，保证等于各期利息之和。
"""
import logging
from datetime import date
from typing import List, Optional

import pandas as pd

from config.constants import SCHEDULE_COLUMNS
from config.settings import AMOUNT_PRECISION, BALANCE_EPSILON, EXTRA_PAYMENT_TERM_MULTIPLIER
from core.calculator import calc_monthly_payment
from data_manager.schema import ExtraPaymentPolicy, PaymentScheduleEntry
from utils.date_utils import get_payment_date

logger = logging.getLogger(__name__)


def is_lump_sum_period(index: int) -> bool:
    """每年整笔还款的期数：13, 25, 37 ...（第 1 期不算）"""
    return index > 1 and index % 12 == 1


def max_schedule_periods(term_years: int, extra_policy: Optional[ExtraPaymentPolicy] = None) -> int:
    """迭代上限：无额外还款为合同期数，有额外还款放宽到合同期数的倍数"""
    term_months = term_years * 12
    if extra_policy is not None and extra_policy.is_active:
        return term_months * EXTRA_PAYMENT_TERM_MULTIPLIER
    return term_months


def generate_schedule(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    extra_policy: Optional[ExtraPaymentPolicy] = None,
    start_date: Optional[date] = None,
) -> List[PaymentScheduleEntry]:
    """生成还款计划

    Args:
        principal: 贷款本金
        annual_rate_percent: 年利率(%)
        term_years: 贷款年限
        extra_policy: 额外还款策略，None 表示按合同还款
        start_date: 计算起始日，第 i 期还款日为起始日 + i 个月；None 取今天

    Returns:
        按期数排序的还款记录，最后一期剩余本金为 0（除非触达迭代上限）
    """
    if start_date is None:
        start_date = date.today()

    r = annual_rate_percent / 100 / 12
    base_payment = calc_monthly_payment(principal, annual_rate_percent, term_years)
    max_periods = max_schedule_periods(term_years, extra_policy)

    schedule = []
    remaining = principal
    cum_interest = 0.0
    index = 1

    while remaining > 0 and index <= max_periods:
        interest = remaining * r
        prin = base_payment - interest

        if extra_policy is not None:
            prin += extra_policy.extra_monthly_amount
            if (extra_policy.lump_sum_enabled and extra_policy.annual_lump_sum > 0
                    and is_lump_sum_period(index)):
                prin += min(extra_policy.annual_lump_sum, remaining)

        # 最后一期只还剩余本金，实付金额按实际本金重算
        if prin > remaining:
            prin = remaining
        payment = interest + prin

        remaining -= prin
        if remaining < BALANCE_EPSILON:
            remaining = 0.0

        interest = round(interest, AMOUNT_PRECISION)
        cum_interest += interest

        schedule.append(PaymentScheduleEntry(
            index=index,
            date=get_payment_date(start_date, index),
            principal_paid=round(prin, AMOUNT_PRECISION),
            interest_paid=round(interest, AMOUNT_PRECISION),
            total_paid=round(payment, AMOUNT_PRECISION),
            remaining_balance=round(remaining, AMOUNT_PRECISION),
            cumulative_interest=round(cum_interest, AMOUNT_PRECISION),
        ))
        index += 1

    if remaining > 0:
        logger.warning(
            "Schedule stopped at %d periods with %.2f outstanding (principal=%.2f, rate=%.3f, term=%dy)",
            max_periods, remaining, principal, annual_rate_percent, term_years,
        )
    logger.debug("Generated %d-period schedule for principal=%.2f", len(schedule), principal)
    return schedule


def schedule_to_frame(schedule: List[PaymentScheduleEntry]) -> pd.DataFrame:
    """还款计划 -> DataFrame（表格、图表、导出共用）"""
    records = [
        {
            "index": e.index,
            "date": e.date.isoformat(),
            "principal_paid": e.principal_paid,
            "interest_paid": e.interest_paid,
            "total_paid": e.total_paid,
            "remaining_balance": e.remaining_balance,
            "cumulative_interest": e.cumulative_interest,
        }
        for e in schedule
    ]
    return pd.DataFrame(records, columns=SCHEDULE_COLUMNS)
