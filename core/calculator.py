"""核心计算：固定利率月供公式、图表数据投影"""
import math
from typing import List

from config.settings import CHART_SAMPLE_THRESHOLD
from data_manager.schema import ChartDataPoint, PaymentScheduleEntry


def calc_monthly_payment(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
) -> float:
    """等额本息月供（不取整）

    零利率时按本金平摊；否则 M = P * r * (1+r)^n / ((1+r)^n - 1)。
    (1+r)^n - 1 用 expm1/log1p 计算，极小利率下不丢精度。
    不做参数校验，term_years <= 0 由调用方在校验阶段拦截。
    """
    n = term_years * 12
    if annual_rate_percent == 0:
        return principal / n
    r = annual_rate_percent / 100 / 12
    growth = math.expm1(n * math.log1p(r))
    return principal * r * (growth + 1) / growth


def generate_chart_data(schedule: List[PaymentScheduleEntry]) -> List[ChartDataPoint]:
    """还款计划 -> 图表数据点（逐期投影）"""
    return [
        ChartDataPoint(
            period=i + 1,
            principal=entry.principal_paid,
            interest=entry.interest_paid,
            balance=entry.remaining_balance,
        )
        for i, entry in enumerate(schedule)
    ]


def chart_sample_rate(length: int, short_rate: int = 1) -> int:
    """长期贷款按年抽样，短期贷款用 short_rate"""
    return 12 if length > CHART_SAMPLE_THRESHOLD else short_rate


def sample_chart_data(points: List[ChartDataPoint], rate: int) -> List[ChartDataPoint]:
    """每 rate 个点取一个，并保留最后一期"""
    if rate <= 1:
        return list(points)
    last = len(points) - 1
    return [p for i, p in enumerate(points) if i % rate == 0 or i == last]
