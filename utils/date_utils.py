from datetime import date
from dateutil.relativedelta import relativedelta


def add_months(d: date, months: int) -> date:
    """日期加 N 个月（月末自动取当月最后一天）"""
    return d + relativedelta(months=months)


def get_payment_date(start_date: date, index: int) -> date:
    """计算第 index 期的还款日"""
    return add_months(start_date, index)
