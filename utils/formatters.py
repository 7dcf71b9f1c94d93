from config.settings import BREAK_EVEN_NEVER, RATE_PRECISION


def fmt_currency(value: float) -> str:
    """格式化金额：1234567.891 -> $1,234,567.89，负数 -> -$1,234.00"""
    sign = "-" if round(value, 2) < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def fmt_percentage(rate: float) -> str:
    """格式化利率百分比：6.5 -> 6.500%"""
    return f"{rate:.{RATE_PRECISION}f}%"


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'}"


def fmt_time_period(months: int) -> str:
    """格式化月数为年月：62 -> 5 years, 2 months"""
    if months <= 0:
        return "0 months"
    months = int(round(months))
    years = months // 12
    remain = months % 12
    if years == 0:
        return _plural(remain, "month")
    if remain == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(remain, 'month')}"


def fmt_break_even(months: int) -> str:
    """回本期数：无法回本时显示 Never"""
    if months == BREAK_EVEN_NEVER:
        return "Never"
    return fmt_time_period(months)
