import os

# 日志级别
LOG_LEVEL = os.environ.get("MORTGAGE_LOG_LEVEL", "INFO")

# 首页房贷计算器默认值
DEFAULT_LOAN_AMOUNT = 400000.0
DEFAULT_INTEREST_RATE = 6.5
DEFAULT_TERM_YEARS = 30
DEFAULT_PROPERTY_TAX = 8000.0
DEFAULT_HOME_INSURANCE = 1200.0
DEFAULT_PMI = 0.0
DEFAULT_HOA_FEES = 0.0

# 再融资页面默认值
DEFAULT_CURRENT_LOAN_AMOUNT = 350000.0
DEFAULT_CURRENT_RATE = 7.5
DEFAULT_CURRENT_REMAINING_YEARS = 25
DEFAULT_NEW_LOAN_AMOUNT = 350000.0
DEFAULT_NEW_RATE = 6.0
DEFAULT_NEW_TERM_YEARS = 30
DEFAULT_CLOSING_COSTS = 5000.0

# 输入范围
MAX_LOAN_AMOUNT = 10_000_000
MAX_INTEREST_RATE = 50
MAX_TERM_YEARS = 50

# 剩余本金低于 1 分视为还清
BALANCE_EPSILON = 0.01

# 月供无节省时的回本期数
BREAK_EVEN_NEVER = 999

# 回本期数低于该值且总节省为正时，认为再融资划算
WORTHWHILE_BREAK_EVEN_MONTHS = 60

# 有额外还款时允许的最长期数 = 合同期数 * 该倍数
EXTRA_PAYMENT_TERM_MULTIPLIER = 2

# 图表抽样：超过该期数时按年抽样
CHART_SAMPLE_THRESHOLD = 120

# 页面配置
PAGE_TITLE = "Mortgage Payment Calculator"
PAGE_ICON = "🏠"
LAYOUT = "wide"

# 图表配色
COLORS = {
    "primary": "#2563eb",
    "principal": "#2563eb",
    "interest": "#ef4444",
    "balance": "#10b981",
    "current": "#ef4444",
    "new": "#10b981",
    "escrow": "#f59e0b",
}

# 金额精度
AMOUNT_PRECISION = 2
RATE_PRECISION = 3
