from enum import Enum


class EscrowItem(str, Enum):
    PROPERTY_TAX = "property_tax"
    HOME_INSURANCE = "home_insurance"
    PMI = "pmi"
    HOA_FEES = "hoa_fees"

    @property
    def label(self) -> str:
        return {
            "property_tax": "Property Tax",
            "home_insurance": "Home Insurance",
            "pmi": "PMI",
            "hoa_fees": "HOA Fees",
        }[self.value]


class CalculatorTab(str, Enum):
    REFINANCE = "refinance"
    PAYDOWN = "paydown"

    @property
    def label(self) -> str:
        return {
            "refinance": "Refinance Analysis",
            "paydown": "Accelerated Paydown",
        }[self.value]


# 列定义
SCHEDULE_COLUMNS = [
    "index", "date", "principal_paid", "interest_paid", "total_paid",
    "remaining_balance", "cumulative_interest",
]

# 还款计划表 / 导出文件使用的列名
SCHEDULE_DISPLAY_NAMES = {
    "index": "Payment #",
    "date": "Date",
    "principal_paid": "Principal",
    "interest_paid": "Interest",
    "total_paid": "Total Payment",
    "remaining_balance": "Remaining Balance",
    "cumulative_interest": "Cumulative Interest",
}

MONEY_COLUMNS = [
    "principal_paid", "interest_paid", "total_paid",
    "remaining_balance", "cumulative_interest",
]
