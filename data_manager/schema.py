from dataclasses import dataclass, field, replace
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class LoanParameters:
    principal: float
    annual_rate_percent: float  # 年利率(%)，6.5 表示 6.5%
    term_years: int

    @property
    def term_months(self) -> int:
        return self.term_years * 12


@dataclass(frozen=True)
class EscrowItems:
    """随月供一起缴纳、但不参与摊销的年度费用"""
    property_tax: float = 0.0
    home_insurance: float = 0.0
    pmi: float = 0.0
    hoa_fees: float = 0.0

    @property
    def annual_total(self) -> float:
        return self.property_tax + self.home_insurance + self.pmi + self.hoa_fees

    @property
    def monthly_total(self) -> float:
        return self.annual_total / 12


@dataclass(frozen=True)
class ExtraPaymentPolicy:
    extra_monthly_amount: float = 0.0
    annual_lump_sum: float = 0.0
    lump_sum_enabled: bool = False

    @property
    def is_active(self) -> bool:
        return self.extra_monthly_amount > 0 or (
            self.lump_sum_enabled and self.annual_lump_sum > 0
        )


@dataclass(frozen=True)
class PaymentScheduleEntry:
    index: int
    date: date
    principal_paid: float
    interest_paid: float
    total_paid: float
    remaining_balance: float
    cumulative_interest: float


@dataclass(frozen=True)
class ChartDataPoint:
    period: int
    principal: float
    interest: float
    balance: float


@dataclass(frozen=True)
class MortgageSummary:
    monthly_payment: float
    monthly_principal_and_interest: float
    total_interest: float
    total_payments: float
    schedule: List[PaymentScheduleEntry] = field(default_factory=list)

    @property
    def payoff_date(self) -> Optional[date]:
        return self.schedule[-1].date if self.schedule else None


@dataclass(frozen=True)
class ExtraPaymentSummary(MortgageSummary):
    time_saved_months: int = 0
    interest_saved: float = 0.0


@dataclass(frozen=True)
class RefinanceCosts:
    closing_costs: float = 0.0
    cash_out: float = 0.0


@dataclass(frozen=True)
class RefinanceInputs:
    current_loan: LoanParameters
    new_loan: LoanParameters  # 新贷款金额（不含套现）
    costs: RefinanceCosts = field(default_factory=RefinanceCosts)
    extra_policy: ExtraPaymentPolicy = field(default_factory=ExtraPaymentPolicy)

    @property
    def effective_new_loan(self) -> LoanParameters:
        """实际计息的新贷款：套现金额计入本金"""
        return replace(self.new_loan, principal=self.new_loan.principal + self.costs.cash_out)


@dataclass(frozen=True)
class RefinanceResult:
    current_summary: MortgageSummary
    new_summary: MortgageSummary
    new_summary_with_extras: ExtraPaymentSummary
    monthly_savings: float
    total_interest_savings: float
    total_savings: float
    break_even_months: int
    payoff_time_saved: int


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str

    def __str__(self) -> str:
        return self.message
