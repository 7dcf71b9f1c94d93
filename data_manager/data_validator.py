"""输入校验：收集所有错误一起返回，不在第一条错误处中断"""
import math
from typing import List, Optional

from config.constants import EscrowItem
from config.settings import MAX_INTEREST_RATE, MAX_LOAN_AMOUNT, MAX_TERM_YEARS
from data_manager.schema import (
    EscrowItems, ExtraPaymentPolicy, LoanParameters, RefinanceInputs, ValidationError,
)


def _check_non_negative(value: float, field: str, label: str) -> List[ValidationError]:
    if not math.isfinite(value):
        return [ValidationError(field, f"{label} must be a finite number")]
    if value < 0:
        return [ValidationError(field, f"{label} cannot be negative")]
    return []


def _check_loan(
    loan: LoanParameters,
    prefix: str = "",
    label: str = "",
    max_principal: Optional[float] = None,
) -> List[ValidationError]:
    """校验本金、利率、年限。max_principal 仅首页计算器使用"""
    errors = []
    name = f"{label} " if label else ""

    # NaN 与任何数比较都为 False，必须先排除非有限值
    if not math.isfinite(loan.principal):
        errors.append(ValidationError(
            f"{prefix}principal", f"{name}loan amount must be a finite number".capitalize()))
    elif loan.principal <= 0:
        errors.append(ValidationError(
            f"{prefix}principal", f"{name}loan amount must be greater than 0".capitalize()))
    elif max_principal is not None and loan.principal > max_principal:
        errors.append(ValidationError(
            f"{prefix}principal", f"Loan amount must be less than ${max_principal:,}"))

    rate = loan.annual_rate_percent
    if not math.isfinite(rate):
        errors.append(ValidationError(
            f"{prefix}annual_rate_percent", f"{name}interest rate must be a finite number".capitalize()))
    elif rate < 0 or rate > MAX_INTEREST_RATE:
        errors.append(ValidationError(
            f"{prefix}annual_rate_percent",
            f"{name}interest rate must be between 0% and {MAX_INTEREST_RATE}%".capitalize()))

    term = loan.term_years
    if not math.isfinite(term):
        errors.append(ValidationError(
            f"{prefix}term_years", f"{name}loan term must be a finite number".capitalize()))
    elif term != int(term):
        errors.append(ValidationError(
            f"{prefix}term_years", f"{name}loan term must be a whole number of years".capitalize()))
    elif term <= 0 or term > MAX_TERM_YEARS:
        errors.append(ValidationError(
            f"{prefix}term_years",
            f"{name}loan term must be between 1 and {MAX_TERM_YEARS} years".capitalize()))

    return errors


def validate_mortgage_inputs(
    loan: LoanParameters,
    escrow: Optional[EscrowItems] = None,
) -> List[ValidationError]:
    """校验首页房贷计算器输入，返回错误列表（空列表表示合法）"""
    errors = _check_loan(loan, max_principal=MAX_LOAN_AMOUNT)
    if escrow is not None:
        for item in EscrowItem:
            errors += _check_non_negative(getattr(escrow, item.value), item.value, item.label)
    return errors


def validate_extra_payment_policy(policy: ExtraPaymentPolicy) -> List[ValidationError]:
    """校验额外还款金额"""
    errors = []
    errors += _check_non_negative(policy.extra_monthly_amount, "extra_monthly_amount", "Extra monthly payment")
    errors += _check_non_negative(policy.annual_lump_sum, "annual_lump_sum", "Annual extra payment")
    return errors


def validate_paydown_inputs(loan: LoanParameters, policy: ExtraPaymentPolicy) -> List[ValidationError]:
    """校验加速还款输入（贷款金额无上限）"""
    return _check_loan(loan) + validate_extra_payment_policy(policy)


def validate_refinance_inputs(inputs: RefinanceInputs) -> List[ValidationError]:
    """校验再融资输入（贷款金额无上限）"""
    errors = []
    errors += _check_loan(inputs.current_loan, prefix="current_loan.", label="current")
    errors += _check_loan(inputs.new_loan, prefix="new_loan.", label="new")
    errors += _check_non_negative(inputs.costs.closing_costs, "closing_costs", "Closing costs")
    errors += _check_non_negative(inputs.costs.cash_out, "cash_out", "Cash out")
    errors += validate_extra_payment_policy(inputs.extra_policy)
    return errors
