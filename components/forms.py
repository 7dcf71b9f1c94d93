"""表单组件

输入控件不加范围限制，越界值交给 data_validator 统一报错。
Streamlit 每次输入变化都会重跑脚本，只有最新一次输入会被计算。
"""
from typing import Tuple

import streamlit as st

from config.constants import EscrowItem
from config.settings import (
    DEFAULT_LOAN_AMOUNT, DEFAULT_INTEREST_RATE, DEFAULT_TERM_YEARS,
    DEFAULT_PROPERTY_TAX, DEFAULT_HOME_INSURANCE, DEFAULT_PMI, DEFAULT_HOA_FEES,
    DEFAULT_CURRENT_LOAN_AMOUNT, DEFAULT_CURRENT_RATE, DEFAULT_CURRENT_REMAINING_YEARS,
    DEFAULT_NEW_LOAN_AMOUNT, DEFAULT_NEW_RATE, DEFAULT_NEW_TERM_YEARS, DEFAULT_CLOSING_COSTS,
)
from data_manager.schema import (
    EscrowItems, ExtraPaymentPolicy, LoanParameters, RefinanceCosts, RefinanceInputs,
)

_ESCROW_DEFAULTS = {
    EscrowItem.PROPERTY_TAX: DEFAULT_PROPERTY_TAX,
    EscrowItem.HOME_INSURANCE: DEFAULT_HOME_INSURANCE,
    EscrowItem.PMI: DEFAULT_PMI,
    EscrowItem.HOA_FEES: DEFAULT_HOA_FEES,
}


def _loan_inputs(
    key_prefix: str,
    amount_label: str,
    rate_label: str,
    term_label: str,
    default_amount: float,
    default_rate: float,
    default_term: int,
) -> LoanParameters:
    c1, c2, c3 = st.columns(3)
    with c1:
        principal = st.number_input(
            amount_label, value=default_amount, step=5000.0, key=f"{key_prefix}_amount")
    with c2:
        rate = st.number_input(
            rate_label, value=default_rate, step=0.125, format="%.3f", key=f"{key_prefix}_rate")
    with c3:
        term = st.number_input(
            term_label, value=default_term, step=1, key=f"{key_prefix}_term")
    return LoanParameters(principal=principal, annual_rate_percent=rate, term_years=int(term))


def render_mortgage_form(key_prefix: str = "home") -> Tuple[LoanParameters, EscrowItems]:
    """渲染房贷计算器表单，返回 (贷款参数, 年度税费)"""
    loan = _loan_inputs(
        key_prefix,
        "Loan Amount ($)", "Annual Interest Rate (%)", "Loan Term (Years)",
        DEFAULT_LOAN_AMOUNT, DEFAULT_INTEREST_RATE, DEFAULT_TERM_YEARS,
    )

    values = {}
    cols = st.columns(len(_ESCROW_DEFAULTS))
    for col, (item, default) in zip(cols, _ESCROW_DEFAULTS.items()):
        with col:
            values[item.value] = st.number_input(
                f"Annual {item.label} ($)", value=default, step=100.0,
                key=f"{key_prefix}_{item.value}",
            )
    return loan, EscrowItems(**values)


def render_extra_payment_inputs(key_prefix: str = "refi") -> ExtraPaymentPolicy:
    """额外还款输入：每月额外金额 + 每年整笔还款"""
    c1, c2, c3 = st.columns(3)
    with c1:
        extra_monthly = st.number_input(
            "Extra Monthly Payment ($)", value=0.0, step=50.0, key=f"{key_prefix}_extra_monthly")
    with c2:
        annual_extra = st.number_input(
            "Annual Extra Payment ($)", value=0.0, step=500.0, key=f"{key_prefix}_annual_extra")
    with c3:
        st.write("")
        enabled = st.checkbox(
            "Enable annual payment", value=False, key=f"{key_prefix}_annual_enabled",
            help="Applied once a year, starting on the first anniversary (payment #13).",
        )
    return ExtraPaymentPolicy(
        extra_monthly_amount=extra_monthly,
        annual_lump_sum=annual_extra,
        lump_sum_enabled=enabled,
    )


def render_refinance_form(key_prefix: str = "refi") -> RefinanceInputs:
    """渲染再融资表单，返回 RefinanceInputs"""
    st.markdown("#### Current Mortgage")
    current = _loan_inputs(
        f"{key_prefix}_current",
        "Current Loan Balance ($)", "Current Interest Rate (%)", "Remaining Years",
        DEFAULT_CURRENT_LOAN_AMOUNT, DEFAULT_CURRENT_RATE, DEFAULT_CURRENT_REMAINING_YEARS,
    )

    st.markdown("#### New Mortgage")
    new = _loan_inputs(
        f"{key_prefix}_new",
        "New Loan Amount ($)", "New Interest Rate (%)", "New Loan Term (Years)",
        DEFAULT_NEW_LOAN_AMOUNT, DEFAULT_NEW_RATE, DEFAULT_NEW_TERM_YEARS,
    )

    st.markdown("#### Refinance Costs")
    c1, c2 = st.columns(2)
    with c1:
        closing_costs = st.number_input(
            "Closing Costs ($)", value=DEFAULT_CLOSING_COSTS, step=500.0, key=f"{key_prefix}_closing")
    with c2:
        cash_out = st.number_input(
            "Cash Out ($)", value=0.0, step=1000.0, key=f"{key_prefix}_cash_out")

    st.markdown("#### Additional Payments")
    policy = render_extra_payment_inputs(key_prefix)

    return RefinanceInputs(
        current_loan=current,
        new_loan=new,
        costs=RefinanceCosts(closing_costs=closing_costs, cash_out=cash_out),
        extra_policy=policy,
    )


def render_paydown_form(key_prefix: str = "paydown") -> Tuple[LoanParameters, ExtraPaymentPolicy]:
    """渲染加速还款表单：现有贷款 + 额外还款"""
    loan = _loan_inputs(
        key_prefix,
        "Current Loan Balance ($)", "Interest Rate (%)", "Remaining Years",
        DEFAULT_CURRENT_LOAN_AMOUNT, DEFAULT_CURRENT_RATE, DEFAULT_CURRENT_REMAINING_YEARS,
    )
    policy = render_extra_payment_inputs(key_prefix)
    return loan, policy
