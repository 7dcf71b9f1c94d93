"""指标卡片组件"""
import streamlit as st

from data_manager.schema import ExtraPaymentSummary, MortgageSummary, RefinanceResult
from utils.formatters import fmt_break_even, fmt_currency, fmt_time_period


def _fmt_payoff_date(summary: MortgageSummary) -> str:
    payoff = summary.payoff_date
    return payoff.strftime("%B %Y") if payoff else "-"


def render_mortgage_metrics(summary: MortgageSummary):
    """渲染房贷计算器结果卡片"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Monthly Payment", fmt_currency(summary.monthly_payment))
    with c2:
        st.metric("Principal & Interest", fmt_currency(summary.monthly_principal_and_interest))
    with c3:
        st.metric("Total Interest", fmt_currency(summary.total_interest))
    with c4:
        st.metric("Total of Payments", fmt_currency(summary.total_payments))


def render_refinance_metrics(result: RefinanceResult):
    """渲染再融资对比卡片"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Monthly Savings", fmt_currency(result.monthly_savings))
    with c2:
        st.metric("Total Interest Savings", fmt_currency(result.total_interest_savings))
    with c3:
        st.metric("Break-Even Period", fmt_break_even(result.break_even_months))
    with c4:
        saved = result.payoff_time_saved
        st.metric("Payoff Time Saved", fmt_time_period(saved) if saved > 0 else "None")

    c5, c6, c7 = st.columns(3)
    with c5:
        st.metric("Current Monthly Payment", fmt_currency(result.current_summary.monthly_payment))
    with c6:
        st.metric("New Monthly Payment", fmt_currency(result.new_summary_with_extras.monthly_payment))
    with c7:
        st.metric("Net Savings", fmt_currency(result.total_savings))


def render_paydown_metrics(summary: ExtraPaymentSummary):
    """渲染加速还款结果卡片"""
    c1, c2, c3, c4 = st.columns(4)
    with c1:
        st.metric("Time Saved", fmt_time_period(summary.time_saved_months))
    with c2:
        st.metric("Interest Saved", fmt_currency(summary.interest_saved))
    with c3:
        st.metric("New Payoff Date", _fmt_payoff_date(summary))
    with c4:
        st.metric("Monthly Payment", fmt_currency(summary.monthly_payment))
