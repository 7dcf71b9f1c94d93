"""再融资对比 / 加速还款"""
import logging
from datetime import date

import streamlit as st

from config.constants import CalculatorTab
from components.charts import create_balance_comparison_line, create_comparison_bar
from components.forms import render_paydown_form, render_refinance_form
from components.metrics import render_paydown_metrics, render_refinance_metrics
from components.tables import render_comparison_table, render_schedule_table
from core.calculator import chart_sample_rate, generate_chart_data, sample_chart_data
from core.comparison import compare_refinance_inputs, is_refinance_worthwhile, refinance_comparison_table
from core.mortgage import calc_mortgage_details
from core.prepayment import calc_mortgage_with_extras
from data_manager.data_validator import validate_paydown_inputs, validate_refinance_inputs
from utils.formatters import fmt_break_even, fmt_currency
from utils.log import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Refinance Calculator", page_icon="🔁", layout="wide")
st.title("🔁 Refinance & Accelerated Paydown")

tab_refi, tab_paydown = st.tabs([CalculatorTab.REFINANCE.label, CalculatorTab.PAYDOWN.label])

with tab_refi:
    inputs = render_refinance_form()
    errors = validate_refinance_inputs(inputs)
    if errors:
        logger.info("Refinance inputs rejected: %s", [e.field for e in errors])
        for err in errors:
            st.error(str(err))
    else:
        result = compare_refinance_inputs(inputs, start_date=date.today())

        st.divider()
        if is_refinance_worthwhile(result):
            st.success(
                f"Refinancing looks worthwhile: you could save {fmt_currency(result.total_savings)} "
                f"over the life of the loan with a break-even period of "
                f"{fmt_break_even(result.break_even_months)}."
            )
        else:
            st.warning(
                "The closing costs and terms don't provide sufficient savings. "
                f"Break-even period is {fmt_break_even(result.break_even_months)}."
            )

        render_refinance_metrics(result)

        current_points = generate_chart_data(result.current_summary.schedule)
        new_points = generate_chart_data(result.new_summary_with_extras.schedule)
        rate = chart_sample_rate(max(len(current_points), len(new_points)), short_rate=6)

        comp_df = refinance_comparison_table(result)
        col1, col2 = st.columns(2)
        with col1:
            fig_line = create_balance_comparison_line({
                "Current Mortgage Balance": sample_chart_data(current_points, rate),
                "New Mortgage Balance": sample_chart_data(new_points, rate),
            })
            st.plotly_chart(fig_line, width='stretch', key="refi_balance")
        with col2:
            st.plotly_chart(create_comparison_bar(comp_df), width='stretch', key="refi_bar")

        st.subheader("Side-by-Side Comparison")
        render_comparison_table(comp_df)

        with st.expander("Current Mortgage Schedule"):
            render_schedule_table(result.current_summary.schedule, key_prefix="refi_current")
        with st.expander("New Mortgage Schedule"):
            render_schedule_table(result.new_summary_with_extras.schedule, key_prefix="refi_new")

with tab_paydown:
    loan, policy = render_paydown_form()
    errors = validate_paydown_inputs(loan, policy)
    if errors:
        logger.info("Paydown inputs rejected: %s", [e.field for e in errors])
        for err in errors:
            st.error(str(err))
    else:
        paydown = calc_mortgage_with_extras(loan, policy, start_date=date.today())

        st.divider()
        render_paydown_metrics(paydown)

        baseline = calc_mortgage_details(loan, start_date=date.today())
        base_points = generate_chart_data(baseline.schedule)
        points = generate_chart_data(paydown.schedule)
        rate = chart_sample_rate(len(base_points), short_rate=6)
        fig = create_balance_comparison_line(
            {
                "Original Schedule": sample_chart_data(base_points, rate),
                "With Extra Payments": sample_chart_data(points, rate),
            },
            title="Accelerated Paydown",
        )
        st.plotly_chart(fig, width='stretch', key="paydown_balance")

        with st.expander("View Payment Schedule"):
            render_schedule_table(paydown.schedule, key_prefix="paydown")
