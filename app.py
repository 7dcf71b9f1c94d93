"""房贷计算器 - 主入口"""
import logging
from datetime import date

import streamlit as st

from config.settings import PAGE_TITLE, PAGE_ICON, LAYOUT
from components.charts import create_balance_bar, create_payment_breakdown_pie, create_principal_interest_line
from components.forms import render_mortgage_form
from components.metrics import render_mortgage_metrics
from components.tables import render_schedule_table
from core.calculator import chart_sample_rate, generate_chart_data, sample_chart_data
from core.mortgage import calc_mortgage_details
from data_manager.data_validator import validate_mortgage_inputs
from utils.log import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout=LAYOUT,
    initial_sidebar_state="expanded",
)

st.title(f"{PAGE_ICON} {PAGE_TITLE}")

loan, escrow = render_mortgage_form()

errors = validate_mortgage_inputs(loan, escrow)
if errors:
    logger.info("Mortgage inputs rejected: %s", [e.field for e in errors])
    for err in errors:
        st.error(str(err))
    st.stop()

summary = calc_mortgage_details(loan, escrow, start_date=date.today())

st.divider()
render_mortgage_metrics(summary)

points = generate_chart_data(summary.schedule)

col1, col2 = st.columns(2)
with col1:
    fig_pie = create_payment_breakdown_pie(summary.monthly_principal_and_interest, escrow)
    st.plotly_chart(fig_pie, width='stretch', key="home_pie")
with col2:
    fig_line = create_principal_interest_line(
        sample_chart_data(points, chart_sample_rate(len(points), short_rate=1)))
    st.plotly_chart(fig_line, width='stretch', key="home_line")

fig_balance = create_balance_bar(sample_chart_data(points, chart_sample_rate(len(points), short_rate=6)))
st.plotly_chart(fig_balance, width='stretch', key="home_balance")

with st.expander("View Payment Schedule"):
    render_schedule_table(summary.schedule, key_prefix="home")

# 侧边栏
with st.sidebar:
    st.markdown("### About")
    st.markdown(
        "Fixed-rate mortgage calculator. Use the **refinance** page to compare "
        "a refinance or plan extra payments."
    )
