"""格式化表格组件"""
from typing import List

import pandas as pd
import streamlit as st

from config.constants import MONEY_COLUMNS, SCHEDULE_DISPLAY_NAMES
from core.schedule_generator import schedule_to_frame
from data_manager.exporter import schedule_to_csv_bytes, schedule_to_excel_bytes
from data_manager.schema import PaymentScheduleEntry
from utils.formatters import fmt_currency


def render_schedule_table(schedule: List[PaymentScheduleEntry], key_prefix: str = "schedule"):
    """渲染还款计划表格，附带 CSV / Excel 下载"""
    if not schedule:
        st.info("No payment schedule to display")
        return

    display_df = schedule_to_frame(schedule)
    for col in MONEY_COLUMNS:
        display_df[col] = display_df[col].apply(fmt_currency)
    display_df = display_df.rename(columns=SCHEDULE_DISPLAY_NAMES)

    st.caption(f"Total payments: {len(schedule)}")
    st.dataframe(display_df, width='stretch', height=600, hide_index=True)

    c1, c2 = st.columns(2)
    with c1:
        st.download_button(
            "Download CSV", schedule_to_csv_bytes(schedule),
            file_name="payment_schedule.csv", mime="text/csv",
            key=f"{key_prefix}_csv",
        )
    with c2:
        st.download_button(
            "Download Excel", schedule_to_excel_bytes(schedule),
            file_name="payment_schedule.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            key=f"{key_prefix}_xlsx",
        )


def render_comparison_table(comparison_df: pd.DataFrame):
    """渲染当前贷款 vs 新贷款对比表"""
    if comparison_df.empty:
        st.info("No comparison data")
        return

    display = comparison_df.copy()
    money_rows = display["metric"] != "Payoff (months)"
    for col in ["current", "new", "difference"]:
        display[col] = [
            fmt_currency(v) if is_money else str(int(v))
            for v, is_money in zip(display[col], money_rows)
        ]

    display = display.rename(columns={
        "metric": "Metric",
        "current": "Current Mortgage",
        "new": "New Mortgage",
        "difference": "Difference",
    })
    st.dataframe(display, width='stretch', hide_index=True)
