"""还款计划导出（CSV / Excel），只生成字节流，不落盘"""
from io import BytesIO
from typing import List

import pandas as pd

from config.constants import SCHEDULE_DISPLAY_NAMES
from core.schedule_generator import schedule_to_frame
from data_manager.schema import PaymentScheduleEntry

SCHEDULE_SHEET_NAME = "Payment Schedule"


def _export_frame(schedule: List[PaymentScheduleEntry]) -> pd.DataFrame:
    return schedule_to_frame(schedule).rename(columns=SCHEDULE_DISPLAY_NAMES)


def schedule_to_csv_bytes(schedule: List[PaymentScheduleEntry]) -> bytes:
    return _export_frame(schedule).to_csv(index=False).encode("utf-8")


def schedule_to_excel_bytes(
    schedule: List[PaymentScheduleEntry],
    sheet_name: str = SCHEDULE_SHEET_NAME,
) -> bytes:
    """写入内存中的 xlsx 文件并返回字节"""
    out = BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        _export_frame(schedule).to_excel(writer, sheet_name=sheet_name, index=False)
    return out.getvalue()
