from __future__ import annotations

import io

import pandas as pd

from ..core.constants import REPORT_COLUMNS, REPORT_SHEET_NAME
from .generator import Report


def report_frame(report: Report) -> pd.DataFrame:
    return pd.DataFrame(report.rows, columns=list(REPORT_COLUMNS))


def to_excel_bytes(report: Report) -> bytes:
    """Write the report to a single-sheet .xlsx workbook held in memory."""
    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        report_frame(report).to_excel(writer, sheet_name=REPORT_SHEET_NAME, index=False)
    return buf.getvalue()


def excel_filename(report: Report) -> str:
    return f"{report.basename}.xlsx"
