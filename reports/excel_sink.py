# =============================================================================
# reports/excel_sink.py
# =============================================================================
# PURPOSE:
#   Writes an assembled report ({sheet name: rows}) to an .xlsx workbook.
#
# HOW IT WORKS:
#   - Each sheet becomes one worksheet, rows written as-is.
#   - The first row is already the header, so pandas' own header row is
#     switched off.
#   - Decimal cells are written as numbers.
# =============================================================================

import io
from decimal import Decimal

import pandas as pd

from config import EXCEL_ENGINE

# Excel's limit on worksheet names
MAX_SHEET_NAME = 31


def _cell(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


def report_frames(report):
    """{sheet name: DataFrame} with Decimal cells converted for writing."""
    frames = {}
    for sheet, rows in report.items():
        clean = [[_cell(value) for value in row] for row in rows] or [[""]]
        frames[sheet] = pd.DataFrame(clean)
    return frames


def write_workbook(report, target):
    """
    Write every sheet of `report` to `target` (a path or a binary buffer).

    RETURNS:
        list[str]: the worksheet names written, in order
    """
    written = []
    with pd.ExcelWriter(target, engine=EXCEL_ENGINE) as writer:
        for sheet, frame in report_frames(report).items():
            name = sheet[:MAX_SHEET_NAME]
            frame.to_excel(writer, sheet_name=name, header=False, index=False)
            written.append(name)
    print(f"[OK] Wrote workbook with {len(written)} sheets")
    return written


def report_to_bytes(report):
    """The workbook as bytes, for st.download_button."""
    buffer = io.BytesIO()
    write_workbook(report, buffer)
    return buffer.getvalue()
