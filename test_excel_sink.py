# =============================================================================
# test_excel_sink.py - writing assembled reports to .xlsx
# =============================================================================

import io
from collections import OrderedDict
from decimal import Decimal

from openpyxl import load_workbook

from config import REPORT_SHEETS
from reports import ReportPeriod, assemble, report_to_bytes, write_workbook


def test_every_section_becomes_a_sheet(tmp_path):
    report = assemble([], [], [], ReportPeriod(10, 2026))
    target = tmp_path / "report.xlsx"

    written = write_workbook(report, str(target))

    assert written == REPORT_SHEETS
    workbook = load_workbook(target)
    assert workbook.sheetnames == REPORT_SHEETS
    sheet = workbook["Booking Financials"]
    assert sheet["A1"].value == "Inquiry ID"
    assert sheet["A2"].value == "No financial data available for this period"


def test_decimal_cells_are_numbers():
    report = OrderedDict([("Totals", [["Name", "Amount"], ["SUMMARY", Decimal("1500.50")]])])
    workbook = load_workbook(io.BytesIO(report_to_bytes(report)))
    assert workbook["Totals"]["B2"].value == 1500.5


def test_long_sheet_names_are_truncated():
    report = {"x" * 40: [["a"]]}
    workbook = load_workbook(io.BytesIO(report_to_bytes(report)))
    assert workbook.sheetnames == ["x" * 31]
