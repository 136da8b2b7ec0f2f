# =============================================================================
# test_report.py - period report and salary statement assembly
# =============================================================================

from datetime import date
from decimal import Decimal

import pytest

from config import REPORT_SHEETS, STATEMENT_SHEETS
from ledger import BookingFinancialEntry, CommissionLine, ProductOrderFinancialEntry
from reports import ReportPeriod, assemble, assemble_salary_statement

PERIOD = ReportPeriod(month=10, year=2026)


def _find(rows, label):
    for row in rows:
        if row and row[0] == label:
            return row
    raise AssertionError(f"No row labelled {label!r}")


@pytest.fixture
def scenario(packages, make_booking, make_order):
    entry = BookingFinancialEntry(
        package_category="Wedding",
        package_name="Gold",
        package_amount=50000,
        company_expenses=35000,
        final_amount=50000,
        commission_lines=[CommissionLine("Amal", 10000), CommissionLine("Nimal", 5000)],
    )
    bookings = [
        make_booking("Gold", staff=["Amal", "Nimal"], entry=entry),
        make_booking("Silver", staff=[], event_type=""),
        make_booking("Platinum", staff=["Kasun"]),
    ]
    orders = [
        make_order(
            total="5000",
            staff=["Amal"],
            entry=ProductOrderFinancialEntry(
                order_amount=5000, studio_fee=1000, profit=3000,
                commission_lines=[CommissionLine("Amal", 1000)],
            ),
        ),
        make_order(total="2500", staff=["Nimal"]),
    ]
    return bookings, orders, packages


# -----------------------------------------------------------------------------
# PERIOD
# -----------------------------------------------------------------------------

def test_period_label_and_file_name():
    assert PERIOD.label == "October 2026"
    assert PERIOD.file_name("studio-report") == "studio-report-10-2026.xlsx"


def test_period_rejects_bad_month():
    with pytest.raises(ValueError):
        ReportPeriod(month=13, year=2026)


# -----------------------------------------------------------------------------
# EMPTY PERIOD
# -----------------------------------------------------------------------------

def test_empty_period_has_every_section():
    report = assemble([], [], [], PERIOD, generated_on=date(2026, 10, 31))

    assert list(report.keys()) == REPORT_SHEETS
    for sheet, rows in report.items():
        assert rows, sheet

    assert report["Booking Financials"][1] == ["No financial data available for this period"]
    assert report["Product Order Financials"][1] == ["No financial data available for this period"]
    assert report["Booking Details"][0][0] == "Inquiry ID"
    assert len(report["Salary Sheet"]) == 2

    summary = report["Financial Summary"]
    assert _find(summary, "Report Period:") == ["Report Period:", "October 2026"]
    assert ["No bookings or product orders recorded for this period"] in summary
    assert _find(summary, "Generated on:") == ["Generated on:", "2026-10-31"]
    assert _find(summary, "Generated by:") == ["Generated by:", "Studio Management System"]


# -----------------------------------------------------------------------------
# FULL PERIOD
# -----------------------------------------------------------------------------

def test_detail_sheets(scenario):
    bookings, orders, packages = scenario
    report = assemble(bookings, orders, packages, PERIOD)

    details = report["Booking Details"]
    assert len(details) == 1 + len(bookings)
    assert details[1][7] == "Amal, Nimal"
    assert details[1][8] == "Rs. 50,000"
    assert details[2][7] == "Unassigned"
    assert details[3][8] == "N/A"

    assert len(report["Product Orders"]) == 1 + len(orders)
    assert report["Product Orders"][1][4] == Decimal("5000")


def test_financial_sheets_only_list_reconciled_entities(scenario):
    bookings, orders, packages = scenario
    report = assemble(bookings, orders, packages, PERIOD)

    booking_financials = report["Booking Financials"]
    assert len(booking_financials) == 3  # header, one entry, SUMMARY
    summary = booking_financials[-1]
    assert summary[0] == "SUMMARY"
    assert summary[4] == Decimal("50000")   # package amount
    assert summary[5] == Decimal("15000")   # photographer expenses
    assert booking_financials[1][-1] == "Amal: 10,000.00; Nimal: 5,000.00"

    order_financials = report["Product Order Financials"]
    assert len(order_financials) == 3
    assert order_financials[-1][0] == "SUMMARY"
    assert order_financials[-1][2] == Decimal("5000")


def test_analytics_sheets(scenario):
    bookings, orders, packages = scenario
    report = assemble(bookings, orders, packages, PERIOD)

    analytics = report["Package Analytics"]
    assert analytics[1] == ["Gold", 1, Decimal("50000")]
    assert [row[0] for row in analytics[1:]] == ["Gold", "Silver", "Bronze"]

    staff = {row[0]: row for row in report["Staff Performance"][1:]}
    assert staff["Amal"][2] == Decimal("25000")
    assert staff["Unassigned"][1] == 1
    assert staff["Kasun"][2] == Decimal("0")

    categories = dict(tuple(row) for row in report["Category Breakdown"][1:])
    assert categories == {"Wedding": 2, "Uncategorized": 1}


def test_financial_summary_figures(scenario):
    bookings, orders, packages = scenario
    summary = assemble(bookings, orders, packages, PERIOD)["Financial Summary"]

    assert _find(summary, "Total Bookings:")[1] == 3
    assert _find(summary, "Total Estimated Revenue:")[1] == Decimal("80000")
    assert _find(summary, "Reconciled Booking Revenue:")[1] == Decimal("50000")
    assert _find(summary, "Product Order Revenue:")[1] == Decimal("7500")
    assert _find(summary, "Total Commissions:")[1] == Decimal("16000")
    assert _find(summary, "Unpriced Packages:")[1] == "Platinum"


def test_earnings_sheets(scenario):
    bookings, orders, packages = scenario
    report = assemble(bookings, orders, packages, PERIOD)

    photographers = report["Photographer Earnings"]
    assert photographers[1] == ["Amal", 1, Decimal("10000")]
    assert photographers[-1] == ["SUMMARY", 2, Decimal("15000")]

    salary = report["Salary Sheet"]
    assert salary[1] == ["Amal", Decimal("10000"), Decimal("1000"), Decimal("11000")]
    assert salary[-1] == ["SUMMARY", Decimal("15000"), Decimal("1000"), Decimal("16000")]


# -----------------------------------------------------------------------------
# SALARY STATEMENT
# -----------------------------------------------------------------------------

def test_salary_statement(scenario):
    bookings, orders, _ = scenario
    statement = assemble_salary_statement(bookings, orders, "Amal", PERIOD)

    assert list(statement.keys()) == STATEMENT_SHEETS
    assert _find(statement["Salary Summary"], "Total Earnings:")[1] == Decimal("11000")
    assert statement["Booking Earnings"][-1][-1] == Decimal("10000")
    assert statement["Product Order Earnings"][1][0] == "ORD-1"


def test_salary_statement_without_earnings(scenario):
    bookings, orders, _ = scenario
    statement = assemble_salary_statement(bookings, orders, "Kasun", PERIOD)

    assert ["No earnings recorded for this period"] in statement["Salary Summary"]
    assert statement["Booking Earnings"][1] == ["No booking commissions recorded for this period"]
    assert statement["Product Order Earnings"][1] == ["No product order commissions recorded for this period"]
