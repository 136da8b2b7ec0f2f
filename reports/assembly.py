# =============================================================================
# reports/assembly.py
# =============================================================================
# PURPOSE:
#   Turns a period's bookings, product orders and packages into named
#   tables ("sheets") ready to be written to a spreadsheet.
#
# OUTPUT SHAPE:
#   OrderedDict {sheet name: rows}, rows being lists of cell values.
#   The first row of a sheet is its header row. Money cells are Decimals;
#   the sink decides how to write them.
#
# THE PERIOD REPORT (assemble), in this order:
#    1. Booking Details              6. Category Breakdown
#    2. Product Orders               7. Financial Summary
#    3. Product Order Financials     8. Booking Financials
#    4. Package Analytics            9. Photographer Earnings
#    5. Staff Performance           10. Salary Sheet
#
# NEVER AN EMPTY SHEET:
#   Every sheet is always present. If there is nothing to show, it holds
#   its header and one explanatory row ("No financial data available for
#   this period") so whoever opens the file knows it was checked.
#
# SUMMARY ROWS:
#   Financial sheets end with a "SUMMARY" row of column totals.
# =============================================================================

import calendar
from collections import OrderedDict
from dataclasses import dataclass
from datetime import date

from config import (
    FIELD_LABELS,
    GENERATED_BY,
    NOT_AVAILABLE,
    PLACEHOLDERS,
    SUMMARY_LABEL,
    UNASSIGNED_LABEL,
    SHEET_BOOKING_DETAILS,
    SHEET_PRODUCT_ORDERS,
    SHEET_PRODUCT_ORDER_FINANCIALS,
    SHEET_PACKAGE_ANALYTICS,
    SHEET_STAFF_PERFORMANCE,
    SHEET_CATEGORY_BREAKDOWN,
    SHEET_FINANCIAL_SUMMARY,
    SHEET_BOOKING_FINANCIALS,
    SHEET_PHOTOGRAPHER_EARNINGS,
    SHEET_SALARY,
    SHEET_STATEMENT_SUMMARY,
    SHEET_STATEMENT_BOOKINGS,
    SHEET_STATEMENT_PRODUCTS,
)
from ledger.models import BookingFinancialEntry, ProductOrderFinancialEntry, as_staff
from utils.money import ZERO, QUANTUM, to_money
from .aggregations import (
    package_stats,
    staff_stats,
    category_stats,
    total_income,
    find_unpriced_packages,
)
from .salary import (
    compute_salary,
    booking_earnings,
    salary_rows,
    salary_summary,
    staff_statement,
)


@dataclass(frozen=True)
class ReportPeriod:
    month: int
    year: int

    def __post_init__(self):
        if not 1 <= int(self.month) <= 12:
            raise ValueError(f"Month must be 1-12, got {self.month}")

    @property
    def label(self):
        """e.g. "October 2026" """
        return f"{calendar.month_name[int(self.month)]} {int(self.year)}"

    def file_name(self, prefix="report"):
        return f"{prefix}-{int(self.month):02d}-{int(self.year)}.xlsx"


# =============================================================================
# HELPERS
# =============================================================================

def _money(value):
    return to_money(value).quantize(QUANTUM)


def _text(value):
    if value is None:
        return NOT_AVAILABLE
    text = str(value).strip()
    return text or NOT_AVAILABLE


def _date_text(value):
    """First 10 chars of an ISO date/timestamp ("2026-10-19T..." -> "2026-10-19")."""
    if not value:
        return NOT_AVAILABLE
    return str(value)[:10]


def _staff_text(staff):
    names = [as_staff(item).name for item in staff or ()]
    return ", ".join(names) if names else UNASSIGNED_LABEL


def _split_text(lines):
    """Commission split as "Amal: 5,000.00; Nimal: 2,500.00"."""
    if not lines:
        return ""
    return "; ".join(f"{line.staff_name}: {line.amount:,.2f}" for line in lines)


def _placeholder(sheet, headers):
    return [list(headers), [PLACEHOLDERS[sheet]]]


def _summary_row(rows, money_columns, label_column=0):
    """SUMMARY row with column totals for the given money column indexes."""
    width = max(money_columns) + 1
    summary = [""] * width
    summary[label_column] = SUMMARY_LABEL
    for index in money_columns:
        summary[index] = _money(sum((row[index] for row in rows), ZERO))
    return summary


# =============================================================================
# SHEETS: RAW DETAIL
# =============================================================================

def booking_details_sheet(bookings, packages):
    headers = [
        "Inquiry ID", "Client Name", "Email", "Event Type", "Package",
        "Event Date", "Status", "Assigned Staff", "Package Price", "Contact Date",
    ]
    if not bookings:
        return _placeholder(SHEET_BOOKING_DETAILS, headers)

    price_labels = {}
    for package in packages or ():
        price_labels.setdefault(package.name, package.price)

    rows = [headers]
    for booking in bookings:
        rows.append([
            _text(booking.inquiry_id),
            booking.full_name,
            booking.email,
            _text(booking.event_type),
            _text(booking.package_name),
            _date_text(booking.event_date),
            _text(booking.status),
            _staff_text(booking.assigned_staff),
            _text(price_labels.get(booking.package_name)),
            _date_text(booking.created_at),
        ])
    return rows


def product_orders_sheet(product_orders):
    headers = ["Order ID", "Customer", "Status", "Assigned Staff", "Order Total", "Order Date"]
    if not product_orders:
        return _placeholder(SHEET_PRODUCT_ORDERS, headers)

    rows = [headers]
    for order in product_orders:
        rows.append([
            _text(order.order_id),
            order.customer_name,
            _text(order.status),
            _staff_text(order.assigned_staff),
            _money(order.total_amount),
            _date_text(order.created_at),
        ])
    return rows


# =============================================================================
# SHEETS: FINANCIAL BREAKDOWNS
# =============================================================================

def product_order_financials_sheet(product_orders):
    money_fields = list(ProductOrderFinancialEntry.MONEY_FIELDS)
    headers = ["Order ID", "Customer"] + [FIELD_LABELS[f] for f in money_fields] + ["Commission Split"]

    reconciled = [order for order in product_orders or () if order.financial_entry is not None]
    if not reconciled:
        return _placeholder(SHEET_PRODUCT_ORDER_FINANCIALS, headers)

    rows = []
    for order in reconciled:
        entry = order.financial_entry
        rows.append(
            [_text(order.order_id), order.customer_name]
            + [_money(getattr(entry, f)) for f in money_fields]
            + [_split_text(entry.commission_lines)]
        )
    money_columns = list(range(2, 2 + len(money_fields)))
    return [headers] + rows + [_summary_row(rows, money_columns)]


def booking_financials_sheet(bookings):
    money_fields = list(BookingFinancialEntry.MONEY_FIELDS)
    headers = (
        ["Inquiry ID", "Client Name", "Package Category", "Package Name"]
        + [FIELD_LABELS[f] for f in money_fields]
        + ["Commission Split"]
    )

    reconciled = [booking for booking in bookings or () if booking.financial_entry is not None]
    if not reconciled:
        return _placeholder(SHEET_BOOKING_FINANCIALS, headers)

    rows = []
    for booking in reconciled:
        entry = booking.financial_entry
        rows.append(
            [
                _text(booking.inquiry_id),
                booking.full_name,
                _text(entry.package_category or booking.event_type),
                _text(entry.package_name or booking.package_name),
            ]
            + [_money(getattr(entry, f)) for f in money_fields]
            + [_split_text(entry.commission_lines)]
        )
    money_columns = list(range(4, 4 + len(money_fields)))
    return [headers] + rows + [_summary_row(rows, money_columns)]


# =============================================================================
# SHEETS: ANALYTICS
# =============================================================================

def package_analytics_sheet(bookings, packages):
    headers = ["Package Name", "Booking Count", "Total Revenue"]
    if not bookings:
        return _placeholder(SHEET_PACKAGE_ANALYTICS, headers)

    stats = package_stats(bookings, packages)
    if not stats:
        return _placeholder(SHEET_PACKAGE_ANALYTICS, headers)

    ordered = sorted(stats.items(), key=lambda item: item[1]["revenue"], reverse=True)
    return [headers] + [[name, s["count"], _money(s["revenue"])] for name, s in ordered]


def staff_performance_sheet(bookings, packages):
    headers = ["Staff Member", "Assigned Bookings", "Revenue Share", "Assignment IDs"]
    if not bookings:
        return _placeholder(SHEET_STAFF_PERFORMANCE, headers)

    stats = staff_stats(bookings, packages)
    ordered = sorted(stats.values(), key=lambda s: s["revenue"], reverse=True)
    return [headers] + [
        [s["staff_name"], s["count"], _money(s["revenue"]), ", ".join(s["assignments"])]
        for s in ordered
    ]


def category_breakdown_sheet(bookings):
    headers = ["Event Category", "Booking Count"]
    if not bookings:
        return _placeholder(SHEET_CATEGORY_BREAKDOWN, headers)

    stats = category_stats(bookings)
    ordered = sorted(stats.items(), key=lambda item: item[1], reverse=True)
    return [headers] + [[category, count] for category, count in ordered]


def financial_summary_sheet(bookings, product_orders, packages, period, generated_on=None):
    """Single-figure summary of the period."""
    generated_on = generated_on or date.today()
    bookings = bookings or []
    product_orders = product_orders or []

    reconciled_bookings = [b for b in bookings if b.financial_entry is not None]
    reconciled_orders = [o for o in product_orders if o.financial_entry is not None]
    salary = compute_salary(bookings, product_orders)
    totals = salary_summary(salary)

    rows = [
        ["Monthly Financial Summary"],
        [""],
        ["Report Period:", period.label],
    ]
    if not bookings and not product_orders:
        rows.append([PLACEHOLDERS[SHEET_FINANCIAL_SUMMARY]])

    rows += [
        ["Total Bookings:", len(bookings)],
        ["Total Estimated Revenue:", _money(total_income(bookings, packages))],
        ["Reconciled Bookings:", len(reconciled_bookings)],
        ["Reconciled Booking Revenue:", _money(sum((b.financial_entry.package_amount for b in reconciled_bookings), ZERO))],
        ["Total Product Orders:", len(product_orders)],
        ["Product Order Revenue:", _money(sum((o.total_amount for o in product_orders), ZERO))],
        ["Reconciled Product Orders:", len(reconciled_orders)],
        ["Total Commissions:", _money(totals.total_earnings)],
    ]

    unpriced = find_unpriced_packages(bookings, packages)
    if unpriced:
        rows.append(["Unpriced Packages:", ", ".join(unpriced)])

    rows += [
        [""],
        ["Generated on:", generated_on.isoformat()],
        ["Generated by:", GENERATED_BY],
    ]
    return rows


# =============================================================================
# SHEETS: EARNINGS
# =============================================================================

def photographer_earnings_sheet(bookings):
    headers = ["Staff Member", "Bookings", "Total Earnings"]
    earnings = booking_earnings(bookings)
    if not earnings:
        return _placeholder(SHEET_PHOTOGRAPHER_EARNINGS, headers)

    ordered = sorted(earnings.values(), key=lambda r: r["staff_name"])
    ordered = sorted(ordered, key=lambda r: r["amount"], reverse=True)
    rows = [[r["staff_name"], r["count"], _money(r["amount"])] for r in ordered]
    summary = [SUMMARY_LABEL, sum(r[1] for r in rows), _money(sum((r[2] for r in rows), ZERO))]
    return [headers] + rows + [summary]


def salary_sheet(bookings, product_orders):
    headers = ["Staff Member", "Booking Earnings", "Product Order Earnings", "Total Earnings"]
    salary = compute_salary(bookings, product_orders)
    if not salary:
        return _placeholder(SHEET_SALARY, headers)

    def as_row(row):
        return [row.staff_name, _money(row.booking_earnings), _money(row.product_earnings), _money(row.total_earnings)]

    return [headers] + [as_row(r) for r in salary_rows(salary)] + [as_row(salary_summary(salary))]


# =============================================================================
# ASSEMBLY
# =============================================================================

def assemble(bookings, product_orders, packages, period, generated_on=None):
    """
    Build the full period report.

    PARAMETERS:
        bookings (list[Booking]): bookings already filtered to the period
        product_orders (list[ProductOrder]): orders already filtered to the period
        packages (list[ServicePackage]): price reference data
        period (ReportPeriod): used for labels only
        generated_on (date): defaults to today

    RETURNS:
        OrderedDict: {sheet name: rows}, every sheet always present
    """
    bookings = list(bookings or [])
    product_orders = list(product_orders or [])
    packages = list(packages or [])

    report = OrderedDict()
    report[SHEET_BOOKING_DETAILS] = booking_details_sheet(bookings, packages)
    report[SHEET_PRODUCT_ORDERS] = product_orders_sheet(product_orders)
    report[SHEET_PRODUCT_ORDER_FINANCIALS] = product_order_financials_sheet(product_orders)
    report[SHEET_PACKAGE_ANALYTICS] = package_analytics_sheet(bookings, packages)
    report[SHEET_STAFF_PERFORMANCE] = staff_performance_sheet(bookings, packages)
    report[SHEET_CATEGORY_BREAKDOWN] = category_breakdown_sheet(bookings)
    report[SHEET_FINANCIAL_SUMMARY] = financial_summary_sheet(
        bookings, product_orders, packages, period, generated_on
    )
    report[SHEET_BOOKING_FINANCIALS] = booking_financials_sheet(bookings)
    report[SHEET_PHOTOGRAPHER_EARNINGS] = photographer_earnings_sheet(bookings)
    report[SHEET_SALARY] = salary_sheet(bookings, product_orders)
    return report


def assemble_salary_statement(bookings, product_orders, staff_name, period, generated_on=None):
    """
    Personal salary report for one staff member.

    Sheets: Salary Summary, Booking Earnings, Product Order Earnings.
    Each sheet falls back to a placeholder row when there is nothing to show.
    """
    generated_on = generated_on or date.today()
    booking_lines, product_lines = staff_statement(bookings, product_orders, staff_name)

    booking_total = sum((amount for _, amount in booking_lines), ZERO)
    product_total = sum((amount for _, amount in product_lines), ZERO)

    summary = [
        ["Salary Report"],
        [""],
        ["Staff Member:", staff_name],
        ["Report Period:", period.label],
    ]
    if not booking_lines and not product_lines:
        summary.append([PLACEHOLDERS[SHEET_STATEMENT_SUMMARY]])
    summary += [
        ["Booking Earnings:", _money(booking_total)],
        ["Product Order Earnings:", _money(product_total)],
        ["Total Earnings:", _money(booking_total + product_total)],
        [""],
        ["Generated on:", generated_on.isoformat()],
    ]

    booking_headers = ["Inquiry ID", "Client Name", "Event Date", "Package", "Commission"]
    if booking_lines:
        booking_rows = [booking_headers] + [
            [_text(b.inquiry_id), b.full_name, _date_text(b.event_date), _text(b.package_name), _money(amount)]
            for b, amount in booking_lines
        ] + [[SUMMARY_LABEL, "", "", "", _money(booking_total)]]
    else:
        booking_rows = _placeholder(SHEET_STATEMENT_BOOKINGS, booking_headers)

    product_headers = ["Order ID", "Customer", "Order Date", "Commission"]
    if product_lines:
        product_rows = [product_headers] + [
            [_text(o.order_id), o.customer_name, _date_text(o.created_at), _money(amount)]
            for o, amount in product_lines
        ] + [[SUMMARY_LABEL, "", "", _money(product_total)]]
    else:
        product_rows = _placeholder(SHEET_STATEMENT_PRODUCTS, product_headers)

    report = OrderedDict()
    report[SHEET_STATEMENT_SUMMARY] = summary
    report[SHEET_STATEMENT_BOOKINGS] = booking_rows
    report[SHEET_STATEMENT_PRODUCTS] = product_rows
    return report
