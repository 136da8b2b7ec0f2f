# =============================================================================
# test_salary.py - cross-stream salary merge
# =============================================================================

from decimal import Decimal

from ledger import BookingFinancialEntry, CommissionLine, ProductOrderFinancialEntry
from reports import (
    booking_earnings,
    compute_salary,
    salary_rows,
    salary_summary,
    staff_statement,
)


def _booking_entry(*lines):
    return BookingFinancialEntry(package_amount=1000, commission_lines=list(lines))


def _order_entry(*lines):
    return ProductOrderFinancialEntry(order_amount=1000, commission_lines=list(lines))


def test_streams_are_merged_per_staff(make_booking, make_order):
    bookings = [make_booking(entry=_booking_entry(CommissionLine("A", 500)))]
    orders = [make_order(entry=_order_entry(CommissionLine("A", 200), CommissionLine("B", 300)))]

    salary = compute_salary(bookings, orders)

    assert salary["A"].booking_earnings == Decimal("500")
    assert salary["A"].product_earnings == Decimal("200")
    assert salary["A"].total_earnings == Decimal("700")
    assert salary["B"].booking_earnings == Decimal("0")
    assert salary["B"].total_earnings == Decimal("300")


def test_entities_without_entries_are_ignored(make_booking, make_order):
    assert compute_salary([make_booking(staff=["A"])], [make_order(staff=["A"])]) == {}


def test_either_stream_may_be_empty(make_booking, make_order):
    only_orders = compute_salary([], [make_order(entry=_order_entry(CommissionLine("B", 300)))])
    assert only_orders["B"].total_earnings == Decimal("300")

    only_bookings = compute_salary([make_booking(entry=_booking_entry(CommissionLine("A", 100)))], [])
    assert only_bookings["A"].product_earnings == Decimal("0")


def test_rows_sorted_and_summary(make_booking, make_order):
    bookings = [
        make_booking(entry=_booking_entry(CommissionLine("A", 100))),
        make_booking(entry=_booking_entry(CommissionLine("C", 400))),
    ]
    orders = [make_order(entry=_order_entry(CommissionLine("B", 400)))]
    salary = compute_salary(bookings, orders)

    assert [row.staff_name for row in salary_rows(salary)] == ["B", "C", "A"]

    summary = salary_summary(salary)
    assert summary.staff_name == "SUMMARY"
    assert summary.booking_earnings == Decimal("500")
    assert summary.product_earnings == Decimal("400")
    assert summary.total_earnings == Decimal("900")


def test_booking_earnings_counts_bookings(make_booking):
    bookings = [
        make_booking(entry=_booking_entry(CommissionLine("A", 100))),
        make_booking(entry=_booking_entry(CommissionLine("A", 50))),
    ]
    earnings = booking_earnings(bookings)
    assert earnings["A"]["count"] == 2
    assert earnings["A"]["amount"] == Decimal("150")


def test_staff_statement(make_booking, make_order):
    booking = make_booking(entry=_booking_entry(CommissionLine("A", 500), CommissionLine("B", 100)))
    order = make_order(entry=_order_entry(CommissionLine("B", 300)))

    booking_lines, product_lines = staff_statement([booking], [order], "A")
    assert booking_lines == [(booking, Decimal("500"))]
    assert product_lines == []
