# =============================================================================
# reports/salary.py
# =============================================================================
# PURPOSE:
#   Who earned what. Merges the commission lines of two separate streams
#   into one table per staff member:
#
#     Stream 1: bookings       -> booking_earnings
#     Stream 2: product orders -> product_earnings
#     total_earnings = booking_earnings + product_earnings
#
# HOW IT WORKS:
#   1. Sum each stream on its own (either may be empty)
#   2. Merge the two sums by staff key
#   Only entities that have a saved financial entry contribute.
#
# STAFF KEY:
#   The key is the display name unless a line carries a staff id (see
#   ledger.models.staff_key). With names only, two people called "Amal"
#   are one person here, and a renamed person shows up twice.
#
# PERIOD:
#   No date filtering happens here. Pass in the bookings and orders of the
#   period you want.
# =============================================================================

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from config import SUMMARY_LABEL
from utils.money import ZERO


@dataclass
class SalaryRow:
    staff_name: str
    booking_earnings: Decimal = ZERO
    product_earnings: Decimal = ZERO
    total_earnings: Decimal = ZERO
    staff_id: Optional[str] = None


def _stream_totals(entities):
    """
    Sum commission lines per staff key for one stream.

    RETURNS:
        dict: {key: {"staff_name", "staff_id", "amount", "count"}}
              count = number of entities that credited this person
    """
    totals = {}
    for entity in entities or ():
        entry = entity.financial_entry
        if entry is None:
            continue
        credited = set()
        for line in entry.commission_lines:
            row = totals.get(line.key)
            if row is None:
                row = {"staff_name": line.staff_name, "staff_id": line.staff_id, "amount": ZERO, "count": 0}
                totals[line.key] = row
            row["amount"] += line.amount
            if line.key not in credited:
                credited.add(line.key)
                row["count"] += 1
    return totals


def booking_earnings(bookings):
    """Booking-only commission totals per staff key (photographer earnings)."""
    return _stream_totals(bookings)


def product_earnings(product_orders):
    """Product-order-only commission totals per staff key."""
    return _stream_totals(product_orders)


def compute_salary(bookings, product_orders):
    """
    Combined salary table for a period.

    PARAMETERS:
        bookings (list[Booking]): the period's bookings
        product_orders (list[ProductOrder]): the period's product orders

    RETURNS:
        dict: {staff key: SalaryRow}

    EXAMPLE:
        bookings credit {A: 500}, orders credit {A: 200, B: 300}
        -> A: booking 500, product 200, total 700
           B: booking   0, product 300, total 300
    """
    from_bookings = booking_earnings(bookings)
    from_products = product_earnings(product_orders)

    salary = {}
    for key, row in from_bookings.items():
        salary[key] = SalaryRow(staff_name=row["staff_name"], staff_id=row["staff_id"])
        salary[key].booking_earnings += row["amount"]
        salary[key].total_earnings += row["amount"]

    for key, row in from_products.items():
        if key not in salary:
            salary[key] = SalaryRow(staff_name=row["staff_name"], staff_id=row["staff_id"])
        salary[key].product_earnings += row["amount"]
        salary[key].total_earnings += row["amount"]

    return salary


def salary_rows(salary):
    """Rows sorted by total earnings, highest first (ties by name)."""
    rows = sorted(salary.values(), key=lambda r: r.staff_name)
    return sorted(rows, key=lambda r: r.total_earnings, reverse=True)


def salary_summary(salary):
    """Column sums across all staff, labelled SUMMARY."""
    summary = SalaryRow(staff_name=SUMMARY_LABEL)
    for row in salary.values():
        summary.booking_earnings += row.booking_earnings
        summary.product_earnings += row.product_earnings
        summary.total_earnings += row.total_earnings
    return summary


def staff_statement(bookings, product_orders, staff_name):
    """
    One staff member's commission lines, entity by entity.

    Matches on display name, or on the staff key when `staff_name` is a
    key produced by staff_key() ("id:...").

    RETURNS:
        tuple: (booking_lines, product_lines)
               each a list of (entity, Decimal amount) pairs
    """
    def collect(entities):
        found = []
        for entity in entities or ():
            entry = entity.financial_entry
            if entry is None:
                continue
            amount = ZERO
            matched = False
            for line in entry.commission_lines:
                if line.staff_name == staff_name or line.key == staff_name:
                    amount += line.amount
                    matched = True
            if matched:
                found.append((entity, amount))
        return found

    return collect(bookings), collect(product_orders)
