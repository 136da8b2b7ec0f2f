# =============================================================================
# test_database.py - sqlite persistence (uses the temp_db fixture)
# =============================================================================

from decimal import Decimal

import pytest

import database
from config import KIND_BOOKING, KIND_PRODUCT_ORDER
from database import (
    create_booking,
    create_package,
    create_product_order,
    delete_booking,
    delete_product_order,
    fetch_bookings,
    fetch_packages,
    fetch_product_orders,
    init_db,
    load_commission_lines,
    load_financial_entries,
    load_financial_entry,
    month_window,
    replace_commission_lines,
    save_financial_entry,
    update_assigned_staff,
)
from ledger import CallerContext, CommissionLine, open_booking_entry, save_booking_entry


def _booking(**overrides):
    data = {
        "inquiry_id": "INQ-1",
        "full_name": "Kamal Perera",
        "event_type": "Wedding",
        "package_name": "Gold",
        "event_date": "2026-10-05",
        "assigned_staff": ["Amal", "Nimal"],
    }
    data.update(overrides)
    return create_booking(data)


def _breakdown(amount="1000"):
    return {
        "package_category": "Wedding",
        "package_name": "Gold",
        "package_amount": Decimal(amount),
        "photographer_expenses": Decimal("600"),
        "company_expenses": Decimal(amount) - Decimal("600"),
        "final_amount": Decimal(amount),
    }


def test_month_window():
    assert month_window(10, 2026) == ("2026-10-01", "2026-11-01")
    assert month_window(12, 2026) == ("2026-12-01", "2027-01-01")
    with pytest.raises(ValueError):
        month_window(0, 2026)


def test_init_db_is_idempotent(temp_db):
    assert init_db()
    assert init_db()


def test_packages_keep_insertion_order(temp_db):
    create_package({"name": "Silver", "price": "Rs. 30,000"})
    create_package({"name": "Gold", "price": "Rs. 50,000"})
    names = [p.name for p in fetch_packages()]
    assert names == ["Silver", "Gold"]
    assert fetch_packages()[1].amount == Decimal("50000")


def test_bookings_filtered_by_event_month(temp_db):
    _booking()
    _booking(inquiry_id="INQ-2", event_date="2026-11-01")

    october = fetch_bookings(10, 2026)
    assert [b.inquiry_id for b in october] == ["INQ-1"]
    assert october[0].assigned_staff == ["Amal", "Nimal"]
    assert october[0].financial_entry is None
    assert len(fetch_bookings()) == 2


def test_duplicate_inquiry_is_skipped(temp_db):
    assert _booking() is not None
    assert _booking() is None


def test_product_orders_filtered_by_created_month(temp_db):
    create_product_order({"order_id": "ORD-1", "customer_name": "Sunil", "total_amount": "1,500.50",
                          "created_at": "2026-10-31T23:59:00"})
    create_product_order({"order_id": "ORD-2", "customer_name": "Nuwan", "total_amount": 100,
                          "created_at": "2026-11-01T00:00:00"})

    october = fetch_product_orders(10, 2026)
    assert [o.order_id for o in october] == ["ORD-1"]
    assert october[0].total_amount == Decimal("1500.50")


def test_save_and_fetch_entry(temp_db):
    booking_id = _booking()
    lines = [CommissionLine("Amal", 400), CommissionLine("Nimal", 200)]

    ok, message = save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), lines)
    assert ok, message

    entry = fetch_bookings(10, 2026)[0].financial_entry
    assert entry.package_amount == Decimal("1000")
    assert entry.company_expenses == Decimal("400")
    assert entry.photographer_expenses == Decimal("600")
    assert entry.package_category == "Wedding"
    assert entry.commission_lines == lines


def test_resave_replaces_lines(temp_db):
    booking_id = _booking()
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Amal", 600)])
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Nimal", 600)])

    lines = load_commission_lines(KIND_BOOKING)[booking_id]
    assert lines == [CommissionLine("Nimal", 600)]
    assert len(load_financial_entries(KIND_BOOKING)) == 1


def test_failed_save_leaves_previous_state(temp_db):
    booking_id = _booking()
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Amal", 600)])

    # staff_name is NOT NULL, so the second insert fails after the delete ran
    bad_lines = [CommissionLine("Nimal", 300), CommissionLine(None, 300)]
    ok, message = save_financial_entry(KIND_BOOKING, booking_id, _breakdown("2000"), bad_lines)

    assert not ok
    assert message.startswith("Error saving financial details")
    entry = load_financial_entry(KIND_BOOKING, booking_id)
    assert entry.package_amount == Decimal("1000")
    assert entry.commission_lines == [CommissionLine("Amal", 600)]


def test_save_for_missing_entity_fails(temp_db):
    ok, _ = save_financial_entry(KIND_BOOKING, 999, _breakdown(), [CommissionLine("Amal", 600)])
    assert not ok
    assert load_commission_lines(KIND_BOOKING) == {}


def test_delete_cascades(temp_db):
    booking_id = _booking()
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Amal", 600)])

    assert delete_booking(booking_id)
    assert load_financial_entries(KIND_BOOKING) == {}
    assert load_commission_lines(KIND_BOOKING) == {}
    assert not delete_booking(booking_id)


def test_product_order_entry_roundtrip_and_delete(temp_db):
    order_id = create_product_order({"order_id": "ORD-1", "customer_name": "Sunil", "total_amount": 5000,
                                     "assigned_staff": ["Amal"], "created_at": "2026-10-10"})
    breakdown = {"order_amount": Decimal("5000"), "studio_fee": Decimal("1000"), "profit": Decimal("3000")}
    ok, _ = save_financial_entry(KIND_PRODUCT_ORDER, order_id, breakdown, [CommissionLine("Amal", 1000, staff_id="7")])
    assert ok

    entry = fetch_product_orders(10, 2026)[0].financial_entry
    assert entry.profit == Decimal("3000")
    assert entry.photographer_commission_total == Decimal("1000")
    assert entry.commission_lines[0].staff_id == "7"

    assert delete_product_order(order_id)
    assert load_financial_entries(KIND_PRODUCT_ORDER) == {}


def test_replace_commission_lines(temp_db):
    booking_id = _booking()
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Amal", 600)])

    ok, _ = replace_commission_lines(KIND_BOOKING, booking_id, [CommissionLine("Amal", 300), CommissionLine("Nimal", 300)])
    assert ok
    entry = load_financial_entry(KIND_BOOKING, booking_id)
    assert [line.staff_name for line in entry.commission_lines] == ["Amal", "Nimal"]
    assert entry.package_amount == Decimal("1000")


def test_unbalanced_line_replacement_is_refused(temp_db):
    booking_id = _booking()
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Amal", 600)])

    # company 400 + 300 falls short of the 1000 package amount
    ok, message = replace_commission_lines(KIND_BOOKING, booking_id, [CommissionLine("Amal", 300)])

    assert not ok
    assert message.startswith("Expenses not balanced")
    entry = load_financial_entry(KIND_BOOKING, booking_id)
    assert entry.commission_lines == [CommissionLine("Amal", 600)]
    assert entry.photographer_expenses == Decimal("600")


def test_line_replacement_refuses_negatives_and_drops_zeros(temp_db):
    booking_id = _booking()
    save_financial_entry(KIND_BOOKING, booking_id, _breakdown(), [CommissionLine("Amal", 600)])

    ok, message = replace_commission_lines(
        KIND_BOOKING, booking_id, [CommissionLine("Amal", 900), CommissionLine("Nimal", -300)]
    )
    assert not ok
    assert message == "Amounts cannot be negative: Nimal"

    ok, _ = replace_commission_lines(KIND_BOOKING, booking_id, [CommissionLine("Amal", 0), CommissionLine("Nimal", 600)])
    assert ok
    assert load_commission_lines(KIND_BOOKING)[booking_id] == [CommissionLine("Nimal", 600)]


def test_line_replacement_needs_a_saved_entry(temp_db):
    booking_id = _booking()
    ok, message = replace_commission_lines(KIND_BOOKING, booking_id, [CommissionLine("Amal", 600)])
    assert not ok
    assert message == "No saved financial details for this booking"
    assert load_commission_lines(KIND_BOOKING) == {}



def test_reconcile_and_save_end_to_end(temp_db):
    create_package({"name": "Gold", "price": "Rs. 1,000"})
    _booking()
    manager = CallerContext(role="management")

    booking = fetch_bookings(10, 2026)[0]
    entry = open_booking_entry(booking, fetch_packages())
    entry.commission_lines[0].amount = Decimal("600")
    entry.company_expenses = Decimal("400")

    result = save_booking_entry(manager, booking, entry, store=database)
    assert result.success, result.message

    # Nimal leaves the booking; their zero line was never stored anyway
    assert update_assigned_staff(KIND_BOOKING, booking.id, ["Amal"])
    booking = fetch_bookings(10, 2026)[0]
    assert booking.assigned_staff == ["Amal"]
    assert booking.financial_entry.final_amount == Decimal("1000")
    assert booking.financial_entry.commission_lines == [CommissionLine("Amal", 600)]
