# =============================================================================
# test_importers.py - CSV importers against a temporary database
# =============================================================================

from decimal import Decimal

from database import fetch_bookings, fetch_packages, fetch_product_orders
from importers import BookingImporter, PackageImporter, ProductOrderImporter


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_package_import_skips_duplicate_names(temp_db, tmp_path):
    source = _write(tmp_path, "packages.csv", (
        "Name,Price,Category\n"
        'Gold,"Rs. 50,000",Wedding\n'
        'Silver,"Rs. 30,000",Portrait\n'
        'Gold,"Rs. 60,000",Wedding\n'
    ))
    importer = PackageImporter(source)
    success, message, count = importer.run()

    assert success, message
    assert count == 2
    assert len(importer.get_import_summary()["duplicates"]) == 1
    prices = {p.name: p.amount for p in fetch_packages()}
    assert prices == {"Gold": Decimal("50000"), "Silver": Decimal("30000")}


def test_booking_import(temp_db, tmp_path):
    source = _write(tmp_path, "bookings.csv", (
        "Inquiry ID,Full Name,Email,Event Type,Package,Event Date,Assigned Staff\n"
        'INQ-1,Kamal Perera,kamal@example.com,Wedding,Gold,2026-10-05,"Amal, Nimal"\n'
        "INQ-2,,x@example.com,Wedding,Gold,2026-10-06,Amal\n"
    ))
    importer = BookingImporter(source)
    success, message, count = importer.run()

    assert success, message
    assert count == 1
    assert len(importer.skipped) == 1

    booking = fetch_bookings(10, 2026)[0]
    assert booking.inquiry_id == "INQ-1"
    assert booking.full_name == "Kamal Perera"
    assert booking.event_date == "2026-10-05"
    assert booking.assigned_staff == ["Amal", "Nimal"]

    # same file again: everything is a duplicate
    again = BookingImporter(source)
    success, _, count = again.run()
    assert success
    assert count == 0
    assert len(again.duplicates) == 1


def test_missing_required_column(temp_db, tmp_path):
    source = _write(tmp_path, "bad.csv", "Foo,Bar\n1,2\n")
    success, message, count = BookingImporter(source).run()
    assert not success
    assert message == "Missing required column: Full Name"
    assert count == 0


def test_product_order_import(temp_db, tmp_path):
    source = _write(tmp_path, "orders.csv", (
        "Order ID,Customer,Total Amount,Assigned Staff,Order Date\n"
        'ORD-1,Sunil Silva,"1,500.50",Amal,2026-10-10\n'
    ))
    success, message, count = ProductOrderImporter(source).run()

    assert success, message
    assert count == 1
    order = fetch_product_orders(10, 2026)[0]
    assert order.order_id == "ORD-1"
    assert order.total_amount == Decimal("1500.50")
    assert order.assigned_staff == ["Amal"]
    assert order.status == "Pending"
