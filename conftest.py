# =============================================================================
# conftest.py - shared pytest fixtures
# =============================================================================
# temp_db:   points config.DB_PATH at a fresh file under tmp_path and
#            creates the tables. The real studio_ledger.db is never touched.
# packages / make_booking / make_order: small builders for model objects.
# =============================================================================

import pytest

import config
from database import init_db
from ledger import Booking, ProductOrder, ServicePackage


@pytest.fixture
def temp_db(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DB_PATH", str(tmp_path / "ledger_test.db"))
    assert init_db()
    return config.DB_PATH


@pytest.fixture
def packages():
    return [
        ServicePackage(name="Gold", price="Rs. 50,000", category="Wedding"),
        ServicePackage(name="Silver", price="Rs. 30,000", category="Portrait"),
        ServicePackage(name="Bronze", price="Contact us", category="Portrait"),
    ]


@pytest.fixture
def make_booking():
    counter = {"n": 0}

    def build(package_name="Gold", staff=(), event_type="Wedding", entry=None, **fields):
        counter["n"] += 1
        n = counter["n"]
        return Booking(
            id=fields.pop("id", n),
            inquiry_id=fields.pop("inquiry_id", f"INQ-{n}"),
            full_name=fields.pop("full_name", f"Client {n}"),
            event_type=event_type,
            package_name=package_name,
            event_date=fields.pop("event_date", "2026-10-15"),
            assigned_staff=list(staff),
            financial_entry=entry,
            **fields,
        )

    return build


@pytest.fixture
def make_order():
    counter = {"n": 0}

    def build(total="5000", staff=(), entry=None, **fields):
        counter["n"] += 1
        n = counter["n"]
        return ProductOrder(
            id=fields.pop("id", n),
            order_id=fields.pop("order_id", f"ORD-{n}"),
            customer_name=fields.pop("customer_name", f"Customer {n}"),
            total_amount=total,
            assigned_staff=list(staff),
            created_at=fields.pop("created_at", "2026-10-20T10:00:00"),
            financial_entry=entry,
            **fields,
        )

    return build
