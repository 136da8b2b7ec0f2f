# =============================================================================
# ledger/models.py
# =============================================================================
# PURPOSE:
#   The value types of the ledger:
#   - ServicePackage: a priced package bookings refer to by name
#   - Booking / ProductOrder: the two kinds of revenue entity
#   - BookingFinancialEntry / ProductOrderFinancialEntry: the expense and
#     commission breakdown attached to one revenue entity
#   - CommissionLine: one staff member's share inside a breakdown
#
# ONE SHAPE, TWO VARIANTS:
#   Both financial entries inherit from LedgerEntry. Each variant only
#   declares which field is the revenue amount, which fields are the
#   hand-entered categories, and which field mirrors the commission total.
#   Everything else (totals, validation, persistence payload) is shared.
#
# STAFF IDENTITY:
#   Lines are matched and aggregated by `key`: the staff id when one is
#   known, otherwise the display name. Two people with the same display
#   name only stay apart if they carry ids.
# =============================================================================

import json
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from config import (
    BOOKING_CATEGORY_FIELDS,
    BOOKING_COMMISSION_FIELD,
    PRODUCT_ORDER_CATEGORY_FIELDS,
    PRODUCT_ORDER_COMMISSION_FIELD,
    KIND_BOOKING,
    KIND_PRODUCT_ORDER,
)
from utils.money import ZERO, to_money, parse_price, money_sum


def staff_key(staff_name, staff_id=None):
    """Aggregation key for a staff member: id when known, else display name."""
    if staff_id is not None and str(staff_id).strip() != "":
        return f"id:{staff_id}"
    return staff_name


def parse_staff_list(value):
    """
    Normalize an assigned-staff value into a list of names.

    ACCEPTS:
        a list, a JSON array string ('["Amal", "Nimal"]'),
        a comma separated string ("Amal, Nimal"), or None.
    """
    if value is None:
        return []
    if isinstance(value, float) and value != value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    text = str(value).strip()
    if not text:
        return []
    if text.startswith("["):
        try:
            return [str(v).strip() for v in json.loads(text) if str(v).strip()]
        except ValueError:
            pass
    return [part.strip() for part in text.split(",") if part.strip()]


@dataclass
class StaffMember:
    """An assigned staff member. Assigned lists may also hold plain names."""
    name: str
    staff_id: Optional[str] = None

    @property
    def key(self):
        return staff_key(self.name, self.staff_id)


def as_staff(item):
    """Turn a plain name or StaffMember into a StaffMember."""
    if isinstance(item, StaffMember):
        return item
    return StaffMember(name=str(item))


@dataclass
class CommissionLine:
    staff_name: str
    amount: Decimal = ZERO
    staff_id: Optional[str] = None

    def __post_init__(self):
        self.amount = to_money(self.amount)

    @property
    def key(self):
        return staff_key(self.staff_name, self.staff_id)

    @classmethod
    def from_record(cls, record):
        """Build a line from a dict (database row or form data)."""
        if isinstance(record, CommissionLine):
            return record
        return cls(
            staff_name=str(record.get("staff_name") or "").strip(),
            amount=record.get("amount"),
            staff_id=record.get("staff_id") or None,
        )

    def to_record(self):
        return {"staff_name": self.staff_name, "amount": self.amount, "staff_id": self.staff_id}


@dataclass
class ServicePackage:
    name: Optional[str]
    price: Optional[str] = None
    id: Optional[int] = None
    category: Optional[str] = None
    description: Optional[str] = None

    @property
    def amount(self):
        """Numeric price parsed from the free-text price label."""
        return parse_price(self.price)

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record.get("id"),
            name=record.get("name"),
            price=record.get("price"),
            category=record.get("category"),
            description=record.get("description"),
        )


# =============================================================================
# FINANCIAL ENTRIES
# =============================================================================

@dataclass
class LedgerEntry:
    """
    Shared behaviour of both financial entry variants.

    Subclasses set:
        KIND              - "booking" or "product_order"
        DECLARED_FIELD    - the revenue amount the breakdown must match
        CATEGORY_FIELDS   - hand-entered expense categories
        COMMISSION_FIELD  - field that mirrors sum(commission_lines)
        MONEY_FIELDS      - every money field, coerced to Decimal
    """
    commission_lines: List[CommissionLine] = field(default_factory=list)

    KIND = ""
    DECLARED_FIELD = ""
    CATEGORY_FIELDS = ()
    COMMISSION_FIELD = ""
    MONEY_FIELDS = ()

    def __post_init__(self):
        for name in self.MONEY_FIELDS:
            setattr(self, name, to_money(getattr(self, name)))
        self.commission_lines = [CommissionLine.from_record(line) for line in self.commission_lines or []]
        self.sync_commission_total()

    @property
    def declared_amount(self):
        return getattr(self, self.DECLARED_FIELD)

    @property
    def commission_total(self):
        return money_sum(line.amount for line in self.commission_lines)

    def category_amounts(self):
        """Hand-entered categories as {field: Decimal}, in declared order."""
        return {name: getattr(self, name) for name in self.CATEGORY_FIELDS}

    def sync_commission_total(self):
        """Copy the commission line sum into the mirror field."""
        setattr(self, self.COMMISSION_FIELD, self.commission_total)

    def with_lines(self, lines):
        """Replace the commission lines and refresh the mirror field."""
        self.commission_lines = [CommissionLine.from_record(line) for line in lines]
        self.sync_commission_total()
        return self

    def to_breakdown(self):
        """
        Field payload for persistence (commission lines are saved separately).

        RETURNS:
            dict: every money field plus any text fields of the variant
        """
        self.sync_commission_total()
        return {name: getattr(self, name) for name in self.MONEY_FIELDS}


@dataclass
class BookingFinancialEntry(LedgerEntry):
    package_category: str = ""
    package_name: str = ""
    package_amount: Decimal = ZERO
    photographer_expenses: Decimal = ZERO
    videographer_expenses: Decimal = ZERO
    editor_expenses: Decimal = ZERO
    company_expenses: Decimal = ZERO
    other_expenses: Decimal = ZERO
    final_amount: Decimal = ZERO

    KIND = KIND_BOOKING
    DECLARED_FIELD = "package_amount"
    CATEGORY_FIELDS = tuple(BOOKING_CATEGORY_FIELDS)
    COMMISSION_FIELD = BOOKING_COMMISSION_FIELD
    MONEY_FIELDS = (
        "package_amount",
        "photographer_expenses",
        "videographer_expenses",
        "editor_expenses",
        "company_expenses",
        "other_expenses",
        "final_amount",
    )

    def to_breakdown(self):
        breakdown = super().to_breakdown()
        breakdown["package_category"] = self.package_category or ""
        breakdown["package_name"] = self.package_name or ""
        return breakdown

    @classmethod
    def from_record(cls, record, lines=None):
        return cls(
            package_category=record.get("package_category") or "",
            package_name=record.get("package_name") or "",
            package_amount=record.get("package_amount"),
            videographer_expenses=record.get("videographer_expenses"),
            editor_expenses=record.get("editor_expenses"),
            company_expenses=record.get("company_expenses"),
            other_expenses=record.get("other_expenses"),
            final_amount=record.get("final_amount"),
            commission_lines=list(lines or []),
        )


@dataclass
class ProductOrderFinancialEntry(LedgerEntry):
    order_amount: Decimal = ZERO
    photographer_commission_total: Decimal = ZERO
    studio_fee: Decimal = ZERO
    other_expenses: Decimal = ZERO
    profit: Decimal = ZERO

    KIND = KIND_PRODUCT_ORDER
    DECLARED_FIELD = "order_amount"
    CATEGORY_FIELDS = tuple(PRODUCT_ORDER_CATEGORY_FIELDS)
    COMMISSION_FIELD = PRODUCT_ORDER_COMMISSION_FIELD
    MONEY_FIELDS = (
        "order_amount",
        "photographer_commission_total",
        "studio_fee",
        "other_expenses",
        "profit",
    )

    @classmethod
    def from_record(cls, record, lines=None):
        return cls(
            order_amount=record.get("order_amount"),
            studio_fee=record.get("studio_fee"),
            other_expenses=record.get("other_expenses"),
            profit=record.get("profit"),
            commission_lines=list(lines or []),
        )


# =============================================================================
# REVENUE ENTITIES
# =============================================================================

@dataclass
class Booking:
    id: Optional[int] = None
    inquiry_id: Optional[str] = None
    full_name: str = ""
    email: str = ""
    event_type: Optional[str] = None
    package_name: Optional[str] = None
    event_date: Optional[str] = None
    status: Optional[str] = None
    assigned_staff: list = field(default_factory=list)
    created_at: Optional[str] = None
    financial_entry: Optional[BookingFinancialEntry] = None

    KIND = KIND_BOOKING

    @property
    def reference(self):
        return self.inquiry_id

    def declared_amount(self, packages=()):
        """Reconciled package amount if an entry exists, else the list price."""
        if self.financial_entry is not None:
            return self.financial_entry.declared_amount
        for package in packages:
            if package.name == self.package_name:
                return package.amount
        return ZERO

    @classmethod
    def from_record(cls, record, entry=None):
        return cls(
            id=record.get("id"),
            inquiry_id=record.get("inquiry_id"),
            full_name=record.get("full_name") or "",
            email=record.get("email") or "",
            event_type=record.get("event_type"),
            package_name=record.get("package_name"),
            event_date=record.get("event_date"),
            status=record.get("status"),
            assigned_staff=parse_staff_list(record.get("assigned_staff")),
            created_at=record.get("created_at"),
            financial_entry=entry,
        )


@dataclass
class ProductOrder:
    id: Optional[int] = None
    order_id: Optional[str] = None
    customer_name: str = ""
    total_amount: Decimal = ZERO
    status: Optional[str] = None
    assigned_staff: list = field(default_factory=list)
    created_at: Optional[str] = None
    financial_entry: Optional[ProductOrderFinancialEntry] = None

    KIND = KIND_PRODUCT_ORDER

    def __post_init__(self):
        self.total_amount = to_money(self.total_amount)

    @property
    def reference(self):
        return self.order_id

    def declared_amount(self, packages=()):
        if self.financial_entry is not None:
            return self.financial_entry.declared_amount
        return self.total_amount

    @classmethod
    def from_record(cls, record, entry=None):
        return cls(
            id=record.get("id"),
            order_id=record.get("order_id"),
            customer_name=record.get("customer_name") or "",
            total_amount=record.get("total_amount"),
            status=record.get("status"),
            assigned_staff=parse_staff_list(record.get("assigned_staff")),
            created_at=record.get("created_at"),
            financial_entry=entry,
        )
