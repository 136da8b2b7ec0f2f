# =============================================================================
# database/queries.py
# =============================================================================
# PURPOSE:
#   Contains all database queries - loading and saving data.
#   This is the "data access layer" - the only code that talks to the database.
#
# TWO KINDS OF READ:
#   - load_X()  -> pandas DataFrame, for showing tables on pages
#   - fetch_X() -> model objects (ledger.models), for reconciling and
#                  reporting. Bookings and orders come back with their
#                  financial entry and commission lines attached.
#
# NAMING CONVENTION:
#   - load_X() / fetch_X() -> Read data (SELECT)
#   - create_X()           -> Insert new data (INSERT)
#   - update_X()           -> Modify existing data (UPDATE)
#   - delete_X()           -> Remove data (DELETE)
#   - check_X_exists()     -> Check for duplicates
#
# FINANCIAL ENTRIES:
#   save_financial_entry() writes the breakdown and its commission lines in
#   ONE transaction: old lines deleted, new lines inserted, breakdown
#   upserted. If anything fails the whole thing is rolled back and the
#   previous state stays as it was.
#   replace_commission_lines() only swaps the lines, and refuses any set
#   that would leave the stored breakdown unbalanced.
#
# ERRORS:
#   Every function catches its own exceptions, prints an [ERROR] line and
#   returns a failure value (None / False / empty DataFrame / (False, msg)).
# =============================================================================

import json
from datetime import datetime

import pandas as pd

from config import KIND_BOOKING, KIND_PRODUCT_ORDER
from ledger.balance import negative_amounts, validate_entry
from ledger.commissions import lines_to_persist
from ledger.models import (
    Booking,
    BookingFinancialEntry,
    CommissionLine,
    ProductOrder,
    ProductOrderFinancialEntry,
    ServicePackage,
    parse_staff_list,
)
from utils.money import from_cents, to_cents
from .connection import get_db_connection


# Per-kind table layout for financial entries
FINANCIAL_TABLES = {
    KIND_BOOKING: {
        "entries": "booking_financials",
        "lines": "booking_commissions",
        "fk": "booking_id",
        "entry_class": BookingFinancialEntry,
        "text_fields": ("package_category", "package_name"),
    },
    KIND_PRODUCT_ORDER: {
        "entries": "product_order_financials",
        "lines": "product_order_commissions",
        "fk": "product_order_id",
        "entry_class": ProductOrderFinancialEntry,
        "text_fields": (),
    },
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _now():
    return datetime.now().isoformat(timespec="seconds")


def _safe_int(value, default=None):
    """
    Safely convert a value to integer.
    Handles numpy types from pandas DataFrames.
    """
    if value is None:
        return default
    if hasattr(value, "item"):
        value = value.item()
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def _staff_json(value):
    """Assigned staff (list, JSON or comma string) -> JSON text for storage."""
    return json.dumps(parse_staff_list(value))


def _fetch_records(query, params=()):
    """Run a SELECT and return rows as a list of dicts."""
    conn = get_db_connection()
    try:
        cursor = conn.cursor()
        cursor.execute(query, params)
        columns = [desc[0] for desc in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]
    finally:
        conn.close()


def _layout(kind):
    if kind not in FINANCIAL_TABLES:
        raise ValueError(f"Unknown entity kind: {kind}")
    return FINANCIAL_TABLES[kind]


def month_window(month, year):
    """
    Start (inclusive) and end (exclusive) ISO dates of a calendar month.

    EXAMPLE:
        month_window(12, 2026) -> ("2026-12-01", "2027-01-01")

    Works for both plain dates ("2026-12-24") and timestamps
    ("2026-12-24T10:30:00") because ISO strings sort like the dates they
    represent.
    """
    month = int(month)
    year = int(year)
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be 1-12, got {month}")
    start = f"{year:04d}-{month:02d}-01"
    if month == 12:
        end = f"{year + 1:04d}-01-01"
    else:
        end = f"{year:04d}-{month + 1:02d}-01"
    return start, end


def _window_clause(column, month, year):
    """SQL fragment + params for an optional month filter."""
    if month is None or year is None:
        return "", []
    start, end = month_window(month, year)
    return f" AND {column} >= ? AND {column} < ?", [start, end]


# =============================================================================
# SERVICE PACKAGES
# =============================================================================

def load_packages():
    """
    Load all service packages.

    RETURNS:
        pd.DataFrame: id, name, price, category, description, created_at
    """
    try:
        conn = get_db_connection()
        df = pd.read_sql_query("SELECT * FROM service_packages ORDER BY name", conn)
        conn.close()
        return df
    except Exception as e:
        print(f"[ERROR] Error loading packages: {e}")
        return pd.DataFrame()


def fetch_packages():
    """
    All service packages as ServicePackage objects, in insertion order.
    (Insertion order matters: with duplicate names the first one wins.)
    """
    try:
        records = _fetch_records("SELECT * FROM service_packages ORDER BY id")
        return [ServicePackage.from_record(r) for r in records]
    except Exception as e:
        print(f"[ERROR] Error fetching packages: {e}")
        return []


def check_package_exists(name):
    try:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM service_packages WHERE name = ?", (name,))
        count = cursor.fetchone()[0]
        conn.close()
        return count > 0
    except Exception as e:
        print(f"[ERROR] Error checking package: {e}")
        return False


def create_package(package_data):
    """
    Create a service package.

    PARAMETERS:
        package_data (dict): name (required), price, category, description

    RETURNS:
        int: The new package id, or None if failed

    EXAMPLE:
        create_package({"name": "Gold Wedding", "price": "Rs. 150,000"})
    """
    try:
        data = dict(package_data)
        data.setdefault("created_at", _now())

        columns = ", ".join(data.keys())
        placeholders = ", ".join(["?"] * len(data))

        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute(f"INSERT INTO service_packages ({columns}) VALUES ({placeholders})", list(data.values()))
        package_id = cursor.lastrowid
        conn.commit()
        conn.close()

        print(f"[OK] Created package #{package_id}: {data.get('name')}")
        return package_id

    except Exception as e:
        print(f"[ERROR] Error creating package: {e}")
        return None


# =============================================================================
# CLIENT BOOKINGS
# =============================================================================

def load_bookings(month=None, year=None):
    """
    Load bookings, optionally limited to one month of event dates.

    RETURNS:
        pd.DataFrame: booking rows, newest event first
    """
    try:
        clause, params = _window_clause("event_date", month, year)
        conn = get_db_connection()
        df = pd.read_sql_query(
            f"SELECT * FROM client_bookings WHERE 1=1{clause} ORDER BY event_date DESC",
            conn,
            params=params if params else None,
        )
        conn.close()
        return df
    except Exception as e:
        print(f"[ERROR] Error loading bookings: {e}")
        return pd.DataFrame()


def fetch_bookings(month=None, year=None):
    """
    Bookings as Booking objects with financial entries attached.

    PARAMETERS:
        month, year (int): optional period filter on event_date

    RETURNS:
        list[Booking]: ordered by event date, then id
    """
    try:
        clause, params = _window_clause("event_date", month, year)
        records = _fetch_records(
            f"SELECT * FROM client_bookings WHERE 1=1{clause} ORDER BY event_date, id",
            params,
        )
        entries = load_financial_entries(KIND_BOOKING, [r["id"] for r in records])
        return [Booking.from_record(r, entries.get(r["id"])) for r in records]
    except Exception as e:
        print(f"[ERROR] Error fetching bookings: {e}")
        return []


def check_booking_exists(inquiry_id):
    try:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM client_bookings WHERE inquiry_id = ?", (inquiry_id,))
        count = cursor.fetchone()[0]
        conn.close()
        return count > 0
    except Exception as e:
        print(f"[ERROR] Error checking booking: {e}")
        return False


def create_booking(booking_data):
    """
    Create a booking.

    PARAMETERS:
        booking_data (dict): full_name (required), inquiry_id, email, phone,
            event_type, package_name, event_date, status, assigned_staff
            (list of names), created_at

    RETURNS:
        int: The new booking id, or None if failed or duplicate inquiry_id
    """
    try:
        data = dict(booking_data)
        inquiry_id = data.get("inquiry_id")
        if inquiry_id and check_booking_exists(inquiry_id):
            print(f"[WARN] Booking {inquiry_id} already exists!")
            return None

        data["assigned_staff"] = _staff_json(data.get("assigned_staff"))
        data.setdefault("created_at", _now())

        columns = ", ".join(data.keys())
        placeholders = ", ".join(["?"] * len(data))

        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute(f"INSERT INTO client_bookings ({columns}) VALUES ({placeholders})", list(data.values()))
        booking_id = cursor.lastrowid
        conn.commit()
        conn.close()

        print(f"[OK] Created booking #{booking_id}: {data.get('full_name', 'Unknown')}")
        return booking_id

    except Exception as e:
        print(f"[ERROR] Error creating booking: {e}")
        return None


def delete_booking(booking_id):
    """
    Delete a booking. Its financial entry and commission lines go with it
    (ON DELETE CASCADE).

    RETURNS:
        bool: True if a row was deleted
    """
    try:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("DELETE FROM client_bookings WHERE id = ?", (booking_id,))
        deleted = cursor.rowcount > 0
        conn.commit()
        conn.close()
        if deleted:
            print(f"[OK] Deleted booking #{booking_id}")
        return deleted
    except Exception as e:
        print(f"[ERROR] Error deleting booking {booking_id}: {e}")
        return False


# =============================================================================
# PRODUCT ORDERS
# =============================================================================

def load_product_orders(month=None, year=None):
    """
    Load product orders, optionally limited to one month of created_at.
    total_amount is converted from cents for display.

    RETURNS:
        pd.DataFrame
    """
    try:
        clause, params = _window_clause("created_at", month, year)
        conn = get_db_connection()
        df = pd.read_sql_query(
            f"SELECT * FROM product_orders WHERE 1=1{clause} ORDER BY created_at DESC",
            conn,
            params=params if params else None,
        )
        conn.close()
        if not df.empty:
            df["total_amount"] = df["total_amount"].apply(lambda c: float(from_cents(c)))
        return df
    except Exception as e:
        print(f"[ERROR] Error loading product orders: {e}")
        return pd.DataFrame()


def fetch_product_orders(month=None, year=None):
    """
    Product orders as ProductOrder objects with financial entries attached.

    RETURNS:
        list[ProductOrder]: ordered by created_at, then id
    """
    try:
        clause, params = _window_clause("created_at", month, year)
        records = _fetch_records(
            f"SELECT * FROM product_orders WHERE 1=1{clause} ORDER BY created_at, id",
            params,
        )
        entries = load_financial_entries(KIND_PRODUCT_ORDER, [r["id"] for r in records])
        orders = []
        for record in records:
            record["total_amount"] = from_cents(record.get("total_amount"))
            orders.append(ProductOrder.from_record(record, entries.get(record["id"])))
        return orders
    except Exception as e:
        print(f"[ERROR] Error fetching product orders: {e}")
        return []


def check_product_order_exists(order_id):
    try:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM product_orders WHERE order_id = ?", (order_id,))
        count = cursor.fetchone()[0]
        conn.close()
        return count > 0
    except Exception as e:
        print(f"[ERROR] Error checking product order: {e}")
        return False


def create_product_order(order_data):
    """
    Create a product order.

    PARAMETERS:
        order_data (dict): customer_name (required), order_id, total_amount
            (Decimal/number/string, stored as cents), status,
            assigned_staff (list of names), created_at

    RETURNS:
        int: The new order id, or None if failed or duplicate order_id
    """
    try:
        data = dict(order_data)
        order_id = data.get("order_id")
        if order_id and check_product_order_exists(order_id):
            print(f"[WARN] Product order {order_id} already exists!")
            return None

        data["total_amount"] = to_cents(data.get("total_amount"))
        data["assigned_staff"] = _staff_json(data.get("assigned_staff"))
        data.setdefault("created_at", _now())

        columns = ", ".join(data.keys())
        placeholders = ", ".join(["?"] * len(data))

        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute(f"INSERT INTO product_orders ({columns}) VALUES ({placeholders})", list(data.values()))
        new_id = cursor.lastrowid
        conn.commit()
        conn.close()

        print(f"[OK] Created product order #{new_id}: {data.get('customer_name', 'Unknown')}")
        return new_id

    except Exception as e:
        print(f"[ERROR] Error creating product order: {e}")
        return None


def delete_product_order(order_id):
    """
    Delete a product order (and, by cascade, its financials and lines).

    PARAMETERS:
        order_id (int): the row id, not the order reference code
    """
    try:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("DELETE FROM product_orders WHERE id = ?", (order_id,))
        deleted = cursor.rowcount > 0
        conn.commit()
        conn.close()
        if deleted:
            print(f"[OK] Deleted product order #{order_id}")
        return deleted
    except Exception as e:
        print(f"[ERROR] Error deleting product order {order_id}: {e}")
        return False


def update_assigned_staff(kind, entity_id, staff):
    """
    Replace the assigned staff of a booking or product order.

    Saved commission lines are NOT touched here. They are reconciled
    against the new assignment the next time the entry is opened or saved.

    RETURNS:
        bool: True if successful
    """
    table = "client_bookings" if kind == KIND_BOOKING else "product_orders"
    try:
        _layout(kind)
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute(f"UPDATE {table} SET assigned_staff = ? WHERE id = ?", (_staff_json(staff), entity_id))
        conn.commit()
        conn.close()
        return True
    except Exception as e:
        print(f"[ERROR] Error updating staff for {kind} {entity_id}: {e}")
        return False


# =============================================================================
# FINANCIAL ENTRIES AND COMMISSION LINES
# =============================================================================

def _entry_from_row(kind, row, lines):
    layout = _layout(kind)
    entry_class = layout["entry_class"]
    record = {name: from_cents(row.get(name)) for name in entry_class.MONEY_FIELDS}
    for name in layout["text_fields"]:
        record[name] = row.get(name) or ""
    return entry_class.from_record(record, lines)


def load_commission_lines(kind, entity_ids=None):
    """
    Commission lines per entity.

    RETURNS:
        dict: {entity id: [CommissionLine, ...]} in insertion order
    """
    layout = _layout(kind)
    fk = layout["fk"]
    query = f"SELECT {fk} AS entity_id, staff_name, staff_id, amount FROM {layout['lines']}"
    params = []
    if entity_ids is not None:
        ids = [_safe_int(i) for i in entity_ids]
        if not ids:
            return {}
        query += f" WHERE {fk} IN ({', '.join(['?'] * len(ids))})"
        params = ids
    query += " ORDER BY id"

    lines = {}
    for row in _fetch_records(query, params):
        lines.setdefault(row["entity_id"], []).append(
            CommissionLine(
                staff_name=row["staff_name"],
                amount=from_cents(row["amount"]),
                staff_id=row["staff_id"],
            )
        )
    return lines


def load_financial_entries(kind, entity_ids=None):
    """
    Saved financial entries with their commission lines.

    PARAMETERS:
        kind (str): "booking" or "product_order"
        entity_ids (list[int]): limit to these entities (None = all)

    RETURNS:
        dict: {entity id: BookingFinancialEntry | ProductOrderFinancialEntry}
              entities without a saved entry are absent
    """
    layout = _layout(kind)
    fk = layout["fk"]
    query = f"SELECT * FROM {layout['entries']}"
    params = []
    if entity_ids is not None:
        ids = [_safe_int(i) for i in entity_ids]
        if not ids:
            return {}
        query += f" WHERE {fk} IN ({', '.join(['?'] * len(ids))})"
        params = ids

    rows = _fetch_records(query, params)
    lines = load_commission_lines(kind, [row[fk] for row in rows])
    return {row[fk]: _entry_from_row(kind, row, lines.get(row[fk], [])) for row in rows}


def load_financial_entry(kind, entity_id):
    """One saved entry, or None if the entity has not been reconciled."""
    try:
        return load_financial_entries(kind, [entity_id]).get(_safe_int(entity_id))
    except Exception as e:
        print(f"[ERROR] Error loading {kind} financials {entity_id}: {e}")
        return None


def _insert_lines(cursor, layout, entity_id, lines):
    for line in lines:
        line = CommissionLine.from_record(line)
        cursor.execute(
            f"INSERT INTO {layout['lines']} ({layout['fk']}, staff_name, staff_id, amount) VALUES (?, ?, ?, ?)",
            (entity_id, line.staff_name, line.staff_id, to_cents(line.amount)),
        )


def save_financial_entry(kind, entity_id, breakdown, lines):
    """
    Save a financial breakdown and its commission lines atomically.

    WHAT THIS DOES (one transaction):
        1. Delete the entity's existing commission lines
        2. Insert the new lines
        3. Insert or update the breakdown row

    PARAMETERS:
        kind (str): "booking" or "product_order"
        entity_id (int): booking / product order row id
        breakdown (dict): field -> value (money fields as Decimal)
        lines (list[CommissionLine]): lines to keep

    RETURNS:
        tuple: (success, message)
    """
    conn = None
    try:
        layout = _layout(kind)
        entry_class = layout["entry_class"]
        fk = layout["fk"]

        values = {fk: entity_id}
        for name in entry_class.MONEY_FIELDS:
            values[name] = to_cents(breakdown.get(name))
        for name in layout["text_fields"]:
            values[name] = breakdown.get(name) or ""
        values["updated_at"] = _now()

        columns = ", ".join(values.keys())
        placeholders = ", ".join(["?"] * len(values))
        updates = ", ".join(f"{name} = excluded.{name}" for name in values if name != fk)

        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute(f"DELETE FROM {layout['lines']} WHERE {fk} = ?", (entity_id,))
        _insert_lines(cursor, layout, entity_id, lines)
        cursor.execute(
            f"INSERT INTO {layout['entries']} ({columns}) VALUES ({placeholders}) "
            f"ON CONFLICT({fk}) DO UPDATE SET {updates}",
            list(values.values()),
        )
        conn.commit()

        print(f"[OK] Saved {kind} financials #{entity_id} ({len(lines)} commission lines)")
        return True, "Financial details saved successfully"

    except Exception as e:
        if conn is not None:
            conn.rollback()
        print(f"[ERROR] Error saving {kind} financials {entity_id}: {e}")
        return False, f"Error saving financial details: {e}"

    finally:
        if conn is not None:
            conn.close()


def replace_commission_lines(kind, entity_id, lines):
    """
    Replace only the commission lines of an entity, keeping its breakdown.

    The stored breakdown must still balance with the new lines, so the
    saved entry is read back inside the same transaction and checked
    before anything is written.

    WHAT THIS DOES (one transaction):
        1. Lock the database and load the saved breakdown
        2. Drop zero-amount lines, refuse negative ones
        3. Refuse the change if breakdown + new lines do not balance
        4. Delete the old lines, insert the new ones, refresh the
           mirrored commission total column

    RETURNS:
        tuple: (success, message)
    """
    conn = None
    try:
        layout = _layout(kind)
        entry_class = layout["entry_class"]
        fk = layout["fk"]
        kept = lines_to_persist([CommissionLine.from_record(line) for line in lines])

        conn = get_db_connection()
        cursor = conn.cursor()
        # Write lock up front so the breakdown cannot change under the check
        cursor.execute("BEGIN IMMEDIATE")
        cursor.execute(f"SELECT * FROM {layout['entries']} WHERE {fk} = ?", (entity_id,))
        row = cursor.fetchone()
        if row is None:
            conn.rollback()
            return False, f"No saved financial details for this {kind.replace('_', ' ')}"

        columns = [desc[0] for desc in cursor.description]
        entry = _entry_from_row(kind, dict(zip(columns, row)), kept)

        negatives = negative_amounts(entry)
        if negatives:
            conn.rollback()
            return False, f"Amounts cannot be negative: {', '.join(negatives)}"

        balance = validate_entry(entry)
        if not balance.is_balanced:
            conn.rollback()
            return False, f"Expenses not balanced. {balance.describe()}"

        cursor.execute(f"DELETE FROM {layout['lines']} WHERE {fk} = ?", (entity_id,))
        _insert_lines(cursor, layout, entity_id, kept)
        cursor.execute(
            f"UPDATE {layout['entries']} SET {entry_class.COMMISSION_FIELD} = ?, updated_at = ? "
            f"WHERE {fk} = ?",
            (to_cents(entry.commission_total), _now(), entity_id),
        )
        conn.commit()

        print(f"[OK] Replaced {kind} commission lines #{entity_id} ({len(kept)} lines)")
        return True, f"Saved {len(kept)} commission lines"

    except Exception as e:
        if conn is not None:
            conn.rollback()
        print(f"[ERROR] Error replacing {kind} commission lines {entity_id}: {e}")
        return False, f"Error saving commission lines: {e}"

    finally:
        if conn is not None:
            conn.close()
