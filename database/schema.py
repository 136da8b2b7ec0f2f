# =============================================================================
# database/schema.py
# =============================================================================
# PURPOSE:
#   Defines the DATABASE SCHEMA - the structure of all tables.
#
# DATA MODEL:
#   Two revenue streams, each with an optional financial breakdown:
#
#   [SERVICE_PACKAGES]  <-- priced packages, referenced BY NAME
#
#   [CLIENT_BOOKINGS] ──┬── [BOOKING_FINANCIALS]        (0 or 1 per booking)
#                       └── [BOOKING_COMMISSIONS]       (0..n per booking)
#
#   [PRODUCT_ORDERS]  ──┬── [PRODUCT_ORDER_FINANCIALS]  (0 or 1 per order)
#                       └── [PRODUCT_ORDER_COMMISSIONS] (0..n per order)
#
# MONEY COLUMNS:
#   INTEGER minor units (cents). 1,500.50 is stored as 150050.
#   Conversion happens in queries.py (utils.money.to_cents / from_cents).
#
# DELETES:
#   Financials and commission lines hang off their booking/order with
#   ON DELETE CASCADE. Deleting the parent leaves nothing behind.
#
# ASSIGNED STAFF:
#   Stored as a JSON array of names in a TEXT column ('["Amal", "Nimal"]').
# =============================================================================

from .connection import get_db_connection


TABLES = [
    "service_packages",
    "client_bookings",
    "product_orders",
    "booking_financials",
    "booking_commissions",
    "product_order_financials",
    "product_order_commissions",
]


def init_db():
    """
    Create all tables and indexes if they do not exist yet.

    SAFE TO CALL MULTIPLE TIMES:
        Every statement is CREATE ... IF NOT EXISTS. Pages call this on
        every run.

    RETURNS:
        bool: True if successful, False if error
    """
    try:
        conn = get_db_connection()
        cursor = conn.cursor()

        # =====================================================================
        # SERVICE PACKAGES
        # =====================================================================
        # price is free text ("Rs. 50,000", "From 25,000"). The number is
        # parsed when needed; bookings refer to packages by name.
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS service_packages (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                price TEXT,
                category TEXT,
                description TEXT,
                created_at TEXT
            )
        """)

        # =====================================================================
        # CLIENT BOOKINGS
        # =====================================================================
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS client_bookings (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                inquiry_id TEXT UNIQUE,
                full_name TEXT NOT NULL,
                email TEXT,
                phone TEXT,
                event_type TEXT,
                package_name TEXT,
                event_date TEXT,             -- YYYY-MM-DD, used for period filters
                status TEXT DEFAULT 'New',
                assigned_staff TEXT DEFAULT '[]',
                created_at TEXT
            )
        """)

        # =====================================================================
        # PRODUCT ORDERS
        # =====================================================================
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS product_orders (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                order_id TEXT UNIQUE,
                customer_name TEXT NOT NULL,
                total_amount INTEGER DEFAULT 0,  -- cents
                status TEXT DEFAULT 'Pending',
                assigned_staff TEXT DEFAULT '[]',
                created_at TEXT                  -- used for period filters
            )
        """)

        # =====================================================================
        # BOOKING FINANCIALS (one per booking)
        # =====================================================================
        # photographer_expenses mirrors the sum of booking_commissions.
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS booking_financials (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                booking_id INTEGER NOT NULL UNIQUE,
                package_category TEXT,
                package_name TEXT,
                package_amount INTEGER DEFAULT 0,
                photographer_expenses INTEGER DEFAULT 0,
                videographer_expenses INTEGER DEFAULT 0,
                editor_expenses INTEGER DEFAULT 0,
                company_expenses INTEGER DEFAULT 0,
                other_expenses INTEGER DEFAULT 0,
                final_amount INTEGER DEFAULT 0,
                updated_at TEXT,
                FOREIGN KEY (booking_id) REFERENCES client_bookings(id) ON DELETE CASCADE
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS booking_commissions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                booking_id INTEGER NOT NULL,
                staff_name TEXT NOT NULL,
                staff_id TEXT,
                amount INTEGER DEFAULT 0,
                FOREIGN KEY (booking_id) REFERENCES client_bookings(id) ON DELETE CASCADE
            )
        """)

        # =====================================================================
        # PRODUCT ORDER FINANCIALS (one per order)
        # =====================================================================
        cursor.execute("""
            CREATE TABLE IF NOT EXISTS product_order_financials (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                product_order_id INTEGER NOT NULL UNIQUE,
                order_amount INTEGER DEFAULT 0,
                photographer_commission_total INTEGER DEFAULT 0,
                studio_fee INTEGER DEFAULT 0,
                other_expenses INTEGER DEFAULT 0,
                profit INTEGER DEFAULT 0,
                updated_at TEXT,
                FOREIGN KEY (product_order_id) REFERENCES product_orders(id) ON DELETE CASCADE
            )
        """)

        cursor.execute("""
            CREATE TABLE IF NOT EXISTS product_order_commissions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                product_order_id INTEGER NOT NULL,
                staff_name TEXT NOT NULL,
                staff_id TEXT,
                amount INTEGER DEFAULT 0,
                FOREIGN KEY (product_order_id) REFERENCES product_orders(id) ON DELETE CASCADE
            )
        """)

        # =====================================================================
        # INDEXES
        # =====================================================================
        # Period filters and the per-entity commission lookups
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_bookings_event_date ON client_bookings(event_date)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_orders_created_at ON product_orders(created_at)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_booking_commissions_booking ON booking_commissions(booking_id)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_order_commissions_order ON product_order_commissions(product_order_id)")
        cursor.execute("CREATE INDEX IF NOT EXISTS idx_packages_name ON service_packages(name)")

        conn.commit()
        conn.close()
        return True

    except Exception as e:
        print(f"[ERROR] Database initialization error: {e}")
        return False


def get_table_info():
    """
    Column information for every table, for the debug expander on the
    Import page.

    RETURNS:
        dict: {table name: [(cid, name, type, notnull, default, pk), ...]}
    """
    try:
        conn = get_db_connection()
        cursor = conn.cursor()
        cursor.execute("SELECT name FROM sqlite_master WHERE type='table' ORDER BY name")
        tables = [row[0] for row in cursor.fetchall() if not row[0].startswith("sqlite_")]

        table_info = {}
        for table in tables:
            cursor.execute(f"PRAGMA table_info({table})")
            table_info[table] = cursor.fetchall()

        conn.close()
        return table_info

    except Exception as e:
        print(f"[ERROR] Error getting table info: {e}")
        return {}
