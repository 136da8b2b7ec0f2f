# =============================================================================
# database/__init__.py
# =============================================================================
# PURPOSE:
#   Makes the database folder a Python package and provides easy imports.
#
# USAGE:
#   from database import init_db, fetch_bookings, save_financial_entry
#
#   The module itself can be passed as the `store` of the reconcile
#   service, since it provides save_financial_entry():
#       import database
#       save_booking_entry(context, booking, entry, store=database)
# =============================================================================

from .connection import get_db_connection

from .schema import init_db, get_table_info, TABLES

from .queries import (
    # Periods
    month_window,

    # Service packages
    load_packages,
    fetch_packages,
    create_package,
    check_package_exists,

    # Client bookings
    load_bookings,
    fetch_bookings,
    create_booking,
    check_booking_exists,
    delete_booking,

    # Product orders
    load_product_orders,
    fetch_product_orders,
    create_product_order,
    check_product_order_exists,
    delete_product_order,
    update_assigned_staff,

    # Financial entries and commission lines
    load_financial_entries,
    load_financial_entry,
    load_commission_lines,
    save_financial_entry,
    replace_commission_lines,
)
