# =============================================================================
# importers/__init__.py
# =============================================================================
# PURPOSE:
#   Makes the importers folder a Python package and provides easy imports.
#
# WHAT ARE IMPORTERS?
#   Classes that read a CSV/Excel export, map its columns onto our tables,
#   skip duplicates and save the rest. Used to load packages, bookings and
#   product orders into the ledger.
#
# AVAILABLE IMPORTERS:
#   - PackageImporter: service package price list
#   - BookingImporter: client bookings / inquiries
#   - ProductOrderImporter: product orders
# =============================================================================

from .base import CsvImporter
from .package_importer import PackageImporter
from .booking_importer import BookingImporter
from .product_order_importer import ProductOrderImporter
