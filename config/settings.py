# =============================================================================
# config/settings.py
# =============================================================================
# PURPOSE:
#   Central configuration file for the studio ledger.
#   All "magic numbers", labels and category lists live here.
#   Change a label once here and every report and page picks it up.
#
# WHAT LIVES HERE:
#   1. Database location
#   2. Money settings (currency symbol, precision)
#   3. The fixed expense categories for each revenue stream
#   4. Report sheet names, bucket labels and placeholder messages
#   5. Roles and status lists used by the console
# =============================================================================

# -----------------------------------------------------------------------------
# DATABASE CONFIGURATION
# -----------------------------------------------------------------------------
# SQLite database file path (relative to where you run the app)
DB_PATH = "studio_ledger.db"

# -----------------------------------------------------------------------------
# MONEY CONFIGURATION
# -----------------------------------------------------------------------------
# Amounts are kept as Decimal with 2 places. No tolerance when comparing:
# a breakdown is either balanced to the cent or it is not.
CURRENCY_SYMBOL = "Rs."
MONEY_QUANTUM = "0.01"

# Minor units per major unit (cents per rupee). The database stores integers.
MINOR_UNITS = 100

# -----------------------------------------------------------------------------
# BOOKING FINANCIAL ENTRY
# -----------------------------------------------------------------------------
# Categories an operator fills in by hand. photographer_expenses is not in
# this list because it is always the sum of the commission lines.
BOOKING_CATEGORY_FIELDS = [
    "videographer_expenses",   # Video crew
    "editor_expenses",         # Post-production / editing
    "company_expenses",        # Studio's own share
    "other_expenses",          # Anything else (travel, prints...)
]
BOOKING_COMMISSION_FIELD = "photographer_expenses"

# -----------------------------------------------------------------------------
# PRODUCT ORDER FINANCIAL ENTRY
# -----------------------------------------------------------------------------
PRODUCT_ORDER_CATEGORY_FIELDS = [
    "studio_fee",       # Studio's handling fee
    "other_expenses",   # Materials, courier, etc.
    "profit",           # What is left for the business
]
PRODUCT_ORDER_COMMISSION_FIELD = "photographer_commission_total"

# Human-readable labels for every money field (used on sheets and pages)
FIELD_LABELS = {
    "package_amount": "Package Amount",
    "photographer_expenses": "Photographer Expenses",
    "videographer_expenses": "Videographer Expenses",
    "editor_expenses": "Editor Expenses",
    "company_expenses": "Company Expenses",
    "other_expenses": "Other Expenses",
    "final_amount": "Final Amount",
    "order_amount": "Order Amount",
    "photographer_commission_total": "Photographer Commission",
    "studio_fee": "Studio Fee",
    "profit": "Profit",
}

# -----------------------------------------------------------------------------
# ENTITY KINDS
# -----------------------------------------------------------------------------
# The two revenue streams. Used as the "kind" argument in the database layer.
KIND_BOOKING = "booking"
KIND_PRODUCT_ORDER = "product_order"
ENTITY_KINDS = [KIND_BOOKING, KIND_PRODUCT_ORDER]

# -----------------------------------------------------------------------------
# REPORT LABELS
# -----------------------------------------------------------------------------
UNASSIGNED_LABEL = "Unassigned"
# Internal key of the Unassigned bucket. Staff keys are always strings
# (names or "id:<id>"), so a real staff member called "Unassigned" keeps
# a row of their own.
UNASSIGNED_KEY = None
UNCATEGORIZED_LABEL = "Uncategorized"
SUMMARY_LABEL = "SUMMARY"
NOT_AVAILABLE = "N/A"

# Sheet names, in the order they appear in the period report
SHEET_BOOKING_DETAILS = "Booking Details"
SHEET_PRODUCT_ORDERS = "Product Orders"
SHEET_PRODUCT_ORDER_FINANCIALS = "Product Order Financials"
SHEET_PACKAGE_ANALYTICS = "Package Analytics"
SHEET_STAFF_PERFORMANCE = "Staff Performance"
SHEET_CATEGORY_BREAKDOWN = "Category Breakdown"
SHEET_FINANCIAL_SUMMARY = "Financial Summary"
SHEET_BOOKING_FINANCIALS = "Booking Financials"
SHEET_PHOTOGRAPHER_EARNINGS = "Photographer Earnings"
SHEET_SALARY = "Salary Sheet"

REPORT_SHEETS = [
    SHEET_BOOKING_DETAILS,
    SHEET_PRODUCT_ORDERS,
    SHEET_PRODUCT_ORDER_FINANCIALS,
    SHEET_PACKAGE_ANALYTICS,
    SHEET_STAFF_PERFORMANCE,
    SHEET_CATEGORY_BREAKDOWN,
    SHEET_FINANCIAL_SUMMARY,
    SHEET_BOOKING_FINANCIALS,
    SHEET_PHOTOGRAPHER_EARNINGS,
    SHEET_SALARY,
]

# Sheets of the per-employee salary statement
SHEET_STATEMENT_SUMMARY = "Salary Summary"
SHEET_STATEMENT_BOOKINGS = "Booking Earnings"
SHEET_STATEMENT_PRODUCTS = "Product Order Earnings"

STATEMENT_SHEETS = [
    SHEET_STATEMENT_SUMMARY,
    SHEET_STATEMENT_BOOKINGS,
    SHEET_STATEMENT_PRODUCTS,
]

# Placeholder rows used when a section has nothing to show
PLACEHOLDERS = {
    SHEET_BOOKING_DETAILS: "No bookings found for this period",
    SHEET_PRODUCT_ORDERS: "No product orders found for this period",
    SHEET_PRODUCT_ORDER_FINANCIALS: "No financial data available for this period",
    SHEET_PACKAGE_ANALYTICS: "No package bookings for this period",
    SHEET_STAFF_PERFORMANCE: "No staff assignments for this period",
    SHEET_CATEGORY_BREAKDOWN: "No bookings to categorize for this period",
    SHEET_FINANCIAL_SUMMARY: "No bookings or product orders recorded for this period",
    SHEET_BOOKING_FINANCIALS: "No financial data available for this period",
    SHEET_PHOTOGRAPHER_EARNINGS: "No photographer earnings recorded for this period",
    SHEET_SALARY: "No salary data available for this period",
    SHEET_STATEMENT_SUMMARY: "No earnings recorded for this period",
    SHEET_STATEMENT_BOOKINGS: "No booking commissions recorded for this period",
    SHEET_STATEMENT_PRODUCTS: "No product order commissions recorded for this period",
}

GENERATED_BY = "Studio Management System"

# -----------------------------------------------------------------------------
# ROLES
# -----------------------------------------------------------------------------
# The authorization collaborator tags every caller with one of these.
ROLE_MANAGEMENT = "management"
ROLE_STAFF = "staff"
ROLES = [ROLE_MANAGEMENT, ROLE_STAFF]

# -----------------------------------------------------------------------------
# STATUS OPTIONS
# -----------------------------------------------------------------------------
BOOKING_STATUSES = ["New", "Contacted", "Confirmed", "Completed", "Cancelled"]
PRODUCT_ORDER_STATUSES = ["Pending", "In Progress", "Ready", "Delivered", "Cancelled"]

# -----------------------------------------------------------------------------
# EXPORT CONFIGURATION
# -----------------------------------------------------------------------------
# pandas ExcelWriter engine for the downloadable workbook
EXCEL_ENGINE = "openpyxl"
EXCEL_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
