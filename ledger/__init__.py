# =============================================================================
# ledger/__init__.py
# =============================================================================
# PURPOSE:
#   The balanced-ledger core: value types, the balance check, commission
#   line syncing and the open/save workflow.
#
# USAGE:
#   from ledger import validate, reconcile, open_booking_entry
# =============================================================================

from .errors import LedgerError, PermissionDenied

from .models import (
    StaffMember,
    CommissionLine,
    ServicePackage,
    LedgerEntry,
    BookingFinancialEntry,
    ProductOrderFinancialEntry,
    Booking,
    ProductOrder,
    staff_key,
    parse_staff_list,
)

from .balance import BalanceResult, validate, validate_entry, negative_amounts

from .commissions import (
    reconcile,
    lines_to_persist,
    set_line_amount,
    commission_total,
)

from .access import CallerContext, require_management

from .service import (
    SaveResult,
    open_booking_entry,
    open_product_order_entry,
    save_booking_entry,
    save_product_order_entry,
)
