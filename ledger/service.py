# =============================================================================
# ledger/service.py
# =============================================================================
# PURPOSE:
#   The reconcile workflow for one booking or product order:
#
#   1. OPEN   - build an in-memory financial entry for the editor
#               (saved figures if there are any, sensible defaults if not,
#                commission lines synced with who is assigned right now)
#   2. EDIT   - the page changes fields and re-runs validate_entry()
#   3. SAVE   - only a balanced entry is handed to the store, in one call
#
# WHAT "SAVE" GUARANTEES:
#   - The caller must be management (explicit CallerContext, no session
#     lookups in here).
#   - Commission lines are re-synced with the assignment before checking,
#     so a line for someone who was unassigned mid-edit never sneaks in.
#   - Negative amounts are refused before the balance check.
#   - Unbalanced entries are refused with the difference in the message.
#     Nothing is rounded or adjusted to make them fit.
#   - Zero-amount lines are dropped, then the entry and its lines go to
#     store.save_financial_entry() together. The store decides how to make
#     that atomic (the sqlite store uses one transaction).
#   - Store failures come back verbatim. No retries.
# =============================================================================

from dataclasses import dataclass, field, replace
from typing import List, Optional

from .access import require_management
from .balance import BalanceResult, negative_amounts, validate_entry
from .commissions import reconcile, lines_to_persist
from .errors import PermissionDenied
from .models import BookingFinancialEntry, ProductOrderFinancialEntry, CommissionLine
from utils.money import ZERO


@dataclass
class SaveResult:
    success: bool
    message: str
    balance: Optional[BalanceResult] = None
    lines: List[CommissionLine] = field(default_factory=list)


# =============================================================================
# OPEN
# =============================================================================

def open_booking_entry(booking, packages=()):
    """
    Build the editable breakdown for a booking.

    DEFAULTS WHEN NOTHING IS SAVED YET:
        package_category -> booking.event_type
        package_name     -> booking.package_name
        package_amount   -> price of the booked package (0 if unknown)
        commission lines -> one zero line per assigned staff member

    RETURNS:
        BookingFinancialEntry (a new object; the booking is not modified)
    """
    saved = booking.financial_entry
    list_price = ZERO
    for package in packages or ():
        if package.name == booking.package_name:
            list_price = package.amount
            break

    if saved is None:
        entry = BookingFinancialEntry(
            package_category=booking.event_type or "",
            package_name=booking.package_name or "",
            package_amount=list_price,
        )
        saved_lines = []
    else:
        entry = replace(
            saved,
            package_category=saved.package_category or booking.event_type or "",
            package_name=saved.package_name or booking.package_name or "",
            package_amount=saved.package_amount if saved.package_amount != ZERO else list_price,
            commission_lines=list(saved.commission_lines),
        )
        saved_lines = saved.commission_lines

    return entry.with_lines(reconcile(booking.assigned_staff, saved_lines))


def open_product_order_entry(order):
    """
    Build the editable breakdown for a product order.
    order_amount defaults to the order total when nothing is saved yet.
    """
    saved = order.financial_entry
    if saved is None:
        entry = ProductOrderFinancialEntry(order_amount=order.total_amount)
        saved_lines = []
    else:
        entry = replace(saved, commission_lines=list(saved.commission_lines))
        saved_lines = saved.commission_lines

    return entry.with_lines(reconcile(order.assigned_staff, saved_lines))


# =============================================================================
# SAVE
# =============================================================================

def _save(context, entity, entry, store, label):
    try:
        require_management(context, action=f"save {label} financials")
    except PermissionDenied as e:
        return SaveResult(False, str(e))

    if entity.id is None:
        return SaveResult(False, f"Cannot save financials: {label} has no id")

    entry = replace(entry, commission_lines=reconcile(entity.assigned_staff, entry.commission_lines))
    negatives = negative_amounts(entry)
    if negatives:
        return SaveResult(False, f"Amounts cannot be negative: {', '.join(negatives)}", None, entry.commission_lines)

    balance = validate_entry(entry)
    if not balance.is_balanced:
        return SaveResult(False, f"Expenses not balanced. {balance.describe()}", balance, entry.commission_lines)

    if isinstance(entry, BookingFinancialEntry):
        # Final amount equals the package amount once balanced
        entry.final_amount = entry.package_amount

    lines = lines_to_persist(entry.commission_lines)
    success, message = store.save_financial_entry(entry.KIND, entity.id, entry.to_breakdown(), lines)
    return SaveResult(success, message, balance, lines)


def save_booking_entry(context, booking, entry, store):
    """
    Validate and persist a booking breakdown.

    PARAMETERS:
        context (CallerContext): who is saving
        booking (Booking): the booking being reconciled
        entry (BookingFinancialEntry): the edited breakdown
        store: persistence collaborator with
               save_financial_entry(kind, entity_id, breakdown, lines) -> (bool, str)

    RETURNS:
        SaveResult
    """
    return _save(context, booking, entry, store, "booking")


def save_product_order_entry(context, order, entry, store):
    """Validate and persist a product order breakdown. See save_booking_entry()."""
    return _save(context, order, entry, store, "product order")
