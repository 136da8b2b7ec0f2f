# =============================================================================
# ledger/commissions.py
# =============================================================================
# PURPOSE:
#   Keeps a breakdown's commission lines in step with who is actually
#   assigned to the booking or order.
#
# THE RULES (reconcile):
#   For each assigned staff member, in assignment order:
#     - a saved line for them exists  -> keep its amount
#     - no saved line                 -> new line with amount 0
#   Saved lines for people no longer assigned are dropped. Their money is
#   NOT moved anywhere: the balance check will show the gap and the
#   operator decides where it goes.
#
# ON SAVE (lines_to_persist):
#   Zero-amount lines are fine while editing but are not written.
#
# EXAMPLE:
#   saved    = [Amal: 100, Nimal: 50]
#   assigned = [Amal, Kasun]
#   result   = [Amal: 100, Kasun: 0]      (Nimal dropped)
# =============================================================================

from utils.money import ZERO, to_money, money_sum
from .models import CommissionLine, as_staff


def reconcile(assigned_staff, saved_lines):
    """
    Build the commission lines for the current assignment.

    PARAMETERS:
        assigned_staff (list): names or StaffMember objects, in display order
        saved_lines (list): CommissionLine objects or dicts from storage

    RETURNS:
        list[CommissionLine]: one line per assigned staff member
    """
    saved = {}
    for line in saved_lines or ():
        line = CommissionLine.from_record(line)
        # First saved line wins if storage ever holds duplicates
        saved.setdefault(line.key, line)
        if line.staff_id is not None:
            # Lets an id-carrying saved line match a name-only assignment
            saved.setdefault(line.staff_name, line)

    result = []
    seen = set()
    for item in assigned_staff or ():
        member = as_staff(item)
        if member.key in seen:
            continue
        seen.add(member.key)

        existing = saved.get(member.key)
        amount = existing.amount if existing is not None else ZERO
        staff_id = member.staff_id
        if staff_id is None and existing is not None:
            staff_id = existing.staff_id
        result.append(CommissionLine(staff_name=member.name, amount=amount, staff_id=staff_id))

    return result


def lines_to_persist(lines):
    """Drop zero-amount lines before writing them to storage."""
    kept = []
    for line in lines or ():
        line = CommissionLine.from_record(line)
        if line.amount != ZERO:
            kept.append(line)
    return kept


def set_line_amount(lines, staff_name, amount):
    """
    Return a copy of `lines` with one staff member's amount replaced.
    Lines for other staff are untouched. Unknown names are ignored.
    """
    updated = []
    for line in lines:
        if line.staff_name == staff_name:
            line = CommissionLine(staff_name=line.staff_name, amount=to_money(amount), staff_id=line.staff_id)
        updated.append(line)
    return updated


def commission_total(lines):
    return money_sum(CommissionLine.from_record(line).amount for line in lines or ())
