# =============================================================================
# ledger/balance.py
# =============================================================================
# PURPOSE:
#   The "balanced ledger" check.
#   A breakdown is balanced when every category amount plus every
#   commission line adds up to the declared revenue amount, to the cent.
#
# BUSINESS RULES:
#   - difference = declared - allocated
#       positive -> money still to allocate (under-allocated)
#       negative -> more allocated than was earned (over-allocated)
#   - No tolerance and no rounding to force a match.
#   - Every amount must be >= 0. negative_amounts() names the offenders.
#   - Unbalanced is a normal editing state, so nothing here raises.
#     Callers block the save and show the difference instead.
#
# PERFORMANCE:
#   Runs on every keystroke in the reconcile page. It is one pass over the
#   categories and the lines, nothing more.
# =============================================================================

from dataclasses import dataclass
from decimal import Decimal

from config import FIELD_LABELS
from utils.money import ZERO, to_money, format_money


@dataclass(frozen=True)
class BalanceResult:
    is_balanced: bool
    total_allocated: Decimal
    difference: Decimal
    declared_amount: Decimal = ZERO

    @property
    def is_under_allocated(self):
        return self.difference > 0

    @property
    def is_over_allocated(self):
        return self.difference < 0

    def describe(self):
        """
        Operator-facing message for the save button / toast.

        EXAMPLE:
            "Balanced: Rs. 50,000.00 allocated"
            "Total breakdown (Rs. 45,000.00) must equal Rs. 50,000.00.
             Difference: Rs. 5,000.00"
        """
        if self.is_balanced:
            return f"Balanced: {format_money(self.total_allocated)} allocated"
        return (
            f"Total breakdown ({format_money(self.total_allocated)}) must equal "
            f"{format_money(self.declared_amount)}. "
            f"Difference: {format_money(self.difference)}"
        )


def _line_amount(line):
    """Amount of a CommissionLine, a dict with 'amount', or a bare number."""
    if hasattr(line, "amount"):
        return line.amount
    if isinstance(line, dict):
        return line.get("amount")
    return line


def validate(declared_amount, category_amounts, commission_lines=()):
    """
    Compare a breakdown against its declared revenue amount.

    PARAMETERS:
        declared_amount: package price / order total (any money-like value)
        category_amounts: list of amounts, or a {field: amount} dict
        commission_lines: CommissionLine objects or {"amount": ...} dicts

    RETURNS:
        BalanceResult(is_balanced, total_allocated, difference, declared_amount)

    EXAMPLE:
        validate(1000, [200, 300], [{"amount": 500}]).is_balanced  -> True
        validate(1000, [200], []).difference                        -> Decimal("800.00")
    """
    declared = to_money(declared_amount)

    if isinstance(category_amounts, dict):
        category_amounts = category_amounts.values()

    allocated = ZERO
    for amount in category_amounts or ():
        allocated += to_money(amount)
    for line in commission_lines or ():
        allocated += to_money(_line_amount(line))

    difference = declared - allocated
    return BalanceResult(
        is_balanced=difference == ZERO,
        total_allocated=allocated,
        difference=difference,
        declared_amount=declared,
    )


def validate_entry(entry):
    """validate() over a LedgerEntry (either variant)."""
    return validate(entry.declared_amount, entry.category_amounts(), entry.commission_lines)


def negative_amounts(entry):
    """
    Labels of every negative amount in an entry.

    A negative commission line can be offset by an over-sized category and
    still balance, so the sign is checked on its own before saving.

    RETURNS:
        list[str]: field labels and staff names, empty when all amounts are >= 0

    EXAMPLE:
        company 1200, lines [Amal -300, Nimal 100] -> ["Amal"]
    """
    found = []
    if to_money(entry.declared_amount) < ZERO:
        found.append(FIELD_LABELS.get(entry.DECLARED_FIELD, entry.DECLARED_FIELD))
    for name, amount in entry.category_amounts().items():
        if to_money(amount) < ZERO:
            found.append(FIELD_LABELS.get(name, name))
    for line in entry.commission_lines or ():
        if to_money(_line_amount(line)) < ZERO:
            found.append(getattr(line, "staff_name", None) or "commission line")
    return found
