# =============================================================================
# utils/money.py
# =============================================================================
# PURPOSE:
#   Every amount in the ledger goes through these helpers.
#   Amounts are decimal.Decimal values with exactly 2 places, so that
#   "balanced" means balanced to the cent, every time.
#
# WHY NOT FLOATS?
#   0.1 + 0.2 == 0.30000000000000004 in float arithmetic.
#   A breakdown of 1,000.10 split into 3 lines could fail an exact
#   equality check even though the operator typed the right numbers.
#   Decimal("0.1") + Decimal("0.2") == Decimal("0.3") exactly.
#
# STORAGE:
#   The database keeps integer minor units (cents). to_cents() and
#   from_cents() convert at the boundary.
# =============================================================================

import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from config import CURRENCY_SYMBOL, MONEY_QUANTUM, MINOR_UNITS

QUANTUM = Decimal(MONEY_QUANTUM)
ZERO = Decimal("0.00")

# Leading numeric token of a price label, any comma grouping:
# "Rs. 50,000" -> "50,000", "Rs. 1,50,000" -> "1,50,000"
PRICE_PATTERN = re.compile(r"(\d[\d,]*(?:\.\d+)?)")


def to_money(value, default=ZERO):
    """
    Coerce a value to a Decimal with 2 places.

    ACCEPTS:
        None, "", int, float, Decimal, numeric strings ("1,234.50"),
        and pandas/numpy scalars (anything with .item()).

    RETURNS:
        Decimal: quantized to 0.01, or `default` for unusable input.

    EXAMPLE:
        to_money("1,000.5")  -> Decimal("1000.50")
        to_money(0.1)        -> Decimal("0.10")
        to_money("n/a")      -> Decimal("0.00")
    """
    if value is None:
        return default
    if isinstance(value, Decimal):
        return value.quantize(QUANTUM, rounding=ROUND_HALF_UP)
    # numpy types from pandas DataFrames
    if hasattr(value, "item") and not isinstance(value, (str, bytes)):
        value = value.item()
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return Decimal(value).quantize(QUANTUM)
    if isinstance(value, float):
        if value != value:  # NaN
            return default
        # str() first so 0.1 becomes "0.1", not 0.1000000000000000055...
        return Decimal(str(value)).quantize(QUANTUM, rounding=ROUND_HALF_UP)
    try:
        cleaned = str(value).replace(",", "").strip()
        if cleaned == "" or cleaned.lower() in ("nan", "none", "n/a", "-"):
            return default
        return Decimal(cleaned).quantize(QUANTUM, rounding=ROUND_HALF_UP)
    except (InvalidOperation, ValueError, TypeError):
        return default


def parse_price(label):
    """
    Parse a free-text package price into a Decimal.

    HOW IT WORKS:
        Take the first numeric token, strip every comma in it (thousands
        or lakh grouping alike) and round to 2 places.
        Anything without a number is worth zero.

    EXAMPLE:
        parse_price("Rs. 50,000")        -> Decimal("50000.00")
        parse_price("LKR 12,500.50 +")   -> Decimal("12500.50")
        parse_price("Rs. 1,50,000")      -> Decimal("150000.00")
        parse_price("Contact us")        -> Decimal("0.00")
        parse_price(None)                -> Decimal("0.00")
    """
    if label is None:
        return ZERO
    if isinstance(label, (int, float, Decimal)):
        return to_money(label)
    match = PRICE_PATTERN.search(str(label))
    if not match:
        return ZERO
    return to_money(match.group(1).replace(",", ""))


def money_sum(values):
    """Sum an iterable of amounts (any accepted type) as Decimal."""
    total = ZERO
    for value in values:
        total += to_money(value)
    return total


def to_cents(value):
    """Decimal amount -> integer minor units for storage."""
    return int((to_money(value) * MINOR_UNITS).to_integral_value(rounding=ROUND_HALF_UP))


def from_cents(cents):
    """Integer minor units from storage -> Decimal amount."""
    if cents is None:
        return ZERO
    if hasattr(cents, "item"):
        cents = cents.item()
    if isinstance(cents, float):
        if cents != cents:  # NaN from a LEFT JOIN
            return ZERO
        cents = int(cents)
    return (Decimal(int(cents)) / MINOR_UNITS).quantize(QUANTUM)


def format_money(value, symbol=CURRENCY_SYMBOL):
    """
    Format an amount for display.

    EXAMPLE:
        format_money(Decimal("-1500"))  -> "-Rs. 1,500.00"
    """
    amount = to_money(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol} {abs(amount):,.2f}"
