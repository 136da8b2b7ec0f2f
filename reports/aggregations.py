# =============================================================================
# reports/aggregations.py
# =============================================================================
# PURPOSE:
#   Read-only grouping passes over a period's bookings:
#   - package_stats:  bookings and revenue per service package
#   - staff_stats:    assignments and revenue share per staff member
#   - category_stats: bookings per event category
#   - total_income:   declared (list price) revenue for the period
#
# DECLARED vs RECONCILED:
#   Everything here uses the package LIST PRICE, not the saved financial
#   entries. It is an estimate of what the period should bring in. The
#   reconciled figures come from reports/salary.py and the financial sheets.
#
# MISSING PRICES:
#   A booking whose package has no price record counts as zero revenue.
#   That is not an error; a [WARN] line is printed and the name is listed
#   by find_unpriced_packages() so the report can show it.
#
# ORDERING:
#   Results keep first-seen order. Sorting for display is done by the
#   report assembly.
# =============================================================================

from config import UNASSIGNED_KEY, UNASSIGNED_LABEL, UNCATEGORIZED_LABEL
from ledger.models import as_staff
from utils.money import ZERO


def price_lookup(packages):
    """{package name: parsed price}. The first package with a name wins."""
    prices = {}
    for package in packages or ():
        if package.name is not None and package.name not in prices:
            prices[package.name] = package.amount
    return prices


def price_of(package_name, packages):
    """Parsed price of a package by name, 0 if there is no such package."""
    prices = packages if isinstance(packages, dict) else price_lookup(packages)
    return prices.get(package_name, ZERO)


def find_unpriced_packages(bookings, packages):
    """
    Package names used by bookings that have no usable price.

    RETURNS:
        list[str]: sorted, unique names (no package or price parses to 0)
    """
    prices = price_lookup(packages)
    missing = set()
    for booking in bookings or ():
        name = booking.package_name
        if name and prices.get(name, ZERO) == ZERO:
            missing.add(name)
    return sorted(missing)


def _warn_unpriced(bookings, packages, source):
    for name in find_unpriced_packages(bookings, packages):
        print(f"[WARN] {source}: no price found for package '{name}', counted as 0")


def package_stats(bookings, packages):
    """
    Bookings and revenue per package.

    RULES:
        - Every package is listed, even with no bookings (count 0, revenue 0).
        - revenue = count x package price.

    RETURNS:
        dict: {package name: {"count": int, "revenue": Decimal}}

    EXAMPLE:
        packages = [Gold "Rs. 50,000"], bookings = [Gold, Gold]
        -> {"Gold": {"count": 2, "revenue": Decimal("100000.00")}}
    """
    counts = {}
    for booking in bookings or ():
        counts[booking.package_name] = counts.get(booking.package_name, 0) + 1

    stats = {}
    for package in packages or ():
        name = package.name or "Unknown"
        if name in stats:
            continue
        count = counts.get(package.name, 0)
        stats[name] = {
            "count": count,
            "revenue": package.amount * count,
        }

    _warn_unpriced(bookings, packages, "package_stats")
    return stats


def staff_stats(bookings, packages):
    """
    Assignments and revenue share per staff member.

    RULES:
        - Each assigned staff member gets one assignment per booking.
        - Revenue is split equally: price / number of assigned staff.
        - A booking with nobody assigned goes to the "Unassigned" bucket
          with a revenue share of 0. Its key is UNASSIGNED_KEY, not the
          label, so it never merges with a staff member of that name.

    RETURNS:
        dict: {staff key: {"staff_name", "count", "revenue", "assignments"}}
              revenue is an unrounded Decimal; assignments lists the
              booking reference codes.

    EXAMPLE:
        Rs. 300 booking, staff [A, B, C] -> A, B and C each get Rs. 100
    """
    prices = price_lookup(packages)
    stats = {}

    def bucket(key, name):
        if key not in stats:
            stats[key] = {"staff_name": name, "count": 0, "revenue": ZERO, "assignments": []}
        return stats[key]

    for booking in bookings or ():
        members = []
        seen = set()
        for item in booking.assigned_staff or ():
            member = as_staff(item)
            if member.key not in seen:
                seen.add(member.key)
                members.append(member)

        reference = booking.reference or "Unknown"

        if not members:
            row = bucket(UNASSIGNED_KEY, UNASSIGNED_LABEL)
            row["count"] += 1
            row["assignments"].append(reference)
            continue

        share = prices.get(booking.package_name, ZERO) / len(members)
        for member in members:
            row = bucket(member.key, member.name)
            row["count"] += 1
            row["revenue"] += share
            row["assignments"].append(reference)

    _warn_unpriced(bookings, packages, "staff_stats")
    return stats


def category_stats(bookings):
    """
    Bookings per event category.
    Missing or blank event types are counted under "Uncategorized".

    RETURNS:
        dict: {category: count}
    """
    stats = {}
    for booking in bookings or ():
        category = (booking.event_type or "").strip() or UNCATEGORIZED_LABEL
        stats[category] = stats.get(category, 0) + 1
    return stats


def total_income(bookings, packages):
    """Sum of list prices over all bookings (declared revenue estimate)."""
    prices = price_lookup(packages)
    total = ZERO
    for booking in bookings or ():
        total += prices.get(booking.package_name, ZERO)
    return total
