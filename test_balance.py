# =============================================================================
# test_balance.py - breakdown validation
# =============================================================================

import random
from decimal import Decimal

from ledger import (
    BookingFinancialEntry,
    CommissionLine,
    ProductOrderFinancialEntry,
    validate,
    validate_entry,
)


def test_balanced_breakdown():
    result = validate(1000, [200, 300], [{"amount": 500}])
    assert result.is_balanced
    assert result.total_allocated == Decimal("1000")
    assert result.difference == Decimal("0")


def test_under_allocated_reports_positive_difference():
    result = validate(1000, [200], [])
    assert not result.is_balanced
    assert result.difference == Decimal("800")
    assert result.is_under_allocated
    assert not result.is_over_allocated


def test_over_allocated_reports_negative_difference():
    result = validate(100, [150], [])
    assert not result.is_balanced
    assert result.difference == Decimal("-50")
    assert result.is_over_allocated


def test_no_float_drift():
    # 0.1 + 0.2 + 999.8 is not 1000.1 in binary floating point
    assert validate("1000.10", [0.1, 0.2], [CommissionLine("Amal", 999.8)]).is_balanced


def test_empty_breakdown_of_zero_is_balanced():
    assert validate(0, [], []).is_balanced


def test_category_dict_accepted():
    assert validate(300, {"studio_fee": 100, "profit": 200}).is_balanced


def test_describe_messages():
    assert validate(50000, [50000]).describe() == "Balanced: Rs. 50,000.00 allocated"
    message = validate(50000, [45000]).describe()
    assert "Rs. 45,000.00" in message
    assert "Difference: Rs. 5,000.00" in message


def test_booking_entry_commission_total_follows_lines():
    entry = BookingFinancialEntry(
        package_amount=50000,
        videographer_expenses=10000,
        editor_expenses=5000,
        company_expenses=20000,
        commission_lines=[CommissionLine("Amal", 10000), CommissionLine("Nimal", 5000)],
    )
    assert entry.photographer_expenses == Decimal("15000")
    assert validate_entry(entry).is_balanced


def test_commission_field_cannot_be_set_without_lines():
    entry = BookingFinancialEntry(package_amount=100, photographer_expenses=100)
    assert entry.photographer_expenses == Decimal("0")
    result = validate_entry(entry)
    assert not result.is_balanced
    assert result.difference == Decimal("100")


def test_product_order_entry_balance():
    entry = ProductOrderFinancialEntry(
        order_amount=5000,
        studio_fee=1000,
        other_expenses=500,
        profit=2500,
        commission_lines=[CommissionLine("Amal", 1000)],
    )
    assert entry.photographer_commission_total == Decimal("1000")
    assert validate_entry(entry).is_balanced

    entry.profit = Decimal("2000")
    assert validate_entry(entry).difference == Decimal("500")


def _split_cents(rng, total_cents, parts):
    """Cut total_cents into `parts` non-negative pieces that sum exactly."""
    cuts = sorted(rng.randint(0, total_cents) for _ in range(parts - 1))
    edges = [0] + cuts + [total_cents]
    return [Decimal(high - low) / 100 for low, high in zip(edges, edges[1:])]


def test_generated_breakdowns_balance_exactly():
    rng = random.Random(20261019)
    for _ in range(200):
        total_cents = rng.randint(1, 10_000_000)
        pieces = _split_cents(rng, total_cents, rng.randint(1, 12))
        split = rng.randint(0, len(pieces))
        categories = pieces[:split]
        lines = [CommissionLine(f"Staff {i}", amount) for i, amount in enumerate(pieces[split:])]
        declared = Decimal(total_cents) / 100

        result = validate(declared, categories, lines)
        assert result.is_balanced, (declared, pieces)
        assert result.difference == Decimal("0")

        off_by_a_cent = validate(declared + Decimal("0.01"), categories, lines)
        assert not off_by_a_cent.is_balanced
        assert off_by_a_cent.difference == Decimal("0.01")
