# =============================================================================
# test_commissions.py - commission lines vs. assigned staff
# =============================================================================

from decimal import Decimal

from ledger import (
    CommissionLine,
    StaffMember,
    commission_total,
    lines_to_persist,
    reconcile,
    set_line_amount,
)


def test_new_assignment_gets_zero_lines():
    lines = reconcile(["Amal", "Nimal"], [])
    assert [line.staff_name for line in lines] == ["Amal", "Nimal"]
    assert all(line.amount == Decimal("0") for line in lines)


def test_saved_amounts_are_kept():
    saved = [CommissionLine("Amal", 500), {"staff_name": "Nimal", "amount": "250.50"}]
    lines = reconcile(["Amal", "Nimal"], saved)
    assert [line.amount for line in lines] == [Decimal("500"), Decimal("250.50")]


def test_reconcile_is_idempotent():
    staff = ["Amal", "Nimal", "Kasun"]
    once = reconcile(staff, [CommissionLine("Nimal", 300)])
    assert reconcile(staff, once) == once


def test_removed_staff_line_is_dropped():
    saved = [CommissionLine("Amal", 500), CommissionLine("Nimal", 300)]
    lines = reconcile(["Amal"], saved)
    assert lines == [CommissionLine("Amal", 500)]


def test_order_follows_assignment_and_duplicates_collapse():
    lines = reconcile(["Nimal", "Amal", "Nimal"], [CommissionLine("Amal", 100)])
    assert [line.staff_name for line in lines] == ["Nimal", "Amal"]
    assert lines[1].amount == Decimal("100")


def test_no_staff_means_no_lines():
    assert reconcile([], [CommissionLine("Amal", 500)]) == []
    assert reconcile(None, None) == []


def test_saved_line_with_id_matches_name_only_assignment():
    saved = [CommissionLine("Amal", 400, staff_id="7")]
    lines = reconcile(["Amal"], saved)
    assert lines[0].amount == Decimal("400")
    assert lines[0].staff_id == "7"


def test_same_name_different_ids_stay_apart():
    staff = [StaffMember("Amal", "1"), StaffMember("Amal", "2")]
    saved = [CommissionLine("Amal", 100, staff_id="1"), CommissionLine("Amal", 200, staff_id="2")]
    lines = reconcile(staff, saved)
    assert [line.amount for line in lines] == [Decimal("100"), Decimal("200")]


def test_zero_lines_are_not_persisted():
    lines = [CommissionLine("Amal", 0), CommissionLine("Nimal", 150)]
    assert lines_to_persist(lines) == [CommissionLine("Nimal", 150)]


def test_set_line_amount_and_total():
    lines = reconcile(["Amal", "Nimal"], [])
    lines = set_line_amount(lines, "Nimal", "1,250")
    assert lines[1].amount == Decimal("1250")
    assert lines[0].amount == Decimal("0")
    assert commission_total(lines) == Decimal("1250")
