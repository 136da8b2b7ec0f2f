# =============================================================================
# pages/1_Reconcile.py
# =============================================================================
# PURPOSE:
#   Enter the expense and commission breakdown for one booking or one
#   product order, see whether it balances, and save it.
#
# HOW IT WORKS:
#   1. Pick a month and a booking / product order from that month
#   2. The editor opens with saved figures, or defaults (package price /
#      order total) if nothing is saved yet
#   3. Every assigned staff member gets a commission input
#   4. The balance line updates on every change
#   5. Save is refused unless the breakdown balances to the cent
#
# WHO CAN SAVE:
#   Only the management role. Staff can look but the save is rejected.
# =============================================================================

import streamlit as st

import database
from config import FIELD_LABELS, KIND_BOOKING, KIND_PRODUCT_ORDER
from database import init_db, fetch_bookings, fetch_product_orders, fetch_packages
from ledger import (
    open_booking_entry,
    open_product_order_entry,
    save_booking_entry,
    save_product_order_entry,
    validate_entry,
)
from utils.money import format_money, to_money
from utils.styling import apply_minimal_style, period_selector, caller_context, balance_badge, money_metric

# -----------------------------------------------------------------------------
# PAGE CONFIGURATION
# -----------------------------------------------------------------------------
st.set_page_config(
    page_title="Reconcile - Studio Ledger",
    page_icon="⚖️",
    layout="wide",
)

apply_minimal_style()

init_db()

context = caller_context()

st.title("Reconcile")
st.caption("Split each booking and product order into expenses and staff commissions.")

period = period_selector("reconcile")

stream = st.radio("Revenue stream", ["Bookings", "Product Orders"], horizontal=True)
kind = KIND_BOOKING if stream == "Bookings" else KIND_PRODUCT_ORDER

# -----------------------------------------------------------------------------
# PICK THE ENTITY
# -----------------------------------------------------------------------------
packages = fetch_packages()
if kind == KIND_BOOKING:
    entities = fetch_bookings(period.month, period.year)
else:
    entities = fetch_product_orders(period.month, period.year)

if not entities:
    st.info(f"No {stream.lower()} for {period.label}.")
    st.stop()


def _label(entity):
    done = "✅" if entity.financial_entry is not None else "⚪"
    if kind == KIND_BOOKING:
        return f"{done} {entity.reference or '#' + str(entity.id)} - {entity.full_name} ({entity.event_date or 'TBC'})"
    return f"{done} {entity.reference or '#' + str(entity.id)} - {entity.customer_name} ({format_money(entity.total_amount)})"


by_id = {entity.id: entity for entity in entities}
selected_id = st.selectbox("Choose one:", options=list(by_id.keys()), format_func=lambda i: _label(by_id[i]))
entity = by_id[selected_id]

st.write("---")

# -----------------------------------------------------------------------------
# EDITOR
# -----------------------------------------------------------------------------
if kind == KIND_BOOKING:
    entry = open_booking_entry(entity, packages)
else:
    entry = open_product_order_entry(entity)

key_prefix = f"{kind}_{entity.id}"

st.write("### Breakdown")
col_left, col_right = st.columns(2)

with col_left:
    if kind == KIND_BOOKING:
        entry.package_category = st.text_input("Package Category", value=entry.package_category, key=f"{key_prefix}_cat")
        entry.package_name = st.text_input("Package Name", value=entry.package_name, key=f"{key_prefix}_pkg")

    declared = st.number_input(
        FIELD_LABELS[entry.DECLARED_FIELD],
        min_value=0.0,
        value=float(entry.declared_amount),
        step=100.0,
        key=f"{key_prefix}_declared",
    )
    setattr(entry, entry.DECLARED_FIELD, to_money(declared))

    for name in entry.CATEGORY_FIELDS:
        value = st.number_input(
            FIELD_LABELS[name],
            min_value=0.0,
            value=float(getattr(entry, name)),
            step=100.0,
            key=f"{key_prefix}_{name}",
        )
        setattr(entry, name, to_money(value))

with col_right:
    st.write("**Staff commissions**")
    if not entry.commission_lines:
        st.caption("Nobody is assigned, so there are no commission lines.")
    for line in entry.commission_lines:
        value = st.number_input(
            line.staff_name,
            min_value=0.0,
            value=float(line.amount),
            step=100.0,
            key=f"{key_prefix}_line_{line.key}",
        )
        line.amount = to_money(value)
    entry.sync_commission_total()
    money_metric(FIELD_LABELS[entry.COMMISSION_FIELD], entry.commission_total)

# -----------------------------------------------------------------------------
# BALANCE + SAVE
# -----------------------------------------------------------------------------
balance = validate_entry(entry)
balance_badge(balance)

if st.button("Save financials", disabled=not balance.is_balanced):
    if kind == KIND_BOOKING:
        result = save_booking_entry(context, entity, entry, store=database)
    else:
        result = save_product_order_entry(context, entity, entry, store=database)

    if result.success:
        st.success(result.message)
    else:
        st.error(result.message)
