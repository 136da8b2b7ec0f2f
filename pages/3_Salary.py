# =============================================================================
# pages/3_Salary.py
# =============================================================================
# PURPOSE:
#   Who earned what this month, across bookings and product orders,
#   plus a downloadable statement for one staff member.
# =============================================================================

import pandas as pd
import streamlit as st

from config import EXCEL_MIME
from database import init_db, fetch_bookings, fetch_product_orders
from reports import (
    assemble_salary_statement,
    compute_salary,
    report_to_bytes,
    salary_rows,
    salary_summary,
)
from utils.money import format_money
from utils.styling import apply_minimal_style, period_selector

st.set_page_config(
    page_title="Salary - Studio Ledger",
    page_icon="💰",
    layout="wide",
)

apply_minimal_style()

init_db()

st.title("Salary")
st.caption("Commission earnings from bookings and product orders.")

period = period_selector("salary")

bookings = fetch_bookings(period.month, period.year)
product_orders = fetch_product_orders(period.month, period.year)
salary = compute_salary(bookings, product_orders)

if not salary:
    st.info(f"No commissions saved for {period.label}.")
    st.stop()

# -----------------------------------------------------------------------------
# SALARY TABLE
# -----------------------------------------------------------------------------
st.write(f"### Salary sheet - {period.label}")

rows = salary_rows(salary) + [salary_summary(salary)]
table = pd.DataFrame([
    {
        "Staff Member": row.staff_name,
        "Booking Earnings": format_money(row.booking_earnings),
        "Product Order Earnings": format_money(row.product_earnings),
        "Total Earnings": format_money(row.total_earnings),
    }
    for row in rows
])
st.dataframe(table, use_container_width=True, hide_index=True)

# -----------------------------------------------------------------------------
# PERSONAL STATEMENT
# -----------------------------------------------------------------------------
st.write("### Personal statement")

names = sorted({row.staff_name for row in salary.values()})
staff_name = st.selectbox("Staff member", options=names)

statement = assemble_salary_statement(bookings, product_orders, staff_name, period)
safe_name = staff_name.replace(" ", "-").lower()
st.download_button(
    f"Download statement for {staff_name}",
    data=report_to_bytes(statement),
    file_name=period.file_name(f"salary-{safe_name}"),
    mime=EXCEL_MIME,
)
