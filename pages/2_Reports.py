# =============================================================================
# pages/2_Reports.py
# =============================================================================
# PURPOSE:
#   Monthly report: preview every section on screen and download the
#   whole thing as one Excel workbook (one sheet per section).
# =============================================================================

import pandas as pd
import streamlit as st

from config import EXCEL_MIME
from database import init_db, fetch_bookings, fetch_product_orders, fetch_packages
from reports import assemble, report_to_bytes, total_income, compute_salary, salary_summary
from utils.styling import apply_minimal_style, period_selector, money_metric

st.set_page_config(
    page_title="Reports - Studio Ledger",
    page_icon="📊",
    layout="wide",
)

apply_minimal_style()

init_db()

st.title("Reports")
st.caption("Monthly bookings, product orders, analytics and earnings.")

period = period_selector("reports")

bookings = fetch_bookings(period.month, period.year)
product_orders = fetch_product_orders(period.month, period.year)
packages = fetch_packages()

# -----------------------------------------------------------------------------
# HEADLINE NUMBERS
# -----------------------------------------------------------------------------
st.write(f"### {period.label}")
col1, col2, col3, col4 = st.columns(4)
with col1:
    st.metric("Bookings", len(bookings))
with col2:
    money_metric("Estimated Revenue", total_income(bookings, packages))
with col3:
    st.metric("Product Orders", len(product_orders))
with col4:
    money_metric("Total Commissions", salary_summary(compute_salary(bookings, product_orders)).total_earnings)

# -----------------------------------------------------------------------------
# SECTIONS
# -----------------------------------------------------------------------------
report = assemble(bookings, product_orders, packages, period)

st.download_button(
    "Download Excel report",
    data=report_to_bytes(report),
    file_name=period.file_name("studio-report"),
    mime=EXCEL_MIME,
)

for sheet, rows in report.items():
    with st.expander(sheet, expanded=False):
        if len(rows) > 1 and len(rows[0]) > 1:
            width = len(rows[0])
            body = [list(row) + [""] * (width - len(row)) for row in rows[1:]]
            st.dataframe(pd.DataFrame(body, columns=rows[0]).astype(str), use_container_width=True, hide_index=True)
        else:
            for row in rows:
                st.write(" ".join(str(cell) for cell in row))
