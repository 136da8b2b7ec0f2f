# =============================================================================
# pages/4_Import.py
# =============================================================================
# PURPOSE:
#   Load packages, bookings and product orders from CSV/Excel exports.
#
# ORDER MATTERS (a little):
#   Import packages first. Bookings refer to packages by name and a booking
#   whose package has no price counts as zero revenue in the reports.
# =============================================================================

import streamlit as st

from database import init_db, get_table_info, load_packages, load_bookings, load_product_orders
from importers import PackageImporter, BookingImporter, ProductOrderImporter
from utils.styling import apply_minimal_style

st.set_page_config(
    page_title="Import - Studio Ledger",
    page_icon="📥",
    layout="wide",
)

apply_minimal_style()

init_db()

st.title("Import")
st.caption("CSV or Excel exports. Duplicates are detected and skipped.")

IMPORTERS = {
    "Service Packages": (PackageImporter, "Name, Price, Category, Description", load_packages),
    "Bookings": (
        BookingImporter,
        "Inquiry ID, Full Name, Email, Phone, Event Type, Package, Event Date, Status, Assigned Staff, Contact Date",
        load_bookings,
    ),
    "Product Orders": (
        ProductOrderImporter,
        "Order ID, Customer, Total Amount, Status, Assigned Staff, Order Date",
        load_product_orders,
    ),
}

tabs = st.tabs(list(IMPORTERS.keys()))

for tab, (label, (importer_class, columns, loader)) in zip(tabs, IMPORTERS.items()):
    with tab:
        st.write(f"### {label}")
        st.caption(f"Expected columns: {columns}")

        uploaded = st.file_uploader(f"Upload {label.lower()}", type=["csv", "xlsx", "xls"], key=f"upload_{label}")
        if uploaded is not None and st.button(f"Import {label.lower()}", key=f"import_{label}"):
            importer = importer_class(uploaded)
            success, message, count = importer.run()
            if success:
                st.success(message)
            else:
                st.error(message)

            summary = importer.get_import_summary()
            for heading in ("duplicates", "skipped", "errors"):
                if summary[heading]:
                    with st.expander(f"{heading.title()} ({len(summary[heading])})"):
                        for item in summary[heading]:
                            st.write(f"- {item}")

        current = loader()
        st.caption(f"{len(current)} {label.lower()} in the database")
        if len(current) > 0:
            st.dataframe(current, use_container_width=True, hide_index=True)

with st.expander("Database tables"):
    for table, columns in get_table_info().items():
        st.write(f"**{table}**: " + ", ".join(col[1] for col in columns))
