# =============================================================================
# app.py - MAIN ENTRY POINT
# =============================================================================
# PURPOSE:
#   Entry point for the Streamlit studio ledger console.
#
# WHAT IT DOES:
#   1. Configures the Streamlit page (title, icon, layout)
#   2. Redirects to the Reconcile page
#
# TO RUN THE APP:
#   streamlit run app.py
# =============================================================================

import streamlit as st
from utils.sidebar_nav import inject_sidebar_collapsed

st.set_page_config(
    page_title="Studio Ledger",
    page_icon="📷",
    layout="wide"
)

inject_sidebar_collapsed()

st.switch_page("pages/1_Reconcile.py")
