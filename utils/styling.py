# =============================================================================
# utils/styling.py
# =============================================================================
# PURPOSE:
#   Shared page styling and small widgets used by every ledger page:
#   the CSS, the period picker, the caller role picker and the balance badge.
# =============================================================================

from datetime import date
import calendar

import streamlit as st

from config import ROLES, ROLE_MANAGEMENT
from ledger import CallerContext
from reports import ReportPeriod
from utils.money import format_money
from utils.sidebar_nav import inject_sidebar_collapsed


def apply_minimal_style():
    """Apply the clean page CSS and the collapsed icon sidebar."""
    inject_sidebar_collapsed()
    st.markdown("""
    <style>
        .main {
            padding: 3rem 5rem;
            max-width: 1400px;
        }

        h1 {
            font-size: 3rem;
            font-weight: 700;
            color: #1a1a1a;
            letter-spacing: -0.03em;
        }

        h3 {
            font-size: 1.2rem;
            font-weight: 600;
            color: #1a1a1a;
            margin-top: 2rem;
        }

        .balance-ok { color: #15803d; font-weight: 600; }
        .balance-off { color: #b91c1c; font-weight: 600; }

        .stButton > button {
            background-color: #1a1a1a;
            color: white;
            border: none;
            border-radius: 4px;
            font-weight: 500;
        }
    </style>
    """, unsafe_allow_html=True)


def period_selector(key="period"):
    """Month + year pickers. Defaults to the current month."""
    today = date.today()
    col_month, col_year = st.columns(2)
    with col_month:
        month = st.selectbox(
            "Month",
            options=list(range(1, 13)),
            index=today.month - 1,
            format_func=lambda m: calendar.month_name[m],
            key=f"{key}_month",
        )
    with col_year:
        year = st.number_input("Year", min_value=2000, max_value=2100, value=today.year, step=1, key=f"{key}_year")
    return ReportPeriod(month=int(month), year=int(year))


def caller_context():
    """
    Role picker in the sidebar.

    The role stands in for the app's sign-in; pages pass the returned
    CallerContext into every save.
    """
    with st.sidebar:
        role = st.selectbox("Role", options=ROLES, index=ROLES.index(ROLE_MANAGEMENT), key="caller_role")
        name = st.text_input("Your name", key="caller_name")
    return CallerContext(role=role, name=name)


def balance_badge(balance):
    """Render a BalanceResult as a green/red line."""
    css = "balance-ok" if balance.is_balanced else "balance-off"
    st.markdown(f'<p class="{css}">{balance.describe()}</p>', unsafe_allow_html=True)


def money_metric(label, value):
    st.metric(label, format_money(value))
