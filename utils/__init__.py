# =============================================================================
# utils/__init__.py
# =============================================================================
# PURPOSE:
#   Helpers shared across the app that don't belong to one feature:
#   - money.py: Decimal amounts, price parsing, formatting
#   - styling.py / sidebar_nav.py: Streamlit page chrome
#
# NOTE:
#   Only the money helpers are re-exported here. The Streamlit helpers
#   import streamlit, so pages import them directly from their modules.
# =============================================================================

from .money import (
    ZERO,
    to_money,
    parse_price,
    money_sum,
    to_cents,
    from_cents,
    format_money,
)
