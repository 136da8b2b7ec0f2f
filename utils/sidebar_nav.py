"""
Collapsed sidebar with hover expansion.
Outline SVG icons (Lucide-style) and a custom nav using st.switch_page.
"""
import streamlit as st

SIDEBAR_BG = "#24384F"

# Lucide-style outline SVG icons (24x24, stroke 2, no fill)
ICONS_SVG = {
    "layout-grid": '<path d="M3 3h7v7H3zM14 3h7v7h-7zM14 14h7v7h-7zM3 14h7v7H3z"/>',
    "scale": '<path d="M16 16l3-8 3 8c-.87.65-1.92 1-3 1s-2.13-.35-3-1z"/><path d="M2 16l3-8 3 8c-.87.65-1.92 1-3 1s-2.13-.35-3-1z"/><path d="M7 21h10"/><path d="M12 3v18"/><path d="M3 7h2c2 0 5-1 7-2 2 1 5 2 7 2h2"/>',
    "file-spreadsheet": '<path d="M14 2H6a2 2 0 0 0-2 2v16a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2V8z"/><polyline points="14 2 14 8 20 8"/><path d="M8 13h2M14 13h2M8 17h2M14 17h2"/>',
    "wallet": '<path d="M21 12V7H5a2 2 0 0 1 0-4h14v4"/><path d="M3 5v14a2 2 0 0 0 2 2h16v-5"/><path d="M18 12a2 2 0 0 0 0 4h4v-4z"/>',
    "upload": '<path d="M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4"/><polyline points="17 8 12 3 7 8"/><line x1="12" y1="3" x2="12" y2="15"/>',
}

# Page definitions: (icon key, label, path)
PAGES = [
    ("scale", "Reconcile", "pages/1_Reconcile.py"),
    ("file-spreadsheet", "Reports", "pages/2_Reports.py"),
    ("wallet", "Salary", "pages/3_Salary.py"),
    ("upload", "Import", "pages/4_Import.py"),
]


def svg_icon(name: str, size: int = 24, stroke_width: float = 2) -> str:
    """Return inline SVG for a Lucide-style outline icon."""
    path = ICONS_SVG.get(name, ICONS_SVG["layout-grid"])
    return f'''<svg xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}" viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="{stroke_width}" stroke-linecap="round" stroke-linejoin="round">{path}</svg>'''


def get_sidebar_css():
    """CSS for a 70px sidebar that widens on hover/focus."""
    return f"""
<style>
    [data-testid="stSidebar"] {{
        width: 70px !important;
        min-width: 70px !important;
        transition: width 0.25s ease 0.35s, min-width 0.25s ease 0.35s;
        background-color: {SIDEBAR_BG} !important;
        overflow-x: hidden !important;
    }}

    [data-testid="stSidebar"]:hover,
    [data-testid="stSidebar"]:focus-within {{
        width: 250px !important;
        min-width: 250px !important;
        transition: width 0.25s ease 0s, min-width 0.25s ease 0s;
    }}

    [data-testid="stSidebarNav"] {{
        display: none !important;
    }}

    [data-testid="stSidebar"] .nav-icon-wrap {{
        display: flex !important;
        align-items: center !important;
        justify-content: center !important;
        padding: 4px 0 !important;
    }}

    [data-testid="stSidebar"] .nav-icon-wrap svg {{
        color: rgba(255,255,255,0.9) !important;
    }}

    [data-testid="stSidebar"] .stButton > button {{
        width: 100% !important;
        min-height: 48px !important;
        background: transparent !important;
        border: none !important;
        color: rgba(255,255,255,0.9) !important;
        text-align: left !important;
        justify-content: flex-start !important;
    }}

    [data-testid="stSidebar"] .stButton > button:hover {{
        background-color: rgba(255,255,255,0.12) !important;
    }}

    /* Collapsed: hide button text */
    [data-testid="stSidebar"]:not(:hover):not(:focus-within) .stButton > button {{
        color: transparent !important;
        overflow: hidden !important;
    }}
</style>
"""


# Session key for deferred navigation (switch_page inside a callback is a no-op)
NAV_TARGET_KEY = "nav_target"


def _go(path: str) -> None:
    st.session_state[NAV_TARGET_KEY] = path


def inject_sidebar_collapsed():
    """Inject the sidebar CSS and render the nav buttons."""
    target = st.session_state.pop(NAV_TARGET_KEY, None)
    if target:
        st.switch_page(target)
        return

    st.markdown(get_sidebar_css(), unsafe_allow_html=True)

    with st.sidebar:
        for i, (icon_key, label, path) in enumerate(PAGES):
            col_icon, col_link = st.columns([1, 3], gap="small")
            with col_icon:
                st.markdown(f'<div class="nav-icon-wrap">{svg_icon(icon_key)}</div>', unsafe_allow_html=True)
            with col_link:
                st.button(label, key=f"nav_{i}", use_container_width=True, on_click=_go, args=(path,))
