import streamlit as st

from catalog import CatalogError, load_catalog
from project_pages import build_project_pages
from site_config import SITE_CONFIG

# --- 1. GLOBAL CONFIGURATION ---
st.set_page_config(
    page_title=f"{SITE_CONFIG['owner']} - Portfolio",
    layout="wide",
    initial_sidebar_state="collapsed"
)

# --- CSS: SHARED CARD & TEXT STYLING ---
st.markdown("""
<style>
    /* 1. Owner name above the sidebar navigation */
    [data-testid="stSidebarNav"]::before {
        content: "%s";
        display: block;
        font-size: 24px;
        font-weight: bold;
        margin-bottom: 16px;
        margin-left: 20px;
        color: var(--text-color);
    }

    /* 2. Badges (skills) and chips (hero stack) */
    .chip-row {
        display: flex;
        flex-wrap: wrap;
        gap: 8px;
        margin: 6px 0;
    }
    .chip {
        border-radius: 999px;
        border: 1px solid rgba(255,255,255,0.15);
        background: rgba(255,255,255,0.05);
        padding: 4px 12px;
        font-size: 14px;
    }
    .badge {
        border-radius: 6px;
        border: 1px solid rgba(255,255,255,0.15);
        background: rgba(255,255,255,0.05);
        padding: 2px 8px;
        font-size: 12px;
    }

    /* 3. Card text */
    .desc-text {
        font-size: 14px;
        color: #CBD5E1;
        line-height: 1.6;
    }
    .highlights {
        font-size: 14px;
        color: #E2E8F0;
        margin: 6px 0 0 0;
    }
    .impact {
        font-size: 14px;
        font-style: italic;
        color: #CBD5E1;
    }
    .card-links a {
        margin-right: 14px;
        font-size: 14px;
        text-decoration: underline;
        text-underline-offset: 2px;
    }
</style>
""" % SITE_CONFIG["owner"], unsafe_allow_html=True)

# --- 2. PAGE DEFINITIONS ---

home_page = st.Page(
    "00_Home.py",
    title="Home",
    default=True
)

try:
    project_pages = build_project_pages(load_catalog())
except CatalogError as e:
    # 00_Home.py reports the same error to the visitor
    print(f"❌ Catalog error: {e}")
    project_pages = []

# --- 3. NAVIGATION SETUP ---
pages = {" ": [home_page]}           # Header invisible (1st position)
if project_pages:
    pages["Projects"] = project_pages

pg = st.navigation(pages)

# --- 4. EXECUTION ---
pg.run()
