import datetime
from pathlib import Path

import streamlit as st

from catalog import CatalogError, load_catalog
from components import (
    brand_html,
    chip_row,
    footer_html,
    hero_html,
    load_file_bytes,
    social_links_html,
)
from filters import CatalogView
from frames import catalog_frame, skill_counts
from project_pages import render_card
from site_config import SITE_CONFIG, social_href, visible_socials

# Note: No set_page_config here, it is handled by main.py

print("--- PORTFOLIO HOME ---")

# --- CSS: HEADER, HERO & FOOTER ---
st.markdown("""
<style>
    /* 1. Global Spacing */
    .block-container {
        padding-top: 2rem;
        padding-bottom: 3rem;
        max-width: 1100px;
    }

    /* 2. Header */
    .brand { display: flex; align-items: center; gap: 12px; }
    .brand-mark {
        height: 36px; width: 36px;
        border-radius: 14px;
        background: linear-gradient(45deg, #6366F1, #22D3EE);
    }
    .brand-name { font-size: 20px; font-weight: 600; }
    .brand-tagline { font-size: 12px; color: #CBD5E1; }
    .social-links {
        display: flex;
        justify-content: flex-end;
        gap: 20px;
        font-size: 14px;
        padding-top: 8px;
    }

    /* 3. Hero */
    .hero {
        font-size: clamp(28px, 3.4vw, 40px);
        font-weight: 700;
        letter-spacing: -0.02em;
        line-height: 1.15;
    }
    .accent-text {
        background: linear-gradient(90deg, #6366F1, #22D3EE);
        -webkit-background-clip: text;
        background-clip: text;
        color: transparent;
    }
    .hero-sub { color: #CBD5E1; line-height: 1.6; }

    /* 4. Footer */
    .footer {
        display: flex;
        flex-wrap: wrap;
        justify-content: space-between;
        gap: 16px;
        font-size: 14px;
        color: #CBD5E1;
    }
    .footer .social-links { padding-top: 0; }
</style>
""", unsafe_allow_html=True)

# ==============================================================================
# 1. DATA & FILTER STATE
# ==============================================================================

try:
    catalog = load_catalog()
except CatalogError as e:
    st.error(f"Project catalog is invalid: {e}")
    st.stop()

if 'catalog_view' not in st.session_state:
    st.session_state['catalog_view'] = CatalogView(catalog)
view = st.session_state['catalog_view']

# Widget state is dropped when the visitor leaves the page, the view is not
if 'project_query' not in st.session_state:
    st.session_state['project_query'] = view.query


def update_query():
    view.set_query(st.session_state['project_query'])


def update_tag(tag):
    view.select_tag(tag)


def clear_filters():
    view.reset()
    st.session_state['project_query'] = ""


# ==============================================================================
# 2. HEADER
# ==============================================================================

col_brand, col_nav = st.columns([1, 2])
with col_brand:
    st.markdown(brand_html(SITE_CONFIG["owner"], SITE_CONFIG["tagline"]), unsafe_allow_html=True)
with col_nav:
    st.markdown(social_links_html(visible_socials()), unsafe_allow_html=True)

st.divider()

# ==============================================================================
# 3. HERO
# ==============================================================================

col_hero, col_actions = st.columns([2, 1], gap="large")

with col_hero:
    st.markdown(
        hero_html(SITE_CONFIG["headline"], SITE_CONFIG["headline_accent"], SITE_CONFIG["bio"]),
        unsafe_allow_html=True
    )
    st.markdown(chip_row(SITE_CONFIG["stack"]), unsafe_allow_html=True)

with col_actions:
    with st.container(border=True):
        st.markdown("**Quick Actions**")
        st.markdown("[View Projects ↓](#projects)")

        resume_path = SITE_CONFIG["resume_path"]
        resume = load_file_bytes(resume_path) if Path(resume_path).exists() else None
        if resume is not None:
            st.download_button(
                "Download Resume",
                data=resume,
                file_name=Path(resume_path).name,
                mime="application/pdf"
            )
        else:
            st.button("Download Resume", disabled=True)
            st.caption("Resume not available right now.")

        st.markdown(f"[Email Me]({social_href('Email')})")

# ==============================================================================
# 4. CONTROLS
# ==============================================================================

st.header("Projects", anchor="projects")

TAGS_PER_ROW = 6
for start in range(0, len(view.tags), TAGS_PER_ROW):
    row_tags = view.tags[start:start + TAGS_PER_ROW]
    cols = st.columns(TAGS_PER_ROW)
    for col, tag in zip(cols, row_tags):
        col.button(
            tag,
            key=f"tag_{tag}",
            type="primary" if tag == view.active_tag else "secondary",
            on_click=update_tag,
            args=(tag,)
        )

col_search, col_toggle, col_clear = st.columns([3, 1, 1])
with col_search:
    st.text_input(
        "Search projects",
        key="project_query",
        placeholder=SITE_CONFIG["search_placeholder"],
        on_change=update_query,
        label_visibility="collapsed"
    )
with col_toggle:
    table_view = st.toggle("Table view")
with col_clear:
    st.button("Clear filters", key="clear_filters", on_click=clear_filters)

filtered = view.filtered
st.caption(view.summary())

# ==============================================================================
# 5. PROJECT GRID
# ==============================================================================

if not filtered:
    st.info("No projects match your search. Try another tag or clear the filters.")
elif table_view:
    st.dataframe(
        catalog_frame(filtered),
        hide_index=True,
        column_config={
            "Skills": st.column_config.ListColumn("Skills"),
            "Code": st.column_config.LinkColumn("Code", display_text="Code"),
            "Demo": st.column_config.LinkColumn("Demo", display_text="Demo"),
            "Write-up": st.column_config.LinkColumn("Write-up", display_text="Write-up"),
        }
    )
else:
    cols = st.columns(2, gap="large")
    for idx, record in enumerate(filtered):
        with cols[idx % 2]:
            render_card(record)

with st.expander("Skill coverage"):
    import plotly.express as px  # Lazy Import

    counts = skill_counts(catalog)
    if counts.empty:
        st.caption("No skills tagged yet.")
    else:
        fig = px.bar(counts, x="Skill", y="Projects", color_discrete_sequence=["#6366F1"])
        fig.update_layout(
            height=320,
            margin=dict(l=10, r=10, t=10, b=10),
            paper_bgcolor="rgba(0,0,0,0)",
            plot_bgcolor="rgba(0,0,0,0)"
        )
        st.plotly_chart(fig)

# ==============================================================================
# 6. FOOTER
# ==============================================================================

st.divider()
st.markdown(
    footer_html(SITE_CONFIG["owner"], visible_socials(), datetime.date.today().year),
    unsafe_allow_html=True
)
