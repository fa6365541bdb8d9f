import streamlit as st

from components import (
    LINK_LABELS,
    badge_row,
    desc_html,
    highlights_html,
    impact_html,
    link_row,
    resolve_cover,
)
from site_config import SITE_CONFIG

HOME_PAGE = "00_Home.py"


# ==============================================================================
# 1. CARD (HOME GRID)
# ==============================================================================

def render_card(record):
    with st.container(border=True):
        cover = resolve_cover(record.cover)
        if cover:
            st.image(cover)

        # Title links to the project page
        st.page_link(project_page(record), label=f"**{record.title}**")

        if record.subtitle:
            st.markdown(desc_html(record.subtitle), unsafe_allow_html=True)

        for snippet in (
            highlights_html(record.highlights),
            badge_row(record.skills, limit=SITE_CONFIG["card_skill_limit"]),
            impact_html(record.impact),
            link_row(record.links),
        ):
            if snippet:
                st.markdown(snippet, unsafe_allow_html=True)


# ==============================================================================
# 2. PROJECT PAGE
# ==============================================================================

def render_project(record):
    print(f"--- PROJECT: {record.route} ---")

    st.page_link(HOME_PAGE, label="← All projects")
    st.title(record.title)
    if record.subtitle:
        st.markdown(record.subtitle)

    cover = resolve_cover(record.cover)
    if cover:
        st.image(cover)

    st.markdown(badge_row(record.skills), unsafe_allow_html=True)
    st.divider()

    col_main, col_links = st.columns([3, 1], gap="large")

    with col_main:
        if record.highlights:
            st.subheader("Highlights")
            st.markdown(highlights_html(record.highlights), unsafe_allow_html=True)
        if record.impact:
            st.subheader("Impact")
            st.write(record.impact)
        if not record.highlights and not record.impact:
            st.info("More details coming soon.")

    with col_links:
        st.subheader("Links")
        links = record.links.items() if record.links else []
        if links:
            for key, url in links:
                st.link_button(LINK_LABELS[key], url)
        else:
            st.caption("No public links yet.")


# ==============================================================================
# 3. PAGE REGISTRY
# ==============================================================================

def project_page(record):
    """Streamlit page for one record, served at /<slug or id>."""
    def render():
        render_project(record)

    return st.Page(render, title=record.title, url_path=record.route)


def build_project_pages(catalog):
    return [project_page(record) for record in catalog]
