"""
HTML snippets for the portfolio pages.

Every builder returns a string meant for st.markdown(..., unsafe_allow_html=True).
Text is escaped here; URLs are rendered as-is apart from attribute quoting.
"""

from html import escape
from pathlib import Path

LINK_LABELS = {"repo": "Code", "demo": "Demo", "writeup": "Write‑up"}


def _anchor(href, label, new_tab=True):
    target = ' target="_blank" rel="noreferrer"' if new_tab else ""
    return f'<a href="{escape(href, quote=True)}"{target}>{escape(label)}</a>'


def social_links_html(socials):
    links = "".join(_anchor(s["href"], s["label"]) for s in socials)
    return f'<nav class="social-links">{links}</nav>'


def brand_html(owner, tagline):
    return (
        '<div class="brand">'
        '<div class="brand-mark"></div>'
        f'<div><div class="brand-name">{escape(owner)}</div>'
        f'<div class="brand-tagline">{escape(tagline)}</div></div>'
        '</div>'
    )


def hero_html(headline, accent, bio):
    return (
        f'<h2 class="hero">{escape(headline)} '
        f'<span class="accent-text">{escape(accent)}</span>.</h2>'
        f'<p class="hero-sub">{escape(bio)}</p>'
    )


def chip_row(items, css_class="chip"):
    chips = "".join(f'<span class="{css_class}">{escape(item)}</span>' for item in items)
    return f'<div class="chip-row">{chips}</div>'


def badge_row(skills, limit=None):
    """Skill badges, truncated to the first `limit` skills when given."""
    shown = list(skills)[:limit] if limit is not None else list(skills)
    return chip_row(shown, css_class="badge")


def desc_html(text):
    return f'<div class="desc-text">{escape(text)}</div>'


def highlights_html(highlights):
    if not highlights:
        return ""
    items = "".join(f"<li>{escape(h)}</li>" for h in highlights)
    return f'<ul class="highlights">{items}</ul>'


def impact_html(impact):
    if not impact:
        return ""
    return f'<p class="impact">Impact: {escape(impact)}</p>'


def link_row(links):
    """Code / Demo / Write-up anchors for whichever links are set."""
    if links is None:
        return ""
    anchors = "".join(_anchor(url, LINK_LABELS[key]) for key, url in links.items())
    if not anchors:
        return ""
    return f'<div class="card-links">{anchors}</div>'


def footer_html(owner, socials, year):
    return (
        '<div class="footer">'
        f'<p>© {year} {escape(owner)}. All rights reserved.</p>'
        f'{social_links_html(socials)}'
        '</div>'
    )


def resolve_cover(cover, base_dir="."):
    """
    Cover reference usable by st.image, or None.

    Remote URLs pass through untouched; local paths must exist.
    """
    if not cover:
        return None
    if cover.startswith(("http://", "https://")):
        return cover
    path = Path(base_dir) / cover
    if not path.exists():
        print(f"⚠️ Cover not found: {path}")
        return None
    return str(path)


def load_file_bytes(path):
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        print(f"⚠️ Could not read {path}: {e}")
        return None
