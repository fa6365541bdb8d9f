"""
Centralized site configuration.
Edit this file to update the owner profile, social links and card settings.
"""

from pathlib import Path

SITE_CONFIG = {
    # Owner profile (header, hero, footer)
    "owner": "Ayaan Ahmad",
    "tagline": "Full‑Stack • Data Pipelines • Automation",
    "headline": "I build lean systems that turn messy data into",
    "headline_accent": "useful decisions",
    "bio": (
        "Georgia State CS → aiming to transfer to Georgia Tech (Computer Engineering). "
        "I ship applied AI, ETL, and automation projects."
    ),
    # Chips shown under the hero text
    "stack": ["Python", "Pandas", "FastAPI/Flask", "React/Next.js", "SQL", "APIs", "Docker"],
    # Header and footer links, rendered as-is (files in static/ are served under app/static/).
    # Entries with a "file" are hidden until that file exists.
    "socials": [
        {"label": "Email", "href": "mailto:ayaanzahmad@gmail.com"},
        {"label": "GitHub", "href": "https://github.com/ayaanzahmad"},
        {"label": "LinkedIn", "href": "https://www.linkedin.com/in/ayaan-ahmad-071673321/"},
        {"label": "Resume (PDF)", "href": "app/static/Ayaan_Ahmad_Resume.pdf", "file": "static/Ayaan_Ahmad_Resume.pdf"},
    ],
    # Local file served by the "Download Resume" quick action
    "resume_path": "static/Ayaan_Ahmad_Resume.pdf",
    # Project grid
    "card_skill_limit": 4,
    "search_placeholder": "Search projects, tech, features…",
}


def social_href(label):
    """First social href whose label contains `label`, or None."""
    for social in SITE_CONFIG["socials"]:
        if label in social["label"]:
            return social["href"]
    return None


def visible_socials(base_dir="."):
    """Social links, minus those whose backing file is missing."""
    return [
        social for social in SITE_CONFIG["socials"]
        if "file" not in social or (Path(base_dir) / social["file"]).exists()
    ]
