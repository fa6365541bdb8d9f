"""Shared fixtures for the portfolio tests."""

import pytest

from catalog import load_catalog


@pytest.fixture
def sample_catalog():
    """Two-record catalog used by the worked examples."""
    return load_catalog([
        {"id": "a", "title": "ETL Pipeline", "skills": ["Python", "SQL"]},
        {"id": "b", "title": "Chat UI", "skills": ["React"]},
    ])


@pytest.fixture
def rich_catalog():
    return load_catalog([
        {
            "id": "etl",
            "slug": "etl-pipeline",
            "title": "ETL Pipeline",
            "subtitle": "Nightly warehouse loads",
            "skills": ["Python", "SQL", "Docker", "Pandas", "Airflow"],
            "highlights": ["Idempotent upserts", "Data quality gates"],
            "impact": "Saved hours of cleanup",
            "links": {"repo": "https://example.com/etl", "writeup": "https://example.com/etl/post"},
        },
        {
            "id": "chat",
            "title": "Chat UI",
            "subtitle": None,
            "skills": ["React", "APIs"],
            "highlights": None,
            "links": {"demo": "https://example.com/chat"},
        },
        {
            "id": "bare",
            "title": "Bare Project",
            "skills": [],
        },
    ])
