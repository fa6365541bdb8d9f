"""Table view and skill coverage frames."""

import pandas as pd

from frames import TABLE_COLUMNS, catalog_frame, skill_counts


class TestCatalogFrame:
    def test_columns_and_order(self, rich_catalog):
        frame = catalog_frame(rich_catalog)
        assert list(frame.columns) == TABLE_COLUMNS
        assert frame["Title"].tolist() == ["ETL Pipeline", "Chat UI", "Bare Project"]

    def test_links_and_blanks(self, rich_catalog):
        frame = catalog_frame(rich_catalog)
        assert frame.loc[0, "Code"] == "https://example.com/etl"
        assert frame.loc[1, "Demo"] == "https://example.com/chat"
        assert pd.isna(frame.loc[2, "Code"])
        assert frame.loc[1, "Subtitle"] == ""

    def test_skills_as_lists(self, rich_catalog):
        assert catalog_frame(rich_catalog).loc[1, "Skills"] == ["React", "APIs"]

    def test_empty(self):
        frame = catalog_frame([])
        assert frame.empty
        assert list(frame.columns) == TABLE_COLUMNS


class TestSkillCounts:
    def test_counts_in_first_seen_order(self, sample_catalog):
        counts = skill_counts(sample_catalog)
        assert counts["Skill"].tolist() == ["Python", "SQL", "React"]
        assert counts["Projects"].tolist() == [1, 1, 1]

    def test_shared_skill(self, rich_catalog):
        counts = skill_counts(rich_catalog + rich_catalog[:1])
        assert dict(zip(counts["Skill"], counts["Projects"]))["Python"] == 2

    def test_no_skills(self):
        assert skill_counts(()).empty
