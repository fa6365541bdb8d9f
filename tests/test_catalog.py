"""Catalog loading and tag derivation tests."""

import pytest

from catalog import ALL_TAG, CatalogError, ProjectLinks, derive_tags, load_catalog


class TestLoadCatalog:
    def test_preserves_fixture_order(self, rich_catalog):
        assert [r.id for r in rich_catalog] == ["etl", "chat", "bare"]

    def test_catalog_is_immutable(self, rich_catalog):
        assert isinstance(rich_catalog, tuple)
        with pytest.raises(AttributeError):
            rich_catalog[0].title = "changed"

    def test_sequences_become_tuples(self, rich_catalog):
        assert rich_catalog[0].skills == ("Python", "SQL", "Docker", "Pandas", "Airflow")
        assert rich_catalog[0].highlights == ("Idempotent upserts", "Data quality gates")

    def test_absent_optional_fields(self, rich_catalog):
        bare = rich_catalog[2]
        assert bare.subtitle is None
        assert bare.highlights is None
        assert bare.impact is None
        assert bare.cover is None
        assert bare.links is None
        assert bare.skills == ()

    def test_route_prefers_slug(self, rich_catalog):
        assert rich_catalog[0].route == "etl-pipeline"

    def test_route_falls_back_to_id(self, rich_catalog):
        assert rich_catalog[1].route == "chat"

    def test_blank_slug_falls_back_to_id(self):
        (record,) = load_catalog([{"id": "x", "slug": "", "title": "X"}])
        assert record.route == "x"

    def test_links_keep_recognized_keys_only(self):
        (record,) = load_catalog([{
            "id": "x",
            "title": "X",
            "links": {"repo": "https://example.com/r", "slides": "https://example.com/s"},
        }])
        assert record.links == ProjectLinks(repo="https://example.com/r")

    def test_link_items_in_display_order(self, rich_catalog):
        assert rich_catalog[0].links.items() == [
            ("repo", "https://example.com/etl"),
            ("writeup", "https://example.com/etl/post"),
        ]

    def test_default_fixture_loads(self):
        catalog = load_catalog()
        assert len(catalog) > 0
        assert len({r.id for r in catalog}) == len(catalog)


class TestLoadCatalogErrors:
    def test_duplicate_id(self):
        with pytest.raises(CatalogError, match="Duplicate project id"):
            load_catalog([{"id": "a", "title": "A"}, {"id": "a", "title": "B"}])

    def test_duplicate_route(self):
        with pytest.raises(CatalogError, match="Duplicate project route"):
            load_catalog([{"id": "a", "title": "A"}, {"id": "b", "slug": "a", "title": "B"}])

    def test_missing_title(self):
        with pytest.raises(CatalogError, match="has no title"):
            load_catalog([{"id": "a", "title": "  "}])

    def test_missing_id(self):
        with pytest.raises(CatalogError, match="without an id"):
            load_catalog([{"title": "A"}])

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)


class TestDeriveTags:
    def test_first_seen_order(self, sample_catalog):
        assert derive_tags(sample_catalog) == ["All", "Python", "SQL", "React"]

    def test_duplicates_collapse(self):
        catalog = load_catalog([
            {"id": "a", "title": "A", "skills": ["SQL", "Python"]},
            {"id": "b", "title": "B", "skills": ["Python", "React", "SQL"]},
        ])
        assert derive_tags(catalog) == [ALL_TAG, "SQL", "Python", "React"]

    def test_all_skill_is_not_repeated(self):
        catalog = load_catalog([{"id": "a", "title": "A", "skills": ["All", "Go"]}])
        assert derive_tags(catalog) == [ALL_TAG, "Go"]

    def test_empty_catalog(self):
        assert derive_tags(()) == [ALL_TAG]
