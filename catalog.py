from dataclasses import dataclass
from typing import Optional, Tuple

ALL_TAG = "All"
LINK_KEYS = ("repo", "demo", "writeup")


class CatalogError(ValueError):
    """Raised when the project fixture is malformed."""


@dataclass(frozen=True)
class ProjectLinks:
    repo: Optional[str] = None
    demo: Optional[str] = None
    writeup: Optional[str] = None

    def items(self):
        """(key, url) pairs for the links that are set, in display order."""
        return [(key, getattr(self, key)) for key in LINK_KEYS if getattr(self, key)]


@dataclass(frozen=True)
class ProjectRecord:
    id: str
    title: str
    slug: Optional[str] = None
    subtitle: Optional[str] = None
    skills: Tuple[str, ...] = ()
    highlights: Optional[Tuple[str, ...]] = None
    impact: Optional[str] = None
    cover: Optional[str] = None
    links: Optional[ProjectLinks] = None

    @property
    def route(self):
        return self.slug or self.id


def _record_from_dict(raw):
    record_id = raw.get("id")
    if not record_id or not str(record_id).strip():
        raise CatalogError(f"Project without an id: {raw.get('title')!r}")

    title = raw.get("title")
    if not title or not str(title).strip():
        raise CatalogError(f"Project {record_id!r} has no title")

    links = raw.get("links")
    if links is not None:
        # unknown keys are ignored
        links = ProjectLinks(**{key: links.get(key) for key in LINK_KEYS})

    highlights = raw.get("highlights")
    return ProjectRecord(
        id=record_id,
        title=title,
        slug=raw.get("slug") or None,
        subtitle=raw.get("subtitle"),
        skills=tuple(raw.get("skills") or ()),
        highlights=tuple(highlights) if highlights is not None else None,
        impact=raw.get("impact"),
        cover=raw.get("cover"),
        links=links,
    )


def load_catalog(raw_projects=None):
    """
    Build the immutable catalog from plain project dicts.

    Defaults to `projects_data.PROJECTS`. Catalog order is the fixture order.
    Raises CatalogError on a missing id/title or on a duplicate id or route.
    """
    if raw_projects is None:
        from projects_data import PROJECTS
        raw_projects = PROJECTS

    records = []
    seen_ids = set()
    seen_routes = set()
    for raw in raw_projects:
        record = _record_from_dict(raw)
        if record.id in seen_ids:
            raise CatalogError(f"Duplicate project id: {record.id!r}")
        if record.route in seen_routes:
            raise CatalogError(f"Duplicate project route: {record.route!r}")
        seen_ids.add(record.id)
        seen_routes.add(record.route)
        records.append(record)
    return tuple(records)


def derive_tags(catalog):
    """"All" first, then every skill in first-seen order across the catalog."""
    tags = [ALL_TAG]
    seen = {ALL_TAG}
    for record in catalog:
        for skill in record.skills:
            if skill not in seen:
                seen.add(skill)
                tags.append(skill)
    return tags
