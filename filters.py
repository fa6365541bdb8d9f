from catalog import ALL_TAG, derive_tags


def searchable_text(record):
    """Lowercased title, subtitle, skills and highlights joined by spaces."""
    return " ".join([
        record.title,
        record.subtitle or "",
        " ".join(record.skills or ()),
        " ".join(record.highlights or ()),
    ]).lower()


def matches_tag(record, active_tag):
    return active_tag == ALL_TAG or active_tag in record.skills


def matches_text(record, query):
    # empty query is a substring of everything
    return query.lower() in searchable_text(record)


def filter_projects(catalog, query="", active_tag=ALL_TAG):
    """
    Records matching both the tag and the text predicate, in catalog order.

    Plain substring containment, no ranking. Always returns a list, empty
    when nothing matches.
    """
    return [
        record for record in catalog
        if matches_tag(record, active_tag) and matches_text(record, query)
    ]


class CatalogView:
    """
    Filter state for one visitor session.

    Holds the immutable catalog, its tag universe and the two input values.
    `filtered` is recomputed from scratch on every access.
    """

    def __init__(self, catalog):
        self.catalog = tuple(catalog)
        self.tags = derive_tags(self.catalog)
        self.query = ""
        self.active_tag = ALL_TAG

    def set_query(self, query):
        self.query = query or ""

    def select_tag(self, tag):
        self.active_tag = tag

    def reset(self):
        self.query = ""
        self.active_tag = ALL_TAG

    @property
    def filtered(self):
        return filter_projects(self.catalog, self.query, self.active_tag)

    def summary(self):
        shown = len(self.filtered)
        total = len(self.catalog)
        noun = "project" if total == 1 else "projects"
        return f"Showing {shown} of {total} {noun}"
