import pandas as pd

from catalog import derive_tags, ALL_TAG

TABLE_COLUMNS = ["Title", "Subtitle", "Skills", "Impact", "Code", "Demo", "Write-up"]


def catalog_frame(records):
    """One row per record, in the given order, for the table view."""
    rows = []
    for record in records:
        links = record.links
        rows.append({
            "Title": record.title,
            "Subtitle": record.subtitle or "",
            "Skills": list(record.skills),
            "Impact": record.impact or "",
            "Code": links.repo if links else None,
            "Demo": links.demo if links else None,
            "Write-up": links.writeup if links else None,
        })
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def skill_counts(catalog):
    """Number of projects using each skill, in first-seen skill order."""
    skills = [tag for tag in derive_tags(catalog) if tag != ALL_TAG]
    counts = [sum(skill in record.skills for record in catalog) for skill in skills]
    return pd.DataFrame({"Skill": skills, "Projects": counts})
