"""Input document validation — check VennData for broken references."""

from __future__ import annotations

from .models import VennData


def validate_venn_data(data: VennData) -> list[str]:
    """Validate an input document. Returns error messages (empty = valid)."""
    errors: list[str] = []

    if not data.categories:
        errors.append("Document must define at least one category")

    # ── Category names must be present and unique ──
    seen_names: set[str] = set()
    for i, cat in enumerate(data.categories):
        if not cat.name or not cat.name.strip():
            errors.append(f"Category {i}: name must not be empty")
            continue
        if cat.name in seen_names:
            errors.append(f"Duplicate category name '{cat.name}'")
        seen_names.add(cat.name)

    # ── Circle geometry is all-or-nothing per category ──
    for cat in data.categories:
        given = [v is not None for v in (cat.x, cat.y, cat.r)]
        if any(given) and not all(given):
            errors.append(
                f"Category '{cat.name}': circle geometry needs all of x, y, r"
            )
        if cat.r is not None and cat.r <= 0:
            errors.append(f"Category '{cat.name}': r must be > 0")

    with_geometry = sum(1 for c in data.categories if c.has_geometry)
    if 0 < with_geometry < len(data.categories):
        errors.append(
            f"Only {with_geometry} of {len(data.categories)} categories carry "
            f"circle geometry (either all or none must)"
        )

    # ── Organizations ──
    seen_orgs: set[str] = set()
    for i, org in enumerate(data.organizations):
        if not org.name or not org.name.strip():
            errors.append(f"Organization {i}: name must not be empty")
        elif org.name in seen_orgs:
            errors.append(f"Duplicate organization name '{org.name}'")
        seen_orgs.add(org.name)

        for cat_name in org.categories:
            if cat_name not in seen_names:
                errors.append(
                    f"Organization '{org.name}': unknown category '{cat_name}'"
                )

    return errors
