"""Input document serialization — convert VennData to JSON-safe dicts."""

from __future__ import annotations

from .models import VennData


def venn_data_to_dict(data: VennData) -> dict:
    """Convert VennData to a JSON-serializable dict."""
    return {
        "categories": [
            {
                "name": c.name,
                "color": c.color,
                **({"x": c.x, "y": c.y, "r": c.r} if c.has_geometry else {}),
            }
            for c in data.categories
        ],
        "organizations": [
            {
                "name": o.name,
                "categories": list(o.categories),
                **({"url": o.url} if o.url else {}),
                **({"careers": o.careers} if o.careers else {}),
            }
            for o in data.organizations
        ],
    }
