"""Venn test fixtures — small hardcoded documents for end-to-end testing.

Three circles with precomputed geometry:
  - Research  at (300, 400) r=120
  - Industry  at (500, 400) r=120   (overlaps Research, lens at x≈400)
  - Policy    at (400, 650) r=100   (separate)

Organizations:
  - alpha  Research only        best candidate (280, 400), score 100
  - beta   Research + Industry  best candidate (400, 400), score 20
  - gamma  Industry only        best candidate (520, 400), score 100
  - delta  Policy only          best candidate (400, 650), score 100
  - omega  no categories        no candidates, stays unplaced

Best candidates are pairwise >= 120 apart and the 0° label anchors do
not collide, so the first-choice candidate wins for every entity.
"""

from __future__ import annotations

from venn_layout.pipeline.data.models import Category, Organization, VennData


def make_venn_data() -> VennData:
    """Return the three-circle document with precomputed geometry."""
    return VennData(
        categories=[
            Category(name="Research", color="#e41a1c", x=300, y=400, r=120),
            Category(name="Industry", color="#377eb8", x=500, y=400, r=120),
            Category(name="Policy",   color="#4daf4a", x=400, y=650, r=100),
        ],
        organizations=[
            Organization(name="alpha", categories=["Research"], url="https://alpha.example"),
            Organization(name="beta",  categories=["Research", "Industry"]),
            Organization(name="gamma", categories=["Industry"],
                         careers="https://gamma.example/jobs"),
            Organization(name="delta", categories=["Policy"]),
            Organization(name="omega", categories=[]),
        ],
    )


def make_venn_dict() -> dict:
    """The same document in its data.json form."""
    return {
        "categories": [
            {"name": "Research", "color": "#e41a1c", "x": 300, "y": 400, "r": 120},
            {"name": "Industry", "color": "#377eb8", "x": 500, "y": 400, "r": 120},
            {"name": "Policy",   "color": "#4daf4a", "x": 400, "y": 650, "r": 100},
        ],
        "organizations": [
            {"name": "alpha", "categories": ["Research"], "url": "https://alpha.example"},
            {"name": "beta",  "categories": ["Research", "Industry"]},
            {"name": "gamma", "categories": ["Industry"],
             "careers": "https://gamma.example/jobs"},
            {"name": "delta", "categories": ["Policy"]},
            {"name": "omega", "categories": []},
        ],
    }


def make_crowded_data() -> VennData:
    """Two organizations squeezed into one tiny circle (unsatisfiable).

    The circle (r=40) leaves a 25-unit inner region; every candidate of
    one organization is within 60 units of every candidate of the other.
    """
    return VennData(
        categories=[
            Category(name="Solo", color="#984ea3", x=400, y=400, r=40),
        ],
        organizations=[
            Organization(name="first",  categories=["Solo"]),
            Organization(name="second", categories=["Solo"]),
        ],
    )
