"""Fallback layout used when the placement formula is unsatisfiable.

No overlap guarantee: each organization sits at the centroid of its
circles and each label sits straight above its circle.
"""

from __future__ import annotations

import logging

from venn_layout.pipeline.circles.models import Circle
from venn_layout.pipeline.config import LAYOUT_RULES, LayoutRules
from venn_layout.pipeline.data.models import VennData

from .models import PlacedOrganization, PlacedCircle, VennLayout


log = logging.getLogger(__name__)


def fallback_layout(
    data: VennData,
    circles: list[Circle],
    rules: LayoutRules = LAYOUT_RULES,
) -> VennLayout:
    log.warning("Using fallback layout")

    organizations = []
    for org in data.organizations:
        members = set(org.categories)
        relevant = [c for c in circles if c.name in members]
        placed = PlacedOrganization(
            name=org.name,
            categories=list(org.categories),
            url=org.url,
            careers=org.careers,
        )
        if relevant:
            placed.x = sum(c.x for c in relevant) / len(relevant)
            placed.y = sum(c.y for c in relevant) / len(relevant)
        organizations.append(placed)

    placed_circles = [
        PlacedCircle(
            circle=c,
            label_x=c.x,
            label_y=c.y - c.r - rules.fallback_label_offset,
            label_angle=270.0,
        )
        for c in circles
    ]

    return VennLayout(circles=placed_circles, organizations=organizations, method="fallback")
