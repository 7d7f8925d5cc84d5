"""Circle geometry — relationship analysis and the fixed circle arrangement."""

from __future__ import annotations

import logging
import math

from venn_layout.pipeline.config import LAYOUT_RULES, LayoutRules
from venn_layout.pipeline.data.models import VennData

from .models import CategoryStats, Circle


log = logging.getLogger(__name__)


def analyze_relationships(data: VennData) -> list[CategoryStats]:
    """Count organizations per category and per pair of categories."""
    stats = []
    for i, cat in enumerate(data.categories):
        overlaps = []
        for j, other in enumerate(data.categories):
            if i == j:
                overlaps.append(0)
                continue
            overlaps.append(sum(
                1 for org in data.organizations
                if cat.name in org.categories and other.name in org.categories
            ))
        stats.append(CategoryStats(
            index=i,
            name=cat.name,
            color=cat.color,
            overlaps=overlaps,
            org_count=sum(1 for org in data.organizations if cat.name in org.categories),
        ))
    return stats


def build_circles(
    data: VennData,
    stats: list[CategoryStats],
    *,
    center: tuple[float, float] | None = None,
    rules: LayoutRules = LAYOUT_RULES,
) -> list[Circle]:
    """Return one circle per category.

    Precomputed geometry on the categories is used when every category
    has it.  Otherwise circles are sized by organization share and spaced
    evenly on a ring around *center*.
    """
    if data.categories and all(c.has_geometry for c in data.categories):
        log.info("Using precomputed geometry for %d circle(s)", len(data.categories))
        return [
            Circle(index=i, name=c.name, color=c.color, x=c.x, y=c.y, r=c.r)
            for i, c in enumerate(data.categories)
        ]

    cx, cy = center or rules.center
    n = len(stats)
    max_count = max((s.org_count for s in stats), default=0)

    circles = []
    for s in stats:
        share = s.org_count / max_count if max_count > 0 else 0.0
        angle = (s.index / n) * math.pi * 2
        circles.append(Circle(
            index=s.index,
            name=s.name,
            color=s.color,
            x=cx + math.cos(angle) * rules.ring_distance,
            y=cy + math.sin(angle) * rules.ring_distance,
            r=rules.base_radius + share * rules.radius_range,
        ))
    log.info("Arranged %d circle(s) on a ring around (%.0f, %.0f)", n, cx, cy)
    return circles
