"""Candidate supplier — sample possible positions for every entity.

Organization candidates are grid samples that lie inside each of the
organization's circles and outside every other circle, ranked by how far
they sit from the nearest circle edge.  Label candidates are evenly
spaced directions around each circle.  Label candidates are not filtered
against circles here; the encoder only reports such overlaps.
"""

from __future__ import annotations

import logging
import math

from venn_layout.pipeline.circles.models import Circle
from venn_layout.pipeline.config import LAYOUT_RULES, LayoutRules
from venn_layout.pipeline.data.models import Organization

from .models import OrgCandidate, LabelCandidate


log = logging.getLogger(__name__)


def generate_org_candidates(
    organizations: list[Organization],
    circles: list[Circle],
    rules: LayoutRules = LAYOUT_RULES,
) -> list[list[OrgCandidate]]:
    """Return the ranked candidate positions for each organization.

    An organization with no matching circle gets an empty list.
    """
    result = []
    for org in organizations:
        cands = _org_candidates(org, circles, rules)
        log.debug("Organization %r: %d candidate(s)", org.name, len(cands))
        result.append(cands)
    return result


def _org_candidates(
    org: Organization,
    circles: list[Circle],
    rules: LayoutRules,
) -> list[OrgCandidate]:
    members = set(org.categories)
    required = [c for c in circles if c.name in members]
    if not required:
        return []

    min_x = min(c.x - c.r for c in required)
    max_x = max(c.x + c.r for c in required)
    min_y = min(c.y - c.r for c in required)
    max_y = max(c.y + c.r for c in required)
    step = rules.org_grid_step

    candidates: list[OrgCandidate] = []
    x = min_x
    while x <= max_x:
        y = min_y
        while y <= max_y:
            score = _region_score(x, y, members, circles, rules)
            if score is not None:
                candidates.append(OrgCandidate(x=x, y=y, score=score))
            y += step
        x += step

    # Stable sort keeps grid order among equal scores.
    candidates.sort(key=lambda c: c.score, reverse=True)
    return candidates[:rules.max_org_candidates]


def _region_score(
    x: float, y: float,
    members: set[str],
    circles: list[Circle],
    rules: LayoutRules,
) -> float | None:
    """Distance to the nearest circle edge, or None if (x, y) is in the wrong region."""
    dists = []
    for circle in circles:
        dist = math.hypot(x - circle.x, y - circle.y)
        inside = circle.name in members
        if inside and dist >= circle.r - rules.org_inside_margin:
            return None
        if not inside and dist < circle.r + rules.org_outside_margin:
            return None
        dists.append(circle.r - dist if inside else dist - circle.r)
    return min(dists)


def generate_label_candidates(
    circles: list[Circle],
    rules: LayoutRules = LAYOUT_RULES,
) -> list[list[LabelCandidate]]:
    """Return evenly spaced label anchors around each circle."""
    n = rules.label_directions
    result = []
    for circle in circles:
        reach = circle.r + rules.label_distance
        cands = []
        for i in range(n):
            theta = (i / n) * math.pi * 2
            cands.append(LabelCandidate(
                x=circle.x + reach * math.cos(theta),
                y=circle.y + reach * math.sin(theta),
                angle=i * 360 / n,
            ))
        result.append(cands)
    return result
