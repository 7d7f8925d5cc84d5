"""Placement decoder — read a satisfying assignment back into positions."""

from __future__ import annotations

import logging

from venn_layout.pipeline.circles.models import Circle
from venn_layout.pipeline.data.models import VennData
from venn_layout.pipeline.sat import SatResult

from .models import (
    OrgCandidate, LabelCandidate, PlacementEncoding,
    PlacedOrganization, PlacedCircle, VennLayout, PlacementError,
)


log = logging.getLogger(__name__)


def decode_placement(
    result: SatResult,
    encoding: PlacementEncoding,
    data: VennData,
    circles: list[Circle],
    org_candidates: list[list[OrgCandidate]],
    label_candidates: list[list[LabelCandidate]],
) -> VennLayout:
    """Pick the candidate whose selector is true for every entity.

    Entities without candidates stay unplaced.

    Raises
    ------
    PlacementError
        If *result* is unsatisfiable (use the fallback layout instead).
    """
    if not result.ok:
        raise PlacementError("Cannot decode an unsatisfiable result")

    organizations = []
    for i, org in enumerate(data.organizations):
        placed = PlacedOrganization(
            name=org.name,
            categories=list(org.categories),
            url=org.url,
            careers=org.careers,
        )
        chosen = _first_true(result, encoding.org_vars[i])
        if chosen is not None:
            cand = org_candidates[i][chosen]
            placed.x, placed.y, placed.score = cand.x, cand.y, cand.score
        organizations.append(placed)

    placed_circles = []
    for i, circle in enumerate(circles):
        pc = PlacedCircle(circle=circle)
        chosen = _first_true(result, encoding.label_vars[i])
        if chosen is not None:
            cand = label_candidates[i][chosen]
            pc.label_x, pc.label_y, pc.label_angle = cand.x, cand.y, cand.angle
        placed_circles.append(pc)

    layout = VennLayout(circles=placed_circles, organizations=organizations, method="sat")
    if layout.unplaced:
        log.info("%d organization(s) without candidates left unplaced: %s",
                 len(layout.unplaced), ", ".join(layout.unplaced))
    return layout


def _first_true(result: SatResult, group: list[int]) -> int | None:
    for idx, var in enumerate(group):
        if result.value(var):
            return idx
    return None
