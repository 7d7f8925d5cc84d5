"""Placement encoder — reduce candidate selection to CNF.

One selector variable per (entity, candidate).  For every entity with
candidates the encoder emits an exactly-one constraint (one clause with
all its selectors, plus a 2-literal clause per pair of its selectors).
For every pair of same-kind entities, each pair of candidates flagged by
the overlap predicate gets a 2-literal clause forbidding both.

Allocation order is fixed (all organization selectors, then all label
selectors, each in entity then candidate order) because the solver's
lowest-variable-first, true-first search makes the chosen candidate
depend on it.
"""

from __future__ import annotations

import logging
from itertools import combinations

from venn_layout.pipeline.circles.models import Circle
from venn_layout.pipeline.config import LAYOUT_RULES, LayoutRules
from venn_layout.pipeline.sat import SATSolver

from .geometry import positions_overlap, labels_overlap, label_overlaps_circle
from .models import (
    ORG, LABEL,
    OrgCandidate, LabelCandidate, Selector, PlacementEncoding,
)


log = logging.getLogger(__name__)


def encode_placement(
    org_candidates: list[list[OrgCandidate]],
    label_candidates: list[list[LabelCandidate]],
    circles: list[Circle],
    *,
    rules: LayoutRules = LAYOUT_RULES,
    solver: SATSolver | None = None,
) -> PlacementEncoding:
    """Build a solver whose models are exactly the non-overlapping placements.

    ``label_candidates[i]`` belongs to ``circles[i]`` and is labelled with
    that circle's name.
    """
    sat = solver or SATSolver()
    selectors: dict[int, Selector] = {}
    stats = {
        "exactly_one_clauses": 0,
        "at_most_one_clauses": 0,
        "org_conflict_clauses": 0,
        "label_conflict_clauses": 0,
        "label_circle_overlaps": 0,
    }

    # ── 1. Selector variables ──────────────────────────────────────

    org_vars = _allocate(sat, ORG, org_candidates, selectors)
    label_vars = _allocate(sat, LABEL, label_candidates, selectors)

    # ── 2. Exactly one candidate per entity ────────────────────────

    for group in (*org_vars, *label_vars):
        if not group:
            continue
        sat.add_clause(group)
        stats["exactly_one_clauses"] += 1
        for v1, v2 in combinations(group, 2):
            sat.add_clause([-v1, -v2])
            stats["at_most_one_clauses"] += 1

    # ── 3. No two organization dots too close ──────────────────────

    for i, j in combinations(range(len(org_candidates)), 2):
        for pi, ci in enumerate(org_candidates[i]):
            for pj, cj in enumerate(org_candidates[j]):
                if positions_overlap(ci.x, ci.y, cj.x, cj.y, rules.min_org_separation):
                    sat.add_clause([-org_vars[i][pi], -org_vars[j][pj]])
                    stats["org_conflict_clauses"] += 1

    # ── 4. No two circle labels overlapping ────────────────────────

    for i, j in combinations(range(len(label_candidates)), 2):
        name_i, name_j = circles[i].name, circles[j].name
        for pi, ci in enumerate(label_candidates[i]):
            for pj, cj in enumerate(label_candidates[j]):
                if labels_overlap(name_i, ci.x, ci.y, name_j, cj.x, cj.y, rules):
                    sat.add_clause([-label_vars[i][pi], -label_vars[j][pj]])
                    stats["label_conflict_clauses"] += 1

    # ── 5. Labels over circles (diagnostic only) ───────────────────
    # Label-vs-circle exclusion belongs to candidate generation; no
    # clause is emitted here.

    for i, cands in enumerate(label_candidates):
        for cand in cands:
            if any(label_overlaps_circle(circles[i].name, cand.x, cand.y, other, rules)
                   for other in circles):
                stats["label_circle_overlaps"] += 1
    if stats["label_circle_overlaps"]:
        log.debug("%d label candidate(s) overlap a circle (not constrained)",
                  stats["label_circle_overlaps"])

    log.info("SAT problem: %d variables, %d clauses", sat.num_vars, len(sat.clauses))

    return PlacementEncoding(
        solver=sat,
        org_vars=org_vars,
        label_vars=label_vars,
        selectors=selectors,
        stats=stats,
    )


def _allocate(
    sat: SATSolver,
    kind: str,
    candidates: list[list],
    selectors: dict[int, Selector],
) -> list[list[int]]:
    groups = []
    for entity, cands in enumerate(candidates):
        group = []
        for idx in range(len(cands)):
            var = sat.allocate_variable()
            selectors[var] = Selector(kind=kind, entity=entity, candidate=idx)
            group.append(var)
        groups.append(group)
    return groups
