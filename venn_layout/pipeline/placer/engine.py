"""Main layout engine — candidates, SAT encoding, decision, decoding."""

from __future__ import annotations

import logging

from venn_layout.pipeline.circles import analyze_relationships, build_circles
from venn_layout.pipeline.config import LAYOUT_RULES, LayoutRules
from venn_layout.pipeline.data.models import VennData

from .candidates import generate_org_candidates, generate_label_candidates
from .decoder import decode_placement
from .encoder import encode_placement
from .fallback import fallback_layout
from .models import VennLayout


log = logging.getLogger(__name__)


def optimize_layout(
    data: VennData,
    *,
    rules: LayoutRules = LAYOUT_RULES,
    width: float | None = None,
    height: float | None = None,
) -> VennLayout:
    """Position circles, organization dots and circle labels.

    The circles are fixed first.  Organization and label positions are
    then chosen together by SAT so that no two dots are closer than the
    minimum separation and no two labels overlap.  When no such choice
    exists the fallback layout is returned instead.

    Parameters
    ----------
    data : VennData
        Categories and organizations to lay out.
    rules : LayoutRules
        Geometric constants (default ``LAYOUT_RULES``).
    width, height : float, optional
        Canvas size; overrides ``rules.canvas_width/height`` for the
        circle arrangement centre.

    Returns
    -------
    VennLayout
        ``method`` is ``"sat"`` or ``"fallback"``.
    """
    log.info("=== Layout optimization: %d categories, %d organizations ===",
             len(data.categories), len(data.organizations))

    w = width if width is not None else rules.canvas_width
    h = height if height is not None else rules.canvas_height

    # ── 1. Fixed geometry and candidates ───────────────────────────

    stats = analyze_relationships(data)
    circles = build_circles(data, stats, center=(w / 2, h / 2), rules=rules)
    org_candidates = generate_org_candidates(data.organizations, circles, rules)
    label_candidates = generate_label_candidates(circles, rules)

    log.info("Candidates: %d org positions, %d label positions",
             sum(len(c) for c in org_candidates),
             sum(len(c) for c in label_candidates))

    # ── 2. Encode ──────────────────────────────────────────────────

    encoding = encode_placement(org_candidates, label_candidates, circles, rules=rules)

    # ── 3. Decide ──────────────────────────────────────────────────

    log.info("Solving...")
    result = encoding.solver.decide()
    run_stats = {
        "variables": encoding.solver.num_vars,
        "clauses": len(encoding.solver.clauses),
        "decisions": result.stats.decisions,
        "backtracks": result.stats.backtracks,
        "elapsed_s": round(result.stats.elapsed_s, 4),
        **encoding.stats,
    }

    if not result.ok:
        log.warning("No solution found (%d decisions, %.2fs); falling back",
                    result.stats.decisions, result.stats.elapsed_s)
        layout = fallback_layout(data, circles, rules)
        layout.stats = run_stats
        return layout

    # ── 4. Decode ──────────────────────────────────────────────────

    log.info("Solution found (%d decisions, %d backtracks, %.2fs)",
             result.stats.decisions, result.stats.backtracks, result.stats.elapsed_s)
    layout = decode_placement(
        result, encoding, data, circles, org_candidates, label_candidates,
    )
    layout.stats = run_stats
    return layout
