"""Overlap predicates for candidate placements.

All predicates are pure functions of geometry.  Screen coordinates are
used throughout: y grows downward, so a box's ``top`` is its smaller y.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from shapely.geometry import Point, box as shapely_box

from venn_layout.pipeline.circles.models import Circle
from venn_layout.pipeline.config import LAYOUT_RULES, LayoutRules


@dataclass(frozen=True)
class TextBounds:
    left: float
    right: float
    top: float
    bottom: float


def text_bounds(
    text: str, x: float, y: float,
    rules: LayoutRules = LAYOUT_RULES,
) -> TextBounds:
    """Bounding box of *text* anchored at (x, y).

    Horizontally centred on the anchor.  Vertically the anchor is the
    baseline: the box extends one text height above it and the baseline
    descent below it.
    """
    half_w = rules.text_width(text) / 2
    return TextBounds(
        left=x - half_w,
        right=x + half_w,
        top=y - rules.text_height,
        bottom=y + rules.baseline_descent,
    )


def positions_overlap(
    x1: float, y1: float,
    x2: float, y2: float,
    min_dist: float,
) -> bool:
    """True if two points are closer than *min_dist*."""
    return math.hypot(x1 - x2, y1 - y2) < min_dist


def labels_overlap(
    text1: str, x1: float, y1: float,
    text2: str, x2: float, y2: float,
    rules: LayoutRules = LAYOUT_RULES,
) -> bool:
    """True unless the two text boxes are separated by more than the padding.

    The boxes are separated when, along either axis, one ends more than
    ``label_padding`` before the other begins.
    """
    b1 = text_bounds(text1, x1, y1, rules)
    b2 = text_bounds(text2, x2, y2, rules)
    pad = rules.label_padding
    return not (
        b1.right + pad < b2.left
        or b2.right + pad < b1.left
        or b1.bottom + pad < b2.top
        or b2.bottom + pad < b1.top
    )


def label_overlaps_circle(
    text: str, x: float, y: float,
    circle: Circle,
    rules: LayoutRules = LAYOUT_RULES,
) -> bool:
    """True if the label box reaches strictly inside *circle*.

    The distance from the circle centre to the box is the distance to
    the closest point of the box (zero when the centre is inside it).
    """
    b = text_bounds(text, x, y, rules)
    rect = shapely_box(b.left, b.top, b.right, b.bottom)
    return rect.distance(Point(circle.x, circle.y)) < circle.r
