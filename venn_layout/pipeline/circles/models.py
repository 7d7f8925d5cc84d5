"""Circle dataclasses — the fixed geometry every later stage reads."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CategoryStats:
    """Relationship summary for one category."""

    index: int
    name: str
    color: str
    overlaps: list[int]     # shared-organization count per other category (0 on the diagonal)
    org_count: int


@dataclass(frozen=True)
class Circle:
    """A category circle.  Immutable for the duration of a run."""

    index: int
    name: str
    color: str
    x: float
    y: float
    r: float
