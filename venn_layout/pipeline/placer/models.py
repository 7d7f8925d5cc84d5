"""Placer dataclasses — candidates, the SAT encoding, and the output layout."""

from __future__ import annotations

from dataclasses import dataclass, field

from venn_layout.pipeline.circles.models import Circle
from venn_layout.pipeline.sat import SATSolver


ORG = "org"
LABEL = "label"


# ── Candidates (supplied once per run, read-only) ──────────────────


@dataclass(frozen=True)
class OrgCandidate:
    """A possible organization dot position.  Higher score = further from edges."""

    x: float
    y: float
    score: float


@dataclass(frozen=True)
class LabelCandidate:
    """A possible label anchor around its circle."""

    x: float
    y: float
    angle: float    # degrees, direction from the circle centre


# ── Encoding ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class Selector:
    """What a selector variable stands for: candidate *candidate* of entity *entity*."""

    kind: str       # ORG | LABEL
    entity: int
    candidate: int


@dataclass
class PlacementEncoding:
    """A populated solver plus the table needed to read its answer back."""

    solver: SATSolver
    org_vars: list[list[int]]       # org index -> selector var per candidate
    label_vars: list[list[int]]     # circle index -> selector var per candidate
    selectors: dict[int, Selector]  # var -> (kind, entity, candidate)
    stats: dict[str, int] = field(default_factory=dict)


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass
class PlacedOrganization:
    """An organization and its chosen position (None when unplaced)."""

    name: str
    categories: list[str]
    x: float | None = None
    y: float | None = None
    score: float | None = None
    url: str | None = None
    careers: str | None = None

    @property
    def placed(self) -> bool:
        return self.x is not None and self.y is not None


@dataclass
class PlacedCircle:
    """A circle together with its chosen label anchor."""

    circle: Circle
    label_x: float | None = None
    label_y: float | None = None
    label_angle: float | None = None


@dataclass
class VennLayout:
    """Complete layout of circles, labels and organization dots."""

    circles: list[PlacedCircle]
    organizations: list[PlacedOrganization]
    method: str = "sat"         # "sat" | "fallback"
    stats: dict = field(default_factory=dict)

    @property
    def unplaced(self) -> list[str]:
        return [o.name for o in self.organizations if not o.placed]


class PlacementError(Exception):
    """Raised when a placement cannot be decoded."""
