"""Input document dataclasses — categories and the organizations inside them."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Category:
    """A category drawn as one circle.

    x, y, r are optional precomputed circle geometry supplied by an
    external layout step.  When every category carries them they are
    used verbatim instead of the built-in ring arrangement.
    """
    name: str
    color: str
    x: float | None = None
    y: float | None = None
    r: float | None = None

    @property
    def has_geometry(self) -> bool:
        return self.x is not None and self.y is not None and self.r is not None


@dataclass
class Organization:
    name: str
    categories: list[str]       # category names this organization belongs to
    url: str | None = None
    careers: str | None = None


@dataclass
class VennData:
    categories: list[Category]
    organizations: list[Organization] = field(default_factory=list)


class DataError(Exception):
    """Raised when an input document cannot be parsed."""
