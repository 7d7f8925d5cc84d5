"""Shared geometric constants for the layout pipeline.

These values describe label text metrics, organization spacing, and the
sampling grids used to generate candidate positions.  Both the
**candidate supplier** (which samples positions) and the **encoder**
(which decides which candidates conflict) derive their parameters from
this single source of truth.

Change a value here and every stage stays in sync automatically.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path


class ConfigError(Exception):
    """Raised when a layout rules override file cannot be applied."""


@dataclass(frozen=True)
class LayoutRules:
    """Geometric rules for circle, organization and label placement.

    All distances are in canvas units (SVG pixels).
    """

    canvas_width: float = 1000.0
    canvas_height: float = 800.0

    min_org_separation: float = 60.0
    """Two organization dots closer than this conflict."""

    label_padding: float = 15.0
    """Extra gap required between two circle labels."""

    char_width: float = 10.0
    text_side_padding: float = 20.0
    font_size: float = 14.0
    line_height: float = 1.5
    baseline_descent: float = 8.0
    """Distance from the anchor point down to the bottom of the text box."""

    org_grid_step: float = 20.0
    org_inside_margin: float = 15.0
    """An organization must sit this far inside each of its circles."""

    org_outside_margin: float = 25.0
    """An organization must sit this far outside every other circle."""

    max_org_candidates: int = 100

    label_directions: int = 24
    label_distance: float = 65.0
    """Gap between a circle's edge and its label anchor."""

    base_radius: float = 80.0
    radius_range: float = 80.0
    ring_distance: float = 150.0

    fallback_label_offset: float = 30.0

    # ── Derived helpers ────────────────────────────────────────────

    @property
    def text_height(self) -> float:
        return self.font_size * self.line_height

    def text_width(self, text: str) -> float:
        """Rendered width of a label under the fixed character model."""
        return len(text) * self.char_width + self.text_side_padding

    @property
    def center(self) -> tuple[float, float]:
        return (self.canvas_width / 2, self.canvas_height / 2)


# Module-level singleton, importable everywhere.
LAYOUT_RULES = LayoutRules()


def load_layout_rules(path: str | Path, base: LayoutRules = LAYOUT_RULES) -> LayoutRules:
    """Return *base* with the overrides from a JSON object file applied.

    Format:
        {"min_org_separation": 40, "label_directions": 16}
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{p}: parse error: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"{p}: read error: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{p}: expected a JSON object of rule overrides")

    known = {f.name: f for f in fields(LayoutRules)}
    overrides = {}
    for key, value in raw.items():
        if key not in known:
            raise ConfigError(f"{p}: unknown layout rule '{key}'")
        overrides[key] = _coerce(p, key, value, integral=known[key].type == "int")
    return replace(base, **overrides)


def _coerce(p: Path, key: str, value, *, integral: bool) -> float | int:
    """Check one override value against its field type."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{p}: layout rule '{key}' must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{p}: layout rule '{key}' must be finite, got {value!r}")
    if integral:
        if value != int(value):
            raise ConfigError(f"{p}: layout rule '{key}' must be an integer, got {value!r}")
        return int(value)
    return float(value)
