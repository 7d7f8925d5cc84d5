"""Placer — chooses organization dot and circle label positions via SAT.

Submodules:
  models        Candidate, encoding and output dataclasses.
  geometry      Overlap predicates (points, label boxes, label vs circle).
  candidates    Candidate supplier (grid samples, label directions).
  encoder       CNF encoding (exactly-one + mutual exclusion clauses).
  decoder       Satisfying assignment -> positions.
  fallback      Heuristic layout used when the formula is unsatisfiable.
  engine        Orchestration (optimize_layout).
  serialization JSON conversion (layout_to_dict, parse_layout).
"""

from .models import (
    ORG, LABEL,
    OrgCandidate, LabelCandidate, Selector, PlacementEncoding,
    PlacedOrganization, PlacedCircle, VennLayout, PlacementError,
)
from .geometry import TextBounds, text_bounds, positions_overlap, labels_overlap, label_overlaps_circle
from .candidates import generate_org_candidates, generate_label_candidates
from .encoder import encode_placement
from .decoder import decode_placement
from .fallback import fallback_layout
from .engine import optimize_layout
from .serialization import layout_to_dict, parse_layout

__all__ = [
    # Models
    "ORG", "LABEL",
    "OrgCandidate", "LabelCandidate", "Selector", "PlacementEncoding",
    "PlacedOrganization", "PlacedCircle", "VennLayout", "PlacementError",
    # Geometry
    "TextBounds", "text_bounds", "positions_overlap", "labels_overlap", "label_overlaps_circle",
    # Candidates / Encoding / Decoding
    "generate_org_candidates", "generate_label_candidates",
    "encode_placement", "decode_placement", "fallback_layout",
    # Engine
    "optimize_layout",
    # Serialization
    "layout_to_dict", "parse_layout",
]
