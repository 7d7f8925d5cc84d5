"""Circles — fixed category circles consumed by the placer.

Submodules:
  models   CategoryStats and Circle dataclasses.
  layout   Relationship analysis and circle arrangement.
"""

from .models import CategoryStats, Circle
from .layout import analyze_relationships, build_circles

__all__ = [
    "CategoryStats", "Circle",
    "analyze_relationships", "build_circles",
]
