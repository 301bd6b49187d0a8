"""
Data Models

Defines the core data structures:
- Point
- Segment
- OverlapGrid
"""

from .point import Point
from .segment import Segment
from .overlap_grid import OverlapGrid

__all__ = ["Point", "Segment", "OverlapGrid"]
