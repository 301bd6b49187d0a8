"""
Visualization Tools

Provides rendering of the accumulated overlap grid as an image.
"""

from .overlap_map import render_overlap_map, save_overlap_map

__all__ = [
    "render_overlap_map",
    "save_overlap_map",
]
