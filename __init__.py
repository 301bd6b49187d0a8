"""
Hydrothermal Venture Package

Counts the grid points where two or more hydrothermal vent lines overlap:

- Record parsing
- Segment rasterization (axis-aligned and 45-degree diagonal)
- Overlap grid accumulation, sequential or sharded
- Overlap map visualization
"""
__all__ = [
    "config",
    "errors",
    "main",
    "pipeline",
    "models",
    "processing",
    "utils",
    "visualization",
]
