"""
Utility Functions

Provides step geometry for rasterization and the record / image I/O
helpers used by the entry point.
"""

from .geometry import sign, step_count, unit_step
from .record_io import load_records, ensure_parent_dir, save_image

__all__ = [
    "sign",
    "step_count",
    "unit_step",
    "load_records",
    "ensure_parent_dir",
    "save_image",
]
