"""
Processing Package

Contains the stages of the vent-overlap pipeline:
- Record parsing
- Segment rasterization
- Grid accumulation (sequential or sharded)
"""

from .segment_parser import parse_point, parse_segment, parse_records
from .rasterizer import rasterize_segment
from .accumulator import accumulate_segments, split_into_shards

__all__ = [
    "parse_point",
    "parse_segment",
    "parse_records",
    "rasterize_segment",
    "accumulate_segments",
    "split_into_shards",
]
