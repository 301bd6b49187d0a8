"""
Accumulation of rasterized segments into an OverlapGrid.

This module provides:
    • accumulate_segments(segments, grid, ...)
    • split_into_shards(segments, shard_count)

Counts are commutative, so segments can be rasterized in independent
shards, each into its own partial grid, and merged by summation.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import List, Sequence, Tuple

from errors import VentureError
from models.overlap_grid import OverlapGrid
from models.segment import Segment
from processing.rasterizer import rasterize_segment


# -------------------------------------------------------------------------
#  SHARDING
# -------------------------------------------------------------------------

def split_into_shards(segments: Sequence[Segment], shard_count: int) -> List[Tuple[int, Sequence[Segment]]]:
    """
    Splits segments into at most shard_count contiguous, non-empty shards.

    Returns (offset, shard) pairs; offset is the index of the shard's first
    segment in the full sequence.
    """
    shard_count = max(1, min(shard_count, len(segments)))
    size, extra = divmod(len(segments), shard_count)

    shards = []
    offset = 0
    for i in range(shard_count):
        length = size + (1 if i < extra else 0)
        if length:
            shards.append((offset, segments[offset:offset + length]))
        offset += length
    return shards


# -------------------------------------------------------------------------
#  SEQUENTIAL ACCUMULATION
# -------------------------------------------------------------------------

def _accumulate_shard(grid, segments, offset, include_diagonals, on_unsupported):
    for i, segment in enumerate(segments):
        try:
            for point in rasterize_segment(segment, include_diagonals, on_unsupported):
                grid.increment(point)
        except VentureError as err:
            err.line_number = offset + i + 1
            if err.record is None:
                err.record = str(segment)
            raise
    return grid


# -------------------------------------------------------------------------
#  PUBLIC ENTRY POINT
# -------------------------------------------------------------------------

def accumulate_segments(
    segments: Sequence[Segment],
    grid: OverlapGrid,
    include_diagonals: bool = True,
    on_unsupported: str = "reject",
    workers: int = 1,
) -> OverlapGrid:
    """
    Rasterizes every segment and adds its cells to grid.

    workers <= 1 increments grid directly. With more workers, contiguous
    shards are rasterized on a thread pool into partial grids which are
    merged into grid once every shard succeeded. The error of the earliest
    failing shard is raised and grid is left untouched.

    Errors carry the 1-based index of the offending segment as line_number.
    """

    if workers <= 1 or len(segments) < 2:
        return _accumulate_shard(grid, segments, 0, include_diagonals, on_unsupported)

    shards = split_into_shards(segments, workers)
    with ThreadPoolExecutor(max_workers=len(shards)) as pool:
        futures = [
            pool.submit(
                _accumulate_shard,
                OverlapGrid(grid.size, max_size=grid.size),
                shard,
                offset,
                include_diagonals,
                on_unsupported,
            )
            for offset, shard in shards
        ]
        partials = [future.result() for future in futures]

    for partial in partials:
        grid.merge(partial)
    return grid
