from typing import Iterable

from config import get_active_params
from errors import VentureError
from models.overlap_grid import OverlapGrid
from processing.accumulator import accumulate_segments
from processing.segment_parser import parse_records


def build_overlap_grid(
    records: Iterable[str],
    include_diagonals=None,
    on_unsupported=None,
    grid_size=None,
    auto_size=None,
    workers=None,
) -> OverlapGrid:
    """
    Runs the parse / rasterize / accumulate stages for one batch of records:
      1. Parse every record into a Segment
      2. Create a fresh OverlapGrid (fixed or sized from the input)
      3. Rasterize each segment and increment the grid

    Any parameter left as None is taken from config.get_active_params().
    The first failing record aborts the run; the raised VentureError
    carries that record and its 1-based record number.
    """

    # streams are read once; errors index back into the raw records
    records = list(records)

    params = get_active_params()
    if include_diagonals is None:
        include_diagonals = params["INCLUDE_DIAGONALS"]
    if on_unsupported is None:
        on_unsupported = params["UNSUPPORTED_POLICY"]
    if auto_size is None:
        auto_size = params["GRID_AUTO_SIZE"]
    if grid_size is None:
        grid_size = params["GRID_SIZE"]
    if workers is None:
        workers = params["WORKERS"]

    segments = parse_records(records)

    if auto_size:
        grid = OverlapGrid.sized_for(segments, params["GRID_MAX_SIZE"])
    else:
        grid = OverlapGrid(grid_size, params["GRID_MAX_SIZE"])

    try:
        accumulate_segments(segments, grid, include_diagonals, on_unsupported, workers)
    except VentureError as err:
        # report the raw input line, not the re-rendered segment
        if err.line_number is not None:
            err.record = records[err.line_number - 1]
        raise

    return grid


def count_overlaps(records: Iterable[str], threshold=None, **options) -> int:
    """
    Number of grid cells covered by at least `threshold` segments
    (2 by default). Keyword options are passed to build_overlap_grid().
    """
    if threshold is None:
        threshold = get_active_params()["OVERLAP_THRESHOLD"]

    grid = build_overlap_grid(records, **options)
    return grid.count_at_least(threshold)
