from typing import List

from config import UNSUPPORTED_POLICIES
from errors import UnsupportedGeometry
from models.point import Point
from models.segment import Segment
from utils.geometry import step_count, unit_step


def rasterize_segment(segment: Segment, include_diagonals=True, on_unsupported="reject") -> List[Point]:
    """
    Lists every grid cell a segment passes through, start to end inclusive.

    One signed-step walk covers horizontal, vertical and 45-degree lines:
    cell i is start + i * (sign(dx), sign(dy)) for i in 0..max(|dx|, |dy|).

    Parameters
    ----------
    segment : Segment
        Segment to rasterize.
    include_diagonals : bool
        False reproduces the axis-only variant: 45-degree diagonals yield
        no cells.
    on_unsupported : str
        "reject" raises UnsupportedGeometry for any other angle,
        "skip" yields no cells for it.

    Returns
    -------
    list[Point]
        max(|dx|, |dy|) + 1 points, or an empty list for a dropped segment.
    """

    if on_unsupported not in UNSUPPORTED_POLICIES:
        raise ValueError(f"unknown unsupported-geometry policy: {on_unsupported!r}")

    if not segment.is_supported:
        if on_unsupported == "skip":
            return []
        raise UnsupportedGeometry(segment)

    if segment.is_diagonal and not include_diagonals:
        return []

    step_x, step_y = unit_step(segment)
    return [
        segment.start.offset(i * step_x, i * step_y)
        for i in range(step_count(segment) + 1)
    ]
