from typing import Iterable

import numpy as np

from config import GRID_MAX_SIZE
from errors import OutOfBounds
from models.point import Point
from models.segment import Segment


class OverlapGrid:
    """
    Dense square counter map: how many vent lines cover each cell.

    Supports:
      - bounds-checked single-cell increments
      - threshold queries over the whole grid
      - elementwise merging of partial grids (sharded accumulation)

    Layout matches the pixel maps used elsewhere: counts[y, x].
    """

    def __init__(self, size: int, max_size: int = GRID_MAX_SIZE):
        if size < 1:
            raise ValueError(f"grid size must be positive, got {size}")
        if size > max_size:
            raise ValueError(f"grid size {size} exceeds the maximum of {max_size}")
        self.size = size
        self.counts = np.zeros((size, size), dtype=np.int32)

    @classmethod
    def sized_for(cls, segments: Iterable[Segment], max_size: int = GRID_MAX_SIZE) -> "OverlapGrid":
        """
        Smallest grid covering every endpoint: max coordinate + 1.

        Negative coordinates are not covered; they still fail on increment.
        """
        largest = max((seg.max_coordinate for seg in segments), default=0)
        return cls(max(largest + 1, 1), max_size)

    # ------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------
    def contains(self, point: Point) -> bool:
        return 0 <= point.x < self.size and 0 <= point.y < self.size

    def increment(self, point: Point):
        # numpy would silently wrap negative indices
        if not self.contains(point):
            raise OutOfBounds(point, self.size)
        self.counts[point.y, point.x] += 1

    def merge(self, other: "OverlapGrid"):
        """
        Adds another grid's counters into this one.
        """
        if other.size != self.size:
            raise ValueError(
                f"cannot merge a {other.size}x{other.size} grid into a "
                f"{self.size}x{self.size} grid"
            )
        self.counts += other.counts

    # ------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------
    def count_at(self, point: Point) -> int:
        if not self.contains(point):
            raise OutOfBounds(point, self.size)
        return int(self.counts[point.y, point.x])

    def count_at_least(self, threshold: int) -> int:
        """
        Number of cells whose counter is >= threshold.
        """
        return int(np.count_nonzero(self.counts >= threshold))

    def __repr__(self):
        return f"OverlapGrid(size={self.size}, covered={self.count_at_least(1)})"
