from dataclasses import dataclass

from models.point import Point


@dataclass(frozen=True)
class Segment:
    """
    A vent line between two endpoints, both inclusive.

    Supports:
      • signed x / y extents (dx, dy)
      • orientation tests: axis-aligned, exactly 45-degree diagonal
      • the combined "supported geometry" test used by the rasterizer

    Construction accepts any endpoint pair; the orientation invariant is
    enforced when the segment is rasterized.
    """

    start: Point
    end: Point

    # ------------------------------------------------------------
    # Extents
    # ------------------------------------------------------------
    @property
    def dx(self) -> int:
        return self.end.x - self.start.x

    @property
    def dy(self) -> int:
        return self.end.y - self.start.y

    # ------------------------------------------------------------
    # Orientation
    # ------------------------------------------------------------
    @property
    def is_axis_aligned(self) -> bool:
        """Horizontal, vertical, or a single point."""
        return self.dx == 0 or self.dy == 0

    @property
    def is_diagonal(self) -> bool:
        """Exactly 45 degrees, excluding the degenerate single point."""
        return self.dx != 0 and abs(self.dx) == abs(self.dy)

    @property
    def is_supported(self) -> bool:
        return self.is_axis_aligned or self.is_diagonal

    @property
    def max_coordinate(self) -> int:
        return max(self.start.x, self.start.y, self.end.x, self.end.y)

    def __str__(self):
        return f"{self.start} -> {self.end}"
