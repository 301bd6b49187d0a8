from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """
    Immutable integer grid coordinate.

    Value type: two points with equal coordinates are the same point.
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Point":
        return Point(self.x + dx, self.y + dy)

    def __str__(self):
        return f"{self.x},{self.y}"
