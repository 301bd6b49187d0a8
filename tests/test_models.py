"""Tests for Point, Segment and OverlapGrid."""

import random

import pytest

from errors import OutOfBounds
from models import OverlapGrid, Point, Segment

# ---------------------------------------------------------------------------
# Point / Segment
# ---------------------------------------------------------------------------


class TestPoint:
    def test_value_equality(self) -> None:
        assert Point(3, 4) == Point(3, 4)
        assert len({Point(3, 4), Point(3, 4), Point(4, 3)}) == 2

    def test_frozen(self) -> None:
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_offset(self) -> None:
        assert Point(5, 5).offset(-1, 2) == Point(4, 7)

    def test_str(self) -> None:
        assert str(Point(8, 0)) == "8,0"


class TestSegmentOrientation:
    @pytest.mark.parametrize(
        ("start", "end", "axis", "diagonal"),
        [
            ((0, 9), (5, 9), True, False),
            ((7, 0), (7, 4), True, False),
            ((8, 0), (0, 8), False, True),
            ((0, 0), (8, 8), False, True),
            ((3, 3), (3, 3), True, False),
            ((0, 0), (2, 1), False, False),
        ],
    )
    def test_classification(self, start, end, axis, diagonal) -> None:
        seg = Segment(Point(*start), Point(*end))
        assert seg.is_axis_aligned is axis
        assert seg.is_diagonal is diagonal
        assert seg.is_supported is (axis or diagonal)

    def test_signed_extents(self) -> None:
        seg = Segment(Point(9, 7), Point(7, 7))
        assert (seg.dx, seg.dy) == (-2, 0)

    def test_max_coordinate(self) -> None:
        assert Segment(Point(1, 12), Point(7, 3)).max_coordinate == 12

    def test_str(self) -> None:
        assert str(Segment(Point(0, 9), Point(5, 9))) == "0,9 -> 5,9"


# ---------------------------------------------------------------------------
# OverlapGrid
# ---------------------------------------------------------------------------


class TestOverlapGrid:
    def test_starts_empty(self) -> None:
        grid = OverlapGrid(10)
        assert grid.count_at_least(1) == 0

    def test_increment_and_read(self) -> None:
        grid = OverlapGrid(10)
        grid.increment(Point(2, 3))
        grid.increment(Point(2, 3))
        assert grid.count_at(Point(2, 3)) == 2
        assert grid.count_at(Point(3, 2)) == 0
        assert grid.count_at_least(2) == 1

    def test_threshold_zero_counts_every_cell(self) -> None:
        grid = OverlapGrid(1000)
        assert grid.count_at_least(0) == 1000 * 1000

    def test_negative_threshold_counts_every_cell(self) -> None:
        assert OverlapGrid(7).count_at_least(-3) == 49

    @pytest.mark.parametrize("point", [Point(10, 0), Point(0, 10), Point(-1, 0), Point(0, -1)])
    def test_increment_out_of_bounds(self, point) -> None:
        grid = OverlapGrid(10)
        with pytest.raises(OutOfBounds) as exc_info:
            grid.increment(point)
        assert exc_info.value.point == point
        assert exc_info.value.grid_size == 10
        assert grid.count_at_least(1) == 0

    def test_count_at_out_of_bounds(self) -> None:
        with pytest.raises(OutOfBounds):
            OverlapGrid(4).count_at(Point(4, 4))

    @pytest.mark.parametrize("size", [0, -5])
    def test_invalid_size(self, size) -> None:
        with pytest.raises(ValueError):
            OverlapGrid(size)

    def test_increments_commute(self) -> None:
        rng = random.Random(5)
        points = [Point(rng.randrange(20), rng.randrange(20)) for _ in range(400)]
        shuffled = list(points)
        rng.shuffle(shuffled)

        first, second = OverlapGrid(20), OverlapGrid(20)
        for p in points:
            first.increment(p)
        for p in shuffled:
            second.increment(p)

        for threshold in range(0, 5):
            assert first.count_at_least(threshold) == second.count_at_least(threshold)

    def test_merge_sums_counters(self) -> None:
        left, right = OverlapGrid(5), OverlapGrid(5)
        left.increment(Point(1, 1))
        right.increment(Point(1, 1))
        right.increment(Point(4, 0))

        left.merge(right)
        assert left.count_at(Point(1, 1)) == 2
        assert left.count_at(Point(4, 0)) == 1
        assert right.count_at(Point(1, 1)) == 1

    def test_merge_size_mismatch(self) -> None:
        with pytest.raises(ValueError):
            OverlapGrid(5).merge(OverlapGrid(6))

    def test_sized_for(self) -> None:
        segments = [Segment(Point(0, 9), Point(5, 9)), Segment(Point(8, 0), Point(0, 8))]
        assert OverlapGrid.sized_for(segments).size == 10

    def test_sized_for_no_segments(self) -> None:
        assert OverlapGrid.sized_for([]).size == 1

    def test_size_above_maximum(self) -> None:
        with pytest.raises(ValueError, match="exceeds the maximum of 20"):
            OverlapGrid(21, max_size=20)

    def test_size_at_maximum(self) -> None:
        assert OverlapGrid(20, max_size=20).size == 20

    def test_sized_for_above_maximum(self) -> None:
        segments = [Segment(Point(0, 0), Point(50, 0))]
        with pytest.raises(ValueError):
            OverlapGrid.sized_for(segments, max_size=50)
