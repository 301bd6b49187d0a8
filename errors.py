"""
Error types raised by the vent-overlap core.

Every error is fatal for the run that raised it. The pipeline annotates
errors with the offending record and its 1-based record number before
re-raising, so the CLI can report the root cause verbatim.
"""


class VentureError(Exception):
    """Base class for all core failures."""

    def __init__(self, message, record=None, line_number=None):
        super().__init__(message)
        self.message = message
        self.record = record
        self.line_number = line_number

    def __str__(self):
        text = self.message
        if self.line_number is not None:
            text = f"line {self.line_number}: {text}"
        if self.record is not None:
            text = f"{text} (record: {self.record!r})"
        return text


class MalformedRecord(VentureError):
    """Record does not match '<int>,<int> -> <int>,<int>'."""


class UnsupportedGeometry(VentureError):
    """Segment is neither axis-aligned nor a 45-degree diagonal."""

    def __init__(self, segment, record=None, line_number=None):
        super().__init__(
            f"segment {segment} is neither axis-aligned nor a 45-degree diagonal",
            record=record,
            line_number=line_number,
        )
        self.segment = segment


class OutOfBounds(VentureError):
    """Point lies outside the configured grid extent."""

    def __init__(self, point, grid_size, record=None, line_number=None):
        super().__init__(
            f"point {point} is outside the {grid_size}x{grid_size} grid",
            record=record,
            line_number=line_number,
        )
        self.point = point
        self.grid_size = grid_size
