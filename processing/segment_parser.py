import re
from typing import List, Sequence

from errors import MalformedRecord
from models.point import Point
from models.segment import Segment


ARROW = "->"
INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")


def parse_point(raw: str, record: str) -> Point:
    """
    Parses one 'x,y' coordinate group.

    Parameters
    ----------
    raw : str
        The coordinate group, possibly surrounded by whitespace.
    record : str
        Full record, kept for error reporting.
    """
    parts = raw.split(",")
    if len(parts) != 2:
        raise MalformedRecord(
            f"coordinate group {raw.strip()!r} must hold exactly two integers",
            record=record,
        )

    values = []
    for token in parts:
        token = token.strip()
        if not INTEGER_TOKEN.fullmatch(token):
            raise MalformedRecord(f"{token!r} is not an integer", record=record)
        values.append(int(token))

    return Point(values[0], values[1])


def parse_segment(record: str) -> Segment:
    """
    Turns one raw record 'x1,y1 -> x2,y2' into a Segment.

    Whitespace around every token is tolerated. Empty records are
    rejected rather than skipped.

    Raises
    ------
    MalformedRecord
        If the record is empty, lacks the arrow, has the wrong number of
        coordinate groups or integers, or holds a non-integer token.
    """
    if not record.strip():
        raise MalformedRecord("empty record", record=record)

    groups = record.split(ARROW)
    if len(groups) != 2:
        raise MalformedRecord(
            f"expected two coordinate groups separated by {ARROW!r}",
            record=record,
        )

    start = parse_point(groups[0], record)
    end = parse_point(groups[1], record)
    return Segment(start, end)


def parse_records(records: Sequence[str]) -> List[Segment]:
    """
    Parses every record in order, stopping at the first malformed one.

    The raised MalformedRecord carries the 1-based record number.
    """
    segments = []
    for number, record in enumerate(records, start=1):
        try:
            segments.append(parse_segment(record))
        except MalformedRecord as err:
            err.line_number = number
            raise
    return segments
