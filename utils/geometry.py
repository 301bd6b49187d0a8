"""
This module provides:
    - sign
    - step_count
    - unit_step
"""

from models.segment import Segment


# ----------------------------------------------------------------------
#  SIGN (sign(0) == 0)
# ----------------------------------------------------------------------

def sign(value):
    return (value > 0) - (value < 0)


# ----------------------------------------------------------------------
#  NUMBER OF STEPS BETWEEN ENDPOINTS
# ----------------------------------------------------------------------

def step_count(segment: Segment):
    """
    Chebyshev length of a segment: max(|dx|, |dy|).

    A segment covers step_count + 1 cells.
    """
    return max(abs(segment.dx), abs(segment.dy))


# ----------------------------------------------------------------------
#  PER-STEP OFFSET
# ----------------------------------------------------------------------

def unit_step(segment: Segment):
    """
    Returns (sign(dx), sign(dy)): the offset between consecutive cells.
    """
    return sign(segment.dx), sign(segment.dy)
