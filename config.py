"""
Configuration file for the vent-overlap system.

Contains both AXIS-ONLY and DIAGONAL parameter sets, matching the two
historical variants of the puzzle.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Set to False to reproduce the horizontal/vertical-only variant
DIAGONAL_MODE = True


# ---------------------------------------------------------------
# I/O PATHS
# ---------------------------------------------------------------

OUTPUT_FOLDER = "output"


# ===============================================================
# AXIS-ONLY PARAMETERS
# ===============================================================

AXIS_ONLY = {
    "INCLUDE_DIAGONALS": False,
}


# ===============================================================
# DIAGONAL PARAMETERS
# ===============================================================

DIAGONAL = {
    "INCLUDE_DIAGONALS": True,
}


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in both modes)
# ---------------------------------------------------------------

GRID_SIZE = 1000                   # input coordinates are below 1000
GRID_AUTO_SIZE = False             # size the grid from the input instead
GRID_MAX_SIZE = 5000               # largest extent allocated (100 MB of counters)
OVERLAP_THRESHOLD = 2

# "reject" raises UnsupportedGeometry, "skip" drops the segment
UNSUPPORTED_POLICY = "reject"
UNSUPPORTED_POLICIES = ("reject", "skip")

WORKERS = 1


# ---------------------------------------------------------------
# OVERLAP MAP COLORS (BGR)
# ---------------------------------------------------------------

COLOR_EMPTY = (0, 0, 0)            # no vent - black
COLOR_SINGLE = (128, 128, 128)     # one vent line - gray
COLOR_OVERLAP = (0, 0, 255)        # overlapping vent lines - red


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - A combination of SHARED + mode-specific constants.
    - Used by the pipeline and the CLI so they only import one dictionary.
    """

    base = {
        "GRID_SIZE": GRID_SIZE,
        "GRID_AUTO_SIZE": GRID_AUTO_SIZE,
        "GRID_MAX_SIZE": GRID_MAX_SIZE,
        "OVERLAP_THRESHOLD": OVERLAP_THRESHOLD,
        "UNSUPPORTED_POLICY": UNSUPPORTED_POLICY,
        "WORKERS": WORKERS,
    }

    # Merge in axis-only or diagonal mode values
    if DIAGONAL_MODE:
        base.update(DIAGONAL)
    else:
        base.update(AXIS_ONLY)

    return base
