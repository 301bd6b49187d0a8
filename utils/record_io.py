"""
Input/output utilities for the vent-overlap pipeline.

This module provides:
    • load_records(path)
    • ensure_parent_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
from typing import List

import cv2
import numpy as np


# -------------------------------------------------------------------------
#  RECORD LOADING
# -------------------------------------------------------------------------

def load_records(path: str) -> List[str]:
    """
    Reads a puzzle input file into raw records, one per non-blank line.

    Blank lines are dropped here so the parser only ever sees real records.

    Example:
        records = load_records('input.txt')
        # ['0,9 -> 5,9', '8,0 -> 0,8', ...]
    """
    with open(path, encoding="utf-8") as fh:
        return [line.rstrip("\r\n") for line in fh if line.strip()]


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_parent_dir(path: str):
    """
    Creates the directory a file will be written into, if any.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Writes an image through OpenCV; the format follows the extension.

    Raises OSError when OpenCV cannot encode or write the file, including
    extensions it has no writer for.
    """
    ensure_parent_dir(path)
    try:
        written = cv2.imwrite(path, image)
    except cv2.error as e:
        raise OSError(f"could not write image to {path}: {e}") from e
    if not written:
        raise OSError(f"could not write image to {path}")
