"""Geometry of the ellipse that describes a contact."""

from __future__ import annotations

import math

import numpy as np


def size(eigenvalues) -> np.ndarray:
    """Return the diameters of both axes of an ellipse from its eigenvalues."""
    values = np.asarray(eigenvalues, dtype=float)
    return np.sqrt(np.abs(values)) * 2.0


def angle(eigenvectors) -> float:
    """Return the orientation of an ellipse in radians, in the range [0, pi).

    The orientation is taken from the first column of the 2x2 eigenvector matrix.
    """
    vectors = np.asarray(eigenvectors, dtype=float)
    ev1 = vectors[:, 0]
    result = math.atan2(ev1[0], ev1[1])

    # Up and down cannot be told apart, so fold the angle into [0, pi).
    if result < 0:
        return result + math.pi
    if result >= math.pi:
        return result - math.pi
    return result