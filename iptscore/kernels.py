"""Convolution kernels."""

from __future__ import annotations

import numpy as np


def gaussian(rows: int, cols: int, sigma: float) -> np.ndarray:
    """Return a normalized gaussian kernel of odd dimensions ``rows`` x ``cols``."""
    if rows % 2 != 1 or cols % 2 != 1:
        raise ValueError("Kernel dimensions must be odd")

    vy = np.arange(rows, dtype=float) - (rows - 1) / 2.0
    vx = np.arange(cols, dtype=float) - (cols - 1) / 2.0
    yy, xx = np.meshgrid(vy / sigma, vx / sigma, indexing="ij")

    kernel = np.exp(-0.5 * (yy**2 + xx**2))
    return kernel / kernel.sum()