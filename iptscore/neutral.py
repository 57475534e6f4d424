"""Neutral value of a heatmap: the level below which everything is noise."""

from __future__ import annotations

from collections import Counter
from enum import Enum

import numpy as np


class Algorithm(Enum):
    """How the neutral value is computed."""

    MODE = "mode"
    AVERAGE = "average"
    CONSTANT = "constant"


def statistical_mode(data) -> float:
    """Return the most common value, scanning rows first.

    On a tie the value that first reached the highest count wins.
    """
    counts: Counter = Counter()
    max_count = 0
    max_element = 0
    for value in np.asarray(data).ravel(order="C").tolist():
        counts[value] += 1
        if counts[value] > max_count:
            max_count = counts[value]
            max_element = value
    return max_element


def calculate(heatmap, algorithm: Algorithm, offset: float) -> float:
    """Return the neutral value of ``heatmap`` plus ``offset``."""
    if algorithm is Algorithm.MODE:
        return statistical_mode(heatmap) + offset
    if algorithm is Algorithm.AVERAGE:
        return float(np.mean(heatmap)) + offset
    if algorithm is Algorithm.CONSTANT:
        return offset
    raise ValueError("Invalid neutral mode!")