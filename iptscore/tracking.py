"""Tracking of contacts over consecutive frames."""

from __future__ import annotations

import dataclasses
import math
from typing import List, Sequence

import numpy as np

from .contact import Contact, find_in_frame


def calculate_distances(x: Sequence[Contact], y: Sequence[Contact]) -> np.ndarray:
    """Return the distances between the contacts of two frames.

    The result has one row per contact in ``y`` and one column per contact in
    ``x``; entry ``[iy, ix]`` is the distance between their centres.
    """
    out = np.empty((len(y), len(x)), dtype=float)
    for iy, cy in enumerate(y):
        for ix, cx in enumerate(x):
            out[iy, ix] = math.hypot(cx.mean[0] - cy.mean[0], cx.mean[1] - cy.mean[1])
    return out


class Tracker:
    """Assigns temporally stable indices to contacts."""

    def __init__(self) -> None:
        self._last: List[Contact] = []

    def reset(self) -> None:
        """Forget the stored previous frame."""
        self._last.clear()

    def track(self, frame: List[Contact]) -> List[Contact]:
        """Assign indices to the contacts of ``frame`` in place and return it.

        Contacts that are close to a contact of the previous frame inherit its
        index; all others receive an index that the previous frame did not use.
        """
        counter = 0
        for contact in frame:
            contact.index = self._find_new_index(counter)
            counter = contact.index + 1

        if self._last:
            matches = min(len(frame), len(self._last))
            distances = calculate_distances(frame, self._last)
            rows = distances.shape[0]

            for _ in range(matches):
                # Search in column-major order so ties resolve consistently.
                flat = int(np.argmin(distances.ravel(order="F")))
                x, y = divmod(flat, rows)

                frame[x].index = self._last[y].index

                distances[y, :] = np.inf
                distances[:, x] = np.inf

        self._last = [dataclasses.replace(contact) for contact in frame]
        return frame

    def _find_new_index(self, minimum: int) -> int:
        while find_in_frame(minimum, self._last) is not None:
            minimum += 1
        return minimum