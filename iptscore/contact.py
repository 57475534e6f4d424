"""A single touch contact found in a capacitive heatmap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

Vector2 = Tuple[float, float]


@dataclass
class Contact:
    """A touch contact and the state that tracking and validation attach to it.

    ``mean`` is the centre of the contact and ``size`` the diameters of its
    major and minor axes. Both lie in [0, 1] when ``normalized`` is set.
    ``orientation`` lies in [0, 1) when normalized, otherwise in [0, pi).
    """

    mean: Vector2 = (0.0, 0.0)
    size: Vector2 = (0.0, 0.0)
    orientation: float = 0.0
    normalized: bool = False
    index: Optional[int] = None
    valid: Optional[bool] = None
    stable: Optional[bool] = None


def find_in_frame(index: int, frame: Iterable[Contact]) -> Optional[Contact]:
    """Return the first contact in ``frame`` with the given index, or None."""
    return next((contact for contact in frame if contact.index == index), None)