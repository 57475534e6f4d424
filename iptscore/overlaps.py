"""Merging of overlapping cluster bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple


@dataclass(frozen=True)
class Box:
    """An axis aligned box with inclusive integer corners."""

    lower: Tuple[int, int]
    upper: Tuple[int, int]

    def is_empty(self) -> bool:
        """Whether the box contains no cells."""
        return any(lo > up for lo, up in zip(self.lower, self.upper))

    def intersection(self, other: "Box") -> "Box":
        """Return the box shared by both boxes (possibly empty)."""
        return Box(
            tuple(max(a, b) for a, b in zip(self.lower, other.lower)),
            tuple(min(a, b) for a, b in zip(self.upper, other.upper)),
        )

    def merged(self, other: "Box") -> "Box":
        """Return the smallest box containing both boxes."""
        return Box(
            tuple(min(a, b) for a, b in zip(self.lower, other.lower)),
            tuple(max(a, b) for a, b in zip(self.upper, other.upper)),
        )


def area(box: Box) -> int:
    """Return the number of cells in a box, counting both corners."""
    result = 1
    for lo, up in zip(box.lower, box.upper):
        result *= up - lo + 1
    return result


def overlap(a: Box, b: Box) -> float:
    """Return the intersection over union of two boxes, in the range [0, 1]."""
    if a == b:
        return 1.0

    shared = a.intersection(b)
    if shared.is_empty():
        return 0.0

    area_i = area(shared)
    iou = area_i / (area(a) + area(b) - area_i)

    if not 0.0 <= iou <= 1.0:
        raise RuntimeError("Calculated invalid cluster overlap!")
    return iou


def search(clusters: Sequence[Box]) -> List[Tuple[int, int]]:
    """Return the index pairs ``(i, j)``, ``i < j``, of boxes overlapping by at least half."""
    return [
        (i, j)
        for i, a in enumerate(clusters)
        for j in range(i + 1, len(clusters))
        if overlap(a, clusters[j]) >= 0.5
    ]


def merge(clusters: Sequence[Box], iterations: int) -> List[Box]:
    """Repeatedly merge overlapping boxes, at most ``iterations`` times.

    Returns the resulting list of boxes.
    """
    if iterations == 0:
        raise ValueError("Failed to merge overlapping clusters!")

    current = list(clusters)
    for _ in range(iterations):
        pairs = search(current)
        if not pairs:
            break

        result: List[Box] = []
        for i, cluster in enumerate(current):
            dropped = False
            for a, b in pairs:
                # A box that appears second in a pair was merged into an earlier one.
                if b == i:
                    dropped = True
                    break
                if a == i:
                    cluster = cluster.merged(current[b])
            if not dropped:
                result.append(cluster)
        current = result

    return current