# qdlabels/core/types.py
"""
Dataclasses and aliases for candidates, choices and the bounding box.
A table maps group -> subkey -> ordered list of (x, y) points.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Hashable

import numpy as np


Point = tuple[float, float]

SubkeyTable = dict[Hashable, list[Point]]
"""Subkey -> ordered points (insertion order kept, duplicates allowed)."""

CandidateTable = dict[int, SubkeyTable]
"""Group -> subkey -> candidates proposed during the current frame."""

Choice = CandidateTable
"""Same shape as CandidateTable, holding only accepted, mutually compliant points."""


class ExtremumKind(IntEnum):
    """Subkey of the pressure extrema locator."""
    MINIMUM = 0
    MAXIMUM = 1


@dataclass(frozen=True)
class BoundingBox:
    """Half-open pixel box: x1 <= x < x2 and y1 <= y < y2."""
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def is_empty(self) -> bool:
        return self.x2 <= self.x1 or self.y2 <= self.y1

    def contains(self, x: float, y: float) -> bool:
        return self.x1 <= x < self.x2 and self.y1 <= y < self.y2

    def border_distances(self, xy: np.ndarray) -> np.ndarray:
        """
        Distance of each (N, 2) point to the nearest box edge line.
        Edges are measured at x1, x2, y1 and y2 as given (x2/y2 are exclusive bounds).
        """
        xdist = np.minimum(np.abs(xy[:, 0] - self.x1), np.abs(xy[:, 0] - self.x2))
        ydist = np.minimum(np.abs(xy[:, 1] - self.y1), np.abs(xy[:, 1] - self.y2))
        return np.minimum(xdist, ydist)

    def grown(self, margin: float) -> BoundingBox:
        """Return the box extended by margin on every side (negative shrinks)."""
        return BoundingBox(self.x1 - margin, self.y1 - margin, self.x2 + margin, self.y2 + margin)
