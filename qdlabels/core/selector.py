# qdlabels/core/selector.py
"""
Greedy selector: pick the single best position from one (group, subkey) bucket.

Preference order:
1. closest to any point the same (group, subkey) occupied in the previous frame;
2. with no history but a bounding box, closest to a box edge;
3. otherwise the first candidate.
Ties always go to the earliest inserted candidate (np.argmin returns the first minimum).
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from qdlabels.core.error_codes import NO_CANDIDATE, InternalInvariantError
from qdlabels.core.types import BoundingBox, Point


def as_xy(points: Sequence[Point]) -> np.ndarray:
    """Points as a float (N, 2) array."""
    return np.asarray(points, dtype=float).reshape(-1, 2)


def min_distances(points: Sequence[Point], targets: Sequence[Point]) -> np.ndarray:
    """For each point, Euclidean distance to the nearest target. Shape (N,)."""
    xy = as_xy(points)
    txy = as_xy(targets)
    dx = xy[:, 0][:, None] - txy[:, 0][None, :]
    dy = xy[:, 1][:, None] - txy[:, 1][None, :]
    return np.hypot(dx, dy).min(axis=1)


def closest_to_previous(candidates: Sequence[Point], previous: Sequence[Point]) -> int:
    return int(np.argmin(min_distances(candidates, previous)))


def closest_to_border(candidates: Sequence[Point], bbox: BoundingBox) -> int:
    return int(np.argmin(bbox.border_distances(as_xy(candidates))))


def choose_one(
    candidates: Sequence[Point],
    previous: Sequence[Point],
    bbox: BoundingBox | None,
) -> int:
    """
    Return the index of the chosen candidate.
    Raises InternalInvariantError for an empty candidate list; callers skip
    empty buckets, so reaching it means the working table is corrupted.
    """
    if not candidates:
        raise InternalInvariantError(NO_CANDIDATE, "empty candidate list")
    if previous:
        return closest_to_previous(candidates, previous)
    if bbox is not None:
        return closest_to_border(candidates, bbox)
    return 0
