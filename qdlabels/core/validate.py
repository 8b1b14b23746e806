# qdlabels/core/validate.py
"""
Checks for a Choice table: containment in the bounding box and pairwise separation.
Return violations instead of raising, so callers decide what is fatal.
"""

from __future__ import annotations

from typing import Hashable, NamedTuple

import numpy as np

from qdlabels.core.selector import as_xy
from qdlabels.core.tiers import TierPolicy
from qdlabels.core.types import BoundingBox, CandidateTable, Point


class Violation(NamedTuple):
    """Two accepted points closer than the tier distance between them."""
    first: tuple[int, Hashable, Point]
    second: tuple[int, Hashable, Point]
    distance: float
    required: float


def _flatten(table: CandidateTable) -> list[tuple[int, Hashable, Point]]:
    return [
        (group, subkey, point)
        for group, subkeys in table.items()
        for subkey, points in subkeys.items()
        for point in points
    ]


def points_outside(table: CandidateTable, bbox: BoundingBox | None) -> list[tuple[int, Hashable, Point]]:
    """Entries lying outside bbox; always empty when there is no bbox."""
    if bbox is None:
        return []
    return [entry for entry in _flatten(table) if not bbox.contains(*entry[2])]


def separation_violations(table: CandidateTable, tiers: TierPolicy) -> list[Violation]:
    """All pairs closer than their tier distance. Equal distance is compliant."""
    entries = _flatten(table)
    if len(entries) < 2:
        return []
    xy = as_xy([point for _, _, point in entries])
    dist = np.hypot(xy[:, 0][:, None] - xy[:, 0][None, :], xy[:, 1][:, None] - xy[:, 1][None, :])

    # tier distance per (group, subkey) pair, expanded to an (N, N) matrix
    keys = list(dict.fromkeys((g, s) for g, s, _ in entries))
    key_index = {key: i for i, key in enumerate(keys)}
    tier = np.array([[tiers.threshold(g1, s1, g2, s2) for g2, s2 in keys] for g1, s1 in keys])
    idx = np.array([key_index[(g, s)] for g, s, _ in entries])
    required = tier[idx[:, None], idx[None, :]]

    close = np.triu(dist < required, k=1)
    return [
        Violation(entries[i], entries[j], float(dist[i, j]), float(required[i, j]))
        for i, j in np.argwhere(close)
    ]
