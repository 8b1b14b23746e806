# qdlabels/core/propagate.py
"""
Constraint propagation: after a point is accepted, drop every remaining candidate
closer to it than the applicable tier distance (strict "<", equal distance survives).

Lists are never edited in place while being scanned. Each bucket is replaced by a
freshly built list (mark with a numpy mask, then sweep), and empty buckets are
purged in a separate pass once a group's round is over.
"""

from __future__ import annotations

from typing import Hashable

import numpy as np

from qdlabels.core.selector import as_xy
from qdlabels.core.tiers import TierPolicy
from qdlabels.core.types import CandidateTable, Point


def remove_candidates(
    candidates: CandidateTable,
    chosen: Point,
    group: int,
    subkey: Hashable,
    tiers: TierPolicy,
) -> int:
    """Remove candidates too close to chosen. Returns the number removed."""
    cx, cy = float(chosen[0]), float(chosen[1])
    removed = 0
    for other_group, subkeys in candidates.items():
        for other_subkey in list(subkeys):
            points = subkeys[other_subkey]
            if not points:
                continue
            limit = tiers.threshold(group, subkey, other_group, other_subkey)
            xy = as_xy(points)
            keep = np.hypot(xy[:, 0] - cx, xy[:, 1] - cy) >= limit
            n_keep = int(keep.sum())
            if n_keep == len(points):
                continue
            subkeys[other_subkey] = [p for p, k in zip(points, keep) if k]
            removed += len(points) - n_keep
    return removed


def remove_empties(candidates: CandidateTable) -> None:
    """Drop empty subkey lists, then groups left with no subkeys."""
    for group in list(candidates):
        subkeys = candidates[group]
        for subkey in [s for s, points in subkeys.items() if not points]:
            del subkeys[subkey]
        if not subkeys:
            del candidates[group]
