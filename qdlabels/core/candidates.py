# qdlabels/core/candidates.py
"""
Candidate index: collects the per-frame placement candidates of one locator,
filtered by an optional bounding box, plus the previous frame's choices.
Settings (bbox, tiers) are locked once any coordinate is stored.
"""

from __future__ import annotations

import logging
from typing import Hashable

from qdlabels.core.config import UNSET_GROUP
from qdlabels.core.error_codes import (
    CONFIG_LOCKED,
    EMPTY_BOUNDING_BOX,
    NO_ACTIVE_GROUP,
    UNSET_GROUP as UNSET_GROUP_ERROR,
    InvalidConfiguration,
    InvalidState,
)
from qdlabels.core.tiers import TierPolicy
from qdlabels.core.types import BoundingBox, CandidateTable, Choice

logger = logging.getLogger(__name__)


def count_points(table: CandidateTable) -> int:
    """Total number of points in a group -> subkey -> points table."""
    return sum(len(points) for subkeys in table.values() for points in subkeys.values())


class CandidateIndex:
    """Current-frame candidates and previous-frame choices for one locator."""

    def __init__(self, tiers: TierPolicy) -> None:
        self.tiers: TierPolicy = tiers
        self.bbox: BoundingBox | None = None
        self.active_group: int = UNSET_GROUP
        self.current: CandidateTable = {}
        self.previous: Choice = {}
        self.rejected_outside = 0

    def empty(self) -> bool:
        """True if there are neither current candidates nor previous choices."""
        return not self.current and not self.previous

    def clear(self) -> None:
        self.active_group = UNSET_GROUP
        self.current = {}
        self.previous = {}
        self.rejected_outside = 0

    def _require_unlocked(self, what: str) -> None:
        if not self.empty():
            raise InvalidConfiguration(CONFIG_LOCKED, f"cannot change {what}")

    def set_bounding_box(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._require_unlocked("bounding box")
        bbox = BoundingBox(x1, y1, x2, y2)
        if bbox.is_empty:
            raise InvalidConfiguration(EMPTY_BOUNDING_BOX, f"{x1}, {y1}, {x2}, {y2}")
        self.bbox = bbox

    def set_tiers(self, tiers: TierPolicy) -> None:
        self._require_unlocked("minimum distances")
        self.tiers = tiers

    def set_group(self, group: int) -> None:
        if group == UNSET_GROUP:
            raise InvalidState(UNSET_GROUP_ERROR)
        self.active_group = group

    def add(self, subkey: Hashable, x: float, y: float) -> bool:
        """
        Store (x, y) under the active group and subkey.
        Points outside the bounding box are dropped silently; returns False for those.
        """
        if self.bbox is not None and not self.bbox.contains(x, y):
            self.rejected_outside += 1
            return False
        if self.active_group == UNSET_GROUP:
            raise InvalidState(NO_ACTIVE_GROUP)
        self.current.setdefault(self.active_group, {}).setdefault(subkey, []).append((x, y))
        return True

    def take(self) -> CandidateTable:
        """Hand the current candidates over to the caller, leaving the index drained."""
        table = self.current
        self.current = {}
        if self.rejected_outside:
            logger.debug("Dropped %d candidates outside %s", self.rejected_outside, self.bbox)
        self.rejected_outside = 0
        return table

    def previous_points(self, group: int, subkey: Hashable) -> list:
        return self.previous.get(group, {}).get(subkey, [])

    def rotate(self) -> None:
        """Current table (the frame's choices) becomes previous; current is emptied."""
        self.previous = self.current
        self.current = {}
        self.rejected_outside = 0
