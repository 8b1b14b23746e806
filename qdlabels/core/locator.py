# qdlabels/core/locator.py
"""
LabelLocator: chooses a conflict-free, frame-to-frame stable subset of the label
positions proposed while tracing contours.

Per frame: parameter() -> add()* -> choose_labels() -> render -> next_time().
Settings (bounding box, minimum distances) must be made while the locator is
empty; after that they are locked until clear().
"""

from __future__ import annotations

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Hashable, Mapping

from qdlabels.core.candidates import CandidateIndex, count_points
from qdlabels.core.config import LOCATOR_DEBUG
from qdlabels.core.error_codes import UNSUPPORTED_TIER, InvalidConfiguration
from qdlabels.core.propagate import remove_candidates, remove_empties
from qdlabels.core.selector import choose_one
from qdlabels.core.tiers import LabelTiers, TierPolicy, check_distance
from qdlabels.core.types import BoundingBox, Choice, Point

logger = logging.getLogger(__name__)


class LabelLocator:
    """
    Placement engine for one labeling concern (contour labels, contour symbols, ...).
    Construct one per concern and reuse it across all frames of an animation.
    """

    def __init__(self, tiers: TierPolicy | None = None, name: str = "labels") -> None:
        self.name = name
        self._index = CandidateIndex(tiers if tiers is not None else LabelTiers())

    # ----- Configuration -----

    def bounding_box(self, x1: float, y1: float, x2: float, y2: float) -> None:
        """
        Clip all future candidates to the half-open box [x1, x2) x [y1, y2).
        Usually the image shrunk by a margin so label text is not cut at the border.
        """
        self._index.set_bounding_box(x1, y1, x2, y2)

    def _set_tier(self, **changes: float) -> None:
        tiers = self._index.tiers
        checked = {key: check_distance(value) for key, value in changes.items()}
        try:
            updated = replace(tiers, **checked)
        except TypeError as exc:
            raise InvalidConfiguration(UNSUPPORTED_TIER, ", ".join(sorted(checked))) from exc
        self._index.set_tiers(updated)

    def min_distance_to_same_value(self, distance: float) -> None:
        self._set_tier(same=distance)

    def min_distance_to_different_value(self, distance: float) -> None:
        self._set_tier(different_subkey=distance)

    def min_distance_to_different_parameter(self, distance: float) -> None:
        self._set_tier(different_group=distance)

    def min_distance(self, distance: float) -> None:
        """Use one distance for all three tiers (e.g. contour symbols)."""
        self._set_tier(same=distance, different_subkey=distance, different_group=distance)

    # ----- Inspection -----

    @property
    def bbox(self) -> BoundingBox | None:
        return self._index.bbox

    @property
    def tiers(self) -> TierPolicy:
        return self._index.tiers

    @property
    def active_group(self) -> int:
        return self._index.active_group

    @property
    def previous(self) -> Mapping[int, Mapping[Hashable, tuple[Point, ...]]]:
        """Choices of the previous frame as a read-only snapshot (points as tuples)."""
        return MappingProxyType({
            group: MappingProxyType({subkey: tuple(points) for subkey, points in subkeys.items()})
            for group, subkeys in self._index.previous.items()
        })

    def candidate_count(self) -> int:
        """Number of points in the current table (candidates, or choices once resolved)."""
        return count_points(self._index.current)

    def empty(self) -> bool:
        return self._index.empty()

    # ----- Lifecycle -----

    def clear(self) -> None:
        """Forget all candidates and history. Settings stay but become changeable again."""
        self._index.clear()
        logger.debug("%s: cleared", self.name)

    def parameter(self, group: int) -> None:
        """Set the group (parameter id) for following add() calls. 0 is reserved."""
        self._index.set_group(group)

    def add(self, subkey: Hashable, x: float, y: float) -> None:
        """Propose (x, y) for the active group and subkey (contour value)."""
        self._index.add(subkey, x, y)

    def choose_labels(self) -> Choice:
        """
        Resolve the current candidates into accepted positions.

        Groups are visited in ascending id order and subkeys in ascending order
        within a group; the first group to claim contested space keeps it.
        Every round accepts at least one candidate and removes it from the
        working table, so the loop ends after at most N rounds.

        The returned table stays owned by the locator and is only valid until
        next_time() or clear().
        """
        candidates = self._index.take()
        n_in = count_points(candidates)
        choices: Choice = {}
        tiers = self._index.tiers
        bbox = self._index.bbox

        while candidates:
            group = min(candidates)
            subkeys = candidates[group]
            for subkey in sorted(subkeys):
                points = subkeys[subkey]
                if not points:
                    continue
                i = choose_one(points, self._index.previous_points(group, subkey), bbox)
                chosen = points[i]
                subkeys[subkey] = points[:i] + points[i + 1:]
                choices.setdefault(group, {}).setdefault(subkey, []).append(chosen)
                removed = remove_candidates(candidates, chosen, group, subkey, tiers)
                if LOCATOR_DEBUG:
                    logger.debug(
                        "%s: accepted %s for group %s subkey %s, removed %d",
                        self.name, chosen, group, subkey, removed,
                    )
            remove_empties(candidates)

        self._index.current = choices
        logger.debug("%s: %d candidates -> %d choices", self.name, n_in, count_points(choices))
        return choices

    def next_time(self) -> None:
        """Keep this frame's choices as history and start collecting the next frame."""
        self._index.rotate()
        logger.debug("%s: next time step", self.name)
