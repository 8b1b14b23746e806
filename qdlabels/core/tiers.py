# qdlabels/core/tiers.py
"""
Distance tiers: which minimum separation applies between two (group, subkey) pairs.
The placement algorithm only talks to the threshold() method, so one engine
serves both contour labels (three tiers) and pressure extrema (two tiers).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Protocol

from qdlabels.core.config import (
    MIN_DISTANCE_TO_DIFFERENT_EXTREMUM,
    MIN_DISTANCE_TO_DIFFERENT_PARAMETER,
    MIN_DISTANCE_TO_DIFFERENT_VALUE,
    MIN_DISTANCE_TO_SAME_EXTREMUM,
    MIN_DISTANCE_TO_SAME_VALUE,
)
from qdlabels.core.error_codes import INVALID_DISTANCE, InvalidConfiguration


class TierPolicy(Protocol):
    def threshold(
        self, group: int, subkey: Hashable, other_group: int, other_subkey: Hashable
    ) -> float:
        ...


def check_distance(value: float) -> float:
    """Return value as float; raise InvalidConfiguration if negative or NaN."""
    value = float(value)
    if not value >= 0.0:
        raise InvalidConfiguration(INVALID_DISTANCE, f"got {value}")
    return value


@dataclass(frozen=True)
class LabelTiers:
    """Three tiers: same value, same parameter with different value, different parameter."""
    same: float = MIN_DISTANCE_TO_SAME_VALUE
    different_subkey: float = MIN_DISTANCE_TO_DIFFERENT_VALUE
    different_group: float = MIN_DISTANCE_TO_DIFFERENT_PARAMETER

    def threshold(
        self, group: int, subkey: Hashable, other_group: int, other_subkey: Hashable
    ) -> float:
        if group != other_group:
            return self.different_group
        if subkey != other_subkey:
            return self.different_subkey
        return self.same


@dataclass(frozen=True)
class ExtremaTiers:
    """Two tiers: same kind of extremum, or a low against a high. Groups are ignored."""
    same: float = MIN_DISTANCE_TO_SAME_EXTREMUM
    different: float = MIN_DISTANCE_TO_DIFFERENT_EXTREMUM

    def threshold(
        self, group: int, subkey: Hashable, other_group: int, other_subkey: Hashable
    ) -> float:
        return self.same if subkey == other_subkey else self.different
