# qdlabels/core/extrema.py
"""
ExtremaLocator: the same placement engine for high/low pressure markers.
Subkeys are ExtremumKind values and only two distance tiers exist
(same kind, or a low against a high). There is no parameter to select.
"""

from __future__ import annotations

from qdlabels.core.config import EXTREMA_GROUP
from qdlabels.core.error_codes import FIXED_GROUP, UNSUPPORTED_TIER, InvalidConfiguration, InvalidState
from qdlabels.core.locator import LabelLocator
from qdlabels.core.tiers import ExtremaTiers
from qdlabels.core.types import ExtremumKind, Point


class ExtremaLocator(LabelLocator):
    """Chooses which detected pressure minima and maxima get a marker."""

    def __init__(self, tiers: ExtremaTiers | None = None, name: str = "pressure") -> None:
        super().__init__(tiers if tiers is not None else ExtremaTiers(), name=name)
        self._index.set_group(EXTREMA_GROUP)

    def min_distance_to_same(self, distance: float) -> None:
        self._set_tier(same=distance)

    def min_distance_to_different(self, distance: float) -> None:
        self._set_tier(different=distance)

    def min_distance(self, distance: float) -> None:
        self._set_tier(same=distance, different=distance)

    def min_distance_to_different_value(self, distance: float) -> None:
        raise InvalidConfiguration(UNSUPPORTED_TIER, "use min_distance_to_different")

    def min_distance_to_different_parameter(self, distance: float) -> None:
        raise InvalidConfiguration(UNSUPPORTED_TIER, "use min_distance_to_different")

    def parameter(self, group: int) -> None:
        raise InvalidState(FIXED_GROUP, f"group {group}")

    def clear(self) -> None:
        super().clear()
        self._index.set_group(EXTREMA_GROUP)

    def add(self, kind: ExtremumKind, x: float, y: float) -> None:  # type: ignore[override]
        super().add(ExtremumKind(kind), x, y)

    def choose_coordinates(self) -> dict[ExtremumKind, list[Point]]:
        """Accepted marker positions by kind. Valid until next_time() or clear()."""
        return self.choose_labels().get(EXTREMA_GROUP, {})
