"""Distance tier strategies for labels and pressure extrema."""

from __future__ import annotations

import pytest

from qdlabels.core.config import (
    MIN_DISTANCE_TO_DIFFERENT_PARAMETER,
    MIN_DISTANCE_TO_DIFFERENT_VALUE,
    MIN_DISTANCE_TO_SAME_VALUE,
)
from qdlabels.core.error_codes import InvalidConfiguration
from qdlabels.core.tiers import ExtremaTiers, LabelTiers, check_distance
from qdlabels.core.types import ExtremumKind


def test_label_tiers() -> None:
    tiers = LabelTiers(same=1.0, different_subkey=2.0, different_group=3.0)
    assert tiers.threshold(1, 1.0, 1, 1.0) == 1.0
    assert tiers.threshold(1, 1.0, 1, 2.0) == 2.0
    assert tiers.threshold(1, 1.0, 2, 1.0) == 3.0
    assert tiers.threshold(1, 1.0, 2, 2.0) == 3.0


def test_label_tiers_defaults() -> None:
    tiers = LabelTiers()
    assert tiers.same == MIN_DISTANCE_TO_SAME_VALUE
    assert tiers.different_subkey == MIN_DISTANCE_TO_DIFFERENT_VALUE
    assert tiers.different_group == MIN_DISTANCE_TO_DIFFERENT_PARAMETER


def test_extrema_tiers_ignore_group() -> None:
    tiers = ExtremaTiers(same=7.0, different=3.0)
    lo, hi = ExtremumKind.MINIMUM, ExtremumKind.MAXIMUM
    assert tiers.threshold(1, lo, 1, lo) == 7.0
    assert tiers.threshold(1, lo, 1, hi) == 3.0
    assert tiers.threshold(1, hi, 2, hi) == 7.0


def test_check_distance() -> None:
    assert check_distance(0) == 0.0
    assert check_distance(12) == 12.0
    with pytest.raises(InvalidConfiguration):
        check_distance(-0.5)
    with pytest.raises(InvalidConfiguration):
        check_distance(float("nan"))
