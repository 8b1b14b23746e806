"""
ExtremaLocator: two-valued subkey, two distance tiers, no parameter selection.
"""

from __future__ import annotations

import pytest

from qdlabels.core import error_codes
from qdlabels.core.config import EXTREMA_GROUP
from qdlabels.core.error_codes import InvalidConfiguration, InvalidState
from qdlabels.core.extrema import ExtremaLocator
from qdlabels.core.locator import LabelLocator
from qdlabels.core.tiers import ExtremaTiers
from qdlabels.core.types import ExtremumKind

LOW = ExtremumKind.MINIMUM
HIGH = ExtremumKind.MAXIMUM


def _locator() -> ExtremaLocator:
    loc = ExtremaLocator()
    loc.min_distance_to_same(100.0)
    loc.min_distance_to_different(10.0)
    return loc


def test_two_tier_removal() -> None:
    loc = _locator()
    loc.add(LOW, 0.0, 0.0)
    loc.add(LOW, 30.0, 0.0)
    loc.add(HIGH, 20.0, 0.0)
    assert loc.choose_coordinates() == {LOW: [(0.0, 0.0)], HIGH: [(20.0, 0.0)]}


def test_close_high_removed_by_low() -> None:
    loc = _locator()
    loc.add(HIGH, 5.0, 0.0)
    loc.add(LOW, 0.0, 0.0)
    assert loc.choose_coordinates() == {LOW: [(0.0, 0.0)]}


def test_markers_follow_previous_frame() -> None:
    loc = _locator()
    loc.add(LOW, 0.0, 0.0)
    loc.choose_coordinates()
    loc.next_time()
    loc.add(LOW, 50.0, 0.0)
    loc.add(LOW, 2.0, 0.0)
    assert loc.choose_coordinates() == {LOW: [(2.0, 0.0)]}


def test_no_parameter_needed_after_clear() -> None:
    loc = _locator()
    loc.add(HIGH, 1.0, 1.0)
    loc.clear()
    assert loc.empty()
    assert loc.active_group == EXTREMA_GROUP
    loc.add(HIGH, 1.0, 1.0)
    assert loc.choose_coordinates() == {HIGH: [(1.0, 1.0)]}


def test_integer_kind_accepted() -> None:
    loc = _locator()
    loc.add(1, 3.0, 4.0)
    assert loc.choose_coordinates() == {HIGH: [(3.0, 4.0)]}


def test_settings_locked_after_add() -> None:
    loc = _locator()
    loc.add(LOW, 0.0, 0.0)
    with pytest.raises(InvalidConfiguration):
        loc.min_distance_to_same(1.0)
    with pytest.raises(InvalidConfiguration):
        loc.min_distance_to_different(1.0)
    assert loc.tiers == ExtremaTiers(same=100.0, different=10.0)


def test_empty_choice() -> None:
    assert ExtremaLocator().choose_coordinates() == {}


def test_label_tier_setters_rejected() -> None:
    loc = ExtremaLocator()
    with pytest.raises(InvalidConfiguration) as exc:
        loc.min_distance_to_different_value(5.0)
    assert exc.value.code == error_codes.UNSUPPORTED_TIER
    with pytest.raises(InvalidConfiguration):
        loc.min_distance_to_different_parameter(5.0)
    assert loc.tiers == ExtremaTiers()


def test_parameter_cannot_move_markers_out_of_group() -> None:
    loc = _locator()
    with pytest.raises(InvalidState) as exc:
        loc.parameter(5)
    assert exc.value.code == error_codes.FIXED_GROUP
    loc.add(LOW, 1.0, 1.0)
    assert loc.choose_coordinates() == {LOW: [(1.0, 1.0)]}


def test_unknown_tier_on_label_locator_is_configuration_error() -> None:
    loc = LabelLocator(tiers=ExtremaTiers())
    with pytest.raises(InvalidConfiguration) as exc:
        loc.min_distance_to_different_parameter(5.0)
    assert exc.value.code == error_codes.UNSUPPORTED_TIER
