"""Constraint propagation: tiered removal with strict "<", and empty bucket purge."""

from __future__ import annotations

from qdlabels.core.propagate import remove_candidates, remove_empties
from qdlabels.core.tiers import LabelTiers


def test_remove_candidates_by_tier() -> None:
    candidates = {
        1: {1.0: [(0, 0), (0, 10), (0, 9)], 2.0: [(0, 3)]},
        2: {1.0: [(0, 4), (0, 6)]},
    }
    tiers = LabelTiers(same=10.0, different_subkey=3.0, different_group=5.0)
    removed = remove_candidates(candidates, (0, 0), 1, 1.0, tiers)
    assert removed == 3
    assert candidates == {
        1: {1.0: [(0, 10)], 2.0: [(0, 3)]},
        2: {1.0: [(0, 6)]},
    }


def test_remove_candidates_keeps_lists_not_touched() -> None:
    kept = [(100, 100)]
    candidates = {1: {1.0: kept}}
    removed = remove_candidates(candidates, (0, 0), 1, 1.0, LabelTiers(same=10.0))
    assert removed == 0
    assert candidates[1][1.0] is kept


def test_remove_empties() -> None:
    candidates = {1: {1.0: [], 2.0: [(1, 1)]}, 2: {3.0: []}}
    remove_empties(candidates)
    assert candidates == {1: {2.0: [(1, 1)]}}
