"""
Smoke run: synthetic drifting isolines and extrema over several frames;
every frame must place labels without containment or separation violations.
"""

from __future__ import annotations

from qdlabels.core.frames import LocatorSet
from qdlabels.core.smoke import main, run_frames, synthetic_isoline


def test_synthetic_isoline_shifts_between_frames() -> None:
    a = synthetic_isoline(0, 0, 0, 100, 100, 10)
    b = synthetic_isoline(0, 0, 1, 100, 100, 10)
    assert len(a) == len(b) == 10
    assert a != b


def test_run_frames_without_violations() -> None:
    locators = LocatorSet()
    locators.configure_for_image(320, 240, 8, 8)
    summaries = run_frames(locators, n_frames=4, width=320, height=240, seed=3)
    assert [s.frame for s in summaries] == [0, 1, 2, 3]
    assert all(s.violations == 0 for s in summaries)
    assert all(0 < s.labels_placed < s.label_candidates for s in summaries)


def test_main_runs() -> None:
    main()
