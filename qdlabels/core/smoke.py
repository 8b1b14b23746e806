# qdlabels/core/smoke.py
"""
Single entrypoint to verify placement end to end on synthetic data: a few
drifting isolines per parameter plus scattered pressure extrema, over several
frames. Checks containment and separation of every frame's choices.
Does not run on import.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from qdlabels.core.config import (
    LOG_LEVEL,
    SEED,
    SMOKE_CONTOUR_VALUES,
    SMOKE_DRIFT_PX,
    SMOKE_IMAGE_HEIGHT_PX,
    SMOKE_IMAGE_WIDTH_PX,
    SMOKE_N_FRAMES,
    SMOKE_N_PARAMETERS,
    SMOKE_POINTS_PER_CONTOUR,
)
from qdlabels.core.frames import LocatorSet
from qdlabels.core.types import ExtremumKind
from qdlabels.core.validate import points_outside, separation_violations

logger = logging.getLogger(__name__)


@dataclass
class FrameSummary:
    frame: int
    label_candidates: int
    labels_placed: int
    markers_placed: int
    violations: int


def synthetic_isoline(
    value_index: int,
    param_index: int,
    frame: int,
    width: int,
    height: int,
    n_points: int,
) -> list[tuple[int, int]]:
    """Pixel points along a wavy horizontal line, shifted a little each frame."""
    x = np.linspace(-20, width + 20, n_points)
    base = height * (value_index + 1) / (len(SMOKE_CONTOUR_VALUES) + 1)
    phase = 0.7 * param_index + 0.05 * frame
    y = base + 25.0 * np.sin(x / 60.0 + phase) + SMOKE_DRIFT_PX * frame
    return [(int(round(px)), int(round(py))) for px, py in zip(x, y)]


def run_frames(
    locators: LocatorSet,
    n_frames: int = SMOKE_N_FRAMES,
    width: int = SMOKE_IMAGE_WIDTH_PX,
    height: int = SMOKE_IMAGE_HEIGHT_PX,
    seed: int | None = SEED,
) -> list[FrameSummary]:
    """Drive the locators through n_frames synthetic frames. Returns one summary per frame."""
    rng = np.random.default_rng(seed)
    summaries: list[FrameSummary] = []
    for frame in range(n_frames):
        n_candidates = 0
        for p in range(SMOKE_N_PARAMETERS):
            locators.labels.parameter(p + 1)
            for k, value in enumerate(SMOKE_CONTOUR_VALUES):
                for x, y in synthetic_isoline(k, p, frame, width, height, SMOKE_POINTS_PER_CONTOUR):
                    locators.labels.add(value, x, y)
                    n_candidates += 1

        for x, y in rng.uniform((0, 0), (width, height), size=(20, 2)):
            kind = ExtremumKind.MINIMUM if rng.random() < 0.5 else ExtremumKind.MAXIMUM
            locators.pressure.add(kind, float(x), float(y))

        labels = locators.labels.choose_labels()
        markers = locators.pressure.choose_coordinates()

        outside = points_outside(labels, locators.labels.bbox)
        bad = separation_violations(labels, locators.labels.tiers)
        bad += separation_violations({0: dict(markers)}, locators.pressure.tiers)
        if outside:
            logger.error("Frame %d: %d labels outside bounding box", frame, len(outside))

        summary = FrameSummary(
            frame=frame,
            label_candidates=n_candidates,
            labels_placed=sum(len(v) for s in labels.values() for v in s.values()),
            markers_placed=sum(len(v) for v in markers.values()),
            violations=len(bad) + len(outside),
        )
        logger.info(
            "Frame %d: %d label candidates -> %d labels, %d pressure markers, %d violations",
            summary.frame, summary.label_candidates, summary.labels_placed,
            summary.markers_placed, summary.violations,
        )
        summaries.append(summary)
        locators.next_time()
    return summaries


def main() -> None:
    """Run the synthetic animation with default settings."""
    logging.basicConfig(level=LOG_LEVEL)
    locators = LocatorSet()
    locators.configure_for_image(SMOKE_IMAGE_WIDTH_PX, SMOKE_IMAGE_HEIGHT_PX, 10, 10)
    summaries = run_frames(locators)
    failed = [s.frame for s in summaries if s.violations]
    if failed:
        raise RuntimeError(f"Placement violations in frames {failed}")


if __name__ == "__main__":
    main()
