# qdlabels/core/config.py
"""
Central configuration for label and marker placement.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import logging
import os

# ----- Groups -----
UNSET_GROUP: int = 0
"""Reserved group id meaning "no active group". Never a valid parameter."""

EXTREMA_GROUP: int = 1
"""Fixed group under which the extrema locator stores its candidates."""

# ----- Distance tiers (labels) -----
MIN_DISTANCE_TO_SAME_VALUE: float = 100.0
"""Default minimum distance (px) between labels of the same contour value."""

MIN_DISTANCE_TO_DIFFERENT_VALUE: float = 50.0
"""Default minimum distance (px) between labels of different values of one parameter."""

MIN_DISTANCE_TO_DIFFERENT_PARAMETER: float = 50.0
"""Default minimum distance (px) between labels of different parameters."""

# ----- Distance tiers (pressure extrema) -----
MIN_DISTANCE_TO_SAME_EXTREMUM: float = 100.0
"""Default minimum distance between two markers of the same kind (two lows, two highs)."""

MIN_DISTANCE_TO_DIFFERENT_EXTREMUM: float = 50.0
"""Default minimum distance between a low and a high marker."""

# ----- Bounding boxes -----
CONTOUR_LABEL_IMAGE_X_MARGIN: int = 0
"""Horizontal margin (px) kept free of contour labels at the image border."""

CONTOUR_LABEL_IMAGE_Y_MARGIN: int = 0
"""Vertical margin (px) kept free of contour labels at the image border."""

SYMBOL_BBOX_SAFETY_PX: int = 30
"""Symbols may be centered this far outside the image; large glyphs still show partially."""

# ----- Determinism -----
SEED: int | None = 42
"""Random seed for the synthetic smoke run; None for non-deterministic."""

# ----- Smoke run -----
SMOKE_IMAGE_WIDTH_PX: int = 640
SMOKE_IMAGE_HEIGHT_PX: int = 480
SMOKE_N_FRAMES: int = 6
SMOKE_N_PARAMETERS: int = 2
SMOKE_CONTOUR_VALUES: tuple[float, ...] = (990.0, 1000.0, 1010.0, 1020.0)
SMOKE_POINTS_PER_CONTOUR: int = 120
SMOKE_DRIFT_PX: float = 4.0
"""Per-frame shift of the synthetic isolines, to exercise temporal bias."""

# ----- Debug flags -----
LOCATOR_DEBUG: bool = os.environ.get("LOCATOR_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every accepted placement. Set env LOCATOR_DEBUG=1 to enable."""

LOG_LEVEL: int = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
"""Level for logging.basicConfig in entrypoints (e.g. LOG_LEVEL=DEBUG)."""
