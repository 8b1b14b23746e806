# qdlabels/core/frames.py
"""
LocatorSet: the locators one render loop owns, passed explicitly to the code
that collects and draws labels instead of living in global state.

    locators = LocatorSet()
    locators.configure_for_image(width, height, margin_x, margin_y)
    for frame in frames:
        ... locators.labels.parameter(id); locators.labels.add(value, x, y) ...
        choices = locators.labels.choose_labels()
        ... draw ...
        locators.next_time()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from qdlabels.core.config import (
    CONTOUR_LABEL_IMAGE_X_MARGIN,
    CONTOUR_LABEL_IMAGE_Y_MARGIN,
    SYMBOL_BBOX_SAFETY_PX,
)
from qdlabels.core.extrema import ExtremaLocator
from qdlabels.core.locator import LabelLocator
from qdlabels.core.types import BoundingBox

logger = logging.getLogger(__name__)


@dataclass
class LocatorSet:
    """Contour labels, contour font symbols, contour image symbols and pressure markers."""
    labels: LabelLocator = field(default_factory=lambda: LabelLocator(name="labels"))
    symbols: LabelLocator = field(default_factory=lambda: LabelLocator(name="symbols"))
    images: LabelLocator = field(default_factory=lambda: LabelLocator(name="images"))
    pressure: ExtremaLocator = field(default_factory=ExtremaLocator)

    def contour_locators(self) -> tuple[LabelLocator, LabelLocator, LabelLocator]:
        return (self.labels, self.symbols, self.images)

    def all_locators(self) -> tuple[LabelLocator, ...]:
        return (*self.contour_locators(), self.pressure)

    def configure_for_image(
        self,
        width: int,
        height: int,
        label_margin_x: int = CONTOUR_LABEL_IMAGE_X_MARGIN,
        label_margin_y: int = CONTOUR_LABEL_IMAGE_Y_MARGIN,
        symbol_safety: int = SYMBOL_BBOX_SAFETY_PX,
    ) -> None:
        """
        Set bounding boxes from the image size. Labels keep the margins free;
        symbols and images may sit up to symbol_safety px outside the image.
        The pressure locator is not clipped. Call once, before the first frame.
        """
        self.labels.bounding_box(label_margin_x, label_margin_y, width - label_margin_x, height - label_margin_y)
        outer = BoundingBox(0, 0, width, height).grown(symbol_safety)
        for locator in (self.symbols, self.images):
            locator.bounding_box(outer.x1, outer.y1, outer.x2, outer.y2)
        logger.debug("Configured locators for %dx%d image", width, height)

    def clear(self) -> None:
        for locator in self.all_locators():
            locator.clear()

    def clear_contours(self) -> None:
        """Forget contour label/symbol memory; pressure markers keep their history."""
        for locator in self.contour_locators():
            locator.clear()

    def next_time(self) -> None:
        for locator in self.all_locators():
            locator.next_time()

    def empty(self) -> bool:
        return all(locator.empty() for locator in self.all_locators())
