"""Per-frame foreground ratio computation."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .image_processor import OpenCVImageProcessor
from .interfaces import IFrameAnalyzer, IImageProcessor


class FrameAnalyzer(IFrameAnalyzer):
    """Compute the share of bright pixels in a frame.

    Pixel work is delegated to an :class:`IImageProcessor` so that any raster
    backend can be substituted. ``trim`` is added to the foreground count
    before dividing and the result is deliberately left unclamped: a negative
    trim can produce a ratio below 0 and a large one a ratio above 1.
    """

    def __init__(self, processor: Optional[IImageProcessor] = None) -> None:
        self._processor = processor if processor is not None else OpenCVImageProcessor()

    def binarize(self, raster: np.ndarray, threshold: int) -> np.ndarray:
        gray = self._processor.to_gray(raster)
        return self._processor.binarize(gray, threshold)

    def binarize_for_display(self, raster: np.ndarray, threshold: int) -> np.ndarray:
        return self._processor.match_layout(self.binarize(raster, threshold), raster)

    def ratio_of(self, raster: np.ndarray, threshold: int, trim: int) -> float:
        total = int(raster.shape[0]) * int(raster.shape[1]) if raster.ndim >= 2 else 0
        if total == 0:
            return 0.0
        foreground = self._processor.count_foreground(self.binarize(raster, threshold))
        return (foreground + trim) / total
