"""OpenCV implementation of the pixel primitives."""

from __future__ import annotations

import cv2
import numpy as np

from .errors import ResourceError
from .interfaces import IImageProcessor


class OpenCVImageProcessor(IImageProcessor):
    """Grayscale, threshold and count using :mod:`cv2`."""

    _GRAY_CODES = {3: cv2.COLOR_BGR2GRAY, 4: cv2.COLOR_BGRA2GRAY}

    def to_gray(self, raster: np.ndarray) -> np.ndarray:
        if raster is None or raster.size == 0:
            raise ResourceError("Frame buffer is empty; no image could be read.")
        if raster.ndim == 2:
            return raster.copy()
        channels = raster.shape[2] if raster.ndim == 3 else 0
        code = self._GRAY_CODES.get(channels)
        if code is None:
            raise ResourceError(f"Unsupported frame layout with shape {raster.shape}.")
        return cv2.cvtColor(raster, code)

    def binarize(self, gray: np.ndarray, threshold: int) -> np.ndarray:
        # inRange is inclusive on both bounds
        return cv2.inRange(gray, int(threshold), 255)

    def count_foreground(self, mask: np.ndarray) -> int:
        return int(cv2.countNonZero(mask))

    _COLOR_CODES = {3: cv2.COLOR_GRAY2BGR, 4: cv2.COLOR_GRAY2BGRA}

    def match_layout(self, mask: np.ndarray, like: np.ndarray) -> np.ndarray:
        if like.ndim == 2:
            return mask
        code = self._COLOR_CODES.get(like.shape[2])
        if code is None:
            raise ResourceError(f"Unsupported frame layout with shape {like.shape}.")
        return cv2.cvtColor(mask, code)
