"""Core protocol interfaces used across the pipeline."""

from __future__ import annotations

from typing import Protocol

import numpy as np

from .models import ProcessResult, ViewerResult


class IImageProcessor(Protocol):
    """Pixel primitives over a raster buffer."""

    def to_gray(self, raster: np.ndarray) -> np.ndarray:
        """Return a single-channel grayscale copy of ``raster``."""

    def binarize(self, gray: np.ndarray, threshold: int) -> np.ndarray:
        """Return a mask where pixels >= threshold are 255 and the rest 0."""

    def count_foreground(self, mask: np.ndarray) -> int:
        """Return the number of non-zero pixels in ``mask``."""

    def match_layout(self, mask: np.ndarray, like: np.ndarray) -> np.ndarray:
        """Return ``mask`` expanded to the channel count of ``like``."""


class IFrameSource(Protocol):
    """A seekable, decodable video."""

    @property
    def duration(self) -> float:
        """Length of the video in seconds."""

    @property
    def width(self) -> int:
        """Frame width in pixels."""

    @property
    def height(self) -> int:
        """Frame height in pixels."""

    def seek(self, ts_sec: float) -> np.ndarray:
        """Block until the decoder reaches ``ts_sec`` and return that frame."""

    def release(self) -> None:
        """Free the decoder and any temporary resources."""


class IFrameAnalyzer(Protocol):
    """Turns one raster into a foreground ratio."""

    def ratio_of(self, raster: np.ndarray, threshold: int, trim: int) -> float:
        """Return ``(foreground + trim) / (width * height)``."""

    def binarize(self, raster: np.ndarray, threshold: int) -> np.ndarray:
        """Return the binarized mask of ``raster``."""

    def binarize_for_display(self, raster: np.ndarray, threshold: int) -> np.ndarray:
        """Return the binarized mask with the same shape as ``raster``."""


class IResultSink(Protocol):
    """Persists a finished depth profile."""

    def write(self, result: ProcessResult) -> None:
        """Persist the provided series."""


class IViewerSink(Protocol):
    """Persists the two rasters captured by the frame viewer."""

    def write(self, result: ViewerResult) -> None:
        """Persist the provided rasters."""
