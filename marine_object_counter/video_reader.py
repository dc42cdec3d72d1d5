"""Seekable video sources."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Union

import cv2
import numpy as np

from .errors import ResourceError, SourceLoadError
from .interfaces import IFrameSource

logger = logging.getLogger(__name__)

# Guards against 0.5 * 30 evaluating to 14.999... and landing one frame early.
_FRAME_EPSILON = 1e-6


class OpenCVFrameSource(IFrameSource):
    """Frame source based on :mod:`cv2`.

    Seeking is done by frame index, which OpenCV resolves more reliably than a
    millisecond position. The timestamp is mapped to the frame being shown at
    that instant and clamped to the last decodable frame.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        if not self._path.exists():
            raise SourceLoadError(f"Video not found: {self._path}")
        self._cap = cv2.VideoCapture(str(self._path))
        if not self._cap.isOpened():
            self._cap.release()
            raise SourceLoadError(f"Failed to open video: {self._path}")
        self._released = False
        self._fps = float(self._cap.get(cv2.CAP_PROP_FPS) or 0.0)
        self._frame_count = max(0, int(self._cap.get(cv2.CAP_PROP_FRAME_COUNT) or 0))
        self._width = int(self._cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self._height = int(self._cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        logger.debug("Opened %s: %s", self._path.name, self.info())

    def __enter__(self) -> "OpenCVFrameSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    @property
    def duration(self) -> float:
        if self._fps > 0 and self._frame_count > 0:
            return self._frame_count / self._fps
        return 0.0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def info(self) -> Dict[str, float]:
        return {
            "width": float(self._width),
            "height": float(self._height),
            "fps": self._fps,
            "frame_count": float(self._frame_count),
            "duration_s": self.duration,
        }

    def _frame_index(self, ts_sec: float) -> int:
        idx = int(max(0.0, ts_sec) * self._fps + _FRAME_EPSILON)
        if self._frame_count > 0:
            idx = min(idx, self._frame_count - 1)
        return idx

    def seek(self, ts_sec: float) -> np.ndarray:
        if self._released:
            raise SourceLoadError(f"Video {self._path.name} has already been closed.")
        idx = self._frame_index(ts_sec)
        self._cap.set(cv2.CAP_PROP_POS_FRAMES, idx)
        ok, frame = self._cap.read()
        if not ok:
            raise SourceLoadError(
                f"Failed to decode frame {idx} ({ts_sec:.3f}s) of {self._path.name}."
            )
        if frame is None or frame.size == 0:
            raise ResourceError(f"No image data at {ts_sec:.3f}s of {self._path.name}.")
        return frame

    def release(self) -> None:
        if self._released:
            return
        self._cap.release()
        self._released = True
