"""Writers for depth profiles and viewer frames."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple, Union

import cv2
import numpy as np
import pandas as pd

from .interfaces import IResultSink, IViewerSink
from .models import ProcessResult, ViewerResult

logger = logging.getLogger(__name__)

SERIES_COLUMNS = ["depth", "ratio"]


def series_to_frame(result: ProcessResult) -> pd.DataFrame:
    """Return the series as a ``depth, ratio`` table in ascending depth order."""

    df = pd.DataFrame(
        [(s.depth, s.ratio) for s in result.ratios], columns=SERIES_COLUMNS
    )
    df.sort_values(by=["depth"], inplace=True, kind="stable")
    df.reset_index(drop=True, inplace=True)
    return df


def default_csv_path(video_path: Union[str, Path]) -> Path:
    """``clip.mp4`` -> ``clip__results.csv`` next to the video."""

    video_path = Path(video_path)
    return video_path.with_name(f"{video_path.stem}__results.csv")


class CsvSeriesSink(IResultSink):
    """Write a depth profile to a CSV file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, result: ProcessResult) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        series_to_frame(result).to_csv(self._path, index=False)
        logger.info("Wrote %d rows to %s", len(result), self._path)


class ViewerImageSink(IViewerSink):
    """Write the original and binarized frames to disk."""

    def __init__(
        self,
        out_dir: Path,
        stem: str = "frame",
        image_format: str = "png",
        jpg_quality: int = 95,
    ) -> None:
        self._out = Path(out_dir)
        self._out.mkdir(parents=True, exist_ok=True)
        self._stem = stem
        self._fmt = image_format.lower()
        self._jpg_quality = jpg_quality

    def _imwrite(self, path: Path, image: np.ndarray) -> None:
        if self._fmt in ("jpg", "jpeg"):
            ok = cv2.imwrite(
                str(path),
                image,
                [int(cv2.IMWRITE_JPEG_QUALITY), self._jpg_quality],
            )
        else:
            ok = cv2.imwrite(str(path), image)
        if not ok:
            raise OSError(f"Failed to write image: {path}")
        logger.info("Wrote %s", path)

    def paths_for(self, target_time: float) -> Tuple[Path, Path]:
        stem = f"{self._stem}_t{target_time:010.3f}"
        return (
            self._out / f"{stem}_ORIG.{self._fmt}",
            self._out / f"{stem}_BIN.{self._fmt}",
        )

    def write(self, result: ViewerResult) -> None:
        orig_path, bin_path = self.paths_for(result.target_time)
        self._imwrite(orig_path, result.original)
        self._imwrite(bin_path, result.binarized)
