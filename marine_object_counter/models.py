"""Result types produced by the series builder and the frame viewer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class FrameSample:
    """One point of the depth profile."""

    depth: float
    ratio: float


@dataclass(frozen=True)
class ProcessResult:
    """Ordered series of samples for a whole video."""

    ratios: Tuple[FrameSample, ...]
    duration: float

    def __len__(self) -> int:
        return len(self.ratios)


@dataclass(frozen=True)
class ViewerResult:
    """Raw and binarized rasters captured at ``target_time`` seconds."""

    original: np.ndarray
    binarized: np.ndarray
    target_time: float
