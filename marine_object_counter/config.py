"""Configuration models for the marine object counter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigurationError


class ViewerMode(str, Enum):
    """How a frame viewer value is interpreted."""

    DEPTH = "depth"
    FRAME = "frame"
    SECONDS = "seconds"


@dataclass(frozen=True)
class SamplingConfig:
    """Immutable set of numeric knobs for one analysis run."""

    # Depth reached at the end of the video (metres)
    total_depth: float = 100.0
    # Metres per sample
    scale: float = 5.0

    # Binarization
    threshold: int = 50
    trim: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.threshold <= 255:
            raise ConfigurationError(
                f"Threshold must be between 0 and 255, got {self.threshold}."
            )


@dataclass(frozen=True)
class ViewerQuery:
    """Selector for a single frame to display."""

    mode: ViewerMode
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", ViewerMode(self.mode))
