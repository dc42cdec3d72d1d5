"""Marine object counter package."""

from .config import SamplingConfig, ViewerMode, ViewerQuery
from .errors import (
    ConfigurationError,
    MarineCounterError,
    OutOfRangeError,
    ResourceError,
    RunCancelled,
    SourceLoadError,
)
from .models import FrameSample, ProcessResult, ViewerResult
from .analyzer import FrameAnalyzer
from .pipeline import RunState, SeriesBuilder
from .viewer import FrameViewer
from .cli import main

__all__ = [
    "SamplingConfig",
    "ViewerMode",
    "ViewerQuery",
    "FrameSample",
    "ProcessResult",
    "ViewerResult",
    "FrameAnalyzer",
    "SeriesBuilder",
    "RunState",
    "FrameViewer",
    "MarineCounterError",
    "ConfigurationError",
    "SourceLoadError",
    "OutOfRangeError",
    "ResourceError",
    "RunCancelled",
    "main",
]
