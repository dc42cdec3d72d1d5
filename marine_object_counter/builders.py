"""Factory helpers for assembling the pipeline pieces."""

from __future__ import annotations

from typing import Optional

from .analyzer import FrameAnalyzer
from .image_processor import OpenCVImageProcessor
from .interfaces import IImageProcessor
from .pipeline import SeriesBuilder, SourceFactory
from .video_reader import OpenCVFrameSource
from .viewer import FrameViewer


def build_analyzer(processor: Optional[IImageProcessor] = None) -> FrameAnalyzer:
    """Create a :class:`FrameAnalyzer` backed by OpenCV unless told otherwise."""

    return FrameAnalyzer(processor if processor is not None else OpenCVImageProcessor())


def build_series_builder(
    processor: Optional[IImageProcessor] = None,
    source_factory: SourceFactory = OpenCVFrameSource,
) -> SeriesBuilder:
    """Assemble a :class:`SeriesBuilder`."""

    return SeriesBuilder(source_factory, build_analyzer(processor))


def build_frame_viewer(
    processor: Optional[IImageProcessor] = None,
    source_factory: SourceFactory = OpenCVFrameSource,
) -> FrameViewer:
    """Assemble a :class:`FrameViewer`.

    The viewer gets its own analyzer and opens its own source per capture, so
    it never shares decoder state with a running :class:`SeriesBuilder`.
    """

    return FrameViewer(source_factory, build_analyzer(processor))
