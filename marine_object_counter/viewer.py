"""Single-frame capture for side-by-side display."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .analyzer import FrameAnalyzer
from .config import SamplingConfig, ViewerQuery
from .interfaces import IFrameAnalyzer
from .models import ViewerResult
from .pipeline import SourceFactory
from .samplers import plan_viewer_time
from .video_reader import OpenCVFrameSource

logger = logging.getLogger(__name__)


class FrameViewer:
    """Capture one frame and its binarized counterpart."""

    def __init__(
        self,
        source_factory: SourceFactory = OpenCVFrameSource,
        analyzer: Optional[IFrameAnalyzer] = None,
    ) -> None:
        self._open = source_factory
        self._analyzer = analyzer if analyzer is not None else FrameAnalyzer()

    def capture(
        self,
        video_file: Union[str, Path],
        query: ViewerQuery,
        config: SamplingConfig,
    ) -> ViewerResult:
        source = self._open(Path(video_file))
        try:
            target = plan_viewer_time(query.mode, query.value, source.duration, config)
            frame = source.seek(target)
            mask = self._analyzer.binarize_for_display(frame, config.threshold)
        finally:
            source.release()
        logger.info("Captured frame at %.2fs (%s=%s)", target, query.mode.value, query.value)
        return ViewerResult(original=frame, binarized=mask, target_time=target)
