"""Pipeline orchestration."""

from __future__ import annotations

import logging
import time
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Union

from .analyzer import FrameAnalyzer
from .config import SamplingConfig
from .errors import RunCancelled
from .interfaces import IFrameAnalyzer, IFrameSource
from .models import FrameSample, ProcessResult
from .samplers import expected_samples, plan_series
from .video_reader import OpenCVFrameSource

logger = logging.getLogger(__name__)

SourceFactory = Callable[[Path], IFrameSource]
ProgressCallback = Callable[[float], None]


class RunState(str, Enum):
    """Lifecycle of a :class:`SeriesBuilder` run."""

    IDLE = "idle"
    OPENING = "opening"
    SAMPLING = "sampling"
    COMPLETED = "completed"
    ERRORED = "errored"


class SeriesBuilder:
    """Sample a video at evenly spaced depths and collect foreground ratios."""

    def __init__(
        self,
        source_factory: SourceFactory = OpenCVFrameSource,
        analyzer: Optional[IFrameAnalyzer] = None,
    ) -> None:
        self._open = source_factory
        self._analyzer = analyzer if analyzer is not None else FrameAnalyzer()
        self._state = RunState.IDLE

    @property
    def state(self) -> RunState:
        return self._state

    def run(
        self,
        video_file: Union[str, Path],
        config: SamplingConfig,
        on_progress: Optional[ProgressCallback] = None,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> ProcessResult:
        """Process ``video_file`` and return the full depth profile.

        ``on_progress`` is called synchronously with 0, then ``t / duration``
        after every sample, then 1. ``should_cancel`` is polled before each
        seek; when it returns True the run raises :class:`RunCancelled`.
        Any failure discards the partial series.
        """

        report = on_progress if on_progress is not None else _ignore_progress
        self._state = RunState.OPENING
        try:
            source = self._open(Path(video_file))
        except Exception as exc:
            self._state = RunState.ERRORED
            logger.error("Could not open %s: %s", video_file, exc)
            raise
        try:
            result = self._sample(source, config, report, should_cancel)
        except Exception as exc:
            self._state = RunState.ERRORED
            logger.error("Processing %s failed: %s", video_file, exc)
            raise
        finally:
            source.release()
        self._state = RunState.COMPLETED
        return result

    def _sample(
        self,
        source: IFrameSource,
        config: SamplingConfig,
        report: ProgressCallback,
        should_cancel: Optional[Callable[[], bool]],
    ) -> ProcessResult:
        duration = source.duration
        timestamps = plan_series(duration, config)
        logger.info(
            "Sampling %d frames over %.2fs (depth %.2fm, scale %.2fm)",
            expected_samples(duration, config),
            duration,
            config.total_depth,
            config.scale,
        )
        self._state = RunState.SAMPLING
        start = time.time()
        samples: List[FrameSample] = []
        report(0.0)
        for ts in timestamps:
            if should_cancel is not None and should_cancel():
                raise RunCancelled(f"Processing was cancelled after {len(samples)} samples.")
            frame = source.seek(ts)
            ratio = self._analyzer.ratio_of(frame, config.threshold, config.trim)
            samples.append(FrameSample(depth=ts / duration * config.total_depth, ratio=ratio))
            report(ts / duration)
        report(1.0)
        logger.info("Collected %d samples in %.2fs", len(samples), time.time() - start)
        return ProcessResult(ratios=tuple(samples), duration=duration)


def _ignore_progress(_progress: float) -> None:
    return None
