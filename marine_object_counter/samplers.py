"""Timestamp planning for series runs and single-frame viewing."""

from __future__ import annotations

import math
from typing import Iterator, Union

from .config import SamplingConfig, ViewerMode
from .errors import ConfigurationError, OutOfRangeError


def sample_count(config: SamplingConfig) -> float:
    """Return ``total_depth / scale``, the (possibly fractional) number of samples."""

    if config.scale == 0:
        raise ConfigurationError("Sampling interval (scale) must not be zero.")
    count = config.total_depth / config.scale
    if not count > 0:
        raise ConfigurationError(
            "With this depth and scale the number of samples is zero or less."
        )
    return count


def time_interval(duration: float, config: SamplingConfig) -> float:
    """Return the playback time between two consecutive samples."""

    interval = duration / sample_count(config)
    if not interval > 0 or math.isinf(interval):
        raise ConfigurationError(
            f"Video duration is zero or the settings are invalid (duration={duration})."
        )
    return interval


def expected_samples(duration: float, config: SamplingConfig) -> int:
    """Return how many timestamps :func:`plan_series` will yield."""

    time_interval(duration, config)
    return math.ceil(sample_count(config))


def plan_series(duration: float, config: SamplingConfig) -> Iterator[float]:
    """Return a fresh generator over ``0, dt, 2*dt, ...`` strictly below ``duration``.

    Validation happens immediately so that configuration errors surface before
    the first frame is read. Each timestamp is computed as ``k * dt`` rather
    than accumulated, so long videos do not drift.
    """

    time_interval(duration, config)
    count = sample_count(config)

    def _timestamps() -> Iterator[float]:
        k = 0
        while k < count:
            ts = k * duration / count
            if ts >= duration:
                return
            yield ts
            k += 1

    return _timestamps()


def plan_viewer_time(
    mode: Union[ViewerMode, str],
    value: float,
    duration: float,
    config: SamplingConfig,
) -> float:
    """Resolve a viewer selector to a playback time in ``[0, duration]``."""

    mode = ViewerMode(mode)
    if mode is ViewerMode.DEPTH:
        if config.total_depth == 0:
            raise ConfigurationError("Total depth must not be zero.")
        target = value / config.total_depth * duration
    elif mode is ViewerMode.FRAME:
        target = value / sample_count(config) * duration
    else:
        target = float(value)
    if not 0.0 <= target <= duration:
        raise OutOfRangeError(
            f"The requested value is outside the video (0 - {duration:.2f}s); "
            f"it resolves to {target:.2f}s."
        )
    return target
