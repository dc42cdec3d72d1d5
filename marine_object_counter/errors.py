"""Exception hierarchy raised by the analysis pipeline."""

from __future__ import annotations


class MarineCounterError(Exception):
    """Base class for all errors surfaced to the user."""


class ConfigurationError(MarineCounterError, ValueError):
    """Depth, scale, threshold or duration do not describe a valid run."""


class SourceLoadError(MarineCounterError, RuntimeError):
    """The video could not be opened or a frame could not be decoded."""


class OutOfRangeError(MarineCounterError, ValueError):
    """A viewer query resolved to a time outside the video."""


class ResourceError(MarineCounterError, RuntimeError):
    """A raster buffer could not be acquired or has an unusable layout."""


class RunCancelled(MarineCounterError):
    """The caller asked for the run to stop between two samples."""
