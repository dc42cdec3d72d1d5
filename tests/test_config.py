import dataclasses

import pytest

from marine_object_counter.config import SamplingConfig, ViewerMode, ViewerQuery
from marine_object_counter.errors import ConfigurationError, MarineCounterError


def test_sampling_config_defaults() -> None:
    cfg = SamplingConfig()
    assert (cfg.total_depth, cfg.scale, cfg.threshold, cfg.trim) == (100.0, 5.0, 50, 0)


def test_sampling_config_is_immutable() -> None:
    cfg = SamplingConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.scale = 1.0  # type: ignore[misc]


@pytest.mark.parametrize("threshold", [-1, 256])
def test_sampling_config_rejects_threshold_out_of_range(threshold) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        SamplingConfig(threshold=threshold)
    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, MarineCounterError)


def test_sampling_config_allows_negative_trim() -> None:
    assert SamplingConfig(trim=-500).trim == -500


def test_viewer_query_coerces_mode() -> None:
    assert ViewerQuery("seconds", 3.0).mode is ViewerMode.SECONDS
