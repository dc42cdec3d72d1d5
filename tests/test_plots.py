from marine_object_counter.models import FrameSample, ProcessResult
from marine_object_counter.plots import plot_series


def test_plot_series_writes_png(tmp_path) -> None:
    result = ProcessResult(
        ratios=tuple(FrameSample(depth=5.0 * k, ratio=0.01 * k) for k in range(10)),
        duration=10.0,
    )
    path = plot_series(result, tmp_path / "charts" / "profile.png")
    assert path.exists()
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_plot_series_handles_negative_ratios(tmp_path) -> None:
    result = ProcessResult(ratios=(FrameSample(0.0, -0.2), FrameSample(5.0, 0.1)), duration=2.0)
    assert plot_series(result, tmp_path / "neg.png").exists()
