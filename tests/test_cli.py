import logging
from pathlib import Path

import numpy as np
import pytest

from marine_object_counter import cli
from marine_object_counter.cli import ProgressLogger, config_from_args, main, parse_args
from marine_object_counter.models import FrameSample, ProcessResult, ViewerResult


def test_parse_process_defaults() -> None:
    args = parse_args(["process", "dive.mp4"])
    assert args.command == "process"
    assert args.input == Path("dive.mp4")
    assert args.out is None
    cfg = config_from_args(args)
    assert (cfg.total_depth, cfg.scale, cfg.threshold, cfg.trim) == (100.0, 5.0, 50, 0)


def test_parse_view_arguments() -> None:
    args = parse_args(
        ["view", "dive.mp4", "--mode", "frame", "--value", "3", "--threshold", "80", "--trim", "-4"]
    )
    assert args.mode == "frame"
    assert args.value == 3.0
    cfg = config_from_args(args)
    assert cfg.threshold == 80
    assert cfg.trim == -4


def test_parse_view_requires_value() -> None:
    with pytest.raises(SystemExit):
        parse_args(["view", "dive.mp4"])


def test_progress_logger_logs_in_steps(caplog) -> None:
    reporter = ProgressLogger(step=0.25)
    with caplog.at_level(logging.INFO, logger="marine_object_counter.cli"):
        for value in (0.0, 0.1, 0.2, 0.3, 0.6, 0.61, 1.0):
            reporter(value)
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "Processing... 0%",
        "Processing... 30%",
        "Processing... 60%",
        "Processing... 100%",
    ]


class StubBuilder:
    def run(self, video_file, config, on_progress=None):
        on_progress(0.0)
        on_progress(1.0)
        return ProcessResult(ratios=(FrameSample(0.0, 0.5),), duration=4.0)


def test_main_process_writes_csv(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.setattr(cli, "build_series_builder", StubBuilder)
    out = tmp_path / "result.csv"
    main(["process", str(tmp_path / "dive.mp4"), "-o", str(out)])
    assert out.read_text().splitlines() == ["depth,ratio", "0.0,0.5"]
    assert "1 samples" in capsys.readouterr().out


def test_main_view_writes_images(tmp_path, monkeypatch) -> None:
    class StubViewer:
        def capture(self, video_file, query, config):
            frame = np.zeros((2, 2, 3), dtype=np.uint8)
            return ViewerResult(original=frame, binarized=frame, target_time=1.0)

    written = []
    monkeypatch.setattr(cli, "build_frame_viewer", StubViewer)
    monkeypatch.setattr("cv2.imwrite", lambda path, image, *a: written.append(Path(path).name) or True)
    main(["view", "dive.mp4", "--mode", "seconds", "--value", "1", "-o", str(tmp_path)])
    assert written == ["dive_t000001.000_ORIG.png", "dive_t000001.000_BIN.png"]


def test_main_reports_errors_as_exit_message(tmp_path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["process", str(tmp_path / "missing.mp4")])
    assert str(excinfo.value).startswith("Error: Video not found")
