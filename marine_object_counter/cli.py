"""Command line entry point for the marine object counter."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .builders import build_frame_viewer, build_series_builder
from .config import SamplingConfig, ViewerMode, ViewerQuery
from .errors import MarineCounterError
from .plots import plot_series
from .sinks import CsvSeriesSink, ViewerImageSink, default_csv_path

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"


class ProgressLogger:
    """Log progress each time another ``step`` fraction is completed."""

    def __init__(self, step: float = 0.1) -> None:
        self._step = step
        self._next = 0.0

    def __call__(self, progress: float) -> None:
        if progress + 1e-9 < self._next:
            return
        logger.info("Processing... %d%%", round(progress * 100))
        while self._next <= progress + 1e-9:
            self._next += self._step


def _add_sampling_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("input", type=Path)
    parser.add_argument("--depth", type=float, default=100.0, help="total depth in metres")
    parser.add_argument("--scale", type=float, default=5.0, help="metres per sample")
    parser.add_argument("--threshold", type=int, default=50, help="binarization cutoff (0-255)")
    parser.add_argument("--trim", type=int, default=0, help="offset added to the bright pixel count")
    parser.add_argument("-v", "--verbose", action="store_true")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Create the CLI parser and return parsed arguments."""

    parser = argparse.ArgumentParser(
        description="Measure suspended-particle density against depth in a descent video"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    process = commands.add_parser("process", help="sample the whole video")
    _add_sampling_args(process)
    process.add_argument("-o", "--out", type=Path, default=None, help="CSV output path")
    process.add_argument("--plot", type=Path, default=None, help="write a PNG chart here")

    view = commands.add_parser("view", help="export one frame and its binarized image")
    _add_sampling_args(view)
    view.add_argument("--mode", type=str, default="depth", choices=[m.value for m in ViewerMode])
    view.add_argument("--value", type=float, required=True)
    view.add_argument("-o", "--out", type=Path, default=Path("."))
    view.add_argument("--fmt", type=str, default="png", choices=["png", "jpg"])
    view.add_argument("--jpgq", type=int, default=95)

    return parser.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> SamplingConfig:
    """Convert CLI arguments into :class:`SamplingConfig`."""

    return SamplingConfig(
        total_depth=args.depth,
        scale=args.scale,
        threshold=args.threshold,
        trim=args.trim,
    )


def _run_process(args: argparse.Namespace, cfg: SamplingConfig) -> None:
    builder = build_series_builder()
    result = builder.run(args.input, cfg, on_progress=ProgressLogger())
    sink = CsvSeriesSink(args.out if args.out is not None else default_csv_path(args.input))
    sink.write(result)
    if args.plot is not None:
        plot_series(result, args.plot, title=args.input.name)
    print(f"Done. {len(result)} samples over {result.duration:.2f}s -> {sink.path}")


def _run_view(args: argparse.Namespace, cfg: SamplingConfig) -> None:
    viewer = build_frame_viewer()
    result = viewer.capture(args.input, ViewerQuery(ViewerMode(args.mode), args.value), cfg)
    sink = ViewerImageSink(args.out, args.input.stem, args.fmt, args.jpgq)
    sink.write(result)
    print(f"Done. Frame at {result.target_time:.2f}s written to {args.out}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point used by ``python -m marine_object_counter`` and scripts."""

    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
    try:
        cfg = config_from_args(args)
        if args.command == "process":
            _run_process(args, cfg)
        else:
            _run_view(args, cfg)
    except MarineCounterError as exc:
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":  # pragma: no cover
    main()
