"""Depth profile chart rendering."""

from __future__ import annotations

import logging
from pathlib import Path

from matplotlib.figure import Figure

from .models import ProcessResult

logger = logging.getLogger(__name__)


def plot_series(result: ProcessResult, path: Path, title: str = "Foreground ratio by depth") -> Path:
    """Render ratio against depth as a line chart and save it to ``path``."""

    depths = [s.depth for s in result.ratios]
    ratios = [s.ratio for s in result.ratios]

    fig = Figure(figsize=(12, 5))
    ax = fig.subplots()
    ax.plot(depths, ratios, marker="o", linestyle="-", color="#88e1fc", label="ratio")
    ax.set_title(title)
    ax.set_xlabel("Depth (m)")
    ax.set_ylabel("Foreground pixel ratio")
    # trim can push ratios below zero
    ax.set_ylim(bottom=min([0.0] + ratios))
    ax.grid(True, linestyle="--")
    ax.legend()
    fig.tight_layout()

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    logger.info("Saved chart to %s", path)
    return path
