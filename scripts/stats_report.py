"""Generate a normal sample matrix, restretch it and report its statistics."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, TextIO

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import numpy as np

from matstats.config import load_config
from matstats.stats.display import print_matrix
from matstats.stats.random import NormalSampler
from matstats.stats.summary import column_summary, restandardize
from matstats.utils.logging import get_logger
from matstats.viz.plotting import plot_sample_histogram


def run_report(
    config_path: Optional[str | Path],
    dim_i: int = 8,
    dim_j: int = 8,
    new_mean: float = 0.0,
    new_stddev: float = 1.0,
    stream: Optional[TextIO] = None,
) -> np.ndarray:
    """Sample, restandardize to ``new_mean``/``new_stddev``, print and plot."""
    cfg = load_config(config_path)
    logger = get_logger("report", level=cfg.log_level)
    sampler = NormalSampler.from_config(cfg)

    samples = sampler.sample_matrix(dim_i, dim_j)
    logger.info(
        "Sampled %dx%d matrix (seed=%s, legacy_single_draw=%s)",
        dim_i,
        dim_j,
        cfg.seed,
        cfg.legacy_single_draw,
    )
    logger.debug("Column summary:\n%s", column_summary(samples, dim_i, dim_j).to_string())

    rescaled = restandardize(
        samples,
        new_mean,
        new_stddev,
        dim_i,
        dim_j,
        legacy_row_stride=cfg.legacy_row_stride,
    )
    print_matrix(
        rescaled,
        dim_i,
        dim_j,
        stream=stream,
        precision=cfg.print_precision,
        width=cfg.print_width,
    )

    out_base = Path(cfg.viz.out_dir) / "samples_hist"
    plot_sample_histogram(
        samples,
        bins=cfg.viz.bins,
        title=f"{dim_i}x{dim_j} normal samples",
        out_base=out_base,
        formats=cfg.viz.save_formats,
    )
    logger.info("Histogram saved to %s", out_base)
    return rescaled


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", default="configs/default.yaml")
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--cols", type=int, default=8)
    parser.add_argument("--mean", type=float, default=0.0)
    parser.add_argument("--stddev", type=float, default=1.0)
    args = parser.parse_args()
    run_report(
        args.config,
        dim_i=args.rows,
        dim_j=args.cols,
        new_mean=args.mean,
        new_stddev=args.stddev,
    )
