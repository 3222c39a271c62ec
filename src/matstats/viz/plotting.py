"""Diagnostic figures for generated samples."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

from matstats.viz.style import apply_style

import matplotlib.pyplot as plt


def save_figure(fig: plt.Figure, out_base: Path, formats: Iterable[str]) -> None:
    out_base.parent.mkdir(parents=True, exist_ok=True)
    for fmt in formats:
        fig.savefig(str(out_base.with_suffix(f".{fmt}")), bbox_inches="tight")


def plot_sample_histogram(
    samples: Sequence[float],
    bins: int,
    title: str,
    out_base: Path,
    formats: Iterable[str],
    overlay_normal: bool = True,
) -> None:
    """Density histogram of samples, optionally against the N(0, 1) pdf."""
    apply_style()
    values = np.asarray(samples, dtype=float).reshape(-1)
    fig, ax = plt.subplots()
    ax.hist(values, bins=bins, density=True, alpha=0.7, label="samples")
    if overlay_normal:
        grid = np.linspace(min(values.min(), -4.0), max(values.max(), 4.0), 400)
        pdf = np.exp(-0.5 * grid**2) / math.sqrt(2.0 * math.pi)
        ax.plot(grid, pdf, label="N(0, 1) pdf")
    ax.set_title(title)
    ax.set_xlabel("value")
    ax.set_ylabel("density")
    ax.legend()
    save_figure(fig, out_base, formats)
    plt.close(fig)
