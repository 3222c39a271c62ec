"""Normally distributed samples via the Box-Muller transform."""

from __future__ import annotations

import logging
import math
import threading
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from matstats.stats.columns import check_dims, check_out

if TYPE_CHECKING:
    from matstats.config import StatsConfig

TWO_PI = 2.0 * math.pi

logger = logging.getLogger(__name__)


class NormalSampler:
    """Standard-normal generator around an injected numpy ``Generator``.

    Uniform draws are taken from (0, 1]. By default each sample consumes two
    independent draws ``u, v`` and returns ``sqrt(-2 ln u) * cos(2 pi v)``.
    ``legacy_single_draw`` reuses ``u`` for the angle, which reproduces older
    output but is correlated and not exactly N(0, 1).
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        legacy_single_draw: bool = False,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both.")
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.legacy_single_draw = legacy_single_draw
        self._lock = threading.Lock()
        if legacy_single_draw:
            logger.debug("NormalSampler using legacy single-draw transform.")

    @classmethod
    def from_config(cls, cfg: "StatsConfig") -> "NormalSampler":
        return cls(seed=cfg.seed, legacy_single_draw=cfg.legacy_single_draw)

    @property
    def draws_per_sample(self) -> int:
        return 1 if self.legacy_single_draw else 2

    def _uniform(self, size: Optional[int] = None):
        return 1.0 - self.rng.random(size)

    def sample(self) -> float:
        with self._lock:
            u = self._uniform()
            v = u if self.legacy_single_draw else self._uniform()
        return math.sqrt(-2.0 * math.log(u)) * math.cos(TWO_PI * v)

    def sample_matrix(
        self, dim_i: int, dim_j: int, out: Optional[np.ndarray] = None
    ) -> np.ndarray:
        """Fill a flat ``dim_i * dim_j`` matrix row by row.

        Consumes the stream exactly like ``dim_i * dim_j`` calls to ``sample``.
        """
        check_dims(dim_i, dim_j)
        n = dim_i * dim_j
        target = check_out(out, n) if out is not None else None
        with self._lock:
            draws = self._uniform(n * self.draws_per_sample)
        if self.legacy_single_draw:
            u = v = draws
        else:
            u = draws[0::2]
            v = draws[1::2]
        values = np.sqrt(-2.0 * np.log(u)) * np.cos(TWO_PI * v)
        if target is None:
            return values
        target[:] = values
        return out


_default_sampler: Optional[NormalSampler] = None
_default_lock = threading.Lock()


def default_sampler() -> NormalSampler:
    """Process-wide sampler, created unseeded on first use."""
    global _default_sampler
    with _default_lock:
        if _default_sampler is None:
            _default_sampler = NormalSampler()
        return _default_sampler


def set_default_sampler(sampler: NormalSampler) -> None:
    global _default_sampler
    with _default_lock:
        _default_sampler = sampler


def sample_standard_normal(sampler: Optional[NormalSampler] = None) -> float:
    return (sampler or default_sampler()).sample()


def sample_standard_normal_matrix(
    dim_i: int,
    dim_j: int,
    sampler: Optional[NormalSampler] = None,
    out: Optional[np.ndarray] = None,
) -> np.ndarray:
    return (sampler or default_sampler()).sample_matrix(dim_i, dim_j, out=out)


def single_draw_moments(resolution: int = 1_000_000) -> Tuple[float, float]:
    """Mean and variance of ``sqrt(-2 ln u) * cos(2 pi u)`` for u ~ U(0, 1).

    Midpoint quadrature; the log singularity at 0 is integrable and the
    error shrinks roughly like ``log(resolution) / resolution``.
    """
    if resolution < 1:
        raise ValueError("resolution must be >= 1.")
    u = (np.arange(resolution, dtype=np.float64) + 0.5) / resolution
    x = np.sqrt(-2.0 * np.log(u)) * np.cos(TWO_PI * u)
    mean = float(np.mean(x))
    second = float(np.mean(x * x))
    return mean, second - mean * mean
