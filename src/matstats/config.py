"""Configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import logging
import os
import yaml


CONFIG_ENV_VAR = "MATSTATS_CONFIG"


@dataclass(frozen=True)
class VizConfig:
    out_dir: str = "reports/figures"
    bins: int = 50
    save_formats: List[str] = field(default_factory=lambda: ["png"])


@dataclass(frozen=True)
class StatsConfig:
    seed: Optional[int] = None
    legacy_single_draw: bool = False
    legacy_row_stride: bool = False
    print_precision: int = 5
    print_width: int = 2
    log_level: str = "INFO"
    viz: VizConfig = field(default_factory=VizConfig)


def _maybe_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    return int(value)


def _bool_field(data: Dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}.")
    return value


def parse_config(data: Dict[str, Any]) -> StatsConfig:
    """Build a validated StatsConfig from a plain mapping."""
    viz = data.get("viz", {}) or {}
    viz_cfg = VizConfig(
        out_dir=str(viz.get("out_dir", "reports/figures")),
        bins=int(viz.get("bins", 50)),
        save_formats=[str(fmt) for fmt in viz.get("save_formats", ["png"])],
    )
    if viz_cfg.bins < 1:
        raise ValueError("viz.bins must be >= 1.")

    cfg = StatsConfig(
        seed=_maybe_int(data.get("seed")),
        legacy_single_draw=_bool_field(data, "legacy_single_draw", False),
        legacy_row_stride=_bool_field(data, "legacy_row_stride", False),
        print_precision=int(data.get("print_precision", 5)),
        print_width=int(data.get("print_width", 2)),
        log_level=str(data.get("log_level", "INFO")).upper(),
        viz=viz_cfg,
    )
    if cfg.print_precision < 0:
        raise ValueError("print_precision must be non-negative.")
    if cfg.print_width < 0:
        raise ValueError("print_width must be non-negative.")
    if not isinstance(logging.getLevelName(cfg.log_level), int):
        raise ValueError(f"Unknown log_level: {cfg.log_level}")
    return cfg


def load_config(path: Optional[str | Path] = None) -> StatsConfig:
    """Load YAML config; falls back to $MATSTATS_CONFIG, then to defaults."""
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return StatsConfig()
        path = env_path
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    data: Dict[str, Any] = yaml.safe_load(path.read_text()) or {}
    return parse_config(data)


def override_config(cfg: StatsConfig, overrides: Dict[str, Any]) -> StatsConfig:
    """Create a new StatsConfig with simple top-level overrides."""
    data = cfg.__dict__.copy()
    for key, value in overrides.items():
        if key in data:
            data[key] = value
    return StatsConfig(**data)
