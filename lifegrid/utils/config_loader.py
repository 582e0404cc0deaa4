"""Helpers for loading and validating simulation session configuration."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from lifegrid.core.exceptions import ConfigurationError, PatternError
from lifegrid.core.patterns import get_pattern
from lifegrid.interfaces.grid import BoundaryPolicy
from lifegrid.utils.consts import GridDefaults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridConfig:
    width: int = GridDefaults.WIDTH
    height: int = GridDefaults.HEIGHT
    boundary: BoundaryPolicy = BoundaryPolicy.CLAMPED


@dataclass(frozen=True)
class SimulationConfig:
    tick_interval_seconds: float = GridDefaults.TICK_INTERVAL_SECONDS


@dataclass(frozen=True)
class PatternPlacement:
    name: str
    x: int
    y: int


@dataclass(frozen=True)
class SessionConfig:
    grid: GridConfig = field(default_factory=GridConfig)
    simulation: SimulationConfig = field(default_factory=SimulationConfig)
    seed: tuple[PatternPlacement, ...] = ()


# Configuration cache with thread safety
_LOADER_CACHE: dict[str, SessionConfig] = {}
_CACHE_LOCK = threading.RLock()

_DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live in lifegrid/config.yaml
        path = str(_DEFAULT_CONFIG_PATH)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("config root must be a mapping")
    return raw


def _positive_int(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(key, f"must be an integer, got {value!r}")
    if value <= 0:
        raise ConfigurationError(key, f"must be positive, got {value}")
    return value


def _build_grid_cfg(grid_raw: dict[str, Any]) -> GridConfig:
    try:
        boundary = BoundaryPolicy.parse(grid_raw.get("boundary", "clamped"))
    except ValueError as exc:
        raise ConfigurationError("grid.boundary", str(exc)) from exc

    return GridConfig(
        width=_positive_int("grid.width", grid_raw.get("width", GridDefaults.WIDTH)),
        height=_positive_int("grid.height", grid_raw.get("height", GridDefaults.HEIGHT)),
        boundary=boundary,
    )


def _build_simulation_cfg(sim_raw: dict[str, Any]) -> SimulationConfig:
    interval = sim_raw.get("tick_interval_seconds", GridDefaults.TICK_INTERVAL_SECONDS)
    if isinstance(interval, bool) or not isinstance(interval, (int, float)):
        raise ConfigurationError(
            "simulation.tick_interval_seconds", f"must be a number, got {interval!r}"
        )
    if interval < 0:
        raise ConfigurationError("simulation.tick_interval_seconds", "must be >= 0")
    return SimulationConfig(tick_interval_seconds=float(interval))


def _build_seed(seed_raw: list[Any]) -> tuple[PatternPlacement, ...]:
    placements = []
    for index, entry in enumerate(seed_raw):
        key = f"seed[{index}]"
        if not isinstance(entry, dict):
            raise ConfigurationError(key, "must be a mapping with pattern, x and y")
        try:
            name = str(entry["pattern"])
            x, y = entry["x"], entry["y"]
        except KeyError as exc:
            raise ConfigurationError(key, f"missing {exc}") from exc
        if any(isinstance(v, bool) or not isinstance(v, int) for v in (x, y)):
            raise ConfigurationError(key, "x and y must be integers")
        try:
            get_pattern(name)
        except PatternError as exc:
            raise ConfigurationError(key, str(exc)) from exc
        placements.append(PatternPlacement(name=name, x=x, y=y))
    return tuple(placements)


def parse_config(raw: dict[str, Any]) -> SessionConfig:
    """Convert a raw mapping (as read from YAML) into a SessionConfig."""
    sections = {}
    for section in ("grid", "simulation"):
        value = raw.get(section) or {}
        if not isinstance(value, dict):
            raise ConfigurationError(section, "must be a mapping")
        sections[section] = value

    seed_raw = raw.get("seed") or []
    if not isinstance(seed_raw, list):
        raise ConfigurationError("seed", "must be a list")

    cfg = SessionConfig(
        grid=_build_grid_cfg(sections["grid"]),
        simulation=_build_simulation_cfg(sections["simulation"]),
        seed=_build_seed(seed_raw),
    )
    _validate_seed_fits(cfg)
    return cfg


def _validate_seed_fits(cfg: SessionConfig) -> None:
    """Fail fast on seed patterns that would fall off the grid."""
    for placement in cfg.seed:
        for dx, dy in get_pattern(placement.name):
            x, y = placement.x + dx, placement.y + dy
            if not (0 <= x < cfg.grid.width and 0 <= y < cfg.grid.height):
                raise ConfigurationError(
                    "seed",
                    f"pattern '{placement.name}' at ({placement.x}, {placement.y}) "
                    f"does not fit a {cfg.grid.width}x{cfg.grid.height} grid",
                )


def load_config(path: Optional[str] = None) -> SessionConfig:
    """Load and validate configuration from a YAML file.

    Args:
        path: Optional path to YAML config. If None, load the bundled
            lifegrid/config.yaml.

    Returns:
        SessionConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)
    logger.debug(f"Loaded session config from {p}")

    return parse_config(raw)


def get_config() -> SessionConfig:
    """Return the bundled default config, loading and caching it if necessary.

    THREAD SAFETY: This function is thread-safe.
    """
    key = _get_config_path()
    with _CACHE_LOCK:
        if key not in _LOADER_CACHE:
            _LOADER_CACHE[key] = load_config()
        return _LOADER_CACHE[key]


def clear_config_cache() -> None:
    """Clear all cached configurations.

    Subsequent calls to get_config() will reload from disk.
    """
    with _CACHE_LOCK:
        _LOADER_CACHE.clear()
