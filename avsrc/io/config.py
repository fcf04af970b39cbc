"""Helpers for loading the YAML policy configuration."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, TypeVar

import yaml

from avsrc.errors import ConfigurationError
from avsrc.models import CostMatrix, DiscretizerConfig, Label, ScoringPolicy

from . import file_locator

_T = TypeVar("_T")

_SETTINGS_FILE = "settings.yaml"


@dataclass(frozen=True)
class PathsConfig:
    """Default locations of the record files and the prediction audit log."""

    train: Path
    eval: Path
    predictions_log: Path


@lru_cache(maxsize=None)
def load_yaml_config(path: Path) -> Dict[str, Any]:
    """Load a YAML configuration file with caching."""

    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_settings_config() -> Dict[str, Any]:
    """Return the contents of ``config/settings.yaml``, or ``{}`` when absent."""

    path = file_locator.get_config_path(_SETTINGS_FILE)
    if not path.exists():
        return {}
    return load_yaml_config(path)


def _section(settings: Optional[Mapping[str, Any]], name: str) -> Mapping[str, Any]:
    if settings is None:
        settings = load_settings_config()
    payload = settings.get(name) or {}
    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"settings section {name!r} must be a mapping")
    return payload


def _coerce(
    section: str,
    payload: Mapping[str, Any],
    key: str,
    cast: Callable[[Any], _T],
    default: _T,
) -> _T:
    if key not in payload or payload[key] is None:
        return default
    try:
        return cast(payload[key])
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"invalid value for {section}.{key}: {payload[key]!r}"
        ) from exc


def _strict_int(value: Any) -> int:
    """Accept integers and integral floats; reject booleans and fractions."""

    if isinstance(value, bool):
        raise TypeError(f"expected an integer, got boolean {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def load_discretizer_config(settings: Optional[Mapping[str, Any]] = None) -> DiscretizerConfig:
    """Build the band edges from the ``discretizer`` section."""

    payload = _section(settings, "discretizer")
    defaults = DiscretizerConfig()
    return DiscretizerConfig(
        low_upper=_coerce("discretizer", payload, "low_upper", _strict_int, defaults.low_upper),
        mid_upper=_coerce("discretizer", payload, "mid_upper", _strict_int, defaults.mid_upper),
    )


def load_scoring_policy(settings: Optional[Mapping[str, Any]] = None) -> ScoringPolicy:
    """Build the class priors and smoothing floor from the ``scoring`` section."""

    payload = _section(settings, "scoring")
    defaults = ScoringPolicy()

    priors = dict(defaults.priors)
    configured = payload.get("priors") or {}
    if not isinstance(configured, Mapping):
        raise ConfigurationError("scoring.priors must map labels to probabilities")
    for token in configured:
        try:
            label = Label(str(token))
        except ValueError as exc:
            raise ConfigurationError(f"unknown label {token!r} in scoring.priors") from exc
        priors[label] = _coerce("scoring.priors", configured, token, float, priors[label])

    return ScoringPolicy(
        smoothing_floor=_coerce(
            "scoring", payload, "smoothing_floor", float, defaults.smoothing_floor
        ),
        priors=priors,
    )


def load_cost_matrix(settings: Optional[Mapping[str, Any]] = None) -> CostMatrix:
    """Build the cost matrix from the ``costs`` section."""

    payload = _section(settings, "costs")
    defaults = CostMatrix()
    values = {
        name: _coerce("costs", payload, name, _strict_int, getattr(defaults, name))
        for name in ("true_positive", "false_positive", "false_negative", "true_negative")
    }
    return CostMatrix(**values)


def _configured_path(payload: Mapping[str, Any], key: str, default: Path) -> Path:
    if not payload.get(key):
        return default
    return file_locator.resolve_path(payload[key])


def load_paths_config(settings: Optional[Mapping[str, Any]] = None) -> PathsConfig:
    """Resolve the ``paths`` section relative to the project root."""

    payload = _section(settings, "paths")
    return PathsConfig(
        train=_configured_path(payload, "train", file_locator.get_data_path("train.txt")),
        eval=_configured_path(payload, "eval", file_locator.get_data_path("eval.txt")),
        predictions_log=file_locator.resolve_path(
            payload.get("predictions_log") or "predictions_log.txt"
        ),
    )


__all__ = [
    "PathsConfig",
    "load_cost_matrix",
    "load_discretizer_config",
    "load_paths_config",
    "load_scoring_policy",
    "load_settings_config",
    "load_yaml_config",
]
