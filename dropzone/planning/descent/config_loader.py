"""YAML loader for drop planner configuration."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml  # type: ignore[import-untyped]

from .configs import DEFAULT_POLICY, DEFAULT_UNIT_SCALE, PhysicalParameters, PlannerConfig

_PHYSICS_DEFAULTS = PhysicalParameters()


def _load_physics(data: Mapping[str, Any] | None) -> PhysicalParameters:
    data = data or {}
    unknown = set(data) - set(_PHYSICS_DEFAULTS.as_dict())
    if unknown:
        raise ValueError(f"Unknown physics keys: {sorted(unknown)}")
    values = {key: float(data.get(key, default)) for key, default in _PHYSICS_DEFAULTS.as_dict().items()}
    return PhysicalParameters(**values)


def _load_unit_scale(raw: Mapping[str, Any]) -> float:
    # Either an explicit meters-per-pixel factor or a reference measurement.
    if "unit_scale" in raw:
        return float(raw["unit_scale"])
    reference = raw.get("reference")
    if reference:
        pixels = float(reference["pixels"])
        if pixels <= 0:
            raise ValueError(f"reference.pixels must be positive, got {pixels!r}")
        return float(reference["meters"]) / pixels
    return DEFAULT_UNIT_SCALE


def planner_config_from_dict(raw: Mapping[str, Any]) -> PlannerConfig:
    return PlannerConfig(
        physics=_load_physics(raw.get("physics")),
        unit_scale=_load_unit_scale(raw),
        policy=str(raw.get("policy", DEFAULT_POLICY)),
        intervals=int(raw.get("intervals", 400)),
        fall_drift_tolerance_m=float(raw.get("fall_drift_tolerance_m", 1.0)),
        min_segment_length=float(raw.get("min_segment_length", 1.0)),
    )


def load_planner_config(path: Path) -> PlannerConfig:
    """Load PlannerConfig from a YAML file."""
    with path.open("r", encoding="utf-8") as fp:
        raw: Dict[str, Any] = yaml.safe_load(fp) or {}
    return planner_config_from_dict(raw)


def resolve_planner_config(
    path: Optional[Path] = None,
    policy: Optional[str] = None,
    unit_scale: Optional[float] = None,
) -> PlannerConfig:
    """Loads a config (or the defaults) and applies command-line overrides."""
    config = load_planner_config(path) if path else PlannerConfig()
    overrides: Dict[str, Any] = {}
    if policy is not None:
        overrides["policy"] = policy
    if unit_scale is not None:
        overrides["unit_scale"] = unit_scale
    # replace() re-runs PlannerConfig validation
    return dataclasses.replace(config, **overrides) if overrides else config


__all__ = ["load_planner_config", "planner_config_from_dict", "resolve_planner_config"]
