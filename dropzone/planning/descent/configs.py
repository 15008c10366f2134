"""Configuration for the drop trajectory optimizer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict

DEFAULT_POLICY = "variable-height"
# Reference map: 490 m spans 335 px.
DEFAULT_UNIT_SCALE = 490.0 / 335.0


@dataclass(frozen=True)
class PhysicalParameters:
    """Speeds (m/s) and altitudes (m) of the transport and the descent.

    ``deploy_altitude`` is read by the active descent policy: it is the lowest
    allowed canopy opening height for ``variable-height`` and the automatic
    opening height for ``fixed-height``.
    """

    transport_speed: float = 73.3
    fall_horizontal_speed: float = 14.5
    fall_vertical_speed: float = 32.0
    glide_horizontal_speed: float = 17.0
    glide_vertical_speed: float = 7.0
    transport_altitude: float = 832.0
    deploy_altitude: float = 30.0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Rejects parameter sets that would produce meaningless trajectories."""
        for name, value in self.as_dict().items():
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value!r}")
        for name in (
            "transport_speed",
            "fall_horizontal_speed",
            "fall_vertical_speed",
            "glide_horizontal_speed",
            "glide_vertical_speed",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value!r}")
        if self.deploy_altitude < 0:
            raise ValueError(f"deploy_altitude must be non-negative, got {self.deploy_altitude!r}")
        if self.transport_altitude <= self.deploy_altitude:
            raise ValueError(
                f"transport_altitude ({self.transport_altitude}) must exceed "
                f"deploy_altitude ({self.deploy_altitude})"
            )

    @property
    def drop_height(self) -> float:
        """Height available for free fall before the canopy opens."""
        return self.transport_altitude - self.deploy_altitude

    def as_dict(self) -> Dict[str, float]:
        return {
            "transport_speed": self.transport_speed,
            "fall_horizontal_speed": self.fall_horizontal_speed,
            "fall_vertical_speed": self.fall_vertical_speed,
            "glide_horizontal_speed": self.glide_horizontal_speed,
            "glide_vertical_speed": self.glide_vertical_speed,
            "transport_altitude": self.transport_altitude,
            "deploy_altitude": self.deploy_altitude,
        }


def validate_unit_scale(unit_scale: float) -> float:
    unit_scale = float(unit_scale)
    if not math.isfinite(unit_scale) or unit_scale <= 0:
        raise ValueError(f"unit_scale must be a positive finite number, got {unit_scale!r}")
    return unit_scale


@dataclass
class PlannerConfig:
    """Top-level configuration for a drop planning session."""

    physics: PhysicalParameters = field(default_factory=PhysicalParameters)
    unit_scale: float = DEFAULT_UNIT_SCALE  # meters per map pixel
    policy: str = DEFAULT_POLICY
    intervals: int = 400  # line search evaluates intervals + 1 exit points
    fall_drift_tolerance_m: float = 1.0
    min_segment_length: float = 1.0  # pixels; shorter transport paths are not planned

    def __post_init__(self) -> None:
        self.unit_scale = validate_unit_scale(self.unit_scale)
        if self.intervals < 1:
            raise ValueError(f"intervals must be at least 1, got {self.intervals!r}")
        if self.fall_drift_tolerance_m < 0:
            raise ValueError(
                f"fall_drift_tolerance_m must be non-negative, got {self.fall_drift_tolerance_m!r}"
            )

    def as_dict(self) -> Dict[str, object]:
        return {
            "physics": self.physics.as_dict(),
            "unit_scale": self.unit_scale,
            "policy": self.policy,
            "intervals": self.intervals,
            "fall_drift_tolerance_m": self.fall_drift_tolerance_m,
            "min_segment_length": self.min_segment_length,
        }


__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_UNIT_SCALE",
    "PhysicalParameters",
    "PlannerConfig",
    "validate_unit_scale",
]
