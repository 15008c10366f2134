"""Descent physics: how a jumper gets from the exit point to the target.

Two deployment rules are supported and selected by name once per
optimization run:

``variable-height``
    The canopy opens at whatever height makes the horizontal distance work,
    never below ``deploy_altitude``. Both phases steer towards the target.
``fixed-height``
    The canopy opens automatically at ``deploy_altitude``, so both phase
    durations are constants. Free fall drifts along the transport heading;
    only the glide can correct towards the target.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from .configs import PhysicalParameters, validate_unit_scale
from .geometry import Point, add, distance, normalize, scale, subtract
from .results import DescentLeg

logger = logging.getLogger(__name__)

_DEGENERATE_EPS = 1e-9


class DescentPolicy(ABC):
    """Base class for descent models bound to one parameter set and map scale."""

    name: str

    def __init__(
        self,
        params: PhysicalParameters,
        unit_scale: float,
        fall_drift_tolerance_m: float = 1.0,
    ) -> None:
        params.validate()
        self.params = params
        self.unit_scale = validate_unit_scale(unit_scale)
        self.fall_drift_tolerance_m = fall_drift_tolerance_m

    def required_distance(self, exit_point: Point, target: Point) -> float:
        """Horizontal distance (m) from the exit point to the target."""
        return distance(exit_point, target) * self.unit_scale

    @property
    @abstractmethod
    def max_reach(self) -> float:
        """Largest horizontal distance (m) this policy can ever cover."""
        raise NotImplementedError

    @abstractmethod
    def descend(self, exit_point: Point, target: Point, transport_heading: Point) -> Optional[DescentLeg]:
        """Returns the descent from ``exit_point`` to ``target``, or None if it cannot land there."""
        raise NotImplementedError


class VariableHeightDeploy(DescentPolicy):
    """Canopy opens at any height not below ``deploy_altitude``."""

    name = "variable-height"

    def __init__(
        self,
        params: PhysicalParameters,
        unit_scale: float,
        fall_drift_tolerance_m: float = 1.0,
    ) -> None:
        super().__init__(params, unit_scale, fall_drift_tolerance_m)
        self.max_fall_time = params.drop_height / params.fall_vertical_speed
        self.max_fall_drift = params.fall_horizontal_speed * self.max_fall_time
        self.min_glide_time = params.deploy_altitude / params.glide_vertical_speed
        self.min_glide_drift = params.glide_horizontal_speed * self.min_glide_time
        self.envelope = self.max_fall_drift + self.min_glide_drift

        # Beyond the envelope: d = c1 * t_fall + c2, from
        #   d = v_fh * t_fall + v_gh * t_glide
        #   H = v_fv * t_fall + v_gv * t_glide
        glide_ratio = params.glide_horizontal_speed / params.glide_vertical_speed
        self._c1 = params.fall_horizontal_speed - params.fall_vertical_speed * glide_ratio
        self._c2 = glide_ratio * params.transport_altitude
        self._extended = abs(self._c1) >= _DEGENERATE_EPS
        if not self._extended:
            logger.debug(
                "Fall and glide slopes coincide (c1=%.3g); targets beyond %.1f m are unreachable",
                self._c1,
                self.envelope,
            )

    @property
    def max_reach(self) -> float:
        if not self._extended:
            return self.envelope
        # Endpoints of the extended regime: all glide (t_fall = 0) or all fall (t_glide = 0).
        p = self.params
        fall_only = p.fall_horizontal_speed * p.transport_altitude / p.fall_vertical_speed
        return max(self.envelope, self._c2, fall_only)

    def descend(self, exit_point: Point, target: Point, transport_heading: Point) -> Optional[DescentLeg]:
        required = self.required_distance(exit_point, target)
        direction = normalize(subtract(target, exit_point))
        if required <= self.envelope:
            return self._within_envelope(exit_point, target, direction, required)
        return self._beyond_envelope(exit_point, direction, required)

    def _within_envelope(
        self, exit_point: Point, target: Point, direction: Point, required: float
    ) -> Optional[DescentLeg]:
        fall_cap = min(required, self.max_fall_drift)
        glide = max(required - fall_cap, self.min_glide_drift)
        # G sits one glide length short of the target on the J -> T line.
        transition = subtract(target, scale(direction, glide / self.unit_scale))
        fall = distance(exit_point, transition) * self.unit_scale
        if fall > self.max_fall_drift + self.fall_drift_tolerance_m:
            return None
        return DescentLeg(
            fall_time=self.max_fall_time,
            glide_time=glide / self.params.glide_horizontal_speed,
            fall_distance_m=fall,
            glide_distance_m=glide,
            transition_point=transition,
        )

    def _beyond_envelope(self, exit_point: Point, direction: Point, required: float) -> Optional[DescentLeg]:
        if not self._extended:
            return None
        p = self.params
        fall_time = (required - self._c2) / self._c1
        glide_time = (p.transport_altitude - p.fall_vertical_speed * fall_time) / p.glide_vertical_speed
        if not (math.isfinite(fall_time) and math.isfinite(glide_time)):
            return None
        if fall_time < 0 or glide_time < 0:
            return None
        fall = p.fall_horizontal_speed * fall_time
        return DescentLeg(
            fall_time=fall_time,
            glide_time=glide_time,
            fall_distance_m=fall,
            glide_distance_m=p.glide_horizontal_speed * glide_time,
            transition_point=add(exit_point, scale(direction, fall / self.unit_scale)),
        )


class FixedHeightAutoDeploy(DescentPolicy):
    """Canopy opens automatically at ``deploy_altitude``; free fall follows the transport."""

    name = "fixed-height"

    def __init__(
        self,
        params: PhysicalParameters,
        unit_scale: float,
        fall_drift_tolerance_m: float = 1.0,
    ) -> None:
        super().__init__(params, unit_scale, fall_drift_tolerance_m)
        self.fall_time = params.drop_height / params.fall_vertical_speed
        self.glide_time = params.deploy_altitude / params.glide_vertical_speed
        self.max_fall_drift = params.fall_horizontal_speed * self.fall_time
        self.max_glide_drift = params.glide_horizontal_speed * self.glide_time

    @property
    def max_reach(self) -> float:
        return self.max_fall_drift + self.max_glide_drift

    def descend(self, exit_point: Point, target: Point, transport_heading: Point) -> Optional[DescentLeg]:
        required = self.required_distance(exit_point, target)
        if required > self.max_reach:
            return None
        fall = min(required, self.max_fall_drift)
        return DescentLeg(
            fall_time=self.fall_time,
            glide_time=self.glide_time,
            fall_distance_m=fall,
            glide_distance_m=required - fall,
            transition_point=add(exit_point, scale(transport_heading, fall / self.unit_scale)),
        )


POLICIES: Dict[str, Type[DescentPolicy]] = {
    VariableHeightDeploy.name: VariableHeightDeploy,
    FixedHeightAutoDeploy.name: FixedHeightAutoDeploy,
}


def build_policy(
    name: str,
    params: PhysicalParameters,
    unit_scale: float,
    fall_drift_tolerance_m: float = 1.0,
) -> DescentPolicy:
    """Instantiates the descent policy registered under ``name``."""
    try:
        policy_cls = POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown descent policy {name!r}; expected one of {sorted(POLICIES)}") from None
    return policy_cls(params, unit_scale, fall_drift_tolerance_m)


__all__ = [
    "DescentPolicy",
    "FixedHeightAutoDeploy",
    "POLICIES",
    "VariableHeightDeploy",
    "build_policy",
]
