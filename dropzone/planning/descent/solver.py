"""Uniform line search for the minimum-time exit point on a transport segment."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .configs import DEFAULT_POLICY, DEFAULT_UNIT_SCALE, PhysicalParameters, PlannerConfig
from .geometry import Point, distance, heading, point_on_segment
from .policies import POLICIES, DescentPolicy, build_policy
from .results import TrajectoryResult

logger = logging.getLogger(__name__)


class TrajectoryOptimizer:
    """Samples exit points along A -> B and keeps the fastest valid descent.

    The descent model is piecewise in the exit position, so a fixed-resolution
    sweep is used instead of a continuous minimizer. Samples are visited in
    increasing ``t`` and only a strictly faster candidate replaces the current
    best, so ties resolve to the earliest exit.
    """

    def __init__(self, config: Optional[PlannerConfig] = None) -> None:
        self.config = config or PlannerConfig()
        if self.config.policy not in POLICIES:
            raise ValueError(
                f"Unknown descent policy {self.config.policy!r}; expected one of {sorted(POLICIES)}"
            )

    def build_policy(self) -> DescentPolicy:
        cfg = self.config
        return build_policy(cfg.policy, cfg.physics, cfg.unit_scale, cfg.fall_drift_tolerance_m)

    def exit_fractions(self) -> np.ndarray:
        """Sample positions t = i / intervals for i = 0..intervals."""
        return np.arange(self.config.intervals + 1, dtype=float) / self.config.intervals

    def optimize(self, start: Point, end: Point, target: Point) -> TrajectoryResult:
        """Returns the minimum-time plan from the transport segment to ``target``."""
        policy = self.build_policy()
        transport_speed = self.config.physics.transport_speed
        transport_heading = heading(start, end)

        best = TrajectoryResult.unreachable(policy.name)
        valid = 0
        for fraction in self.exit_fractions():
            t = float(fraction)
            exit_point = point_on_segment(start, end, t)
            leg = policy.descend(exit_point, target, transport_heading)
            if leg is None:
                continue
            valid += 1
            transport_time = distance(start, exit_point) * policy.unit_scale / transport_speed
            total = transport_time + leg.fall_time + leg.glide_time
            if total < best.total_time:
                best = TrajectoryResult.from_leg(policy.name, t, exit_point, transport_time, leg)

        if best.reachable:
            logger.debug(
                "policy=%s valid=%d/%d t=%.4f total=%.2fs (transport=%.2f fall=%.2f glide=%.2f)",
                policy.name,
                valid,
                self.config.intervals + 1,
                best.exit_fraction,
                best.total_time,
                best.transport_time,
                best.fall_time,
                best.glide_time,
            )
        else:
            logger.debug("policy=%s: no exit point reaches target %s", policy.name, target.as_tuple())
        return best


def optimize(
    start: Point,
    end: Point,
    target: Point,
    params: Optional[PhysicalParameters] = None,
    unit_scale: float = DEFAULT_UNIT_SCALE,
    policy: str = DEFAULT_POLICY,
    intervals: int = 400,
) -> TrajectoryResult:
    """Finds the exit point on ``start`` -> ``end`` that reaches ``target`` soonest.

    Raises ValueError for invalid configuration (non-positive speeds or scale,
    deploy altitude at or above the transport, unknown policy). An unreachable
    target is reported through ``TrajectoryResult.reachable``, never raised.
    """
    config = PlannerConfig(
        physics=params or PhysicalParameters(),
        unit_scale=unit_scale,
        policy=policy,
        intervals=intervals,
    )
    return TrajectoryOptimizer(config).optimize(start, end, target)


__all__ = ["TrajectoryOptimizer", "optimize"]
