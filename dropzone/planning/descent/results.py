"""Result types returned by the descent policies and the line search."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

from .geometry import Point


@dataclass(frozen=True)
class DescentLeg:
    """Free-fall and glide portion of a single candidate trajectory."""

    fall_time: float
    glide_time: float
    fall_distance_m: float
    glide_distance_m: float
    transition_point: Point


@dataclass(frozen=True)
class TrajectoryResult:
    """Minimum-time plan, or the unreachable sentinel.

    When ``reachable`` is true, ``exit_point`` (J) lies on the transport segment
    at ``exit_fraction`` and ``transition_point`` (G) marks where the canopy
    opens. ``total_time`` is the sum of the three phase durations.
    """

    reachable: bool
    total_time: float
    policy: str
    transport_time: float = 0.0
    fall_time: float = 0.0
    glide_time: float = 0.0
    fall_distance_m: float = 0.0
    glide_distance_m: float = 0.0
    exit_fraction: Optional[float] = None
    exit_point: Optional[Point] = None
    transition_point: Optional[Point] = None

    @classmethod
    def unreachable(cls, policy: str) -> "TrajectoryResult":
        return cls(reachable=False, total_time=math.inf, policy=policy)

    @classmethod
    def from_leg(
        cls,
        policy: str,
        exit_fraction: float,
        exit_point: Point,
        transport_time: float,
        leg: DescentLeg,
    ) -> "TrajectoryResult":
        return cls(
            reachable=True,
            total_time=transport_time + leg.fall_time + leg.glide_time,
            policy=policy,
            transport_time=transport_time,
            fall_time=leg.fall_time,
            glide_time=leg.glide_time,
            fall_distance_m=leg.fall_distance_m,
            glide_distance_m=leg.glide_distance_m,
            exit_fraction=exit_fraction,
            exit_point=exit_point,
            transition_point=leg.transition_point,
        )

    def as_dict(self) -> Dict[str, object]:
        """JSON-ready view; the unreachable sentinel reports ``total_time`` as None."""
        if not self.reachable:
            return {"reachable": False, "total_time": None, "policy": self.policy}
        return {
            "reachable": True,
            "total_time": self.total_time,
            "policy": self.policy,
            "transport_time": self.transport_time,
            "fall_time": self.fall_time,
            "glide_time": self.glide_time,
            "fall_distance_m": self.fall_distance_m,
            "glide_distance_m": self.glide_distance_m,
            "exit_fraction": self.exit_fraction,
            "exit_point": list(self.exit_point.as_tuple()),
            "transition_point": list(self.transition_point.as_tuple()),
        }


__all__ = ["DescentLeg", "TrajectoryResult"]
