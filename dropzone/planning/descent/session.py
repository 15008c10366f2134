"""Entry points for a map front end that re-plans on every marker change."""

from __future__ import annotations

import logging
import math
from typing import Optional

from .configs import PlannerConfig
from .geometry import Point, distance
from .results import TrajectoryResult
from .solver import TrajectoryOptimizer

logger = logging.getLogger(__name__)


def parse_point(text: str) -> Point:
    """Parses ``"x,y"`` into a Point."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Expected 'x,y', got {text!r}")
    try:
        x, y = (float(part) for part in parts)
    except ValueError as exc:
        raise ValueError(f"Invalid coordinates in {text!r}") from exc
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Coordinates must be finite, got {text!r}")
    return Point(x, y)


def plan_insertion(
    start: Point,
    end: Point,
    target: Point,
    config: Optional[PlannerConfig] = None,
) -> TrajectoryResult:
    """Plans a drop, skipping transport paths too short to sweep meaningfully."""
    optimizer = TrajectoryOptimizer(config)
    cfg = optimizer.config
    if distance(start, end) < cfg.min_segment_length:
        logger.info(
            "Transport path %s -> %s shorter than %.2f px; not planning",
            start.as_tuple(),
            end.as_tuple(),
            cfg.min_segment_length,
        )
        return TrajectoryResult.unreachable(cfg.policy)
    result = optimizer.optimize(start, end, target)
    if not result.reachable:
        logger.info("Target %s unreachable under policy %s", target.as_tuple(), cfg.policy)
    return result


__all__ = ["parse_point", "plan_insertion"]
