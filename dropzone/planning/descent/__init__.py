"""Minimum-time drop planning from a straight transport path.

A uniform line search over exit points on the transport segment, combined with
a closed-form descent model (free fall followed by a canopy glide) selected as
a named policy.
"""

from .config_loader import load_planner_config, planner_config_from_dict, resolve_planner_config
from .configs import DEFAULT_POLICY, DEFAULT_UNIT_SCALE, PhysicalParameters, PlannerConfig
from .geometry import Point, add, distance, heading, normalize, point_on_segment, scale, subtract
from .policies import POLICIES, DescentPolicy, FixedHeightAutoDeploy, VariableHeightDeploy, build_policy
from .results import DescentLeg, TrajectoryResult
from .session import parse_point, plan_insertion
from .solver import TrajectoryOptimizer, optimize

__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_UNIT_SCALE",
    "DescentLeg",
    "DescentPolicy",
    "FixedHeightAutoDeploy",
    "POLICIES",
    "PhysicalParameters",
    "PlannerConfig",
    "Point",
    "TrajectoryOptimizer",
    "TrajectoryResult",
    "VariableHeightDeploy",
    "add",
    "build_policy",
    "distance",
    "heading",
    "load_planner_config",
    "normalize",
    "optimize",
    "parse_point",
    "plan_insertion",
    "planner_config_from_dict",
    "point_on_segment",
    "resolve_planner_config",
    "scale",
    "subtract",
]
