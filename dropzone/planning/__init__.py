"""Planning modules for dropzone."""

from .descent.configs import PhysicalParameters, PlannerConfig
from .descent.geometry import Point
from .descent.results import TrajectoryResult
from .descent.session import plan_insertion
from .descent.solver import TrajectoryOptimizer, optimize

__all__ = [
    "PhysicalParameters",
    "PlannerConfig",
    "Point",
    "TrajectoryOptimizer",
    "TrajectoryResult",
    "optimize",
    "plan_insertion",
]
