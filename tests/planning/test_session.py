import logging

import pytest

from dropzone.planning.descent.configs import PlannerConfig
from dropzone.planning.descent.geometry import Point
from dropzone.planning.descent.session import parse_point, plan_insertion
from dropzone.planning.descent.solver import TrajectoryOptimizer


def test_parse_point() -> None:
    assert parse_point("12.5,-3") == Point(12.5, -3.0)
    assert parse_point(" 4 , 5 ") == Point(4.0, 5.0)


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b", "1,nan", "inf,2"])
def test_parse_point_rejects_malformed_input(text: str) -> None:
    with pytest.raises(ValueError):
        parse_point(text)


def test_plan_insertion_skips_short_transport_path(caplog, default_config: PlannerConfig) -> None:
    start = Point(100.0, 100.0)
    end = Point(100.5, 100.0)
    with caplog.at_level(logging.INFO):
        result = plan_insertion(start, end, Point(120.0, 100.0), default_config)

    assert not result.reachable
    assert "shorter than" in caplog.text


def test_plan_insertion_matches_optimizer() -> None:
    config = PlannerConfig(policy="fixed-height")
    start, end, target = Point(0.0, 0.0), Point(800.0, 0.0), Point(400.0, 150.0)

    result = plan_insertion(start, end, target, config)

    assert result.reachable
    assert result == TrajectoryOptimizer(config).optimize(start, end, target)
