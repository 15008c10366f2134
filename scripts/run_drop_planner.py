#!/usr/bin/env python
"""Compute the minimum-time exit and canopy points for a transport path and target."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dropzone.planning.descent import (
    POLICIES,
    PlannerConfig,
    parse_point,
    plan_insertion,
    resolve_planner_config,
)

logger = logging.getLogger("run_drop_planner")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find where to leave the transport to reach a target soonest."
    )
    parser.add_argument("--start", type=parse_point, required=True, help="Transport start 'x,y' (px)")
    parser.add_argument("--end", type=parse_point, required=True, help="Transport end 'x,y' (px)")
    parser.add_argument("--target", type=parse_point, required=True, help="Landing target 'x,y' (px)")
    parser.add_argument("--config", type=Path, default=None, help="Planner YAML config")
    parser.add_argument(
        "--policy",
        choices=sorted(POLICIES),
        default=None,
        help="Descent policy (overrides config)",
    )
    parser.add_argument(
        "--unit-scale", type=float, default=None, help="Meters per pixel (overrides config)"
    )
    parser.add_argument("--output", type=Path, default=None, help="Write the JSON result here")
    parser.add_argument("--verbose", action="store_true", help="Log per-run diagnostics")
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> PlannerConfig:
    return resolve_planner_config(args.config, policy=args.policy, unit_scale=args.unit_scale)


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = build_config(args)
    result = plan_insertion(args.start, args.end, args.target, config)
    if result.reachable:
        logger.info(
            "Exit at %s, open canopy at %s, total %.1fs",
            result.exit_point.as_tuple(),
            result.transition_point.as_tuple(),
            result.total_time,
        )
    else:
        logger.warning("Target unreachable with policy %s", config.policy)

    text = json.dumps(result.as_dict(), indent=2, allow_nan=False)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(text, encoding="utf-8")
        logger.info("Saved plan to %s", args.output)
    print(text)


if __name__ == "__main__":
    main()
