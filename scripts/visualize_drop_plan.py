#!/usr/bin/env python
"""Plot a drop plan: transport path, free fall J->G and glide G->T."""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from dropzone.planning.descent import (  # noqa: E402
    POLICIES,
    Point,
    TrajectoryResult,
    parse_point,
    plan_insertion,
    resolve_planner_config,
)


def plot_plan(start: Point, end: Point, target: Point, result: TrajectoryResult):
    fig, ax = plt.subplots(figsize=(5.0, 5.0))
    path = np.stack([start.as_array(), end.as_array()])
    ax.plot(path[:, 0], path[:, 1], ls="--", color="0.4", lw=1.5, label="transport")
    ax.scatter(*target.as_tuple(), marker="x", color="k", zorder=3, label="T")
    if result.reachable:
        j = result.exit_point.as_array()
        g = result.transition_point.as_array()
        t = target.as_array()
        ax.plot([j[0], g[0]], [j[1], g[1]], ls="--", color="#ef4444", lw=1.5, label="free fall")
        ax.plot([g[0], t[0]], [g[1], t[1]], color="#4ade80", lw=1.5, label="glide")
        ax.scatter(*j, color="#ef4444", zorder=3, label="J")
        ax.scatter(*g, color="#4ade80", zorder=3, label="G")
        ax.set_title(f"{result.policy}: {result.total_time:.1f} s", fontsize=10)
    else:
        ax.set_title(f"{result.policy}: unreachable", fontsize=10)
    # map images use a downward y axis
    ax.invert_yaxis()
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("x (px)")
    ax.set_ylabel("y (px)")
    ax.legend(fontsize=6, frameon=False)
    ax.grid(True, alpha=0.2)
    plt.tight_layout()
    return fig


def main() -> None:
    parser = argparse.ArgumentParser(description="Plan a drop and save the plot as PNG.")
    parser.add_argument("--start", type=parse_point, required=True, help="Transport start 'x,y' (px)")
    parser.add_argument("--end", type=parse_point, required=True, help="Transport end 'x,y' (px)")
    parser.add_argument("--target", type=parse_point, required=True, help="Landing target 'x,y' (px)")
    parser.add_argument("--config", type=Path, default=None, help="Planner YAML config")
    parser.add_argument("--policy", choices=sorted(POLICIES), default=None, help="Descent policy")
    parser.add_argument("--output", type=Path, default=Path("results/drop_plan.png"), help="PNG path")
    args = parser.parse_args()

    config = resolve_planner_config(args.config, policy=args.policy)
    result = plan_insertion(args.start, args.end, args.target, config)
    fig = plot_plan(args.start, args.end, args.target, result)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(args.output, dpi=200)
    plt.close(fig)
    print(f"Saved {args.output}")


if __name__ == "__main__":
    main()
