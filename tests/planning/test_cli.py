import json
import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(
        [sys.executable, "scripts/run_drop_planner.py", *args],
        cwd=REPO_ROOT,
        capture_output=True,
        text=True,
        env=env,
    )


def test_cli_prints_plan_as_json(tmp_path: Path) -> None:
    out = tmp_path / "plan.json"
    result = _run(
        "--start", "0,0",
        "--end", "1000,0",
        "--target", "500,200",
        "--config", "configs/default.yaml",
        "--output", str(out),
    )

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["reachable"] is True
    assert payload["policy"] == "variable-height"
    assert len(payload["exit_point"]) == 2
    assert json.loads(out.read_text(encoding="utf-8")) == payload


def test_cli_reports_unreachable_target() -> None:
    result = _run(
        "--start", "0,0",
        "--end", "1000,0",
        "--target", "500,50000",
        "--policy", "fixed-height",
    )

    assert result.returncode == 0, result.stderr
    payload = json.loads(result.stdout)
    assert payload["reachable"] is False
    assert payload["total_time"] is None
    assert "Infinity" not in result.stdout
    assert "unreachable" in result.stderr


def test_cli_rejects_bad_point() -> None:
    result = _run("--start", "0", "--end", "1000,0", "--target", "500,200")
    assert result.returncode != 0
