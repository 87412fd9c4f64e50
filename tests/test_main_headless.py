from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"


def _run(*args: str, **env_overrides: str) -> subprocess.CompletedProcess:
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))
    env["PYTHONIOENCODING"] = "utf-8"
    env.update(env_overrides)
    cmd = [sys.executable, "-m", "straight_ahead", *args]
    return subprocess.run(cmd, capture_output=True, text=True, encoding="utf-8", env=env, timeout=30)


def test_headless_entrypoint_exits_successfully():
    proc = _run("--max-steps", "3", "--tick-rate", "0", SA_HEADLESS="1")

    assert proc.returncode == 0, proc.stderr
    assert "Straight Ahead! (headless)" in proc.stdout
    assert ">┼┼─" in proc.stdout
    assert "Loop complete (steps=3)" in proc.stdout


def test_headless_command_script():
    proc = _run(
        "--headless", "--max-steps", "1", "--tick-rate", "0",
        "--commands", "a", "a", "a", "rotate 0,3", "a",
    )

    assert proc.returncode == 0, proc.stderr
    assert proc.stdout.strip().splitlines()[-2] == "player at (3,1) facing south"


def test_bad_command_exits_with_usage_code():
    proc = _run("--headless", "--max-steps", "1", "--tick-rate", "0", "--commands", "fly")
    assert proc.returncode == 2
    assert "unknown command" in proc.stderr


def test_off_board_rotation_exits_with_usage_code():
    proc = _run("--headless", "--max-steps", "1", "--tick-rate", "0", "--commands", "r:7,7")
    assert proc.returncode == 2
    assert "out of bounds" in proc.stderr


def test_bad_layout_path(tmp_path):
    proc = _run("--headless", "--max-steps", "1", "--layout", str(tmp_path / "missing.yaml"))
    assert proc.returncode == 2
    assert "cannot read layout" in proc.stderr
