from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def _run(*args: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    cmd = [sys.executable, str(ROOT / "scripts" / "demo.py"), *args]
    return subprocess.run(cmd, check=False, capture_output=True, text=True, cwd=ROOT, env=env)


def test_demo_quiet_run() -> None:
    result = _run("--steps", "3", "--quiet")
    assert result.returncode == 0, result.stderr
    assert "Account: 0x1, funds=" in result.stdout
    assert "Pool: asset: inj:100000000000000000000 usdt:800000000" in result.stdout
    assert "usdt:803000000" in result.stdout


def test_demo_stops_cleanly_when_funds_run_out() -> None:
    # the account holds 1000 usdt; a 600 usdt bid succeeds once
    result = _run("--steps", "3", "--bid", "600000000")
    assert result.returncode == 0, result.stderr
    assert "buy 1-th" in result.stdout
    assert "stopped at buy 2: insufficient funds" in result.stdout


def test_demo_rejects_negative_steps() -> None:
    result = _run("--steps", "-1")
    assert result.returncode == 2


def test_pool_import_does_not_load_charting_stack() -> None:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT / "src"), env.get("PYTHONPATH")]))
    code = (
        "import sys, amm_pool\n"
        "from amm_pool import Pool, Account, PoolHistory\n"
        "loaded = [m for m in ('pandas', 'seaborn', 'matplotlib') if m in sys.modules]\n"
        "print('loaded:', loaded)\n"
        "sys.exit(1 if loaded else 0)\n"
    )
    result = subprocess.run([sys.executable, "-c", code], check=False, capture_output=True, text=True, cwd=ROOT, env=env)
    assert result.returncode == 0, result.stdout + result.stderr
