from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


@pytest.mark.skipif(shutil.which("ruff") is None, reason="ruff not installed")
def test_ruff_format_and_check() -> None:
    # A ruff binary on PATH may still fail to start; skip in that case.
    try:
        subprocess.run(["ruff", "--version"], check=True, capture_output=True)
    except Exception:  # noqa: BLE001
        pytest.skip("ruff not runnable")

    targets = ["src", "tests"]
    subprocess.run(["ruff", "format", "--check", *targets], check=True, cwd=ROOT)
    subprocess.run(["ruff", "check", *targets], check=True, cwd=ROOT)
