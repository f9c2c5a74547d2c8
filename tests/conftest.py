# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    # Ensure `src` is importable when running tests from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    if src_dir.exists():
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def write_csv(tmp_path: Path):
    """Return a helper that writes CSV text into tmp_path and returns its path."""
    def _write(text: str, name: str = "input.csv") -> Path:
        p = tmp_path / name
        p.write_text(text)
        return p
    return _write


@pytest.fixture
def measurements_csv(write_csv):
    """CSV with a header and twenty rows; measurement column holds 1.0 .. 20.0."""
    rows = "\n".join(f"{i},{float(i)}" for i in range(1, 21))
    return write_csv(f"time,power\n{rows}\n")
