"""Test setup for classy."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running the end-to-end tests selectively:
        pytest -m cli       # run only command-line tests
        pytest -m "not cli" # skip them
    """
    config.addinivalue_line(
        "markers",
        "cli: marks tests that drive the command-line entry point",
    )


@pytest.fixture
def write_html(tmp_path: Path):
    """Write an HTML file under ``tmp_path`` and return its path."""

    def _write(relative: str, body: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            f'<html><head><meta charset="utf-8"></head><body>{body}</body></html>',
            encoding="utf-8",
        )
        return path

    return _write
