"""Pytest configuration for the `tests/` suite.

Puts the repository root on `sys.path` so the suite also runs from a plain
checkout, and provides the fixtures shared by the view, component and
application tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))

from termdash.app import DashboardApp  # noqa: E402
from termdash.styles import create_palette  # noqa: E402


@pytest.fixture
def palette():
    return create_palette()


@pytest.fixture
def app(palette):
    return DashboardApp(palette=palette)
