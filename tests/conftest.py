"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def registry():
    """Fresh, empty employee registry."""
    from store.registry import EmployeeRegistry

    return EmployeeRegistry()


@pytest.fixture
def importer(registry):
    """Importer bound to the ``registry`` fixture with default config."""
    from core.config import RosterConfig
    from ingest.importer import EmployeeImporter

    return EmployeeImporter(registry, RosterConfig())
