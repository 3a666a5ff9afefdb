"""Pytest fixtures for infrastructure tests."""

from pathlib import Path

import pytest


@pytest.fixture
def package_root() -> Path:
    """Return the platform_infra package directory."""
    return Path(__file__).parent.parent.parent / "platform_infra"


@pytest.fixture
def python_files_in_package(package_root) -> list[Path]:
    """Return all Python files in the package."""
    return [f for f in package_root.rglob("*.py") if "__pycache__" not in str(f)]
