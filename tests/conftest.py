"""Pytest configuration and fixtures for Dateform tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so dateform can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dateform import LocalDate  # noqa: E402


@pytest.fixture
def ides_of_march() -> LocalDate:
    """Friday, 15 March 2024."""
    return LocalDate(2024, 3, 15)
