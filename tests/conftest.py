"""Pytest configuration and fixtures for petungan tests."""

from __future__ import annotations

import sys
import warnings
from pathlib import Path

import pytest

# Add the project root to sys.path so petungan can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture
def quiet_pre_reform():
    """Silence PreReformYearWarning for tests sweeping pre-1633 years."""
    from petungan import PreReformYearWarning

    with warnings.catch_warnings():
        warnings.simplefilter("ignore", PreReformYearWarning)
        yield
