"""
Pytest configuration and shared fixtures for commitment engine tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_hasher = _common.make_hasher
make_leaves = _common.make_leaves
make_defaults = _common.make_defaults

from shielded_core.config import set_default_config


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def hasher():
    """Provide a HashEngine with the standard BLAKE2s personalization."""
    return make_hasher()


@pytest.fixture
def leaves(hasher):
    """Provide eight leaf commitments (for the integers 1..8)."""
    return make_leaves(hasher, 8)


@pytest.fixture
def defaults(hasher):
    """Provide empty-subtree defaults deep enough for height-8 trees."""
    return make_defaults(hasher, 8)


@pytest.fixture(autouse=True)
def _reset_default_config():
    """Keep process-wide config from leaking between tests."""
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
