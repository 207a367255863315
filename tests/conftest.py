# tests/conftest.py
import sys
import os

# Add project root to path so `src.` and `api.` imports resolve
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from src.container_configurator.assembly import (
    AssemblyRegistry,
    ConfiguratorSession,
    SelectionController,
)


@pytest.fixture
def controller():
    """Fresh selection controller (nothing selected)."""
    return SelectionController()


@pytest.fixture
def registry(controller):
    """Registry seeded with unit 1 at the origin."""
    return AssemblyRegistry(controller)


@pytest.fixture
def session():
    """Session seeded with unit 1 at the origin."""
    return ConfiguratorSession()
