"""Pytest fixtures for console controller and route tests."""

import pytest

from inventory_console.console.bootstrap import build_controllers
from inventory_console.console.state_manager import SessionStore
from inventory_console.integrations.clients.mocks.inventory_backend import MockInventoryBackend


@pytest.fixture
def backend():
    """Seeded in-memory inventory backend."""
    return MockInventoryBackend()


@pytest.fixture
def empty_backend():
    return MockInventoryBackend(seed=False)


@pytest.fixture
def session():
    return SessionStore().create_session()


@pytest.fixture
def controllers(session, backend):
    return build_controllers(session, backend)
