"""
Process-wide objects for the console routes: configuration, the inventory
backend and the session store. Routes get them through Depends so tests can
swap them with app.dependency_overrides.
"""

import logging

from dotenv import load_dotenv

load_dotenv()

from inventory_console.console.state_manager import SessionStore
from inventory_console.error_handler import ErrorHandler
from inventory_console.integrations.clients.mocks.inventory_backend import MockInventoryBackend
from inventory_console.integrations.clients.real_http.inventory_backend import InventoryBackendClient
from inventory_console.integrations.contracts.inventory import InventoryBackend
from inventory_console.utils.config_loader import ConsoleConfig, load_console_config

logger = logging.getLogger(__name__)


def select_backend(cfg: ConsoleConfig) -> InventoryBackend:
    """Real HTTP client when configured for it, otherwise the in-memory backend."""
    if cfg.use_real_backend():
        logger.info("Using inventory backend at %s", cfg.backend.base_url or "<unset>")
        return InventoryBackendClient(
            base_url=cfg.backend.base_url or None,
            timeout_seconds=cfg.backend.timeout_seconds,
        )
    logger.info("Using in-memory inventory backend")
    return MockInventoryBackend(supports_get_by_id=cfg.backend.mock_supports_get_by_id)


console_config = load_console_config()
inventory_backend = select_backend(console_config)
session_store = SessionStore()
error_handler = ErrorHandler()


def get_config() -> ConsoleConfig:
    """Dependency for console configuration"""
    return console_config


def get_backend() -> InventoryBackend:
    """Dependency for the inventory backend"""
    return inventory_backend


def get_session_store() -> SessionStore:
    """Dependency for console sessions"""
    return session_store


def get_error_handler() -> ErrorHandler:
    return error_handler
