"""
Real HTTP integration clients.

These clients communicate with the inventory backend REST API.

Important:
- Must implement the same interface as the mock clients (InventoryBackend)
- Must raise BackendError subclasses on failure so controllers can report them

Switching:
The selection of mock vs real clients happens in inventory_console/api/dependencies.py only.
"""

from .inventory_backend import (
    BackendError,
    BackendHTTPError,
    BackendTransportError,
    InventoryBackendClient,
)

__all__ = [
    "BackendError",
    "BackendHTTPError",
    "BackendTransportError",
    "InventoryBackendClient",
]
