"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- no inventory backend URL is configured
- we want to test controllers end-to-end without network access

Important:
- Mock clients must follow the SAME interface as real HTTP clients (InventoryBackend).
- Mock clients must raise the same BackendHTTPError the real client raises.
"""

from .inventory_backend import MockInventoryBackend

__all__ = ["MockInventoryBackend"]
