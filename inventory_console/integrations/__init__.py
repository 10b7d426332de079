"""
Integrations layer.
This package contains all code used to communicate with the inventory backend:
- products (/products)
- suppliers (/supplies)
- orders (/orders)

Key rule:
- Console controllers MUST NOT call httpx directly.
- Controllers call an InventoryBackend client (under inventory_console/integrations/clients).
- We use the MOCK backend during development and the REAL_HTTP client when a base URL is set.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (inventory_console/api/dependencies.py).
"""
