"""
Contracts (data models).

This folder defines the shapes exchanged with the inventory backend:
- canonical product / supplier / order records
- tagged reference variants (id, embedded object, sku, name)
- the InventoryBackend interface shared by mock and real clients

Why this exists:
- The backend's field naming varies; everything past the adapter layer
  (integrations/policy/response_wrappers.py) works on these models only.
"""

from .inventory import (
    EmbeddedReference,
    IdReference,
    InventoryBackend,
    NameReference,
    OrderItemRecord,
    OrderRecord,
    ProductRecord,
    ProductReference,
    ResourceKind,
    SkuReference,
    SupplierRecord,
    SupplierReference,
)

__all__ = [
    "EmbeddedReference", "IdReference", "InventoryBackend", "NameReference",
    "OrderItemRecord", "OrderRecord", "ProductRecord", "ProductReference",
    "ResourceKind", "SkuReference", "SupplierRecord", "SupplierReference",
]
