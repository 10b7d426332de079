from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from inventory_console.integrations.contracts.inventory import (
    EmbeddedReference,
    IdReference,
    NameReference,
    OrderItemRecord,
    OrderRecord,
    ProductRecord,
    SkuReference,
    SupplierRecord,
)

# Resolution order shared by every identifier lookup (cache keys, row actions,
# selectors). Changing it makes cache lookups miss.
ID_FIELDS = ("id", "_id", "sku", "productId", "product_id")

PRODUCT_REFERENCE_FIELDS = ("product", "productId", "product_id", "sku")
SUPPLIER_REFERENCE_FIELDS = ("supplier", "supplierId", "supplierName", "supplierObj", "supplier_info")

_PRODUCT_LABEL_FIELDS = ("name", "title", "sku", "id", "_id")
_SUPPLIER_LABEL_FIELDS = ("name", "title", "contact", "id", "_id")


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


# ---------------------------------------------------------------------------
# Identifier resolution
# ---------------------------------------------------------------------------

def resolve_id(record: Any) -> Any:
    """Return the record's identifier, or None when it carries none of ID_FIELDS."""
    if not isinstance(record, Mapping):
        return None
    return _first_non_empty(record, *ID_FIELDS)


# ---------------------------------------------------------------------------
# Reference variants
# ---------------------------------------------------------------------------

def product_reference_from_item(item: Mapping[str, Any]):
    for key in PRODUCT_REFERENCE_FIELDS:
        value = item.get(key)
        if _is_empty(value):
            continue
        if isinstance(value, Mapping):
            return EmbeddedReference(record=dict(value))
        if key == "sku":
            return SkuReference(sku=str(value))
        return IdReference(value=value)
    return None


def supplier_reference_from_order(order: Mapping[str, Any]):
    for key in SUPPLIER_REFERENCE_FIELDS:
        value = order.get(key)
        if _is_empty(value):
            continue
        if isinstance(value, Mapping):
            return EmbeddedReference(record=dict(value))
        if key == "supplierName":
            return NameReference(name=str(value))
        return IdReference(value=value)
    return None


def reference_id(reference) -> Any:
    """Identifier a selector should use for a reference."""
    if reference is None:
        return None
    if isinstance(reference, IdReference):
        return reference.value
    if isinstance(reference, SkuReference):
        return reference.sku
    if isinstance(reference, NameReference):
        return reference.name
    record_id = resolve_id(reference.record)
    if record_id is None:
        return _first_non_empty(reference.record, "name")
    return record_id


def product_reference_label(reference) -> str:
    if reference is None:
        return ""
    if isinstance(reference, EmbeddedReference):
        return _object_label(reference.record, _PRODUCT_LABEL_FIELDS)
    return display_value(reference_id(reference))


def supplier_reference_label(reference) -> str:
    if reference is None:
        return ""
    if isinstance(reference, EmbeddedReference):
        return _object_label(reference.record, _SUPPLIER_LABEL_FIELDS)
    return display_value(reference_id(reference))


# ---------------------------------------------------------------------------
# Field formatters
# ---------------------------------------------------------------------------

def format_order_item(item: Any) -> str:
    """Render an order line item as "<product label> x<qty>"."""
    if not isinstance(item, Mapping):
        return f"{display_value(item)} x1"
    label = product_reference_label(product_reference_from_item(item))
    if not label:
        label = _object_label(item, _PRODUCT_LABEL_FIELDS)
    qty = _first_present(item, "qty", "quantity", default=1)
    return f"{label} x{display_value(qty)}"


def format_supplier_field(order: Any) -> str:
    if not isinstance(order, Mapping):
        return ""
    return supplier_reference_label(supplier_reference_from_order(order))


def display_value(value: Any) -> str:
    """String form of a backend value, with integral floats printed without a fraction."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ---------------------------------------------------------------------------
# Adapters: raw backend payload -> canonical record
# ---------------------------------------------------------------------------

def normalize_product(raw: Mapping[str, Any]) -> ProductRecord:
    return _build_model(
        ProductRecord,
        {
            "id": resolve_id(raw),
            "sku": display_value(raw.get("sku")),
            "name": display_value(raw.get("name")),
            "price": _coerce_number(raw.get("price")),
            "stock": _coerce_whole_number(raw.get("stock")),
            "raw": dict(raw),
        },
        raw,
    )


def normalize_supplier(raw: Mapping[str, Any]) -> SupplierRecord:
    return _build_model(
        SupplierRecord,
        {
            "id": resolve_id(raw),
            "name": display_value(raw.get("name")),
            "contact": display_value(raw.get("contact")),
            "raw": dict(raw),
        },
        raw,
    )


def normalize_order_item(raw: Mapping[str, Any]) -> OrderItemRecord:
    return _build_model(
        OrderItemRecord,
        {
            "product": product_reference_from_item(raw),
            "quantity": _coerce_number(_first_present(raw, "qty", "quantity")),
            "price": _coerce_number(raw.get("price")),
            "raw": dict(raw),
        },
        raw,
    )


def normalize_order(raw: Mapping[str, Any]) -> OrderRecord:
    items = raw.get("items") if isinstance(raw.get("items"), list) else []
    return _build_model(
        OrderRecord,
        {
            "id": resolve_id(raw),
            "items": [normalize_order_item(it) for it in items if isinstance(it, Mapping)],
            "supplier": supplier_reference_from_order(raw),
            "status": display_value(raw.get("status")),
            "raw": dict(raw),
        },
        raw,
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _first_non_empty(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if _is_empty(value):
            continue
        return value
    return default


def _first_present(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    # Only absent/None falls through; 0 and "" are kept.
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return default


def _object_label(record: Mapping[str, Any], fields) -> str:
    value = _first_non_empty(record, *fields)
    if value is not None:
        return display_value(value)
    return json.dumps(dict(record), separators=(",", ":"), default=str)


def _coerce_number(value: Any) -> Optional[float]:
    if _is_empty(value) or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _coerce_whole_number(value: Any) -> Optional[int]:
    number = _coerce_number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


def _build_model(model_type, payload: Dict[str, Any], raw: Mapping[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=dict(raw)) from exc
