"""Pre-flight validation for console form submissions.

Forms are validated before any backend call. On failure, raise
`FormValidationError`; the controller turns it into inline field messages plus a
blocking notice, and nothing is sent to the server.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union


@dataclass
class FormValidationError(Exception):
    """Exception raised for form validation failures.

    Attributes:
        field_errors: mapping of field name -> human-readable error message.
        message: optional top-level message.
    """

    field_errors: Dict[str, str]
    message: str = "Validation failed"

    def __str__(self) -> str:  # pragma: no cover
        return self.message


def _as_str(v: Any) -> str:
    return "" if v is None else str(v)


def _strip(v: Any) -> str:
    return _as_str(v).strip()


def add_error(errors: Dict[str, str], field: str, message: str) -> None:
    if field not in errors:
        errors[field] = message


def require_str(payload: Mapping[str, Any], field: str, errors: Dict[str, str], *, message: Optional[str] = None) -> str:
    value = _strip(payload.get(field))
    if not value:
        add_error(errors, field, message or f"{field} is required")
    return value


def parse_number(
    value: Any,
    field: str,
    errors: Dict[str, str],
    *,
    min_value: Optional[float] = None,
    exclusive_min: bool = False,
    whole: bool = False,
    message: Optional[str] = None,
    default: Optional[float] = None,
) -> Optional[float]:
    """Parse a numeric form value; record `message` against `field` when it is not acceptable."""
    raw = _strip(value)
    if not raw:
        if default is not None:
            return default
        add_error(errors, field, message or f"{field} is required")
        return None
    try:
        val = float(raw)
    except ValueError:
        add_error(errors, field, message or f"{field} must be a number")
        return None
    if not math.isfinite(val):
        add_error(errors, field, message or f"{field} must be a number")
        return None
    if whole and not val.is_integer():
        add_error(errors, field, message or f"{field} must be a whole number")
        return None
    if min_value is not None and (val <= min_value if exclusive_min else val < min_value):
        add_error(errors, field, message or f"{field} must be at least {min_value}")
        return None
    return val


def json_number(value: float) -> Union[int, float]:
    """Send integral values as JSON integers, the way the browser serialised them."""
    return int(value) if value.is_integer() else value


def raise_if_errors(errors: Dict[str, str], message: str = "Please correct the highlighted fields") -> None:
    if errors:
        raise FormValidationError(field_errors=errors, message=message)


# --------------------------------------------------------------------------- #
# Resource forms
# --------------------------------------------------------------------------- #
def validate_product_form(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Product form: sku, name, price, stock
    - sku, name: required
    - price: number >= 0
    - stock: whole number >= 0
    """
    errors: Dict[str, str] = {}
    sku = require_str(payload, "sku", errors, message="SKU is required and cannot be empty")
    name = require_str(payload, "name", errors, message="Product Name is required")
    price = parse_number(payload.get("price"), "price", errors, min_value=0, message="Price must be a valid number >= 0")
    stock = parse_number(payload.get("stock"), "stock", errors, min_value=0, whole=True, message="Stock must be a whole number >= 0")

    raise_if_errors(errors, message=next(iter(errors.values()), ""))
    return {
        "sku": sku,
        "name": name,
        "price": json_number(price),
        "stock": int(stock),
    }


def validate_supplier_form(payload: Mapping[str, Any]) -> Dict[str, Any]:
    errors: Dict[str, str] = {}
    name = require_str(payload, "name", errors, message="Supplier Name is required")
    contact = require_str(payload, "contact", errors, message="Contact is required")

    raise_if_errors(errors, message=next(iter(errors.values()), ""))
    return {"name": name, "contact": contact}


def _item_is_blank(item: Mapping[str, Any]) -> bool:
    return not any(_strip(item.get(k)) for k in ("productId", "qty", "price"))


def validate_order_form(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Order form: items[{productId, qty, price}], supplierId, status
    - at least one item with a productId
    - every filled item: productId required, qty > 0, price >= 0 (blank price is 0)
    - supplierId, status: required (status is not checked against a vocabulary)
    """
    errors: Dict[str, str] = {}
    raw_items = payload.get("items") or []
    items: List[Dict[str, Any]] = []

    filled = [it for it in raw_items if isinstance(it, Mapping) and not _item_is_blank(it)]
    if not filled or not _strip(filled[0].get("productId")):
        add_error(errors, "items", "At least one item with a Product ID is required")

    for index, item in enumerate(filled):
        product_id = _strip(item.get("productId"))
        if not product_id:
            add_error(errors, f"items.{index}.productId", "Every item needs a Product ID")
        qty = parse_number(
            item.get("qty"), f"items.{index}.qty", errors,
            min_value=0, exclusive_min=True, message="Quantity must be a positive number",
        )
        price = parse_number(
            item.get("price"), f"items.{index}.price", errors,
            min_value=0, default=0.0, message="Price must be a valid number >= 0",
        )
        if product_id and qty is not None and price is not None:
            items.append({"productId": product_id, "qty": json_number(qty), "price": json_number(price)})

    supplier_id = require_str(payload, "supplierId", errors, message="Supplier is required")
    status = require_str(payload, "status", errors, message="Status is required")

    raise_if_errors(errors, message=next(iter(errors.values()), ""))
    return {"items": items, "supplierId": supplier_id, "status": status}
