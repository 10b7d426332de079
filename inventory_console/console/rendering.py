"""
Pure table rendering: list of backend records -> display rows.

Nothing here touches the network, the session or HTML.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Tuple

from inventory_console.database.resource_cache import cache_key
from inventory_console.integrations.contracts.inventory import ResourceKind
from inventory_console.integrations.policy.response_wrappers import (
    display_value,
    format_order_item,
    format_supplier_field,
    normalize_order,
    normalize_product,
    normalize_supplier,
)

PRODUCT_COLUMNS = ("SKU", "Name", "Price", "Stock")
SUPPLIER_COLUMNS = ("Name", "Contact")
ORDER_COLUMNS = ("Order ID", "Items", "Supplier", "Status")


@dataclass(frozen=True)
class TableRow:
    record_id: Optional[str]
    cells: Tuple[str, ...]

    @property
    def actionable(self) -> bool:
        """Rows without an identifier cannot be edited or deleted."""
        return self.record_id is not None


@dataclass(frozen=True)
class SelectOption:
    value: str
    label: str


def columns_for(kind: ResourceKind) -> Tuple[str, ...]:
    return {
        ResourceKind.PRODUCT: PRODUCT_COLUMNS,
        ResourceKind.SUPPLIER: SUPPLIER_COLUMNS,
        ResourceKind.ORDER: ORDER_COLUMNS,
    }[kind]


def _mappings(records: Iterable[Any]) -> Iterator[Mapping[str, Any]]:
    # Malformed list entries (null, bare strings) are left out of tables and selectors.
    return (raw for raw in records if isinstance(raw, Mapping))


def _number_cell(parsed: Any, raw_value: Any) -> str:
    """Coerced value when it parsed, otherwise whatever the backend sent."""
    return display_value(parsed if parsed is not None else raw_value)


def render_product_rows(records: Iterable[Mapping[str, Any]]) -> List[TableRow]:
    rows = []
    for raw in _mappings(records):
        product = normalize_product(raw)
        rows.append(
            TableRow(
                record_id=cache_key(product.id),
                cells=(
                    product.sku,
                    product.name,
                    _number_cell(product.price, raw.get("price")),
                    _number_cell(product.stock, raw.get("stock")),
                ),
            )
        )
    return rows


def render_supplier_rows(records: Iterable[Mapping[str, Any]]) -> List[TableRow]:
    rows = []
    for raw in _mappings(records):
        supplier = normalize_supplier(raw)
        rows.append(TableRow(record_id=cache_key(supplier.id), cells=(supplier.name, supplier.contact)))
    return rows


def render_order_rows(records: Iterable[Mapping[str, Any]]) -> List[TableRow]:
    rows = []
    for raw in _mappings(records):
        order = normalize_order(raw)
        items = raw.get("items") if isinstance(raw.get("items"), list) else []
        items_text = "; ".join(format_order_item(item) for item in items)
        rows.append(
            TableRow(
                record_id=cache_key(order.id),
                cells=(display_value(order.id), items_text, format_supplier_field(raw), order.status),
            )
        )
    return rows


def render_rows(kind: ResourceKind, records: Iterable[Mapping[str, Any]]) -> List[TableRow]:
    renderer = {
        ResourceKind.PRODUCT: render_product_rows,
        ResourceKind.SUPPLIER: render_supplier_rows,
        ResourceKind.ORDER: render_order_rows,
    }[kind]
    return renderer(records)


def product_options(records: Iterable[Mapping[str, Any]]) -> List[SelectOption]:
    """Options for an order line item's product selector."""
    options = []
    for raw in _mappings(records):
        product = normalize_product(raw)
        value = cache_key(product.id)
        if value is None:
            continue
        label = product.name or product.sku or value
        options.append(SelectOption(value=value, label=f"{label} ({product.sku})"))
    return options


def supplier_options(records: Iterable[Mapping[str, Any]]) -> List[SelectOption]:
    """Options for the order form's supplier selector; falls back to the name as value."""
    options = []
    for raw in _mappings(records):
        supplier = normalize_supplier(raw)
        value = cache_key(supplier.id) or cache_key(supplier.name)
        if value is None:
            continue
        options.append(SelectOption(value=value, label=supplier.name or value))
    return options
