import pytest

from inventory_console.integrations.contracts.inventory import (
    EmbeddedReference,
    IdReference,
    NameReference,
    SkuReference,
)
from inventory_console.integrations.policy.response_wrappers import (
    display_value,
    format_order_item,
    format_supplier_field,
    normalize_order,
    normalize_product,
    product_reference_from_item,
    reference_id,
    resolve_id,
    supplier_reference_from_order,
)


def test_resolve_id_follows_field_order():
    assert resolve_id({"id": 7, "_id": "x", "sku": "S"}) == 7
    assert resolve_id({"_id": "abc", "sku": "S"}) == "abc"
    assert resolve_id({"sku": "S", "productId": "P"}) == "S"
    assert resolve_id({"productId": "P", "product_id": "Q"}) == "P"
    assert resolve_id({"product_id": "Q"}) == "Q"


def test_resolve_id_skips_empty_values_and_returns_none():
    assert resolve_id({"id": "", "_id": None, "sku": "  ", "productId": "P1"}) == "P1"
    assert resolve_id({"name": "no identifier"}) is None
    assert resolve_id(None) is None
    assert resolve_id("p-1") is None


def test_resolve_id_keeps_zero():
    assert resolve_id({"id": 0, "_id": "fallback"}) == 0


def test_resolve_id_is_deterministic():
    record = {"_id": "a", "sku": "b", "product_id": "c"}
    assert {resolve_id(record) for _ in range(5)} == {"a"}


def test_format_order_item_with_embedded_product():
    assert format_order_item({"product": {"name": "Bolt"}, "qty": 3}) == "Bolt x3"


def test_format_order_item_with_sku_and_default_quantity():
    assert format_order_item({"sku": "X9"}) == "X9 x1"


def test_format_order_item_uses_quantity_key_and_product_id():
    assert format_order_item({"productId": "p-100", "quantity": 2.0}) == "p-100 x2"


def test_format_order_item_falls_back_to_serialized_item():
    assert format_order_item({"qty": 4}) == '{"qty":4} x4'


def test_format_supplier_field_variants():
    assert format_supplier_field({"supplier": {"name": "Acme"}}) == "Acme"
    assert format_supplier_field({"supplierId": "s-1"}) == "s-1"
    assert format_supplier_field({"supplierName": "Northwind"}) == "Northwind"
    assert format_supplier_field({"supplier_info": {"contact": "ops@x.test"}}) == "ops@x.test"
    assert format_supplier_field({"status": "pending"}) == ""


def test_reference_variants_are_tagged():
    assert isinstance(product_reference_from_item({"product": {"_id": "p"}}), EmbeddedReference)
    assert isinstance(product_reference_from_item({"productId": "p"}), IdReference)
    assert isinstance(product_reference_from_item({"sku": "S"}), SkuReference)
    assert product_reference_from_item({"qty": 1}) is None

    assert isinstance(supplier_reference_from_order({"supplierObj": {"name": "A"}}), EmbeddedReference)
    assert isinstance(supplier_reference_from_order({"supplierName": "A"}), NameReference)
    assert reference_id(supplier_reference_from_order({"supplier": {"_id": "s-9", "name": "A"}})) == "s-9"
    assert reference_id(supplier_reference_from_order({"supplier": {"name": "A"}})) == "A"


def test_display_value():
    assert display_value(None) == ""
    assert display_value(10.0) == "10"
    assert display_value(9.99) == "9.99"
    assert display_value(True) == "true"


def test_normalize_product_coerces_numbers():
    product = normalize_product({"_id": "p-1", "sku": "A1", "name": "Widget", "price": "9.99", "stock": "10"})
    assert product.id == "p-1"
    assert product.price == pytest.approx(9.99)
    assert product.stock == 10


def test_normalize_order_reads_every_item():
    order = normalize_order({
        "id": "O1",
        "items": [{"productId": "P1", "qty": 2, "price": 5}, {"product": {"_id": "P2"}, "quantity": 1}],
        "supplierId": "S1",
        "status": "pending",
    })
    assert [reference_id(i.product) for i in order.items] == ["P1", "P2"]
    assert [i.quantity for i in order.items] == [2.0, 1.0]
    assert reference_id(order.supplier) == "S1"
