from inventory_console.api.pages import render_notices, render_table
from inventory_console.console.rendering import (
    product_options,
    render_order_rows,
    render_product_rows,
    supplier_options,
)
from inventory_console.console.state_manager import ControllerState, Notice
from inventory_console.integrations.contracts.inventory import ResourceKind


def test_product_rows_without_identifier_are_not_actionable():
    rows = render_product_rows([{"name": "Loose", "price": 1.5}, {"id": 3, "sku": "S3", "name": "N", "price": 2, "stock": 4}])

    assert rows[0].record_id is None
    assert rows[0].actionable is False
    assert rows[0].cells == ("", "Loose", "1.5", "")
    assert rows[1].record_id == "3"
    assert rows[1].cells == ("S3", "N", "2", "4")


def test_order_rows_join_items():
    rows = render_order_rows([
        {"id": "O1", "items": [{"product": {"name": "Bolt"}, "qty": 3}, {"sku": "X9"}], "supplierName": "Acme", "status": "pending"}
    ])
    assert rows[0].cells == ("O1", "Bolt x3; X9 x1", "Acme", "pending")


def test_selector_options():
    products = product_options([{"_id": "p-1", "sku": "A1", "name": "Widget"}, {"name": "no id"}])
    assert [(o.value, o.label) for o in products] == [("p-1", "Widget (A1)")]

    suppliers = supplier_options([{"_id": "s-1", "name": "Acme"}, {"name": "Nameonly"}])
    assert [(o.value, o.label) for o in suppliers] == [("s-1", "Acme"), ("Nameonly", "Nameonly")]


def test_table_shows_list_error():
    state = ControllerState(ResourceKind.ORDER)
    state.list_error = "Error loading orders"

    html = render_table(state, "/orders")

    assert "Error loading orders" in html
    assert "<th>Order ID</th>" in html


def test_notices_are_alerts():
    html = render_notices([Notice("error", "Failed <x>")])
    assert html == '<div class="notice error" role="alert">Failed &lt;x&gt;</div>'


def test_scalar_order_items_are_listed():
    rows = render_order_rows([{"id": "O2", "items": ["p-1", {"productId": "p-2", "qty": 2}], "status": "pending"}])
    assert rows[0].cells[1] == "p-1 x1; p-2 x2"


def test_unparsable_numbers_show_backend_value():
    rows = render_product_rows([{"id": "p-1", "sku": "A1", "name": "N", "price": "call us", "stock": 1.5}])
    assert rows[0].cells == ("A1", "N", "call us", "1.5")


def test_non_mapping_records_are_skipped():
    assert render_product_rows([None, "junk"]) == []
    assert supplier_options([None, {"_id": "s-1", "name": "Acme"}])[0].value == "s-1"
