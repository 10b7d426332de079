import pytest

from inventory_console.console.validation import (
    FormValidationError,
    validate_order_form,
    validate_product_form,
    validate_supplier_form,
)


def test_product_form_builds_payload():
    body = validate_product_form({"sku": " A1 ", "name": "Widget", "price": "9.99", "stock": "10"})
    assert body == {"sku": "A1", "name": "Widget", "price": 9.99, "stock": 10}


def test_product_form_sends_integral_price_as_int():
    body = validate_product_form({"sku": "A1", "name": "Widget", "price": "5", "stock": "0"})
    assert body["price"] == 5
    assert isinstance(body["price"], int)


def test_negative_price_is_rejected():
    with pytest.raises(FormValidationError) as excinfo:
        validate_product_form({"sku": "A1", "name": "Widget", "price": "-1", "stock": "10"})

    assert excinfo.value.field_errors == {"price": "Price must be a valid number >= 0"}
    assert excinfo.value.message == "Price must be a valid number >= 0"


@pytest.mark.parametrize("stock", ["", "-2", "1.5", "abc"])
def test_stock_must_be_whole_and_non_negative(stock):
    with pytest.raises(FormValidationError) as excinfo:
        validate_product_form({"sku": "A1", "name": "Widget", "price": "1", "stock": stock})
    assert "stock" in excinfo.value.field_errors


def test_product_form_reports_every_field():
    with pytest.raises(FormValidationError) as excinfo:
        validate_product_form({"sku": "  ", "name": "", "price": "nan", "stock": ""})

    assert set(excinfo.value.field_errors) == {"sku", "name", "price", "stock"}
    assert excinfo.value.message == "SKU is required and cannot be empty"


def test_supplier_form():
    assert validate_supplier_form({"name": "Acme", "contact": " ops@acme.test "}) == {
        "name": "Acme",
        "contact": "ops@acme.test",
    }
    with pytest.raises(FormValidationError) as excinfo:
        validate_supplier_form({"name": "Acme"})
    assert excinfo.value.field_errors == {"contact": "Contact is required"}


def test_order_form_drops_blank_rows_and_defaults_price():
    body = validate_order_form({
        "items": [
            {"productId": "p-1", "qty": "3", "price": ""},
            {"productId": "", "qty": "", "price": ""},
            {"productId": "p-2", "qty": "1.5", "price": "2.25"},
        ],
        "supplierId": "s-1",
        "status": "pending",
    })

    assert body == {
        "items": [
            {"productId": "p-1", "qty": 3, "price": 0},
            {"productId": "p-2", "qty": 1.5, "price": 2.25},
        ],
        "supplierId": "s-1",
        "status": "pending",
    }


def test_order_form_requires_an_item():
    with pytest.raises(FormValidationError) as excinfo:
        validate_order_form({"items": [], "supplierId": "s-1", "status": "pending"})
    assert excinfo.value.field_errors["items"] == "At least one item with a Product ID is required"


def test_order_form_item_errors_are_indexed():
    with pytest.raises(FormValidationError) as excinfo:
        validate_order_form({
            "items": [{"productId": "p-1", "qty": "2"}, {"productId": "", "qty": "0", "price": "-1"}],
            "supplierId": "",
            "status": "",
        })

    errors = excinfo.value.field_errors
    assert errors["items.1.productId"] == "Every item needs a Product ID"
    assert errors["items.1.qty"] == "Quantity must be a positive number"
    assert errors["items.1.price"] == "Price must be a valid number >= 0"
    assert errors["supplierId"] == "Supplier is required"
    assert errors["status"] == "Status is required"


def test_order_status_is_free_text():
    body = validate_order_form({"items": [{"productId": "p-1", "qty": "1"}], "supplierId": "s", "status": "on hold"})
    assert body["status"] == "on hold"
