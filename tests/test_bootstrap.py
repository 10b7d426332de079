import pytest

from inventory_console.console.bootstrap import (
    ALL_FORMS,
    ORDER_FORM,
    PRODUCT_FORM,
    SUPPLIER_FORM,
    bootstrap_page,
)
from inventory_console.integrations.contracts.inventory import ResourceKind


def requested_paths(backend):
    return [path for _, path, _ in backend.calls]


@pytest.mark.asyncio
async def test_product_page_loads_only_products(backend, controllers):
    loaded = await bootstrap_page([PRODUCT_FORM], controllers)

    assert loaded == [ResourceKind.PRODUCT]
    assert requested_paths(backend) == ["/products"]


@pytest.mark.asyncio
async def test_supplier_page_loads_only_suppliers(backend, controllers):
    loaded = await bootstrap_page([SUPPLIER_FORM], controllers)

    assert loaded == [ResourceKind.SUPPLIER]
    assert requested_paths(backend) == ["/supplies"]


@pytest.mark.asyncio
async def test_order_page_loads_suppliers_product_options_then_orders(session, backend, controllers):
    loaded = await bootstrap_page([ORDER_FORM], controllers)

    assert loaded == [ResourceKind.SUPPLIER, ResourceKind.ORDER]
    assert requested_paths(backend) == ["/supplies", "/products", "/orders"]
    assert session.orders.options_loaded is True
    assert session.products.loaded is False


@pytest.mark.asyncio
async def test_dashboard_loads_everything_once(backend, controllers):
    loaded = await bootstrap_page(ALL_FORMS, controllers)

    assert loaded == [ResourceKind.PRODUCT, ResourceKind.SUPPLIER, ResourceKind.ORDER]
    assert requested_paths(backend) == ["/products", "/supplies", "/products", "/orders"]


@pytest.mark.asyncio
async def test_without_refresh_only_unloaded_states_are_fetched(backend, controllers):
    await bootstrap_page([PRODUCT_FORM], controllers)
    backend.calls.clear()

    loaded = await bootstrap_page(ALL_FORMS, controllers, refresh=False)

    assert loaded == [ResourceKind.SUPPLIER, ResourceKind.ORDER]
    assert requested_paths(backend) == ["/supplies", "/products", "/orders"]

    backend.calls.clear()
    assert await bootstrap_page(ALL_FORMS, controllers, refresh=False) == []
    assert backend.calls == []


@pytest.mark.asyncio
async def test_page_without_forms_loads_nothing(backend, controllers):
    assert await bootstrap_page([], controllers) == []
    assert backend.calls == []
