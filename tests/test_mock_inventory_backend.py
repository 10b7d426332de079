import pytest

from inventory_console.integrations.clients.mocks.inventory_backend import MockInventoryBackend
from inventory_console.integrations.clients.real_http.inventory_backend import BackendHTTPError
from inventory_console.integrations.contracts.inventory import ResourceKind


@pytest.mark.asyncio
async def test_seeded_collections_are_served_on_backend_paths(backend):
    products = await backend.fetch_json("/products")
    suppliers = await backend.fetch_json("/supplies")
    orders = await backend.fetch_json("/orders")

    assert {p["sku"] for p in products} >= {"BOLT-M8", "NUT-M8"}
    assert {s["_id"] for s in suppliers} == {"s-200", "s-201"}
    assert len(orders) == 2


@pytest.mark.asyncio
async def test_create_assigns_id_and_update_keeps_it(empty_backend):
    created = await empty_backend.create_resource(ResourceKind.SUPPLIER, {"name": "Acme", "contact": "a@b.test"})
    record_id = created["_id"]

    updated = await empty_backend.update_resource(ResourceKind.SUPPLIER, record_id, {"name": "Acme 2", "contact": "c"})

    assert updated == {"_id": record_id, "name": "Acme 2", "contact": "c"}
    assert empty_backend.records(ResourceKind.SUPPLIER) == [updated]


@pytest.mark.asyncio
async def test_get_by_id_is_not_supported_by_default(backend):
    with pytest.raises(BackendHTTPError) as excinfo:
        await backend.get_resource(ResourceKind.PRODUCT, "p-100")
    assert excinfo.value.is_not_found


@pytest.mark.asyncio
async def test_get_by_id_when_enabled():
    backend = MockInventoryBackend(supports_get_by_id=True)
    record = await backend.get_resource(ResourceKind.PRODUCT, "p-100")
    assert record["sku"] == "BOLT-M8"


@pytest.mark.asyncio
async def test_unknown_ids_and_paths_are_404(backend):
    with pytest.raises(BackendHTTPError) as excinfo:
        await backend.delete_resource(ResourceKind.ORDER, "missing")
    assert excinfo.value.status_code == 404

    with pytest.raises(BackendHTTPError) as excinfo:
        await backend.fetch_json("/customers")
    assert excinfo.value.status_code == 404


@pytest.mark.asyncio
async def test_calls_are_recorded(backend):
    await backend.list_resource(ResourceKind.ORDER)
    await backend.delete_resource(ResourceKind.ORDER, "o-300")

    assert backend.calls == [("GET", "/orders", None), ("DELETE", "/orders/o-300", None)]
    assert backend.network_calls() == 2
