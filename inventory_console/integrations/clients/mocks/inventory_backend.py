"""
Mock Inventory Backend.

Purpose:
- In-memory stand-in for the inventory REST API, for development and tests.
- Does NOT make network calls.
- Serves /products, /supplies and /orders with the status codes the real backend
  uses. Single-record GET returns 404 unless `supports_get_by_id=True`, as the
  deployed backend does not implement it.
"""

import copy
import logging
import uuid
from typing import Any, Dict, List, Optional, Tuple

from inventory_console.integrations.clients.real_http.inventory_backend import BackendHTTPError
from inventory_console.integrations.contracts.inventory import InventoryBackend, ResourceKind

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Seed data
# ---------------------------------------------------------------------------

_SEED_PRODUCTS: List[Dict[str, Any]] = [
    {"_id": "p-100", "sku": "BOLT-M8", "name": "Hex Bolt M8", "price": 0.35, "stock": 1200},
    {"_id": "p-101", "sku": "NUT-M8", "name": "Hex Nut M8", "price": 0.12, "stock": 3400},
    {"_id": "p-102", "sku": "WASH-M8", "name": "Flat Washer M8", "price": 0.05, "stock": 0},
]

_SEED_SUPPLIERS: List[Dict[str, Any]] = [
    {"_id": "s-200", "name": "Acme Fasteners", "contact": "orders@acme.example"},
    {"_id": "s-201", "name": "Northwind Hardware", "contact": "+1 555 0100"},
]

_SEED_ORDERS: List[Dict[str, Any]] = [
    {
        "_id": "o-300",
        "items": [{"productId": "p-100", "qty": 500, "price": 0.3}],
        "supplierId": "s-200",
        "status": "pending",
    },
    {
        "_id": "o-301",
        "items": [
            {"product": {"_id": "p-101", "name": "Hex Nut M8", "sku": "NUT-M8"}, "quantity": 1000, "price": 0.1},
        ],
        "supplier": {"_id": "s-201", "name": "Northwind Hardware"},
        "status": "shipped",
    },
]


class MockInventoryBackend(InventoryBackend):
    def __init__(
        self,
        seed: bool = True,
        supports_get_by_id: bool = False,
        id_field: str = "_id",
    ) -> None:
        self.supports_get_by_id = supports_get_by_id
        self.id_field = id_field
        self.calls: List[Tuple[str, str, Any]] = []
        self._store: Dict[ResourceKind, Dict[str, Dict[str, Any]]] = {kind: {} for kind in ResourceKind}
        if seed:
            self._load(ResourceKind.PRODUCT, _SEED_PRODUCTS)
            self._load(ResourceKind.SUPPLIER, _SEED_SUPPLIERS)
            self._load(ResourceKind.ORDER, _SEED_ORDERS)

    def _load(self, kind: ResourceKind, records: List[Dict[str, Any]]) -> None:
        for record in records:
            self._store[kind][str(record[self.id_field])] = copy.deepcopy(record)

    def _route(self, path: str) -> Tuple[ResourceKind, Optional[str]]:
        if path.startswith("http"):
            # Absolute URLs are matched on their path part only.
            path = "/" + path.split("://", 1)[-1].split("/", 1)[-1]
        parts = [p for p in path.split("/") if p]
        for kind in ResourceKind:
            if parts and "/" + parts[0] == kind.path:
                if len(parts) == 1:
                    return kind, None
                if len(parts) == 2:
                    return kind, parts[1]
        raise BackendHTTPError(404, f"Cannot resolve {path}")

    async def fetch_json(self, path: str, method: str = "GET", body: Any = None) -> Any:
        method = method.upper()
        self.calls.append((method, path, copy.deepcopy(body)))
        kind, record_id = self._route(path)
        records = self._store[kind]

        if record_id is None:
            if method == "GET":
                return [copy.deepcopy(r) for r in records.values()]
            if method == "POST":
                new_id = uuid.uuid4().hex[:12]
                record = dict(body or {})
                record[self.id_field] = new_id
                records[new_id] = record
                logger.info("Mock backend created %s %s", kind.value, new_id)
                return copy.deepcopy(record)
            raise BackendHTTPError(405, f"Cannot {method} {path}")

        if record_id not in records:
            raise BackendHTTPError(404, f"{kind.label} {record_id} not found")
        if method == "GET":
            if not self.supports_get_by_id:
                raise BackendHTTPError(404, f"Cannot GET {path}")
            return copy.deepcopy(records[record_id])
        if method == "PUT":
            record = dict(body or {})
            record[self.id_field] = records[record_id][self.id_field]
            records[record_id] = record
            return copy.deepcopy(record)
        if method == "DELETE":
            del records[record_id]
            return None
        raise BackendHTTPError(405, f"Cannot {method} {path}")

    def records(self, kind: ResourceKind) -> List[Dict[str, Any]]:
        return [copy.deepcopy(r) for r in self._store[kind].values()]

    def network_calls(self) -> int:
        return len(self.calls)
