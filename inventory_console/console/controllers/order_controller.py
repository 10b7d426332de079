"""Controller for the order form and table.

Besides the shared operations, orders need the product list for each line
item's product selector (kept in the order state's `options`).
"""

import logging
from typing import Any, Dict, List, Mapping

from inventory_console.console.controllers.base_controller import ResourceController
from inventory_console.console.rendering import SelectOption, product_options
from inventory_console.console.validation import validate_order_form
from inventory_console.integrations.clients.real_http.inventory_backend import BackendError
from inventory_console.integrations.contracts.inventory import ResourceKind
from inventory_console.integrations.policy.response_wrappers import (
    IntegrationResponseError,
    display_value,
    normalize_order,
    reference_id,
)

logger = logging.getLogger(__name__)

ITEM_FIELDS = ("productId", "qty", "price")


def _blank_item() -> Dict[str, str]:
    return {f: "" for f in ITEM_FIELDS}


class OrderController(ResourceController):
    kind = ResourceKind.ORDER

    async def load_product_options(self) -> List[SelectOption]:
        try:
            records = await self.backend.list_resource(ResourceKind.PRODUCT)
            options = product_options(records)
        except (BackendError, IntegrationResponseError) as e:
            # The selector keeps its previous options; the order table still loads.
            logger.error("Failed to load products for order: %s", e)
            return self.state.options
        self.state.options = options
        self.state.options_loaded = True
        return options

    def validate(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return validate_order_form(payload)

    def echo_form(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        items = [
            {f: display_value(item.get(f)).strip() for f in ITEM_FIELDS}
            for item in (payload.get("items") or [])
            if isinstance(item, Mapping)
        ]
        # Blank rows are dropped by validation too, so error indices line up.
        items = [item for item in items if any(item.values())]
        return {
            "items": items or [_blank_item()],
            "supplierId": display_value(payload.get("supplierId")).strip(),
            "status": display_value(payload.get("status")).strip(),
        }

    def form_values(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        order = normalize_order(record)
        items = [
            {
                "productId": display_value(reference_id(item.product)),
                "qty": display_value(item.quantity),
                "price": display_value(item.price),
            }
            for item in order.items
        ]
        return {
            "items": items or [_blank_item()],
            "supplierId": display_value(reference_id(order.supplier)),
            "status": order.status,
        }

    def created_message(self, created: Any) -> str:
        message = super().created_message(created)
        created_id = self.record_id(created) if isinstance(created, Mapping) else None
        if created_id:
            message += f" ID: {created_id}"
        return message
