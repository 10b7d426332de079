"""Controller for the product form and table."""
from typing import Any, Dict, Mapping

from inventory_console.console.controllers.base_controller import ResourceController
from inventory_console.console.validation import validate_product_form
from inventory_console.integrations.contracts.inventory import ResourceKind
from inventory_console.integrations.policy.response_wrappers import display_value

PRODUCT_FIELDS = ("sku", "name", "price", "stock")


class ProductController(ResourceController):
    kind = ResourceKind.PRODUCT

    def validate(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return validate_product_form(payload)

    def echo_form(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return {f: display_value(payload.get(f)).strip() for f in PRODUCT_FIELDS}

    def form_values(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        return {f: display_value(record.get(f)) for f in PRODUCT_FIELDS}
