"""Controller for the supplier form and table.

The supplier list also feeds the order form's supplier selector, so the
bootstrap loads it on order pages even without a supplier form.
"""
from typing import Any, Dict, Mapping

from inventory_console.console.controllers.base_controller import ResourceController
from inventory_console.console.validation import validate_supplier_form
from inventory_console.integrations.contracts.inventory import ResourceKind
from inventory_console.integrations.policy.response_wrappers import display_value

SUPPLIER_FIELDS = ("name", "contact")


class SupplierController(ResourceController):
    kind = ResourceKind.SUPPLIER

    def validate(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return validate_supplier_form(payload)

    def echo_form(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return {f: display_value(payload.get(f)).strip() for f in SUPPLIER_FIELDS}

    def form_values(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        return {f: display_value(record.get(f)) for f in SUPPLIER_FIELDS}
