"""
Page bootstrap: decide which controllers a page needs and load their data.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from inventory_console.console.controllers.base_controller import ResourceController
from inventory_console.console.controllers.order_controller import OrderController
from inventory_console.console.controllers.product_controller import ProductController
from inventory_console.console.controllers.supplier_controller import SupplierController
from inventory_console.console.state_manager import ConsoleSession
from inventory_console.error_handler import ErrorHandler
from inventory_console.integrations.contracts.inventory import InventoryBackend, ResourceKind

logger = logging.getLogger(__name__)

PRODUCT_FORM = "product-form"
SUPPLIER_FORM = "supplier-form"
ORDER_FORM = "order-form"

ALL_FORMS = (PRODUCT_FORM, SUPPLIER_FORM, ORDER_FORM)

_CONTROLLER_TYPES = {
    ResourceKind.PRODUCT: ProductController,
    ResourceKind.SUPPLIER: SupplierController,
    ResourceKind.ORDER: OrderController,
}


def build_controller(
    kind: ResourceKind,
    session: ConsoleSession,
    backend: InventoryBackend,
    error_handler: Optional[ErrorHandler] = None,
) -> ResourceController:
    controller_type = _CONTROLLER_TYPES[kind]
    return controller_type(backend, session.state_for(kind), session.notifier, error_handler)


def build_controllers(
    session: ConsoleSession,
    backend: InventoryBackend,
    error_handler: Optional[ErrorHandler] = None,
) -> Dict[ResourceKind, ResourceController]:
    return {kind: build_controller(kind, session, backend, error_handler) for kind in ResourceKind}


async def bootstrap_page(
    forms: Iterable[str],
    controllers: Dict[ResourceKind, ResourceController],
    refresh: bool = True,
) -> List[ResourceKind]:
    """
    Load data for the forms present on a page.

    - product form: product list
    - supplier form or order form: supplier list (feeds the order supplier selector)
    - order form: product selector options, then the order list

    With refresh=False only states never loaded in this session are fetched;
    form actions use that since the acted-on controller has just re-listed.
    Returns the resource kinds whose list was fetched.
    """
    forms = set(forms)
    loaded: List[ResourceKind] = []

    def needs(kind: ResourceKind) -> bool:
        return refresh or not controllers[kind].state.loaded

    if PRODUCT_FORM in forms and needs(ResourceKind.PRODUCT):
        await controllers[ResourceKind.PRODUCT].list()
        loaded.append(ResourceKind.PRODUCT)

    if (SUPPLIER_FORM in forms or ORDER_FORM in forms) and needs(ResourceKind.SUPPLIER):
        await controllers[ResourceKind.SUPPLIER].list()
        loaded.append(ResourceKind.SUPPLIER)

    if ORDER_FORM in forms:
        orders = controllers[ResourceKind.ORDER]
        if refresh or not orders.state.options_loaded:
            await orders.load_product_options()
        if needs(ResourceKind.ORDER):
            await orders.list()
            loaded.append(ResourceKind.ORDER)

    logger.debug("Bootstrapped forms=%s loaded=%s", sorted(forms), [k.value for k in loaded])
    return loaded
