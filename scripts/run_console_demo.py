#!/usr/bin/env python3
"""
Drive the console controllers against the in-memory backend and print each stage.
Shows the product, supplier and order tables as a user adds, edits and deletes records.

Usage (from repo root):
  python scripts/run_console_demo.py

To serve the console itself:
  uvicorn inventory_console.api.main:app --host 127.0.0.1 --port 8000
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from inventory_console.console.bootstrap import ALL_FORMS, bootstrap_page, build_controllers
from inventory_console.console.state_manager import SessionStore
from inventory_console.integrations.clients.mocks.inventory_backend import MockInventoryBackend
from inventory_console.integrations.contracts.inventory import ResourceKind


def setup_logging():
    """Log to terminal at INFO so every backend call is visible."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data):
    """Print a stage header and data to the terminal."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, (dict, list)):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


def table(state) -> list:
    return [{"id": row.record_id, "cells": list(row.cells)} for row in state.rows]


async def main():
    setup_logging()
    backend = MockInventoryBackend()
    session = SessionStore().create_session()
    controllers = build_controllers(session, backend)
    products = controllers[ResourceKind.PRODUCT]
    suppliers = controllers[ResourceKind.SUPPLIER]
    orders = controllers[ResourceKind.ORDER]

    await bootstrap_page(ALL_FORMS, controllers)
    print_stage("PRODUCTS (seed)", table(session.products))
    print_stage("SUPPLIERS (seed)", table(session.suppliers))
    print_stage("ORDERS (seed)", table(session.orders))

    # --- Product: invalid then valid submission ---
    await products.submit({"sku": "WID-1", "name": "Widget", "price": "-1", "stock": "10"})
    print_stage("PRODUCT REJECTED: field errors", session.products.field_errors)

    await products.submit({"sku": "WID-1", "name": "Widget", "price": "9.99", "stock": "10"})
    print_stage("PRODUCT ADDED", table(session.products))

    # --- Supplier: edit from cache ---
    supplier_id = session.suppliers.rows[0].record_id
    await suppliers.begin_edit(supplier_id)
    print_stage(f"SUPPLIER EDIT FORM ({session.suppliers.submit_label})", session.suppliers.form)
    await suppliers.submit({"name": "Acme Fasteners Ltd", "contact": "orders@acme.test"})
    print_stage("SUPPLIER UPDATED", table(session.suppliers))

    # --- Order: create with a product option and the edited supplier ---
    product_id = session.orders.options[0].value
    await orders.submit({
        "items": [{"productId": product_id, "qty": "3", "price": "0.30"}],
        "supplierId": supplier_id,
        "status": "pending",
    })
    print_stage("ORDER ADDED", table(session.orders))

    # --- Order: delete needs confirmation ---
    order_id = session.orders.rows[-1].record_id
    await orders.delete(order_id)
    print_stage("DELETE PROMPT", orders.confirmation_prompt())
    await orders.delete(order_id, confirmed=True)
    print_stage("ORDER DELETED", table(session.orders))

    print_stage("NOTICES", [f"{n.level}: {n.message}" for n in session.notifier.drain()])
    print_stage("BACKEND CALLS", [f"{method} {path}" for method, path, _ in backend.calls])

    print("\n" + "=" * 60)
    print("  Demo complete. Check logs above for each stage.")
    print("=" * 60 + "\n")


if __name__ == "__main__":
    asyncio.run(main())
