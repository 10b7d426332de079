"""
HTML rendering for the console pages.

Pages are built from the session's controller states; every dynamic value goes
through html.escape.
"""

from __future__ import annotations

import html
import json
from typing import Dict, Iterable, List, Optional, Sequence

from inventory_console.console.bootstrap import ORDER_FORM, PRODUCT_FORM, SUPPLIER_FORM
from inventory_console.console.rendering import SelectOption, columns_for, supplier_options
from inventory_console.console.state_manager import ConsoleSession, ControllerState, Notice
from inventory_console.integrations.contracts.inventory import ResourceKind

# Console URL segment per resource (the backend calls suppliers "supplies").
ROUTE_SEGMENTS = {
    ResourceKind.PRODUCT: "products",
    ResourceKind.SUPPLIER: "suppliers",
    ResourceKind.ORDER: "orders",
}

PAGE_FORMS: Dict[str, Sequence[str]] = {
    "/": (PRODUCT_FORM, SUPPLIER_FORM, ORDER_FORM),
    "/products": (PRODUCT_FORM,),
    "/suppliers": (SUPPLIER_FORM,),
    "/orders": (ORDER_FORM,),
}

_FORM_KINDS = {
    PRODUCT_FORM: ResourceKind.PRODUCT,
    SUPPLIER_FORM: ResourceKind.SUPPLIER,
    ORDER_FORM: ResourceKind.ORDER,
}

_STYLE = """
    * { box-sizing: border-box; }
    body { margin: 0; font-family: 'Segoe UI', sans-serif; background: #f8fafc; color: #0f172a; }
    nav { background: #0f172a; padding: 12px 28px; display: flex; gap: 18px; }
    nav a { color: #e2e8f0; text-decoration: none; font-weight: 600; }
    .container { max-width: 1200px; margin: 24px auto 48px; padding: 0 28px; }
    .panel { background: #fff; border: 1px solid #e2e8f0; border-radius: 12px; padding: 18px; margin-bottom: 22px; }
    .notice { padding: 10px 14px; border-radius: 8px; margin-bottom: 10px; }
    .notice.error { background: #fee2e2; color: #991b1b; }
    .notice.success { background: #dcfce7; color: #166534; }
    .field-error { color: #b91c1c; font-size: 12px; display: block; }
    .confirm { background: #fef9c3; padding: 10px 14px; border-radius: 8px; margin: 10px 0; }
    table { width: 100%; border-collapse: collapse; margin-top: 12px; }
    th, td { border-bottom: 1px solid #e2e8f0; padding: 8px; text-align: left; }
    form.inline { display: inline; }
    label { display: inline-block; margin: 4px 12px 4px 0; }
"""


def _e(value) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def _hidden(name: str, value) -> str:
    return f'<input type="hidden" name="{_e(name)}" value="{_e(value)}">'


def _field_error(state: ControllerState, field: str) -> str:
    message = state.field_errors.get(field)
    return f'<span class="field-error">{_e(message)}</span>' if message else ""


def _text_input(state: ControllerState, field: str, label: str, input_id: str, input_type: str = "text", extra: str = "") -> str:
    value = state.form.get(field, "")
    return (
        f'<label for="{input_id}">{_e(label)} '
        f'<input id="{input_id}" name="{field}" type="{input_type}" value="{_e(value)}" {extra}>'
        f"{_field_error(state, field)}</label>"
    )


def _select(name: str, options: Iterable[SelectOption], selected: str, placeholder: str, css_class: str = "", input_id: str = "") -> str:
    parts = [f'<option value="">{_e(placeholder)}</option>']
    values = set()
    for opt in options:
        values.add(opt.value)
        sel = " selected" if opt.value == selected else ""
        parts.append(f'<option value="{_e(opt.value)}"{sel}>{_e(opt.label)}</option>')
    if selected and selected not in values:
        # Keep a value the current lists do not know about (e.g. a stale reference).
        parts.append(f'<option value="{_e(selected)}" selected>{_e(selected)}</option>')
    id_attr = f' id="{input_id}"' if input_id else ""
    class_attr = f' class="{css_class}"' if css_class else ""
    return f'<select name="{name}"{id_attr}{class_attr}>' + "".join(parts) + "</select>"


def _form_open(state: ControllerState, page: str) -> str:
    segment = ROUTE_SEGMENTS[state.kind]
    return f'<form id="{state.form_id}" method="post" action="/{segment}/submit">' + _hidden("page", page)


def _form_buttons(state: ControllerState) -> str:
    buttons = f'<button type="submit">{_e(state.submit_label)}</button>'
    if state.editing_id:
        segment = ROUTE_SEGMENTS[state.kind]
        buttons += (
            f' <button type="submit" formaction="/{segment}/cancel" formnovalidate>Cancel</button>'
        )
    return buttons


# --------------------------------------------------------------------------- #
# Forms
# --------------------------------------------------------------------------- #
def render_product_form(state: ControllerState, page: str) -> str:
    return (
        '<section class="panel"><h2>Products</h2>'
        + _form_open(state, page)
        + _text_input(state, "sku", "SKU", "sku")
        + _text_input(state, "name", "Product Name", "name")
        + _text_input(state, "price", "Price", "price", "number", 'step="any" min="0"')
        + _text_input(state, "stock", "Stock", "stock", "number", 'step="1" min="0"')
        + _form_buttons(state)
        + "</form>"
        + render_table(state, page)
        + "</section>"
    )


def render_supplier_form(state: ControllerState, page: str) -> str:
    return (
        '<section class="panel"><h2>Suppliers</h2>'
        + _form_open(state, page)
        + _text_input(state, "name", "Supplier Name", "supplier-name")
        + _text_input(state, "contact", "Contact", "supplier-contact")
        + _form_buttons(state)
        + "</form>"
        + render_table(state, page)
        + "</section>"
    )


def render_order_form(state: ControllerState, suppliers: ControllerState, statuses: Sequence[str], page: str) -> str:
    items = list(state.form.get("items") or [])
    # One spare row so another line item can be added.
    if not items or any(items[-1].values()):
        items.append({})
    rows = []
    for index, item in enumerate(items):
        rows.append(
            '<div class="item-row">'
            + _select("productId", state.options, item.get("productId", ""), "Select product", "product-id")
            + f' <input class="qty" name="qty" type="number" step="any" min="0" placeholder="Qty" value="{_e(item.get("qty", ""))}">'
            + f' <input class="price" name="price" type="number" step="any" min="0" placeholder="Price" value="{_e(item.get("price", ""))}">'
            + _field_error(state, f"items.{index}.productId")
            + _field_error(state, f"items.{index}.qty")
            + _field_error(state, f"items.{index}.price")
            + "</div>"
        )
    status_options = [SelectOption(value=s, label=s) for s in statuses]
    return (
        '<section class="panel"><h2>Orders</h2>'
        + _form_open(state, page)
        + "".join(rows)
        + _field_error(state, "items")
        + '<label for="order-supplierId">Supplier '
        + _select("supplierId", supplier_options(suppliers.records), state.form.get("supplierId", ""), "Select supplier", input_id="order-supplierId")
        + _field_error(state, "supplierId")
        + "</label>"
        + '<label for="order-status">Status '
        + _select("status", status_options, state.form.get("status", ""), "Select status", input_id="order-status")
        + _field_error(state, "status")
        + "</label>"
        + _form_buttons(state)
        + "</form>"
        + render_table(state, page)
        + "</section>"
    )


# --------------------------------------------------------------------------- #
# Tables
# --------------------------------------------------------------------------- #
def _row_action(state: ControllerState, action: str, label: str, record_id: Optional[str], page: str) -> str:
    segment = ROUTE_SEGMENTS[state.kind]
    disabled = "" if record_id is not None else " disabled"
    return (
        f'<form class="inline" method="post" action="/{segment}/{action}">'
        + _hidden("id", record_id or "")
        + _hidden("page", page)
        + f'<button type="submit" class="{action}-{state.kind.value}"{disabled}>{label}</button></form>'
    )


def _confirm_box(state: ControllerState, page: str) -> str:
    if state.pending_delete is None:
        return ""
    segment = ROUTE_SEGMENTS[state.kind]
    return (
        '<div class="confirm" role="alertdialog">'
        f"Delete this {_e(state.kind.value)}? "
        f'<form class="inline" method="post" action="/{segment}/delete">'
        + _hidden("id", state.pending_delete)
        + _hidden("confirmed", "yes")
        + _hidden("page", page)
        + '<button type="submit">Delete</button></form> '
        f'<form class="inline" method="post" action="/{segment}/dismiss">'
        + _hidden("page", page)
        + '<button type="submit">Keep</button></form></div>'
    )


def render_table(state: ControllerState, page: str) -> str:
    columns = columns_for(state.kind)
    head = "".join(f"<th>{_e(c)}</th>" for c in columns) + "<th>Actions</th>"
    body: List[str] = []
    if state.list_error:
        body.append(f'<tr><td colspan="{len(columns) + 1}">{_e(state.list_error)}</td></tr>')
    else:
        for row in state.rows:
            cells = "".join(f"<td>{_e(c)}</td>" for c in row.cells)
            actions = (
                _row_action(state, "edit", "Edit", row.record_id, page)
                + " "
                + _row_action(state, "delete", "Delete", row.record_id, page)
            )
            body.append(f"<tr>{cells}<td>{actions}</td></tr>")
    return (
        _confirm_box(state, page)
        + f'<table id="{state.kind.value}-table"><thead><tr>{head}</tr></thead>'
        + f"<tbody>{''.join(body)}</tbody></table>"
    )


# --------------------------------------------------------------------------- #
# Page
# --------------------------------------------------------------------------- #
def render_notices(notices: Iterable[Notice]) -> str:
    return "".join(
        f'<div class="notice {_e(n.level)}" role="alert">{_e(n.message)}</div>' for n in notices
    )


def _scroll_script(session: ConsoleSession, forms: Sequence[str]) -> str:
    for form in forms:
        state = session.state_for(_FORM_KINDS[form])
        if state.scroll_to:
            target = json.dumps(state.scroll_to)
            state.scroll_to = None
            return (
                "<script>document.addEventListener('DOMContentLoaded', function () {"
                f"var el = document.getElementById({target});"
                "if (el) { el.scrollIntoView({ behavior: 'smooth' }); }"
                "});</script>"
            )
    return ""


def render_page(session: ConsoleSession, page: str, title: str, order_statuses: Sequence[str]) -> str:
    """Render a full console page and drain the session's pending notices."""
    forms = PAGE_FORMS[page]
    sections = []
    for form in forms:
        if form == PRODUCT_FORM:
            sections.append(render_product_form(session.products, page))
        elif form == SUPPLIER_FORM:
            sections.append(render_supplier_form(session.suppliers, page))
        elif form == ORDER_FORM:
            sections.append(render_order_form(session.orders, session.suppliers, order_statuses, page))

    nav = "".join(
        f'<a href="{href}">{_e(text)}</a>'
        for href, text in (("/", "Dashboard"), ("/products", "Products"), ("/suppliers", "Suppliers"), ("/orders", "Orders"))
    )
    return (
        '<!doctype html>\n<html lang="en"><head><meta charset="utf-8">'
        f"<title>{_e(title)}</title><style>{_STYLE}</style></head><body>"
        f"<nav>{nav}</nav>"
        '<div class="container">'
        f"<h1>{_e(title)}</h1>"
        + render_notices(session.notifier.drain())
        + "".join(sections)
        + "</div>"
        + _scroll_script(session, forms)
        + "</body></html>"
    )
