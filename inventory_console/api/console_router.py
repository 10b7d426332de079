"""
Console pages and form actions.

Every route renders a full HTML page for the caller's session. Form actions
run one controller operation, then render the page they were posted from.
"""

import logging
from itertools import zip_longest
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse

from inventory_console.api.dependencies import get_backend, get_config, get_error_handler, get_session_store
from inventory_console.api.pages import PAGE_FORMS, ROUTE_SEGMENTS, render_page
from inventory_console.console.bootstrap import bootstrap_page, build_controllers
from inventory_console.console.state_manager import ConsoleSession, SessionStore
from inventory_console.error_handler import ErrorHandler
from inventory_console.integrations.contracts.inventory import InventoryBackend, ResourceKind
from inventory_console.utils.config_loader import ConsoleConfig

logger = logging.getLogger(__name__)

api = APIRouter()

SESSION_COOKIE = "console_session"
ACTIONS = {"submit", "edit", "cancel", "delete", "dismiss"}

_SEGMENT_KINDS = {segment: kind for kind, segment in ROUTE_SEGMENTS.items()}


def get_console_session(request: Request, store: SessionStore = Depends(get_session_store)) -> ConsoleSession:
    """Dependency resolving the caller's session from the cookie (new one if unknown)."""
    return store.get_or_create(request.cookies.get(SESSION_COOKIE))


def _resource_kind(segment: str) -> ResourceKind:
    kind = _SEGMENT_KINDS.get(segment)
    if kind is None:
        raise HTTPException(status_code=404, detail=f"Unknown resource: {segment}")
    return kind


def _return_page(value: Optional[str], kind: ResourceKind) -> str:
    if value in PAGE_FORMS:
        return value
    return f"/{ROUTE_SEGMENTS[kind]}"


def _form_payload(kind: ResourceKind, form) -> Dict[str, Any]:
    """Turn the posted form into the payload the controller validates."""
    if kind == ResourceKind.ORDER:
        rows = zip_longest(form.getlist("productId"), form.getlist("qty"), form.getlist("price"), fillvalue="")
        return {
            "items": [{"productId": p, "qty": q, "price": pr} for p, q, pr in rows],
            "supplierId": form.get("supplierId", ""),
            "status": form.get("status", ""),
        }
    return {key: form.get(key) for key in form.keys() if key not in {"page", "id", "confirmed"}}


async def _render(
    page: str,
    session: ConsoleSession,
    backend: InventoryBackend,
    cfg: ConsoleConfig,
    errors: ErrorHandler,
    refresh: bool,
) -> HTMLResponse:
    controllers = build_controllers(session, backend, errors)
    await bootstrap_page(PAGE_FORMS[page], controllers, refresh=refresh)
    response = HTMLResponse(render_page(session, page, cfg.ui.title, cfg.ui.order_statuses))
    response.set_cookie(SESSION_COOKIE, session.session_id, httponly=True, samesite="lax")
    return response


# --------------------------------------------------------------------------- #
# Pages
# --------------------------------------------------------------------------- #
@api.get("/", response_class=HTMLResponse, tags=["Console"])
@api.get("/products", response_class=HTMLResponse, tags=["Console"])
@api.get("/suppliers", response_class=HTMLResponse, tags=["Console"])
@api.get("/orders", response_class=HTMLResponse, tags=["Console"])
async def console_page(
    request: Request,
    session: ConsoleSession = Depends(get_console_session),
    backend: InventoryBackend = Depends(get_backend),
    cfg: ConsoleConfig = Depends(get_config),
    errors: ErrorHandler = Depends(get_error_handler),
):
    # Loading a page refreshes every list on it.
    page = request.url.path if request.url.path in PAGE_FORMS else "/"
    return await _render(page, session, backend, cfg, errors, refresh=True)


# --------------------------------------------------------------------------- #
# Form actions
# --------------------------------------------------------------------------- #
@api.post("/{segment}/{action}", response_class=HTMLResponse, tags=["Console"])
async def console_action(
    segment: str,
    action: str,
    request: Request,
    session: ConsoleSession = Depends(get_console_session),
    backend: InventoryBackend = Depends(get_backend),
    cfg: ConsoleConfig = Depends(get_config),
    errors: ErrorHandler = Depends(get_error_handler),
):
    kind = _resource_kind(segment)
    if action not in ACTIONS:
        raise HTTPException(status_code=404, detail=f"Unknown action: {action}")

    form = await request.form()
    page = _return_page(form.get("page"), kind)
    controller = build_controllers(session, backend, errors)[kind]

    try:
        if action == "submit":
            await controller.submit(_form_payload(kind, form))
        elif action == "edit":
            await controller.begin_edit(form.get("id"))
        elif action == "cancel":
            controller.cancel_edit()
        elif action == "delete":
            confirmed = (form.get("confirmed") or "").lower() in ("1", "true", "yes")
            await controller.delete(form.get("id"), confirmed=confirmed)
        elif action == "dismiss":
            controller.dismiss_delete()
    except Exception as e:
        payload = errors.handle_exception(e, context={"resource": segment, "action": action})
        session.notifier.error(payload["message"])

    return await _render(page, session, backend, cfg, errors, refresh=False)
