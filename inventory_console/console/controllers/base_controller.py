"""Shared list / submit / edit / delete behaviour for the resource controllers.

Controllers are built per request around the session's ControllerState, so
edit mode and caches belong to one console session and nothing is global.
Every failure is caught here, logged and turned into a notice; none is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from inventory_console.console.rendering import TableRow, render_rows
from inventory_console.console.state_manager import ControllerState, Notifier
from inventory_console.console.validation import FormValidationError
from inventory_console.database.resource_cache import cache_key
from inventory_console.error_handler import ErrorHandler
from inventory_console.integrations.clients.real_http.inventory_backend import BackendError, BackendHTTPError
from inventory_console.integrations.contracts.inventory import InventoryBackend, ResourceKind
from inventory_console.integrations.policy.response_wrappers import IntegrationResponseError, resolve_id

logger = logging.getLogger(__name__)


class ResourceController:
    kind: ResourceKind

    def __init__(
        self,
        backend: InventoryBackend,
        state: ControllerState,
        notifier: Notifier,
        error_handler: Optional[ErrorHandler] = None,
    ) -> None:
        self.backend = backend
        self.state = state
        self.notifier = notifier
        self.errors = error_handler or ErrorHandler()

    # ------------------------------------------------------------------ #
    # Resource specifics
    # ------------------------------------------------------------------ #
    def validate(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def form_values(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError

    def echo_form(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Submitted values to show again if the submission is rejected."""
        return {k: ("" if v is None else str(v).strip()) for k, v in payload.items()}

    def created_message(self, created: Any) -> str:
        return f"{self.kind.label} added successfully!"

    @property
    def _label(self) -> str:
        return self.kind.label.lower()

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #
    async def list(self) -> List[TableRow]:
        """Fetch the collection, repopulate the cache and re-render the rows."""
        state = self.state
        try:
            records = await self.backend.list_resource(self.kind)
            rows = render_rows(self.kind, records)
        except (BackendError, IntegrationResponseError) as e:
            logger.error("Failed to load %s: %s", self.kind.plural_label.lower(), e)
            state.records = []
            state.rows = []
            state.list_error = f"Error loading {self.kind.plural_label.lower()}"
            state.loaded = True
            return []

        state.cache.replace_all(records)
        state.records = records
        state.rows = rows
        state.list_error = None
        state.loaded = True
        return rows

    async def submit(self, payload: Mapping[str, Any]) -> bool:
        """Create, or update when an edit is in progress. Returns True on success."""
        state = self.state
        state.form = self.echo_form(payload)
        try:
            body = self.validate(payload)
        except FormValidationError as e:
            state.field_errors = dict(e.field_errors)
            self.notifier.error(e.message)
            return False
        state.field_errors = {}

        editing_id = state.editing_id
        try:
            if editing_id:
                saved = await self.backend.update_resource(self.kind, editing_id, body)
            else:
                saved = await self.backend.create_resource(self.kind, body)
        except BackendError as e:
            verb = "update" if editing_id else "add"
            self.errors.report(e, f"Failed to {verb} {self._label}", self.notifier, {"id": editing_id})
            return False

        if isinstance(saved, dict):
            state.cache.put(saved)
        state.reset_form()
        state.scroll_to = None
        if editing_id:
            self.notifier.success(f"{self.kind.label} updated successfully!")
        else:
            self.notifier.success(self.created_message(saved))
        await self.list()
        return True

    async def begin_edit(self, record_id: Any) -> bool:
        """Fill the form from the cache, falling back to a single-record fetch."""
        state = self.state
        key = cache_key(record_id)
        if key is None:
            self.notifier.error(f"Cannot determine {self._label} id to edit")
            return False

        record = state.cache.get(key)
        if record is None:
            try:
                record = await self.backend.get_resource(self.kind, key)
            except BackendHTTPError as e:
                if e.is_not_found:
                    logger.error("Edit %s %s failed: %s", self._label, key, e)
                    self.notifier.error(
                        f"{self.kind.label} not retrievable by id from server. "
                        f"Refresh the {self.kind.plural_label} list and try editing again."
                    )
                    return False
                self.errors.report(e, f"Failed to load {self._label} for edit", self.notifier, {"id": key})
                return False
            except BackendError as e:
                self.errors.report(e, f"Failed to load {self._label} for edit", self.notifier, {"id": key})
                return False
            if not isinstance(record, dict):
                self.notifier.error(f"{self.kind.label} data not available")
                return False

        state.form = self.form_values(record)
        state.field_errors = {}
        state.editing_id = key
        state.pending_delete = None
        state.scroll_to = state.form_id
        return True

    def cancel_edit(self) -> None:
        self.state.reset_form()
        self.state.pending_delete = None
        self.state.scroll_to = None

    def dismiss_delete(self) -> None:
        """Answer "no" to the delete prompt; an edit in progress is kept."""
        self.state.pending_delete = None

    async def delete(self, record_id: Any, confirmed: bool = False) -> bool:
        """Delete after confirmation. Without an id nothing is sent."""
        state = self.state
        key = cache_key(record_id)
        if key is None:
            self.notifier.error(f"Cannot determine {self._label} id to delete")
            return False
        if not confirmed:
            state.pending_delete = key
            return False

        state.pending_delete = None
        try:
            await self.backend.delete_resource(self.kind, key)
        except BackendError as e:
            self.errors.report(e, f"Failed to delete {self._label}", self.notifier, {"id": key})
            return False

        state.cache.remove(key)
        if state.editing_id == key:
            state.reset_form()
        await self.list()
        return True

    def confirmation_prompt(self) -> Optional[str]:
        if self.state.pending_delete is None:
            return None
        return f"Delete this {self._label}?"

    @staticmethod
    def record_id(record: Mapping[str, Any]) -> Optional[str]:
        return cache_key(resolve_id(record))
