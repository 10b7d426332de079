"""
Session and per-controller state for the console
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from inventory_console.database.resource_cache import ResourceCache
from inventory_console.integrations.contracts.inventory import ResourceKind


@dataclass
class Notice:
    level: str  # "success" | "error"
    message: str


class Notifier:
    """Collects blocking user notifications until the next page render drains them."""

    def __init__(self) -> None:
        self._notices: List[Notice] = []

    def success(self, message: str) -> None:
        self._notices.append(Notice("success", message))

    def error(self, message: str) -> None:
        self._notices.append(Notice("error", message))

    def peek(self) -> List[Notice]:
        return list(self._notices)

    def drain(self) -> List[Notice]:
        notices, self._notices = self._notices, []
        return notices


@dataclass
class ControllerState:
    """Everything one resource controller remembers between requests."""

    kind: ResourceKind
    cache: Optional[ResourceCache] = None
    editing_id: Optional[str] = None
    form: Dict[str, Any] = field(default_factory=dict)
    field_errors: Dict[str, str] = field(default_factory=dict)
    records: List[Dict[str, Any]] = field(default_factory=list)
    rows: List[Any] = field(default_factory=list)
    options: List[Any] = field(default_factory=list)
    options_loaded: bool = False
    list_error: Optional[str] = None
    loaded: bool = False
    pending_delete: Optional[str] = None
    scroll_to: Optional[str] = None

    def __post_init__(self) -> None:
        if self.cache is None:
            self.cache = ResourceCache(name=self.kind.value)

    @property
    def form_id(self) -> str:
        return f"{self.kind.value}-form"

    @property
    def submit_label(self) -> str:
        verb = "Save" if self.editing_id else "Add"
        return f"{verb} {self.kind.label}"

    def reset_form(self) -> None:
        self.form = {}
        self.field_errors = {}
        self.editing_id = None


@dataclass
class ConsoleSession:
    session_id: str
    products: ControllerState = field(default_factory=lambda: ControllerState(ResourceKind.PRODUCT))
    suppliers: ControllerState = field(default_factory=lambda: ControllerState(ResourceKind.SUPPLIER))
    orders: ControllerState = field(default_factory=lambda: ControllerState(ResourceKind.ORDER))
    notifier: Notifier = field(default_factory=Notifier)
    created_at: str = field(default_factory=lambda: datetime.utcnow().isoformat())

    def state_for(self, kind: ResourceKind) -> ControllerState:
        return {
            ResourceKind.PRODUCT: self.products,
            ResourceKind.SUPPLIER: self.suppliers,
            ResourceKind.ORDER: self.orders,
        }[kind]


class SessionStore:
    """In-memory console sessions keyed by cookie value; cleared on restart."""

    def __init__(self) -> None:
        self._sessions: Dict[str, ConsoleSession] = {}

    def create_session(self) -> ConsoleSession:
        session = ConsoleSession(session_id=str(uuid.uuid4()))
        self._sessions[session.session_id] = session
        return session

    def get_session(self, session_id: Optional[str]) -> Optional[ConsoleSession]:
        if not session_id:
            return None
        return self._sessions.get(session_id)

    def get_or_create(self, session_id: Optional[str]) -> ConsoleSession:
        return self.get_session(session_id) or self.create_session()

    def __len__(self) -> int:
        return len(self._sessions)
