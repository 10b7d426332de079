"""Error handling helpers for console operations."""
from typing import Any, Dict, Optional
import logging

from inventory_console.console.validation import FormValidationError
from inventory_console.integrations.clients.real_http.inventory_backend import (
    BackendHTTPError,
    BackendTransportError,
)
from inventory_console.integrations.policy.response_wrappers import IntegrationResponseError

logger = logging.getLogger(__name__)


class ErrorHandler:
    def describe(self, exc: Exception) -> str:
        """Short user-facing text for a failure."""
        if isinstance(exc, FormValidationError):
            return exc.message
        if isinstance(exc, BackendHTTPError):
            return str(exc)
        if isinstance(exc, BackendTransportError):
            return str(exc)
        if isinstance(exc, IntegrationResponseError):
            return f"Unexpected response from inventory backend: {exc}"
        return str(exc) or exc.__class__.__name__

    def report(self, exc: Exception, action: str, notifier, context: Optional[Dict[str, Any]] = None) -> str:
        """Log a failed user action and queue the blocking notice for it."""
        message = f"{action}: {self.describe(exc)}"
        logger.error("%s (context=%s)", message, context or {})
        notifier.error(message)
        return message

    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception in console request: %s", exc, exc_info=True)
        return {
            "message": "An internal error occurred while processing your request. Please try again.",
            "metadata": {"error": str(exc), "context": context or {}},
        }
