"""
Configuration loader for the inventory console (backend, UI, logging).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class BackendConfig(BaseModel):
    base_url: str = ""
    timeout_seconds: float = Field(default=15.0, gt=0, le=300)
    mode: Literal["auto", "real", "mock"] = "auto"
    mock_supports_get_by_id: bool = False


class UIConfig(BaseModel):
    title: str = "Inventory Console"
    # Offered in the order form only; statuses are not validated against it.
    order_statuses: List[str] = Field(
        default_factory=lambda: ["pending", "processing", "shipped", "delivered", "cancelled"]
    )


class LoggingConfig(BaseModel):
    level: str = "INFO"


class ConsoleConfig(BaseModel):
    backend: BackendConfig = Field(default_factory=BackendConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def use_real_backend(self) -> bool:
        if self.backend.mode == "real":
            return True
        if self.backend.mode == "mock":
            return False
        return bool(self.backend.base_url)


def _apply_env_overrides(data: dict) -> dict:
    backend = dict(data.get("backend") or {})
    if os.getenv("INVENTORY_API_BASE"):
        backend["base_url"] = os.environ["INVENTORY_API_BASE"]
    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        backend["mode"] = "real"
    elif mode in {"mock", "test"}:
        backend["mode"] = "mock"
    data["backend"] = backend

    if os.getenv("LOG_LEVEL"):
        data["logging"] = {**(data.get("logging") or {}), "level": os.environ["LOG_LEVEL"]}
    return data


def load_console_config(config_path: Optional[Path] = None) -> ConsoleConfig:
    """
    Load and validate console configuration from a YAML file, then apply env overrides.

    Args:
        config_path: Path to config file. Defaults to config/console_config.yml

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "console_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Console config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = ConsoleConfig(**_apply_env_overrides(data))
        logger.info("Successfully loaded console config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Console config validation failed: %s", e)
        raise
