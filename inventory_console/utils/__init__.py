"""
Utility modules for the inventory console
"""
from .config_loader import ConsoleConfig, load_console_config

__all__ = [
    'ConsoleConfig',
    'load_console_config',
]
