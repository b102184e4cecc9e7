"""
Core - Settings and logging setup.
"""

from .config import DEFAULT_EXCEPTIONS, Settings, settings
from .log_config import configure_logging

__all__ = [
    "DEFAULT_EXCEPTIONS",
    "Settings",
    "settings",
    "configure_logging",
]
