"""
Astral Crisis Configuration Module

Provides environment-based settings and structured logging setup.
"""

from astral_crisis.config.settings import DetectionSettings, Settings, get_settings
from astral_crisis.config.logging_config import configure_logging, get_logger

__all__ = [
    "DetectionSettings",
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
]
