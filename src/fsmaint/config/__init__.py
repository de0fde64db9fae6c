"""Configuration module for fsmaint."""

from .manager import ConfigManager
from .models import FsMaintConfig, LoggingSettings, PathSettings

__all__ = [
    "FsMaintConfig",
    "PathSettings",
    "LoggingSettings",
    "ConfigManager",
]
