"""Core data models and configuration for ObjTasks."""

from .models import Rectangle, rectangle
from .config import (
    LoggingConfig,
    ObjTasksConfig,
    SerializationConfig,
    create_default_config,
    load_config,
)
from .logs import setup_logging

__all__ = [
    "Rectangle",
    "rectangle",
    "LoggingConfig",
    "ObjTasksConfig",
    "SerializationConfig",
    "create_default_config",
    "load_config",
    "setup_logging",
]
