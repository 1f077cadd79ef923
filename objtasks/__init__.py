"""ObjTasks - Object, JSON and CSS selector exercise utilities.

Modules:
    core        - Data models, configuration and logging setup
    utils       - Selector builder and JSON helpers
"""

__version__ = "0.1.0"
__author__ = "ObjTasks Team"

from .core.config import ObjTasksConfig, load_config
from .core.models import Rectangle, rectangle
from .utils.selectors import (
    Combinator,
    CssSelectorBuilder,
    DuplicateError,
    OrderViolation,
    SelectorError,
    css_selector_builder,
)
from .utils.serialization import SerializationError, from_json, get_json

__all__ = [
    # Config
    "ObjTasksConfig",
    "load_config",
    # Models
    "Rectangle",
    "rectangle",
    # Selectors
    "Combinator",
    "CssSelectorBuilder",
    "css_selector_builder",
    "SelectorError",
    "DuplicateError",
    "OrderViolation",
    # Serialization
    "get_json",
    "from_json",
    "SerializationError",
]
