"""Utility functions and helpers for ObjTasks."""

from .selectors import CssSelectorBuilder, Selector, css_selector_builder
from .serialization import from_json, get_json

__all__ = ["CssSelectorBuilder", "Selector", "css_selector_builder", "from_json", "get_json"]
