"""Utility functions."""

from .debounce import Debouncer
from .http import HTTPClient

__all__ = ["Debouncer", "HTTPClient"]
