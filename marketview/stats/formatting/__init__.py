"""Display formatting."""

from .display import DisplayFormatter

__all__ = ["DisplayFormatter"]
