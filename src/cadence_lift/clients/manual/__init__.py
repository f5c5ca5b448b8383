"""Interactive profile setup."""

from .client import ManualInputClient

__all__ = ["ManualInputClient"]
