"""Adapters — bindings for external tools.

Public re-exports for convenient access.
"""

from cenv.adapters.base import Adapter, ExecutionContext
from cenv.adapters.mock import MockAdapter

__all__ = [
    "Adapter",
    "ExecutionContext",
    "MockAdapter",
]
