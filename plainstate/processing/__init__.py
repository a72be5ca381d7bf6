# plainstate/processing/__init__.py

"""
Processing Package

Deep unwrap traversal, the batch unwrap stage, and transfer of plain
snapshots to isolated worker processes.
"""

from .traversal import (
    DEFAULT_STRATEGY,
    ShapeMismatchError,
    UnwrapStrategy,
    compose_strategies,
    deep_unwrap,
    is_plain,
    to_plain_record,
)
from .transfer import IsolatedContext
from .unwrap import Unwrapper, main as unwrap_main

__all__ = [
    "DEFAULT_STRATEGY",
    "ShapeMismatchError",
    "UnwrapStrategy",
    "compose_strategies",
    "deep_unwrap",
    "is_plain",
    "to_plain_record",
    "IsolatedContext",
    "Unwrapper",
    "unwrap_main",
]
