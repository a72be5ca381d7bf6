# plainstate/__init__.py

"""
plainstate - Source Package

Strips reactive wrappers (refs, tracked proxies, readonly proxies) from nested
state so it can be serialized or handed to an isolated worker process.
"""

__version__ = "1.0.0"

from .processing import deep_unwrap, to_plain_record, is_plain, ShapeMismatchError, UnwrapStrategy
from .utils import logging, data_handling, file_operations

__all__ = ['deep_unwrap', 'to_plain_record', 'is_plain', 'ShapeMismatchError', 'UnwrapStrategy', 'logging', 'data_handling', 'file_operations']
