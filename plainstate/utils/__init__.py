# plainstate/utils/__init__.py

"""
Utilities Package

Provides shared utilities for logging, data handling, and file operations.
"""

from .logging import Logger
from .data_handling import DataHandler
from .file_operations import FileOperations

__all__ = ["Logger", "DataHandler", "FileOperations"]
