"""Port interfaces for external dependencies.

This module defines abstract interfaces (protocols) that external
adapters must implement. This enables dependency injection and testing.
"""

from .repositories import SourceRepositoryPort
from .services import BinaryTableReaderPort, DelimitedTextTokenizerPort, LoggerPort

__all__ = [
    "BinaryTableReaderPort",
    "DelimitedTextTokenizerPort",
    "LoggerPort",
    "SourceRepositoryPort",
]
