"""Infrastructure layer for the table importer.

This layer contains adapters for file access, tokenizing, binary table
readers and logging. It implements the ports defined in the application layer.
"""

from .container import DependencyContainer, create_default_container

__all__ = [
    "DependencyContainer",
    "create_default_container",
]
