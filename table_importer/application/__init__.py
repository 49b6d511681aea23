"""Application layer for the table importer.

Use cases orchestrate the domain services through ports; concrete adapters
are wired in ``table_importer.infrastructure.container``.
"""

from .models import ImportOptions, TableBuffer, TokenizedText
from .table_import_use_case import TableImportDependencies, TableImportUseCase

__all__ = [
    "ImportOptions",
    "TableBuffer",
    "TableImportDependencies",
    "TableImportUseCase",
    "TokenizedText",
]
