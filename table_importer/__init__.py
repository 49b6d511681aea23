"""Table importer package.

Imports delimited text files and binary tables (dBase, SAS) into in-memory
record tables, deciding per field whether values are numbers or strings.

Features:
- Delimiter detection (pipe, tab, comma)
- ``NAME:num`` / ``NAME:str`` / ``+NAME`` type hints in headers
- Type inference from the first record and a single in-place conversion pass
- dBase and SAS tables read with their native types
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("table-importer")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from table_importer.api import import_table
from table_importer.application.models import ImportOptions, TableBuffer
from table_importer.domain.entities import DataTable, FieldType
from table_importer.domain.services import (
    apply_conversion_plan,
    build_conversion_plan,
    guess_delimiter,
    parse_field_headers,
)

__all__ = [
    "__version__",
    # Entry point
    "import_table",
    "ImportOptions",
    "TableBuffer",
    # Tables and types
    "DataTable",
    "FieldType",
    # Core steps
    "guess_delimiter",
    "parse_field_headers",
    "build_conversion_plan",
    "apply_conversion_plan",
]
