"""Convenience entry point wiring the default adapters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .infrastructure.container import DependencyContainer

if TYPE_CHECKING:
    from .application.models import ImportOptions, TableSource
    from .application.ports.services import LoggerPort
    from .config import ImporterConfig
    from .domain.entities.data_table import DataTable


def import_table(
    source: TableSource,
    options: ImportOptions | None = None,
    *,
    logger: LoggerPort | None = None,
    config: ImporterConfig | None = None,
) -> DataTable:
    """Import ``source`` (a path or a ``TableBuffer``) into a ``DataTable``.

    Without an explicit logger, messages are discarded.

    Raises:
        DataSourceNotFoundError: If the file does not exist
        DataParseError: If the source cannot be tokenized or holds no records
    """
    container = DependencyContainer(use_null_logger=logger is None, config=config)
    if logger is not None:
        container.override_logger(logger)
    return container.create_table_import_use_case().import_table(source, options)
