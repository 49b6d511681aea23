"""Import command - Load a delimited text or binary table and summarize it.

This module is a thin adapter between Click and the application layer's
TableImportUseCase: it turns CLI arguments into ImportOptions, runs the
import and hands the resulting table to the summary presenter.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import cast

import click
from rich.console import Console

from ...application.models import ImportOptions
from ...config import ConfigLoader
from ...domain.services.record_converter import ValueConversionError
from ...exceptions import TableImportError
from ...infrastructure.container import DependencyContainer
from ..presenters.table_summary import TableSummaryPresenter

console = Console()
log_console = Console(stderr=True)


def _split_field_types(values: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(
        part.strip() for value in values for part in value.split(",") if part.strip()
    )


@dataclass(frozen=True)
class ImportCommandOptions:
    config_file: Path | None
    field_types: tuple[str, ...]
    encoding: str | None
    strict_numbers: bool | None
    preview_rows: int | None
    verbose: int

    @classmethod
    def from_kwargs(cls, options: dict[str, object]) -> ImportCommandOptions:
        return cls(
            config_file=cast("Path | None", options.get("config_file")),
            field_types=_split_field_types(
                cast("tuple[str, ...]", options.get("field_types") or ())
            ),
            encoding=cast("str | None", options.get("encoding")),
            strict_numbers=cast("bool | None", options.get("strict_numbers")),
            preview_rows=cast("int | None", options.get("preview_rows")),
            verbose=cast("int", options.get("verbose", 0)),
        )


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a table_importer.toml config file (default: ./table_importer.toml)",
)
@click.option(
    "--field-types",
    "field_types",
    multiple=True,
    help="Type hints such as 'FIPS:str,POP:num'; overrides hints in the header",
)
@click.option(
    "--encoding",
    help="Text encoding for .dbf/.sas7bdat/.xpt string values",
)
@click.option(
    "--strict/--no-strict",
    "strict_numbers",
    default=None,
    help="Fail on values that cannot be converted instead of storing NaN",
)
@click.option(
    "--preview-rows",
    type=click.IntRange(min=0),
    help="Number of records to show in the preview table",
)
@click.option(
    "-v", "--verbose", count=True, help="Increase verbosity level (e.g., -v, -vv)"
)
def import_command(path: Path, **options: object) -> None:
    """Import a table and print a summary of its fields and values.

    Delimited text files have their delimiter guessed from the first line
    (pipe, then tab, then comma) and their numeric-looking fields converted
    to numbers. Header names may carry hints such as ``POP:num`` or ``+AREA``.

    Examples:

    \b
        # Import a CSV and show a preview
        table-importer import counties.csv

    \b
        # Keep FIPS codes as text
        table-importer import counties.csv --field-types FIPS:str

    \b
        # Fail on unparseable numbers
        table-importer import counties.csv --field-types POP:num --strict
    """
    command_options = ImportCommandOptions.from_kwargs(dict(options))
    runtime_config = ConfigLoader.load(config_file=command_options.config_file)

    container = DependencyContainer(
        verbose=command_options.verbose, console=log_console, config=runtime_config
    )
    use_case = container.create_table_import_use_case()
    request = ImportOptions(
        encoding=command_options.encoding,
        field_types=command_options.field_types,
        strict_numbers=command_options.strict_numbers,
    )

    try:
        table = use_case.import_table(path, request)
    except (TableImportError, ValueConversionError) as exc:
        cause = exc.__cause__
        if cause is not None and command_options.verbose:
            container.create_logger().error(str(cause))
        raise click.ClickException(str(exc)) from exc

    preview_rows = (
        runtime_config.preview_rows
        if command_options.preview_rows is None
        else command_options.preview_rows
    )
    TableSummaryPresenter(console, preview_rows=preview_rows).present(table)
    container.create_logger().log_final_stats()
