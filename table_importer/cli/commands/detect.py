from pathlib import Path

import click
from rich.console import Console

from ...config import ConfigLoader
from ...domain.services.delimiter_detector import guess_delimiter
from ...exceptions import TableImportError
from ...infrastructure.repositories.source_repository import SourceRepository

console = Console()

DELIMITER_NAMES = {"|": "pipe", "\t": "tab", ",": "comma"}


@click.command()
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to a table_importer.toml config file (default: ./table_importer.toml)",
)
def detect_command(path: Path, config_file: Path | None) -> None:
    """Print the field delimiter guessed from the first line of PATH."""
    config = ConfigLoader.load(config_file=config_file)
    try:
        content = SourceRepository().read_text(path, config.text_encoding)
    except TableImportError as exc:
        raise click.ClickException(str(exc)) from exc
    delimiter = guess_delimiter(content)
    console.print(f"{DELIMITER_NAMES[delimiter]} ({delimiter!r})")
