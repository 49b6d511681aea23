import click

from .commands.detect import detect_command
from .commands.import_command import import_command


@click.group()
def app() -> None:
    pass


app.add_command(import_command, name="import")
app.add_command(detect_command, name="detect")
__all__ = ["app"]
